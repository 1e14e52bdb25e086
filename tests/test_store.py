import pytest
from datetime import date
from pydantic import ValidationError
from config import DEFAULT_CATEGORIES, INITIAL_ITEMS
from models import BudgetItem, InvestmentDetails, MonthlyBudget, SalaryDetails
from store import MonthStore


class FakeStorage:
    def __init__(self, months=None, selected=None):
        self.months = dict(months or {})
        self.selected = selected
        self.saves = 0

    def load_months(self):
        return dict(self.months)

    def save_months(self, months, keep_rejected=True):
        self.months = dict(months)
        self.saves += 1

    def load_selected_month(self):
        return self.selected

    def save_selected_month(self, key):
        self.selected = key


def _snapshot(**kwargs):
    data = {
        "income": 5000,
        "items": [
            BudgetItem(id="rent", name="Rent", category="A", budget=1000, actual=1000),
            BudgetItem(id="food", name="Food", category="A", budget=400, actual=550),
            BudgetItem(id="loan", name="Loan", category="B", budget=300, actual=300),
        ],
        "categories": ["A", "B"],
        "year": "2024",
    }
    data.update(kwargs)
    return MonthlyBudget(**data)

@pytest.fixture
def store():
    storage = FakeStorage({"2024-01": _snapshot()}, selected="2024-01")
    return MonthStore(storage)


def test_selected_month_defaults_to_today():
    s = MonthStore(FakeStorage(selected="garbage"), today=date(2024, 7, 4))
    assert s.selected_month == "2024-07"
    assert s.current is None

def test_init_blank_month(store):
    store.select_month("2024-02")
    snap = store.init_new_month()
    assert snap.income == 0
    assert snap.year == "2024"
    assert list(snap.categories) == DEFAULT_CATEGORIES
    assert [i.id for i in snap.items] == [i["id"] for i in INITIAL_ITEMS]
    assert snap.salary_slip == SalaryDetails()
    assert snap.investments == InvestmentDetails()
    assert store.storage.months["2024-02"] == snap

def test_blank_month_categories_are_independent(store):
    store.select_month("2024-02")
    store.init_new_month()
    store.add_category("Travel")
    assert "Travel" not in DEFAULT_CATEGORIES
    assert "Travel" not in store.default_categories

def test_copy_forward_resets_actuals(store):
    store.select_month("2025-01")
    source = store.get("2024-01")
    snap = store.init_new_month(copy_from=store.find_previous_month())
    assert snap.year == "2025"
    assert snap.income == source.income
    assert snap.categories == source.categories
    for old, new in zip(source.items, snap.items):
        assert (new.id, new.name, new.category, new.budget) == (old.id, old.name, old.category, old.budget)
        assert new.actual == 0
    # the source month keeps its spending
    assert store.get("2024-01").items[0].actual == 1000

def test_copy_forward_categories_do_not_leak(store):
    store.select_month("2024-02")
    store.init_new_month(copy_from="2024-01")
    store.add_category("Travel")
    assert "Travel" in store.current.categories
    assert "Travel" not in store.get("2024-01").categories

def test_copy_forward_keeps_salary_and_investments():
    src = _snapshot(
        salary_slip=SalaryDetails(basic_salary=9000, tax_rate_str="5"),
        investments=InvestmentDetails(retirement_target=1e6),
    )
    s = MonthStore(FakeStorage({"2024-01": src}, selected="2024-02"))
    snap = s.init_new_month(copy_from="2024-01")
    assert snap.salary_slip.basic_salary == 9000
    assert snap.salary_slip.tax_rate_str == "5"
    assert snap.investments.retirement_target == 1e6

def test_copy_from_unknown_month_starts_blank(store):
    store.select_month("2024-02")
    snap = store.init_new_month(copy_from="1999-01")
    assert snap.income == 0
    assert list(snap.categories) == DEFAULT_CATEGORIES

def test_find_previous_month():
    months = {"2024-01": _snapshot(), "2024-03": _snapshot()}
    s = MonthStore(FakeStorage(months, selected="2024-05"))
    assert s.find_previous_month() == "2024-03"
    s.select_month("2024-03")
    assert s.find_previous_month() == "2024-01"
    s.select_month("2024-01")
    assert s.find_previous_month() is None

def test_update_current_month_is_copy_on_write(store):
    before = store.current
    after = store.update_current_month(income=7000)
    assert after.income == 7000
    assert before.income == 5000
    assert store.current is after

def test_update_current_month_noop_without_data(store):
    store.select_month("2030-01")
    assert store.update_current_month(income=1) is None
    assert "2030-01" not in store.months

def test_update_current_month_rejects_unknown_field(store):
    with pytest.raises(ValueError):
        store.update_current_month(colour="blue")

def test_update_item(store):
    store.update_item("food", "actual", 200)
    store.update_item("rent", "name", "Apartment")
    items = {i.id: i for i in store.current.items}
    assert items["food"].actual == 200
    assert items["rent"].name == "Apartment"
    assert items["loan"].actual == 300

def test_update_unknown_item_leaves_items_unchanged(store):
    before = store.current.items
    saves = store.storage.saves
    store.update_item("nope", "budget", 1)
    assert store.current.items == before
    assert store.storage.saves == saves

def test_update_item_validation(store):
    with pytest.raises(ValueError):
        store.update_item("food", "category", "B")
    with pytest.raises(ValidationError):
        store.update_item("food", "budget", -5)

def test_remove_item(store):
    store.remove_item("food")
    assert [i.id for i in store.current.items] == ["rent", "loan"]

def test_add_item_appends_with_fresh_id(store):
    first = store.add_item("Gym", "B", budget=50)
    second = store.add_item("Gym", "B", budget=50)
    assert first.id != second.id
    assert [i.id for i in store.current.items][-2:] == [first.id, second.id]

def test_add_item_unknown_category_is_ignored(store):
    assert store.add_item("Gym", "Nope") is None
    assert len(store.current.items) == 3

def test_add_category(store):
    store.add_category("Travel")
    store.add_category("Travel")
    store.add_category("   ")
    assert store.current.categories == ("A", "B", "Travel")

def test_remove_category_cascades(store):
    store.remove_category("A")
    assert store.current.categories == ("B",)
    assert [i.id for i in store.current.items] == ["loan"]
    assert store.current.items[0].category == "B"

def test_budget_totals_match_after_cascade(store):
    store.remove_category("B")
    snap = store.current
    assert all(i.category in snap.categories for i in snap.items)
    assert sum(i.budget for i in snap.items) == 1400

def test_dismissal_resets_on_navigation(store):
    assert [a.category for a in store.alerts()] == ["A"]
    store.dismiss_alert("A")
    assert store.alerts() == []
    store.navigate(1)
    store.navigate(-1)
    assert store.selected_month == "2024-01"
    assert [a.category for a in store.alerts()] == ["A"]

def test_dismissal_resets_on_init(store):
    store.dismiss_alert("A")
    store.init_new_month(copy_from="2024-01")
    assert store.dismissed == set()

def test_navigate_persists_selection(store):
    assert store.navigate(-1) == "2023-12"
    assert store.storage.selected == "2023-12"

def test_select_invalid_month(store):
    with pytest.raises(ValueError):
        store.select_month("2024-13")

def test_salary_investment_and_income(store):
    store.set_income(123)
    store.update_salary_slip(SalaryDetails(basic_salary=10))
    store.update_investments(InvestmentDetails(general_savings=99))
    snap = store.current
    assert snap.income == 123
    assert snap.salary_slip.basic_salary == 10
    assert snap.investments.general_savings == 99

def test_replace_all(store):
    store.dismiss_alert("A")
    store.replace_all({"2023-05": _snapshot(income=1)})
    assert list(store.months) == ["2023-05"]
    assert store.current is None
    assert store.dismissed == set()
    assert list(store.storage.months) == ["2023-05"]

def test_snapshots_handed_out_are_read_only(store):
    captured = store.current
    with pytest.raises(AttributeError):
        captured.categories.append("Leaked")
    with pytest.raises(ValidationError):
        captured.income = 999
    with pytest.raises(ValidationError):
        captured.salary_slip.basic_salary = 1
    assert store.get("2024-01").categories == ("A", "B")
    assert store.get("2024-01").income == 5000
