import types
import pandas as pd
from models import BudgetItem, MonthlyBudget
from store import MonthStore
import ui.budget as budget_ui


class MemoryStorage:
    def __init__(self, months):
        self.months = months

    def load_months(self):
        return dict(self.months)

    def save_months(self, months, keep_rejected=True):
        self.months = dict(months)

    def load_selected_month(self):
        return "2024-01"

    def save_selected_month(self, key):
        pass


def _store():
    snap = MonthlyBudget(
        year="2024", categories=["A"],
        items=[BudgetItem(id="rent", name="Rent", category="A", budget=100, actual=50)],
    )
    return MonthStore(MemoryStorage({"2024-01": snap}))

def _frame(name, budget, actual):
    return pd.DataFrame([{"id": "rent", "name": name, "budget": budget, "actual": actual}]).set_index("id")


def test_blank_name_edit_is_skipped_with_warning(monkeypatch):
    warnings = []
    monkeypatch.setattr(budget_ui, "st", types.SimpleNamespace(warning=warnings.append))
    store = _store()

    changes = budget_ui._save_edits(store, _frame("Rent", 100.0, 50.0), _frame("   ", 120.0, 50.0))

    assert changes == 1
    assert warnings == ["Item name cannot be empty."]
    item = store.current.items[0]
    assert item.name == "Rent"
    assert item.budget == 120

def test_name_edit_is_stripped(monkeypatch):
    monkeypatch.setattr(budget_ui, "st", types.SimpleNamespace(warning=lambda msg: None))
    store = _store()

    assert budget_ui._save_edits(store, _frame("Rent", 100.0, 50.0), _frame(" Flat ", 100.0, 50.0)) == 1
    assert store.current.items[0].name == "Flat"
