# store.py
# MonthStore: owner of the month-key -> MonthlyBudget mapping and the month selection

import logging
from datetime import date
from typing import Dict, List, Optional

from config import DEFAULT_CATEGORIES, INITIAL_ITEMS
from helpers import compute_alerts, current_month_key, is_valid_month_key, shift_month_key, year_of
from models import Alert, BudgetItem, InvestmentDetails, MonthlyBudget, SalaryDetails

logger = logging.getLogger(__name__)

EDITABLE_ITEM_FIELDS = ("budget", "actual", "name")


class MonthStore:
    """
    Holds every monthly snapshot plus the session selection (month, dismissed alerts).

    Snapshots are never changed in place: each mutation builds a new snapshot,
    replaces it by key and hands the whole mapping to storage.save_months().
    `storage` needs load_months/save_months/load_selected_month/save_selected_month.
    """

    def __init__(self, storage, initial_items: Optional[List[dict]] = None,
                 default_categories: Optional[List[str]] = None, today: Optional[date] = None):
        self.storage = storage
        self.initial_items = [BudgetItem.model_validate(i)
                              for i in (INITIAL_ITEMS if initial_items is None else initial_items)]
        self.default_categories = list(DEFAULT_CATEGORIES if default_categories is None else default_categories)
        self._months: Dict[str, MonthlyBudget] = dict(storage.load_months())
        selected = storage.load_selected_month()
        self.selected_month = selected if is_valid_month_key(selected) else current_month_key(today)
        self.dismissed = set()

    # ---------- Reads ----------
    @property
    def months(self) -> Dict[str, MonthlyBudget]:
        return dict(self._months)

    def get(self, key: str) -> Optional[MonthlyBudget]:
        return self._months.get(key)

    @property
    def current(self) -> Optional[MonthlyBudget]:
        return self._months.get(self.selected_month)

    def find_previous_month(self) -> Optional[str]:
        """Latest month with data strictly before the selected one."""
        earlier = [k for k in self._months if k < self.selected_month]
        return max(earlier) if earlier else None

    def alerts(self) -> List[Alert]:
        return compute_alerts(self.current, self.dismissed)

    # ---------- Selection ----------
    def select_month(self, key: str) -> None:
        if not is_valid_month_key(key):
            raise ValueError(f"Invalid month key: {key!r}")
        self.selected_month = key
        self.dismissed = set()
        self.storage.save_selected_month(key)

    def navigate(self, direction: int) -> str:
        self.select_month(shift_month_key(self.selected_month, direction))
        return self.selected_month

    def dismiss_alert(self, category: str) -> None:
        self.dismissed = self.dismissed | {category}

    # ---------- Month initialization ----------
    def _blank_month(self, key: str) -> MonthlyBudget:
        return MonthlyBudget(
            income=0,
            items=[i.model_copy() for i in self.initial_items],
            categories=list(self.default_categories),
            year=year_of(key),
            salary_slip=SalaryDetails(),
            investments=InvestmentDetails(),
        )

    @staticmethod
    def _carried_forward(source: MonthlyBudget, key: str) -> MonthlyBudget:
        # keep the plan, reset what was spent
        return MonthlyBudget(
            income=source.income,
            items=[i.model_copy(update={"actual": 0.0}) for i in source.items],
            categories=list(source.categories),
            year=year_of(key),
            salary_slip=source.salary_slip.model_copy(),
            investments=source.investments.model_copy(),
        )

    def init_new_month(self, copy_from: Optional[str] = None) -> MonthlyBudget:
        """
        Create the snapshot for the selected month.
        Copies forward from `copy_from` when it has data, otherwise starts blank.
        An existing snapshot at the selected key is overwritten.
        """
        key = self.selected_month
        source = self._months.get(copy_from) if copy_from else None
        if source is not None:
            snapshot = self._carried_forward(source, key)
            logger.info(f"Initialized {key} from {copy_from}")
        else:
            snapshot = self._blank_month(key)
            logger.info(f"Initialized {key} from defaults")
        self._commit(key, snapshot)
        self.dismissed = set()
        return snapshot

    # ---------- Mutations ----------
    def _commit(self, key: str, snapshot: MonthlyBudget) -> None:
        self._months = {**self._months, key: snapshot}
        self.storage.save_months(self._months)

    def update_current_month(self, **fields) -> Optional[MonthlyBudget]:
        """Shallow-merge `fields` into the selected snapshot. No-op when the month has no data."""
        current = self.current
        if current is None:
            return None
        unknown = set(fields) - set(MonthlyBudget.model_fields)
        if unknown:
            raise ValueError(f"Unknown snapshot field(s): {sorted(unknown)}")
        snapshot = MonthlyBudget.model_validate({**dict(current), **fields})
        self._commit(self.selected_month, snapshot)
        return snapshot

    def update_item(self, item_id: str, field: str, value) -> None:
        if field not in EDITABLE_ITEM_FIELDS:
            raise ValueError(f"Field {field!r} is not editable")
        current = self.current
        if current is None or not any(i.id == item_id for i in current.items):
            return
        items = [
            BudgetItem.model_validate({**dict(i), field: value}) if i.id == item_id else i
            for i in current.items
        ]
        self.update_current_month(items=items)

    def remove_item(self, item_id: str) -> None:
        current = self.current
        if current is None:
            return
        items = [i for i in current.items if i.id != item_id]
        if len(items) != len(current.items):
            self.update_current_month(items=items)

    def add_item(self, name: str, category: str, budget: float = 0.0, actual: float = 0.0) -> Optional[BudgetItem]:
        current = self.current
        if current is None:
            return None
        if category not in current.categories:
            logger.warning(f"Not adding {name!r}: unknown category {category!r}")
            return None
        item = BudgetItem(name=name, category=category, budget=budget, actual=actual)
        self.update_current_month(items=[*current.items, item])
        return item

    def add_category(self, name: str) -> None:
        current = self.current
        name = (name or "").strip()
        if current is None or not name or name in current.categories:
            return
        self.update_current_month(categories=[*current.categories, name])

    def remove_category(self, name: str) -> None:
        """Drop the category and every item filed under it, as one update."""
        current = self.current
        if current is None:
            return
        self.update_current_month(
            categories=[c for c in current.categories if c != name],
            items=[i for i in current.items if i.category != name],
        )

    def set_income(self, amount: float) -> None:
        self.update_current_month(income=amount)

    def update_salary_slip(self, details: SalaryDetails) -> None:
        self.update_current_month(salary_slip=details)

    def update_investments(self, details: InvestmentDetails) -> None:
        self.update_current_month(investments=details)

    def replace_all(self, months: Dict[str, MonthlyBudget]) -> None:
        """Swap in a whole mapping (restored backup). No merging; unreadable stored months go too."""
        self._months = dict(months)
        self.dismissed = set()
        self.storage.save_months(self._months, keep_rejected=False)
        logger.info(f"Replaced master data with {len(self._months)} month(s)")
