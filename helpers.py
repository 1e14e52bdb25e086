# helpers.py
# Budget derivations: totals, overspend alerts, month-key math, salary slip, rollups

from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple
from datetime import date
import logging
import re

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta

from config import CRITICAL_RATIO, OVERTIME_DIVISOR, OVERTIME_MULTIPLIER
from models import Alert, InvestmentDetails, MonthlyBudget, SalaryDetails

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MONTH_KEY_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")

# ---------- Month keys ----------
def is_valid_month_key(key: str) -> bool:
    return isinstance(key, str) and bool(MONTH_KEY_RE.fullmatch(key))

def current_month_key(today: Optional[date] = None) -> str:
    d = today or date.today()
    return f"{d.year:04d}-{d.month:02d}"

def shift_month_key(key: str, direction: int) -> str:
    """Move a "YYYY-MM" key by `direction` months using calendar rollover."""
    year, month = (int(p) for p in key.split("-"))
    anchor = date(year, month, 1) + relativedelta(months=direction)
    return f"{anchor.year:04d}-{anchor.month:02d}"

def month_label(key: str) -> str:
    year, month = (int(p) for p in key.split("-"))
    return date(year, month, 1).strftime("%B %Y")

def year_of(key: str) -> str:
    return key.split("-")[0]

# ---------- Totals ----------
def category_totals(snapshot: MonthlyBudget, category: str) -> Tuple[float, float]:
    """Return (total_budget, total_actual) for one category."""
    items = [i for i in snapshot.items if i.category == category]
    return sum(i.budget for i in items), sum(i.actual for i in items)

def overall_totals(snapshot: Optional[MonthlyBudget]) -> Tuple[float, float]:
    if snapshot is None:
        return 0.0, 0.0
    return sum(i.budget for i in snapshot.items), sum(i.actual for i in snapshot.items)

def remaining_balance(snapshot: Optional[MonthlyBudget]) -> float:
    if snapshot is None:
        return 0.0
    return snapshot.income - overall_totals(snapshot)[1]

def compute_alerts(snapshot: Optional[MonthlyBudget], dismissed: Iterable[str] = ()) -> List[Alert]:
    """
    Overspend alerts in category-list order.
    A category alerts when actual > budget and budget > 0, unless dismissed.
    Severity is critical above CRITICAL_RATIO, warning otherwise.
    """
    if snapshot is None:
        return []
    dismissed = set(dismissed)
    alerts = []
    for category in snapshot.categories:
        total_budget, total_actual = category_totals(snapshot, category)
        ratio = total_actual / total_budget if total_budget > 0 else 0.0
        if total_actual > total_budget and total_budget > 0 and category not in dismissed:
            severity = "critical" if ratio > CRITICAL_RATIO else "warning"
            alerts.append(Alert(category=category, ratio=ratio, severity=severity))
    return alerts

# ---------- Amount entry ----------
def parse_amount(text: str) -> int:
    """Keep digits only: "Rp 1.500.000" -> 1500000. Empty input is 0."""
    digits = re.sub(r"[^0-9]", "", str(text or ""))
    return int(digits) if digits else 0

def format_amount(value: float) -> str:
    """Integer with dot thousands separators: 1500000 -> "1.500.000"."""
    return f"{int(round(value)):,}".replace(",", ".")

def validate_category_name(name: str, existing: Iterable[str]) -> Optional[str]:
    """Return a message when the name can't be added, None when it's fine."""
    name = (name or "").strip()
    if not name:
        return "Category name cannot be empty."
    if name in set(existing):
        return f"Category '{name}' already exists."
    return None

def parse_number(text: str) -> float:
    """Lenient parse for free-text numeric fields; bad input counts as 0."""
    cleaned = str(text or "").strip().replace(",", ".")
    if not cleaned:
        return 0.0
    try:
        return float(cleaned)
    except ValueError:
        logger.debug(f"Not a number: {text!r}, using 0")
        return 0.0

# ---------- Salary slip ----------
class SalarySlip(NamedTuple):
    hourly_rate: float
    overtime_pay: float
    gross: float
    bonus: float
    tax: float
    deductions: float
    take_home: float

def compute_salary_slip(details: SalaryDetails) -> SalarySlip:
    """
    Take-home pay from the salary inputs.
    gross = basic + allowances + overtime; bonus = basic * multiplier;
    tax applies to gross + bonus; other deductions come off last.
    """
    basic = details.basic_salary
    hourly = basic / OVERTIME_DIVISOR
    overtime = parse_number(details.ot_hours_str) * hourly * OVERTIME_MULTIPLIER
    gross = basic + details.shift_allowance + details.housing_allowance + overtime
    bonus = basic * parse_number(details.bonus_multiplier_str)
    tax = (gross + bonus) * parse_number(details.tax_rate_str) / 100.0
    take_home = gross + bonus - tax - details.other_deductions
    return SalarySlip(
        hourly_rate=hourly,
        overtime_pay=overtime,
        gross=gross,
        bonus=bonus,
        tax=tax,
        deductions=details.other_deductions,
        take_home=take_home,
    )

# ---------- Investments ----------
INVESTMENT_FUNDS = [
    ("Education Fund", "education_fund", "education_target"),
    ("Retirement Fund", "retirement_fund", "retirement_target"),
    ("General Savings", "general_savings", "savings_target"),
]

def investment_progress(details: InvestmentDetails) -> List[Dict]:
    rows = []
    for label, current_attr, target_attr in INVESTMENT_FUNDS:
        current = getattr(details, current_attr)
        target = getattr(details, target_attr)
        rows.append({
            "fund": label,
            "current": current,
            "target": target,
            "percent": current / target * 100.0 if target > 0 else 0.0,
            "shortfall": max(target - current, 0.0),
        })
    return rows

# ---------- Tables for charts ----------
BREAKDOWN_COLS = ["category", "budget", "actual", "remaining", "ratio"]

def category_breakdown(snapshot: Optional[MonthlyBudget]) -> pd.DataFrame:
    """Budget vs actual per category, in category-list order."""
    if snapshot is None or not snapshot.categories:
        return pd.DataFrame(columns=BREAKDOWN_COLS)
    totals = [category_totals(snapshot, c) for c in snapshot.categories]
    budget = np.array([t[0] for t in totals], dtype=float)
    actual = np.array([t[1] for t in totals], dtype=float)
    ratio = np.divide(actual, budget, out=np.zeros_like(actual), where=budget > 0)
    return pd.DataFrame({
        "category": list(snapshot.categories),
        "budget": budget,
        "actual": actual,
        "remaining": budget - actual,
        "ratio": ratio,
    })

def yearly_summary(months: Dict[str, MonthlyBudget], year: str) -> pd.DataFrame:
    """
    One row per calendar month of `year`.
    Months without a snapshot are zero rows with has_data=False.
    """
    rows = []
    for m in range(1, 13):
        key = f"{year}-{m:02d}"
        snap = months.get(key)
        total_budget, total_actual = overall_totals(snap)
        income = snap.income if snap is not None else 0.0
        rows.append({
            "month": key,
            "income": income,
            "budget": total_budget,
            "actual": total_actual,
            "balance": income - total_actual,
            "has_data": snap is not None,
        })
    return pd.DataFrame(rows)
