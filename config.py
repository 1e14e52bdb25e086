# config.py
# Paths, defaults and derivation constants

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.getenv("BUDGET_DATA_DIR", BASE_DIR / "data"))

MASTER_DATA_FILE = DATA_DIR / "master_data.json"
SELECTED_MONTH_FILE = DATA_DIR / "selected_month.json"

# Canonical categories, in display order
FIXED_EXPENSES = "Fixed Expenses"
DEBT = "Debt / Installments"
SAVINGS = "Savings / Investment"
MISCELLANEOUS = "Miscellaneous"

DEFAULT_CATEGORIES = [FIXED_EXPENSES, DEBT, SAVINGS, MISCELLANEOUS]

# Starter list for a blank month (ids are fixed so every blank month matches)
INITIAL_ITEMS = [
    {"id": "item-1", "name": "Rent / Mortgage", "category": FIXED_EXPENSES, "budget": 0, "actual": 0},
    {"id": "item-2", "name": "Groceries", "category": FIXED_EXPENSES, "budget": 0, "actual": 0},
    {"id": "item-3", "name": "Electricity & Water", "category": FIXED_EXPENSES, "budget": 0, "actual": 0},
    {"id": "item-4", "name": "Transport", "category": FIXED_EXPENSES, "budget": 0, "actual": 0},
    {"id": "item-5", "name": "Credit Card", "category": DEBT, "budget": 0, "actual": 0},
    {"id": "item-6", "name": "Emergency Fund", "category": SAVINGS, "budget": 0, "actual": 0},
    {"id": "item-7", "name": "Entertainment", "category": MISCELLANEOUS, "budget": 0, "actual": 0},
]

# Alerts
CRITICAL_RATIO = 1.2

# Salary slip
OVERTIME_DIVISOR = 173   # monthly working hours used for the hourly rate
OVERTIME_MULTIPLIER = 1.5

CURRENCY = "Rp"
