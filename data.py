# data.py
# Local JSON persistence: month master data + selected month, backup export/import

import json
import logging
from typing import Any, Dict, Optional
from pathlib import Path

from pydantic import ValidationError

from config import DATA_DIR, MASTER_DATA_FILE, SELECTED_MONTH_FILE
from helpers import is_valid_month_key, year_of
from models import MonthlyBudget

logger = logging.getLogger(__name__)

def _ensure_dir(path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)

def _read_json(path: Path, default):
    if not path.exists():
        return default
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (ValueError, OSError) as e:
        logger.error(f"Failed to read {path.name}: {e}")
        return default

def _write_json(path: Path, obj):
    _ensure_dir(path)
    tmp = path.with_suffix(".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
    tmp.replace(path)

def months_from_raw(raw: Any, rejected: Optional[Dict[str, Any]] = None) -> Dict[str, MonthlyBudget]:
    """
    Validate a raw month-key -> snapshot mapping.
    Snapshots that don't parse, or sit under a bad month key, are left out of the
    result; their raw values go into `rejected` so they can be written back untouched.
    """
    if not isinstance(raw, dict):
        logger.error("Master data is not a mapping; starting empty")
        return {}
    months = {}
    for key, value in raw.items():
        if not is_valid_month_key(key):
            logger.warning(f"Skipping month {key!r}: not a YYYY-MM key")
            if rejected is not None:
                rejected[key] = value
            continue
        if isinstance(value, dict) and value.get("year") is None:
            value = {**value, "year": year_of(key)}
        try:
            months[key] = MonthlyBudget.model_validate(value)
        except ValidationError as e:
            logger.warning(f"Skipping month {key}: {e.error_count()} validation error(s)")
            if rejected is not None:
                rejected[key] = value
    return months

def months_to_raw(months: Dict[str, MonthlyBudget], rejected: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    # a loaded snapshot wins over a rejected raw value under the same key
    raw = dict(rejected or {})
    raw.update({key: snap.model_dump(by_alias=True) for key, snap in months.items()})
    return dict(sorted(raw.items()))

def load_master_data(path: Optional[Path] = None,
                     rejected: Optional[Dict[str, Any]] = None) -> Dict[str, MonthlyBudget]:
    return months_from_raw(_read_json(path or MASTER_DATA_FILE, {}), rejected)

def save_master_data(months: Dict[str, MonthlyBudget], path: Optional[Path] = None,
                     rejected: Optional[Dict[str, Any]] = None) -> None:
    _write_json(path or MASTER_DATA_FILE, months_to_raw(months, rejected))

def load_selected_month(path: Optional[Path] = None) -> Optional[str]:
    value = _read_json(path or SELECTED_MONTH_FILE, None)
    return value if isinstance(value, str) else None

def save_selected_month(key: str, path: Optional[Path] = None) -> None:
    _write_json(path or SELECTED_MONTH_FILE, key)

# ---------- Backup / restore ----------
def dump_master_data(months: Dict[str, MonthlyBudget]) -> str:
    return json.dumps(months_to_raw(months), ensure_ascii=False, indent=2)

def parse_master_data(text: str) -> Optional[Dict[str, MonthlyBudget]]:
    """Parse an uploaded backup. Returns None unless every month in it is usable."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Backup is not valid JSON: {e}")
        return None
    if not isinstance(raw, dict):
        logger.error("Backup is not a month mapping")
        return None
    rejected = {}
    months = months_from_raw(raw, rejected)
    if rejected:
        logger.error(f"Backup rejected, unusable month(s): {sorted(rejected)}")
        return None
    return months


class LocalStorage:
    """
    Storage port for MonthStore backed by two JSON files under a data dir.
    Months that failed to load stay as raw JSON and are written back on every save.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        data_dir = Path(data_dir) if data_dir else DATA_DIR
        self.master_path = data_dir / MASTER_DATA_FILE.name
        self.selected_path = data_dir / SELECTED_MONTH_FILE.name
        self.rejected: Dict[str, Any] = {}

    def load_months(self) -> Dict[str, MonthlyBudget]:
        self.rejected = {}
        return load_master_data(self.master_path, self.rejected)

    def save_months(self, months: Dict[str, MonthlyBudget], keep_rejected: bool = True) -> None:
        if not keep_rejected:
            self.rejected = {}
        save_master_data(months, self.master_path, self.rejected)

    def load_selected_month(self) -> Optional[str]:
        return load_selected_month(self.selected_path)

    def save_selected_month(self, key: str) -> None:
        save_selected_month(key, self.selected_path)
