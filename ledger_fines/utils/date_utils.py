"""Date manipulation utilities"""

from datetime import date
from typing import Iterable, List


def month_key(date_str: str) -> str:
    """Two-digit month of a YYYY-MM-DD date string"""
    return date_str.split("-")[1]


def is_iso_date(date_str: str) -> bool:
    """Check a string is a real calendar date in YYYY-MM-DD form"""
    if len(date_str) != 10 or date_str[4] != "-" or date_str[7] != "-":
        return False
    try:
        date.fromisoformat(date_str)
    except ValueError:
        return False
    return True


def sorted_months(keys: Iterable[str]) -> List[str]:
    """Unique month keys in ascending order"""
    return sorted(set(keys))
