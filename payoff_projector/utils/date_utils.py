"""Date manipulation utilities"""

from datetime import date
from typing import Optional


def month_start(value: Optional[date] = None) -> date:
    """First day of the month containing `value` (default: current month)"""
    if value is None:
        value = date.today()
    return value.replace(day=1)


def add_months(value: date, months: int) -> date:
    """Advance a first-of-month date by a number of calendar months"""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)
