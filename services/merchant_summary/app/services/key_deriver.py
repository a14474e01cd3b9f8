"""
Document key derivation for the daily, weekly and monthly summary windows.

Keys follow the layout written by the summary producer:
    {mid}_daily_{YYYY-MM-DD}
    {mid}_weekly_{monday}_{friday}
    {mid}_monthly_{last day of month}
"""

from datetime import date, datetime, timedelta
from typing import Tuple, Union

DateLike = Union[date, datetime]


def _as_date(d: DateLike) -> date:
    if isinstance(d, datetime):
        return d.date()
    return d


def week_bounds(d: DateLike) -> Tuple[date, date]:
    """
    Returns (monday, friday) of the week containing d.
    Sunday belongs to the week that started six days earlier.
    """
    d = _as_date(d)
    monday = d - timedelta(days=d.weekday())
    return monday, monday + timedelta(days=4)


def last_day_of_month(d: DateLike) -> date:
    d = _as_date(d)
    if d.month == 12:
        first_of_next = date(d.year + 1, 1, 1)
    else:
        first_of_next = date(d.year, d.month + 1, 1)
    return first_of_next - timedelta(days=1)


def daily_key(merchant_id: str, d: DateLike) -> str:
    return f"{merchant_id}_daily_{_as_date(d).isoformat()}"


def weekly_key(merchant_id: str, d: DateLike) -> str:
    monday, friday = week_bounds(d)
    return f"{merchant_id}_weekly_{monday.isoformat()}_{friday.isoformat()}"


def monthly_key(merchant_id: str, d: DateLike) -> str:
    return f"{merchant_id}_monthly_{last_day_of_month(d).isoformat()}"
