"""
Date and time helpers.

Location: core/utils/dates.py

Every "now" in the application is taken in Indian Standard Time
(Asia/Kolkata) and stored as a naive datetime, the way the documents
are written to MongoDB.
"""
import calendar
from datetime import datetime, date
from typing import Optional, Tuple

import pytz
from dateutil import parser as date_parser

IST = pytz.timezone("Asia/Kolkata")


def now_ist() -> datetime:
    """Current datetime in IST, without tzinfo."""
    return datetime.now(IST).replace(tzinfo=None)


def today_ist() -> date:
    """Current date in IST."""
    return now_ist().date()


def previous_month(year: int, month: int) -> Tuple[int, int]:
    """Returns (year, month) of the calendar month before the given one."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def month_window(year: int, month: int) -> Tuple[datetime, datetime]:
    """
    Inclusive window of a calendar month.

    Args:
        year: Year
        month: Month (1-12)

    Returns:
        (first day 00:00:00, last day 23:59:59)
    """
    last_day = calendar.monthrange(year, month)[1]
    start = datetime(year, month, 1, 0, 0, 0)
    end = datetime(year, month, last_day, 23, 59, 59)
    return start, end


def to_datetime(value) -> Optional[datetime]:
    """
    Normalises a date, datetime or ISO string into a naive datetime.

    Aware datetimes are converted to IST before tzinfo is dropped.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = date_parser.parse(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(IST).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise ValueError(f"Unsupported date value: {value!r}")
