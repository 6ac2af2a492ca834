import datetime
import math
from typing import Optional

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def is_published(date: datetime.datetime, now: Optional[datetime.datetime] = None) -> bool:
    """True when ``date`` is not after the current instant."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    return date <= now


def format_date(date: datetime.date) -> str:
    # en-US long form, independent of the process locale
    return f"{_MONTHS[date.month - 1]} {date.day}, {date.year}"


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"
