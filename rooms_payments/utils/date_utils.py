"""Date parsing and display utilities"""

from datetime import date, datetime, timezone, tzinfo
from decimal import Decimal
from typing import Any, Optional
from zoneinfo import ZoneInfo

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def get_timezone(name: str) -> tzinfo:
    """Resolve a timezone name, UTC without touching the tz database"""
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def parse_timestamp(value: Any, default_tz: tzinfo = timezone.utc) -> Optional[datetime]:
    """
    Parse a loosely-typed timestamp into an aware datetime.

    Accepts datetime/date objects, ISO-8601 strings and epoch milliseconds.
    Date-only values are midnight UTC; naive date-times get `default_tz`.
    Returns None when the value cannot be understood.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif isinstance(value, bool):
        return None
    elif isinstance(value, (int, float, Decimal)):
        try:
            return datetime.fromtimestamp(float(value) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        if len(text) == 10:
            return parsed.replace(tzinfo=timezone.utc)
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz)
    return parsed


def format_display_datetime(moment: datetime, tz: tzinfo = timezone.utc) -> str:
    """Format like en-IN short date + 2-digit time, e.g. "5 Jan 2024, 09:05 am" """
    local = moment.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    month = MONTH_ABBREVIATIONS[local.month - 1]
    return f"{local.day} {month} {local.year}, {hour:02d}:{local.minute:02d} {meridiem}"
