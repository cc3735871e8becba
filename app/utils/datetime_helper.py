"""Local-time helpers for dates and instants"""
from datetime import date, datetime
from typing import Optional, Union


def ensure_aware(dt: datetime) -> datetime:
    """
    Return a timezone-aware datetime.

    Naive values are interpreted as local wall time, the same way the
    calendar UI interprets them.
    """
    if dt.tzinfo is None:
        return dt.astimezone()
    return dt


def to_local(dt: datetime) -> datetime:
    """Convert an instant to the host's local timezone"""
    return ensure_aware(dt).astimezone()


def to_local_wall(dt: datetime) -> datetime:
    """
    Convert an instant to a naive local wall-clock datetime.

    Used when stepping through calendar days so that a 09:00 placement
    stays at 09:00 across DST changes.
    """
    return to_local(dt).replace(tzinfo=None)


def from_local_wall(dt: datetime) -> datetime:
    """Attach the local timezone to a naive wall-clock datetime"""
    return dt.astimezone()


def to_local_date(value: Union[date, datetime]) -> date:
    """
    Reduce a date or an instant to a local calendar date.

    An instant such as ``2024-01-01T05:00:00Z`` written by a UTC-5 client
    at local midnight reads back as 2024-01-01 on that client.
    """
    if isinstance(value, datetime):
        return to_local(value).date()
    return value


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Parse a stored date field.

    Accepts plain ``YYYY-MM-DD`` dates as well as full ISO instants.

    Raises:
        ValueError: If the string is not an ISO date or datetime
    """
    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return to_local_date(value)
    text = value.strip()
    if "T" in text or " " in text:
        return to_local_date(parse_instant(text))
    return date.fromisoformat(text)


def parse_instant(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse a stored instant into an aware datetime.

    Raises:
        ValueError: If the string is not an ISO datetime
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_aware(value)
    text = value.strip()
    # fromisoformat only understands a trailing "Z" from 3.11 on
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_aware(datetime.fromisoformat(text))


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end (negative when end precedes start)"""
    seconds = (ensure_aware(end) - ensure_aware(start)).total_seconds()
    return int(seconds // 60)
