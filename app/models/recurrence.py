"""Shared recurrence vocabulary for repeating tasks"""
from enum import Enum
from typing import Dict, List


class RepeatPattern(str, Enum):
    """How a task repeats on the calendar"""
    NONE = "none"
    DAILY = "daily"
    WEEKDAYS = "weekdays"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class Weekday(str, Enum):
    """Weekday tags as stored in repeat_days"""
    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"


class Frequency(str, Enum):
    """Frequency of a recurrence rule"""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


# Weekday tag -> two-letter rule code
WEEKDAY_CODES: Dict[str, str] = {
    "sun": "su",
    "mon": "mo",
    "tue": "tu",
    "wed": "we",
    "thu": "th",
    "fri": "fr",
    "sat": "sa",
}

WORKWEEK_CODES: List[str] = ["mo", "tu", "we", "th", "fr"]

# Minimum length of a timed placement on the calendar
MIN_DURATION_MINUTES = 15

# Display length used for tasks that have no time pair
DEFAULT_DURATION_MINUTES = 30
