"""
Recurrence Projection

Translates a task's repeat setting and base time range into the
placement the calendar renders:
- a single dated placement for non-repeating tasks
- a declarative rule (frequency, anchor, weekday set, duration) otherwise
"""

import logging
from typing import Dict, Iterable, List, Optional

from app.models.occurrence import OccurrenceSpec, RecurrenceRule
from app.models.recurrence import (
    DEFAULT_DURATION_MINUTES,
    MIN_DURATION_MINUTES,
    WEEKDAY_CODES,
    WORKWEEK_CODES,
    Frequency,
    RepeatPattern,
)
from app.models.task import Task
from app.utils.calendar_grid import CalendarView
from app.utils.datetime_helper import minutes_between

logger = logging.getLogger(__name__)


CATEGORY_COLORS: Dict[str, str] = {
    "school": "#A7C7E7",
    "work": "#C6E5B1",
    "personal": "#F7DDAA",
    "health": "#F5A6A6",
    "errands": "#E8D3FF",
    "other": "#E2E2E2",
}

PRIORITY_COLORS: Dict[str, str] = {
    "high": "#dd4a4ac7",
    "medium": "#f1c205a6",
    "low": "#4ade80d8",
}

NEUTRAL_COLOR = "#E5E7EB"


def display_duration_minutes(task: Task) -> int:
    """
    Length of a task's placement in minutes.

    Timed tasks never drop below MIN_DURATION_MINUTES, so a zero or
    negative pair still renders; untimed tasks get the default length.
    """
    if not task.is_timed:
        return DEFAULT_DURATION_MINUTES
    return max(MIN_DURATION_MINUTES, minutes_between(task.start_time, task.end_time))


def _rule_duration(task: Task) -> Optional[int]:
    return display_duration_minutes(task) if task.start_time else None


def project(task: Task) -> Optional[OccurrenceSpec]:
    """
    Project one task onto the calendar.

    Args:
        task: Task snapshot from storage

    Returns:
        The task's OccurrenceSpec, or None if it has no anchor date
    """
    anchor = task.start_time or task.due_date
    if anchor is None:
        return None

    base = {
        "id": task.id,
        "title": task.title,
        "all_day": task.start_time is None,
        "task": task,
    }

    if task.repeat == RepeatPattern.NONE:
        return OccurrenceSpec(**base, start=anchor, end=task.end_time)

    if task.repeat == RepeatPattern.DAILY:
        rule = RecurrenceRule(freq=Frequency.DAILY, dtstart=anchor)
    elif task.repeat == RepeatPattern.WEEKDAYS:
        rule = RecurrenceRule(
            freq=Frequency.WEEKLY,
            dtstart=anchor,
            byweekday=list(WORKWEEK_CODES),
        )
    elif task.repeat == RepeatPattern.WEEKLY:
        rule = RecurrenceRule(
            freq=Frequency.WEEKLY,
            dtstart=anchor,
            byweekday=[WEEKDAY_CODES[day] for day in task.repeat_days if day in WEEKDAY_CODES],
        )
    elif task.repeat == RepeatPattern.MONTHLY:
        rule = RecurrenceRule(freq=Frequency.MONTHLY, dtstart=anchor)
    else:
        return None

    return OccurrenceSpec(**base, rrule=rule, duration_minutes=_rule_duration(task))


def project_all(tasks: Iterable[Task]) -> List[OccurrenceSpec]:
    """Project a task snapshot, skipping tasks without an anchor"""
    specs = []
    for task in tasks:
        spec = project(task)
        if spec is None:
            logger.warning(f"Skipping task {task.id}: no start_time or due_date")
            continue
        specs.append(spec)
    return specs


def event_color(task: Task, view: CalendarView) -> str:
    """Week view colours by category, month view by priority"""
    if view == CalendarView.WEEK:
        category = task.category.value if task.category else "other"
        return CATEGORY_COLORS.get(category, CATEGORY_COLORS["other"])
    if task.priority is None:
        return NEUTRAL_COLOR
    return PRIORITY_COLORS.get(task.priority.value, NEUTRAL_COLOR)
