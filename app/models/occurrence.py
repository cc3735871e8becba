"""Calendar placements derived from tasks"""
from datetime import date, datetime
from typing import List, Optional, Union

from pydantic import BaseModel

from app.models.recurrence import Frequency
from app.models.task import Task, TaskId

Anchor = Union[datetime, date]


class RecurrenceRule(BaseModel):
    """Declarative repetition of a task (frequency, anchor, weekday set)"""
    freq: Frequency
    dtstart: Anchor
    byweekday: Optional[List[str]] = None


class OccurrenceSpec(BaseModel):
    """
    Projection of one task onto the calendar.

    Either a single placement (``start``/``end``) or a repeating rule
    (``rrule`` plus ``duration_minutes`` for timed tasks).
    """
    id: TaskId
    title: str
    all_day: bool
    start: Optional[Anchor] = None
    end: Optional[datetime] = None
    rrule: Optional[RecurrenceRule] = None
    duration_minutes: Optional[int] = None
    color: Optional[str] = None
    task: Task

    @property
    def is_recurring(self) -> bool:
        return self.rrule is not None


class Occurrence(BaseModel):
    """One concrete placement of a task within a visible window"""
    task_id: TaskId
    title: str
    start: datetime
    end: datetime
    all_day: bool
