"""Task domain model"""
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.recurrence import RepeatPattern, Weekday
from app.utils.datetime_helper import parse_date, parse_instant

TaskId = Union[int, str]


class Category(str, Enum):
    """Task category, used for week-view colouring"""
    SCHOOL = "school"
    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    ERRANDS = "errands"
    OTHER = "other"


class Priority(str, Enum):
    """Task priority, used for month-view colouring and filtering"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskBase(BaseModel):
    """Fields shared by every task shape (wire names of the tasks table)"""
    title: str
    category: Optional[Category] = None
    priority: Optional[Priority] = None
    repeat: RepeatPattern = RepeatPattern.NONE
    repeat_days: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @field_validator("repeat", mode="before")
    @classmethod
    def _default_repeat(cls, value):
        return value or RepeatPattern.NONE

    @field_validator("repeat_days", mode="before")
    @classmethod
    def _normalize_repeat_days(cls, value):
        if value is None:
            return []
        return [(day.value if isinstance(day, Enum) else str(day)).strip().lower() for day in value]

    @field_validator("due_date", mode="before")
    @classmethod
    def _parse_due_date(cls, value):
        return parse_date(value)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _parse_instants(cls, value):
        return parse_instant(value)

    @property
    def is_timed(self) -> bool:
        return self.start_time is not None and self.end_time is not None

    @property
    def is_all_day(self) -> bool:
        return not self.is_timed


class TaskFields(TaskBase):
    """
    Validated task fields for writes.

    Enforces what the task form checks before anything is stored:
    a non-empty title, a complete and ordered time pair, a due date, and
    repeat_days only for weekly repetition.
    """
    due_date: date
    repeat_days: List[Weekday] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value

    @model_validator(mode="after")
    def _check_schedule(self):
        if (self.start_time is None) != (self.end_time is None):
            raise ValueError("start_time and end_time must be given together")
        if self.is_timed and self.start_time > self.end_time:
            raise ValueError("start_time must not be after end_time")
        if self.repeat != RepeatPattern.WEEKLY:
            self.repeat_days = []
        return self


class TaskCreate(TaskFields):
    """Task creation model"""
    pass


class TaskUpdate(TaskFields):
    """Full-record task update (every field is rewritten)"""
    pass


class TaskTimeUpdate(BaseModel):
    """Update of the time pair only, issued by a reschedule"""
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _parse_instants(cls, value):
        return parse_instant(value)


class Task(TaskBase):
    """
    Complete task model from the database.

    Rows with a broken time pair or no due date still load; projection and
    overlap checks treat them as untimed or skip them.
    """
    id: TaskId

    class Config:
        from_attributes = True
