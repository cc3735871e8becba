"""Domain models for the application"""
from .task import Task, TaskCreate, TaskUpdate, TaskTimeUpdate, TaskId, Category, Priority
from .recurrence import RepeatPattern, Weekday, Frequency
from .occurrence import Occurrence, OccurrenceSpec, RecurrenceRule

__all__ = [
    'Task', 'TaskCreate', 'TaskUpdate', 'TaskTimeUpdate', 'TaskId',
    'Category', 'Priority',
    'RepeatPattern', 'Weekday', 'Frequency',
    'Occurrence', 'OccurrenceSpec', 'RecurrenceRule',
]
