"""Services module"""

from app.services.task import TaskService, filter_by_priority
from app.services.calendar import (
    RescheduleValidator,
    find_conflict,
    find_conflicts,
    overlaps,
    project,
    project_all,
)

__all__ = [
    "TaskService",
    "filter_by_priority",
    "RescheduleValidator",
    "find_conflict",
    "find_conflicts",
    "overlaps",
    "project",
    "project_all",
]
