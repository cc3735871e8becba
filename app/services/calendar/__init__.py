"""Calendar scheduling and projection services"""
from app.services.calendar.overlap import find_conflict, find_conflicts, overlaps, ranges_overlap
from app.services.calendar.projection import (
    display_duration_minutes,
    event_color,
    project,
    project_all,
)
from app.services.calendar.reschedule import (
    RescheduleOutcome,
    RescheduleRequest,
    RescheduleState,
    RescheduleValidator,
)

__all__ = [
    "find_conflict",
    "find_conflicts",
    "overlaps",
    "ranges_overlap",
    "display_duration_minutes",
    "event_color",
    "project",
    "project_all",
    "RescheduleOutcome",
    "RescheduleRequest",
    "RescheduleState",
    "RescheduleValidator",
]
