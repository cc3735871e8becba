"""Time-range conflict detection between timed tasks"""
from datetime import datetime
from typing import Iterator, List, Optional, Sequence

from app.models.task import Task, TaskId
from app.utils.datetime_helper import ensure_aware


def ranges_overlap(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """Half-open overlap: ranges that only touch at an endpoint do not conflict"""
    return a_start < b_end and b_start < a_end


def _iter_conflicts(
    candidate_id: Optional[TaskId],
    start: datetime,
    end: datetime,
    tasks: Sequence[Task],
) -> Iterator[Task]:
    start = ensure_aware(start)
    end = ensure_aware(end)

    for task in tasks:
        if candidate_id is not None and str(task.id) == str(candidate_id):
            continue
        # All-day tasks never take part in conflicts
        if not task.is_timed:
            continue
        if ranges_overlap(start, end, task.start_time, task.end_time):
            yield task


def find_conflicts(
    candidate_id: Optional[TaskId],
    start: datetime,
    end: datetime,
    tasks: Sequence[Task],
) -> List[Task]:
    """
    Find every timed task whose stored range overlaps a candidate range.

    The candidate's own record and all-day tasks never conflict. Repeating
    tasks are compared by their stored base range only.

    Args:
        candidate_id: Id of the task being placed (None for a new task)
        start: Candidate start
        end: Candidate end
        tasks: Current task snapshot

    Returns:
        Conflicting tasks in snapshot order
    """
    return list(_iter_conflicts(candidate_id, start, end, tasks))


def find_conflict(
    candidate_id: Optional[TaskId],
    start: datetime,
    end: datetime,
    tasks: Sequence[Task],
) -> Optional[Task]:
    """First task conflicting with the candidate range, or None"""
    return next(_iter_conflicts(candidate_id, start, end, tasks), None)


def overlaps(
    candidate_id: Optional[TaskId],
    start: datetime,
    end: datetime,
    tasks: Sequence[Task],
) -> bool:
    """Whether the candidate range conflicts with any other timed task"""
    return find_conflict(candidate_id, start, end, tasks) is not None
