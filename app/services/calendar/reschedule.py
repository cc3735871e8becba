"""
Reschedule Validator

Decides the fate of a drag or resize gesture on the calendar:

    proposed -> rejected_noop            (all-day gesture, nothing changed)
    proposed -> checking -> rejected_conflict     (revert, notify, no write)
    proposed -> checking -> committing -> rejected_store_error  (revert, notify)
    proposed -> checking -> committing -> committed   (snapshot re-fetched)

Every gesture reaches a terminal state in one call. Store failures are not
retried.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel, field_validator, model_validator

from app.infra.supabase.errors import StoreError
from app.models.task import Task, TaskId, TaskTimeUpdate
from app.services.calendar.overlap import find_conflict
from app.services.calendar.ports import TaskStore
from app.utils.datetime_helper import parse_instant

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "That time overlaps another task."


class RescheduleState(str, Enum):
    """
    States of a reschedule gesture.

    PROPOSED, CHECKING and COMMITTING are the transient steps of a single
    call; an outcome always carries one of the terminal states.
    """
    PROPOSED = "proposed"
    CHECKING = "checking"
    COMMITTING = "committing"
    COMMITTED = "committed"
    REJECTED_NOOP = "rejected_noop"
    REJECTED_CONFLICT = "rejected_conflict"
    REJECTED_STORE_ERROR = "rejected_store_error"


class RescheduleRequest(BaseModel):
    """Candidate placement produced by a drag or resize"""
    task_id: TaskId
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    all_day: bool = False

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_instants(cls, value):
        return parse_instant(value)

    @model_validator(mode="after")
    def _check_order(self):
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError("start must not be after end")
        return self


class RescheduleOutcome(BaseModel):
    """Terminal result of a reschedule gesture"""
    state: RescheduleState
    task_id: TaskId
    reverted: bool = False
    message: Optional[str] = None
    conflicting_task_id: Optional[TaskId] = None
    tasks: Optional[List[Task]] = None

    @property
    def committed(self) -> bool:
        return self.state == RescheduleState.COMMITTED


class RescheduleValidator:
    """Runs the conflict check and the storage write for one gesture"""

    def __init__(self, store: TaskStore):
        self.store = store

    async def reschedule(
        self,
        request: RescheduleRequest,
        snapshot: Sequence[Task],
    ) -> RescheduleOutcome:
        """
        Validate and apply a proposed placement.

        Args:
            request: The gesture's candidate start/end
            snapshot: Task set currently shown to the user

        Returns:
            RescheduleOutcome in one of the terminal states
        """
        task_id = request.task_id

        if request.all_day or request.start is None or request.end is None:
            logger.debug(f"Ignoring all-day gesture for task {task_id}")
            return RescheduleOutcome(state=RescheduleState.REJECTED_NOOP, task_id=task_id)

        logger.debug(f"Checking task {task_id} at {request.start.isoformat()} - {request.end.isoformat()}")
        conflict = find_conflict(task_id, request.start, request.end, snapshot)
        if conflict is not None:
            logger.info(f"Rejected reschedule of task {task_id}: overlaps task {conflict.id}")
            return RescheduleOutcome(
                state=RescheduleState.REJECTED_CONFLICT,
                task_id=task_id,
                reverted=True,
                message=CONFLICT_MESSAGE,
                conflicting_task_id=conflict.id,
            )

        try:
            await self.store.update(
                task_id,
                TaskTimeUpdate(start_time=request.start, end_time=request.end),
            )
        except StoreError as e:
            logger.error(f"Failed to reschedule task {task_id}: {e}")
            return RescheduleOutcome(
                state=RescheduleState.REJECTED_STORE_ERROR,
                task_id=task_id,
                reverted=True,
                message=e.message,
            )

        logger.info(f"Rescheduled task {task_id} to {request.start.isoformat()}")

        try:
            tasks = await self.store.fetch_all()
        except StoreError as e:
            # The write went through; only the refresh is missing
            logger.error(f"Failed to refresh tasks after rescheduling task {task_id}: {e}")
            tasks = None

        return RescheduleOutcome(state=RescheduleState.COMMITTED, task_id=task_id, tasks=tasks)
