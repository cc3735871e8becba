"""Calendar navigation, projection and reschedule endpoints"""

import logging
from datetime import date, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from app.api.deps import get_task_store, http_error_from_store, parse_priorities
from app.infra.supabase.errors import StoreError
from app.models.occurrence import Occurrence, OccurrenceSpec
from app.services.calendar import (
    RescheduleOutcome,
    RescheduleRequest,
    RescheduleState,
    RescheduleValidator,
    event_color,
    project_all,
)
from app.services.calendar.ports import TaskStore
from app.services.task import TaskService
from app.utils.calendar_grid import (
    CalendarView,
    month_label,
    month_matrix,
    shift_anchor,
    visible_range,
    week_range,
)
from app.utils.recurrence_calculator import expand_all

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


class MonthResponse(BaseModel):
    year: int
    month: int
    label: str
    weeks: List[List[Optional[int]]]


class WeekResponse(BaseModel):
    days: List[date]


class WindowResponse(BaseModel):
    view: CalendarView
    anchor: date
    start: date
    end: date
    label: str


class EventListResponse(BaseModel):
    events: List[OccurrenceSpec]
    count: int


class OccurrenceListResponse(BaseModel):
    occurrences: List[Occurrence]
    count: int


@router.get("/month", response_model=MonthResponse)
async def get_month(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
):
    """Day matrix of a month (month is 1-12 here), weeks starting on Monday"""
    return {
        "year": year,
        "month": month,
        "label": month_label(date(year, month, 1)),
        "weeks": month_matrix(year, month - 1),
    }


@router.get("/week", response_model=WeekResponse)
async def get_week(day: date = Query(..., alias="date")):
    """Monday-to-Sunday week containing a date"""
    return {"days": week_range(day)}


@router.get("/window", response_model=WindowResponse)
async def get_window(
    view: CalendarView = CalendarView.WEEK,
    day: Optional[date] = Query(None, alias="date"),
    step: int = 0,
):
    """
    Visible window for navigation.

    ``step`` moves the anchor by whole weeks or months (-1 = previous,
    1 = next); omitting ``date`` anchors on today.
    """
    anchor = shift_anchor(day or date.today(), view, step)
    start, end = visible_range(anchor, view)
    return {
        "view": view,
        "anchor": anchor,
        "start": start,
        "end": end,
        "label": month_label(anchor),
    }


@router.get("/events", response_model=EventListResponse)
async def list_events(
    view: CalendarView = CalendarView.WEEK,
    priorities: Optional[str] = None,
    store: TaskStore = Depends(get_task_store),
):
    """Projected placements (single or rule-based) for every task"""
    service = TaskService(store)
    visible = parse_priorities(priorities)

    try:
        tasks = await service.list_tasks(visible)
    except StoreError as e:
        raise http_error_from_store(e)

    events = [
        spec.model_copy(update={"color": event_color(spec.task, view)})
        for spec in project_all(tasks)
    ]
    return {"events": events, "count": len(events)}


@router.get("/occurrences", response_model=OccurrenceListResponse)
async def list_occurrences(
    start: date,
    end: Optional[date] = None,
    priorities: Optional[str] = None,
    store: TaskStore = Depends(get_task_store),
):
    """
    Concrete occurrences within [start, end).

    ``end`` defaults to one week after ``start``.
    """
    if end is None:
        end = start + timedelta(days=7)
    if end <= start:
        raise HTTPException(status_code=422, detail="end must be after start")

    service = TaskService(store)
    visible = parse_priorities(priorities)

    try:
        tasks = await service.list_tasks(visible)
    except StoreError as e:
        raise http_error_from_store(e)

    occurrences = expand_all(project_all(tasks), start, end)
    return {"occurrences": occurrences, "count": len(occurrences)}


@router.post("/reschedule", response_model=RescheduleOutcome)
async def reschedule_task(request: RescheduleRequest, store: TaskStore = Depends(get_task_store)):
    """
    Move or resize a task after checking it against every other timed task.

    Returns the outcome for committed and ignored (all-day) gestures.

    Raises:
        409: The new range overlaps another task
        502: The store rejected the update
    """
    try:
        snapshot = await store.fetch_all()
    except StoreError as e:
        raise http_error_from_store(e)

    outcome = await RescheduleValidator(store).reschedule(request, snapshot)

    if outcome.state == RescheduleState.REJECTED_CONFLICT:
        raise HTTPException(
            status_code=409,
            detail={
                "message": outcome.message,
                "conflicting_task_id": outcome.conflicting_task_id,
            },
        )
    if outcome.state == RescheduleState.REJECTED_STORE_ERROR:
        raise HTTPException(status_code=502, detail=outcome.message)

    return outcome
