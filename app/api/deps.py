"""Shared dependencies and helpers for API routers"""
from typing import List, Optional

from fastapi import HTTPException

from app.infra.supabase import get_supabase_client
from app.infra.supabase.errors import StoreError, TaskNotFoundError
from app.infra.supabase.repositories import TaskRepository
from app.models.task import Priority
from app.services.calendar.ports import TaskStore


def get_task_store() -> TaskStore:
    """Task store backed by the Supabase tasks table"""
    return TaskRepository(get_supabase_client())


def parse_priorities(priorities: Optional[str]) -> Optional[List[Priority]]:
    """Parse a comma-separated priority filter such as 'high,medium'"""
    if priorities is None:
        return None
    try:
        return [Priority(p.strip().lower()) for p in priorities.split(",") if p.strip()]
    except ValueError:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid priorities: '{priorities}'. Valid values are: high, medium, low",
        )


def http_error_from_store(e: StoreError) -> HTTPException:
    """Map a storage failure onto an HTTP error carrying its message verbatim"""
    if isinstance(e, TaskNotFoundError):
        return HTTPException(status_code=404, detail=e.message)
    return HTTPException(status_code=502, detail=e.message)
