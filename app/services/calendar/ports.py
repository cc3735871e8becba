"""Storage contract the calendar services depend on"""
from typing import List, Optional, Protocol

from app.models.task import Task, TaskCreate, TaskId, TaskTimeUpdate, TaskUpdate


class TaskStore(Protocol):
    """
    Authoritative task storage.

    ``fetch_all`` always returns the current set and ``find_by_id`` a single
    row (None when missing); insert, update and delete are the only
    mutation paths. Failures raise StoreError.
    """

    async def fetch_all(self) -> List[Task]: ...

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]: ...

    async def insert(self, fields: TaskCreate) -> Task: ...

    async def update(self, task_id: TaskId, fields: TaskUpdate | TaskTimeUpdate) -> Task: ...

    async def delete(self, task_id: TaskId) -> None: ...
