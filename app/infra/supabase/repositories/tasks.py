"""Task repository"""
from typing import List, Union

from supabase import Client  # type: ignore

from app.config import TASKS_TABLE
from app.infra.supabase.errors import TaskNotFoundError
from app.models.task import Task, TaskCreate, TaskId, TaskTimeUpdate, TaskUpdate

from .base import BaseRepository


class TaskRepository(BaseRepository[Task, TaskCreate, Union[TaskUpdate, TaskTimeUpdate]]):
    """
    Repository for task operations.

    Implements the TaskStore contract used by the calendar services:
    fetch_all / find_by_id (inherited) / insert / update / delete.
    """

    def __init__(self, client: Client, table_name: str = TASKS_TABLE):
        super().__init__(client, table_name, Task)

    async def fetch_all(self) -> List[Task]:
        """Fetch the authoritative task set ordered by start_time"""
        return await self.find_all(order_by="start_time")

    async def insert(self, fields: TaskCreate) -> Task:
        """Insert a task; the store assigns its id"""
        return await self.create(fields)

    async def update(self, task_id: TaskId, fields: Union[TaskUpdate, TaskTimeUpdate]) -> Task:
        """
        Rewrite a task's fields.

        Raises:
            TaskNotFoundError: If no task has this id
            StoreError: If the backend rejects the update
        """
        task = await super().update(task_id, fields)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def delete(self, task_id: TaskId) -> None:
        """
        Delete a task.

        Raises:
            TaskNotFoundError: If no task has this id
            StoreError: If the backend rejects the delete
        """
        if not await super().delete(task_id):
            raise TaskNotFoundError(task_id)
