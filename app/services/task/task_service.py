"""
Task Service

Handles business logic for calendar tasks including:
- CRUD operations against the task store
- Priority filtering of the visible task set
"""

import logging
from typing import Iterable, List, Optional

from app.infra.supabase.errors import TaskNotFoundError
from app.models.task import Priority, Task, TaskCreate, TaskId, TaskUpdate
from app.services.calendar.ports import TaskStore

logger = logging.getLogger(__name__)


def filter_by_priority(tasks: Iterable[Task], visible: Optional[Iterable[Priority]]) -> List[Task]:
    """
    Keep tasks whose priority is visible.

    A task without a priority counts as medium. ``None`` shows everything.
    """
    if visible is None:
        return list(tasks)
    shown = set(visible)
    return [task for task in tasks if (task.priority or Priority.MEDIUM) in shown]


class TaskService:
    """Service for managing calendar tasks"""

    def __init__(self, store: TaskStore):
        self.store = store

    async def list_tasks(self, priorities: Optional[Iterable[Priority]] = None) -> List[Task]:
        """
        Get the current task set.

        Args:
            priorities: Visible priorities (None for all)

        Returns:
            Tasks ordered by start_time
        """
        tasks = await self.store.fetch_all()
        return filter_by_priority(tasks, priorities)

    async def get_task(self, task_id: TaskId) -> Task:
        """
        Get a single task by ID.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        task = await self.store.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def create_task(self, fields: TaskCreate) -> Task:
        """Create a new task"""
        task = await self.store.insert(fields)
        logger.info(f"Created task {task.id} with repeat '{task.repeat.value}'")
        return task

    async def update_task(self, task_id: TaskId, fields: TaskUpdate) -> Task:
        """Rewrite every field of an existing task"""
        task = await self.store.update(task_id, fields)
        logger.info(f"Updated task {task_id}")
        return task

    async def delete_task(self, task_id: TaskId) -> None:
        """Delete a task"""
        await self.store.delete(task_id)
        logger.info(f"Deleted task {task_id}")
