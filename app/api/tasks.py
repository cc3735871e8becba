from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import List, Optional

from app.api.deps import get_task_store, http_error_from_store, parse_priorities
from app.infra.supabase.errors import StoreError
from app.models.task import Task, TaskCreate, TaskUpdate
from app.services.calendar.ports import TaskStore
from app.services.task import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


class TaskResponse(BaseModel):
    task: Task


class TaskListResponse(BaseModel):
    tasks: List[Task]
    count: int


class DeleteResponse(BaseModel):
    success: bool
    message: str


@router.get("", response_model=TaskListResponse)
async def list_tasks(priorities: Optional[str] = None, store: TaskStore = Depends(get_task_store)):
    """List all tasks, optionally limited to some priorities (e.g. 'high,medium')"""
    service = TaskService(store)
    visible = parse_priorities(priorities)

    try:
        tasks = await service.list_tasks(visible)
    except StoreError as e:
        raise http_error_from_store(e)

    return {
        "tasks": tasks,
        "count": len(tasks)
    }


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Get a single task by ID"""
    service = TaskService(store)

    try:
        task = await service.get_task(task_id)
    except StoreError as e:
        raise http_error_from_store(e)

    return {"task": task}


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(request: TaskCreate, store: TaskStore = Depends(get_task_store)):
    """Create a new task"""
    service = TaskService(store)

    try:
        task = await service.create_task(request)
    except StoreError as e:
        raise http_error_from_store(e)

    return {"task": task}


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: str, request: TaskUpdate, store: TaskStore = Depends(get_task_store)):
    """Replace every field of an existing task"""
    service = TaskService(store)

    try:
        task = await service.update_task(task_id, request)
    except StoreError as e:
        raise http_error_from_store(e)

    return {"task": task}


@router.delete("/{task_id}", response_model=DeleteResponse)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Delete a task"""
    service = TaskService(store)

    try:
        await service.delete_task(task_id)
    except StoreError as e:
        raise http_error_from_store(e)

    return {"success": True, "message": "Task deleted successfully"}
