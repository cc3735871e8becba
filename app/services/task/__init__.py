from app.services.task.task_service import TaskService, filter_by_priority

__all__ = ["TaskService", "filter_by_priority"]
