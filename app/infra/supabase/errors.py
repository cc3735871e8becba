"""Storage error types"""


class StoreError(Exception):
    """A task storage operation failed; the message is shown to the user as-is"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskNotFoundError(StoreError):
    """No task with the given id exists"""

    def __init__(self, task_id):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id
