from __future__ import annotations


class TaskError(Exception):
    """Base class for task tracker errors."""


class TaskValidationError(TaskError, ValueError):
    pass


class DuplicateTaskError(TaskError):
    def __init__(self, task_id) -> None:
        super().__init__(f"Task {task_id} already exists")
        self.task_id = task_id


class TaskDecodeError(TaskError):
    pass
