"""Exceptions raised by the task manager."""

from pathlib import Path


class TodoError(Exception):
    """Base class for task management errors."""


class EmptyDescriptionError(TodoError):
    """Raised when a task description is empty after trimming."""

    def __init__(self):
        super().__init__("Task description cannot be empty.")


class TaskNotFoundError(TodoError):
    """Raised when no task has the requested ID."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found.")


class AlreadyCompletedError(TodoError):
    """Raised when completing a task that is already completed."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} is already completed.")


class PersistenceError(TodoError):
    """Raised when the task list could not be written to disk.

    The in-memory change that triggered the save has already been applied.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Unable to save tasks to file {path}.")
