"""Task manager for todo-cli.

This module provides TodoManager, which owns the in-memory task list,
enforces task lifecycle rules and persists every change through the
storage layer.
"""

import logging
from typing import Iterator, List, NamedTuple, Optional

from todo.errors import (
    AlreadyCompletedError,
    EmptyDescriptionError,
    PersistenceError,
    TaskNotFoundError,
)
from todo.models import FIELD_SEPARATOR, Task
from todo.storage import TextFileStorage

logger = logging.getLogger(__name__)

# Characters stripped from both ends of a description
WHITESPACE = " \t\n\r"

# Characters that break the one-line-per-task file format
UNSAFE_CHARACTERS = (FIELD_SEPARATOR, "\n", "\r")


class TaskSummary(NamedTuple):
    """One row of a task listing."""

    id: int
    description: str
    completed: bool


class TaskView:
    """Read-only, re-iterable view over a task list.

    Rows are produced on demand and reflect the list at iteration time.
    """

    def __init__(self, tasks: List[Task]):
        self._tasks = tasks

    def __iter__(self) -> Iterator[TaskSummary]:
        for task in self._tasks:
            yield TaskSummary(task.id, task.description, task.completed)

    def __len__(self) -> int:
        return len(self._tasks)


class TodoManager:
    """Manager for tasks backed by a text file.

    The task list is loaded once at construction and the whole list is
    saved after each successful add, complete or remove. A failed save
    leaves the in-memory change in place and raises PersistenceError.

    Attributes:
        storage: Storage backend for persisting tasks
    """

    def __init__(self, storage: Optional[TextFileStorage] = None):
        """Initialize TodoManager and load existing tasks.

        Args:
            storage: Storage implementation to use. If None, uses
                    TextFileStorage with the default file path.
        """
        self.storage = storage or TextFileStorage()
        self._tasks: List[Task] = self.storage.load()
        logger.debug("Loaded %d tasks from %s", len(self._tasks), self.storage.file_path)

    def __len__(self) -> int:
        return len(self._tasks)

    def add_task(self, description: str) -> Task:
        """Create a new task.

        IDs are one more than the highest existing ID, so removing the
        newest task frees its ID for the next add.

        Args:
            description: Task description; surrounding whitespace is removed

        Returns:
            The created Task

        Raises:
            EmptyDescriptionError: If the description is blank
            PersistenceError: If the task list could not be saved
        """
        description = description.strip(WHITESPACE)
        if not description:
            raise EmptyDescriptionError()

        for char in UNSAFE_CHARACTERS:
            if char in description:
                logger.warning("Description contains %r and will not load back unchanged", char)

        task = Task(id=self._next_id(), description=description)
        self._tasks.append(task)
        logger.info("Added task %d", task.id)

        self._persist()
        return task

    def list_tasks(self) -> TaskView:
        """Return a view of all tasks in insertion order."""
        return TaskView(self._tasks)

    def get_task(self, task_id: int) -> Optional[Task]:
        """Get a specific task by ID.

        Args:
            task_id: ID of the task to retrieve

        Returns:
            Task object if found, None otherwise
        """
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def complete_task(self, task_id: int) -> Task:
        """Mark a task as completed.

        Args:
            task_id: ID of the task to complete

        Returns:
            The completed Task

        Raises:
            TaskNotFoundError: If no task has this ID
            AlreadyCompletedError: If the task is already completed
            PersistenceError: If the task list could not be saved
        """
        task = self.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        if task.completed:
            raise AlreadyCompletedError(task_id)

        task.mark_complete()
        logger.info("Completed task %d", task_id)

        self._persist()
        return task

    def remove_task(self, task_id: int) -> Task:
        """Remove a task, keeping the order of the remaining ones.

        Args:
            task_id: ID of the task to remove

        Returns:
            The removed Task

        Raises:
            TaskNotFoundError: If no task has this ID
            PersistenceError: If the task list could not be saved
        """
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                break
        else:
            raise TaskNotFoundError(task_id)

        del self._tasks[index]
        logger.info("Removed task %d", task_id)

        self._persist()
        return task

    def _next_id(self) -> int:
        return max((task.id for task in self._tasks), default=0) + 1

    def _persist(self) -> None:
        if not self.storage.save(self._tasks):
            raise PersistenceError(self.storage.file_path)
