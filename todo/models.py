"""Core models for todo-cli.

This module defines the core data structures for task management:
- Task: A dataclass representing a task and its one-line text encoding
- timestamp: Formats times the way they are stored in the backing file
- parse_task_id: Fallible conversion of user input into a task ID
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FIELD_SEPARATOR = "|"

# id, description, completed flag, created_at; completed_at is optional
MIN_FIELDS = 4

# Optional minus sign and ASCII digits only; no "+", "_" or padding
INTEGER_RE = re.compile(r"-?[0-9]+")


def timestamp(now: Optional[datetime] = None) -> str:
    """Format a local time as ``YYYY-MM-DD HH:MM:SS``.

    Args:
        now: Time to format. Defaults to the current local time.

    Returns:
        Zero-padded, 24-hour timestamp string
    """
    if now is None:
        now = datetime.now()
    return now.strftime(TIMESTAMP_FORMAT)


def _parse_int(text: str) -> Optional[int]:
    if INTEGER_RE.fullmatch(text) is None:
        return None
    return int(text)


def parse_task_id(text: str) -> Optional[int]:
    """Parse a task ID typed by the user.

    Args:
        text: Raw command-line argument

    Returns:
        The integer ID, or None unless the text is an optionally signed
        run of ASCII digits
    """
    return _parse_int(text)


@dataclass
class Task:
    """Task model representing a single task item.

    Attributes:
        id: Unique identifier for the task, assigned by the manager
        description: Trimmed task description
        completed: Whether the task has been marked complete
        created_at: Timestamp when the task was created
        completed_at: Timestamp when the task was completed, empty while open
    """

    id: int
    description: str
    completed: bool = False
    created_at: str = field(default_factory=timestamp)
    completed_at: str = ""

    def mark_complete(self) -> None:
        """Mark the task as completed and stamp the completion time."""
        self.completed = True
        self.completed_at = timestamp()

    def encode(self) -> str:
        """Encode the task as one line of the backing file.

        The description is written as-is; a ``|`` inside it is not escaped.

        Returns:
            ``id|description|0/1|created_at|completed_at`` without newline
        """
        return FIELD_SEPARATOR.join([
            str(self.id),
            self.description,
            "1" if self.completed else "0",
            self.created_at,
            self.completed_at,
        ])

    @classmethod
    def decode(cls, line: str) -> Optional["Task"]:
        """Decode one line of the backing file.

        Args:
            line: Encoded task, without trailing newline

        Returns:
            Task instance, or None if the line has fewer than four fields
            or a non-integer ID
        """
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) < MIN_FIELDS:
            return None

        task_id = _parse_int(parts[0])
        if task_id is None:
            return None

        return cls(
            id=task_id,
            description=parts[1],
            completed=parts[2] == "1",
            created_at=parts[3],
            completed_at=parts[4] if len(parts) > MIN_FIELDS else "",
        )
