"""Storage layer for todo-cli.

Tasks are kept in a plain text file, one encoded task per line. The whole
file is read on load and rewritten on every save; there is no incremental
append and no file locking.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from todo.models import Task

logger = logging.getLogger(__name__)

DEFAULT_FILE = "todos.txt"
ENCODING = "utf-8"
# Undecodable bytes round-trip through load and save
ERRORS = "surrogateescape"


class TextFileStorage:
    """Line-oriented text file storage.

    Attributes:
        file_path: Path to the backing file
    """

    def __init__(self, file_path: Union[str, Path] = DEFAULT_FILE):
        self.file_path = Path(file_path)

    def load(self) -> List[Task]:
        """Load tasks from the backing file.

        Blank lines are ignored and malformed lines are skipped. Bytes that
        are not valid UTF-8 are kept as surrogate escapes so a later save
        writes them back unchanged.

        Returns:
            Tasks in file order. Empty list if the file does not exist or
            cannot be opened.
        """
        tasks = []
        try:
            with open(self.file_path, "r", encoding=ENCODING, errors=ERRORS) as f:
                for lineno, line in enumerate(f, start=1):
                    line = line.rstrip("\r\n")
                    if not line:
                        continue
                    task = Task.decode(line)
                    if task is None:
                        logger.debug("Skipping malformed line %d in %s", lineno, self.file_path)
                        continue
                    tasks.append(task)
        except OSError as exc:
            logger.debug("No tasks loaded from %s: %s", self.file_path, exc)
            return []

        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        """Rewrite the backing file with the given tasks.

        The content is encoded before the file is opened, so a task that
        cannot be encoded leaves the existing file untouched.

        Args:
            tasks: Tasks to write, in order

        Returns:
            True on success, False if the file could not be written
        """
        try:
            data = "".join(task.encode() + "\n" for task in tasks).encode(ENCODING, ERRORS)
        except UnicodeEncodeError as exc:
            logger.debug("Unable to encode tasks for %s: %s", self.file_path, exc)
            return False

        try:
            with open(self.file_path, "wb") as f:
                f.write(data)
        except OSError as exc:
            logger.debug("Unable to write %s: %s", self.file_path, exc)
            return False

        return True
