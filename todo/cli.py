"""Command-line interface for todo-cli.

This module provides the CLI interface for managing tasks using argparse.
It supports the following commands:
- add: Create a new task
- list: Show all tasks with their completion status
- complete: Mark a task as completed
- remove: Remove a task
- help: Show usage

Every command exits with status 0; problems are reported on stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional

from todo.config import load_settings
from todo.errors import TodoError
from todo.logging_setup import setup_logging
from todo.manager import TodoManager
from todo.models import parse_task_id
from todo.storage import TextFileStorage

logger = logging.getLogger(__name__)

COMPLETED_MARKER = "x"
OPEN_MARKER = " "

EPILOG = """\
commands:
  add <description>    Add a new todo task
  list                 Display all current tasks with their status
  complete <task_id>   Mark a task as complete
  remove <task_id>     Remove a task from the list
  help                 Show this help message

examples:
  todo add "Buy groceries"
  todo list
  todo complete 1
  todo remove 2
"""


class UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class TodoArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad usage to the caller instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Commands are dispatched by hand rather than through subparsers so that
    unknown commands and missing arguments print usage instead of exiting
    with an argparse error.

    Returns:
        Configured ArgumentParser instance
    """
    parser = TodoArgumentParser(
        prog="todo",
        add_help=False,
        description="CLI todo application",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show this help message",
    )
    parser.add_argument(
        "--file",
        help="Task file (default: $TODO_FILE or todos.txt)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    parser.add_argument("command", help="Command to run")
    parser.add_argument("arguments", nargs=argparse.REMAINDER, help="Command arguments")

    return parser


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def _printable(text: str) -> str:
    """Replace bytes kept from an undecodable task file for display."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _task_id_argument(args: argparse.Namespace, command: str) -> Optional[int]:
    """Extract the task ID argument, reporting problems to the user."""
    if not args.arguments:
        _error("Please provide a task ID.")
        print(f"Usage: todo {command} <task_id>", file=sys.stderr)
        return None

    task_id = parse_task_id(args.arguments[0])
    if task_id is None:
        _error("Task ID must be a number.")
    return task_id


def cmd_add(args: argparse.Namespace, manager: TodoManager) -> int:
    """Handle the 'add' command.

    Args:
        args: Parsed command-line arguments
        manager: TodoManager instance

    Returns:
        Exit code (always 0)
    """
    if not args.arguments:
        _error("Please provide a task description.")
        print("Usage: todo add <task description>", file=sys.stderr)
        return 0

    try:
        task = manager.add_task(" ".join(args.arguments))
    except TodoError as exc:
        _error(str(exc))
        return 0

    print(f"Task added successfully with ID: {task.id}")
    return 0


def cmd_list(args: argparse.Namespace, manager: TodoManager) -> int:
    """Handle the 'list' command."""
    tasks = manager.list_tasks()

    if not len(tasks):
        print("No tasks found. Add a task with 'add <description>'")
        return 0

    print("\n=== Todo List ===")
    for task in tasks:
        marker = COMPLETED_MARKER if task.completed else OPEN_MARKER
        print(f"{task.id}. [{marker}] {_printable(task.description)}")
    print()

    return 0


def cmd_complete(args: argparse.Namespace, manager: TodoManager) -> int:
    """Handle the 'complete' command.

    Args:
        args: Parsed command-line arguments
        manager: TodoManager instance

    Returns:
        Exit code (always 0)
    """
    task_id = _task_id_argument(args, "complete")
    if task_id is None:
        return 0

    try:
        manager.complete_task(task_id)
    except TodoError as exc:
        _error(str(exc))
        return 0

    print(f"Task {task_id} marked as completed.")
    return 0


def cmd_remove(args: argparse.Namespace, manager: TodoManager) -> int:
    """Handle the 'remove' command.

    Args:
        args: Parsed command-line arguments
        manager: TodoManager instance

    Returns:
        Exit code (always 0)
    """
    task_id = _task_id_argument(args, "remove")
    if task_id is None:
        return 0

    try:
        manager.remove_task(task_id)
    except TodoError as exc:
        _error(str(exc))
        return 0

    print(f"Task {task_id} removed successfully.")
    return 0


COMMANDS = {
    "add": cmd_add,
    "list": cmd_list,
    "complete": cmd_complete,
    "remove": cmd_remove,
}

HELP_COMMAND = "help"
HELP_FLAGS = {"-h", "--help"}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:]

    Returns:
        Exit code (0 on every path)
    """
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        if HELP_FLAGS.intersection(argv):
            parser.print_help()
        else:
            print(f"Unknown command: {argv[0]}")
            print(f"Error: {exc}", file=sys.stderr)
            parser.print_help()
        return 0

    settings = load_settings(file_path=args.file, verbose=args.verbose)
    setup_logging(settings.log_level)

    command = args.command.lower()
    if args.help or command == HELP_COMMAND:
        parser.print_help()
        return 0

    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {args.command}")
        parser.print_help()
        return 0

    logger.debug("Using task file %s", settings.file_path)
    manager = TodoManager(TextFileStorage(settings.file_path))
    return handler(args, manager)


if __name__ == "__main__":
    sys.exit(main())
