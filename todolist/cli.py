#!/usr/bin/env python3
"""
TODOLIST - CLI Interface
========================
Command-line tool for managing a personal to-do list.

Usage:
    todolist add Buy groceries
    todolist list
    todolist done 1
    todolist delete 2
    todolist help
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings, load_settings
from .errors import CommandError, StorageError, TodoListError
from .manager import TaskManager
from .schema import Task
from .storage import FileStorage

logger = logging.getLogger("todolist.cli")

HELP_TEXT = """Todo List CLI - A simple command-line todo list manager

Usage:
  todolist <command> [arguments]

Commands:
  add <description>    Add a new task
  list                 List all tasks
  done <id>            Mark a task as completed
  delete <id>          Delete a task
  help                 Show this help message

Examples:
  todolist add "Buy groceries"
  todolist list
  todolist done 1
  todolist delete 2"""

EMPTY_LIST_TEXT = "No tasks found. Add a task with: todolist add <description>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todolist",
        description="Todo List CLI - A simple command-line todo list manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todolist add "Buy groceries"     Add a new task
  todolist list                    List all tasks
  todolist done 1                  Mark task 1 as completed
  todolist delete 2                Delete task 2
        """
    )
    parser.add_argument("--file", help="Task file (default: $TODOLIST_FILE or ~/.todolist.json)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("description", nargs=argparse.REMAINDER, help="Task description")

    subparsers.add_parser("list", help="List all tasks")

    done_parser = subparsers.add_parser("done", help="Mark a task as completed")
    done_parser.add_argument("task_id", help="Task ID")

    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("task_id", help="Task ID")

    subparsers.add_parser("help", help="Show this help message")

    return parser


def configure_logging(settings: Settings) -> None:
    """Logs go to stderr; stdout is reserved for command output"""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_task_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CommandError(f"task ID must be a valid number, got {raw!r}") from None


def format_task(task: Task) -> str:
    status = "[✓]" if task.completed else "[ ]"
    created = task.created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return f"{status} [{task.id}] {task.description} (created: {created})"


def format_task_list(tasks: List[Task]) -> str:
    if not tasks:
        return EMPTY_LIST_TEXT
    lines = ["Your tasks:"]
    lines.extend(format_task(task) for task in tasks)
    return "\n".join(lines)


def execute(args: argparse.Namespace, manager: TaskManager) -> str:
    """Run one parsed command against the manager and return its output"""
    if args.command == "add":
        if not args.description:
            raise CommandError("add command requires a description")
        task = manager.add_task(" ".join(args.description))
        return f"✓ Task added: [{task.id}] {task.description}"

    elif args.command == "list":
        return format_task_list(manager.list_tasks())

    elif args.command == "done":
        task_id = parse_task_id(args.task_id)
        manager.complete_task(task_id)
        return f"✓ Task {task_id} marked as completed"

    elif args.command == "delete":
        task_id = parse_task_id(args.task_id)
        manager.delete_task(task_id)
        return f"✓ Task {task_id} deleted"

    raise CommandError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command or args.command == "help":
        print(HELP_TEXT)
        return 0

    settings = load_settings(data_file=args.file, verbosity=args.verbose)
    configure_logging(settings)
    logger.debug(f"Using task file {settings.data_file}")

    try:
        manager = TaskManager(FileStorage(settings.data_file))
    except StorageError as e:
        print(f"Error: failed to initialize todo list: {e}", file=sys.stderr)
        return 1

    try:
        output = execute(args, manager)
    except TodoListError as e:
        print(f"Error: {args.command}: {e}", file=sys.stderr)
        if isinstance(e, CommandError):
            print("\nUse 'todolist help' for usage information.", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
