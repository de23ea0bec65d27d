"""
TODOLIST - Personal Task List Manager
=====================================

Single-user to-do list persisted to one JSON file. Every change is saved
before the call returns; a failed save rolls the change back.

Usage:
    from todolist import FileStorage, TaskManager

    manager = TaskManager(FileStorage("~/.todolist.json"))
    task = manager.add_task("Buy groceries")
    manager.complete_task(task.id)
    print(manager.list_tasks())
"""

from .errors import (
    TodoListError,
    TaskError,
    EmptyDescriptionError,
    InvalidIDError,
    TaskNotFoundError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    InvalidFormatError,
    CommandError,
)
from .schema import Task, TaskList
from .storage import Storage, FileStorage
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "Storage",
    "FileStorage",
    "TaskList",
    "Task",
    "TodoListError",
    "TaskError",
    "EmptyDescriptionError",
    "InvalidIDError",
    "TaskNotFoundError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "InvalidFormatError",
    "CommandError",
]
