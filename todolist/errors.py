"""
TODOLIST - Error Taxonomy
=========================
Business rule violations (user-correctable) and persistence failures
(environment problems such as permissions or disk space).
"""

from pathlib import Path
from typing import Optional, Union


class TodoListError(Exception):
    """Base error for the todolist package"""


# ========================================
# BUSINESS RULES
# ========================================

class TaskError(TodoListError):
    """A request broke a task rule; the caller can fix the input"""


class EmptyDescriptionError(TaskError):
    def __init__(self) -> None:
        super().__init__("task description cannot be empty")


class InvalidIDError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"invalid task ID: {task_id}")
        self.task_id = task_id


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id


# ========================================
# PERSISTENCE
# ========================================

class StorageError(TodoListError):
    """
    Persistence failure bound to a storage location.

    The original exception, when there is one, is chained as __cause__.
    """

    reason = "storage error"

    def __init__(self, path: Optional[Union[str, Path]] = None, detail: Optional[str] = None) -> None:
        self.path = Path(path) if path is not None else None
        message = self.reason
        if self.path is not None:
            message = f"{message} at {self.path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class StorageReadError(StorageError):
    reason = "failed to read from storage"


class StorageWriteError(StorageError):
    reason = "failed to write to storage"


class InvalidFormatError(StorageError):
    reason = "invalid task file format"


# ========================================
# COMMAND LINE
# ========================================

class CommandError(TodoListError):
    """Malformed command line that argparse did not reject itself"""
