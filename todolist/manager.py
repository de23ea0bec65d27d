"""
TODOLIST - Task Manager
=======================
Holds the live TaskList and enforces the task rules.

Every mutation is written through to storage before the call returns. If
the write fails the in-memory change is undone, so memory always matches
what is on disk.
"""

import logging
from typing import Callable, List

from .errors import (
    EmptyDescriptionError,
    InvalidIDError,
    StorageError,
    TaskNotFoundError,
)
from .schema import Task, TaskList, utc_now
from .storage import Storage

logger = logging.getLogger("todolist")


class TaskManager:
    """
    Single-owner task service.

    The TaskList is loaded once here and never handed out; callers only
    ever receive copies of tasks.
    """

    def __init__(self, storage: Storage):
        self.storage = storage
        self._task_list: TaskList = storage.load()
        logger.info(
            f"📂 Loaded task list: {len(self._task_list.tasks)} task(s), "
            f"next id {self._task_list.next_id}"
        )

    # ========================================
    # PERSISTENCE
    # ========================================

    def _persist(self, action: str, undo: Callable[[], None]) -> None:
        """Save the list; on failure run `undo` and re-raise"""
        try:
            self.storage.save(self._task_list)
        except StorageError as e:
            undo()
            logger.error(f"❌ Failed to save task list after {action}, rolled back: {e}")
            raise
        logger.info(f"✅ Saved task list after {action} ({self._task_list.progress_pct}% complete)")

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, description: str) -> Task:
        """Append a new task; the stored description is the untrimmed text"""
        if not description.strip():
            raise EmptyDescriptionError()

        task_list = self._task_list
        task = Task(
            id=task_list.next_id,
            description=description,
            completed=False,
            created_at=utc_now(),
        )
        task_list.tasks.append(task)
        task_list.next_id += 1

        def undo() -> None:
            task_list.tasks.pop()
            task_list.next_id -= 1

        self._persist(f"adding task {task.id}", undo)
        return task.model_copy()

    def list_tasks(self) -> List[Task]:
        """Snapshot of all tasks in creation order"""
        return [task.model_copy() for task in self._task_list.tasks]

    def complete_task(self, task_id: int) -> Task:
        """Mark a task as completed; completing it twice is a no-op"""
        index = self._find(task_id)
        task = self._task_list.tasks[index]

        if task.completed:
            logger.debug(f"Task {task_id} already completed")
            return task.model_copy()

        task.completed = True

        def undo() -> None:
            task.completed = False

        self._persist(f"completing task {task_id}", undo)
        return task.model_copy()

    def delete_task(self, task_id: int) -> Task:
        """Remove a task; its id is never handed out again"""
        index = self._find(task_id)
        tasks = self._task_list.tasks
        removed = tasks.pop(index)

        def undo() -> None:
            tasks.insert(index, removed)

        self._persist(f"deleting task {task_id}", undo)
        return removed.model_copy()

    # ========================================
    # HELPER METHODS
    # ========================================

    def _find(self, task_id: int) -> int:
        if isinstance(task_id, bool) or task_id <= 0:
            raise InvalidIDError(task_id)
        index = self._task_list.find_index(task_id)
        if index is None:
            raise TaskNotFoundError(task_id)
        return index
