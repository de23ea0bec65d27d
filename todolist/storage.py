"""
TODOLIST - Persistence Store
============================
Loads and saves the TaskList as one JSON file.

Saves are atomic: the payload goes to a sibling "<file>.tmp" first and is
then renamed over the real file, so readers only ever see the old complete
content or the new complete content.
"""

import contextlib
import logging
import os
from pathlib import Path
from typing import Protocol, Union

from pydantic import ValidationError

from .errors import InvalidFormatError, StorageReadError, StorageWriteError
from .schema import TaskList

logger = logging.getLogger("todolist.storage")


class Storage(Protocol):
    """What TaskManager needs from a backing store"""

    def load(self) -> TaskList:
        ...

    def save(self, task_list: TaskList) -> None:
        ...


class FileStorage:
    """
    JSON file store bound to a single path.

    Stateless between calls. Never retries: every failure is raised as a
    StorageError subclass with the underlying exception chained.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    @property
    def temp_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    def load(self) -> TaskList:
        """Read the task file; a missing file is an empty list, not an error"""
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug(f"No task file at {self.path}, starting empty")
            return TaskList.empty()
        except OSError as e:
            raise StorageReadError(self.path, e.strerror or str(e)) from e

        try:
            task_list = TaskList.model_validate_json(data)
        except ValidationError as e:
            raise InvalidFormatError(self.path, f"{e.error_count()} validation error(s)") from e

        logger.debug(f"📂 Loaded {len(task_list.tasks)} task(s) from {self.path}")
        return task_list

    def save(self, task_list: TaskList) -> None:
        """Write the whole list via temp file + rename"""
        try:
            payload = task_list.model_dump_json(indent=2)
        except (ValueError, TypeError) as e:
            raise StorageWriteError(self.path, f"cannot serialize task list: {e}") from e

        tmp = self.temp_path
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageWriteError(self.path, e.strerror or str(e)) from e

        logger.debug(f"💾 Saved {len(task_list.tasks)} task(s) to {self.path}")
