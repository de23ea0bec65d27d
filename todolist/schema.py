"""
TODOLIST - Task Schema Definition
=================================
pydantic models for a single to-do item and the persisted collection.

The JSON produced by TaskList.model_dump_json() is the on-disk contract:

    {
      "tasks": [
        {"id": 1, "description": "...", "completed": false,
         "created_at": "2026-10-19T08:30:00.123456Z"}
      ],
      "next_id": 2
    }
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """Individual to-do item"""
    model_config = ConfigDict(strict=True)

    id: int = Field(gt=0)
    description: str
    completed: bool = False
    created_at: datetime = Field(default_factory=utc_now)


class TaskList(BaseModel):
    """Complete task collection - what gets written to disk"""
    model_config = ConfigDict(strict=True)

    tasks: List[Task] = Field(default_factory=list)

    # Authoritative as persisted; never recomputed from task ids
    next_id: int = Field(default=1, ge=1)

    @field_validator("tasks", mode="before")
    @classmethod
    def null_tasks_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="after")
    def next_id_required_with_tasks(self) -> "TaskList":
        # Only an empty list may fall back to next_id = 1
        if self.tasks and "next_id" not in self.model_fields_set:
            raise ValueError("next_id is required when tasks are present")
        return self

    @classmethod
    def empty(cls) -> "TaskList":
        return cls(tasks=[], next_id=1)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self.tasks if t.completed)

    @property
    def progress_pct(self) -> int:
        if not self.tasks:
            return 0
        return int((self.completed_count / len(self.tasks)) * 100)

    def find_index(self, task_id: int) -> Optional[int]:
        """Position of the task with this id, or None"""
        for i, task in enumerate(self.tasks):
            if task.id == task_id:
                return i
        return None
