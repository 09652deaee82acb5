"""
TODOLIST - Task Schema Definition
=================================
Pydantic models for the persisted task document.

On disk the document is {"tasks": [...]}; the next id to hand out is
derived from the ids present and is never written back.
"""

from typing import List, Optional

from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)


class Task(BaseModel):
    """Individual todo item; a stored "7" or "yes" is rejected, not coerced"""
    id: StrictInt = 0
    title: StrictStr = ""
    completed: StrictBool = False


class TaskList(BaseModel):
    """Ordered task collection plus the derived next-id counter"""
    tasks: List[Task] = Field(default_factory=list)

    _next_id: int = PrivateAttr(default=1)

    @field_validator("tasks", mode="before")
    @classmethod
    def _null_tasks(cls, value):
        # A document written with "tasks": null reads as an empty list
        return [] if value is None else value

    @property
    def next_id(self) -> int:
        return self._next_id

    def recompute_next_id(self) -> int:
        """Reset the counter to one past the highest id (1 when empty)"""
        self._next_id = max((t.id for t in self.tasks), default=0) + 1
        return self._next_id

    def allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def find(self, task_id: int) -> Optional[int]:
        """Index of the first task with this id, or None"""
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index
        return None

    # Completion tracking
    @property
    def completed_count(self) -> int:
        return sum(1 for t in self.tasks if t.completed)

    @property
    def progress_pct(self) -> int:
        if not self.tasks:
            return 0
        return int((self.completed_count / len(self.tasks)) * 100)
