"""
TODOLIST - Task Manager
=======================
Owns the in-memory task list and its JSON file.

The manager never touches the disk on its own: front ends call load()
once at startup and save() after every successful mutation.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from .schema import Task, TaskList

logger = logging.getLogger("todolist")

DEFAULT_TASKS_FILE = "todo.json"

PathLike = Union[str, Path]


class TaskError(Exception):
    """Base class for task store errors"""


class TaskNotFoundError(TaskError):
    """No task carries the requested id"""

    def __init__(self, task_id: int):
        super().__init__(f"task with ID {task_id} not found")
        self.task_id = task_id


class TaskFileError(TaskError):
    """Task file exists but is not a valid task document"""

    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)


class TaskStorageError(TaskError):
    """Task file could not be read or written"""

    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)


class TaskManager:
    """
    Task store backed by a single JSON file

    Primary storage: todo.json (or whatever tasks_file points at)

    Ids are handed out from a counter that is recomputed on load as
    max(existing ids) + 1, so ids stay unique but may have gaps after
    deletions. Lookups are linear and act on the first matching id.
    """

    def __init__(self, tasks_file: PathLike = DEFAULT_TASKS_FILE):
        self._tasks_file = Path(tasks_file)
        self._task_list = TaskList()

    @property
    def tasks_file(self) -> Path:
        return self._tasks_file

    @property
    def next_id(self) -> int:
        return self._task_list.next_id

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def save(self, path: Optional[PathLike] = None) -> None:
        """Write the task list to disk, replacing the file's contents"""
        file_path = Path(path) if path is not None else self._tasks_file
        data = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

        # Encode before opening so a bad title never truncates the file
        try:
            payload = data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise TaskStorageError(file_path, f"title is not valid text ({e.reason})") from e

        try:
            with open(file_path, "wb") as f:
                f.write(payload)
        except OSError as e:
            raise TaskStorageError(file_path, e.strerror or str(e)) from e

        logger.info(f"✅ Saved {len(self._task_list.tasks)} tasks to {file_path}")

    def load(self, path: Optional[PathLike] = None) -> None:
        """
        Replace the in-memory list with the contents of the file.

        A missing file is an empty list, not an error. On any failure the
        store is left empty with the counter back at 1.
        """
        file_path = Path(path) if path is not None else self._tasks_file
        self._task_list = TaskList()

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            logger.info(f"📂 No task file at {file_path}, starting empty")
            return
        except UnicodeDecodeError as e:
            raise TaskFileError(file_path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise TaskStorageError(file_path, e.strerror or str(e)) from e

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError, oversized integers, runaway nesting
            raise TaskFileError(file_path, f"malformed JSON ({e})") from e

        if not isinstance(data, dict):
            raise TaskFileError(file_path, "expected a JSON object with a 'tasks' list")

        try:
            task_list = TaskList.model_validate(data)
        except ValidationError as e:
            raise TaskFileError(
                file_path, f"invalid task document ({e.error_count()} errors)"
            ) from e

        task_list.recompute_next_id()
        self._task_list = task_list

        logger.info(
            f"📂 Loaded {len(task_list.tasks)} tasks from {file_path} "
            f"(next id {task_list.next_id})"
        )

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, title: str) -> Task:
        """Append a new incomplete task; callers validate the title"""
        task = Task(id=self._task_list.allocate_id(), title=title, completed=False)
        self._task_list.tasks.append(task)
        logger.info(f"➕ Added task {task.id}: {title}")
        return task

    def list_tasks(self) -> List[Task]:
        """Tasks in insertion order"""
        return list(self._task_list.tasks)

    def get_task(self, task_id: int) -> Task:
        index = self._task_list.find(task_id)
        if index is None:
            raise TaskNotFoundError(task_id)
        return self._task_list.tasks[index]

    def complete_task(self, task_id: int) -> Task:
        """Mark the first task with this id as completed"""
        task = self.get_task(task_id)
        task.completed = True
        logger.info(f"✅ Completed task {task_id}: {task.title}")
        return task

    def delete_task(self, task_id: int) -> Task:
        """Remove the first task with this id, keeping the others in order"""
        index = self._task_list.find(task_id)
        if index is None:
            raise TaskNotFoundError(task_id)
        task = self._task_list.tasks.pop(index)
        logger.info(f"🗑️ Deleted task {task_id}: {task.title}")
        return task

    # ========================================
    # REPORTING
    # ========================================

    def to_dict(self) -> dict:
        """The document exactly as save() would write it"""
        return self._task_list.model_dump(mode="json")

    def get_report(self) -> str:
        """Generate human-readable task table"""
        tl = self._task_list
        if not tl.tasks:
            return "No tasks found."

        rule = "-" * 22
        lines = ["ID | Status | Task", rule]
        for task in tl.tasks:
            mark = "✓" if task.completed else " "
            lines.append(f"{task.id:2d} | [{mark}]    | {task.title}")
        lines.extend([
            rule,
            f"{tl.completed_count}/{len(tl.tasks)} completed ({tl.progress_pct}%)",
        ])
        return "\n".join(lines)
