"""
TODOLIST - Personal Task Tracker
================================

A small todo list persisted to a JSON file, driven either by a one-shot
CLI (`todo add ...`) or an interactive shell (`todo-shell`).

Usage:
    from todolist import TaskManager

    manager = TaskManager("todo.json")
    manager.load()

    task = manager.add_task("Buy milk")
    manager.complete_task(task.id)
    manager.save()

    print(manager.get_report())
"""

from .schema import Task, TaskList

from .manager import (
    DEFAULT_TASKS_FILE,
    TaskManager,
    TaskError,
    TaskNotFoundError,
    TaskFileError,
    TaskStorageError,
)

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskList",
    "Task",
    "TaskError",
    "TaskNotFoundError",
    "TaskFileError",
    "TaskStorageError",
    "DEFAULT_TASKS_FILE",
]
