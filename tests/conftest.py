# tests/conftest.py

import json
from pathlib import Path

import pytest

from todolist.manager import TaskManager


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "todo.json"


@pytest.fixture()
def manager(tasks_file: Path) -> TaskManager:
    """Fresh, empty manager pointed at a per-test file"""
    return TaskManager(tasks_file=tasks_file)


@pytest.fixture()
def write_tasks(tasks_file: Path):
    """Write a task document straight to disk, bypassing the manager"""

    def _write(tasks, **extra) -> Path:
        tasks_file.write_text(json.dumps({"tasks": tasks, **extra}), encoding="utf-8")
        return tasks_file

    return _write
