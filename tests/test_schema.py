# tests/test_schema.py

from todolist.schema import Task, TaskList


def test_new_task_defaults_to_incomplete() -> None:
    task = Task(id=1, title="Buy milk")
    assert task.completed is False


def test_missing_fields_take_zero_values() -> None:
    task_list = TaskList.model_validate({"tasks": [{"title": "no id"}]})
    assert task_list.tasks[0].id == 0
    assert task_list.tasks[0].completed is False


def test_null_tasks_reads_as_empty() -> None:
    task_list = TaskList.model_validate({"tasks": None})
    assert task_list.tasks == []


def test_next_id_is_not_serialized() -> None:
    task_list = TaskList(tasks=[Task(id=4, title="x")])
    task_list.recompute_next_id()
    assert task_list.model_dump(mode="json") == {
        "tasks": [{"id": 4, "title": "x", "completed": False}]
    }


def test_recompute_next_id() -> None:
    task_list = TaskList()
    assert task_list.recompute_next_id() == 1

    task_list.tasks = [Task(id=1), Task(id=3), Task(id=5)]
    assert task_list.recompute_next_id() == 6


def test_allocate_id_increments() -> None:
    task_list = TaskList()
    assert task_list.allocate_id() == 1
    assert task_list.allocate_id() == 2
    assert task_list.next_id == 3


def test_find_returns_first_match() -> None:
    task_list = TaskList(tasks=[Task(id=2, title="a"), Task(id=2, title="b")])
    assert task_list.find(2) == 0
    assert task_list.find(9) is None


def test_progress() -> None:
    assert TaskList().progress_pct == 0

    task_list = TaskList(
        tasks=[Task(id=1, completed=True), Task(id=2), Task(id=3)]
    )
    assert task_list.completed_count == 1
    assert task_list.progress_pct == 33
