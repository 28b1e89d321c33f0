from datetime import date, datetime

import pytest
from freezegun import freeze_time

from cctodo.database import DatabaseError, ErrorCode, TodoDatabase
from cctodo.store import TaskStore
from cctodo.task import Priority, Task


@pytest.fixture
def store():
    db = TodoDatabase().open(":memory:")
    yield TaskStore(db)
    db.close()


def _make(name, start=None, end=None, **fields):
    return Task(main_task=name, start_from=start, end_at=end, **fields)


def _names(tasks):
    return sorted(task.main_task for task in tasks)


def test_add_round_trip(store):
    task = _make(
        "write report",
        datetime(2024, 11, 9, 9, 0, 0),
        datetime(2024, 11, 10, 18, 30, 0),
        description="it's important",
        priority=Priority.HIGH,
        group_name="work",
        is_finished=True,
    )
    new_id = store.add(task)
    assert new_id == task.id
    fetched = store.by_ids([task.id])
    assert len(fetched) == 1
    got = fetched[0]
    assert got.main_task == task.main_task
    assert got.description == task.description
    assert got.priority is Priority.HIGH
    assert got.start_from == task.start_from
    assert got.end_at == task.end_at
    assert got.group_name == task.group_name
    assert got.is_finished is True
    assert got.parent_id == task.parent_id


def test_add_assigns_increasing_ids(store):
    first = _make("a")
    second = _make("b")
    store.add(first)
    store.add(second)
    assert second.id > first.id


def test_update_changes_row(store):
    task = _make("draft")
    store.add(task)
    task.main_task = "final"
    task.is_finished = True
    assert store.update(task) is True
    got = store.by_ids([task.id])[0]
    assert got.main_task == "final"
    assert got.is_finished is True


def test_update_unsaved_task_changes_nothing(store):
    assert store.update(_make("ghost")) is False
    assert store.all() == []


def test_delete(store):
    keep, drop = _make("keep"), _make("drop")
    store.add(keep)
    store.add(drop)
    assert store.delete(drop) is True
    assert [task.id for task in store.all()] == [keep.id]


def test_delete_many(store):
    tasks = [_make(name) for name in ("a", "b", "c")]
    for task in tasks:
        store.add(task)
    assert store.delete_many(tasks[:2]) == 2
    assert [task.id for task in store.all()] == [tasks[2].id]


def test_delete_many_empty_raises(store):
    with pytest.raises(ValueError):
        store.delete_many([])


def test_search_text(store):
    store.add(_make("buy milk"))
    store.add(_make("write report"))
    assert _names(store.search_text("milk")) == ["buy milk"]


def test_time_queries(store):
    morning = _make("morning", datetime(2024, 1, 1, 9), datetime(2024, 1, 1, 11))
    noon = _make("noon", datetime(2024, 1, 1, 12), datetime(2024, 1, 1, 13))
    store.add(morning)
    store.add(noon)
    assert _names(store.active_at(datetime(2024, 1, 1, 10))) == ["morning"]
    assert _names(
        store.overlapping(datetime(2024, 1, 1, 10, 30), datetime(2024, 1, 1, 12, 30))
    ) == ["morning", "noon"]
    assert store.overlapping(
        datetime(2024, 1, 1, 11, 30), datetime(2024, 1, 1, 11, 45)
    ) == []
    assert _names(
        store.within(datetime(2024, 1, 1, 8), datetime(2024, 1, 1, 11, 30))
    ) == ["morning"]
    assert _names(store.ending_before(datetime(2024, 1, 1, 11))) == ["morning"]


def test_children_and_parent(store):
    root = _make("root")
    store.add(root)
    child = _make("child")
    child.set_parent(root)
    store.add(child)
    assert [task.id for task in store.children(root)] == [child.id]
    assert store.parent(child).id == root.id
    assert store.parent(root) is None


def test_by_group_with_quote(store):
    store.add(_make("a", group_name="team's"))
    store.add(_make("b", group_name="home"))
    assert _names(store.by_group("team's")) == ["a"]


def test_by_priority_and_high(store):
    store.add(_make("urgent", priority=Priority.HIGH))
    store.add(_make("later", priority=Priority.LOW))
    assert _names(store.by_priority(Priority.LOW)) == ["later"]
    assert _names(store.high_priority_tasks()) == ["urgent"]


def test_due_on(store):
    store.add(_make("today", end=datetime(2024, 3, 5, 23, 0)))
    store.add(_make("tomorrow", end=datetime(2024, 3, 6, 0, 0)))
    assert _names(store.due_on(date(2024, 3, 5))) == ["today"]


def test_due_this_week_and_today(store):
    store.add(_make("past", end=datetime(2024, 11, 8, 12, 0)))
    store.add(_make("now", end=datetime(2024, 11, 9, 15, 0)))
    store.add(_make("edge", end=datetime(2024, 11, 16, 23, 59, 59)))
    store.add(_make("beyond", end=datetime(2024, 11, 17, 0, 0, 0)))
    with freeze_time("2024-11-09 10:00:00"):
        assert _names(store.due_this_week()) == ["edge", "now"]
        assert _names(store.week_tasks()) == ["edge", "now"]
        assert _names(store.todays_tasks()) == ["now"]


def test_tasks_on(store):
    store.add(_make("span", datetime(2024, 5, 1, 8), datetime(2024, 5, 3, 8)))
    store.add(_make("before", datetime(2024, 4, 1, 8), datetime(2024, 4, 2, 8)))
    assert _names(store.tasks_on(date(2024, 5, 2))) == ["span"]


def test_by_ids_empty(store):
    store.add(_make("a"))
    assert store.by_ids([]) == []


def test_all(store):
    for name in ("x", "y"):
        store.add(_make(name))
    assert _names(store.all()) == ["x", "y"]


def test_store_on_closed_database_raises():
    with pytest.raises(DatabaseError) as info:
        TaskStore(TodoDatabase()).all()
    assert info.value.code is ErrorCode.CONNECTION_ERROR