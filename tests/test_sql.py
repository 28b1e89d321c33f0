import sqlite3
from datetime import datetime

import pytest

from cctodo.sql import id_group, insert_clause, task_from_row
from cctodo.task import INVALID_DB_ID, Priority, Task

CREATE_TABLE = (
    "CREATE TABLE TodoTable ("
    "ID INTEGER PRIMARY KEY AUTOINCREMENT, MainTask TEXT, Descriptions TEXT, "
    "Priority INTEGER, BeginDate TEXT, EndDate TEXT, BelongingGroup TEXT, "
    "Parent INTEGER, isFinished INTEGER)"
)


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.execute(CREATE_TABLE)
    yield conn
    conn.close()


def test_id_group_single():
    assert id_group([3]) == "( 3 )"


def test_id_group_many():
    assert id_group([1, 2, 3]) == "( 1,2,3 )"


def test_id_group_empty_raises():
    with pytest.raises(ValueError):
        id_group([])


def test_insert_clause_starts_with_column_list():
    clause = insert_clause(Task(main_task="x"))
    assert clause.startswith(
        "(MainTask, Descriptions, Priority, "
        "BeginDate, EndDate, BelongingGroup, Parent, isFinished) VALUES "
    )


def _insert_and_fetch(conn, task):
    cursor = conn.execute("INSERT INTO TodoTable " + insert_clause(task))
    row = conn.execute(
        "SELECT * FROM TodoTable WHERE ID = ?", (cursor.lastrowid,)
    ).fetchone()
    return cursor.lastrowid, task_from_row(row)


def test_insert_then_read_round_trip(connection):
    task = Task(
        main_task="buy milk",
        description="two bottles",
        priority=Priority.HIGH,
        start_from=datetime(2024, 3, 1, 9, 0, 0),
        end_at=datetime(2024, 3, 1, 17, 30, 0),
        group_name="errands",
        parent_id=4,
        is_finished=True,
    )
    row_id, loaded = _insert_and_fetch(connection, task)
    assert loaded.id == row_id
    assert loaded.main_task == task.main_task
    assert loaded.description == task.description
    assert loaded.priority is Priority.HIGH
    assert loaded.start_from == task.start_from
    assert loaded.end_at == task.end_at
    assert loaded.group_name == task.group_name
    assert loaded.parent_id == task.parent_id
    assert loaded.is_finished is True


def test_round_trip_keeps_quotes_and_missing_dates(connection):
    task = Task(main_task="don't forget", description="it's 'quoted'")
    _, loaded = _insert_and_fetch(connection, task)
    assert loaded.main_task == task.main_task
    assert loaded.description == task.description
    assert loaded.start_from is None
    assert loaded.end_at is None
    assert loaded.parent_id == INVALID_DB_ID
    assert loaded.is_finished is False


def test_task_from_row_with_nulls_uses_defaults():
    row = {
        "ID": None,
        "MainTask": None,
        "Descriptions": None,
        "Priority": None,
        "BeginDate": None,
        "EndDate": None,
        "BelongingGroup": None,
        "Parent": None,
        "isFinished": None,
    }
    task = task_from_row(row)
    assert task.main_task == ""
    assert task.description == ""
    assert task.priority is Priority.LOW
    assert task.start_from is None
    assert task.is_finished is False


def test_task_from_row_rejects_unknown_priority():
    row = {
        "ID": 1,
        "MainTask": "x",
        "Descriptions": "",
        "Priority": 9,
        "BeginDate": "",
        "EndDate": "",
        "BelongingGroup": "",
        "Parent": -1,
        "isFinished": 0,
    }
    with pytest.raises(ValueError):
        task_from_row(row)