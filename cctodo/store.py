"""Adding, updating, deleting and querying tasks in the to-do table."""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time, timedelta
from typing import Any

from . import schema
from .database import DatabaseError, ErrorCode, TodoDatabase, get_instance
from .helpers import format_datetime, to_value_map
from .sql import id_group, insert_clause, task_from_row
from .task import Priority, Task

_DAY_START = time(0, 0, 0)
_DAY_END = time(23, 59, 59)


def _day_bounds(day: date) -> tuple[str, str]:
    return (
        format_datetime(datetime.combine(day, _DAY_START)),
        format_datetime(datetime.combine(day, _DAY_END)),
    )


class TaskStore:
    """Task persistence on top of a :class:`TodoDatabase`."""

    _add_lock = threading.Lock()

    def __init__(self, database: TodoDatabase | None = None) -> None:
        self._database = database if database is not None else get_instance()

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        conn = self._database.connection()
        try:
            with conn:
                return conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(ErrorCode.STATEMENT_ERROR, str(exc)) from exc

    def _select(self, where: str = "", params: Sequence[Any] = ()) -> list[Task]:
        conn = self._database.connection()
        sql = f"SELECT * FROM {schema.TABLE} {where}"
        try:
            rows = conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(ErrorCode.STATEMENT_ERROR, str(exc)) from exc
        return [task_from_row(row) for row in rows]

    # -- writing -----------------------------------------------------------

    def add(self, task: Task) -> int:
        """Insert ``task``, store the new id on it and return that id."""
        with self._add_lock:
            cursor = self._execute(f"INSERT INTO {schema.TABLE} " + insert_clause(task))
            task.id = cursor.lastrowid
        return task.id

    def update(self, task: Task) -> bool:
        """Write every field of ``task`` to its row; tell whether a row changed."""
        cursor = self._execute(
            f"UPDATE {schema.TABLE} SET {to_value_map(task)} WHERE {schema.KEY_ID} = ?",
            (task.id,),
        )
        return cursor.rowcount > 0

    def delete(self, task: Task) -> bool:
        """Delete the row of ``task``; the task object itself is kept."""
        cursor = self._execute(
            f"DELETE FROM {schema.TABLE} WHERE {schema.KEY_ID} = ?", (task.id,)
        )
        return cursor.rowcount > 0

    def delete_many(self, tasks: Iterable[Task]) -> int:
        """Delete the rows of several tasks; return how many were removed.

        Raises ValueError when no task is given.
        """
        clause = id_group(task.id for task in tasks)
        cursor = self._execute(
            f"DELETE FROM {schema.TABLE} WHERE {schema.KEY_ID} IN {clause}"
        )
        return cursor.rowcount

    # -- querying ----------------------------------------------------------

    def search_text(self, text: str) -> list[Task]:
        """Tasks whose main text contains ``text``."""
        return self._select(f"WHERE {schema.KEY_MAIN_TASK} LIKE ?", (f"%{text}%",))

    def active_at(self, moment: datetime) -> list[Task]:
        """Tasks that have started and not yet ended at ``moment``."""
        stamp = format_datetime(moment)
        return self._select(
            f"WHERE {schema.KEY_BEGIN_DATE} <= ? AND {schema.KEY_END_DATE} >= ?",
            (stamp, stamp),
        )

    def overlapping(self, start: datetime, end: datetime) -> list[Task]:
        """Tasks whose time span touches the span from ``start`` to ``end``."""
        return self._select(
            f"WHERE {schema.KEY_BEGIN_DATE} <= ? AND {schema.KEY_END_DATE} >= ?",
            (format_datetime(end), format_datetime(start)),
        )

    def within(self, start: datetime, end: datetime) -> list[Task]:
        """Tasks that start no earlier than ``start`` and end by ``end``."""
        return self._select(
            f"WHERE {schema.KEY_BEGIN_DATE} >= ? AND {schema.KEY_END_DATE} <= ?",
            (format_datetime(start), format_datetime(end)),
        )

    def children(self, parent: Task) -> list[Task]:
        """Direct children of ``parent``."""
        return self._select(f"WHERE {schema.KEY_PARENT_ID} = ?", (parent.id,))

    def parent(self, child: Task) -> Task | None:
        """The parent of ``child``, or ``None`` when it has none stored."""
        found = self._select(f"WHERE {schema.KEY_ID} = ?", (child.parent_id,))
        return found[0] if found else None

    def by_group(self, group: str) -> list[Task]:
        """Tasks belonging to ``group``."""
        return self._select(f"WHERE {schema.KEY_BELONGING_GROUP} = ?", (group,))

    def by_priority(self, priority: Priority) -> list[Task]:
        """Tasks with the given priority."""
        return self._select(f"WHERE {schema.KEY_PRIORITY} = ?", (int(priority),))

    def ending_before(self, moment: datetime) -> list[Task]:
        """Tasks whose deadline is at or before ``moment``."""
        return self._select(
            f"WHERE {schema.KEY_END_DATE} <= ?", (format_datetime(moment),)
        )

    def due_on(self, day: date) -> list[Task]:
        """Tasks whose deadline falls on ``day``."""
        return self._select(
            f"WHERE {schema.KEY_END_DATE} BETWEEN ? AND ?", _day_bounds(day)
        )

    def due_this_week(self) -> list[Task]:
        """Tasks due from the start of today to the end of the seventh day on."""
        today = date.today()
        return self._select(
            f"WHERE {schema.KEY_END_DATE} BETWEEN ? AND ?",
            (
                format_datetime(datetime.combine(today, _DAY_START)),
                format_datetime(datetime.combine(today + timedelta(days=7), _DAY_END)),
            ),
        )

    def by_ids(self, ids: Iterable[int]) -> list[Task]:
        """Tasks with any of the given ids."""
        wanted = [int(each) for each in ids]
        if not wanted:
            return []
        marks = ", ".join("?" for _ in wanted)
        return self._select(f"WHERE {schema.KEY_ID} IN ({marks})", wanted)

    def all(self) -> list[Task]:
        """Every stored task."""
        return self._select()

    # -- shortcuts used by the views ----------------------------------------

    def todays_tasks(self) -> list[Task]:
        """Tasks due today."""
        return self.due_on(date.today())

    def tasks_on(self, day: date) -> list[Task]:
        """Tasks whose span touches ``day``."""
        return self.overlapping(
            datetime.combine(day, _DAY_START), datetime.combine(day, _DAY_END)
        )

    def week_tasks(self) -> list[Task]:
        """Tasks due within the coming week."""
        return self.due_this_week()

    def high_priority_tasks(self) -> list[Task]:
        """Tasks of high priority."""
        return self.by_priority(Priority.HIGH)