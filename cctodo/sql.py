"""SQL fragments for the to-do table and conversion of result rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from . import schema
from .helpers import format_datetime, parse_datetime, priority_from_int
from .task import Task


def id_group(ids: Iterable[int]) -> str:
    """Render ids as an SQL tuple for an ``IN`` clause."""
    numbers = [str(int(each)) for each in ids]
    if not numbers:
        raise ValueError("an id group needs at least one id")
    return f"( {','.join(numbers)} )"


def _sql_text(value: str) -> str:
    return value.replace("'", "''")


def insert_clause(task: Task) -> str:
    """Build the column list and VALUES part of an INSERT for ``task``."""
    return (
        "(MainTask, Descriptions, Priority, "
        "BeginDate, EndDate, BelongingGroup, Parent, isFinished) VALUES "
        f"('{_sql_text(task.main_task)}', "
        f"'{_sql_text(task.description)}', {int(task.priority)}, "
        f"'{format_datetime(task.start_from)}', '{format_datetime(task.end_at)}', "
        f"'{_sql_text(task.group_name)}', '{task.parent_id}', "
        f"'{int(task.is_finished)}')"
    )


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def task_from_row(row: Mapping[str, Any]) -> Task:
    """Build a task from a result row addressed by column name."""
    return Task(
        main_task=_as_text(row[schema.KEY_MAIN_TASK]),
        description=_as_text(row[schema.KEY_DESCRIPTIONS]),
        start_from=parse_datetime(_as_text(row[schema.KEY_BEGIN_DATE])),
        end_at=parse_datetime(_as_text(row[schema.KEY_END_DATE])),
        priority=priority_from_int(_as_int(row[schema.KEY_PRIORITY])),
        group_name=_as_text(row[schema.KEY_BELONGING_GROUP]),
        id=_as_int(row[schema.KEY_ID]),
        parent_id=_as_int(row[schema.KEY_PARENT_ID]),
        is_finished=bool(_as_int(row[schema.KEY_IS_FINISHED])),
    )