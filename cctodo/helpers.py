"""Conversions between tasks, display labels and SQL value lists."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from . import schema
from .task import Priority, Task

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

PRIORITY_LABELS = {
    Priority.LOW: "低",
    Priority.MEDIUM: "中",
    Priority.HIGH: "高",
}


def format_datetime(value: datetime | None) -> str:
    """Render a timestamp as stored in the database; an unset one is empty."""
    if value is None:
        return ""
    return value.strftime(DATETIME_FORMAT)


def parse_datetime(text: str | None) -> datetime | None:
    """Read a stored timestamp; return ``None`` when it is not one."""
    if not text:
        return None
    try:
        return datetime.strptime(text, DATETIME_FORMAT)
    except (TypeError, ValueError):
        return None


def priority_from_int(value: int) -> Priority:
    """Turn a stored integer into a priority; raise ValueError if unknown."""
    return Priority(int(value))


def priority_label(priority: Priority | Task) -> str:
    """Return the display label of a priority or of a task's priority."""
    if isinstance(priority, Task):
        priority = priority.priority
    return PRIORITY_LABELS.get(priority, PRIORITY_LABELS[Priority.MEDIUM])


def priority_from_label(label: str) -> Priority:
    """Map a display label back to a priority; unknown labels mean medium."""
    for priority, text in PRIORITY_LABELS.items():
        if text == label:
            return priority
    return Priority.MEDIUM


def _sql_text(value: str) -> str:
    return value.replace("'", "''")


def to_value_map(task: Task) -> str:
    """Build the ``column = 'value'`` list used by an UPDATE statement."""
    pairs = (
        (schema.KEY_PRIORITY, str(int(task.priority))),
        (schema.KEY_BEGIN_DATE, format_datetime(task.start_from)),
        (schema.KEY_END_DATE, format_datetime(task.end_at)),
        (schema.KEY_DESCRIPTIONS, task.description),
        (schema.KEY_MAIN_TASK, task.main_task),
        (schema.KEY_PARENT_ID, str(task.parent_id)),
        (schema.KEY_BELONGING_GROUP, task.group_name),
        (schema.KEY_IS_FINISHED, str(int(task.is_finished))),
    )
    return ", ".join(f"{key} = '{_sql_text(value)}'" for key, value in pairs)


def find_parent_in(task: Task, tasks: Iterable[Task]) -> Task | None:
    """Return the task in ``tasks`` whose id is ``task``'s parent id."""
    return next((each for each in tasks if each.id == task.parent_id), None)


def describe(task: Task) -> str:
    """Return a multi-line, human-readable dump of a task."""
    lines = [
        "-------------- Task Printer Start ------------",
        f"Task ID: {task.id}",
        f"Priority: {int(task.priority)}",
        f"Start From: {format_datetime(task.start_from)}",
        f"End At: {format_datetime(task.end_at)}",
        f"Description: {task.description}",
        f"Main Task: {task.main_task}",
        f"Parent ID: {task.parent_id}",
        f"Group: {task.group_name}",
        f"isFinished: {task.is_finished}",
        "-------------- Task Printer End --------------",
    ]
    return "\n".join(lines)