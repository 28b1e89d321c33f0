"""The task record shared by the store, the helpers and the Markdown tools."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum, auto

INVALID_DB_ID = -1


class Priority(IntEnum):
    """Task priority; the integer value is what the database stores."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


class SupportiveRole(Enum):
    """Task properties that a view may display or edit."""

    PRIORITY = auto()
    START_FROM = auto()
    END_AT = auto()
    DESCRIPTION = auto()
    MAIN_TASK = auto()


@dataclass(eq=False)
class Task:
    """A to-do item, optionally nested under a parent task.

    Two tasks compare equal when they carry the same database id.
    """

    main_task: str = ""
    description: str = ""
    priority: Priority = Priority.MEDIUM
    start_from: datetime | None = None
    end_at: datetime | None = None
    group_name: str = ""
    parent_id: int = INVALID_DB_ID
    id: int = INVALID_DB_ID
    is_finished: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]

    def set_parent(self, parent: Task) -> None:
        """Make this task a child of ``parent``."""
        self.parent_id = parent.id

    def clear_parent(self) -> None:
        """Detach this task from any parent."""
        self.parent_id = INVALID_DB_ID

    def copy(self) -> Task:
        """Return an independent copy with the same fields."""
        return dataclasses.replace(self)