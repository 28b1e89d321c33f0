"""A list of tasks that a view works on."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task import Task

logger = logging.getLogger(__name__)


class TaskList:
    """Holds the tasks currently shown; tasks are matched by identity."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def manage(self, tasks: list[Task]) -> None:
        """Replace the held tasks with copies of ``tasks`` and empty ``tasks``."""
        self._tasks = [task.copy() for task in tasks]
        tasks.clear()

    def add(self, task: Task) -> None:
        """Hold ``task`` itself."""
        self._tasks.append(task)

    def clear(self) -> None:
        """Drop every held task."""
        self._tasks.clear()

    def borrow(self) -> list[Task]:
        """Return a new list of the held tasks."""
        return list(self._tasks)

    def release(self, tasks: Iterable[Task]) -> None:
        """Drop the given tasks; tasks not held are skipped with a warning."""
        for task in tasks:
            index = next(
                (i for i, held in enumerate(self._tasks) if held is task), None
            )
            if index is None:
                logger.warning("Deleting a not existing task!")
                continue
            del self._tasks[index]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)