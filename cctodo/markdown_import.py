"""Import a Markdown outline of headings and lines as a tree of tasks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Union
import os

from .store import TaskStore
from .task import Task

PathLike = Union[str, "os.PathLike[str]"]

PLAIN_TEXT_LEVEL = 2**31 - 1
"""Level given to a line that is not a heading; deeper than any heading."""

TITLE_MARK = "#"
VALID_START = "# "
_SPECIAL_PREFIXES = ("- ", "#", "# ")


class ParseError(IntEnum):
    """Why an import failed."""

    NO_ERROR = 0
    NO_HEADER = 1
    PARSE_NOTHING_CONTAINS = 2
    FILE_ERROR_BASE = 3


_MESSAGES = {
    ParseError.NO_ERROR: "No error!",
    ParseError.NO_HEADER: "No header found!",
    ParseError.PARSE_NOTHING_CONTAINS: "Nothing to parse!",
    ParseError.FILE_ERROR_BASE: "File error!",
}


class MarkdownImportError(Exception):
    """The Markdown file could not be imported.

    ``file_error`` holds the operating-system error number when the file
    itself could not be read.
    """

    def __init__(
        self, code: ParseError, message: str | None = None, file_error: int | None = None
    ) -> None:
        self.code = code
        self.message = message if message is not None else _MESSAGES[code]
        self.file_error = file_error
        super().__init__(self.message)


@dataclass(eq=False)
class OutlineEntry:
    """One line of the outline, with the task it becomes and its place in the tree."""

    level: int
    task: Task
    parent: OutlineEntry | None = None
    children: list[OutlineEntry] = field(default_factory=list)

    @property
    def is_top(self) -> bool:
        return self.parent is None

    def attach_to(self, parent: OutlineEntry) -> None:
        self.parent = parent
        parent.children.append(self)


def heading_level(line: str) -> int:
    """Count the leading '#' marks; a line without any is plain text."""
    level = len(line) - len(line.lstrip(TITLE_MARK))
    return level if level else PLAIN_TEXT_LEVEL


def clean_line(line: str) -> str:
    """Strip list and heading marks and surrounding whitespace from a line."""
    for prefix in _SPECIAL_PREFIXES:
        while line.startswith(prefix):
            line = line[len(prefix):]
    return line.strip()


def _find_parent(entries: list[OutlineEntry], index: int) -> OutlineEntry | None:
    """Parent of a line that is shallower than the line before it."""
    level = entries[index].level
    father_level = next(
        (entry.level for entry in reversed(entries) if entry.level < level), None
    )
    if father_level is None:
        return None
    return next(
        (entry for entry in entries[:index] if entry.level == father_level),
        entries[0],
    )


def build_outline(text: str) -> list[OutlineEntry]:
    """Turn Markdown text into outline entries, in document order.

    The first line must be a ``# `` title; it is dropped, as are empty lines.
    Raises MarkdownImportError when there is nothing to parse or no title.
    """
    lines = text.split("\n")
    if len(lines) <= 1:
        raise MarkdownImportError(ParseError.PARSE_NOTHING_CONTAINS)
    if not lines[0].startswith(VALID_START):
        raise MarkdownImportError(ParseError.NO_HEADER)

    entries = [
        OutlineEntry(heading_level(line), Task(main_task=clean_line(line)))
        for line in lines[1:]
        if line != ""
    ]

    previous_level = None
    for index, entry in enumerate(entries):
        if previous_level is not None:
            if entry.level < previous_level:
                parent = _find_parent(entries, index)
            elif entry.level == previous_level:
                parent = entries[index - 1].parent
            else:
                parent = entries[index - 1]
            if parent is not None:
                entry.attach_to(parent)
        previous_level = entry.level
    return entries


class MarkdownImporter:
    """Reads a Markdown outline and stores each line as a task."""

    def __init__(self, store: TaskStore | None = None) -> None:
        self._store = store
        self.error: ParseError = ParseError.NO_ERROR
        self.error_string: str = _MESSAGES[ParseError.NO_ERROR]

    @property
    def store(self) -> TaskStore:
        if self._store is None:
            self._store = TaskStore()
        return self._store

    def parse(self, path: PathLike) -> list[int]:
        """Import the file at ``path``; return the ids of the stored tasks.

        Parents are stored before their children, and each child carries the
        id of its parent. Raises MarkdownImportError on failure, and records
        the failure in ``error`` and ``error_string``.
        """
        try:
            try:
                text = Path(path).read_text(encoding="utf-8")
            except OSError as exc:
                raise MarkdownImportError(
                    ParseError.FILE_ERROR_BASE,
                    exc.strerror or str(exc),
                    file_error=exc.errno,
                ) from exc
            outline = build_outline(text)
        except MarkdownImportError as exc:
            self.error = exc.code
            self.error_string = exc.message
            raise

        ids = []
        for entry in outline:
            if entry.parent is not None:
                entry.task.set_parent(entry.parent.task)
            ids.append(self.store.add(entry.task))
        return ids