"""Connection to the SQLite file that holds the to-do table."""

from __future__ import annotations

import logging
import os
import sqlite3
import threading
from enum import Enum
from typing import Union

from . import schema

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_CREATE_TABLE = f"""
CREATE TABLE IF NOT EXISTS {schema.TABLE} (
    {schema.KEY_ID} INTEGER PRIMARY KEY AUTOINCREMENT,
    {schema.KEY_MAIN_TASK} TEXT,
    {schema.KEY_DESCRIPTIONS} TEXT,
    {schema.KEY_PRIORITY} INTEGER,
    {schema.KEY_BEGIN_DATE} TEXT,
    {schema.KEY_END_DATE} TEXT,
    {schema.KEY_BELONGING_GROUP} TEXT,
    {schema.KEY_PARENT_ID} INTEGER,
    {schema.KEY_IS_FINISHED} INTEGER
)
"""


class ErrorCode(Enum):
    """Kinds of database failure."""

    NO_ERROR = 0
    CONNECTION_ERROR = 1
    STATEMENT_ERROR = 2
    TRANSACTION_ERROR = 3
    UNKNOWN_ERROR = 4


class DatabaseError(Exception):
    """A database operation failed; ``code`` tells what kind of failure."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class TodoDatabase:
    """An SQLite database holding the to-do table."""

    def __init__(self) -> None:
        self._connection: sqlite3.Connection | None = None
        self.path: PathLike | None = None

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def open(self, path: PathLike) -> TodoDatabase:
        """Open (creating if needed) the database at ``path``."""
        self.close()
        try:
            conn = sqlite3.connect(path)
        except sqlite3.Error as exc:
            raise DatabaseError(ErrorCode.CONNECTION_ERROR, str(exc)) from exc
        try:
            conn.row_factory = sqlite3.Row
            with conn:
                conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            conn.close()
            raise DatabaseError(ErrorCode.CONNECTION_ERROR, str(exc)) from exc
        self._connection = conn
        self.path = path
        self.reset_id_increment()
        return self

    def close(self) -> None:
        """Close the connection if one is open."""
        if self._connection is not None:
            logger.debug("Release database")
            self._connection.close()
            self._connection = None

    def reset_id_increment(self) -> None:
        """Set the autoincrement counter of the to-do table back to 1."""
        conn = self.connection()
        try:
            with conn:
                conn.execute(
                    "UPDATE sqlite_sequence SET seq = 1 WHERE name = ?",
                    (schema.TABLE,),
                )
        except sqlite3.Error as exc:
            logger.warning("Failed to reset ID increment: %s", exc)

    def connection(self) -> sqlite3.Connection:
        """Return the open connection; raise DatabaseError if none is open."""
        if self._connection is None:
            raise DatabaseError(ErrorCode.CONNECTION_ERROR, "database is not open")
        return self._connection

    def __enter__(self) -> TodoDatabase:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_instance: TodoDatabase | None = None
_instance_lock = threading.Lock()


def get_instance() -> TodoDatabase:
    """Return the process-wide database object, creating it on first use."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = TodoDatabase()
    return _instance