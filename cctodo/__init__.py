"""To-do tasks kept in SQLite, with a task tree that can be read from and written to Markdown outlines."""

__version__ = "0.1.0"

__all__ = [
    "database",
    "helpers",
    "markdown_export",
    "markdown_import",
    "schema",
    "sql",
    "store",
    "task",
    "task_list",
]