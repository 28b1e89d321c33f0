# cctodo

cctodo keeps to-do tasks in an SQLite database file.

Each task has these fields:

- a title (`main_task`) and a description;
- a priority: `Priority.LOW`, `Priority.MEDIUM` or `Priority.HIGH`;
- a start time and an end time;
- a group name;
- a finished flag;
- an optional parent task.

Tasks that point at a parent form a tree. You can build such a tree from a Markdown outline, and you can write a tree back out as Markdown.

## Installation

```
pip install .
```

With the test tools:

```
pip install .[test]
```

## Contents

- `cctodo.task`
  - `Task`: a dataclass. Two tasks are equal when their `id` is the same.
  - `Priority` and `SupportiveRole`: enums.
  - `Task.set_parent(parent)`, `Task.clear_parent()` and `Task.copy()`.
- `cctodo.schema`
  - The column names of the `TodoTable` table.
  - `is_key(key)`.
- `cctodo.helpers`
  - `format_datetime` and `parse_datetime` read and write the `YYYY-MM-DD HH:MM:SS` layout.
  - `priority_from_int` turns a stored number into a `Priority`.
  - `priority_label` and `priority_from_label` convert between a priority and its label (低, 中 or 高). An unknown label counts as medium.
  - `to_value_map(task)` builds the `column = 'value'` list for an UPDATE.
  - `find_parent_in(task, tasks)` finds the parent of a task in a list of tasks.
  - `describe(task)` returns a readable summary of a task.
- `cctodo.sql`
  - `insert_clause(task)` builds the column and VALUES part of an INSERT.
  - `id_group(ids)` builds an SQL tuple of ids. It raises `ValueError` when given no ids.
  - `task_from_row(row)` builds a `Task` from a result row.
- `cctodo.database`
  - `TodoDatabase.open(path)` opens the SQLite file. It creates the `TodoTable` table if the file does not have it yet, then sets the table's id counter back to 1.
  - `close()` closes the connection. `connection()` returns it. A `TodoDatabase` can also be used as a context manager.
  - `get_instance()` returns a single `TodoDatabase` shared by the whole process.
  - A failure raises `DatabaseError`, which carries an `ErrorCode`.
- `cctodo.store`: the `TaskStore` class.
  - Writing: `add` (stores the new id on the task and returns it), `update`, `delete` and `delete_many`.
  - By text: `search_text`.
  - By time: `active_at`, `overlapping`, `within`, `ending_before`, `due_on` and `due_this_week`.
  - By place in the tree: `children` and `parent`.
  - By field: `by_group`, `by_priority`, `by_ids` and `all`.
  - Shortcuts: `todays_tasks`, `tasks_on`, `week_tasks` and `high_priority_tasks`.
- `cctodo.task_list`
  - `TaskList`: an in-memory list of tasks with `manage`, `add`, `clear`, `borrow` and `release`.
- `cctodo.markdown_import`
  - `MarkdownImporter(store).parse(path)` reads a Markdown file, stores each line as a task and returns the new ids.
  - `build_outline(text)` builds the tree without storing anything.
  - `heading_level` and `clean_line` handle single lines.
  - Failures raise `MarkdownImportError`, which carries a `ParseError`.
- `cctodo.markdown_export`
  - `export_forest(roots)` renders a tree of `OutlineNode` items as Markdown.
  - `export_node` and `markdown_line` render a single node and a single line.

## Example

```python
from datetime import datetime

from cctodo.database import TodoDatabase
from cctodo.store import TaskStore
from cctodo.task import Priority, Task

with TodoDatabase().open("todo.db") as db:
    store = TaskStore(db)
    task = Task(
        main_task="Write report",
        priority=Priority.HIGH,
        start_from=datetime(2024, 11, 9, 9, 0),
        end_at=datetime(2024, 11, 9, 17, 0),
    )
    store.add(task)  # task.id now holds the new row id
    for t in store.high_priority_tasks():
        print(t.main_task)
```

## Markdown outlines

On import:

- The first line must be a `# ` title. It is dropped.
- Empty lines are skipped.
- The leading `#`, `- ` and `# ` marks are removed from each line, and so is the whitespace around it.
- A line deeper than the line before it becomes that line's child.
- A line at the same depth as the line before it becomes that line's sibling.
- A shallower line goes under the nearest shallower heading, or at the top of the tree if there is none.
- A line that is not a heading counts as deeper than any heading.

On export:

- A node with children becomes a heading. Top-level nodes get `##`, and each level below adds one `#`.
- A node without children becomes a plain line.

## What this package does not do

This package is a library. It has no command-line program and no graphical interface. It does not show tasks on screen and has no editing dialogs. Reading and writing tasks goes through the Python API above.

## Running the tests

```
pytest
```