"""Export a tree of tasks as a Markdown outline."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

LEAF_LEVEL = -1
"""Level that renders a line as plain text rather than a heading."""


@dataclass
class OutlineNode:
    """A task's text and the nodes nested under it."""

    text: str
    children: list[OutlineNode] = field(default_factory=list)


def markdown_line(level: int, text: str) -> str:
    """Render one line; ``level`` 1 is a second-level heading.

    The first-level heading is left for the document title.
    """
    prefix = "" if level == LEAF_LEVEL else "#" * (level + 1) + " "
    return f"{prefix}{text}\n"


def export_node(node: OutlineNode, level: int) -> str:
    """Render a node and its descendants; nodes without children are plain lines."""
    if not node.children:
        return markdown_line(LEAF_LEVEL, node.text)
    return markdown_line(level, node.text) + "".join(
        export_node(child, level + 1) for child in node.children
    )


def export_forest(roots: Iterable[OutlineNode]) -> str:
    """Render every top-level node in turn."""
    return "".join(export_node(root, 1) for root in roots)