"""Text drawing of a binary tree, one row of text per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintrees_kit.node import Node


def _put(row: list[str], index: int, char: str) -> None:
    if index >= len(row):
        row.extend(" " * (index + 1 - len(row)))
    row[index] = char


def _place(tree: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _place(tree.left, offset, level + 1, rows)
    right = _place(tree.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows[level], offset + left + i, char)
    if level:
        above = rows[level - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, each row ending in a newline; empty for None."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _place(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))