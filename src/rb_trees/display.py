"""Pretty-printing and display utilities for red-black tree structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rb_trees.base import RBNode, is_red

if TYPE_CHECKING:
    from rb_trees.rb_tree_base import RBTreeBase


# ANSI colour codes
RED_CODE = '\033[31m'
RESET = '\033[0m'

INDENT = 4


def _label(node: RBNode, colour: bool) -> str:
    text = node.short_key()
    if node.count > 1:
        text = f"{text}×{node.count}"
    if not is_red(node):
        return text
    return f"{RED_CODE}{text}{RESET}" if colour else f"{text}(R)"


def print_pretty(tree: Optional[RBTreeBase], colour: bool = True) -> str:
    """
    Renders a red-black tree sideways:
      • The root is in the first column, each level indents by four spaces.
      • Right subtrees are printed above their parent, left subtrees below,
        so reading top to bottom gives keys in descending order.
      • Red nodes are printed in red (or suffixed with ``(R)`` when
        ``colour`` is False); counts above one are shown as ``key×n``.
    """
    from rb_trees.rb_tree_base import RBTreeBase

    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, RBTreeBase):
        raise TypeError(f"print_pretty() expects RBTreeBase, got {type(tree).__name__}")

    tree_type = type(tree).__name__
    if tree.is_empty():
        return f"{tree_type}: Empty"

    lines = [f"{tree_type}:"]

    def collect(node: Optional[RBNode], depth: int) -> None:
        if node is None:
            return
        collect(node.right, depth + 1)
        lines.append(" " * (INDENT * depth) + _label(node, colour))
        collect(node.left, depth + 1)

    collect(tree.node, 0)
    return "\n".join(lines)
