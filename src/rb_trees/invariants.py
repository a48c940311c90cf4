"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the stats scripts and the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rb_trees.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from rb_trees.rb_tree_base import RBTreeBase
    from rb_trees.tree_stats import Stats

# Hold after every insert and delete
TREE_FLAGS = (
    "is_search_tree",
    "counts_positive",
)

# Hold after insert-only histories; deletion does not rebalance
COLOUR_FLAGS = (
    "root_is_black",
    "no_red_red",
    "black_balanced",
)


class InvariantError(Exception):
    """Raised when a red-black tree invariant is violated."""


def assert_tree_invariants_raise(
    t: RBTreeBase,
    stats: Stats,
    check_colours: bool = True,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    flags = TREE_FLAGS + COLOUR_FLAGS if check_colours else TREE_FLAGS
    for flag in flags:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if not t.is_empty():
        if stats.node_count <= 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
        if stats.item_count < stats.node_count:
            raise InvariantError(
                f"Invariant failed: item_count={stats.item_count} < node_count={stats.node_count}"
            )
        if stats.height <= 0:
            raise InvariantError(f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree")
        if stats.least_key is None:
            raise InvariantError("Invariant failed: least_key is None for non-empty tree")
        if stats.greatest_key is None:
            raise InvariantError("Invariant failed: greatest_key is None for non-empty tree")

        size = t.item_count()
        if size != stats.item_count:
            raise InvariantError(
                f"Invariant failed: t.item_count()={size} ≠ stats.item_count={stats.item_count}"
            )


def check_inorder_keys_and_counts(
    tree: RBTreeBase,
    expected_counts: dict | None = None,
) -> tuple[list, bool, bool]:
    """Walk the inorder traversal and validate key order / occurrence counts.

    ``expected_counts`` maps each key that should be present to its count.

    Returns
    -------
    (keys, presence_ok, order_ok)
        ``keys`` lists every visited key, one entry per occurrence.
    """
    keys: list = []
    tree.inorder(keys.append)

    order_ok = all(a <= b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected_counts is not None:
        seen: dict = {}
        for key in keys:
            seen[key] = seen.get(key, 0) + 1
        presence_ok = seen == {k: c for k, c in expected_counts.items() if c > 0}

    if not order_ok:
        logger.warning("inorder keys out of order: %r", keys)
    return keys, presence_ok, order_ok
