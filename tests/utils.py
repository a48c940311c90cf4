"""Utility functions for testing red-black tree invariants."""

from typing import Optional

from rb_trees.invariants import COLOUR_FLAGS, TREE_FLAGS
from rb_trees.rb_tree_base import RBTreeBase
from rb_trees.tree_stats import Stats


def assert_tree_invariants_tc(
    tc,
    t: RBTreeBase,
    stats: Stats,
    err_msg: Optional[str] = "",
    check_colours: bool = True,
) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    flags = TREE_FLAGS + COLOUR_FLAGS if check_colours else TREE_FLAGS
    for flag in flags:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertGreaterEqual(
            stats.item_count, stats.node_count,
            f"Invariant failed: item_count={stats.item_count} < node_count\n\n{err_msg}"
        )
        tc.assertGreater(
            stats.height, 0,
            f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_key,
            f"Invariant failed: least_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_key,
            f"Invariant failed: greatest_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertEqual(
            t.item_count(), stats.item_count,
            f"Invariant failed: item_count()={t.item_count()} ≠ stats.item_count={stats.item_count}\n\n{err_msg}"
        )
