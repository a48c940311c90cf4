"""Statistics and invariant checking for red-black tree structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from rb_trees.base import BLACK, RBNode, is_black, is_red
from rb_trees.logging_config import get_logger

if TYPE_CHECKING:
    from rb_trees.rb_tree_base import RBTreeBase

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a red-black tree."""

    node_count: int
    item_count: int
    height: int
    black_height: int
    least_key: Any | None
    greatest_key: Any | None
    is_search_tree: bool
    counts_positive: bool
    root_is_black: bool
    no_red_red: bool
    black_balanced: bool


def _empty_stats() -> Stats:
    return Stats(
        node_count=0,
        item_count=0,
        height=0,
        black_height=0,
        least_key=None,
        greatest_key=None,
        is_search_tree=True,
        counts_positive=True,
        root_is_black=True,
        no_red_red=True,
        black_balanced=True,
    )


def _node_stats(node: Optional[RBNode]) -> Stats:
    if node is None:
        return _empty_stats()

    left = _node_stats(node.left)
    right = _node_stats(node.right)

    stats = _empty_stats()
    stats.node_count = 1 + left.node_count + right.node_count
    stats.item_count = node.count + left.item_count + right.item_count
    stats.height = 1 + max(left.height, right.height)

    # Black height excludes the (black) empty links; on a mismatch keep the
    # larger value so the figure stays an upper bound.
    stats.black_balanced = (
        left.black_balanced
        and right.black_balanced
        and left.black_height == right.black_height
    )
    stats.black_height = max(left.black_height, right.black_height)
    if node.colour is BLACK:
        stats.black_height += 1

    stats.counts_positive = node.count >= 1 and left.counts_positive and right.counts_positive

    stats.no_red_red = left.no_red_red and right.no_red_red
    if is_red(node) and (is_red(node.left) or is_red(node.right)):
        stats.no_red_red = False

    stats.is_search_tree = left.is_search_tree and right.is_search_tree
    if left.greatest_key is not None and not left.greatest_key < node.key:
        stats.is_search_tree = False
    if right.least_key is not None and not node.key < right.least_key:
        stats.is_search_tree = False

    stats.least_key = left.least_key if left.least_key is not None else node.key
    stats.greatest_key = right.greatest_key if right.greatest_key is not None else node.key
    return stats


def rbtree_stats_(t: Optional[RBTreeBase]) -> Stats:
    """
    Returns aggregated statistics for a red-black tree in **O(n)** time.

    Structural flags (``is_search_tree``, ``counts_positive``) must hold after
    any sequence of operations; the colour flags (``root_is_black``,
    ``no_red_red``, ``black_balanced``) are only guaranteed for insert-only
    histories.
    """
    if t is None or t.is_empty():
        return _empty_stats()

    stats = _node_stats(t.node)
    stats.root_is_black = is_black(t.node)
    logger.debug(
        "stats: nodes=%d items=%d height=%d black_height=%d",
        stats.node_count, stats.item_count, stats.height, stats.black_height,
    )
    return stats
