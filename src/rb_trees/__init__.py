"""
rb_trees — Red-black trees as ordered multisets of string keys.

Quick-start imports::

    from rb_trees import create_rbtree

    tree = create_rbtree()
    tree = tree.insert("banana")
    tree.search("banana")   # -> 1
"""

# Shared primitives
from rb_trees.base import BLACK, RED, Colour, RBNode

# Red-black tree
from rb_trees.display import print_pretty
from rb_trees.factory import create_rbtree, make_rbtree_classes
from rb_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_inorder_keys_and_counts,
)
from rb_trees.rb_tree_base import RBTreeBase

# Stats & invariants
from rb_trees.tree_stats import Stats, rbtree_stats_

__all__ = [
    # Primitives
    "BLACK",
    "Colour",
    "InvariantError",
    "RBNode",
    # Red-black tree
    "RBTreeBase",
    "RED",
    # Stats & invariants
    "Stats",
    "assert_tree_invariants_raise",
    "check_inorder_keys_and_counts",
    "create_rbtree",
    "make_rbtree_classes",
    "print_pretty",
    "rbtree_stats_",
]
