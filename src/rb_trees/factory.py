"""RBTree factory module."""

from typing import Dict, Tuple, Type

from rb_trees.base import RBNode
from rb_trees.rb_tree_base import RBTreeBase

SUPPORTED_KEY_TYPES = (str, bytes)

# Cache so that every tree of one key type shares the same classes
_CLASS_CACHE: Dict[type, Tuple[Type[RBTreeBase], Type[RBNode]]] = {}


def make_rbtree_classes(key_type: type = str) -> Tuple[Type[RBTreeBase], Type[RBNode]]:
    """
    Factory function to generate RB-tree classes specialized for a key type.

    Args:
        key_type: ``str`` or ``bytes``. Both compare byte-lexicographically
            (code-point order on ``str`` matches UTF-8 byte order).

    Returns:
        RBTreeK: Subclass of RBTreeBase with NodeClass=RBNodeK and KEY_TYPE=key_type
        RBNodeK: Subclass of RBNode

    Raises:
        ValueError: If key_type is not supported.
    """
    if key_type not in SUPPORTED_KEY_TYPES:
        raise ValueError(
            f"key_type must be one of {[k.__name__ for k in SUPPORTED_KEY_TYPES]}, "
            f"got {key_type!r}"
        )
    if key_type in _CLASS_CACHE:
        return _CLASS_CACHE[key_type]

    # 1) Create the node class
    RBNodeK = type(
        f"RBNode_{key_type.__name__}",
        (RBNode,),
        {"__slots__": ()},
    )

    # 2) Create the tree class
    RBTreeK = type(
        f"RBTree_{key_type.__name__}",
        (RBTreeBase,),
        {
            "NodeClass": RBNodeK,
            "KEY_TYPE": key_type,
            "__slots__": (),
        },
    )

    _CLASS_CACHE[key_type] = (RBTreeK, RBNodeK)
    return RBTreeK, RBNodeK


def create_rbtree(key_type: type = str) -> RBTreeBase:
    """
    Create a new, empty red-black tree for the given key type.

    Args:
        key_type: ``str`` (default) or ``bytes``

    Returns:
        An empty RBTree
    """
    RBTreeK, _ = make_rbtree_classes(key_type)
    return RBTreeK()
