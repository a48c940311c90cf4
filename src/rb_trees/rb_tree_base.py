"""Red-black tree base implementation"""

from __future__ import annotations
from typing import Callable, Iterator, Optional, Type

from rb_trees.base import (
    AbstractMultiset,
    BLACK,
    RED,
    Key,
    RBNode,
    debug_log,
    is_red,
    normalize_key,
)

PREORDER = "pre"
INORDER = "in"
POSTORDER = "post"


class RBTreeBase(AbstractMultiset):
    """
    A red-black tree is either empty or owns a single root RBNode.

    Mutating calls hand ownership of the nodes to the returned tree and leave
    the handle they were called on empty, so callers always rebind::

        tree = tree.insert("apple")
        tree = tree.delete("apple")

    Attributes:
        node (Optional[RBNode]): The root node. If None, the tree is empty.
    """
    __slots__ = ("node",)

    # set by factory
    NodeClass: Type[RBNode]
    KEY_TYPE: type

    def __init__(self, node: Optional[RBNode] = None):
        self.node: Optional[RBNode] = node

    def is_empty(self) -> bool:
        return self.node is None

    def __str__(self):
        name = self.__class__.__name__
        return f"Empty {name}" if self.is_empty() else f"{name}(node={self.node})"

    __repr__ = __str__

    def __len__(self) -> int:
        return self.item_count()

    def __contains__(self, key) -> bool:
        return self.search(key) > 0

    def __iter__(self) -> Iterator[Key]:
        return self.iter_inorder()

    # Public API
    def insert(self, key: Key) -> RBTreeBase:
        """
        Public method (O(log n)): Insert one occurrence of ``key``.

        A new key is stored in a red leaf and the insertion path is repaired
        bottom-up; an existing key just has its count incremented. The root is
        recoloured black afterwards.

        Args:
            key: The key to insert. Must match the tree's KEY_TYPE.

        Returns:
            RBTreeBase: The tree owning the updated nodes. ``self`` is left empty.

        Raises:
            TypeError: If key is None or has the wrong type.
        """
        key = normalize_key(key, self.KEY_TYPE, "insert")
        # The descent allocates before it relinks anything, so a failed
        # allocation leaves the tree untouched.
        root = self._insert_node(self.node, key)
        root.colour = BLACK
        return self._handoff(root)

    def search(self, key: Key) -> int:
        """
        Return the occurrence count of ``key``, or 0 if it is not present.

        Iteratively descends the tree in O(height) without mutating it.

        Raises:
            TypeError: If key is None or has the wrong type.
        """
        key = normalize_key(key, self.KEY_TYPE, "search")
        cur = self.node
        while cur is not None:
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                return cur.count
        return 0

    def delete(self, key: Key) -> RBTreeBase:
        """
        Remove one occurrence of ``key``.

        No rotation or recolouring is performed after a node is removed, so
        the colour invariants may not hold after deletions.

        Returns:
            RBTreeBase: The tree owning the remaining nodes. ``self`` is left empty.

        Raises:
            TypeError: If key is None or has the wrong type.
        """
        key = normalize_key(key, self.KEY_TYPE, "delete")
        root = self._delete_node(self.node, key)
        return self._handoff(root)

    def free(self) -> RBTreeBase:
        """Release every node post-order and return an empty tree."""
        node = self.node
        self.node = None
        if node is not None:
            released = self._free_node(node)
            debug_log("free(): released %d nodes", released)
        return type(self)()

    def inorder(self, visit: Callable[[Key], None]) -> None:
        """Call ``visit`` once per occurrence, keys ascending."""
        self._traverse(visit, INORDER)

    def preorder(self, visit: Callable[[Key], None]) -> None:
        """Call ``visit`` once per occurrence, each node before its subtrees."""
        self._traverse(visit, PREORDER)

    def postorder(self, visit: Callable[[Key], None]) -> None:
        """Call ``visit`` once per occurrence, each node after its subtrees."""
        self._traverse(visit, POSTORDER)

    def iter_inorder(self) -> Iterator[Key]:
        return self._iter_keys(self.node, INORDER)

    def iter_preorder(self) -> Iterator[Key]:
        return self._iter_keys(self.node, PREORDER)

    def iter_postorder(self) -> Iterator[Key]:
        return self._iter_keys(self.node, POSTORDER)

    def distinct_count(self) -> int:
        """Number of nodes, i.e. distinct keys."""
        return sum(1 for _ in self._iter_nodes(self.node, INORDER))

    def item_count(self) -> int:
        """Sum of all occurrence counts."""
        return sum(n.count for n in self._iter_nodes(self.node, INORDER))

    def min_key(self) -> Optional[Key]:
        cur = self.node
        if cur is None:
            return None
        while cur.left is not None:
            cur = cur.left
        return cur.key

    def max_key(self) -> Optional[Key]:
        cur = self.node
        if cur is None:
            return None
        while cur.right is not None:
            cur = cur.right
        return cur.key

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 if empty)."""
        return self._node_height(self.node)

    def black_height(self) -> int:
        """Number of black nodes on the leftmost root-to-leaf path."""
        bh = 0
        cur = self.node
        while cur is not None:
            if cur.colour is BLACK:
                bh += 1
            cur = cur.left
        return bh

    def print_structure(self, indent: int = 0, depth: int = 0, max_depth: int = 64):
        prefix = ' ' * indent
        if self.is_empty():
            return f"{prefix}Empty {self.__class__.__name__}"

        result = [f"{prefix}{self.__class__.__name__}"]

        def collect(node, level, label):
            pad = ' ' * (indent + 4 * (level + 1))
            if node is None:
                return
            if level > max_depth:
                result.append(f"{pad}... (max depth reached)")
                return
            result.append(f"{pad}{label}: {node}")
            collect(node.left, level + 1, "L")
            collect(node.right, level + 1, "R")

        collect(self.node, depth, "root")
        return "\n".join(result)

    # Private Methods
    def _handoff(self, root: Optional[RBNode]) -> RBTreeBase:
        """Move ownership of ``root`` into a new handle and empty ``self``."""
        self.node = None
        return type(self)(root)

    @classmethod
    def _insert_node(cls, node: Optional[RBNode], key: Key) -> RBNode:
        """Insert ``key`` below ``node`` and return the repaired subtree."""
        if node is None:
            debug_log("insert(): new node %r", key)
            return cls.NodeClass(key)
        if key < node.key:
            node.left = cls._insert_node(node.left, key)
        elif key > node.key:
            node.right = cls._insert_node(node.right, key)
        else:
            node.count += 1
        return cls._fix(node)

    @staticmethod
    def _left_rotate(node: RBNode) -> RBNode:
        """Promote ``node.right``; returns the new subtree root."""
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        return pivot

    @staticmethod
    def _right_rotate(node: RBNode) -> RBNode:
        """Promote ``node.left``; returns the new subtree root."""
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        return pivot

    @staticmethod
    def _flip_colours(node: RBNode) -> RBNode:
        node.colour = RED
        node.left.colour = BLACK
        node.right.colour = BLACK
        return node

    @classmethod
    def _fix(cls, r: Optional[RBNode]) -> Optional[RBNode]:
        """
        Repair a red child with a red child of its own below ``r``.

        The four double-red shapes are checked in a fixed order: left-left,
        left-right, right-left, right-right. With a red uncle the colours are
        flipped, pushing the problem up to ``r``'s parent; otherwise one or two
        rotations make the middle key the black root of the subtree.
        """
        if r is None:
            return None

        if is_red(r.left) and is_red(r.left.left):
            if is_red(r.right):
                return cls._flip_colours(r)
            r = cls._right_rotate(r)
            r.colour = BLACK
            r.right.colour = RED
        elif is_red(r.left) and is_red(r.left.right):
            if is_red(r.right):
                return cls._flip_colours(r)
            r.left = cls._left_rotate(r.left)
            r = cls._right_rotate(r)
            r.colour = BLACK
            r.right.colour = RED
        elif is_red(r.right) and is_red(r.right.left):
            if is_red(r.left):
                return cls._flip_colours(r)
            r.right = cls._right_rotate(r.right)
            r = cls._left_rotate(r)
            r.colour = BLACK
            r.left.colour = RED
        elif is_red(r.right) and is_red(r.right.right):
            if is_red(r.left):
                return cls._flip_colours(r)
            r = cls._left_rotate(r)
            r.colour = BLACK
            r.left.colour = RED

        return r

    @classmethod
    def _delete_node(cls, node: Optional[RBNode], key: Key) -> Optional[RBNode]:
        """Remove one occurrence of ``key`` below ``node``; returns the new subtree."""
        if node is None:
            return None

        if key < node.key:
            node.left = cls._delete_node(node.left, key)
        elif key > node.key:
            node.right = cls._delete_node(node.right, key)
        elif node.count > 1:
            node.count -= 1
        elif node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left

            # Swap contents; the doomed key now sits in the leftmost slot of
            # the right subtree with count 1.
            node.key, successor.key = successor.key, node.key
            node.count, successor.count = successor.count, node.count
            node.right = cls._delete_node(node.right, key)
        elif node.left is not None or node.right is not None:
            child = node.left if node.left is not None else node.right
            debug_log("delete(): splice %r", key)
            node.left = node.right = None
            return child
        else:
            debug_log("delete(): remove leaf %r", key)
            return None

        return node

    @classmethod
    def _free_node(cls, node: RBNode) -> int:
        released = 0
        if node.left is not None:
            released += cls._free_node(node.left)
            node.left = None
        if node.right is not None:
            released += cls._free_node(node.right)
            node.right = None
        return released + 1

    @classmethod
    def _iter_nodes(cls, node: Optional[RBNode], order: str) -> Iterator[RBNode]:
        if node is None:
            return
        if order == PREORDER:
            yield node
        yield from cls._iter_nodes(node.left, order)
        if order == INORDER:
            yield node
        yield from cls._iter_nodes(node.right, order)
        if order == POSTORDER:
            yield node

    @classmethod
    def _iter_keys(cls, node: Optional[RBNode], order: str) -> Iterator[Key]:
        for n in cls._iter_nodes(node, order):
            for _ in range(n.count):
                yield n.key

    def _traverse(self, visit: Callable[[Key], None], order: str) -> None:
        if not callable(visit):
            raise TypeError(f"visit must be callable, got {type(visit).__name__}")
        for key in self._iter_keys(self.node, order):
            visit(key)

    @classmethod
    def _node_height(cls, node: Optional[RBNode]) -> int:
        if node is None:
            return 0
        return 1 + max(cls._node_height(node.left), cls._node_height(node.right))
