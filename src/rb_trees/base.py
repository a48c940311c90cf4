from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, TypeVar, Generic, Union
import logging

from rb_trees.logging_config import get_logger

# Get logger for this module
logger = get_logger("RBTree")

Key = Union[str, bytes]


class Colour(Enum):
    RED = "red"
    BLACK = "black"


RED = Colour.RED
BLACK = Colour.BLACK


class RBNode:
    """
    A single red-black tree node holding one distinct key and the number of
    times it has been inserted.

    Attributes:
        key (str | bytes): The node's key. Never changes after creation except
            through a successor swap during deletion.
        count (int): Occurrences of ``key``; always >= 1.
        colour (Colour): RED or BLACK.
        left (Optional[RBNode]): Subtree of strictly smaller keys.
        right (Optional[RBNode]): Subtree of strictly greater keys.
    """
    __slots__ = ("key", "count", "colour", "left", "right")

    def __init__(
        self,
        key: Key,
        count: int = 1,
        colour: Colour = RED,
        left: Optional["RBNode"] = None,
        right: Optional["RBNode"] = None,
    ) -> None:
        if count <= 0:
            raise ValueError("count must be > 0")
        self.key = key
        self.count = count
        self.colour = colour
        self.left = left
        self.right = right

    def short_key(self) -> str:
        """Create a short representation of the key for display purposes."""
        if isinstance(self.key, bytes):
            s = self.key.hex()
        else:
            s = self.key

        return s if len(s) <= 10 else f"{s[:3]}...{s[-3:]}"

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(key={self.key!r}, count={self.count}, colour={self.colour.value})"

    def __str__(self):
        cls = self.__class__.__name__
        return f"{cls}(key={self.short_key()}, count={self.count}, colour={self.colour.value})"


def is_red(node: Optional[RBNode]) -> bool:
    """Absent children are black."""
    return node is not None and node.colour is RED


def is_black(node: Optional[RBNode]) -> bool:
    return node is None or node.colour is BLACK


def normalize_key(key, key_type: type, op: str) -> Key:
    """
    Validate ``key`` against the tree's key type and return the owned copy
    that will be stored or compared.

    ``bytes`` trees accept any bytes-like object and copy it into an
    immutable ``bytes``; ``str`` trees accept only ``str``.

    Raises:
        TypeError: If ``key`` is None or of the wrong type.
    """
    if key is None:
        raise TypeError(f"{op}(): key must not be None")
    if key_type is bytes:
        if isinstance(key, (bytes, bytearray, memoryview)):
            return bytes(key)
        raise TypeError(f"{op}(): key must be bytes-like, got {type(key).__name__}")
    if not isinstance(key, key_type):
        raise TypeError(f"{op}(): key must be {key_type.__name__}, got {type(key).__name__}")
    return key


T = TypeVar("T", bound="AbstractMultiset")


class AbstractMultiset(ABC, Generic[T]):
    """
    Abstract base class for an ordered multiset of keys. Every mutating
    operation returns the structure the caller must continue to use.
    """
    __slots__ = ()

    @abstractmethod
    def insert(self, key: Key) -> T:
        """
        Insert one occurrence of ``key``.

        Parameters:
            key (str | bytes): The key to insert.

        Returns:
            AbstractMultiset: The structure holding the inserted key.
        """
        pass

    @abstractmethod
    def search(self, key: Key) -> int:
        """
        Return the number of occurrences of ``key`` (0 if absent).
        """
        pass

    @abstractmethod
    def delete(self, key: Key) -> T:
        """
        Remove one occurrence of ``key``. Deleting an absent key is a no-op.

        Returns:
            AbstractMultiset: The structure after deletion.
        """
        pass

    @abstractmethod
    def free(self) -> T:
        """Release every stored key and return an empty structure."""
        pass

    @abstractmethod
    def inorder(self, visit: Callable[[Key], None]) -> None:
        pass

    @abstractmethod
    def preorder(self, visit: Callable[[Key], None]) -> None:
        pass

    @abstractmethod
    def postorder(self, visit: Callable[[Key], None]) -> None:
        pass


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
