"""
Binary Search Tree -- unbalanced BST with sentinel-parent deletion.

Duplicates are allowed and always route left. Deletion works on the parent of
the node being removed; the root is handled by hanging it under a temporary
sentinel holding the largest value of the type, so every value type stored in
the tree must expose its extremes (see ``BoundedValue``).
"""

import logging
import sys
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Protocol, Tuple, Type, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar('T')

Shape = Optional[Tuple[Any, Any, Any]]


class BoundedValue(Protocol):
    """Totally ordered value whose type knows its smallest and largest values."""

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...

    @classmethod
    def min_value(cls) -> Any: ...

    @classmethod
    def max_value(cls) -> Any: ...


# Types a tree can be built for: the built-in numbers, or any BoundedValue.
ValueType = Union[Type[int], Type[float], Type[BoundedValue]]


class ValueLimits(Generic[T]):
    def __init__(self, min: T, max: T) -> None:
        if not min <= max:
            raise ValueError("min must not exceed max")
        self._min = min
        self._max = max

    @property
    def min(self) -> T:
        return self._min

    @property
    def max(self) -> T:
        return self._max

    def contains(self, value: T) -> bool:
        return self._min <= value <= self._max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueLimits):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __repr__(self) -> str:
        return f"ValueLimits(min={self._min!r}, max={self._max!r})"


_BUILTIN_LIMITS: Dict[type, ValueLimits] = {
    float: ValueLimits(-sys.float_info.max, sys.float_info.max),
    int: ValueLimits(-sys.maxsize - 1, sys.maxsize),
}


def value_limits(value_type: ValueType) -> ValueLimits:
    """
    Resolve the sentinel limits for a value type.

    Built-in ``float`` and ``int`` are known. Other types must implement
    ``BoundedValue`` by providing ``min_value()`` and ``max_value()``
    classmethods.
    """
    if value_type in _BUILTIN_LIMITS:
        return _BUILTIN_LIMITS[value_type]
    min_value = getattr(value_type, "min_value", None)
    max_value = getattr(value_type, "max_value", None)
    if not callable(min_value) or not callable(max_value):
        raise TypeError(
            f"{value_type.__name__} does not provide min_value()/max_value()"
        )
    return ValueLimits(min_value(), max_value())


class BinarySearchTree(Generic[T]):
    class Node:
        class Direction(Enum):
            LEFT = "left"
            RIGHT = "right"

        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        @property
        def is_leaf(self) -> bool:
            return self.left is None and self.right is None

        @property
        def has_single_child(self) -> bool:
            return (self.left is None) != (self.right is None)

        @property
        def has_two_children(self) -> bool:
            return self.left is not None and self.right is not None

        def child(self, direction: 'BinarySearchTree.Node.Direction') -> Optional['BinarySearchTree.Node']:
            if direction is BinarySearchTree.Node.Direction.LEFT:
                return self.left
            return self.right

        def set_child(self, direction: 'BinarySearchTree.Node.Direction',
                      node: Optional['BinarySearchTree.Node']) -> None:
            if direction is BinarySearchTree.Node.Direction.LEFT:
                self.left = node
            else:
                self.right = node

    def __init__(self, value_type: ValueType = float, limits: Optional[ValueLimits] = None) -> None:
        self._limits: ValueLimits = limits if limits is not None else value_limits(value_type)
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    @property
    def limits(self) -> ValueLimits:
        return self._limits

    def insert(self, value: T) -> None:
        if not self._limits.contains(value):
            raise ValueError(f"{value!r} is outside {self._limits!r}")
        self._size += 1
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            return

        node = self._root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value)
                    return
                node = node.right

    def delete(self, value: T) -> None:
        if self._root is None:
            logger.warning("Nothing to delete.")
            return

        # The sentinel holds the largest possible value, so the real root is
        # always reached through its left slot.
        sentinel = BinarySearchTree.Node(self._limits.max)
        sentinel.left = self._root
        if self._delete_below(sentinel, value):
            self._size -= 1

        assert sentinel.left is not None or self._size == 0
        self._root = sentinel.left

    def _delete_below(self, parent: Optional[Node], value: T) -> bool:
        """
        Remove the first node equal to ``value`` found beneath ``parent``.

        Returns True when a node was removed, False when the value is absent.
        """
        while parent is not None:
            if value <= parent.value:
                direction = BinarySearchTree.Node.Direction.LEFT
            else:
                direction = BinarySearchTree.Node.Direction.RIGHT

            target = parent.child(direction)
            if target is not None and target.value == value:
                self._unlink(parent, direction, target)
                return True
            parent = target
        return False

    def _unlink(self, parent: Node, direction: 'BinarySearchTree.Node.Direction', target: Node) -> None:
        if target.is_leaf:
            parent.set_child(direction, None)
        elif target.has_single_child:
            parent.set_child(direction, target.left if target.left is not None else target.right)
        else:
            assert target.has_two_children
            predecessor = self._find_max(target.left)
            assert predecessor.right is None

            # Searching from the target itself also finds a predecessor that
            # is the target's direct left child.
            removed = self._delete_below(target, predecessor.value)
            assert removed

            predecessor.left = target.left
            predecessor.right = target.right
            parent.set_child(direction, predecessor)

    def is_empty(self) -> bool:
        return self._root is None

    def max(self) -> Optional[T]:
        if self._root is None:
            return None
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        tallest = 0
        stack: List[Tuple[BinarySearchTree.Node, int]] = []
        if self._root is not None:
            stack.append((self._root, 1))
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return tallest

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def shape(self) -> Shape:
        """Nested ``(value, left, right)`` tuples mirroring the tree, None if empty."""
        if self._root is None:
            return None
        built: Dict[int, Shape] = {}
        stack: List[Tuple[BinarySearchTree.Node, bool]] = [(self._root, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                left = built.pop(id(node.left)) if node.left is not None else None
                right = built.pop(id(node.right)) if node.right is not None else None
                built[id(node)] = (node.value, left, right)
                continue
            stack.append((node, True))
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, False))
        return built[id(self._root)]

    def print_tree(self) -> None:
        if self._root is None:
            print("Empty Tree.")
            return
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            print("\nRoot ->", node.value)
            print("Left ->", node.left.value if node.left is not None else "Nil")
            print("Right ->", node.right.value if node.right is not None else "Nil")
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"
