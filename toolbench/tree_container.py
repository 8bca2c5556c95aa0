"""A set-like container over a binary search tree with a traversal cursor."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, TypeVar, Union

from toolbench.bst import BinarySearchTree

T = TypeVar("T")


class Traversal(Enum):
    """Depth-first orders a container can walk its tree in."""

    PRE = "pre"
    IN = "in"
    POST = "post"


_WALKS: Dict[Traversal, Callable[[BinarySearchTree], Iterator]] = {
    Traversal.PRE: BinarySearchTree.preorder,
    Traversal.IN: BinarySearchTree.inorder,
    Traversal.POST: BinarySearchTree.postorder,
}


def _walk(tree: BinarySearchTree, traversal: Traversal) -> Iterator:
    return _WALKS[traversal](tree)


class TreeCursor(Generic[T]):
    """A position in a tree that moves forwards and backwards in one traversal.

    The cursor starts at the first value of its traversal. It follows the
    value it stands on, so values added to or removed elsewhere in the tree
    keep it valid.
    """

    def __init__(self, tree: BinarySearchTree, traversal: Union[Traversal, str]) -> None:
        self._tree = tree
        self.traversal = Traversal(traversal)
        self._value: Any = None
        self._positioned = False
        self._reset()

    def _reset(self) -> None:
        for value in _walk(self._tree, self.traversal):
            self._value = value
            self._positioned = True
            return
        self._value = None
        self._positioned = False

    def _rebind(self, tree: BinarySearchTree) -> None:
        self._tree = tree
        self._reset()

    @property
    def value(self) -> T:
        """The value the cursor stands on."""
        if not self._positioned:
            raise IndexError("cursor has no position: the tree is empty")
        return self._value

    def _step(self, delta: int) -> T:
        if not self._positioned:
            raise IndexError("cursor has no position: the tree is empty")
        order: List[T] = list(_walk(self._tree, self.traversal))
        try:
            index = order.index(self._value)
        except ValueError:
            raise LookupError(f"cursor value {self._value!r} is no longer in the tree") from None
        target = index + delta
        if not 0 <= target < len(order):
            raise IndexError("cursor moved past the end of the traversal")
        self._value = order[target]
        return self._value

    def next(self) -> T:
        """Move to the following value and return it."""
        return self._step(1)

    def prev(self) -> T:
        """Move to the preceding value and return it."""
        return self._step(-1)


class TreeContainer(Generic[T]):
    """Distinct values kept in a search tree, iterated in a chosen traversal."""

    def __init__(
        self,
        values: Iterable[T] = (),
        traversal: Union[Traversal, str] = Traversal.IN,
    ) -> None:
        self._tree: BinarySearchTree = BinarySearchTree(values)
        self.cursor: TreeCursor[T] = TreeCursor(self._tree, traversal)

    @property
    def traversal(self) -> Traversal:
        return self.cursor.traversal

    def set_traversal(self, traversal: Union[Traversal, str]) -> None:
        """Switch traversal and move the cursor to its first value."""
        self.cursor.traversal = Traversal(traversal)
        self.cursor._reset()

    def add(self, value: T) -> bool:
        """Insert ``value``; return False if it was already present."""
        added = self._tree.add(value)
        if not self.cursor._positioned:
            self.cursor._reset()
        return added

    def remove(self, value: T) -> None:
        """Remove ``value``; raise KeyError if it is absent.

        A cursor standing on the removed value goes back to the start.
        """
        on_cursor = self.cursor._positioned and self.cursor._value == value
        self._tree.remove(value)
        if on_cursor or len(self._tree) == 0:
            self.cursor._reset()

    def __contains__(self, value: Any) -> bool:
        return value in self._tree

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[T]:
        return _walk(self._tree, self.traversal)

    def count(self, value: T) -> int:
        """Return 1 if ``value`` is present, else 0."""
        return 1 if value in self._tree else 0

    def first(self) -> T:
        """First value of the current traversal."""
        for value in self:
            return value
        raise IndexError("container is empty")

    def last(self) -> T:
        """Last value of the current traversal."""
        order = list(self)
        if not order:
            raise IndexError("container is empty")
        return order[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._tree = BinarySearchTree()
        self.cursor._rebind(self._tree)

    def swap(self, other: "TreeContainer[T]") -> None:
        """Exchange contents, traversal and cursor with ``other``."""
        self._tree, other._tree = other._tree, self._tree
        self.cursor, other.cursor = other.cursor, self.cursor

    def merge(self, other: "TreeContainer[T]") -> None:
        """Move every value of ``other`` into this container, emptying it."""
        if other is self:
            return
        for value in list(other._tree.inorder()):
            self.add(value)
        other.clear()