"""Unbalanced binary search tree with the three depth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A tree node linked to its parent and both children."""

    value: T
    parent: Optional["Node[T]"] = field(default=None, repr=False)
    left: Optional["Node[T]"] = None
    right: Optional["Node[T]"] = None


class BinarySearchTree(Generic[T]):
    """A binary search tree holding distinct, mutually comparable values."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.root: Optional[Node[T]] = None
        self._size = 0
        for value in values:
            self.add(value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def add(self, value: T) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return True
        place = self.root
        while True:
            if value < place.value:
                if place.left is None:
                    place.left = Node(value, parent=place)
                    break
                place = place.left
            elif place.value < value:
                if place.right is None:
                    place.right = Node(value, parent=place)
                    break
                place = place.right
            else:
                return False
        self._size += 1
        return True

    def find(self, value: T) -> Optional[Node[T]]:
        """Return the node holding ``value``, or None."""
        place = self.root
        while place is not None:
            if value < place.value:
                place = place.left
            elif place.value < value:
                place = place.right
            else:
                return place
        return None

    def remove(self, value: T) -> None:
        """Remove ``value``; raise KeyError if it is not in the tree.

        A node with two children takes its in-order successor's value and
        the successor node is unlinked instead.
        """
        node = self.find(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        if child is not None:
            child.parent = node.parent
        if node.parent is None:
            self.root = child
        elif node.parent.left is node:
            node.parent.left = child
        else:
            node.parent.right = child
        node.parent = node.left = node.right = None
        self._size -= 1

    def preorder(self) -> Iterator[T]:
        """Yield values node, left subtree, right subtree."""
        stack: List[Node[T]] = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[T]:
        """Yield values in ascending order."""
        stack: List[Node[T]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[T]:
        """Yield values left subtree, right subtree, node."""
        if self.root is None:
            return
        stack: List[Node[T]] = [self.root]
        reversed_order: List[T] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)