"""Linked lists, a stack, a bounded queue, polynomials and binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


class _DoubleNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[_DoubleNode] = None
        self.next: Optional[_DoubleNode] = None


class DoublyLinkedList:
    """A list of nodes linked in both directions, grown at the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self.push_front(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current first element."""
        node = _DoubleNode(value)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """A singly linked list that grows at the front and reverses in place."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._head = _Node(value, self._head)

    def reverse(self) -> None:
        """Reverse the order of the nodes by relinking them."""
        previous: Optional[_Node] = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


class Stack:
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Place ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class QueueFullError(Exception):
    """Raised when pushing onto a queue that is at capacity."""


class CircularQueue:
    """A first-in, first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Append ``value``; raise QueueFullError when the queue is full."""
        if len(self._items) == self.capacity:
            raise QueueFullError("queue is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the oldest value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def drain(self) -> Iterator[Any]:
        """Pop and yield values until the queue is empty."""
        while self._items:
            yield self._items.popleft()


@dataclass(frozen=True)
class Term:
    """One polynomial term ``coeff * x**exp``."""

    coeff: int
    exp: int


def add_polynomials(p1: Iterable[Term], p2: Iterable[Term]) -> list[Term]:
    """Add two polynomials given as terms in descending exponent order."""
    left, right = list(p1), list(p2)
    result: list[Term] = []
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if a.exp > b.exp:
            result.append(a)
            i += 1
        elif a.exp < b.exp:
            result.append(b)
            j += 1
        else:
            result.append(Term(a.coeff + b.coeff, a.exp))
            i += 1
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def format_polynomial(terms: Iterable[Term]) -> str:
    """Render terms as signed 'c x^e ' pieces."""
    return "".join(f"{term.coeff:+d} x^{term.exp} " for term in terms)


@dataclass
class TreeNode:
    """A binary tree node."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return node values in left, root, right order."""
    return list(_inorder(root))


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return node values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return node values in left, right, root order."""
    return list(_postorder(root))