"""A singly linked list with front, back and positional operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next")

    def __init__(self, data: T, next_node: Optional[_Node[T]] = None) -> None:
        self.data = data
        self.next = next_node


class SinglyLinkedList(Generic[T]):
    """A singly linked list.

    Positional operations given an index outside the list leave it unchanged.
    Peeking or popping an empty list returns ``None``.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._count = 0
        for value in values:
            self.add_back(value)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node[T]:
        return next(islice(self._nodes(), index, None))

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self._count:
            return "Empty"
        return "(head)" + "".join(f" {value} ->" for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_front(self, data: T) -> None:
        """Insert ``data`` at the head of the list."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._count += 1

    def remove_front(self) -> None:
        """Drop the head element, if any."""
        self.pop_front()

    def pop_front(self) -> Optional[T]:
        """Remove and return the head element, or ``None`` if empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return node.data

    def add_at(self, data: T, index: int) -> None:
        """Insert ``data`` so that it ends up at position ``index``.

        An index beyond the end of the list is ignored.
        """
        if index < 0 or index > self._count:
            return
        if index == 0:
            self.add_front(data)
            return
        if index == self._count:
            self.add_back(data)
            return
        previous = self._node_at(index - 1)
        previous.next = _Node(data, previous.next)
        self._count += 1

    def add_back(self, data: T) -> None:
        """Append ``data`` at the end of the list."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def remove_back(self) -> None:
        """Drop the last element, if any."""
        self.pop_back()

    def pop_back(self) -> Optional[T]:
        """Remove and return the last element, or ``None`` if empty."""
        tail = self._tail
        if tail is None:
            return None
        if self._head is tail:
            self._head = self._tail = None
        else:
            previous = self._node_at(self._count - 2)
            previous.next = None
            self._tail = previous
        self._count -= 1
        return tail.data

    def peek_front(self) -> Optional[T]:
        """Return the head element without removing it, or ``None``."""
        return None if self._head is None else self._head.data

    def peek_back(self) -> Optional[T]:
        """Return the last element without removing it, or ``None``."""
        return None if self._tail is None else self._tail.data

    def remove_at(self, index: int) -> None:
        """Remove the element at position ``index``; out-of-range is ignored."""
        if index < 0 or index >= self._count:
            return
        if index == 0:
            self.remove_front()
            return
        if index == self._count - 1:
            self.remove_back()
            return
        previous = self._node_at(index - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._count -= 1