"""FIFO queues backed by a contiguous array and by a singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TextIO, TypeVar

T = TypeVar("T")


class ArrayQueue(Generic[T]):
    """Queue stored in a contiguous array; removing the head shifts the rest left."""

    def __init__(self, trace: Optional[TextIO] = None) -> None:
        self._items: list[T] = []
        self.trace = trace
        self.added = 0

    def add(self, item: T) -> None:
        """Append an item at the tail."""
        if self.trace is not None:
            self.trace.write(f"[Добавление] [Массив] {id(item):#x}\n")
        self._items.append(item)
        self.added += 1

    def pop(self) -> T:
        """Remove and return the head; raise IndexError when the queue is empty."""
        if not self._items:
            raise IndexError("queue underflow")
        if self.trace is not None:
            self.trace.write(f"[  Удаление] [Массив] {id(self._items):#x}\n")
        return self._items.pop(0)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first item satisfying the predicate, or None."""
        return next((item for item in self._items if predicate(item)), None)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedQueue(Generic[T]):
    """Queue stored as a singly linked list with head and tail references."""

    def __init__(self, trace: Optional[TextIO] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._len = 0
        self.trace = trace
        self.added = 0

    def add(self, item: T) -> None:
        """Append an item at the tail."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        if self.trace is not None:
            self.trace.write(f"[Добавление] [Список] {id(node):#x}\n")
        self._len += 1
        self.added += 1

    def pop(self) -> T:
        """Remove and return the head; raise IndexError when the queue is empty."""
        node = self._head
        if node is None:
            raise IndexError("queue underflow")
        if self.trace is not None:
            self.trace.write(f"[  Удаление] [Список] {id(node):#x}\n")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._len -= 1
        return node.data

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first item satisfying the predicate, or None."""
        return next((item for item in self if predicate(item)), None)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next