"""Singly linked list with search, insertion, deduplication and insertion sort."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise
from typing import Any, Optional

Key = Optional[Callable[[Any], Any]]


def _key_of(key: Key, item: Any) -> Any:
    """Apply the key function to an item, or return the item when there is none."""
    return item if key is None else key(item)


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list; None cannot be stored."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._len = 0
        for item in items:
            self.push(item)

    def push(self, item: Any) -> None:
        """Append an item at the end."""
        if item is None:
            raise ValueError("None cannot be stored in the list")
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._len += 1

    def find(self, item: Any, key: Key = None) -> Any:
        """Return the first element whose key equals the item's key, or None."""
        if item is None:
            return None
        target = _key_of(key, item)
        return next(
            (element for element in self if _key_of(key, element) == target), None
        )

    def insert_before(self, item: Any, before: Any) -> bool:
        """Insert the item ahead of the first element equal to ``before``.

        Returns False, leaving the list unchanged, if no such element exists.
        """
        if item is None:
            raise ValueError("None cannot be stored in the list")
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            if node.data == before:
                new = _Node(item, node)
                if previous is None:
                    self._head = new
                else:
                    previous.next = new
                self._len += 1
                return True
            previous, node = node, node.next
        return False

    def remove_duplicates(self, key: Key = None) -> None:
        """Keep only the first element of each group with equal keys."""
        seen: list[Any] = []
        kept: list[Any] = []
        for element in self:
            element_key = _key_of(key, element)
            if element_key not in seen:
                seen.append(element_key)
                kept.append(element)
        self._head = self._tail = None
        self._len = 0
        for element in kept:
            self.push(element)

    def sorted(self, key: Key = None) -> "LinkedList":
        """Return a new list sorted by insertion; equal elements end up newest first."""
        return LinkedList(sorted(reversed(list(self)), key=key))

    def is_sorted(self, key: Key = None) -> bool:
        """Whether the elements are in non-decreasing key order."""
        return not any(
            _key_of(key, left) > _key_of(key, right) for left, right in pairwise(self)
        )

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"