"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps its head, tail and length."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def add_front(self, content: T) -> None:
        """Insert ``content`` before the first element."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content: T) -> None:
        """Append ``content`` after the last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the content of the last element.

        Raises ``IndexError`` when the list is empty.
        """
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self, deleter: Callable[[T], Any] | None = None) -> None:
        """Remove every element, passing each content to ``deleter`` first."""
        if deleter is not None:
            for content in self:
                deleter(content)
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U | None],
        deleter: Callable[[U], Any] | None = None,
    ) -> LinkedList[U]:
        """Return a new list of ``func(content)`` for every content.

        When ``func`` returns ``None`` the contents mapped so far are passed
        to ``deleter`` and ``ValueError`` is raised.
        """
        result: LinkedList[U] = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(deleter)
                raise ValueError("mapping function returned None")
            result.add_back(mapped)
        return result