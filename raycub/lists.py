"""A singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One list cell holding a value and the link to the next cell."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list of arbitrary values."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each value to ``delete`` if given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def remove_first(self, delete: Deleter = None) -> None:
        """Drop the first node, passing its value to ``delete`` if given."""
        if self.head is None:
            raise IndexError("remove from empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each value in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """Return a new list of ``func(value)`` for each value.

        If ``func`` gives None, the values built so far are passed to
        ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping produced no value")
            node = Node(mapped)
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content