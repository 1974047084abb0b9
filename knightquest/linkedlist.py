"""A singly linked list whose nodes each hold one value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Release = Callable[[Any], object]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None

    def release(self, release: Optional[Release]) -> None:
        """Hand the node's content to ``release`` and unlink the node.

        Does nothing when ``release`` is None.
        """
        if release is None:
            return
        release(self.content)
        self.next = None


class LinkedList:
    """A singly linked list of values, kept in insertion order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, content: Any) -> Node:
        """Add ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def prepend(self, content: Any) -> Node:
        """Add ``content`` at the front of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, release: Optional[Release] = None) -> None:
        """Empty the list, handing each value to ``release`` in order when given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if release is not None:
                node.release(release)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every value in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], release: Release) -> "LinkedList":
        """Return a new list holding ``func`` applied to every value.

        If ``func`` raises, the value being mapped and every value already
        placed in the new list are handed to ``release`` before the error
        propagates.
        """
        if func is None or release is None:
            raise TypeError("map needs both a mapping function and a release function")
        result = LinkedList()
        for content in self:
            try:
                mapped = func(content)
            except Exception:
                release(content)
                result.clear(release)
                raise
            result.append(mapped)
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"