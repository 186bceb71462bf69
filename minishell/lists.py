"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from Node objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push_front(self, content: Any) -> Node:
        """Insert content at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content in order."""
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of func applied to every content.

        If func yields None for any content, the contents mapped so far are
        handed to release and ValueError is raised.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        for content in self:
            value = func(content)
            if value is None:
                result.clear(release)
                raise ValueError(f"mapping produced no value for {content!r}")
            node = Node(value)
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, handing every content that is not None to release."""
        for node in self._nodes():
            if release is not None and node.content is not None:
                release(node.content)
            node.next = None
        self.head = None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"