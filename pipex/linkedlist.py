"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert a new node holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append a new node holding ``content`` at the end and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def remove_first(self, delete: Deleter = None) -> Any:
        """Unlink the first node and return its content.

        ``delete``, when given, is called on the content first. An empty
        list raises ``IndexError``.
        """
        node = self.head
        if node is None:
            raise IndexError("remove_first from an empty list")
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Deleter = None
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every node.

        If ``func`` raises, ``delete`` is called on each content already
        produced, front to back, and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result