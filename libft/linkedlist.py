"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "LinkedList"]

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list built from Node links."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        if items is not None:
            for content in reversed(list(items)):
                self.push_front(content)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front of the list and return its new node."""
        node = Node(content, self._head)
        self._head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end of the list and return its new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self._head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The last node of the list, or None when the list is empty."""
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

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node and return its content.

        If delete is given it is called on the content first. An empty list
        raises IndexError.
        """
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, calling delete on each content from last to first."""
        nodes = list(self._nodes())
        self._head = None
        for node in reversed(nodes):
            node.next = None
            if delete is not None:
                delete(node.content)

    def for_each(self, f: Callable[[Any], object]) -> None:
        """Call f on each content, from first to last."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """A new list holding f(content) for each content, in order.

        If f raises, the results built so far are cleared with delete and the
        error propagates; this list is left unchanged.
        """
        result = LinkedList()
        tail: Node | None = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result._head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result