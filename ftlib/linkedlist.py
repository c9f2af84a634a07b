"""A doubly linked list whose nodes carry a content value and an index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One list element: its content, its neighbours and its index."""

    content: Any = None
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)
    index: int = 0


class LinkedList:
    """Doubly linked list of :class:`Node` objects.

    Nodes appended at the back get the index of the last node plus one;
    nodes pushed at the front get the index of the first node minus one.
    """

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(Node(content))

    def nodes(self) -> Iterator[Node]:
        """Iterate over the nodes from front to back."""
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def add_back(self, node: Optional[Node]) -> None:
        """Append *node* at the end; None is ignored."""
        if node is None:
            return
        last = self.last()
        if last is None:
            self.head = node
            return
        last.next = node
        node.prev = last
        node.index = last.index + 1

    def add_front(self, node: Optional[Node]) -> None:
        """Insert *node* before the first node; None is ignored."""
        if node is None:
            return
        if self.head is None:
            self.head = node
            return
        node.next = self.head
        self.head.prev = node
        node.index = self.head.index - 1
        self.head = node

    def remove(self, node: Node, delete: Deleter = None) -> None:
        """Unlink *node*, first passing its content to *delete* if both are set.

        Raises ValueError when *node* is not in this list.
        """
        if not any(candidate is node for candidate in self.nodes()):
            raise ValueError("node is not in this list")
        if node.content is not None and delete is not None:
            delete(node.content)
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if self.head is node:
            self.head = node.next
        node.next = None
        node.prev = None

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to *delete* when given."""
        for node in self.nodes():
            if node.content is not None and delete is not None:
                delete(node.content)
            node.next = None
            node.prev = None
        self.head = None

    def apply(self, f: Callable[[Any], Any]) -> None:
        """Call *f* on the content of every node, front to back."""
        for content in self:
            f(content)

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """New list holding ``f(content)`` for every node.

        If *f* raises, the contents produced so far are passed to *delete*
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(Node(f(content)))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.content