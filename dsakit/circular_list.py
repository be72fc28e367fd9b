"""Singly linked circular lists addressed through their tail node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class CircularNode:
    """A node of a circular list; compared by identity."""

    data: Any
    next: Optional[CircularNode] = field(default=None, repr=False)


class CircularLinkedList:
    """A circular list kept as a reference to one node, the tail."""

    def __init__(self) -> None:
        self.tail: Optional[CircularNode] = None

    def __iter__(self) -> Iterator[Any]:
        if self.tail is None:
            return
        node = self.tail
        while True:
            yield node.data
            node = node.next
            if node is self.tail:
                break

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def _find(self, value: Any) -> CircularNode:
        node = self.tail
        while True:
            if node.data == value:
                return node
            node = node.next
            if node is self.tail:
                raise ValueError(f"{value!r} is not in the list")

    def insert(self, after: Any, value: Any) -> CircularNode:
        """Insert value after the first node holding `after`.

        In an empty list the new node becomes the only node and `after` is ignored.
        """
        if self.tail is None:
            node = CircularNode(value)
            node.next = node
            self.tail = node
            return node
        anchor = self._find(after)
        node = CircularNode(value, anchor.next)
        anchor.next = node
        return node

    def delete(self, value: Any) -> None:
        """Remove the first node holding value, searching from after the tail."""
        if self.tail is None:
            raise IndexError("delete from an empty list")
        prev = self.tail
        curr = prev.next
        while curr.data != value:
            if curr is self.tail:
                raise ValueError(f"{value!r} is not in the list")
            prev, curr = curr, curr.next
        prev.next = curr.next
        if curr is prev:
            self.tail = None
        elif curr is self.tail:
            self.tail = prev
        curr.next = None


def is_circular(head: Any) -> bool:
    """Report whether following next pointers from head leads back to head.

    An empty list counts as circular. A list whose cycle does not pass
    through head is not circular.
    """
    if head is None:
        return True
    seen: set[int] = set()
    node = head.next
    while node is not None and node is not head:
        if id(node) in seen:
            return False
        seen.add(id(node))
        node = node.next
    return node is head