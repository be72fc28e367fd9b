"""Singly linked lists: positional edits, cycle detection and merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A singly linked node; compared by identity so cycles are safe."""

    data: Any
    next: Optional[Node] = field(default=None, repr=False)


class LinkedList:
    """A singly linked list that tracks both its head and its tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        for value in values:
            self.insert_at_tail(value)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def insert_at_head(self, value: Any) -> Node:
        node = Node(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        return node

    def insert_at_tail(self, value: Any) -> Node:
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        return node

    def _node_before(self, position: int) -> Node:
        """Return the node at position - 1 (1-based), raising IndexError if absent."""
        node = self.head
        for _ in range(position - 2):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError(f"position {position} is out of range")
        return node

    def insert_at_position(self, position: int, value: Any) -> Node:
        """Insert a value so that it ends up at the 1-based position."""
        if position < 1:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            return self.insert_at_head(value)
        previous = self._node_before(position)
        if previous.next is None:
            return self.insert_at_tail(value)
        node = Node(value, previous.next)
        previous.next = node
        return node

    def delete_at_position(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its value."""
        if position < 1 or self.head is None:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            removed = self.head
            self.head = removed.next
            if self.head is None:
                self.tail = None
        else:
            previous = self._node_before(position)
            removed = previous.next
            if removed is None:
                raise IndexError(f"position {position} is out of range")
            previous.next = removed.next
            if removed is self.tail:
                self.tail = previous
        removed.next = None
        return removed.data


def detect_loop(head: Optional[Node]) -> bool:
    """Report whether following next pointers from head ever revisits a node."""
    visited: set[int] = set()
    node = head
    while node is not None:
        if id(node) in visited:
            return True
        visited.add(id(node))
        node = node.next
    return False


def floyd_detect_loop(head: Optional[Node]) -> Optional[Node]:
    """Return the node where the slow and fast pointers meet, or None if acyclic."""
    slow = fast = head
    while slow is not None and fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        slow = slow.next
        if slow is fast:
            return slow
    return None


def get_starting_node(head: Optional[Node]) -> Optional[Node]:
    """Return the first node of the cycle, or None if the list has no cycle."""
    if head is None:
        return None
    intersection = floyd_detect_loop(head)
    if intersection is None:
        return None
    slow = head
    while slow is not intersection:
        slow = slow.next
        intersection = intersection.next
    return slow


def remove_loop(head: Optional[Node]) -> None:
    """Break the cycle, if any, so that the list ends after its last distinct node."""
    start = get_starting_node(head)
    if start is None:
        return
    node = start
    while node.next is not start:
        node = node.next
    node.next = None


def find_mid(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; for even lengths, the last node of the first half."""
    if head is None:
        return None
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def merge_sorted(left: Optional[Node], right: Optional[Node]) -> Optional[Node]:
    """Splice two ascending lists into one and return its head."""
    if right is None:
        return left
    if left is None:
        return right
    dummy = Node(None)
    last = dummy
    while left is not None and right is not None:
        if left.data < right.data:
            last.next, left = left, left.next
        else:
            last.next, right = right, right.next
        last = last.next
    last.next = left if left is not None else right
    return dummy.next


def merge_sort(head: Optional[Node]) -> Optional[Node]:
    """Sort a list by relinking its nodes and return the new head."""
    if head is None or head.next is None:
        return head
    mid = find_mid(head)
    right = mid.next
    mid.next = None
    return merge_sorted(merge_sort(head), merge_sort(right))