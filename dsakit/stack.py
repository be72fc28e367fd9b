"""A bounded array stack and stack manipulations on plain lists.

The list-based helpers treat the end of the list as the top of the stack.
"""

from __future__ import annotations

from typing import Any


class ArrayStack:
    """LIFO stack holding at most `capacity` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self.capacity}, items={self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        """Put a value on top; raise OverflowError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is Empty")
        return self._items[-1]


def reverse_string(text: str) -> str:
    """Return text reversed by pushing its characters and popping them back."""
    stack = list(text)
    out = []
    while stack:
        out.append(stack.pop())
    return "".join(out)


def delete_middle(stack: list) -> Any:
    """Remove the middle element of the stack in place and return it.

    The middle is the element `len(stack) // 2` places below the top.
    """
    if not stack:
        raise IndexError("delete_middle on an empty stack")
    index = len(stack) - 1 - len(stack) // 2
    return stack.pop(index)


def insert_at_bottom(stack: list, value: Any) -> None:
    """Place value beneath every element already on the stack."""
    stack.insert(0, value)


def reverse_stack(stack: list) -> None:
    """Reverse the stack in place, so the old top becomes the bottom."""
    stack.reverse()


def sort_stack(stack: list) -> None:
    """Sort the stack in place so that the largest value ends up on top."""
    stack.sort()