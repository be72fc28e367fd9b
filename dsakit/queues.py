"""Bounded queues: a linear array queue, a circular queue and a deque."""

from __future__ import annotations

from typing import Any


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be positive")


class ArrayQueue:
    """FIFO queue whose slots are only reclaimed once it becomes empty."""

    def __init__(self, capacity: int = 100001) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []
        self._head = 0

    def __len__(self) -> int:
        return len(self._items) - self._head

    def is_empty(self) -> bool:
        return self._head == len(self._items)

    def push(self, value: Any) -> None:
        """Append a value at the rear; raise OverflowError when no slot is left."""
        if len(self._items) == self.capacity:
            raise OverflowError("Queue is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("pop from an empty queue")
        value = self._items[self._head]
        self._head += 1
        if self.is_empty():
            self._items.clear()
            self._head = 0
        return value

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("front of an empty queue")
        return self._items[self._head]

    def rear(self) -> Any:
        if self.is_empty():
            raise IndexError("rear of an empty queue")
        return self._items[-1]


class _Ring:
    """Fixed-capacity ring storage shared by the circular queue and the deque."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = -1
        self._tail = -1

    def __len__(self) -> int:
        if self._empty():
            return 0
        return (self._tail - self._head) % self.capacity + 1

    def _empty(self) -> bool:
        return self._head == -1

    def _full(self) -> bool:
        return not self._empty() and (self._tail + 1) % self.capacity == self._head

    def _add_tail(self, value: Any) -> None:
        if self._full():
            raise OverflowError("Queue is full")
        if self._empty():
            self._head = self._tail = 0
        else:
            self._tail = (self._tail + 1) % self.capacity
        self._slots[self._tail] = value

    def _add_head(self, value: Any) -> None:
        if self._full():
            raise OverflowError("Queue is full")
        if self._empty():
            self._head = self._tail = 0
        else:
            self._head = (self._head - 1) % self.capacity
        self._slots[self._head] = value

    def _take_head(self) -> Any:
        if self._empty():
            raise IndexError("Queue is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        if self._head == self._tail:
            self._head = self._tail = -1
        else:
            self._head = (self._head + 1) % self.capacity
        return value

    def _take_tail(self) -> Any:
        if self._empty():
            raise IndexError("Queue is empty")
        value = self._slots[self._tail]
        self._slots[self._tail] = None
        if self._head == self._tail:
            self._head = self._tail = -1
        else:
            self._tail = (self._tail - 1) % self.capacity
        return value


class CircularQueue(_Ring):
    """FIFO queue over a ring of fixed capacity."""

    def __init__(self, capacity: int = 100000) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        return self._empty()

    def is_full(self) -> bool:
        return self._full()

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear; raise OverflowError when full."""
        self._add_tail(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError when empty."""
        return self._take_head()


class Deque(_Ring):
    """Double-ended queue over a ring of fixed capacity."""

    def __init__(self, capacity: int = 100000) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        return self._empty()

    def is_full(self) -> bool:
        return self._full()

    def push_front(self, value: Any) -> None:
        self._add_head(value)

    def push_rear(self, value: Any) -> None:
        self._add_tail(value)

    def pop_front(self) -> Any:
        return self._take_head()

    def pop_rear(self) -> Any:
        return self._take_tail()

    def front(self) -> Any:
        if self._empty():
            raise IndexError("front of an empty deque")
        return self._slots[self._head]

    def rear(self) -> Any:
        if self._empty():
            raise IndexError("rear of an empty deque")
        return self._slots[self._tail]