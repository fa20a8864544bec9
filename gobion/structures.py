"""Small generic containers and traversal helpers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


def bottom_up(start: T, proceed: Callable[[T], Optional[T]]) -> Iterator[T]:
    """Yield ``start`` and then each element ``proceed`` leads to, until it returns None.

    Stopping the iteration early stops the walk.
    """
    current: Optional[T] = start
    while current is not None:
        yield current
        current = proceed(current)


@dataclass
class LinkedNode(Generic[T]):
    """A node in a parent-linked chain."""

    parent: Optional["LinkedNode[T]"]
    data: T

    def to_list(self) -> list[T]:
        """Return the data of this node followed by that of every ancestor."""
        return [node.data for node in bottom_up(self, lambda node: node.parent)]


class Queue(Generic[T]):
    """A first-in, first-out queue."""

    def __init__(self, *elements: T) -> None:
        self._items: deque[T] = deque(elements)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, *elements: T) -> None:
        self._items.extend(elements)

    def dequeue(self) -> T:
        """Remove and return the front element; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self, *elements: T) -> None:
        self._items: list[T] = list(elements)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def push(self, *elements: T) -> None:
        self._items.extend(elements)

    def peek(self) -> Optional[T]:
        """Return the top element without removing it, or None when empty."""
        return self._items[-1] if self._items else None

    def pop(self) -> T:
        """Remove and return the top element; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()