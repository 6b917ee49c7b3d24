"""Small container designs: a randomized set, a shuffler, a queue and a stack."""

from __future__ import annotations

import random
from typing import Iterable, Optional

from drillbook.nodes import ListNode


class RandomizedSet:
    """A set with constant-time insert, remove and random pick."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._values: list[int] = []
        self._positions: dict[int, int] = {}

    def insert(self, val: int) -> bool:
        """Add ``val``; return False if it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return False if it was not present."""
        index = self._positions.pop(val, None)
        if index is None:
            return False
        last = self._values.pop()
        if index < len(self._values):
            self._values[index] = last
            self._positions[last] = index
        return True

    def get_random(self) -> int:
        """Return a uniformly chosen member; raise IndexError if empty."""
        if not self._values:
            raise IndexError("get_random from an empty set")
        return self._values[self._rng.randrange(len(self._values))]

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions


class ArrayShuffler:
    """Shuffle an array repeatedly and restore its original order on demand."""

    def __init__(self, nums: Iterable[int], rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._original = list(nums)
        self._shuffled = list(self._original)

    def reset(self) -> list[int]:
        """Return the array in its original order."""
        return list(self._original)

    def shuffle(self) -> list[int]:
        """Swap every slot with a random one and return the result.

        Each call continues from the previous shuffle.
        """
        n = len(self._shuffled)
        for i in range(n):
            j = self._rng.randrange(n)
            self._shuffled[i], self._shuffled[j] = self._shuffled[j], self._shuffled[i]
        return list(self._shuffled)


class LinkedQueue:
    """A first-in first-out queue built on linked nodes."""

    def __init__(self) -> None:
        self._first: Optional[ListNode] = None
        self._last: Optional[ListNode] = None
        self._size = 0

    def push(self, item: int) -> None:
        """Append ``item`` at the back."""
        node = ListNode(item)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1

    def pop(self) -> Optional[int]:
        """Remove and return the front item; an empty queue is left as is."""
        if self._first is None:
            return None
        node = self._first
        self._first = node.next
        if self._first is None:
            self._last = None
        self._size -= 1
        return node.val

    def top(self) -> int:
        """Return the front item; raise IndexError if the queue is empty."""
        if self._first is None:
            raise IndexError("top of an empty queue")
        return self._first.val

    def is_empty(self) -> bool:
        return self._first is None

    def __len__(self) -> int:
        return self._size


class LinkedStack:
    """A last-in first-out stack built on linked nodes."""

    def __init__(self) -> None:
        self._first: Optional[ListNode] = None
        self._size = 0

    def push(self, item: int) -> None:
        """Put ``item`` on top."""
        self._first = ListNode(item, self._first)
        self._size += 1

    def pop(self) -> Optional[int]:
        """Remove and return the top item; an empty stack is left as is."""
        if self._first is None:
            return None
        node = self._first
        self._first = node.next
        self._size -= 1
        return node.val

    def top(self) -> int:
        """Return the top item; raise IndexError if the stack is empty."""
        if self._first is None:
            raise IndexError("top of an empty stack")
        return self._first.val

    def is_empty(self) -> bool:
        return self._first is None

    def __len__(self) -> int:
        return self._size