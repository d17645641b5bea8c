from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")


class HeapInvariantError(RuntimeError):
    """Raised when a heap is drained or inspected past its element count."""


@dataclass(frozen=True)
class PQElement(Generic[E]):
    data: E
    priority: float


class PriorityQueue(ABC, Generic[E]):
    @abstractmethod
    def enqueue(self, elem: PQElement[E]) -> None:
        """Add an element."""

    @abstractmethod
    def dequeue(self) -> PQElement[E]:
        """Remove and return the element with the smallest priority."""

    @abstractmethod
    def peek(self) -> PQElement[E]:
        """Return the element with the smallest priority without removing it."""

    @abstractmethod
    def __len__(self) -> int:
        ...


class MinHeap(PriorityQueue[E]):
    """Binary min-heap over `PQElement` priorities.

    Equal priorities come out in insertion order.
    """

    def __init__(self):
        self._heap: list[tuple[float, int, PQElement[E]]] = []
        self._counter = itertools.count()

    def enqueue(self, elem: PQElement[E]) -> None:
        heapq.heappush(self._heap, (elem.priority, next(self._counter), elem))

    def dequeue(self) -> PQElement[E]:
        if not self._heap:
            raise HeapInvariantError("dequeue from an empty heap")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> PQElement[E]:
        if not self._heap:
            raise HeapInvariantError("peek into an empty heap")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)
