from __future__ import annotations

from typing import Callable, MutableSequence, Optional, TypeVar

from ngram_speller.datastructures.priority_queue import (
    HeapInvariantError,
    MinHeap,
    PQElement,
    PriorityQueue,
)

E = TypeVar("E")


def top_k_sort(
    array: MutableSequence[Optional[PQElement[E]]],
    k: int,
    queue_factory: Callable[[], PriorityQueue[E]] = MinHeap,
) -> None:
    """Sort the largest `k` elements of `array` in place, in descending order.

    Positions past the last kept element are set to None. Runs in
    O(n log k) time with a heap of at most `k` elements.
    """
    if k < 0:
        raise ValueError("k cannot be negative")
    n = len(array)
    if n == 0:
        return
    if k == 0:
        for i in range(n):
            array[i] = None
        return

    heap = queue_factory()
    live = min(k, n)
    for i in range(live):
        heap.enqueue(array[i])

    for i in range(live, n):
        if heap.peek().priority < array[i].priority:
            heap.dequeue()
            heap.enqueue(array[i])

    for i in range(live, n):
        array[i] = None
    # smallest kept element goes last
    for slot in range(live - 1, -1, -1):
        if len(heap) == 0:
            raise HeapInvariantError(f"heap drained early at slot {slot} of {live}")
        array[slot] = heap.dequeue()
