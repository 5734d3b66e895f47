from typing import Any, Callable

from loguru import logger

from .errors import EmptyQueueError


def _frequency_of(item: Any) -> int | float:
    return item.frequency


# Array-backed binary min-heap.
# Entries are compared by (key, insertion sequence), so items with equal keys
# are extracted in the order they were inserted.
class PriorityQueue:
    def __init__(self, key: Callable[[Any], int | float] = _frequency_of) -> None:
        self._key = key
        self._heap: list[tuple[int | float, int, Any]] = []
        self._sequence = 0

    def __len__(self) -> int:
        return len(self._heap)

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return len(self._heap) == 0

    # O(log n)
    def insert(self, item: Any) -> None:
        self._heap.append((self._key(item), self._sequence, item))
        self._sequence += 1
        self._sift_up(len(self._heap) - 1)

    # O(log n)
    def extract_min(self) -> Any:
        if not self._heap:
            logger.error("Cannot extract from an empty priority queue")
            raise EmptyQueueError("PriorityQueue is empty")

        last = len(self._heap) - 1
        self._swap(0, last)
        _, _, item = self._heap.pop()
        if self._heap:
            self._sift_down(0)
        return item

    def peek(self) -> Any:
        if not self._heap:
            raise EmptyQueueError("PriorityQueue is empty")
        return self._heap[0][2]

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i][:2] < self._heap[j][:2]

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        count = len(self._heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            if left >= count:
                break

            smaller = right if right < count and self._less(right, left) else left
            if not self._less(smaller, index):
                break
            self._swap(index, smaller)
            index = smaller
