from __future__ import annotations

import logging
from heapq import heapify, heappop, heapreplace
from operator import length_hint
from ..types import *
from ..types import _EMPTY

logger = logging.getLogger(__name__)


class Merge(Generic[T]):
    """
    lazily merges two sorted iterables into one sorted iterator.
    holds at most one pending element per side. when keys compare equal the
    left element is emitted first, so the merge is stable.
    unsorted inputs are not detected; the output order is then unspecified.
    """

    def __init__(self, left: Iterable[T], right: Iterable[T],
                 key: Optional[KeySelector[T, K]] = None,
                 comparer: Optional[Comparer[T]] = None,
                 reverse: bool = False):
        order_key = ordering_key(key, comparer, reverse)
        self._left = PendingSlot(iter(left), order_key)
        self._right = PendingSlot(iter(right), order_key)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        left_ready = self._left.fill()
        right_ready = self._right.fill()

        if left_ready and right_ready:
            # strict comparison: ties go to the left side
            if self._right.key < self._left.key:
                return self._right.take()
            return self._left.take()
        if left_ready:
            return self._left.take()
        if right_ready:
            return self._right.take()
        raise StopIteration

    def __length_hint__(self) -> int:
        return self._left.remaining_hint() + self._right.remaining_hint()

    def __repr__(self) -> str:
        return f"Merge(left={self._left!r}, right={self._right!r})"


class KMerge(Generic[T]):
    """
    lazily merges any number of sorted iterables using a binary min-heap.

    heap entries are [key, source_index, element, iterator]; the unique source
    index breaks ties, so equal keys come out in source order and elements are
    never compared directly. the heap is built on the first call to next(),
    and the source of an emitted element is only pulled again on the next call.
    """

    def __init__(self, sources: Iterable[Iterable[T]],
                 key: Optional[KeySelector[T, K]] = None,
                 comparer: Optional[Comparer[T]] = None,
                 reverse: bool = False):
        self._order_key = ordering_key(key, comparer, reverse)
        self._sources: Optional[Iterable[Iterable[T]]] = sources
        self._pending: Optional[Iterator[Tuple[int, Iterable[T]]]] = None
        # entry being primed: [key, source_index, element or _EMPTY, iterator]
        self._stalled: Optional[list] = None
        self._total = 0
        self._heap: List[list] = []
        self._primed = False
        self._emitted: Optional[list] = None
        self._count = 0
        self._done = False

    def __iter__(self) -> Iterator[T]:
        return self

    def _prime(self) -> None:
        """
        pull the head of every source and heapify, o(k).
        progress is kept on self, so when a source or the key function raises
        the next call resumes with the same source and no pulled head is lost.
        """
        if self._pending is None:
            self._pending = enumerate(self._sources)
            self._sources = None

        while True:
            entry = self._stalled
            if entry is None:
                step = next(self._pending, None)
                if step is None:
                    break
                index, source = step
                self._total = index + 1
                entry = self._stalled = [None, index, _EMPTY, iter(source)]
            if entry[2] is _EMPTY:
                head = next(entry[3], _EMPTY)
                if head is _EMPTY:
                    self._stalled = None
                    continue
                entry[2] = head
            entry[0] = self._order_key(entry[2])
            self._heap.append(entry)
            self._stalled = None

        heapify(self._heap)
        self._pending = None
        self._primed = True
        logger.debug(f"kmerge primed {len(self._heap)} of {self._total} sources")

    def _refill(self) -> None:
        """replace the last emitted entry with its source's next element, or drop it"""
        entry = self._emitted
        # a key of _EMPTY means the element was pulled but its key never computed
        if entry[0] is not _EMPTY:
            item = next(entry[3], _EMPTY)
            if item is _EMPTY:
                heappop(self._heap)
                self._emitted = None
                return
            entry[0] = _EMPTY
            entry[2] = item
        entry[0] = self._order_key(entry[2])
        heapreplace(self._heap, entry)
        self._emitted = None

    def __next__(self) -> T:
        if not self._primed:
            self._prime()
        elif self._emitted is not None:
            self._refill()

        if not self._heap:
            if not self._done:
                self._done = True
                logger.debug(f"kmerge exhausted after {self._count} elements")
            raise StopIteration

        entry = self._heap[0]
        self._emitted = entry
        self._count += 1
        return entry[2]

    def __length_hint__(self) -> int:
        if not self._primed:
            return 0
        # the emitted entry is still on the heap until the next refill
        emitted = self._emitted
        pending = len(self._heap)
        if emitted is not None and emitted[0] is not _EMPTY:
            pending -= 1
        return pending + sum(length_hint(entry[3]) for entry in self._heap)

    def __repr__(self) -> str:
        state = 'unprimed' if not self._primed else f"sources={len(self._heap)}"
        return f"KMerge({state})"
