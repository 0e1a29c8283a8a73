from __future__ import annotations

from operator import length_hint
from ..types import *


class Interleave(Generic[T]):
    """
    alternates first, second, first, second... and stops at the shorter input.
    elements are produced in pairs: the second element of a pair is pulled
    together with the first and held until the next call. a first element
    without a partner is dropped, like zip(), so the output always has
    2 * min(len(first), len(second)) elements.
    """

    def __init__(self, first: Iterable[T], second: Iterable[T]):
        self._first: Optional[Iterator[T]] = iter(first)
        self._held = PendingSlot(iter(second))

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._held.is_filled:
            return self._held.take()
        if self._first is None:
            raise StopIteration

        try:
            item = next(self._first)
        except StopIteration:
            self._stop()
            raise
        if not self._held.fill():
            self._stop()
            raise StopIteration
        return item

    def _stop(self) -> None:
        # release both sources; the adaptor stays exhausted
        self._first = None
        self._held = PendingSlot(iter(()))

    def __length_hint__(self) -> int:
        if self._first is None:
            return 0
        held = 1 if self._held.is_filled else 0
        pairs = min(length_hint(self._first), self._held.remaining_hint() - held)
        return held + 2 * pairs

    def __repr__(self) -> str:
        return f"Interleave(held={self._held!r})"


class InterleaveLongest(Generic[T]):
    """alternates first, second, first... and drains the longer input once the other is exhausted"""

    def __init__(self, first: Iterable[T], second: Iterable[T]):
        self._iterators: List[Optional[Iterator[T]]] = [iter(first), iter(second)]
        self._turn = 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        for _ in range(2):
            index = self._turn
            self._turn = 1 - index
            iterator = self._iterators[index]
            if iterator is None:
                continue
            try:
                return next(iterator)
            except StopIteration:
                self._iterators[index] = None
        raise StopIteration

    def __length_hint__(self) -> int:
        return sum(length_hint(it) for it in self._iterators if it is not None)

    def __repr__(self) -> str:
        live = sum(1 for it in self._iterators if it is not None)
        return f"InterleaveLongest(live_sources={live})"
