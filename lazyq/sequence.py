from __future__ import annotations

from abc import ABC, abstractmethod
from .adaptors.merge import Merge, KMerge
from .types import *

# --- core functionality ---
from .extensions.core import _CombinatorOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _source(self) -> Iterable[T]:
        """a fresh iterable over the underlying data"""
        pass

# --- base sequence implementation ---

class _BaseSeq(ISequence[T]):
    def __init__(self, source_func: Callable[[], Iterable[T]]):
        """init with a function that returns the source iterable when called"""
        self._source_func = source_func

    def _source(self) -> Iterable[T]:
        # nothing is cached: a sequence over a generator can be driven once
        return self._source_func()

    def __iter__(self) -> Iterator[T]:
        return iter(self._source())

# --- main sequence class ---

class Seq(
    _BaseSeq[T],
    _CombinatorOperations[T]
):
    """a lazy, chainable wrapper around any iterable."""
    def __init__(self, source_func: Callable[[], Iterable[T]]):
        super().__init__(source_func)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source_func!r})"

# --- ordered sequence class ---

class OrderedSeq(Seq[T]):
    """a sequence known to be sorted by (key, reverse); ordered sequences merge with each other."""

    def __init__(self, source_func: Callable[[], Iterable[T]],
                 key: Optional[KeySelector[T, K]] = None, reverse: bool = False):
        super().__init__(source_func)
        self._key = key
        self._reverse = reverse

    @property
    def key(self) -> Optional[KeySelector[T, Any]]: return self._key

    @property
    def reverse(self) -> bool: return self._reverse

    def _check_compatible(self, other: 'OrderedSeq[T]') -> None:
        if not isinstance(other, OrderedSeq):
            raise TypeError("can only merge with another ordered sequence; use sorted() or as_ordered().")
        if other._key is not self._key or other._reverse != self._reverse:
            raise TypeError("cannot merge sequences with different sort keys or directions.")

    def merge_with(self, other: 'OrderedSeq[T]') -> 'OrderedSeq[T]':
        """
        lazily merges this sorted sequence with another compatible sorted sequence (o(n + m)).
        raises a typeerror if the sort keys and directions are not identical.
        """
        self._check_compatible(other)
        key, reverse = self._key, self._reverse
        return OrderedSeq(lambda: Merge(self._source(), other._source(), key=key, reverse=reverse),
                          key, reverse)

    def kmerge_with(self, *others: 'OrderedSeq[T]') -> 'OrderedSeq[T]':
        """merges this and any number of compatible sorted sequences with a heap (o(log k) per element)"""
        for other in others:
            self._check_compatible(other)
        key, reverse = self._key, self._reverse
        return OrderedSeq(lambda: KMerge([self._source()] + [o._source() for o in others],
                                         key=key, reverse=reverse),
                          key, reverse)
