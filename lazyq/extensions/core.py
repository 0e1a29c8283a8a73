from __future__ import annotations
import typing
from .. import free
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq, OrderedSeq

class _CombinatorOperations(Generic[T]):
    def enumerate(self: 'Seq[T]', start: int = 0) -> 'Seq[Tuple[int, T]]':
        """pair each element with a running index"""
        from ..sequence import Seq
        return Seq(lambda: free.enumerate(self._source(), start))

    def rev(self: 'Seq[T]') -> 'Seq[T]':
        """reverse the sequence. the underlying source must support reversed()."""
        from ..sequence import Seq
        return Seq(lambda: free.rev(self._source()))

    def zip(self: 'Seq[T]', other: Iterable[U]) -> 'Seq[Tuple[T, U]]':
        """pair elements in lock step, stopping at the shorter sequence"""
        from ..sequence import Seq
        return Seq(lambda: free.zip(self._source(), other))

    def chain(self: 'Seq[T]', other: Iterable[T]) -> 'Seq[T]':
        """this sequence followed by other"""
        from ..sequence import Seq
        return Seq(lambda: free.chain(self._source(), other))

    def interleave(self: 'Seq[T]', other: Iterable[T]) -> 'Seq[T]':
        """alternate with other, stopping when either side runs out"""
        from ..sequence import Seq
        return Seq(lambda: free.interleave(self._source(), other))

    def interleave_longest(self: 'Seq[T]', other: Iterable[T]) -> 'Seq[T]':
        """alternate with other, then drain the longer side"""
        from ..sequence import Seq
        return Seq(lambda: free.interleave_longest(self._source(), other))

    def merge(self: 'Seq[T]', other: Iterable[T],
              key: Optional[KeySelector[T, K]] = None,
              comparer: Optional[Comparer[T]] = None,
              reverse: bool = False) -> 'Seq[T]':
        """
        lazily merge this sorted sequence with another sorted iterable.
        both are assumed sorted under the same key/comparer/reverse; nothing is checked.
        """
        from ..sequence import Seq
        # validate the ordering arguments now rather than on first iteration
        ordering_key(key, comparer, reverse)
        return Seq(lambda: free.merge(self._source(), other, key=key, comparer=comparer, reverse=reverse))

    def kmerge(self: 'Seq[Iterable[T]]',
               key: Optional[KeySelector[T, K]] = None,
               comparer: Optional[Comparer[T]] = None,
               reverse: bool = False) -> 'Seq[T]':
        """treat this as a sequence of sorted sequences and merge them all"""
        from ..sequence import Seq
        ordering_key(key, comparer, reverse)
        return Seq(lambda: free.kmerge(self._source(), key=key, comparer=comparer, reverse=reverse))

    def sorted(self: 'Seq[T]', key: Optional[KeySelector[T, K]] = None,
               reverse: bool = False) -> 'OrderedSeq[T]':
        """sort the whole sequence. materializes on iteration."""
        from ..sequence import OrderedSeq
        return OrderedSeq(lambda: free.sorted(self._source(), key=key, reverse=reverse), key, reverse)

    def as_ordered(self: 'Seq[T]', key: Optional[KeySelector[T, K]] = None,
                   reverse: bool = False) -> 'OrderedSeq[T]':
        """
        declares the sequence already sorted by key, without sorting it.
        use it only when the source is pre-sorted; merge_with relies on it.
        """
        from ..sequence import OrderedSeq
        return OrderedSeq(self._source_func, key, reverse)
