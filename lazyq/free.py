"""
free functions that create sequence adaptors or reduce a sequence.

every function accepts any iterable, so callers never convert arguments
themselves. the forwarding functions add no logic of their own; the merge
family and interleave return the adaptors in .adaptors.
"""

from __future__ import annotations

import builtins
import itertools
import logging
from functools import reduce

import numpy as np

from .config import get_config
from .adaptors.interleave import Interleave, InterleaveLongest
from .adaptors.merge import Merge, KMerge
from .types import *

logger = logging.getLogger(__name__)


def enumerate(iterable: Iterable[T], start: int = 0) -> Iterator[Tuple[int, T]]:
    """iterate with a running index"""
    return builtins.enumerate(iterable, start)


def rev(iterable: Iterable[T]) -> Iterator[T]:
    """iterate in reverse. the iterable must support reversed()."""
    return builtins.reversed(iterable)


def zip(i: Iterable[T], j: Iterable[U]) -> Iterator[Tuple[T, U]]:
    """iterate two sequences in lock step, stopping at the shorter"""
    return builtins.zip(i, j)


def chain(i: Iterable[T], j: Iterable[T]) -> Iterator[T]:
    """iterate i and then j"""
    return itertools.chain(i, j)


def fold(iterable: Iterable[T], init: U, f: Accumulator[U, T]) -> U:
    """left fold: f(...f(f(init, x0), x1)..., xn)"""
    return reduce(f, iterable, init)


def all(iterable: Iterable[T], predicate: Predicate[T]) -> bool:
    """true if predicate holds for every element. stops at the first failure."""
    return builtins.all(predicate(x) for x in iterable)


def any(iterable: Iterable[T], predicate: Predicate[T]) -> bool:
    """true if predicate holds for some element. stops at the first match."""
    return builtins.any(predicate(x) for x in iterable)


def max(iterable: Iterable[T], key: Optional[KeySelector[T, K]] = None) -> Optional[T]:
    """largest element, or none for an empty sequence"""
    return builtins.max(iterable, key=key, default=None)


def min(iterable: Iterable[T], key: Optional[KeySelector[T, K]] = None) -> Optional[T]:
    """smallest element, or none for an empty sequence"""
    return builtins.min(iterable, key=key, default=None)


def interleave(i: Iterable[T], j: Iterable[T]) -> Interleave[T]:
    """alternate elements of i and j, stopping when either runs out"""
    return Interleave(i, j)


def interleave_longest(i: Iterable[T], j: Iterable[T]) -> InterleaveLongest[T]:
    """alternate elements of i and j, then drain whichever is longer"""
    return InterleaveLongest(i, j)


def merge(i: Iterable[T], j: Iterable[T],
          key: Optional[KeySelector[T, K]] = None,
          comparer: Optional[Comparer[T]] = None,
          reverse: bool = False) -> Merge[T]:
    """
    merge two sorted iterables into one sorted iterator.

    >>> list(merge([1, 3, 5], [2, 3, 4]))
    [1, 2, 3, 3, 4, 5]
    """
    return Merge(i, j, key=key, comparer=comparer, reverse=reverse)


def kmerge(iterables: Iterable[Iterable[T]],
           key: Optional[KeySelector[T, K]] = None,
           comparer: Optional[Comparer[T]] = None,
           reverse: bool = False) -> KMerge[T]:
    """
    merge any number of sorted iterables into one sorted iterator.

    >>> list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]]))
    [0, 1, 2, 3, 4, 5, 6, 7]
    """
    return KMerge(iterables, key=key, comparer=comparer, reverse=reverse)


def join(iterable: Iterable[Any], sep: str) -> str:
    """render each element with str() and join them with sep"""
    return sep.join(builtins.map(str, iterable))


def _try_numpy_sort(data: List[T]) -> Optional[List[T]]:
    """sort homogeneous int or float lists ascending with numpy. returns none when not applicable."""
    config = get_config()
    if not config.numpy_sort or len(data) < config.numpy_min_size:
        return None
    # exact type checks: bool is an int subclass and mixing types changes what tolist() returns
    first_type = type(data[0])
    if first_type not in (int, float) or not builtins.all(type(x) is first_type for x in data):
        return None
    try:
        arr = np.array(data)
        # ints beyond int64 end up in an object array
        if arr.dtype.kind not in "if":
            return None
        # nan has no place in a total order; leave it to the builtin
        if arr.dtype.kind == "f" and np.isnan(arr).any():
            return None
        ordered = np.sort(arr, kind="stable")
        logger.debug(f"sorted {len(data)} {first_type.__name__} values with numpy")
        return ordered.tolist()
    except (TypeError, ValueError, OverflowError):
        return None


def sorted(iterable: Iterable[T], key: Optional[KeySelector[T, K]] = None,
           reverse: bool = False) -> List[T]:
    """collect every element into a new list in ascending order (descending with reverse)"""
    if key is None:
        data = list(iterable)
        optimized = _try_numpy_sort(data) if data and not reverse else None
        if optimized is not None:
            return optimized
        return builtins.sorted(data, reverse=reverse)
    return builtins.sorted(iterable, key=key, reverse=reverse)


__all__ = [
    "enumerate",
    "rev",
    "zip",
    "chain",
    "fold",
    "all",
    "any",
    "max",
    "min",
    "interleave",
    "interleave_longest",
    "merge",
    "kmerge",
    "join",
    "sorted",
]
