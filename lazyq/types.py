from functools import cmp_to_key, total_ordering
from operator import length_hint
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]

# marks an empty pending slot; None is a legal element
_EMPTY = object()


@total_ordering
class Descending:
    """wraps a key to invert its comparison operators, for inputs sorted high to low."""
    __slots__ = ('obj',)

    def __init__(self, obj):
        self.obj = obj

    def __eq__(self, other):
        return self.obj == other.obj

    def __lt__(self, other):
        return other.obj < self.obj

    def __repr__(self) -> str:
        return f"Descending({self.obj!r})"


def _identity(item):
    return item


def ordering_key(key: Optional[KeySelector[T, K]] = None,
                 comparer: Optional[Comparer[T]] = None,
                 reverse: bool = False) -> KeySelector[T, Any]:
    """
    builds the single key function the merge family compares with.
    key and comparer are alternatives: a projection or a cmp-style function.
    """
    if key is not None and comparer is not None:
        raise ValueError("pass either key or comparer, not both.")

    base = cmp_to_key(comparer) if comparer is not None else (key or _identity)
    if not reverse:
        return base
    return lambda item: Descending(base(item))


class PendingSlot(Generic[T]):
    """
    holds at most one element pulled from a source but not yet emitted,
    together with its merge key. the slot releases the source once it is exhausted.
    """

    def __init__(self, source: Iterator[T], key_func: Optional[KeySelector[T, Any]] = None):
        self._source: Optional[Iterator[T]] = source
        self._key_func = key_func
        self._value: Any = _EMPTY
        self._key: Any = None

    @property
    def is_filled(self) -> bool: return self._value is not _EMPTY

    @property
    def is_exhausted(self) -> bool: return self._source is None and self._value is _EMPTY

    @property
    def value(self) -> T: return self._value

    @property
    def key(self) -> Any: return self._key

    def fill(self) -> bool:
        """pull the next element if the slot is empty. returns whether the slot holds one."""
        if self._value is not _EMPTY:
            return True
        if self._source is None:
            return False
        try:
            item = next(self._source)
        except StopIteration:
            self._source = None
            return False
        # compute the key before storing, so a failing key function leaves the slot empty
        self._key = self._key_func(item) if self._key_func else None
        self._value = item
        return True

    def take(self) -> T:
        """return the held element and clear the slot"""
        item = self._value
        self._value = _EMPTY
        self._key = None
        return item

    def remaining_hint(self) -> int:
        """held element plus whatever the source reports"""
        held = 1 if self._value is not _EMPTY else 0
        return held + (length_hint(self._source) if self._source is not None else 0)

    def __repr__(self) -> str:
        state = 'exhausted' if self.is_exhausted else ('filled' if self.is_filled else 'empty')
        return f"PendingSlot(state={state})"
