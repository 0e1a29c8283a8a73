from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from .. import free
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

class TerminalAccessor(Generic[T]):
    """eager operations. each call drives the sequence once."""

    def __init__(self, seq_instance: 'Seq[T]'):
        self._seq = seq_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._seq._source())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._seq._source())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._seq._source()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._seq._source())
        return sum(1 for x in self._seq._source() if predicate(x))

    def fold(self, init: U, accumulator: Accumulator[U, T]) -> U:
        """left fold starting from init"""
        return free.fold(self._seq._source(), init, accumulator)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return free.all(self._seq._source(), predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, or if there is any element at all"""
        if predicate is None:
            for _ in self._seq._source():
                return True
            return False
        return free.any(self._seq._source(), predicate)

    def max(self, key: Optional[KeySelector[T, K]] = None) -> Optional[T]:
        """largest element or none"""
        return free.max(self._seq._source(), key)

    def min(self, key: Optional[KeySelector[T, K]] = None) -> Optional[T]:
        """smallest element or none"""
        return free.min(self._seq._source(), key)

    def join(self, sep: str) -> str:
        """str() of each element joined by sep"""
        return free.join(self._seq._source(), sep)
