from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from .. import functions

if typing.TYPE_CHECKING:
    from ..slice import Slice


def _as_sequence(other: Union[Sequence[Any], 'Slice[Any]']) -> Sequence[Any]:
    """unwrap a slice, leave a plain sequence alone"""
    from ..slice import Slice
    return other._get_data() if isinstance(other, Slice) else other


class TerminalAccessor(Generic[T]):
    def __init__(self, slice_instance: 'Slice[T]'):
        self._slice = slice_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._slice._get_data()

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._slice._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._slice._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._slice._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._slice._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        data = self._slice._get_data()
        if predicate is None: return len(data)
        return len(functions.filter_(data, predicate))

    def equal(self, other: Union[Sequence[T], 'Slice[T]']) -> bool:
        """same length and pairwise == with other"""
        return functions.equal(self._slice._get_data(), _as_sequence(other))

    def equal_func(self, other: Union[Sequence[U], 'Slice[U]'],
                   comparer: EqualityComparer[T, U]) -> bool:
        """same length and comparer(mine, theirs) holds for every pair"""
        return functions.equal_func(self._slice._get_data(), _as_sequence(other), comparer)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        data = self._slice._get_data()
        if predicate is None:
            if not data: raise ValueError("sequence contains no elements")
            return data[0]
        i = functions.index_func(data, predicate)
        if i == -1: raise ValueError("no element satisfies the condition")
        return data[i]

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default. errors raised by predicate still propagate."""
        data = self._slice._get_data()
        if predicate is None: return data[0] if data else default
        i = functions.index_func(data, predicate)
        return data[i] if i != -1 else default
