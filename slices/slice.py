from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from . import functions

# --- accessors ---
from .extensions.search import SearchAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ISlice(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base slice implementation ---

class _BaseSlice(ISlice[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        if not callable(data_func):
            raise TypeError(f"data_func must be callable, got {type(data_func).__name__}")
        self._data_func = data_func

    def _get_data(self) -> List[T]:
        """evaluate the chain. nothing is cached, so predicates run again on every call."""
        data = self._data_func()
        logger.debug("evaluated slice of %d elements", len(data))
        return data

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

# --- main slice class ---

class Slice(_BaseSlice[T]):
    """a chainable view over the sequence helpers in slices.functions."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.search = SearchAccessor(self)
        self.to = TerminalAccessor(self)

    def filter_(self, predicate: Predicate[T]) -> 'Slice[T]':
        """keep the elements that satisfy predicate"""
        return Slice(lambda: functions.filter_(self._get_data(), predicate))

    def map_(self, selector: Selector[T, U]) -> 'Slice[U]':
        """project each element to a new form"""
        return Slice(lambda: functions.map_(self._get_data(), selector))

    def compact(self) -> 'Slice[T]':
        """drop elements equal to an earlier one, keeping first occurrences"""
        return Slice(lambda: functions.compact(self._get_data()))

    def compact_func(self, comparer: EqualityComparer[T, T]) -> 'Slice[T]':
        """
        compact using comparer as the equality test.
        comparer is called as comparer(candidate, kept).
        """
        return Slice(lambda: functions.compact_func(self._get_data(), comparer))
