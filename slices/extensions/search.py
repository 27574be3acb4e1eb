from __future__ import annotations
import typing
from ..types import *
from .. import functions

if typing.TYPE_CHECKING:
    from ..slice import Slice


class SearchAccessor(Generic[T]):
    """left-to-right lookups. all of them stop at the first match."""
    def __init__(self, slice_instance: 'Slice[T]'):
        self._slice = slice_instance

    def index(self, value: T) -> int:
        """index of the first element equal to value, or -1"""
        return functions.index(self._slice._get_data(), value)

    def index_func(self, predicate: Predicate[T]) -> int:
        """index of the first element satisfying predicate, or -1"""
        return functions.index_func(self._slice._get_data(), predicate)

    def contains(self, value: T) -> bool:
        return functions.contains(self._slice._get_data(), value)

    def contains_func(self, predicate: Predicate[T]) -> bool:
        return functions.contains_func(self._slice._get_data(), predicate)
