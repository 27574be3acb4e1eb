from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Sequence, Any, Optional, Union,
    List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
T1 = TypeVar('T1')
T2 = TypeVar('T2')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
EqualityComparer = Callable[[T1, T2], bool]
