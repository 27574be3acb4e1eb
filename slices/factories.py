import logging
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .slice import Slice

logger = logging.getLogger(__name__)

def from_iterable(data: Iterable[T]) -> 'Slice[T]':
    """
    create slice from iterable.
    the iterable is read once, here, so generators are safe to pass in.
    """
    from .slice import Slice
    if not isinstance(data, Iterable):
        raise TypeError(f"expected an iterable, got {type(data).__name__}")
    snapshot = list(data)
    logger.debug("snapshot of %d elements from %s", len(snapshot), type(data).__name__)
    return Slice(lambda: list(snapshot))

def from_range(start: int, count: int) -> 'Slice[int]':
    """create slice from range"""
    from .slice import Slice
    return Slice(lambda: list(range(start, start + count)))

def empty() -> 'Slice[Any]':
    """create empty slice"""
    from .slice import Slice
    return Slice(lambda: [])

# --- aliases ---
S = from_iterable
slc = from_iterable
