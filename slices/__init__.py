r"""
'        _ _
'    ___| (_) ___ ___  ___
'   / __| | |/ __/ _ \/ __|
'   \__ \ | | (_|  __/\__ \
'   |___/_|_|\___\___||___/
"""
import logging

# expose the sequence helpers
from .functions import (
    equal,
    equal_func,
    index,
    index_func,
    contains,
    contains_func,
    compact,
    compact_func,
    map_,
    filter_
)

# expose the chainable wrapper
from .slice import Slice

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    empty,
    S,
    slc
)

# library code logs, applications decide where it goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "equal",
    "equal_func",
    "index",
    "index_func",
    "contains",
    "contains_func",
    "compact",
    "compact_func",
    "map_",
    "filter_",
    "Slice",
    "from_iterable",
    "from_range",
    "empty",
    "S",
    "slc"
]
