from assocarray.array import (
    DEFAULT_CAPACITY,
    AssociativeArray,
    assoc_array,
    from_pairs,
)
from assocarray.exception import (
    AssociativeArrayException,
    KeyNotFoundError,
    NullKeyError,
)
from assocarray.main import init
from assocarray.pair import Pair

__all__ = [
    "DEFAULT_CAPACITY",
    "AssociativeArray",
    "AssociativeArrayException",
    "KeyNotFoundError",
    "NullKeyError",
    "Pair",
    "assoc_array",
    "from_pairs",
    "init",
]
