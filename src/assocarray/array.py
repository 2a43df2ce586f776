import logging
from collections.abc import Iterable, Iterator
from typing import Any, Callable, Generic, Optional, TypeVar

from functional import seq
from pyrsistent import PVector, pvector

from assocarray.exception import KeyNotFoundError, NullKeyError
from assocarray.logconfig import TRACE
from assocarray.pair import Pair

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 16

PRINT_SEPARATOR = ", "


def pairs_repr(
    entries: Iterable[tuple[Any, Any]], render: Callable[[Any], str] = str
) -> str:
    """Produce the brace-delimited representation of a sequence of key/value
    tuples, rendering each key and value with `render`.

    An empty sequence produces `{}`; otherwise the entries are padded with a
    single space inside the braces, as in `{ a: 1, b: 2 }`."""
    items = [f"{render(k)}: {render(v)}" for k, v in entries]
    if not items:
        return "{}"
    return f"{{ {PRINT_SEPARATOR.join(items)} }}"


class AssociativeArray(Generic[K, V]):
    """An associative array storing key/value pairs in a growable list.

    Keys are located by a linear scan comparing with `==`, so keys need not be
    hashable. The backing list starts with `capacity` slots and doubles
    whenever an insert would overflow it; it never shrinks.

    Removal moves the last pair into the vacated slot, so iteration order is
    insertion order only until the first `remove`."""

    __slots__ = ("_pairs", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Capacity must be a positive integer, got {capacity}")
        self._pairs: list[Optional[Pair[K, V]]] = [None] * capacity
        self._size = 0

    def __contains__(self, key):
        return self.has_key(key)

    def __copy__(self):
        return self.clone()

    def __getitem__(self, key):
        return self.get(key)

    def __iter__(self):
        return self.keys()

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"AssociativeArray({pairs_repr(self.items(), render=repr)})"

    def __setitem__(self, key, value):
        self.set(key, value)

    def __str__(self):
        return pairs_repr(self.items())

    @property
    def capacity(self) -> int:
        return len(self._pairs)

    def _occupied(self) -> Iterator[Pair[K, V]]:
        for i in range(self._size):
            yield self._pairs[i]  # type: ignore[misc]

    def _expand(self) -> None:
        """Double the number of slots in the backing list."""
        old_capacity = len(self._pairs)
        self._pairs.extend([None] * old_capacity)
        logger.log(
            TRACE,
            "Expanded capacity from %d to %d slots",
            old_capacity,
            len(self._pairs),
        )

    def _find(self, key: K) -> Optional[int]:
        """Return the index of the first occupied slot whose key is equal to
        `key`, or None if there is no such slot."""
        for i, pair in enumerate(self._occupied()):
            if pair.key == key:
                return i
        return None

    def set(self, key: K, value: V) -> None:
        """Associate `value` with `key`, replacing any value already stored
        for an equal key.

        Raises `NullKeyError` if `key` is None."""
        if key is None:
            raise NullKeyError()

        idx = self._find(key)
        if idx is not None:
            self._pairs[idx].value = value  # type: ignore[union-attr]
            return

        if self._size >= len(self._pairs):
            self._expand()
        self._pairs[self._size] = Pair.of(key, value)
        self._size += 1

    def get(self, key: K) -> V:
        """Return the value associated with `key`.

        Raises `KeyNotFoundError` if `key` is None or does not appear in the
        array."""
        if key is None:
            raise KeyNotFoundError("Key cannot be None", key=key)
        idx = self._find(key)
        if idx is None:
            raise KeyNotFoundError(f"Key not found: {key}", key=key)
        return self._pairs[idx].value  # type: ignore[union-attr]

    def has_key(self, key: K) -> bool:
        """Return True if `key` appears in the array. None never appears."""
        if key is None:
            return False
        return self._find(key) is not None

    def remove(self, key: K) -> None:
        """Remove the pair associated with `key`, if any.

        The last pair in the array is moved into the vacated slot. Removing
        None or a key which does not appear does nothing."""
        if key is None:
            return

        idx = self._find(key)
        if idx is None:
            return

        last = self._size - 1
        self._pairs[idx] = self._pairs[last]
        self._pairs[last] = None
        self._size = last

    def size(self) -> int:
        return self._size

    def clone(self) -> "AssociativeArray[K, V]":
        """Return a copy of this array.

        The copy has its own backing list and its own pairs, but the keys and
        values themselves are shared with this array."""
        cloned: AssociativeArray[K, V] = AssociativeArray(capacity=len(self._pairs))
        for i, pair in enumerate(self._occupied()):
            cloned._pairs[i] = pair.copy()
        cloned._size = self._size
        logger.debug("Cloned associative array with %d pairs", self._size)
        return cloned

    def keys(self) -> Iterator[K]:
        for pair in self._occupied():
            yield pair.key

    def values(self) -> Iterator[V]:
        for pair in self._occupied():
            yield pair.value

    def items(self) -> Iterator[tuple[K, V]]:
        for pair in self._occupied():
            yield pair.key, pair.value

    def snapshot(self) -> PVector:
        """Return an immutable vector of the (key, value) tuples currently in
        the array, in slot order."""
        return pvector(self.items())


def from_pairs(pairs: Iterable[tuple[K, V]]) -> AssociativeArray[K, V]:
    """Create a new associative array from an iterable of key/value tuples.

    Later pairs overwrite earlier pairs with equal keys."""
    arr: AssociativeArray[K, V] = AssociativeArray()
    for k, v in pairs:
        arr.set(k, v)
    return arr


def assoc_array(*kvs) -> AssociativeArray:
    """Create a new associative array from alternating keys and values."""
    if len(kvs) % 2 != 0:
        raise ValueError("assoc_array requires an even number of arguments")
    return from_pairs(seq(kvs).grouped(2).map(lambda kv: (kv[0], kv[1])))
