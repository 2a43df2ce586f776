from typing import Generic, TypeVar

import attr

K = TypeVar("K")
V = TypeVar("V")


@attr.define
class Pair(Generic[K, V]):
    """A single key/value slot of an associative array.

    The key may not be reassigned once the pair is created; the value may be
    overwritten in place."""

    key: K = attr.field(on_setattr=attr.setters.frozen)
    value: V

    def __iter__(self):
        yield self.key
        yield self.value

    def copy(self) -> "Pair[K, V]":
        """Return a new pair wrapping the same key and value objects."""
        return Pair.of(self.key, self.value)

    @staticmethod
    def of(k: K, v: V) -> "Pair[K, V]":
        return Pair(k, v)
