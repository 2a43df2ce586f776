from typing import Any

import attr


class AssociativeArrayException(Exception):
    pass


@attr.define(repr=False, str=False)
class NullKeyError(AssociativeArrayException, ValueError):
    """Raised when None is supplied where a key is required."""

    message: str = "Key cannot be None"

    def __repr__(self):
        return f"assocarray.exception.NullKeyError({self.message!r})"

    def __str__(self):
        return self.message


@attr.define(repr=False, str=False)
class KeyNotFoundError(AssociativeArrayException, KeyError):
    """Raised when a lookup fails to locate a key.

    `KeyError` renders its message with `repr`, so `__str__` is overridden to
    produce the plain message instead."""

    message: str
    key: Any = None

    def __repr__(self):
        return (
            f"assocarray.exception.KeyNotFoundError({self.message!r}, {self.key!r})"
        )

    def __str__(self):
        return self.message
