import pytest

from assocarray.exception import (
    AssociativeArrayException,
    KeyNotFoundError,
    NullKeyError,
)


@pytest.mark.parametrize(
    "exc,base",
    [
        (NullKeyError(), AssociativeArrayException),
        (NullKeyError(), ValueError),
        (KeyNotFoundError("Key not found: a", key="a"), AssociativeArrayException),
        (KeyNotFoundError("Key not found: a", key="a"), KeyError),
        (KeyNotFoundError("Key not found: a", key="a"), LookupError),
    ],
)
def test_exception_hierarchy(exc, base):
    assert isinstance(exc, base)


def test_null_key_error_message():
    assert "Key cannot be None" == str(NullKeyError())
    assert "no keys here" == str(NullKeyError("no keys here"))


def test_key_not_found_error_message():
    e = KeyNotFoundError("Key not found: a", key="a")
    assert "Key not found: a" == str(e)
    assert "a" == e.key
    assert "assocarray.exception.KeyNotFoundError('Key not found: a', 'a')" == repr(e)


def test_key_not_found_error_can_be_raised():
    with pytest.raises(KeyError) as exc_info:
        raise KeyNotFoundError("Key not found: 3", key=3)
    assert 3 == exc_info.value.key
