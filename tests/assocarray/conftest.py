import pytest

from assocarray import array as aarray


@pytest.fixture
def empty() -> aarray.AssociativeArray:
    return aarray.AssociativeArray()


@pytest.fixture
def letters() -> aarray.AssociativeArray:
    return aarray.assoc_array("a", 1, "b", 2, "c", 3, "d", 4)
