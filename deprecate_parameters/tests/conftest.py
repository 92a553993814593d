import pytest

import warnings


@pytest.fixture
def record():
    """Record every warning emitted in the test, including repeated ones."""
    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        yield record


@pytest.fixture
def calls():
    return []


@pytest.fixture
def power(calls):
    def power(x, y, z=None):
        calls.append((x, y, z))
        return x**y

    return power


@pytest.fixture
def sort_pair():
    def sort_pair(a, b, *, key=None):
        return sorted([a, b], key=key)

    return sort_pair


@pytest.fixture
def collect():
    def collect(*args, **kwargs):
        return args, kwargs

    return collect
