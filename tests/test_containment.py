from array import array
from collections import OrderedDict
from collections.abc import Mapping
from random import randint
import numpy as np
import pytest
from pyidioms import contains, contains_key


def test_contains_sequence():
    squares = [1, 4, 9, 16]
    assert contains(squares, 16)
    assert not contains(squares, 15)
    assert not contains([], 0)

    assert contains("abc", "b")
    assert not contains("abc", "ab")
    assert contains(np.array([2, 3, 5]), 3)
    assert contains(array('d', [.5, 1.5]), 1.5)

    arr = [randint(0, 50) for _ in range(30)]
    for x in range(-5, 55):
        assert contains(arr, x) == (x in arr)


def test_contains_prefix():
    primes = [2, 3, 5, 7, 11, 13, 0, 0]
    assert contains(primes, 11, size=6)
    assert not contains(primes, 0, size=6)
    assert contains(primes, 0, size=7)
    assert not contains(primes, 2, size=0)


def test_contains_associative():
    names = {"siwei", "grace"}
    assert contains(names, "siwei")
    assert not contains(names, "yolanda")
    assert contains(frozenset([1, 2]), 2)

    ages = OrderedDict([("siwei", 21), ("grace", 16)])
    assert contains(ages, ("grace", 16))
    assert not contains(ages, ("grace", 17))
    assert not contains(ages, "grace")
    assert contains(ages.keys(), "grace")


def test_contains_key():
    ages = {"siwei": 21, "grace": 16}
    assert contains_key(ages, "siwei")
    assert not contains_key(ages, "yolanda")
    assert contains_key({"a", "b"}, "a")

    with pytest.raises(TypeError):
        contains_key(["siwei"], "siwei")


class Registry(Mapping):
    def __init__(self, data):
        self.data = dict(data)

    def __getitem__(self, key):
        return self.data[key]

    def __iter__(self):
        return iter(self.data)

    def __len__(self):
        return len(self.data)


def test_contains_custom_mapping():
    ages = Registry({"siwei": 21, "grace": 16})
    assert contains(ages, ("grace", 16))
    assert not contains(ages, ("grace", 17))
    assert not contains(ages, ("yolanda", 16))
    assert not contains(ages, "grace")
    assert not contains(ages, ("grace", 16, 0))
    assert contains_key(ages, "siwei")
