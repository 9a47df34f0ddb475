from random import randint
import numpy as np
import pytest
import pyidioms
from pyidioms.cursors import walk, distance


def test_range():
    tests = [((10,), list(range(10))),
             ((0,), []),
             ((-7,), [0, -1, -2, -3, -4, -5, -6]),
             ((-5, 4), [-5, -4, -3, -2, -1, 0, 1, 2, 3]),
             ((4, -5), [4, 3, 2, 1, 0, -1, -2, -3, -4]),
             ((3, 3), [])]
    slices = [slice(None, None, None),
              slice(1, -1, 3),
              slice(None, None, -3)]

    for args, expected in tests:
        r = pyidioms.range(*args)
        assert list(r) == expected
        assert len(r) == len(expected)
        assert [r[i] for i in range(len(r))] == expected
        assert [r[i - len(r)] for i in range(len(r))] == expected
        assert list(reversed(r)) == expected[::-1]
        for s in slices:
            assert list(r[s]) == expected[s]

    with pytest.raises(IndexError):
        pyidioms.range(3)[3]

    with pytest.raises(TypeError):
        pyidioms.range(3)[1.]

    with pytest.raises(TypeError):
        pyidioms.range(0.5, 3)


def test_range_properties():
    for _ in range(50):
        a, b = randint(-100, 100), randint(-100, 100)
        values = list(pyidioms.range(a, b))

        assert len(values) == abs(b - a)
        assert b not in values
        if a != b:
            last = b - 1 if a < b else b + 1
            assert values[0] == a
            assert values[-1] == last
            assert sum(values) * 2 == (a + last) * len(values)


def test_range_contains():
    r = pyidioms.range(4, -5)
    assert 4 in r
    assert -4 in r
    assert -5 not in r
    assert 5 not in r
    assert "a" not in r


def test_range_cursors():
    r = pyidioms.range(4, -5)
    first, last = r.begin(), r.end()

    assert last.read() == -5
    assert list(walk(first, last)) == list(r)
    assert distance(first, last) == 9

    c = first.copy()
    c.advance().advance()
    assert c.read() == 2
    c.retreat()
    assert c.read() == 3
    assert first.read() == 4

    # equality ignores direction
    assert pyidioms.range(0, 10).begin() == pyidioms.range(0, -10).begin()
    assert pyidioms.range(0, 10).begin() != pyidioms.range(1, 10).begin()

    empty = pyidioms.range(0)
    assert empty.begin() == empty.end()

    c = pyidioms.range(-2, 2).end()
    assert c.retreat().read() == 1


def test_enumerate():
    words = ["iterate", "over", "this", "with", "the", "index"]

    e = pyidioms.enumerate(words[:3], 7)
    assert list(e) == [(7, "iterate"), (8, "over"), (9, "this")]

    e = pyidioms.enumerate(words)
    assert list(e) == list(enumerate(words))
    assert len(e) == len(words)
    assert e[-1] == (5, "index")
    assert list(e[1::2]) == list(enumerate(words))[1::2]

    assert list(pyidioms.enumerate([])) == []
    assert list(pyidioms.enumerate({3}, -1)) == [(-1, 3)]

    with pytest.raises(IndexError):
        e[6]

    with pytest.raises(TypeError):
        pyidioms.enumerate(words, 1.5)


def test_enumerate_view():
    arr = [randint(0, 1000) for _ in range(100)]
    e = pyidioms.enumerate(arr, 3)
    arr[10] = -1
    assert e[10] == (13, -1)
    assert e.sequence is arr


def test_enumerate_cursors():
    text = "abc"
    e = pyidioms.enumerate(text, 10)
    first, last = e.begin(), e.end()

    assert list(walk(first, last)) == [(10, 'a'), (11, 'b'), (12, 'c')]
    assert distance(first, last) == 3
    assert last.index == 13

    c = first.copy()
    c.advance()
    assert c.read() == (11, 'b')
    assert first.read() == (10, 'a')

    # nested views
    e = pyidioms.enumerate(pyidioms.range(3, 0))
    assert list(walk(e.begin(), e.end())) == [(0, 3), (1, 2), (2, 1)]


def test_range_numpy_bounds():
    r = pyidioms.range(np.int8(-100), np.int8(100))
    assert len(r) == 200
    assert len(list(r)) == 200
    assert r[-1] == 99
    assert type(r.start) is int

    r = pyidioms.range(np.uint8(250), np.uint8(3))
    assert len(r) == 247
    assert list(r)[-1] == 4

    e = pyidioms.enumerate("ab", np.int8(127))
    assert list(e) == [(127, 'a'), (128, 'b')]
