import pyidioms
from pyidioms.cursors import SequenceCursor, begin, end, walk, distance


def test_sequence_cursor():
    arr = [3, 1, 4, 1, 5]
    first, last = begin(arr), end(arr)

    assert isinstance(first, SequenceCursor)
    assert list(walk(first, last)) == arr
    assert distance(first, last) == 5
    assert first.index == 0

    c = first.copy()
    assert c == first
    c.advance(2)
    assert c.read() == 4
    assert c != first
    c.retreat()
    assert c.read() == 1

    # same values, different sequences
    assert begin(arr) != begin(list(arr))
    assert begin([]) != begin(())


def test_view_cursors():
    r = pyidioms.range(2)
    assert begin(r) == r.begin()
    assert end(r) == r.end()
    assert begin(r) != begin([0, 1])

    arr = ["a", "b"]
    e = pyidioms.enumerate(arr)
    z = pyidioms.zip(arr, arr)
    assert list(walk(begin(e), end(e))) == [(0, "a"), (1, "b")]
    assert list(walk(begin(z), end(z))) == [("a", "a"), ("b", "b")]
    assert repr(r.begin()) == "RangeCursor(0)"


def test_walk_partial():
    arr = list(range(10))
    first = begin(arr).advance(2)
    last = end(arr).retreat(3)
    assert list(walk(first, last)) == arr[2:7]
    assert pyidioms.join(walk(first, last), 0) == sum(arr[2:7])
