import builtins
import itertools
import operator

from .cursors import BidirectionalCursor, Cursor, begin, end
from .utils import isint, basic_getitem


class RangeCursor(BidirectionalCursor):
    def __init__(self, current, forward):
        self.current = current
        self.forward = forward

    def read(self):
        return self.current

    def advance(self):
        self.current += 1 if self.forward else -1
        return self

    def retreat(self):
        self.current -= 1 if self.forward else -1
        return self

    def position(self):
        # direction is a property of the view, not of the position
        return self.current


class Range:
    def __init__(self, start, stop=None):
        if stop is None:
            start, stop = 0, start

        if not isint(start) or not isint(stop):
            raise TypeError(
                "range bounds must be integers, not {} and {}".format(
                    start.__class__.__name__, stop.__class__.__name__))

        # fixed width integers (numpy scalars) would overflow in __len__
        self.start = operator.index(start)
        self.stop = operator.index(stop)
        self.forward = self.start < self.stop

    @property
    def step(self):
        return 1 if self.forward else -1

    def __len__(self):
        return abs(self.stop - self.start)

    def __iter__(self):
        return iter(builtins.range(self.start, self.stop, self.step))

    def __reversed__(self):
        return iter(builtins.range(self.start, self.stop, self.step)[::-1])

    def __contains__(self, value):
        return isint(value) \
            and value in builtins.range(self.start, self.stop, self.step)

    @basic_getitem
    def __getitem__(self, key):
        return self.start + self.step * key

    def __repr__(self):
        return "range({}, {})".format(self.start, self.stop)

    def begin(self):
        return RangeCursor(self.start, self.forward)

    def end(self):
        return RangeCursor(self.stop, self.forward)


def range(start, stop=None):
    """Return a view on the consecutive integers in [start, stop).

    The iteration goes downward when `start` is above `stop`, only unit
    steps are supported.

    Args:
        start (int): first value, or the stop value when `stop` is
            omitted in which case iteration starts at 0.
        stop (Optional[int]): value past the last one, never yielded.

    Example:

        >>> list(pyidioms.range(4))
        [0, 1, 2, 3]
        >>> list(pyidioms.range(-7))
        [0, -1, -2, -3, -4, -5, -6]
        >>> list(pyidioms.range(4, -5))
        [4, 3, 2, 1, 0, -1, -2, -3, -4]
    """
    return Range(start, stop)


class EnumerationCursor(Cursor):
    def __init__(self, index, cursor):
        self.index = index
        self.cursor = cursor

    def read(self):
        return self.index, self.cursor.read()

    def advance(self):
        self.index += 1
        self.cursor.advance()
        return self

    def position(self):
        return self.index, self.cursor.position()

    def copy(self):
        return EnumerationCursor(self.index, self.cursor.copy())


class Enumeration:
    def __init__(self, sequence, start=0):
        if not isint(start):
            raise TypeError("start must be an integer, not "
                            + start.__class__.__name__)

        self.sequence = sequence
        self.start = operator.index(start)

    def __len__(self):
        return len(self.sequence)

    def __iter__(self):
        return builtins.zip(itertools.count(self.start), self.sequence)

    @basic_getitem
    def __getitem__(self, key):
        return self.start + key, self.sequence[key]

    def begin(self):
        return EnumerationCursor(self.start, begin(self.sequence))

    def end(self):
        return EnumerationCursor(
            self.start + len(self.sequence), end(self.sequence))


def enumerate(sequence, start=0):
    """Return a view pairing each item of a sequence with its index.

    Args:
        sequence (Sequence): Source sequence, it is referenced, not
            copied.
        start (int): Index of the first item (default 0).

    Example:

        >>> words = ["iterate", "over", "this"]
        >>> list(pyidioms.enumerate(words, 7))
        [(7, 'iterate'), (8, 'over'), (9, 'this')]
    """
    return Enumeration(sequence, start)
