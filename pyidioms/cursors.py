"""Positions within sequences and views.

A cursor marks a position in a sequence, it can be read, moved forward
and compared with another cursor of the same sequence. Every view
exposes a pair of cursors through its :code:`begin()` and :code:`end()`
methods, the end cursor is always reached from the first one after a
finite number of :meth:`Cursor.advance` calls.

Example:

    >>> r = pyidioms.range(3, 0)
    >>> c = r.begin()
    >>> c.read()
    3
    >>> c.advance().read()
    2
    >>> list(walk(r.begin(), r.end()))
    [3, 2, 1]
"""

from abc import ABC, abstractmethod
import copy


class Cursor(ABC):
    """Forward cursor."""

    @abstractmethod
    def read(self):
        """Return the item at the current position."""
        raise NotImplementedError

    @abstractmethod
    def advance(self):
        """Move to the next position and return self."""
        raise NotImplementedError

    @abstractmethod
    def position(self):
        """Return a value identifying the current logical position."""
        raise NotImplementedError

    def copy(self):
        return copy.copy(self)

    def __eq__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return type(self) is type(other) and self.position() == other.position()

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.position())


class BidirectionalCursor(Cursor):
    """Cursor which can also move backward."""

    @abstractmethod
    def retreat(self):
        """Move to the previous position and return self."""
        raise NotImplementedError


class SequenceCursor(BidirectionalCursor):
    """Cursor over an indexable sequence."""

    def __init__(self, sequence, index=0):
        self.sequence = sequence
        self.index = index

    def read(self):
        return self.sequence[self.index]

    def advance(self, n=1):
        self.index += n
        return self

    def retreat(self, n=1):
        self.index -= n
        return self

    def position(self):
        return id(self.sequence), self.index


def begin(sequence):
    """Return a cursor to the first item of a sequence or view."""
    if hasattr(sequence, 'begin'):
        return sequence.begin()
    return SequenceCursor(sequence, 0)


def end(sequence):
    """Return a cursor one past the last item of a sequence or view."""
    if hasattr(sequence, 'end'):
        return sequence.end()
    return SequenceCursor(sequence, len(sequence))


def walk(first, last):
    """Iterate over the items in the cursor range [first, last).

    The cursors passed as arguments are left untouched.
    """
    cursor = first.copy()
    while cursor != last:
        yield cursor.read()
        cursor.advance()


def distance(first, last):
    """Return the number of increments that lead from `first` to `last`."""
    cursor = first.copy()
    n = 0
    while cursor != last:
        cursor.advance()
        n += 1

    return n
