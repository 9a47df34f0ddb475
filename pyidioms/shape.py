"""Views that combine the items of two sequences into pairs."""

import builtins

from .cursors import Cursor, begin, end
from .utils import basic_getitem


class ZipCursor(Cursor):
    def __init__(self, first, second):
        self.first = first
        self.second = second

    def read(self):
        return self.first.read(), self.second.read()

    def advance(self):
        self.first.advance()
        self.second.advance()
        return self

    def position(self):
        return self.first.position(), self.second.position()

    def copy(self):
        return ZipCursor(self.first.copy(), self.second.copy())


class Zipping(object):
    def __init__(self, sequence1, sequence2):
        self.sequence1 = sequence1
        self.sequence2 = sequence2

    def __len__(self):
        return min(len(self.sequence1), len(self.sequence2))

    def __iter__(self):
        return builtins.zip(self.sequence1, self.sequence2)

    @basic_getitem
    def __getitem__(self, key):
        return self.sequence1[key], self.sequence2[key]

    def begin(self):
        return ZipCursor(begin(self.sequence1), begin(self.sequence2))

    def end(self):
        size1 = len(self.sequence1)
        size2 = len(self.sequence2)
        if size1 < size2:
            cursor = begin(self.sequence2)
            for _ in builtins.range(size1):
                cursor.advance()
            return ZipCursor(end(self.sequence1), cursor)
        else:
            cursor = begin(self.sequence1)
            for _ in builtins.range(size2):
                cursor.advance()
            return ZipCursor(cursor, end(self.sequence2))


def zip(sequence1, sequence2):
    """Return a view on the pairs of items taken in lockstep from two sequences.

    The view stops with the shortest sequence.

    Example:

        >>> digits = [8, 6, 7, 5, 3, 0, 9]
        >>> list(pyidioms.zip(digits, "yay zippers"))
        [(8, 'y'), (6, 'a'), (7, 'y'), (5, ' '), (3, 'z'), (0, 'i'), (9, 'p')]
    """
    return Zipping(sequence1, sequence2)


class ProductCursor(Cursor):
    def __init__(self, inner_begin, inner_end, outer, inner):
        # inner_begin and inner_end delimit the fast axis
        self.inner_begin = inner_begin
        self.inner_end = inner_end
        self.outer = outer
        self.inner = inner

    def read(self):
        return self.outer.read(), self.inner.read()

    def advance(self):
        self.inner.advance()
        if self.inner == self.inner_end:
            self.inner = self.inner_begin.copy()
            self.outer.advance()

        return self

    def position(self):
        return self.outer.position(), self.inner.position()

    def copy(self):
        return ProductCursor(self.inner_begin, self.inner_end,
                             self.outer.copy(), self.inner.copy())


class Product(object):
    def __init__(self, sequence1, sequence2):
        self.sequence1 = sequence1
        self.sequence2 = sequence2

    def __len__(self):
        return len(self.sequence1) * len(self.sequence2)

    def __iter__(self):
        for x in self.sequence1:
            for y in self.sequence2:
                yield x, y

    @basic_getitem
    def __getitem__(self, key):
        i, j = divmod(key, len(self.sequence2))
        return self.sequence1[i], self.sequence2[j]

    def begin(self):
        if len(self.sequence2) == 0:
            return self.end()

        return ProductCursor(begin(self.sequence2), end(self.sequence2),
                             begin(self.sequence1), begin(self.sequence2))

    def end(self):
        return ProductCursor(begin(self.sequence2), end(self.sequence2),
                             end(self.sequence1), begin(self.sequence2))


def product(sequence1, sequence2):
    """Return a view on the cartesian product of two sequences.

    Pairs are ordered with the items of `sequence1` varying slowest,
    like two nested for-loops.

    Example:

        >>> list(pyidioms.product("ab", "123"))
        [('a', '1'), ('a', '2'), ('a', '3'), ('b', '1'), ('b', '2'), ('b', '3')]
    """
    return Product(sequence1, sequence2)
