"""Miscellaneous tools for internal use."""

import array
import collections
import logging
import numbers
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def basic_getitem(func):
    """Decorate a `__getitem__` method to add slicing support.

    Args:
        func (Callable[[Sequence, int], Any]):
            A `__getitem__` method that only accepts positive integer
            indices smaller than the length of the sequence.

    Return:
        A `__getitem__` method that accepts negative indexing and
        slicing, slices are returned as read-only views.
    """
    def getitem(self, key):
        if isinstance(key, slice):
            return SeqSlice(self, key)

        elif isint(key):
            size = len(self)
            if key < -size or key >= size:
                raise IndexError(self.__class__.__name__ + " index out of range")

            if key < 0:
                key = size + key

            return func(self, key)

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    return getitem


class SeqSlice:
    """Read-only view on the items of a sequence selected by a slice."""

    def __init__(self, sequence, key):
        if isinstance(sequence, SeqSlice):  # optimize nested slices
            self.indexes = sequence.indexes[key]
            sequence = sequence.sequence
        else:
            self.indexes = range(len(sequence))[key]

        self.sequence = sequence

    def __len__(self):
        return len(self.indexes)

    def __iter__(self):
        for i in self.indexes:
            yield self.sequence[i]

    @basic_getitem
    def __getitem__(self, key):
        return self.sequence[self.indexes[key]]


def rebuild(like, values):
    """Return a new sequence of the same kind as `like` holding `values`.

    Strings, byte strings, arrays, numpy arrays, lists, tuples and
    deques keep their type, anything else (ranges, views) becomes a
    list.
    """
    if isinstance(like, str):
        return "".join(values)

    elif isinstance(like, (bytes, bytearray)):
        return type(like)(values)

    elif isinstance(like, array.array):
        return array.array(like.typecode, values)

    elif hasattr(like, 'dtype') and hasattr(like, 'shape'):
        import numpy as np
        return np.asarray(list(values), dtype=like.dtype)

    elif isinstance(like, (list, tuple, collections.deque)) \
            and not hasattr(like, '_fields'):  # skip namedtuples
        return type(like)(values)

    else:
        return list(values)
