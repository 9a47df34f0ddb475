"""Eager transformations that build new sequences."""

import copy

from .errors import OutOfRangeError, PreconditionError
from .utils import isint, rebuild


def _resolve(index, size):
    return index if index >= 0 else size + index


def slice(sequence, start=None, stop=None, step=None):
    """Return a copy of the items selected by :code:`sequence[start:stop:step]`.

    Contrary to built-in slicing, indices are not clipped to the
    sequence bounds, an error is raised instead.

    Args:
        sequence (Sequence): Source sequence, must support integer
            indexing and :func:`len`.
        start (Optional[int]): Index of the first item, negative values
            count from the end (default: first item, or last item when
            `step` is negative).
        stop (Optional[int]): Index where the selection stops,
            excluded (default: past the end in the direction of `step`).
        step (Optional[int]): Signed distance between two selected
            items (default 1).

    Return:
        A new sequence of the same kind as `sequence` (see
        :func:`pyidioms.utils.rebuild`).

    Raises:
        OutOfRangeError: if `step` is 0 or if `start` or `stop` lies
            more than :code:`len(sequence)` positions away from the
            beginning or the end.

    Example:

        >>> nums = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
        >>> pyidioms.slice(nums, -1, 2, -2)
        [9, 7, 5, 3]
        >>> pyidioms.slice(nums, 3, 8, 2)
        [3, 5, 7]
        >>> pyidioms.slice("stressed", step=-1)
        'desserts'
    """
    for name, value in (('start', start), ('stop', stop), ('step', step)):
        if value is not None and not isint(value):
            raise TypeError("slice {} must be an integer or None, not {}"
                            .format(name, value.__class__.__name__))

    size = len(sequence)

    if step is None:
        step = 1
    elif step == 0:
        raise OutOfRangeError("slice step cannot be 0")

    if start is not None and abs(start) > size:
        raise OutOfRangeError("slice start out of range")
    if stop is not None and abs(stop) > size:
        raise OutOfRangeError("slice stop out of range")

    if start is None:
        position = 0 if step > 0 else size - 1
    else:
        position = _resolve(start, size)
        if step < 0 and position == size:
            position = size - 1

    if stop is not None:
        limit = _resolve(stop, size)
    else:
        limit = size if step > 0 else -1

    # an empty sequence resolves a default backward start to -1
    indexes = range(position, limit, step) if position >= 0 else ()

    return rebuild(sequence, [sequence[i] for i in indexes])


def _split_items(sequence, delimiter):
    pieces = []
    run = []
    for item in sequence:
        if item == delimiter:
            if run:
                pieces.append(rebuild(sequence, run))
            run = []
        else:
            run.append(item)

    if run:
        pieces.append(rebuild(sequence, run))

    return pieces


def _split_overlapping(text, delimiter):
    # mark every character covered by at least one occurrence
    masked = [False] * len(text)
    pos = text.find(delimiter)
    while pos >= 0:
        for i in range(pos, pos + len(delimiter)):
            masked[i] = True
        pos = text.find(delimiter, pos + 1)

    pieces = []
    base = None
    for i, hidden in enumerate(masked):
        if not hidden and base is None:
            base = i
        elif hidden and base is not None:
            pieces.append(text[base:i])
            base = None

    if base is not None:
        pieces.append(text[base:])

    return pieces


def split(sequence, delimiter, overlapping=False):
    """Split a sequence on a delimiter.

    Each maximal run of items between delimiters becomes a piece, empty
    runs caused by consecutive delimiters or by delimiters at either
    end are dropped.

    When `sequence` is a string (:class:`str`, :class:`bytes` or
    :class:`bytearray`) and `delimiter` is a string of the same kind,
    the string is split on occurrences of the whole delimiter.

    Args:
        sequence (Iterable): Source sequence.
        delimiter (Any): An item of `sequence` or, for strings, a
            substring.
        overlapping (bool): For multi-character delimiters, wether
            overlapping occurrences should all be cut away (default
            False: occurrences are searched left to right and do not
            overlap).

    Return:
        List[Sequence]: The pieces, built with the same kind as
        `sequence`.

    Raises:
        OutOfRangeError: if the string delimiter is empty.
        TypeError: if a text string is split on a byte string or the
            other way around.

    Example:

        >>> pyidioms.split("watch_dogs_2", "_")
        ['watch', 'dogs', '2']
        >>> pyidioms.split("&*watch&*dogs&*2&*", "&*")
        ['watch', 'dogs', '2']
        >>> pyidioms.split([1, 0, 0, 2, 3, 0], 0)
        [[1], [2, 3]]
    """
    text_types = (str, bytes, bytearray)
    if isinstance(sequence, text_types) and isinstance(delimiter, text_types):
        if isinstance(sequence, str) != isinstance(delimiter, str):
            raise TypeError("cannot split {} on {}".format(
                sequence.__class__.__name__, delimiter.__class__.__name__))
        if len(delimiter) == 0:
            raise OutOfRangeError("delimiter cannot be empty")
        if len(delimiter) == 1:
            # iterating over bytes yields ints
            return _split_items(sequence, delimiter[0])
        if overlapping:
            return _split_overlapping(sequence, delimiter)

        return [piece for piece in sequence.split(delimiter) if piece]

    return _split_items(sequence, delimiter)


def join(items, separator):
    """Concatenate items interleaved with a separator.

    Items and separator must support in-place addition with each other:
    the result starts as a copy of the first item, then the separator and
    the next item are appended in turn.

    Args:
        items (Iterable): Nonempty iterable of values to concatenate.
        separator (Any): Value inserted between two consecutive items.

    Raises:
        PreconditionError: if `items` is empty.

    Example:

        >>> pyidioms.join(["watch", "dogs", "2"], "**")
        'watch**dogs**2'
        >>> pyidioms.join([[1, 2], [3]], [0])
        [1, 2, 0, 3]
    """
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        raise PreconditionError("cannot join an empty sequence") from None

    value = copy.copy(first)
    for item in iterator:
        value += separator
        value += item

    return value
