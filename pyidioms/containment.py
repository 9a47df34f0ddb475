"""Membership tests."""

import itertools
from collections.abc import Mapping, Set


def contains(items, target, size=None):
    """Return wether `target` is an item of `items`.

    Sets use their hash or tree based lookup, mappings are treated as
    collections of `(key, value)` pairs, anything else is scanned
    linearly by item equality. Note that strings are scanned character
    per character, :code:`contains("abc", "ab")` is false.

    Args:
        items (Iterable): Container to search.
        target (Any): Value to look for.
        size (Optional[int]): Only scan the first `size` positions of
            `items`, for fixed size buffers with unused trailing slots.

    Example:

        >>> pyidioms.contains([1, 4, 9, 16], 16)
        True
        >>> primes = [2, 3, 5, 7, 11, 13, 0, 0]
        >>> pyidioms.contains(primes, 0, size=6)
        False
        >>> pyidioms.contains({"siwei", "grace"}, "yolanda")
        False
    """
    if size is not None:
        return any(item == target for item in itertools.islice(items, size))

    if isinstance(items, Set):
        return target in items

    if isinstance(items, Mapping):
        if not isinstance(target, tuple) or len(target) != 2:
            return False
        key, value = target
        return key in items and items[key] == value

    return any(item == target for item in items)


def contains_key(items, key):
    """Return wether `key` is a key of a mapping or an item of a set.

    Example:

        >>> pyidioms.contains_key({"siwei": 21, "grace": 16}, "siwei")
        True
    """
    if not isinstance(items, (Mapping, Set)):
        raise TypeError("contains_key requires a mapping or a set, not "
                        + items.__class__.__name__)

    return key in items
