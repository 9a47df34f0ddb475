"""
Python idioms for iterating and transforming sequences.

The pyidioms package gathers the small helpers one reaches for when
working with sequences (lists, strings, arrays, anything that supports
indexing): counting ranges, enumeration, zipping, cartesian products,
strict slicing, splitting and joining, and a few input/output helpers.

The iteration helpers return lazy read-only views: they reference the
source sequences instead of copying them and compute items on demand.
Views support iteration, :func:`len`, integer indexing, slicing and
expose cursors (see :mod:`pyidioms.cursors`).

The sequence transformations (:func:`slice`, :func:`split`,
:func:`join`) are eager and return new sequences.

Some names shadow Python built-ins, prefer
:code:`import pyidioms` over star imports.
"""

from . import cursors
from .containment import contains, contains_key
from .errors import (
    OutOfRangeError,
    ParseError,
    PreconditionError,
    SequenceError,
    seterr,
)
from .indexing import enumerate, range
from .iohelpers import argparse, format_pair, print_range, wc
from .sequence import join, slice, split
from .shape import product, zip

__all__ = [
    "cursors",
    "SequenceError",
    "OutOfRangeError",
    "PreconditionError",
    "ParseError",
    "seterr",
    "contains",
    "contains_key",
    "range",
    "enumerate",
    "zip",
    "product",
    "slice",
    "split",
    "join",
    "argparse",
    "wc",
    "print_range",
    "format_pair",
]
