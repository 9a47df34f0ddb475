"""Small input/output helpers."""

import numbers
import sys

from .errors import ParseError, seterr
from .utils import get_logger


logger = get_logger(__name__)


# Command line arguments ------------------------------------------------------

def _check_digits(token):
    # python number literals accept digit separators such as "5_000"
    if "_" in token:
        raise ValueError("invalid number: {!r}".format(token))
    return token


def _parse_int(token):
    return int(_check_digits(token), 10)


def _converter(target):
    if not isinstance(target, type) or issubclass(target, (bool, bytes)):
        raise TypeError("cannot parse arguments as {!r}".format(target))

    if issubclass(target, str):
        return target
    elif issubclass(target, numbers.Integral):
        return lambda token: target(_parse_int(token))
    elif issubclass(target, numbers.Real):
        return lambda token: target(_check_digits(token))
    else:
        raise TypeError("cannot parse arguments as " + target.__name__)


def argparse(argv=None, target=str):
    """Convert command line arguments to values of a given type.

    Args:
        argv (Optional[Sequence[str]]): Argument vector, the first item
            is the program name and is skipped (default
            :data:`sys.argv`).
        target (type): :class:`str`, an integer type parsed in base 10
            or a floating point type (numpy scalar types are accepted).
            Surrounding whitespace is ignored, digit separators ("5_000")
            are rejected.

    Return:
        List: The converted arguments.

    Raises:
        TypeError: if `target` is not a supported type.
        ParseError: if a token cannot be converted, unless
            :code:`seterr(parse='coerce')` was called, then the token
            is replaced by :code:`target(0)`.

    Example:

        >>> pyidioms.argparse(["demo", "-42", "47", "-35", "12"], int)
        [-42, 47, -35, 12]
    """
    convert = _converter(target)

    if argv is None:
        argv = sys.argv

    values = []
    for token in argv[1:]:
        try:
            values.append(convert(token))
        except (ValueError, OverflowError) as error:
            if seterr() == 'raise':
                msg = "cannot parse {!r} as {}".format(token, target.__name__)
                raise ParseError(msg) from error
            else:
                logger.warning("cannot parse %r as %s, using 0 instead",
                               token, target.__name__)
                values.append(target(0))

    return values


# Counting --------------------------------------------------------------------

WC_MODES = ('byte', 'char', 'word', 'line')


def _chunks(f, chunk_size=1 << 16):
    while True:
        chunk = f.read(chunk_size)
        if not chunk:
            return
        yield chunk


def wc(filename, mode='word', encoding='utf-8', errors='replace'):
    """Count the bytes, characters, words or lines in a file.

    Args:
        filename (str or PathLike): File to read.
        mode (str): What to count:

            - `'byte'`: every byte of the file.
            - `'char'`: every decoded character, whitespaces and line
              terminators included as they are stored.
            - `'word'`: whitespace separated tokens.
            - `'line'`: newline terminated records, an unterminated last
              line counts as well. The file is not decoded.
        encoding (str): Text encoding used by the `'char'` and `'word'`
            modes (default 'utf-8').
        errors (str): How undecodable bytes are handled, see
            :func:`python:open` (default 'replace': each invalid byte
            counts as one character).

    Example:

        >>> with open("greetings.txt", "w") as f:
        ...     f.write("hello world\\nbye\\n")
        16
        >>> [pyidioms.wc("greetings.txt", m) for m in ('char', 'word', 'line')]
        [16, 3, 2]
    """
    if mode not in WC_MODES:
        raise ValueError("mode must be one of " + ", ".join(WC_MODES))

    if mode == 'byte':
        with open(filename, 'rb') as f:
            count = sum(len(chunk) for chunk in _chunks(f))

    elif mode == 'char':
        with open(filename, encoding=encoding, errors=errors,
                  newline='') as f:
            count = sum(len(chunk) for chunk in _chunks(f))

    elif mode == 'word':
        with open(filename, encoding=encoding, errors=errors) as f:
            count = sum(len(line.split()) for line in f)

    else:
        with open(filename, 'rb') as f:
            count = sum(1 for _ in f)

    logger.debug("counted %d %ss in %s", count, mode, filename)

    return count


# Printing --------------------------------------------------------------------

def _format(value):
    if isinstance(value, tuple) and len(value) == 2:
        return format_pair(value)
    return format(value)


def format_pair(pair):
    """Format a pair as :code:`(first, second)`.

    Items are formatted with :func:`format`, not :func:`repr`, nested
    pairs are formatted recursively.

    Example:

        >>> pyidioms.format_pair((7, "iterate"))
        '(7, iterate)'
    """
    first, second = pair
    return "(" + _format(first) + ", " + _format(second) + ")"


def print_range(items, sep=" ", end="\n", file=None):
    """Print items separated by `sep` and followed by `end`.

    Nothing is written for an empty iterable. Pairs are printed with
    :func:`format_pair`.

    Args:
        items (Iterable): Values to print.
        sep (str): Written between two items (default ' ').
        end (str): Written after the last item (default '\\n').
        file (Optional[TextIO]): Output stream (default
            :data:`sys.stdout`).

    Example:

        >>> pyidioms.print_range(pyidioms.enumerate("ab"))
        (0, a) (1, b)
    """
    if file is None:
        file = sys.stdout

    iterator = iter(items)
    try:
        current = next(iterator)
    except StopIteration:
        return

    for item in iterator:
        file.write(_format(current) + sep)
        current = item

    file.write(_format(current) + end)
