import threading


class SequenceError(Exception):
    """Base class for errors raised by PyIdioms."""


class OutOfRangeError(SequenceError, IndexError):
    """Raised when an index, step or delimiter is outside the valid range."""


class PreconditionError(SequenceError, ValueError):
    """Raised when an operation is called on an input it does not accept."""


class ParseError(SequenceError, ValueError):
    """Raised when a token cannot be converted to the requested type."""


# Settings --------------------------------------------------------------------

def seterr(parse=None):
    """Set how errors are handled.

    Args:
        parse (str): how :func:`pyidioms.argparse` handles tokens that
            cannot be converted:

            - `'raise'`: raise :class:`ParseError` with the conversion
              error as its cause.
            - `'coerce'`: log a warning and substitute the zero value of
              the target type.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if parse == 'raise':
        error_config.coerce = False
    elif parse == 'coerce':
        error_config.coerce = True
    elif parse is not None:
        raise ValueError("parse must be 'raise' or 'coerce'")

    return "coerce" if error_config.coerce else 'raise'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.coerce = False


error_config = ErrorConfig()
