"""
The Stacktrace error type and the functions that build and inspect chains of
them.

A Stacktrace wraps a cause with a message describing what the failing call
was trying to do, the file and line where it was wrapped and an optional
error code:

    try:
        manifest = load(path)
    except OSError as e:
        raise stacktrace.propagate(e, "Failed to load manifest %s", path)
"""

from collections.abc import Iterator

from . import caller
from . import formatting
from .caller import Location

# The error code of errors with no code explicitly attached. Avoid using it
# as an error code of your own.
NO_CODE = 0xFFFF

ErrorCode = int


def _check_code(code) -> int:
    if not isinstance(code, int):
        raise TypeError(f"error code must be an int, got {type(code).__name__}")
    if not 0 <= code <= NO_CODE:
        raise ValueError(f"error code {code} out of range [0, {NO_CODE}]")
    return int(code)


class Stacktrace(Exception):
    """
    One link in a chain of errors.

    Nodes are immutable once built. When no code is given the node takes the
    code of its cause, so a code attached deep in the chain is visible from
    the head.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        code: ErrorCode = NO_CODE,
        location: Location | None = None,
    ):
        code = _check_code(code)
        # If no error code specified, inherit error code from the cause.
        if code == NO_CODE:
            code = get_code(cause)

        super().__init__(message)
        self._message = message
        self._cause = cause
        self._code = code
        self._location = location
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def code(self) -> ErrorCode:
        return self._code

    @property
    def location(self) -> Location | None:
        return self._location

    @property
    def file(self) -> str:
        return self._location.file if self._location else ""

    @property
    def line(self) -> int:
        return self._location.line if self._location else 0

    @property
    def function(self) -> str:
        return self._location.function if self._location else ""

    def exit_code(self) -> int:
        """
        The process exit status suggested by the error code: 1 when there is
        no code, otherwise the code itself.
        """
        if self._code == NO_CODE:
            return 1
        return self._code

    def __str__(self):
        return formatting.render(self)

    def __format__(self, format_spec):
        return formatting.format_spec(self, format_spec)

    def __repr__(self):
        if self._code == NO_CODE:
            return f"{type(self).__name__}({self._message!r})"
        return f"{type(self).__name__}({self._message!r}, code={self._code})"

    def __reduce__(self):
        return (type(self), (self._message, self._cause, self._code, self._location))


def _interpolate(msg: str, args: tuple) -> str:
    # Without args the message is taken verbatim, so "100%" needs no escaping.
    if args:
        return msg % args
    return msg


def _create(cause, code, msg, args) -> Stacktrace:
    # Caller of _create is new_error or propagate, so user's code is 2 up.
    location = caller.capture_caller(2)
    return Stacktrace(_interpolate(msg, args), cause, code, location)


def new_error(msg: str, *args) -> Stacktrace:
    """
    Build a root error with line number information. msg and args work like
    printf-style % formatting:

        if not is_okay(arg):
            raise stacktrace.new_error("Expected %r to be okay", arg)
    """
    return _create(None, NO_CODE, msg, args)


def new_error_with_code(code: ErrorCode, msg: str, *args) -> Stacktrace:
    """Like new_error but also attaches an error code."""
    return _create(None, code, msg, args)


def new_message_with_code(code: ErrorCode, msg: str, *args) -> Stacktrace:
    """
    An error that prints like a plain message with no line number but carries
    an error code. Useful where a code matters but a trace is not warranted:

        if not ttl:
            raise stacktrace.new_message_with_code(ECODE_BAD_INPUT, "Missing ttl query parameter")
    """
    return Stacktrace(_interpolate(msg, args), None, code)


def propagate(cause: BaseException | None, msg: str, *args) -> Stacktrace | None:
    """
    Wrap cause with a message and line number information.

    The message should describe the action that failed, resulting in cause.
    For `result = process(arg)` the message is that we failed to process arg:

        try:
            result = process(arg)
        except ProcessError as e:
            raise stacktrace.propagate(e, "Failed to process %s", arg)

    If there is nothing useful to add, msg can be empty. The error code of
    cause is kept. If cause is None, None is returned so callers can wrap a
    result-or-None without checking it first.
    """
    if cause is None:
        return None
    return _create(cause, NO_CODE, msg, args)


def propagate_with_code(cause: BaseException | None, code: ErrorCode, msg: str, *args) -> Stacktrace | None:
    """
    Like propagate but attaches an error code, overriding the code of cause.

        try:
            os.stat(manifest_path)
        except FileNotFoundError as e:
            raise stacktrace.propagate_with_code(e, ECODE_MANIFEST_NOT_FOUND, "")
    """
    if cause is None:
        return None
    return _create(cause, code, msg, args)


def get_code(err: BaseException | None) -> ErrorCode:
    """
    The error code attached to err, or NO_CODE if err is None, is not a
    Stacktrace or has no code.
    """
    if isinstance(err, Stacktrace):
        return err.code
    return NO_CODE


def get_cause(err: BaseException | None) -> BaseException | None:
    if isinstance(err, Stacktrace):
        return err.cause
    return err


def get_message(err: BaseException | None) -> BaseException | None:
    """A plain error holding only the top message of a Stacktrace."""
    if isinstance(err, Stacktrace):
        return Exception(err.message)
    return err


def root_cause(err: BaseException | None) -> BaseException | None:
    """
    Unwrap the original error that caused the current one.

        perr = stacktrace.root_cause(err)
        if isinstance(perr, ParsingError):
            show_error(perr.line, perr.column, perr.text)

    A foreign error at the bottom of the chain is returned as is. A chain
    made only of Stacktrace nodes yields a plain error with the root message.
    """
    while isinstance(err, Stacktrace):
        if err.cause is None:
            return Exception(err.message)
        err = err.cause
    return err


def iter_chain(err: BaseException | None) -> Iterator[Stacktrace]:
    """Yield the Stacktrace nodes of a chain, head first."""
    while isinstance(err, Stacktrace):
        yield err
        err = err.cause


def exit_code(err: BaseException | None) -> int:
    """0 for no error, otherwise the exit status suggested by err's code."""
    if err is None:
        return 0
    if isinstance(err, Stacktrace):
        return err.exit_code()
    return 1
