"""
Process-wide settings.

Both values are meant to be set once at startup and only read afterwards.
Changing them while other threads are creating or printing errors is up to
the caller to coordinate.
"""

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum

from . import cleanpath

logger = logging.getLogger(__name__)

FORMAT_ENV_VAR = "STACKTRACE_FORMAT"


class Format(Enum):
    """The two ways a Stacktrace can be printed."""

    # Full trace including line number information.
    FULL = "full"
    # A single line without line number information.
    BRIEF = "brief"


def parse_format(value: Format | str) -> Format:
    if isinstance(value, Format):
        return value
    if isinstance(value, str):
        try:
            return Format(value.strip().lower())
        except ValueError:
            pass
    raise ValueError(f"Unknown stacktrace format {value!r}, expected 'full' or 'brief'")


_default_format = Format.FULL
_clean_path: Callable[[str], str] | None = cleanpath.remove_sys_path


def get_default_format() -> Format:
    return _default_format


def set_default_format(fmt: Format | str) -> None:
    """
    Set the format used by str(err) and by format specs without a "+" or "#"
    directive. Accepts a Format or its name.
    """
    global _default_format
    _default_format = parse_format(fmt)
    logger.debug("Default stacktrace format set to %s", _default_format.value)


def get_clean_path() -> Callable[[str], str] | None:
    return _clean_path


def set_clean_path(fn: Callable[[str], str] | None) -> None:
    """
    Set the function applied to file paths before they are recorded in a new
    Stacktrace. None records paths exactly as the interpreter reports them.
    """
    global _clean_path
    if fn is not None and not callable(fn):
        raise TypeError(f"clean path must be callable or None, got {type(fn).__name__}")
    _clean_path = fn
    logger.debug("Stacktrace clean path set to %r", fn)


def load_env(environ: Mapping[str, str] | None = None) -> None:
    """Apply STACKTRACE_FORMAT from the environment, if set."""
    if environ is None:
        environ = os.environ
    value = environ.get(FORMAT_ENV_VAR, "").strip()
    if not value:
        return
    try:
        set_default_format(value)
    except ValueError:
        logger.warning("Ignoring %s=%r, expected 'full' or 'brief'", FORMAT_ENV_VAR, value)


load_env()
