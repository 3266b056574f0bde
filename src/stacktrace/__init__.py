import logging
from importlib.metadata import PackageNotFoundError, version

from . import cleanpath
from . import console
from .caller import Location
from .config import Format, get_clean_path, get_default_format, set_clean_path, set_default_format
from .errors import (
    NO_CODE,
    ErrorCode,
    Stacktrace,
    exit_code,
    get_cause,
    get_code,
    get_message,
    iter_chain,
    new_error,
    new_error_with_code,
    new_message_with_code,
    propagate,
    propagate_with_code,
    root_cause,
)
from .formatting import format_brief, format_full, render

try:
    __version__ = version("stacktrace")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NO_CODE",
    "ErrorCode",
    "Format",
    "Location",
    "Stacktrace",
    "cleanpath",
    "console",
    "exit_code",
    "format_brief",
    "format_full",
    "get_cause",
    "get_clean_path",
    "get_code",
    "get_default_format",
    "get_message",
    "iter_chain",
    "new_error",
    "new_error_with_code",
    "new_message_with_code",
    "propagate",
    "propagate_with_code",
    "render",
    "root_cause",
    "set_clean_path",
    "set_default_format",
]
