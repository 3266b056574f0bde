"""
Call-site capture for new Stacktrace nodes.
"""

import logging
import sys
from dataclasses import dataclass
from types import CodeType

from . import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    file: str
    line: int
    function: str = ""

    def __str__(self):
        if self.function:
            return f"{self.file}:{self.line} ({self.function})"
        return f"{self.file}:{self.line}"


def short_func_name(code: CodeType) -> str:
    """
    "FuncName" or "Receiver.MethodName"
    """
    # co_qualname is like one of these:
    # - "func"
    # - "Receiver.method"
    # - "outer.<locals>.inner"
    # - "Receiver.method.<locals>.Helper.run"
    return code.co_qualname.rpartition("<locals>.")[2]


def capture_caller(skip: int = 0) -> Location | None:
    """
    Return the location of a frame on the current stack.

    skip=0 is the function calling capture_caller, skip=1 is its caller and
    so on. Returns None when the interpreter cannot supply frame information.
    """
    getframe = getattr(sys, "_getframe", None)
    if getframe is None:
        logger.debug("Frame introspection unavailable, recording no location")
        return None
    try:
        frame = getframe(skip + 1)
    except ValueError:
        logger.debug("Call stack is shallower than %d frames, recording no location", skip + 1)
        return None

    file = frame.f_code.co_filename
    clean_path = config.get_clean_path()
    if clean_path is not None:
        file = clean_path(file)

    return Location(file, frame.f_lineno, short_func_name(frame.f_code))
