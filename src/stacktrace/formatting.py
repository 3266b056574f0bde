"""
Rendering of Stacktrace chains.

str(err) and "{}".format(err) print a full trace including line number
information by default. To get a condensed single-line output everywhere,
call stacktrace.set_default_format("brief") or set STACKTRACE_FORMAT=brief.

The format spec "+s" (or just "+") forces a full trace regardless of the
default. Similarly "#s" (or just "#") forces brief output:

    log.error(f"{err:+}")   # full
    log.error(f"{err:#}")   # brief

Width, alignment and precision in the spec are applied to the rendered text,
so f"{err:>#60.40}" right-aligns the first 40 characters of the brief form.
The "0" flag follows str formatting and pads on the right: f"{err:#08}"
gives "A: B0000", not "0000A: B".
"""

import re

from . import config
from . import errors as err
from .config import Format

_FORMAT_SPEC = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>=^]))?"
    r"(?P<sign>[-+ ])?"
    r"(?P<z>z)?"
    r"(?P<alt>#)?"
    r"(?P<zero>0)?"
    r"(?P<width>\d+)?"
    r"(?P<grouping>[,_])?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<type>[bcdeEfFgGnosxX%])?",
    re.DOTALL,
)


def format_full(st: "err.Stacktrace") -> str:
    text = ""

    def newline():
        nonlocal text
        if text and not text.endswith("\n"):
            text += "\n"

    for curr in err.iter_chain(st):
        text += curr.message

        if curr.file:
            newline()
            if not curr.function:
                text += f" --- at {curr.file}:{curr.line} ---"
            else:
                text += f" --- at {curr.file}:{curr.line} ({curr.function}) ---"

        if curr.cause is not None:
            newline()
            if not isinstance(curr.cause, err.Stacktrace):
                text += "Caused by: "
                text += str(curr.cause)
            elif curr.cause.message:
                # The next iteration prints the cause's message.
                text += "Caused by: "

    return text


def format_brief(st: "err.Stacktrace") -> str:
    text = ""

    def concat(msg):
        nonlocal text
        if text and msg:
            text += ": "
        text += msg

    curr = st
    for curr in err.iter_chain(st):
        concat(curr.message)
    if curr.cause is not None:
        concat(str(curr.cause))
    return text


_RENDERERS = {
    Format.FULL: format_full,
    Format.BRIEF: format_brief,
}


def render(st: "err.Stacktrace", fmt: Format | str | None = None) -> str:
    """Render st in the given format, or in the default format if fmt is None."""
    if fmt is None:
        fmt = config.get_default_format()
    else:
        fmt = config.parse_format(fmt)
    return _RENDERERS[fmt](st)


def format_spec(st: "err.Stacktrace", spec: str) -> str:
    """
    Implementation of Stacktrace.__format__.

    "+" picks full output and "#" picks brief output. Whatever else the spec
    holds that makes sense for a string is re-applied to the rendered text.
    """
    if not spec:
        return render(st)

    m = _FORMAT_SPEC.fullmatch(spec)
    if m is None:
        return render(st)

    fmt = None
    if m["type"] in (None, "s"):
        if m["sign"] == "+" and not m["alt"]:
            fmt = Format.FULL
        elif m["alt"] and m["sign"] != "+":
            fmt = Format.BRIEF
    text = render(st, fmt)

    # keep the directives accepted by str.__format__
    second = ""
    if m["align"] and m["align"] != "=":
        second += (m["fill"] or "") + m["align"]
    if m["zero"]:
        second += "0"
    if m["width"]:
        second += m["width"]
    if m["precision"]:
        second += "." + m["precision"]
    if not second:
        return text
    return format(text, second + "s")
