import sys

from beautifultable import BeautifulTable

from . import bcolors
from . import errors as err
from . import formatting


def _use_color(file, color: bool | None) -> bool:
    if color is not None:
        return color
    isatty = getattr(file, "isatty", None)
    return bool(isatty and isatty())


def _colorize(text: str) -> str:
    lines = text.split("\n")
    for i, line in enumerate(lines):
        if line.startswith(" --- at "):
            lines[i] = bcolors.location(line)
        elif i == 0 and line:
            lines[i] = bcolors.error(line)
    return "\n".join(lines)


def print_error(error: BaseException, *, fmt=None, file=None, color: bool | None = None):
    """
    Print an error the way a CLI reports a failure: the head message stands
    out and source locations are dimmed. Color is used only on terminals
    unless forced with color=True/False.
    """
    if file is None:
        file = sys.stderr
    if isinstance(error, err.Stacktrace):
        text = formatting.render(error, fmt)
    else:
        text = str(error)
    if _use_color(file, color):
        text = _colorize(text)
    print(text, file=file)


def chain_table(error: BaseException | None) -> BeautifulTable:
    """One row per link of the chain: message, location and code."""
    rows = []
    last = None
    for last in err.iter_chain(error):
        location = str(last.location) if last.location else ""
        code = "" if last.code == err.NO_CODE else str(last.code)
        rows.append([last.message, location, code])

    foreign = last.cause if last is not None else error
    if foreign is not None:
        rows.append([f"{type(foreign).__name__}: {foreign}", "", ""])

    table = BeautifulTable()
    for row in rows:
        table.rows.append(row)
    if rows:
        table.columns.header = ["Message", "Location", "Code"]
        table.columns.alignment = BeautifulTable.ALIGN_LEFT
    return table


def print_chain(error: BaseException | None, file=None):
    print(chain_table(error), file=file)


def exit_with_error(error: BaseException | None, *, fmt=None):
    """Print error and exit with the status its error code suggests."""
    if error is not None:
        print_error(error, fmt=fmt)
    sys.exit(err.exit_code(error))
