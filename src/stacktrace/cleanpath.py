"""
Path transforms applied to source files before they are stored in a Stacktrace.

Compose these into your own cleaner and install it with
config.set_clean_path, for example:

    def clean(path):
        path = cleanpath.remove_sys_path(path)
        return cleanpath.remove_prefix(path, "myproject")

    stacktrace.set_clean_path(clean)
"""

import os
import sys


def _strip_dir(path: str, prefix: str) -> str | None:
    prefix = prefix.rstrip(os.sep) + os.sep
    if path.startswith(prefix):
        return path[len(prefix):]
    return None


def remove_prefix(path: str, prefix: str) -> str:
    """
    Remove the directory `prefix` from the front of `path`.

    Only whole path components are stripped, so "/src/app" does not eat the
    front of "/src/application/x.py".
    """
    if not prefix:
        return path
    stripped = _strip_dir(path, prefix)
    if stripped is None:
        return path
    return stripped


def remove_sys_path(path: str) -> str:
    """
    Make an absolute path relative to the sys.path entry that contains it.

    When several entries match (a virtualenv inside the project, say) the
    longest one wins. Relative paths and paths outside sys.path come back
    unchanged.
    """
    if not os.path.isabs(path):
        return path

    best = None
    for entry in sys.path:
        # '' stands for the working directory
        entry = os.path.abspath(entry or os.curdir)
        stripped = _strip_dir(path, entry)
        if stripped is not None and (best is None or len(stripped) < len(best)):
            best = stripped

    if best is None:
        return path
    return best
