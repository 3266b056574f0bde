"""Functions that build errors at known places, for location tests."""

import inspect

import stacktrace

ECODE_NOT_FOUND = 4
ECODE_TIMEOUT = 7

def _lineno():
    """Line number of the caller."""
    return inspect.currentframe().f_back.f_lineno

def make_root(msg="root failure"):
    return stacktrace.new_error(msg), _lineno()

def make_coded(code, msg="coded failure"):
    return stacktrace.new_error_with_code(code, msg), _lineno()

def wrap(cause, msg, *args):
    return stacktrace.propagate(cause, msg, *args), _lineno()

def wrap_with_code(cause, code, msg):
    return stacktrace.propagate_with_code(cause, code, msg), _lineno()

def read_config(path):
    """Fails like real code does: a foreign error wrapped on the way up."""
    try:
        raise FileNotFoundError(f"no such file: {path}")
    except FileNotFoundError as e:
        raise stacktrace.propagate_with_code(e, ECODE_NOT_FOUND, "Failed to read config %s", path)

def make_nested():
    def inner():
        return stacktrace.new_error("from closure"), _lineno()
    return inner()

class Loader:
    def load(self, name):
        return stacktrace.new_error("Failed to load %s", name), _lineno()
