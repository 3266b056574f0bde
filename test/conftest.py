import os
import sys

import pytest

# Add the src directory to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import stacktrace
from stacktrace import config


@pytest.fixture(autouse=True)
def plain_config():
    """Record bare file names and restore the process-wide settings afterwards."""
    saved_format = config.get_default_format()
    saved_clean = config.get_clean_path()
    stacktrace.set_default_format(stacktrace.Format.FULL)
    stacktrace.set_clean_path(os.path.basename)
    yield
    stacktrace.set_default_format(saved_format)
    stacktrace.set_clean_path(saved_clean)
