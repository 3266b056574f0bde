"""
Colors used when printing errors to a terminal
"""

FAIL = '\033[91m'
YELLOW = '\033[93m'
GREY = '\033[90m'
ENDC = '\033[0m'
BOLD = '\033[1m'

def error(msg: str):
    """
    Wrap the message in bold red
    """

    return f"{FAIL}{BOLD}{msg}{ENDC}"

def location(msg: str):
    return f"{GREY}{msg}{ENDC}"
