"""ANSI escape styling for terminal output."""

from enum import IntEnum

_RESET = "\x1b[0m"


class Color(IntEnum):
    """Foreground colours, valued by their SGR code."""

    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    CYAN = 36


def _wrap(text, code: int) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def colorize(text, color) -> str:
    """Wrap ``text`` in the escape sequence of a foreground colour."""
    return _wrap(text, int(Color(color)))


def bold(text) -> str:
    """Render ``text`` in bold."""
    return _wrap(text, 1)


def faint(text) -> str:
    """Render ``text`` dimmed."""
    return _wrap(text, 2)


def italic(text) -> str:
    """Render ``text`` in italics."""
    return _wrap(text, 3)


def green(text) -> str:
    """Render ``text`` in green."""
    return colorize(text, Color.GREEN)


def red(text) -> str:
    """Render ``text`` in red."""
    return colorize(text, Color.RED)