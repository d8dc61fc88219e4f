"""Reading single key presses from the terminal."""

import os
import sys
from typing import Optional, TextIO

try:
    import termios
except ImportError:  # not available on every platform
    termios = None  # type: ignore[assignment]

_LFLAG = 3


def getch(stream: Optional[TextIO] = None) -> str:
    """Read one character without waiting for Enter and without echo.

    When ``stream`` is a terminal, canonical mode and echo are switched off
    for the read and the previous settings restored afterwards. Other
    streams are read as they are. Returns ``""`` at the end of input.
    """
    if stream is None:
        stream = sys.stdin
    try:
        fd: Optional[int] = stream.fileno()
    except (AttributeError, OSError, ValueError):
        fd = None
    if termios is None or fd is None or not os.isatty(fd):
        return stream.read(1)
    old_attrs = termios.tcgetattr(fd)
    new_attrs = termios.tcgetattr(fd)
    new_attrs[_LFLAG] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new_attrs)
    try:
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old_attrs)