"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

import re
import sys
from typing import Any, Iterator, TextIO, Tuple

_DIRECTIVE_PATTERN = re.compile(r"(%[cspdiuxX%]?)|([^%]+)")
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    value = _take(values)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT32)
    if spec == "x":
        return format(int(value) & _UINT32, "x")
    if spec == "X":
        return format(int(value) & _UINT32, "X")
    address = int(value) & _UINT64
    return "(nil)" if address == 0 else "0x" + format(address, "x")


def _render(fmt: str, args: Tuple[Any, ...]) -> Tuple[str, bool]:
    """Return the formatted text and whether the format was complete."""
    if fmt is None:
        raise TypeError("format string must not be None")
    values = iter(args)
    pieces = []
    for match in _DIRECTIVE_PATTERN.finditer(fmt):
        directive, literal = match.groups()
        if literal is not None:
            pieces.append(literal)
        elif len(directive) == 2:
            pieces.append(_convert(directive[1], values))
        elif match.end() == len(fmt):
            return "".join(pieces), False
        else:
            pieces.append("%")
    return "".join(pieces), True


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A lone ``%`` at the very end produces nothing; a ``%`` before an
    unknown conversion character is kept literally.
    """
    return _render(fmt, args)[0]


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream``.

    Returns the number of characters written, or -1 when the format ends
    in a lone ``%`` (the text before it is still written).
    """
    text, complete = _render(fmt, args)
    stream.write(text)
    stream.flush()
    return len(text) if complete else -1


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; see :func:`fprintf`."""
    return fprintf(sys.stdout, fmt, *args)