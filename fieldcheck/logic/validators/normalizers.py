"""Value normalizers applied before pattern evaluation."""

import re

_ESCAPED_CHAR = re.compile(r"\\(.?)", re.DOTALL)


def _unescape(match: re.Match) -> str:
    char = match.group(1)
    return "\0" if char == "0" else char


def strip_slashes(value: str) -> str:
    """
    Undo backslash escaping.

    ``\\'`` becomes ``'``, ``\\\\`` becomes ``\\``, ``\\0`` becomes NUL and a
    lone trailing backslash is dropped.
    """
    return _ESCAPED_CHAR.sub(_unescape, value)
