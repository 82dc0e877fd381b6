"""Line classifier for Python-like indentation-block source.

Recognizes ``def``/``async def`` functions, classes, and unindented
assignments with one regex per kind. This is not a tokenizer: lines inside
multi-line strings that look like declarations are reported too.
"""

from __future__ import annotations

import re

from .types import ItemKind, ItemMatch

_FUNCTION_RE = re.compile(r"^(?P<indent>\s*)(?:async\s+)?def\s+(?P<name>[A-Za-z_]\w*)\s*\(")
_CLASS_RE = re.compile(r"^(?P<indent>\s*)class\s+(?P<name>[A-Za-z_]\w*)\s*[(:]")
_ASSIGNMENT_RE = re.compile(r"^(?P<name>[A-Za-z_]\w*)\s*=(?!=)")

_PATTERNS: tuple[tuple[ItemKind, re.Pattern[str]], ...] = (
    (ItemKind.FUNCTION, _FUNCTION_RE),
    (ItemKind.CLASS, _CLASS_RE),
)


def match_python_item(line: str) -> ItemMatch | None:
    """Return the declaration found on ``line``, or ``None``.

    Function and class indents are the raw count of leading whitespace
    characters (tabs count as one). Assignments are only recognized at column
    zero, so their indent is always 0.
    """
    for kind, pattern in _PATTERNS:
        match = pattern.match(line)
        if match is not None:
            return ItemMatch(match.group("name"), kind, len(match.group("indent")))

    match = _ASSIGNMENT_RE.match(line)
    if match is not None:
        return ItemMatch(match.group("name"), ItemKind.CONSTANT, 0)
    return None
