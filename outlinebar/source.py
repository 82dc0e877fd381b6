"""Source loading helpers."""

from __future__ import annotations

import sys
from pathlib import Path

STDIN_PATH = "-"


def read_text(path: Path) -> str:
    """Read text as UTF-8 (dropping a BOM), falling back to latin-1.

    Line endings are kept as-is so outline line numbers match the file.
    """
    data = path.read_bytes()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def read_source(raw_path: str) -> str:
    """Read ``raw_path``, or standard input when it is ``-``."""
    if raw_path == STDIN_PATH:
        return sys.stdin.read()
    return read_text(Path(raw_path))
