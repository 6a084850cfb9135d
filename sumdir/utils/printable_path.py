"""Render a filesystem path as printable UTF-8 text.

Names read from disk may hold bytes that are not valid UTF-8. Python keeps
them as surrogate escapes, which cannot be written to a UTF-8 stream. This
replaces each such byte with U+FFFD instead.
"""

import os
from pathlib import Path


def printable_path(path: str | Path) -> str:
    """Decode ``path`` as UTF-8, replacing undecodable bytes with U+FFFD.

    Args:
        path: Path, or text that may embed one (e.g. an error message)

    Returns:
        Text that always encodes as UTF-8

    Examples:
        >>> printable_path("/data/report.txt")
        '/data/report.txt'
        >>> printable_path(os.fsdecode(b"a.\\xff")) == "a.\\ufffd"
        True
    """
    return os.fsencode(path).decode("utf-8", "replace")
