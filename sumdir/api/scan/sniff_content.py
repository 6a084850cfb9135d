"""Content-type detection from a bounded file prefix."""

from pathlib import Path

from ._SIGNATURES import FALLBACK_MIMETYPE, SIGNATURES
from .Outcome import Outcome

DEFAULT_SNIFF_BYTES = 8192


def match_signature(buffer: bytes) -> str:
    """Return the label of the first signature matching ``buffer``."""
    if not buffer:
        return FALLBACK_MIMETYPE
    for label, parts in SIGNATURES:
        if all(buffer.startswith(magic, offset) for offset, magic in parts):
            return label
    return FALLBACK_MIMETYPE


def sniff_content(path: Path, limit: int = DEFAULT_SNIFF_BYTES) -> Outcome:
    """Classify ``path`` by reading at most ``limit`` bytes of it.

    Open and read failures come back as a failed Outcome rather than an
    exception.
    """
    try:
        with Path(path).open("rb") as fh:
            buffer = fh.read(limit)
    except OSError as exc:
        return Outcome.failure(path, str(exc))
    return Outcome.success(match_signature(buffer), path)
