"""Scan a directory tree into a Report."""

import os
import stat
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.printable_path import printable_path
from ._SIGNATURES import FALLBACK_MIMETYPE
from .Entry import Entry
from .Outcome import Outcome
from .Report import Report
from .ScanRootError import ScanRootError
from .sniff_content import DEFAULT_SNIFF_BYTES, sniff_content
from .walk_tree import walk_tree

logger = get_logger("scan")


def scan_tree(root: Path, sniff_bytes: int = DEFAULT_SNIFF_BYTES) -> Report:
    """Walk ``root`` and aggregate every node beneath it.

    Per-entry failures are recorded in ``Report.errors`` and never stop the
    scan.

    Raises:
        ScanRootError: If ``root`` does not exist.
    """
    root = Path(root)
    if not root.exists():
        raise ScanRootError(f"{printable_path(root)} does not exist")

    report = Report()
    logger.debug("Scanning %s (sniff_bytes=%d)", printable_path(root), sniff_bytes)

    for outcome in walk_tree(root):
        if not outcome.ok:
            _record_error(report, outcome.path, f"failed to read entry: {outcome.error}")
            continue

        entry: Entry = outcome.value
        if entry.is_dir:
            report.record_folder(entry.path)
            continue

        _process_file(report, entry, sniff_bytes)

    logger.debug(
        "Scanned %s: %d files, %d folders, %d bytes, %d errors",
        printable_path(root),
        report.file_count(),
        len(report.folders),
        report.size,
        len(report.errors),
    )
    return report


def _process_file(report: Report, entry: Entry, sniff_bytes: int) -> None:
    shown = printable_path(entry.path)
    metadata = _read_metadata(entry.path)
    if not metadata.ok:
        _record_error(report, entry.path, f"failed to read metadata for {shown}: {metadata.error}")
        return

    st: os.stat_result = metadata.value
    if stat.S_ISREG(st.st_mode):
        sniffed = sniff_content(entry.path, sniff_bytes)
        if not sniffed.ok:
            _record_error(report, entry.path, f"failed to detect mimetype for {shown}: {sniffed.error}")
            return
        mimetype = sniffed.value
    else:
        # fifos, sockets and devices are never opened
        mimetype = FALLBACK_MIMETYPE

    report.record_file(entry.extension, mimetype, st.st_size)
    logger.debug("%s: extension=%r mimetype=%s size=%d", shown, entry.extension, mimetype, st.st_size)


def _read_metadata(path: Path) -> Outcome:
    try:
        return Outcome.success(path.stat(), path)
    except OSError as exc:
        return Outcome.failure(path, str(exc))


def _record_error(report: Report, path: Path | None, message: str) -> None:
    report.record_error(path, message)
    logger.warning("%s", printable_path(message))
