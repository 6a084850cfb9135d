"""Directory scanning: traversal, content sniffing and aggregation."""

from .cmd_scan import cmd_scan
from .Entry import Entry
from .file_extension import file_extension
from .Outcome import Outcome
from .Report import Report
from .scan_tree import scan_tree
from .ScanConfig import ScanConfig
from .ScanError import ScanError
from .ScanRootError import ScanRootError
from .sniff_content import DEFAULT_SNIFF_BYTES, match_signature, sniff_content
from .walk_tree import walk_tree

__all__ = [
    "DEFAULT_SNIFF_BYTES",
    "Entry",
    "Outcome",
    "Report",
    "ScanConfig",
    "ScanError",
    "ScanRootError",
    "cmd_scan",
    "file_extension",
    "match_signature",
    "scan_tree",
    "sniff_content",
    "walk_tree",
]
