"""Report rendering in text, CSV and JSON."""

from .friendly_bytes import friendly_bytes
from .Grouping import Grouping
from .OutputFormat import OutputFormat
from .render_csv import render_csv
from .render_json import render_json
from .render_report import print_report, render_report
from .render_text import render_text
from .sorted_counts import sorted_counts

__all__ = [
    "Grouping",
    "OutputFormat",
    "friendly_bytes",
    "print_report",
    "render_csv",
    "render_json",
    "render_report",
    "render_text",
    "sorted_counts",
]
