"""Render a Report in the selected output format."""

import sys
from collections.abc import Callable
from typing import TextIO

from ..scan.Report import Report
from .Grouping import Grouping
from .OutputFormat import OutputFormat
from .render_csv import render_csv
from .render_json import render_json
from .render_text import render_text

_RENDERERS: dict[OutputFormat, Callable[[Report, Grouping], str]] = {
    OutputFormat.TEXT: render_text,
    OutputFormat.CSV: render_csv,
    OutputFormat.JSON: render_json,
}


def render_report(
    report: Report,
    grouping: Grouping | str = Grouping.EXTENSION,
    output_format: OutputFormat | str = OutputFormat.TEXT,
) -> str:
    """Render ``report`` grouped by extension or content type. The report is not modified."""
    return _RENDERERS[OutputFormat(output_format)](report, Grouping(grouping))


def print_report(
    report: Report,
    grouping: Grouping | str = Grouping.EXTENSION,
    output_format: OutputFormat | str = OutputFormat.TEXT,
    stream: TextIO | None = None,
) -> None:
    """Write the rendered report to standard output."""
    out = stream if stream is not None else sys.stdout
    out.write(render_report(report, grouping, output_format))
    out.flush()
