"""Plain text rendering."""

from ..scan.Report import Report
from .friendly_bytes import friendly_bytes
from .Grouping import Grouping
from .sorted_counts import sorted_counts


def render_text(report: Report, grouping: Grouping) -> str:
    counts = report.counts(grouping)
    summary = f"{sum(counts.values())} files, {len(report.folders)} folders, {friendly_bytes(report.size)}"
    if report.errors:
        summary += f", {len(report.errors)} errors"
    lines = [summary]
    lines.extend(f"{key}: {count}" for key, count in sorted_counts(counts))
    return "\n".join(lines) + "\n"
