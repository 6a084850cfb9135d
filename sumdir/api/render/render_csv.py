"""CSV rendering."""

import csv
import io

from ..scan.Report import Report
from .Grouping import Grouping
from .sorted_counts import sorted_counts


def render_csv(report: Report, grouping: Grouping) -> str:
    """Header row naming the dimension, then one ``key,count`` row per entry."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([grouping.value, "count"])
    for key, count in sorted_counts(report.counts(grouping)):
        writer.writerow([key, count])
    return buffer.getvalue()
