"""JSON rendering."""

import json

from ..scan.Report import Report
from .Grouping import Grouping
from .sorted_counts import sorted_counts


def render_json(report: Report, grouping: Grouping) -> str:
    """Single JSON object with totals, sorted counts and the error list.

    Key order of the count object follows the sorted order.
    """
    counts = report.counts(grouping)
    data = {
        "files": sum(counts.values()),
        "folders": len(report.folders),
        "size": report.size,
        grouping.plural: dict(sorted_counts(counts)),
        "errors": [error.to_dict() for error in report.errors],
    }
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
