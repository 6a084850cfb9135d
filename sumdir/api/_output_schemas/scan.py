"""Output schemas for scan commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ScanOutput(BaseOutputSchema):
    """Output schema for the scan command.

    Output structure:
    - errors: list[str] - command-level errors (e.g. a missing target), empty list if none
    - warnings: list[str] - warnings, e.g. when some entries could not be inspected
    - target: str - the scanned path as given
    - report: dict[str, Any] - Report.to_dict() payload, empty dict when the scan did not run
    """

    target: str = Field(..., description="Scanned path")
    report: dict[str, Any] = Field(..., description="Serialized Report, empty dict when the scan did not run")


register_output_schema("scan", "scan", ScanOutput)
