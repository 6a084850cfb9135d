"""Unit tests for sumdir.api.validate_output."""

import pytest

from sumdir.api._output_schemas import get_output_schema
from sumdir.api._output_schemas.scan import ScanOutput
from sumdir.api.scan.cmd_scan import cmd_scan
from sumdir.api.validate_output import validate_output


def test_scan_schema_is_registered():
    assert get_output_schema("scan", "scan") is ScanOutput
    assert get_output_schema("scan", "missing") is None


def test_validate_fills_defaults():
    output = validate_output(cmd_scan, {"target": "/data", "report": {}})
    assert output == {"errors": [], "warnings": [], "target": "/data", "report": {}}


def test_validate_rejects_missing_fields():
    with pytest.raises(ValueError, match="Output validation failed for scan.scan"):
        validate_output(cmd_scan, {"target": "/data"})


def test_validate_rejects_wrong_types():
    with pytest.raises(ValueError):
        validate_output(cmd_scan, {"target": "/data", "report": {}, "errors": "nope"})


def test_functions_outside_api_are_passed_through():
    def cmd_other():
        pass

    output = {"anything": 1}
    assert validate_output(cmd_other, output) is output
