"""Unit tests for sumdir.api.scan.Report module."""

from pathlib import Path

import pytest

from sumdir.api.render.Grouping import Grouping
from sumdir.api.scan.Report import Report
from sumdir.api.scan.ScanError import ScanError


def test_report_starts_empty():
    report = Report()
    assert report.extensions == {}
    assert report.mimetypes == {}
    assert report.folders == []
    assert report.size == 0
    assert report.errors == []


def test_record_file_updates_both_maps_and_size():
    report = Report()
    report.record_file("txt", "application/octet-stream", 10)
    report.record_file("txt", "application/octet-stream", 5)
    report.record_file("png", "image/png", 100)

    assert report.extensions == {"txt": 2, "png": 1}
    assert report.mimetypes == {"application/octet-stream": 2, "image/png": 1}
    assert report.size == 115
    assert report.file_count() == 3
    assert report.file_count("mimetype") == 3


def test_record_folder_and_error():
    report = Report()
    report.record_folder(Path("/data/sub"))
    error = report.record_error(Path("/data/sub/file.txt"), "boom")

    assert report.folders == [Path("/data/sub")]
    assert report.errors == [ScanError(path=Path("/data/sub/file.txt"), message="boom")]
    assert error.message == "boom"
    assert report.size == 0
    assert report.extensions == {}


def test_counts_by_grouping():
    report = Report()
    report.record_file("pdf", "application/pdf", 1)
    assert report.counts(Grouping.EXTENSION) is report.extensions
    assert report.counts(Grouping.MIMETYPE) is report.mimetypes
    assert report.counts("mimetype") is report.mimetypes


def test_counts_unknown_grouping():
    with pytest.raises(ValueError, match="Unknown grouping"):
        Report().counts("color")


def test_to_dict_and_from_dict():
    report = Report()
    report.record_folder(Path("/data/sub"))
    report.record_file("", "application/octet-stream", 3)
    report.record_error(Path("/data/sub/x"), 'failed "quoted" \\ path')

    data = report.to_dict()

    assert data == {
        "extensions": {"": 1},
        "mimetypes": {"application/octet-stream": 1},
        "folders": ["/data/sub"],
        "size": 3,
        "errors": [{"path": "/data/sub/x", "message": 'failed "quoted" \\ path'}],
    }
    assert Report.from_dict(data) == report


def test_scan_error_stores_path_and_message():
    error = ScanError(path=Path("/some/path/file.txt"), message="test error message")
    assert error.path == Path("/some/path/file.txt")
    assert error.message == "test error message"
    assert error.to_dict() == {"path": "/some/path/file.txt", "message": "test error message"}
