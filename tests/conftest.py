"""Shared pytest configuration and fixtures for all tests."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pytest

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single function or class")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def sumdir_home(tmp_path: Path, monkeypatch) -> Path:
    """Point SUMDIR_HOME at a per-test directory so no user config is read."""
    home = tmp_path / "sumdir-home"
    monkeypatch.setenv("SUMDIR_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def restore_sumdir_logger():
    """Undo handler and level changes made by configure_logging."""
    logger = logging.getLogger("sumdir")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate


def write_config(home: Path, data: dict | str) -> Path:
    """Write config.json into the sumdir home directory."""
    import json

    home.mkdir(parents=True, exist_ok=True)
    path = home / "config.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def config_writer(sumdir_home: Path):
    def _write(data: dict | str) -> Path:
        return write_config(sumdir_home, data)

    return _write


# =============================================================================
# Sample Trees
# =============================================================================


@dataclass
class SampleTree:
    root: Path
    files: dict[str, bytes] = field(default_factory=dict)
    folders: list[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        return sum(len(data) for data in self.files.values())


SAMPLE_FILES: dict[str, bytes] = {
    "image.png": PNG_HEADER + b"\x00" * 8,
    "doc.pdf": b"%PDF-1.4\n%%EOF\n",
    "readme.txt": b"Hello, world!",
    "notes/todo.txt": b"buy milk\n",
    "notes/archive.zip": b"PK\x03\x04" + b"\x00" * 26,
    "notes/deep/masquerading.png": b"%PDF-1.7\n",
    "notes/deep/Makefile": b"all:\n\techo hi\n",
}

SAMPLE_FOLDERS = ["empty", "notes", "notes/deep"]


@pytest.fixture
def sample_tree(tmp_path: Path) -> SampleTree:
    """Small tree with 7 files in 3 folders below the root.

    Extensions: png 2, txt 2, pdf 1, zip 1, and one file without extension.
    Content types: octet-stream 3, pdf 2, png 1, zip 1.
    """
    root = tmp_path / "tree"
    root.mkdir()
    for folder in SAMPLE_FOLDERS:
        (root / folder).mkdir(parents=True, exist_ok=True)
    for rel_path, data in SAMPLE_FILES.items():
        (root / rel_path).write_bytes(data)
    return SampleTree(root=root, files=dict(SAMPLE_FILES), folders=list(SAMPLE_FOLDERS))


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_command():
    return run_cmd


@pytest.fixture
def undecodable_tree(tmp_path: Path) -> Path:
    """Tree whose names hold bytes that are not valid UTF-8.

    Holds the file ``a.\\xff`` (1 byte), the folder ``d\\xff`` with
    ``inner.txt`` (2 bytes), and the dangling link ``l\\xff``.
    """
    import os

    root = tmp_path / "undecodable"
    root.mkdir()
    try:
        (root / os.fsdecode(b"a.\xff")).write_bytes(b"x")
        folder = root / os.fsdecode(b"d\xff")
        folder.mkdir()
        (folder / "inner.txt").write_bytes(b"hi")
        os.symlink(root / "missing", root / os.fsdecode(b"l\xff"))
    except (OSError, NotImplementedError, UnicodeError) as exc:
        pytest.skip(f"filesystem does not accept undecodable names: {exc}")
    return root
