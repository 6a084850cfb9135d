"""Report - the aggregate result of one scan."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...utils.printable_path import printable_path
from .ScanError import ScanError

GROUPINGS = ("extension", "mimetype")


@dataclass
class Report:
    """Counts by extension and content type, folders, total size and errors.

    Counters change only through ``record_file`` so that both count maps and
    ``size`` always cover the same set of successfully processed files.
    """

    extensions: dict[str, int] = field(default_factory=dict)
    mimetypes: dict[str, int] = field(default_factory=dict)
    folders: list[Path] = field(default_factory=list)
    size: int = 0
    errors: list[ScanError] = field(default_factory=list)

    def record_folder(self, path: Path) -> None:
        self.folders.append(path)

    def record_file(self, extension: str, mimetype: str, size: int) -> None:
        self.extensions[extension] = self.extensions.get(extension, 0) + 1
        self.mimetypes[mimetype] = self.mimetypes.get(mimetype, 0) + 1
        self.size += size

    def record_error(self, path: Path | None, message: str) -> ScanError:
        error = ScanError(path=path if path is not None else Path(), message=message)
        self.errors.append(error)
        return error

    def counts(self, grouping: str) -> dict[str, int]:
        """Return the count map for ``extension`` or ``mimetype``."""
        grouping = str(getattr(grouping, "value", grouping))
        if grouping == "extension":
            return self.extensions
        if grouping == "mimetype":
            return self.mimetypes
        raise ValueError(f"Unknown grouping: {grouping!r} (expected one of {', '.join(GROUPINGS)})")

    def file_count(self, grouping: str = "extension") -> int:
        return sum(self.counts(grouping).values())

    def to_dict(self) -> dict[str, Any]:
        """Plain form of the report. Paths and messages are printable UTF-8."""
        return {
            "extensions": dict(self.extensions),
            "mimetypes": dict(self.mimetypes),
            "folders": [printable_path(folder) for folder in self.folders],
            "size": self.size,
            "errors": [error.to_dict() for error in self.errors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Report":
        return cls(
            extensions={str(k): int(v) for k, v in data.get("extensions", {}).items()},
            mimetypes={str(k): int(v) for k, v in data.get("mimetypes", {}).items()},
            folders=[Path(folder) for folder in data.get("folders", [])],
            size=int(data.get("size", 0)),
            errors=[ScanError(path=Path(e["path"]), message=e["message"]) for e in data.get("errors", [])],
        )
