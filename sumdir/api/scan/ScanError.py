"""ScanError model."""

from dataclasses import dataclass
from pathlib import Path

from ...utils.printable_path import printable_path


@dataclass(frozen=True)
class ScanError:
    """Non-fatal record of one entry that could not be fully processed."""

    path: Path
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"path": printable_path(self.path), "message": printable_path(self.message)}
