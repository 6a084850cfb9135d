"""Entry model - one filesystem node visited during traversal."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    path: Path
    is_dir: bool
    extension: str = ""
    is_symlink: bool = False
