"""Outcome of a single per-entry scan step."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Outcome:
    """Either a success payload or a failure message tagged with a path.

    Walking, metadata reads and content sniffing return Outcomes instead of
    raising, so the scanner can record a failure and move on.
    """

    value: Any = None
    error: str | None = None
    path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any, path: Path | None = None) -> "Outcome":
        return cls(value=value, path=path)

    @classmethod
    def failure(cls, path: Path | None, error: str) -> "Outcome":
        return cls(error=error, path=path)
