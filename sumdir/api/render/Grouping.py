"""Grouping dimension of a rendering."""

from enum import Enum


class Grouping(str, Enum):
    EXTENSION = "extension"
    MIMETYPE = "mimetype"

    @property
    def plural(self) -> str:
        """Key name of the count map in JSON output."""
        return f"{self.value}s"
