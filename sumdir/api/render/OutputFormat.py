"""Output encodings for a rendered report."""

from enum import Enum


class OutputFormat(str, Enum):
    TEXT = "text"
    CSV = "csv"
    JSON = "json"
