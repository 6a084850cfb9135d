"""Output schemas for API commands."""

from . import scan  # noqa: F401  (registers schemas)
from ._registry import get_output_schema

__all__ = ["get_output_schema"]
