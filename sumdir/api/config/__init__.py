"""Configuration models."""

from .LogConfig import LogConfig
from .SumdirConfig import SumdirConfig

__all__ = ["LogConfig", "SumdirConfig"]
