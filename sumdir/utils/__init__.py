"""sumdir utility functions.

Each file in this package exports one function or a small family of them.
"""

from .get_package_version import get_package_version
from .logger import configure_logging, get_logger
from .printable_path import printable_path

__all__ = [
    "configure_logging",
    "get_logger",
    "get_package_version",
    "printable_path",
]
