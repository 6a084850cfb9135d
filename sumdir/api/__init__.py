"""API module for sumdir.

Functions defined here are the single source of truth for the CLI: each
``cmd_*`` function returns a StageResult that the CLI displays.
"""

__all__ = []
