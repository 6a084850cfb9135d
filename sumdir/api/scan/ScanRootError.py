"""Raised when the scan root cannot be used as a starting point."""


class ScanRootError(ValueError):
    """The scan root does not exist; no traversal is attempted."""
