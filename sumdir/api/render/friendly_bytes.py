"""Human-friendly byte sizes."""

_UNITS = ("KiB", "MiB", "GiB", "TiB")


def friendly_bytes(size: int) -> str:
    """Format ``size`` with binary units, rounding down.

    >>> friendly_bytes(123)
    '123 bytes'
    >>> friendly_bytes(1234567)
    '1 MiB'
    """
    if size < 1024:
        return f"{size} bytes"
    value = size
    unit = _UNITS[0]
    for unit in _UNITS:
        value //= 1024
        if value < 1024:
            break
    return f"{value} {unit}"
