"""Unit tests for sumdir.api.render.friendly_bytes."""

import pytest

from sumdir.api.render.friendly_bytes import friendly_bytes


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 bytes"),
        (123, "123 bytes"),
        (1023, "1023 bytes"),
        (1024, "1 KiB"),
        (1234, "1 KiB"),
        (1024 * 1024 - 1, "1023 KiB"),
        (1234567, "1 MiB"),
        (1234567890, "1 GiB"),
        (1234567890123, "1 TiB"),
        (1024**5, "1024 TiB"),
    ],
)
def test_friendly_bytes(size, expected):
    assert friendly_bytes(size) == expected
