import pytest

from cloudusage.size_utils import (
    approximate_size,
    approximate_size_specific,
    convert_size,
    size_in_bytes,
)


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0.00 KiB"),
        (1024, "1.00 KiB"),
        (1536 * 1024 ** 2, "1.50 GiB"),
        (3 * 1024 ** 4, "3.00 TiB"),
    ],
)
def test_approximate_size(size, expected):
    assert approximate_size(size) == expected


def test_approximate_size_decimal():
    assert approximate_size(1000, False) == "1.00 KB"


def test_negative_size():
    with pytest.raises(ValueError):
        approximate_size(-1)


def test_specific_suffix():
    assert approximate_size_specific(1024 ** 3, "MiB") == "1024.00 MiB"
    assert approximate_size_specific(1024 ** 3, "gib", withsuffix=False) == 1.0


def test_unknown_suffix():
    with pytest.raises(ValueError):
        approximate_size_specific(10, "XB")


def test_size_in_bytes():
    assert size_in_bytes("1.50 GiB") == 1.5 * 1024 ** 3
    assert size_in_bytes("2.00 KB") == 2000


def test_convert_size():
    assert convert_size("1.00 GiB", "MiB") == "1024.00 MiB"
    assert convert_size("512.00 MiB", "GiB", withsuffix=False) == 0.5


def test_approximate_size_to_specific_suffix():
    assert approximate_size(1024 ** 3, newsuffix="MiB") == "1024.00 MiB"
    assert approximate_size(1536 * 1024 ** 2, withsuffix=False) == 1.5
