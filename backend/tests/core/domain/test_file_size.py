import pytest

from core.domain.file_size import FileSize
from core.domain.size_unit import SizeUnit


@pytest.mark.parametrize(
    ("number", "value", "unit"),
    [
        (0, "0.00", SizeUnit.BYTE),
        (512, "512", SizeUnit.BYTE),
        (900, "900", SizeUnit.BYTE),
        (901, "0.88", SizeUnit.KILOBYTE),
        (1023, "1.00", SizeUnit.KILOBYTE),
        (10 * 1024, "10.00", SizeUnit.KILOBYTE),
        (15 * 1024, "15.00", SizeUnit.KILOBYTE),
        (100 * 1024, "100", SizeUnit.KILOBYTE),
        (1024 * 1024, "1.00", SizeUnit.MEGABYTE),
        (1_258_291, "1.20", SizeUnit.MEGABYTE),
        (3 * 1024**3, "3.00", SizeUnit.GIGABYTE),
        (900 * 1024**4, "900", SizeUnit.TERABYTE),
        (1024**5, "1.00", SizeUnit.PETABYTE),
    ],
)
def test_file_size_picks_smallest_tier_at_or_below_900(number: int, value: str, unit: SizeUnit) -> None:
    assert FileSize.from_bytes(number) == FileSize(value=value, unit=unit)


@pytest.mark.parametrize(
    ("number", "value"),
    [
        (901, "0.88"),
        (1024, "1.0"),
        (10 * 1024, "10"),
        (1536, "1.5"),
        (1_258_291, "1.2"),
        (15 * 1024, "15"),
        (100 * 1024, "100"),
    ],
)
def test_file_size_shorter_drops_precision(number: int, value: str) -> None:
    assert FileSize.from_bytes(number, shorter=True).value == value


def test_file_size_rounds_half_up() -> None:
    # 1152 bytes is exactly 1.125 KB.
    assert FileSize.from_bytes(1152).value == "1.13"
    assert FileSize.from_bytes(1152, shorter=True).value == "1.1"


def test_file_size_stops_at_petabytes() -> None:
    file_size = FileSize.from_bytes(1024**6)

    assert file_size.unit is SizeUnit.PETABYTE
    assert file_size.value == "1024"


def test_file_size_passes_negative_counts_through_as_bytes() -> None:
    assert FileSize.from_bytes(-2048) == FileSize(value="-2048.00", unit=SizeUnit.BYTE)


def test_file_size_divides_in_double_precision() -> None:
    # 1207959551 bytes is just below 1.125 GB; single precision would round it up to 1.125.
    assert FileSize.from_bytes(1_207_959_551) == FileSize(value="1.12", unit=SizeUnit.GIGABYTE)
