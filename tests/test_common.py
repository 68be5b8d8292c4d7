import pytest

from dicomkit.dcmtime.common import (
    DcmTimeParseError,
    ParseDAError,
    ParseDTError,
    ParseTMError,
    is_included,
    truncate_fraction,
)
from dicomkit.dcmtime.precision import PrecisionLevel


def test_is_included_with_full_limit_includes_everything():
    assert all(is_included(level, PrecisionLevel.FULL) for level in PrecisionLevel)


def test_is_included_excludes_finer_segments():
    assert is_included(PrecisionLevel.SECONDS, PrecisionLevel.SECONDS)
    assert is_included(PrecisionLevel.HOURS, PrecisionLevel.SECONDS)
    assert not is_included(PrecisionLevel.MS1, PrecisionLevel.SECONDS)


def test_is_included_year_limit_only_includes_year():
    included = [level for level in PrecisionLevel if is_included(level, PrecisionLevel.YEAR)]
    assert included == [PrecisionLevel.YEAR]


def test_truncate_fraction_full():
    assert truncate_fraction(456789, PrecisionLevel.FULL) == "456789"


def test_truncate_fraction_keeps_leading_zeros():
    assert truncate_fraction(456, PrecisionLevel.FULL) == "000456"


def test_truncate_fraction_ms3():
    assert truncate_fraction(456789, PrecisionLevel.MS3) == "456"


@pytest.mark.parametrize(
    "level",
    [
        PrecisionLevel.FULL,
        PrecisionLevel.MS5,
        PrecisionLevel.MS4,
        PrecisionLevel.MS3,
        PrecisionLevel.MS2,
        PrecisionLevel.MS1,
    ],
)
def test_truncate_fraction_is_prefix_of_full(level):
    full = truncate_fraction(123456, PrecisionLevel.FULL)
    truncated = truncate_fraction(123456, level)
    assert full.startswith(truncated)
    assert len(truncated) == len(full) - int(level)


@pytest.mark.parametrize(
    ("error", "fragment"),
    [
        (ParseDAError, "YYYYMMDD"),
        (ParseDTError, "YYYYMMDDHHMMSS.FFFFFF&ZZXX"),
        (ParseTMError, "HHMMSS.FFFFFF"),
    ],
)
def test_errors_carry_expected_format(error, fragment):
    err = error()
    assert fragment in str(err)
    assert isinstance(err, DcmTimeParseError)
    assert isinstance(err, ValueError)


def test_error_accepts_custom_message():
    assert str(ParseTMError("bad value")) == "bad value"