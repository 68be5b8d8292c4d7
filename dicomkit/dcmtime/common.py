"""Shared helpers, patterns and errors for DICOM DA, TM and DT values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from .precision import PrecisionLevel


class DcmTimeParseError(ValueError):
    """Base class for errors raised when a DICOM date or time cannot be parsed."""

    default_message = "error parsing dicom date/time value"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ParseDAError(DcmTimeParseError):
    """A DA (date) value is malformed."""

    default_message = (
        "error parsing dicom DA (date) value -- expected format is 'YYYYMMDD'"
    )


class ParseDTError(DcmTimeParseError):
    """A DT (datetime) value is malformed."""

    default_message = (
        "error parsing dicom DT (datetime) value -- expected format is"
        " 'YYYYMMDDHHMMSS.FFFFFF&ZZXX'"
    )


class ParseTMError(DcmTimeParseError):
    """A TM (time) value is malformed."""

    default_message = (
        "error parsing dicom TM (time) value, but expected format is 'HHMMSS.FFFFFF'"
    )


# DA: YYYYMMDD
_DA_RE = re.compile(r"(?P<YEAR>[0-9]{4})(?P<MONTH>[0-9]{2})?(?P<DAY>[0-9]{2})?")

# Legacy NEMA-300 DA: YYYY.MM.DD
_DA_NEMA_RE = re.compile(
    r"(?P<YEAR>[0-9]{4})(?:\.(?P<MONTH>[0-9]{2}))?(?:\.(?P<DAY>[0-9]{2}))?"
)

# DT: YYYYMMDDHHMMSS.FFFFFF&ZZXX
_DT_RE = re.compile(
    r"(?P<YEAR>[0-9]{4})"
    r"(?P<MONTH>[0-9]{2})?"
    r"(?P<DAY>[0-9]{2})?"
    r"(?P<HOURS>[0-9]{2})?"
    r"(?P<MINUTES>[0-9]{2})?"
    r"(?P<SECONDS>[0-9]{2})?"
    r"(?::?\.(?P<FRACTAL>[0-9]{1,6}))?"
    r"(?::?(?P<OFFSET_SIGN>[-+])"
    r"(?P<OFFSET_HOURS>[0-9]{2})(?P<OFFSET_MINUTES>[0-9]{2}))?"
)

# TM: HHMMSS.FFFFFF
_TM_RE = re.compile(
    r"(?P<HOURS>[0-9]{2})?(?P<MINUTES>[0-9]{2})?(?P<SECONDS>[0-9]{2})?"
    r"(?:\.(?P<FRACTAL>[0-9]{1,6}))?"
)

# DA and TM values carry no zone; a zero offset is used without claiming UTC.
_ZERO_TZ = timezone(timedelta(0))

_FRACTION_DIGITS = 6


def is_included(check: PrecisionLevel, limit: PrecisionLevel) -> bool:
    """Return whether segment ``check`` is rendered at precision ``limit``."""
    return check >= limit


def truncate_fraction(microseconds: int, precision: PrecisionLevel) -> str:
    """Render fractional seconds as digits, truncated to ``precision``."""
    digits = f"{microseconds:06d}"
    return digits[: _FRACTION_DIGITS - (PrecisionLevel.FULL + precision)]


@dataclass(frozen=True)
class _Field:
    value: int = 0
    present: bool = False
    precision: PrecisionLevel = PrecisionLevel.FULL


def _extract_field(match: re.Match, name: str, fractional: bool = False) -> _Field:
    text = match.group(name) or ""
    if not text:
        return _Field()
    if fractional:
        missing = _FRACTION_DIGITS - len(text)
        return _Field(int(text + "0" * missing), True, PrecisionLevel(missing))
    return _Field(int(text), True)


def _update_precision(
    field: _Field,
    current: PrecisionLevel,
    level: PrecisionLevel,
    level_is_full: bool,
) -> PrecisionLevel:
    if not field.present:
        return current
    return PrecisionLevel.FULL if level_is_full else level


def _build_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tz: tzinfo = _ZERO_TZ,
    error: type[DcmTimeParseError] = DcmTimeParseError,
) -> datetime:
    """Build a datetime, normalising out-of-range fields by carrying over."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        base = datetime(year, month, 1, tzinfo=tz)
        return base + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            microseconds=microsecond,
        )
    except (ValueError, OverflowError) as exc:
        raise error() from exc