"""DICOM DA (date) values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from .common import (
    ParseDAError,
    _DA_NEMA_RE,
    _DA_RE,
    _build_datetime,
    _extract_field,
    _update_precision,
    is_included,
)
from .precision import PrecisionLevel


@dataclass(frozen=True)
class Date:
    """A parsed DICOM date.

    ``time`` is any date or datetime; only its year, month and day are used.
    """

    time: date
    precision: PrecisionLevel = PrecisionLevel.FULL
    is_nema: bool = False

    def dcm(self) -> str:
        """Render as a DICOM DA string, truncated to ``precision``."""
        parts = [f"{self.time.year:04d}"]
        separator = "." if self.is_nema else ""
        if is_included(PrecisionLevel.MONTH, self.precision):
            parts.append(f"{separator}{self.time.month:02d}")
            if is_included(PrecisionLevel.DAY, self.precision):
                parts.append(f"{separator}{self.time.day:02d}")
        return "".join(parts)

    def __str__(self) -> str:
        text = f"{self.time.year:04d}"
        if is_included(PrecisionLevel.MONTH, self.precision):
            text += f"-{self.time.month:02d}"
            if is_included(PrecisionLevel.DAY, self.precision):
                text += f"-{self.time.day:02d}"
        return text


def _extract_date(
    match: re.Match, precision: PrecisionLevel, is_da: bool
) -> tuple[int, int, int, PrecisionLevel]:
    """Pull year, month and day out of a DA or DT match, tracking precision."""
    year = _extract_field(match, "YEAR")
    precision = _update_precision(year, precision, PrecisionLevel.YEAR, False)

    month = _extract_field(match, "MONTH")
    precision = _update_precision(month, precision, PrecisionLevel.MONTH, False)

    day = _extract_field(match, "DAY")
    precision = _update_precision(day, precision, PrecisionLevel.DAY, is_da)

    month_value = month.value if month.present else 1
    day_value = day.value if day.present else 1
    return year.value, month_value, day_value, precision


def parse_date(da_string: str) -> Date:
    """Parse a DICOM DA value, accepting the legacy NEMA-300 form too."""
    is_nema = False
    match = _DA_RE.fullmatch(da_string)
    if match is None:
        match = _DA_NEMA_RE.fullmatch(da_string)
        is_nema = True
    if match is None:
        raise ParseDAError()

    year, month, day, precision = _extract_date(match, PrecisionLevel.FULL, True)
    parsed = _build_datetime(year, month, day, error=ParseDAError)
    return Date(time=parsed, precision=precision, is_nema=is_nema)