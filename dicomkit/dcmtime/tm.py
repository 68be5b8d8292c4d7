"""DICOM TM (time) values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from datetime import time as dt_time

from .common import (
    ParseTMError,
    _TM_RE,
    _build_datetime,
    _extract_field,
    _update_precision,
    is_included,
    truncate_fraction,
)
from .precision import PrecisionLevel


@dataclass(frozen=True)
class Time:
    """A parsed DICOM time.

    ``time`` is a time or datetime; only its clock fields are used.
    """

    time: dt_time | datetime
    precision: PrecisionLevel = PrecisionLevel.FULL

    def _render(self, separator: str) -> str:
        text = f"{self.time.hour:02d}"
        if not is_included(PrecisionLevel.MINUTES, self.precision):
            return text
        text += f"{separator}{self.time.minute:02d}"
        if not is_included(PrecisionLevel.SECONDS, self.precision):
            return text
        text += f"{separator}{self.time.second:02d}"
        if not is_included(PrecisionLevel.MS1, self.precision):
            return text
        return f"{text}.{truncate_fraction(self.time.microsecond, self.precision)}"

    def dcm(self) -> str:
        """Render as a DICOM TM string, truncated to ``precision``."""
        return self._render("")

    def __str__(self) -> str:
        return self._render(":")


def _extract_time(
    match: re.Match, precision: PrecisionLevel
) -> tuple[int, int, int, int, PrecisionLevel]:
    """Pull hours, minutes, seconds and microseconds out of a TM or DT match."""
    hours = _extract_field(match, "HOURS")
    precision = _update_precision(hours, precision, PrecisionLevel.HOURS, False)

    minutes = _extract_field(match, "MINUTES")
    precision = _update_precision(minutes, precision, PrecisionLevel.MINUTES, False)

    seconds = _extract_field(match, "SECONDS")
    precision = _update_precision(seconds, precision, PrecisionLevel.SECONDS, False)

    fraction = _extract_field(match, "FRACTAL", fractional=True)
    if fraction.present:
        precision = fraction.precision

    return hours.value, minutes.value, seconds.value, fraction.value, precision


def parse_time(tm_string: str) -> Time:
    """Parse a DICOM TM value."""
    match = _TM_RE.fullmatch(tm_string)
    if match is None:
        raise ParseTMError()

    hours, minutes, seconds, micros, precision = _extract_time(
        match, PrecisionLevel.FULL
    )
    parsed = _build_datetime(
        1, 1, 1, hours, minutes, seconds, micros, error=ParseTMError
    )
    return Time(time=parsed, precision=precision)