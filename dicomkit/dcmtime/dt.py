"""DICOM DT (datetime) values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .common import ParseDTError, _DT_RE, _build_datetime, _extract_field, is_included
from .da import Date, _extract_date
from .precision import PrecisionLevel
from .tm import Time, _extract_time


def _format_offset(value: datetime, separator: str) -> str:
    offset = value.utcoffset()
    total = int(offset.total_seconds()) if offset is not None else 0
    sign = "-" if total < 0 else "+"
    total = abs(total)
    return f"{sign}{total // 3600:02d}{separator}{(total % 3600) // 60:02d}"


@dataclass(frozen=True)
class Datetime:
    """A parsed DICOM datetime.

    When ``no_offset`` is true the zone offset is left out of the rendered value.
    A naive ``time`` is rendered with a zero offset.
    """

    time: datetime
    precision: PrecisionLevel = PrecisionLevel.FULL
    no_offset: bool = False

    def dcm(self) -> str:
        """Render as a DICOM DT string, truncated to ``precision``."""
        text = Date(time=self.time, precision=self.precision).dcm()
        if is_included(PrecisionLevel.HOURS, self.precision):
            text += Time(time=self.time, precision=self.precision).dcm()
        if self.no_offset:
            return text
        return text + _format_offset(self.time, "")

    def __str__(self) -> str:
        text = str(Date(time=self.time, precision=self.precision))
        if is_included(PrecisionLevel.HOURS, self.precision):
            text += " " + str(Time(time=self.time, precision=self.precision))
        if self.no_offset:
            return text
        return f"{text} {_format_offset(self.time, ':')}"


def parse_datetime(dt_string: str) -> Datetime:
    """Parse a DICOM DT value."""
    match = _DT_RE.fullmatch(dt_string)
    if match is None:
        raise ParseDTError()

    year, month, day, precision = _extract_date(match, PrecisionLevel.FULL, False)
    hours, minutes, seconds, micros, precision = _extract_time(match, precision)

    offset_hours = _extract_field(match, "OFFSET_HOURS")
    offset_minutes = _extract_field(match, "OFFSET_MINUTES")
    sign = -1 if match.group("OFFSET_SIGN") == "-" else 1
    offset = (offset_hours.value * 3600 + offset_minutes.value * 60) * sign

    try:
        tz = timezone(timedelta(seconds=offset))
    except ValueError as exc:
        raise ParseDTError() from exc

    parsed = _build_datetime(
        year, month, day, hours, minutes, seconds, micros, tz=tz, error=ParseDTError
    )
    return Datetime(time=parsed, precision=precision, no_offset=not offset_hours.present)