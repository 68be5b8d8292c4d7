"""Precision levels for DICOM date and time values."""

from __future__ import annotations

import enum


class PrecisionLevel(enum.IntEnum):
    """How many segments of a DA, TM or DT value are significant.

    Lower values are more precise. FULL means the value is as precise as its
    format allows; YEAR means only the year was given.
    """

    FULL = 0
    MS5 = 1
    MS4 = 2
    MS3 = 3
    MS2 = 4
    MS1 = 5
    SECONDS = 6
    MINUTES = 7
    HOURS = 8
    DAY = 9
    MONTH = 10
    YEAR = 11

    def __str__(self) -> str:
        return self.name