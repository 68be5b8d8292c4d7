"""Decoding of DICOM byte strings according to Specific Character Set."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


class UnknownCharacterSetError(ValueError):
    """A Specific Character Set term is not supported."""


class CodingSystemType(enum.IntEnum):
    """Which component of a name a coding system is used for."""

    ALPHABETIC = 0
    IDEOGRAPHIC = 1
    PHONETIC = 2


# DICOM defined terms mapped to Python codec names.
_CODECS: dict[str, str] = {
    "": "iso8859_1",
    "ISO_IR 6": "iso8859_1",
    "ISO 2022 IR 6": "iso8859_1",
    "ISO_IR 13": "shift_jis",
    "ISO 2022 IR 13": "shift_jis",
    "ISO_IR 100": "iso8859_1",
    "ISO 2022 IR 100": "iso8859_1",
    "ISO_IR 101": "iso8859_2",
    "ISO 2022 IR 101": "iso8859_2",
    "ISO_IR 109": "iso8859_3",
    "ISO 2022 IR 109": "iso8859_3",
    "ISO_IR 110": "iso8859_4",
    "ISO 2022 IR 110": "iso8859_4",
    "ISO_IR 126": "iso8859_7",
    "ISO 2022 IR 126": "iso8859_7",
    "ISO_IR 127": "iso8859_6",
    "ISO 2022 IR 127": "iso8859_6",
    "ISO_IR 138": "iso8859_8",
    "ISO 2022 IR 138": "iso8859_8",
    "ISO_IR 144": "iso8859_5",
    "ISO 2022 IR 144": "iso8859_5",
    "ISO_IR 148": "iso8859_9",
    "ISO 2022 IR 148": "iso8859_9",
    "ISO 2022 IR 149": "euc_kr",
    "ISO 2022 IR 159": "iso2022_jp",
    "ISO_IR 166": "tis_620",
    "ISO 2022 IR 166": "tis_620",
    "ISO 2022 IR 87": "iso2022_jp",
    "ISO 2022 IR 58": "gb2312",
    "ISO_IR 192": "utf_8",
    "GB18030": "gb18030",
    "GBK": "gbk",
}

_DEFAULT_CODEC = "utf_8"


@dataclass(frozen=True)
class CodingSystem:
    """Codec names used to decode the three components of a value.

    Only person names use all three; other values use the ideographic codec.
    ``None`` means no character set was declared.
    """

    alphabetic: str | None = None
    ideographic: str | None = None
    phonetic: str | None = None

    def decode(
        self, data: bytes, kind: CodingSystemType = CodingSystemType.IDEOGRAPHIC
    ) -> str:
        """Decode ``data`` with the codec chosen for ``kind``."""
        codec = {
            CodingSystemType.ALPHABETIC: self.alphabetic,
            CodingSystemType.IDEOGRAPHIC: self.ideographic,
            CodingSystemType.PHONETIC: self.phonetic,
        }[CodingSystemType(kind)]
        return bytes(data).decode(codec or _DEFAULT_CODEC, errors="replace")


def parse_specific_character_set(encoding_names: Iterable[str]) -> CodingSystem:
    """Build a CodingSystem from the values of a Specific Character Set element."""
    codecs = []
    for name in encoding_names:
        try:
            codecs.append(_CODECS[name])
        except KeyError:
            raise UnknownCharacterSetError(
                f"unknown character set {name!r}"
            ) from None

    if not codecs:
        return CodingSystem()
    if len(codecs) == 1:
        return CodingSystem(codecs[0], codecs[0], codecs[0])
    if len(codecs) == 2:
        return CodingSystem(codecs[0], codecs[1], codecs[1])
    return CodingSystem(codecs[0], codecs[1], codecs[2])