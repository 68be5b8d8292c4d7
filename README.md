# dicomkit

Helpers for two pieces of DICOM value handling:

- `dicomkit.dcmtime` – parsing and rendering of the DA (date), TM (time) and
  DT (datetime) value representations, keeping track of how precise each
  value was.
- `dicomkit.charset` – turning the values of a Specific Character Set
  element into a `CodingSystem` that decodes bytes for the alphabetic,
  ideographic and phonetic components of a value.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Dates and times

```python
from dicomkit.dcmtime.da import parse_date
from dicomkit.dcmtime.tm import parse_time
from dicomkit.dcmtime.dt import parse_datetime
from dicomkit.dcmtime.precision import PrecisionLevel

da = parse_date("202012")
da.precision is PrecisionLevel.MONTH   # True
da.dcm()                               # "202012"
str(da)                                # "2020-12"

nema = parse_date("2020.12.10")        # legacy NEMA-300 form
nema.is_nema                           # True
nema.dcm()                             # "2020.12.10"

tm = parse_time("123001.431")
str(tm.precision)                      # "MS3"
tm.dcm()                               # "123001.431"
str(tm)                                # "12:30:01.431"

dt = parse_datetime("20201210123001.000431+0100")
dt.no_offset                           # False
dt.dcm()                               # "20201210123001.000431+0100"
str(dt)                                # "2020-12-10 12:30:01.000431 +01:00"
```

`Date`, `Time` and `Datetime` are frozen dataclasses that can also be built
directly from a `datetime.date`, `datetime.time` or `datetime.datetime` and a
`PrecisionLevel`; `dcm()` then renders only the segments the precision
covers. `PrecisionLevel` runs from `FULL` (most precise) through `MS5` …
`MS1`, `SECONDS`, `MINUTES`, `HOURS`, `DAY` and `MONTH` to `YEAR`.

A `Datetime` with `no_offset=True` leaves the zone offset out; a naive
datetime is rendered with a `+0000` offset.

Values that do not match the format raise `ParseDAError`, `ParseTMError` or
`ParseDTError`, all subclasses of `DcmTimeParseError` (itself a `ValueError`)
in `dicomkit.dcmtime.common`. That module also provides `is_included` and
`truncate_fraction`, the helpers used for precision-aware rendering.

## Character sets

```python
from dicomkit.charset import parse_specific_character_set, CodingSystemType

cs = parse_specific_character_set(["ISO_IR 100"])
cs.decode(b"M\xfcller", CodingSystemType.IDEOGRAPHIC)   # "Müller"
```

One name sets all three components; two names set the alphabetic component
from the first and the other two from the second; three names set one each.
An empty list gives a `CodingSystem` with no codecs, which decodes as UTF-8.
Undecodable bytes are replaced rather than raising. An unknown name raises
`UnknownCharacterSetError`.

## What this package does not do

It does not read or write DICOM files, and it has no types for data
elements, tags or datasets. It works only on individual values that have
already been taken out of a file: date/time strings and raw text bytes.