"""DICOM value helpers: DA/TM/DT parsing and Specific Character Set decoding."""

__version__ = "0.1.0"