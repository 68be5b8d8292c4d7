"""Parsing and rendering of DICOM DA, TM and DT values with their precision."""