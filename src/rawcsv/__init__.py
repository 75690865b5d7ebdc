"""rawcsv - SPICE ASCII raw file to CSV converter.

This package parses the ASCII variant of the raw waveform files written by
SPICE simulators (LTspice, NGspice, Xyce...) into immutable documents and
renders them as CSV or JSON.
"""

__version__ = "0.1.0"

from rawcsv.exceptions import (
    FloatFormatError,
    IntegerFormatError,
    MalformedRecordError,
    ParseError,
    RawCsvError,
    UnknownFlagError,
    ValueCountMismatchError,
    VariableCountMismatchError,
)
from rawcsv.raw.raw_classes import Document, Flags, VariableSeries
from rawcsv.raw.raw_ascii_parser import parse, parse_file
from rawcsv.raw.raw_csv import export_csv, to_csv, to_json

__all__ = [
    "Document",
    "Flags",
    "VariableSeries",
    "parse",
    "parse_file",
    "export_csv",
    "to_csv",
    "to_json",
    "RawCsvError",
    "ParseError",
    "IntegerFormatError",
    "FloatFormatError",
    "VariableCountMismatchError",
    "ValueCountMismatchError",
    "UnknownFlagError",
    "MalformedRecordError",
]
