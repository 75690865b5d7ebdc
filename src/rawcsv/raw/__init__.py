"""ASCII raw waveform file handling modules.

This module provides the parser turning the ASCII variant of SPICE raw files
into immutable documents, and the exporters rendering them as CSV or JSON.
"""

from .raw_classes import Document, Flags, VariableSeries
from .raw_ascii_parser import (
    ParserState,
    RawAsciiParser,
    SampleAccumulator,
    parse,
    parse_file,
    read_raw_text,
)
from .raw_csv import export_csv, format_number, to_csv, to_json

__all__ = [
    # Data model
    "Document",
    "Flags",
    "VariableSeries",
    # Parsing
    "ParserState",
    "RawAsciiParser",
    "SampleAccumulator",
    "parse",
    "parse_file",
    "read_raw_text",
    # Exporting
    "export_csv",
    "format_number",
    "to_csv",
    "to_json",
]
