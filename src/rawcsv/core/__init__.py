"""
Core utilities package for rawcsv.

This package contains the constants and regex patterns shared by the parser,
the exporter and the command line tools.
"""

from rawcsv.core.patterns import (
    UNSIGNED_INTEGER_PATTERN,
    DIGIT_GROUP_PATTERN,
    WHITESPACE_PATTERN,
)
from rawcsv.core.constants import (
    CsvConstants,
    Defaults,
    Encodings,
    OutputFormats,
    RawFileConstants,
)

__all__ = [
    # Patterns
    "UNSIGNED_INTEGER_PATTERN",
    "DIGIT_GROUP_PATTERN",
    "WHITESPACE_PATTERN",
    # Constants
    "CsvConstants",
    "Defaults",
    "Encodings",
    "OutputFormats",
    "RawFileConstants",
]
