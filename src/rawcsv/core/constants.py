"""
Centralized constants for rawcsv.

This module contains the header keys, magic strings and default values used
throughout the rawcsv library.
"""

# Encoding constants


class Encodings:
    """Text encoding constants."""

    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF16_LE = "utf_16_le"
    CP1252 = "cp1252"
    CP1250 = "cp1250"
    WINDOWS_1252 = "windows-1252"
    SHIFT_JIS = "shift_jis"

    # Encoding detection order
    DETECTION_ORDER = [UTF8, UTF16, WINDOWS_1252, UTF16_LE, CP1252, CP1250, SHIFT_JIS]


# Raw file constants


class RawFileConstants:
    """Constants for ASCII raw simulation output files."""

    # Header keys
    KEY_TITLE = "Title"
    KEY_DATE = "Date"
    KEY_PLOTNAME = "Plotname"
    KEY_FLAGS = "Flags"
    KEY_NO_VARIABLES = "No. Variables"
    KEY_NO_POINTS = "No. Points"

    # Section headers
    SECTION_VARIABLES = "Variables"
    SECTION_VALUES = "Values"

    # Data types
    TYPE_REAL = "real"
    TYPE_COMPLEX = "complex"

    KEY_SEPARATOR = ":"
    FIELD_SEPARATOR = "\t"
    COMPLEX_SEPARATOR = ","

    # Encoding detection anchor
    FIRST_LINE_PATTERN = r"^Title:"


# CSV output constants


class CsvConstants:
    """Constants for CSV rendering."""

    SEPARATOR = ","
    LINE_TERMINATOR = "\n"
    NAME_KIND_SEPARATOR = " - "
    PHASE_SUFFIX = "(phase)"
    DEGREE_SYMBOL = "°"


# Output formats


class OutputFormats:
    """Formats understood by the converter."""

    CSV = "csv"
    JSON = "json"

    ALL = [CSV, JSON]


class Defaults:
    """Default configuration values."""

    LOG_LEVEL = "INFO"
    OUTPUT_FORMAT = OutputFormats.CSV
    JSON_INDENT = 2

    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
