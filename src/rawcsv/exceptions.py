"""
Exception hierarchy for rawcsv.

This module defines the exceptions raised while reading, parsing and
exporting SPICE ASCII raw files.
"""

from typing import Any, Dict, List, Optional


class RawCsvError(Exception):
    """Base exception for all rawcsv errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize RawCsvError.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details or {}


# Parser exceptions
class ParseError(RawCsvError):
    """Base class for errors found while parsing raw text."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        """
        Initialize ParseError.

        Args:
            message: Error message
            line_number: 1-based number of the offending line, if known
            line: Text of the offending line, if known
        """
        if line_number is not None:
            message = f"{message} (line {line_number})"
        details = {"line_number": line_number, "line": line}
        super().__init__(message, details)

    @property
    def line_number(self) -> Optional[int]:
        """Line where the error was detected."""
        return self.details.get("line_number")


class IntegerFormatError(ParseError):
    """Raised when a header count is not a non-negative integer."""


class FloatFormatError(ParseError):
    """Raised when a sample is not a valid real or complex number."""


class VariableCountMismatchError(ParseError):
    """Raised when the declared and supplied variables disagree."""


class ValueCountMismatchError(ParseError):
    """Raised when a point or a series holds the wrong number of samples."""


class UnknownFlagError(ParseError):
    """Raised when the Flags header is neither real nor complex."""

    def __init__(
        self,
        flag: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        """
        Initialize UnknownFlagError.

        Args:
            flag: The unrecognised flag value
            line_number: 1-based number of the Flags line
            line: Text of the Flags line
        """
        super().__init__(f"Unknown value in flags: {flag!r}", line_number, line)
        self.details["flag"] = flag


class MalformedRecordError(ParseError):
    """Raised when a variable record lacks its name or type field."""


# Configuration exceptions
class ConfigurationError(RawCsvError):
    """Base class for configuration-related errors."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid."""

    def __init__(
        self, message: str, valid_options: Optional[List[str]] = None
    ) -> None:
        """
        Initialize InvalidConfigurationError.

        Args:
            message: Error message
            valid_options: Optional list of accepted values
        """
        if valid_options:
            message += f". Valid options: {', '.join(valid_options)}"
        super().__init__(message, {"valid_options": valid_options})


# I/O exceptions
class RawCsvIOError(RawCsvError):
    """Base class for I/O related errors."""


class RawCsvFileNotFoundError(RawCsvIOError):
    """Raised when a raw file is not found."""

    def __init__(self, filepath: str) -> None:
        """
        Initialize RawCsvFileNotFoundError.

        Args:
            filepath: Path to the missing file
        """
        message = f"File not found: {filepath}"
        details = {"filepath": filepath}
        super().__init__(message, details)
