"""
Centralized regex patterns for rawcsv.

This module contains the regex patterns used to validate numeric fields of
ASCII raw files.
"""

import re
from typing import Pattern

# Header counts: plain decimal digits, optional leading plus
UNSIGNED_INTEGER_PATTERN: Pattern[str] = re.compile(r"^\+?[0-9]+$")

# Python float() accepts digit-group underscores, raw files never carry them
DIGIT_GROUP_PATTERN: Pattern[str] = re.compile(r"_")

WHITESPACE_PATTERN: Pattern[str] = re.compile(r"\s+")
