#!/usr/bin/env python
# coding=utf-8
"""Pragmatic detection of the text encoding of raw files.

Simulators write ASCII raw files in a small set of encodings (LTspice uses
UTF-16 LE on recent versions), so the candidates are simply tried in order
until one decodes the file and shows the expected header.
"""

import re
from pathlib import Path
from typing import Union

from ..core import constants as core_constants


class EncodingDetectError(Exception):
    """Exception raised when the encoding of a file cannot be detected."""


def detect_encoding(
    file_path: Union[str, Path],
    expected_pattern: str = "",
    re_flags: Union[int, re.RegexFlag] = 0,
) -> str:
    """Detect the encoding of a text file.

    If an expected pattern is given, the first candidate encoding whose decoded
    text matches it at the start of some line is returned. Otherwise the first
    encoding that decodes the file is returned, except that UTF-8 is rejected
    when the second character is a null, the sign of UTF-16 text.

    :param file_path: path to the file
    :param expected_pattern: regular expression to match at the start of a line
    :param re_flags: flags to be used in the regular expression
    :return: detected encoding
    :raises EncodingDetectError: If no candidate encoding fits
    """
    for encoding in core_constants.Encodings.DETECTION_ORDER:
        try:
            with open(file_path, "r", encoding=encoding) as f:
                text = f.read()
        except UnicodeError:
            # This encoding didn't work, let's try again
            continue
        if len(text) == 0:
            continue
        if expected_pattern and not re.search(
            expected_pattern, text, re_flags | re.MULTILINE
        ):
            continue
        if (
            encoding == core_constants.Encodings.UTF8
            and len(text) > 1
            and text[1] == "\x00"
        ):
            continue
        return encoding
    if expected_pattern:
        raise EncodingDetectError(
            f'Expected pattern "{expected_pattern}" not found in file: {file_path}'
        )
    raise EncodingDetectError(f"Unable to detect encoding of file: {file_path}")
