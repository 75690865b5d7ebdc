#!/usr/bin/env python
# coding=utf-8
"""Parser for the ASCII variant of SPICE raw files.

The text is read line by line by a three-state machine:

``META``
    ``Key: value`` header lines. The ``Variables`` header switches to
    ``VARIABLES``, the ``Values`` header switches to ``VALUES``.
``VARIABLES``
    One ``<index>\\t<name>\\t<type>`` record per declared variable. Reading the
    last declared record switches back to ``META``.
``VALUES``
    Samples. A ``<point>\\t<sample>`` line opens a new point, a bare
    ``<sample>`` line continues the current one. Every sample is either a real
    number or a ``<real>,<imaginary>`` pair, which is stored as magnitude and
    phase.

The only point boundary in the text is the index column, so the samples of a
point are buffered in a :class:`SampleAccumulator` and committed when the next
point starts or when the input ends.
"""

import logging
from enum import Enum, auto
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np

from ..core import patterns as core_patterns
from ..core.constants import RawFileConstants
from ..exceptions import (
    FloatFormatError,
    IntegerFormatError,
    MalformedRecordError,
    RawCsvFileNotFoundError,
    UnknownFlagError,
    ValueCountMismatchError,
    VariableCountMismatchError,
)
from ..utils.detect_encoding import detect_encoding
from .raw_classes import Document, Flags, VariableSeries

_logger = logging.getLogger("rawcsv.RawAsciiParser")


class ParserState(Enum):
    """Section of the raw file the parser is reading."""

    META = auto()
    VARIABLES = auto()
    VALUES = auto()


class _SeriesBuilder:
    """Mutable sample lists of a variable while the file is being read."""

    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        self.values: List[float] = []
        self.angles: List[float] = []

    def build(self, flags: Flags) -> VariableSeries:
        angles = self.angles if flags is Flags.COMPLEX else None
        return VariableSeries.build(self.name, self.kind, self.values, angles)


class SampleAccumulator:
    """Buffers the samples of the current point until it is complete.

    Samples are added in variable order. :meth:`flush` commits the buffered
    point to the series builders and must be called whenever a new point
    starts and once more at the end of the input.
    """

    def __init__(self, builders: List[_SeriesBuilder]) -> None:
        self._builders = builders
        self._pending: List[Tuple[float, float]] = []
        self.points_committed = 0

    def __len__(self) -> int:
        return len(self._pending)

    def add(self, magnitude: float, phase: float) -> None:
        """Buffer one sample of the current point."""
        self._pending.append((magnitude, phase))

    def flush(self, expected_count: int, line_number: Optional[int] = None) -> None:
        """Commit the buffered point, if any, to the series.

        :param expected_count: Declared number of variables
        :param line_number: Line that triggered the flush, for error reports
        :raises ValueCountMismatchError: If the point does not hold one sample
            per declared variable
        :raises VariableCountMismatchError: If fewer variables were declared in
            the Variables section than in the header
        """
        if not self._pending:
            return
        if len(self._pending) != expected_count:
            raise ValueCountMismatchError(
                f"Point {self.points_committed} has {len(self._pending)} values, "
                f"expected {expected_count}",
                line_number,
            )
        if len(self._builders) != expected_count:
            raise VariableCountMismatchError(
                f"{len(self._builders)} variables listed, "
                f"{expected_count} declared",
                line_number,
            )
        for builder, (magnitude, phase) in zip(self._builders, self._pending):
            builder.values.append(magnitude)
            builder.angles.append(phase)
        self._pending.clear()
        self.points_committed += 1


class RawAsciiParser:
    """Single-use parser turning ASCII raw text into a :class:`Document`."""

    def __init__(self, quadrant_aware_phase: bool = False) -> None:
        """
        Args:
            quadrant_aware_phase: Compute complex phases with ``atan2`` instead
                of the single-argument ``arctan(imag / real)``
        """
        self.quadrant_aware_phase = quadrant_aware_phase
        self.state = ParserState.META
        self.title = ""
        self.date = ""
        self.plotname = ""
        self.flags = Flags.REAL
        self.flag_modifiers: Tuple[str, ...] = ()
        self.variable_count = 0
        self.point_count = 0
        self.extra_fields: Dict[str, str] = {}
        self._variables_read = 0
        self._variables_seen = False
        self._builders: List[_SeriesBuilder] = []
        self._accumulator = SampleAccumulator(self._builders)

    def parse(self, raw_text: str) -> Document:
        """Parse the whole text and return the document."""
        handlers = {
            ParserState.META: self._read_meta,
            ParserState.VARIABLES: self._read_variable,
            ParserState.VALUES: self._read_value,
        }
        for line_number, line in enumerate(raw_text.splitlines(), start=1):
            stripped = line.strip()
            if not stripped:
                continue
            handlers[self.state](stripped, line_number)
        self._accumulator.flush(self.variable_count)
        return self._finish()

    # State transitions

    def _enter_variables(self, line_number: int) -> None:
        self._variables_read = 0
        self._variables_seen = True
        if self.variable_count == 0:
            _logger.debug("Line %d: no variables declared, staying in META", line_number)
            return
        _logger.debug("Line %d: META -> VARIABLES", line_number)
        self.state = ParserState.VARIABLES

    def _leave_variables(self, line_number: int) -> None:
        _logger.debug("Line %d: VARIABLES -> META", line_number)
        self.state = ParserState.META

    def _enter_values(self, line_number: int) -> None:
        _logger.debug("Line %d: META -> VALUES", line_number)
        self.state = ParserState.VALUES

    # Line handlers

    def _read_meta(self, line: str, line_number: int) -> None:
        # After the section even a record lacking its type is a surplus one
        min_fields = 2 if self._variables_seen else 3
        if _is_variable_record(line, min_fields):
            raise VariableCountMismatchError(
                f"Variable record beyond the {self.variable_count} declared",
                line_number,
                line,
            )
        key, separator, remainder = line.partition(RawFileConstants.KEY_SEPARATOR)
        if key == RawFileConstants.KEY_TITLE:
            self.title = remainder.strip()
        elif key == RawFileConstants.KEY_DATE:
            # Fragments are glued back without the colons
            self.date = remainder.replace(RawFileConstants.KEY_SEPARATOR, "").strip()
        elif key == RawFileConstants.KEY_PLOTNAME:
            self.plotname = remainder.strip()
        elif key == RawFileConstants.KEY_FLAGS:
            self._read_flags(remainder, line, line_number)
        elif key == RawFileConstants.KEY_NO_VARIABLES:
            self.variable_count = _parse_count(remainder, line, line_number)
        elif key == RawFileConstants.KEY_NO_POINTS:
            self.point_count = _parse_count(remainder, line, line_number)
        elif key == RawFileConstants.SECTION_VARIABLES:
            self._enter_variables(line_number)
        elif key == RawFileConstants.SECTION_VALUES:
            self._enter_values(line_number)
        elif separator:
            _logger.debug("Line %d: ignoring header field '%s'", line_number, key)
            self.extra_fields[key] = remainder.strip()

    def _read_flags(self, remainder: str, line: str, line_number: int) -> None:
        tokens = core_patterns.WHITESPACE_PATTERN.split(remainder.strip())
        try:
            self.flags = Flags(tokens[0])
        except ValueError:
            raise UnknownFlagError(remainder.strip(), line_number, line) from None
        self.flag_modifiers = tuple(tokens[1:])

    def _read_variable(self, line: str, line_number: int) -> None:
        if self._variables_read == self.variable_count:
            raise VariableCountMismatchError(
                f"More variables listed than the {self.variable_count} declared",
                line_number,
                line,
            )
        fields = line.split(RawFileConstants.FIELD_SEPARATOR)
        if len(fields) == 1 and RawFileConstants.KEY_SEPARATOR in line:
            # A header such as "Values:" cut the section short
            raise VariableCountMismatchError(
                f"Only {self._variables_read} of the {self.variable_count} "
                f"declared variables listed",
                line_number,
                line,
            )
        self._variables_read += 1
        if len(fields) < 3:
            raise MalformedRecordError(
                "Variable record needs an index, a name and a type", line_number, line
            )
        self._builders.append(_SeriesBuilder(fields[1].strip(), fields[2].strip()))
        if self._variables_read == self.variable_count:
            self._leave_variables(line_number)

    def _read_value(self, line: str, line_number: int) -> None:
        fields = line.split(RawFileConstants.FIELD_SEPARATOR)
        if len(fields) == 2:
            if not core_patterns.UNSIGNED_INTEGER_PATTERN.match(fields[0].strip()):
                raise IntegerFormatError(
                    f"Cannot parse point index from {fields[0]!r}", line_number, line
                )
            # Index column: the previous point is complete
            self._accumulator.flush(self.variable_count, line_number)
            sample = fields[1]
        elif len(fields) == 1:
            sample = fields[0]
        else:
            raise ValueCountMismatchError(
                f"Value line has {len(fields)} fields, expected 1 or 2",
                line_number,
                line,
            )
        if self.flags is Flags.COMPLEX:
            self._accumulator.add(*self._parse_complex(sample, line, line_number))
        else:
            self._accumulator.add(_parse_float(sample, line, line_number), 0.0)

    def _parse_complex(
        self, text: str, line: str, line_number: int
    ) -> Tuple[float, float]:
        parts = text.split(RawFileConstants.COMPLEX_SEPARATOR)
        if len(parts) != 2:
            raise FloatFormatError(
                f"Complex sample must be '<real>,<imaginary>', got {text!r}",
                line_number,
                line,
            )
        real = np.float64(_parse_float(parts[0], line, line_number))
        imaginary = np.float64(_parse_float(parts[1], line, line_number))
        magnitude = np.hypot(real, imaginary)
        if self.quadrant_aware_phase:
            phase = np.arctan2(imaginary, real)
        else:
            # 0/0 and x/0 follow IEEE rules: nan and +-pi/2
            with np.errstate(divide="ignore", invalid="ignore"):
                phase = np.arctan(imaginary / real)
        return float(magnitude), float(phase)

    def _finish(self) -> Document:
        if len(self._builders) != self.variable_count:
            raise VariableCountMismatchError(
                f"{len(self._builders)} variables listed, "
                f"{self.variable_count} declared"
            )
        for builder in self._builders:
            if len(builder.values) != self.point_count:
                raise ValueCountMismatchError(
                    f"Variable '{builder.name}' has {len(builder.values)} points, "
                    f"{self.point_count} declared"
                )
        _logger.info(
            "Parsed '%s': %d variables, %d points, %s",
            self.plotname,
            self.variable_count,
            self.point_count,
            self.flags.value,
        )
        return Document(
            title=self.title,
            date=self.date,
            plotname=self.plotname,
            flags=self.flags,
            declared_variable_count=self.variable_count,
            declared_point_count=self.point_count,
            series=tuple(builder.build(self.flags) for builder in self._builders),
            flag_modifiers=self.flag_modifiers,
            extra_fields=MappingProxyType(dict(self.extra_fields)),
        )


def _is_variable_record(line: str, min_fields: int) -> bool:
    fields = line.split(RawFileConstants.FIELD_SEPARATOR)
    return len(fields) >= min_fields and bool(
        core_patterns.UNSIGNED_INTEGER_PATTERN.match(fields[0].strip())
    )


def _parse_count(text: str, line: str, line_number: int) -> int:
    text = text.strip()
    if not core_patterns.UNSIGNED_INTEGER_PATTERN.match(text):
        raise IntegerFormatError(
            f"Cannot parse integer from {text!r}", line_number, line
        )
    return int(text)


def _parse_float(text: str, line: str, line_number: int) -> float:
    if core_patterns.DIGIT_GROUP_PATTERN.search(text):
        raise FloatFormatError(f"Cannot parse float from {text!r}", line_number, line)
    try:
        return float(text)
    except ValueError as e:
        raise FloatFormatError(
            f"Cannot parse float from {text!r}", line_number, line
        ) from e


def parse(raw_text: str, *, quadrant_aware_phase: bool = False) -> Document:
    """Parse the text of an ASCII raw file.

    :param raw_text: Whole content of the raw file
    :param quadrant_aware_phase: Use ``atan2`` for complex phases
    :return: The parsed document
    :raises ParseError: On any malformed or inconsistent input
    """
    return RawAsciiParser(quadrant_aware_phase=quadrant_aware_phase).parse(raw_text)


def read_raw_text(
    raw_filename: Union[str, Path], encoding: Optional[str] = None
) -> str:
    """Read a raw file from disk, detecting its encoding when not given.

    :param raw_filename: Path to the raw file
    :param encoding: Text encoding, or None to detect it
    :raises RawCsvFileNotFoundError: If the file does not exist
    :raises EncodingDetectError: If no known encoding decodes the header
    """
    path = Path(raw_filename)
    if not path.exists():
        raise RawCsvFileNotFoundError(str(path))
    if encoding is None:
        encoding = detect_encoding(path, RawFileConstants.FIRST_LINE_PATTERN)
        _logger.debug("Detected encoding %s for %s", encoding, path)
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def parse_file(
    raw_filename: Union[str, Path], encoding: Optional[str] = None, **kwargs: Any
) -> Document:
    """Read and parse a raw file. Keyword arguments go to :func:`parse`."""
    return parse(read_raw_text(raw_filename, encoding), **kwargs)
