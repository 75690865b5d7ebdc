#!/usr/bin/env python
# coding=utf-8
"""Rendering of parsed raw documents as CSV or JSON text.

CSV layout: one header row naming every column, then one row per point.
Real documents get one column per variable. Complex documents get two, the
magnitude and the phase in degrees followed by a degree sign.

Numbers are written with :func:`numpy.format_float_positional` in its
shortest round-trip mode with trailing zeros trimmed, so ``1.0`` is written
``1`` and ``1e-10`` is written ``0.0000000001``.
"""

import json
import logging
from typing import Any, List

import numpy as np

from ..core.constants import CsvConstants, Defaults
from .raw_ascii_parser import parse
from .raw_classes import Document, VariableSeries

_logger = logging.getLogger("rawcsv.RawCsv")


def format_number(value: float) -> str:
    """Shortest positional text that reads back as the same float."""
    return np.format_float_positional(value, unique=True, trim="-")


def _header_cells(document: Document, series: VariableSeries) -> List[str]:
    cells = [f"{series.name}{CsvConstants.NAME_KIND_SEPARATOR}{series.kind}"]
    if document.is_complex:
        cells.append(f"{series.kind}{CsvConstants.PHASE_SUFFIX}")
    return cells


def _sample_cell(document: Document, series: VariableSeries, point: int) -> str:
    if document.is_complex and series.angles is not None:
        degrees = np.degrees(series.angles[point])
        return (
            f"{format_number(series.values[point])}{CsvConstants.SEPARATOR}"
            f"{format_number(degrees)}{CsvConstants.DEGREE_SYMBOL}"
        )
    return format_number(series.values[point])


def to_csv(document: Document) -> str:
    """Render a parsed document as CSV text.

    A document without variables renders as a single empty header row.

    :param document: A document returned by :func:`parse`
    :return: CSV text, every row terminated by a newline
    """
    header: List[str] = []
    for series in document.series:
        header.extend(_header_cells(document, series))
    rows = [CsvConstants.SEPARATOR.join(header)]

    if document.series:
        for point in range(document.declared_point_count):
            rows.append(
                CsvConstants.SEPARATOR.join(
                    _sample_cell(document, series, point) for series in document.series
                )
            )
    _logger.debug("Rendered %d CSV rows", len(rows))
    return CsvConstants.LINE_TERMINATOR.join(rows) + CsvConstants.LINE_TERMINATOR


def to_json(document: Document, indent: int = Defaults.JSON_INDENT) -> str:
    """Render a parsed document as JSON text.

    Non-finite samples are written as ``NaN``/``Infinity`` like :mod:`json`
    does by default.
    """
    return json.dumps(document.to_dict(), indent=indent, ensure_ascii=False)


def export_csv(raw_text: str, **kwargs: Any) -> str:
    """Parse ASCII raw text and render it as CSV.

    Keyword arguments are passed to :func:`parse`.

    :raises ParseError: On any malformed or inconsistent input
    """
    return to_csv(parse(raw_text, **kwargs))
