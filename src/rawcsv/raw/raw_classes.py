#!/usr/bin/env python
# coding=utf-8
"""Data classes produced by the ASCII raw file parser.

A parsed raw file is a :class:`Document` holding one :class:`VariableSeries`
per declared variable. Documents are immutable: the sample arrays are
read-only numpy arrays and the dataclasses are frozen.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from ..core.constants import RawFileConstants


class Flags(Enum):
    """Sample representation declared by the Flags header."""

    REAL = RawFileConstants.TYPE_REAL
    COMPLEX = RawFileConstants.TYPE_COMPLEX


def _frozen_array(samples: Sequence[float]) -> NDArray[np.float64]:
    array = np.array(samples, dtype=np.float64)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class VariableSeries:
    """All the samples of one declared variable.

    ``values`` holds the real samples, or the magnitudes for complex data.
    ``angles`` holds the phases in radians and is only present on complex
    documents.
    """

    name: str
    kind: str
    values: NDArray[np.float64]
    angles: Optional[NDArray[np.float64]] = None

    @classmethod
    def build(
        cls,
        name: str,
        kind: str,
        values: Sequence[float],
        angles: Optional[Sequence[float]] = None,
    ) -> "VariableSeries":
        """Create a series with read-only copies of the given samples."""
        return cls(
            name=name,
            kind=kind,
            values=_frozen_array(values),
            angles=None if angles is None else _frozen_array(angles),
        )

    @property
    def is_complex(self) -> bool:
        """Whether the series carries phase information."""
        return self.angles is not None

    def __len__(self) -> int:
        return len(self.values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the series to JSON-ready builtins."""
        return {
            "name": self.name,
            "kind": self.kind,
            "values": self.values.tolist(),
            "angles": None if self.angles is None else self.angles.tolist(),
        }


@dataclass(frozen=True, eq=False)
class Document:
    """A fully parsed ASCII raw file."""

    title: str
    date: str
    plotname: str
    flags: Flags
    declared_variable_count: int
    declared_point_count: int
    series: Tuple[VariableSeries, ...]
    flag_modifiers: Tuple[str, ...] = ()
    extra_fields: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def is_complex(self) -> bool:
        """Whether samples are stored as magnitude and phase."""
        return self.flags is Flags.COMPLEX

    def get_series_names(self) -> List[str]:
        """Return the series names in declaration order."""
        return [series.name for series in self.series]

    def get_series(self, name: str) -> VariableSeries:
        """Return the series with the given name.

        :param name: Variable name as declared, e.g. ``V(out)``
        :raises KeyError: If no series has this name
        """
        for series in self.series:
            if series.name == name:
                return series
        raise KeyError(f"Series '{name}' not found in document")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the document to JSON-ready builtins."""
        return {
            "title": self.title,
            "date": self.date,
            "plotname": self.plotname,
            "flags": self.flags.value,
            "no_of_variables": self.declared_variable_count,
            "no_of_points": self.declared_point_count,
            "data": [series.to_dict() for series in self.series],
        }
