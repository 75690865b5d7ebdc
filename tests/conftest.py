"""Pytest configuration and shared fixtures for rawcsv tests."""

import sys
from pathlib import Path

import pytest

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rawcsv.config import set_config  # noqa: E402

REAL_RAW = """Title: t
Date: d
Plotname: p
Flags: real
No. Variables: 2
No. Points: 2
Variables:
\t0\ttime\ttime
\t1\tv1\tvoltage
Values:
0\t0.0
\t1.0
1\t1.0
\t2.0
"""

COMPLEX_RAW = """Title: * AC sweep
Date: Mon Jan 01 10:20:30 2024
Plotname: AC Analysis
Flags: complex forward log
No. Variables: 2
No. Points: 2
Offset: 0.0000000000000000e+000
Command: Linear Technology Corporation LTspice XVII
Variables:
\t0\tfrequency\tfrequency
\t1\tV(out)\tvoltage
Values:
0\t1.0,0.0
\t3.0,4.0
1\t10.0,0.0
\t-1.0,1.0
"""

EMPTY_RAW = """Title: empty
Date: d
Plotname: Operating Point
Flags: real
No. Variables: 0
No. Points: 0
Variables:
Values:
"""


@pytest.fixture
def real_raw() -> str:
    """Two real variables over two points."""
    return REAL_RAW


@pytest.fixture
def complex_raw() -> str:
    """Two complex variables over two points, LTspice style header."""
    return COMPLEX_RAW


@pytest.fixture
def empty_raw() -> str:
    """A document declaring no variables."""
    return EMPTY_RAW


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for test output."""
    return tmp_path


@pytest.fixture
def real_raw_file(temp_dir: Path) -> Path:
    """The real document written to disk as UTF-8."""
    raw_file = temp_dir / "tran.raw"
    raw_file.write_text(REAL_RAW, encoding="utf-8")
    return raw_file


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Start every test from a default configuration."""
    for name in (
        "RAWCSV_DEFAULT_ENCODING",
        "RAWCSV_LOG_LEVEL",
        "RAWCSV_QUADRANT_AWARE_PHASE",
        "RAWCSV_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
