"""Integration tests for the rawcsv-convert entry point."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from rawcsv.config import RawCsvConfig, set_config
from rawcsv.raw.raw_convert import main

SRC_DIR = Path(__file__).parent.parent.parent / "src"


class TestRawConvertMain:
    """Test main() called in-process."""

    def test_csv_to_stdout(self, real_raw_file: Path, capsys) -> None:
        """Test the default output is CSV on stdout."""
        main([str(real_raw_file)])

        assert capsys.readouterr().out == "time - time,v1 - voltage\n0,1\n1,2\n"

    def test_json_to_file(self, real_raw_file: Path, temp_dir: Path) -> None:
        """Test writing JSON to an output file."""
        output = temp_dir / "out.json"
        main([str(real_raw_file), "-f", "json", "-o", str(output)])

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["data"][0]["values"] == [0.0, 1.0]

    def test_list(self, real_raw_file: Path, capsys) -> None:
        """Test listing the variables."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(real_raw_file), "--list"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "time (time)" in out
        assert "v1 (voltage)" in out

    def test_missing_file(self, temp_dir: Path, capsys) -> None:
        """Test a missing raw file exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(temp_dir / "missing.raw")])

        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err

    def test_parse_error(self, temp_dir: Path, real_raw: str, capsys) -> None:
        """Test a malformed raw file exits with status 1."""
        raw_file = temp_dir / "bad.raw"
        raw_file.write_text(real_raw.replace("Flags: real", "Flags: weird"))

        with pytest.raises(SystemExit) as exc_info:
            main([str(raw_file)])

        assert exc_info.value.code == 1
        assert "Unknown value in flags" in capsys.readouterr().err

    def test_configured_format(self, real_raw_file: Path, capsys) -> None:
        """Test the configured output format is the default."""
        set_config(RawCsvConfig(output_format="json"))
        main([str(real_raw_file)])

        assert json.loads(capsys.readouterr().out)["plotname"] == "p"

    def test_configured_phase_can_be_disabled(
        self, temp_dir: Path, complex_raw: str, capsys
    ) -> None:
        """Test --no-quadrant-aware-phase overrides the configuration."""
        raw_file = temp_dir / "ac.raw"
        raw_file.write_text(complex_raw, encoding="utf-8")
        set_config(RawCsvConfig(quadrant_aware_phase=True))

        main([str(raw_file)])
        aware_row = capsys.readouterr().out.splitlines()[2]
        main([str(raw_file), "--no-quadrant-aware-phase"])
        plain_row = capsys.readouterr().out.splitlines()[2]

        assert float(aware_row.split(",")[3].rstrip("°")) == pytest.approx(135.0)
        assert float(plain_row.split(",")[3].rstrip("°")) == pytest.approx(-45.0)

    def test_unwritable_output(
        self, real_raw_file: Path, temp_dir: Path, capsys
    ) -> None:
        """Test a failed output write exits with status 1."""
        output = temp_dir / "missing_dir" / "out.csv"

        with pytest.raises(SystemExit) as exc_info:
            main([str(real_raw_file), "-o", str(output)])

        assert exc_info.value.code == 1
        assert "Error writing output file" in capsys.readouterr().err

    def test_invalid_configuration(self, real_raw_file: Path, capsys) -> None:
        """Test an invalid configuration exits with status 1."""
        set_config(RawCsvConfig(output_format="xlsx"))

        with pytest.raises(SystemExit) as exc_info:
            main([str(real_raw_file)])

        assert exc_info.value.code == 1
        assert "Unknown output format" in capsys.readouterr().err


class TestRawConvertModule:
    """Test running the converter as a separate process."""

    @pytest.mark.slow
    def test_module_execution(self, real_raw_file: Path) -> None:
        """Test python -m rawcsv.raw.raw_convert converts a file."""
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(SRC_DIR), env.get("PYTHONPATH")])
        )
        result = subprocess.run(
            [sys.executable, "-m", "rawcsv.raw.raw_convert", str(real_raw_file)],
            capture_output=True,
            text=True,
            timeout=30,
            env=env,
        )

        assert result.returncode == 0, result.stderr
        assert result.stdout.splitlines() == ["time - time,v1 - voltage", "0,1", "1,2"]
