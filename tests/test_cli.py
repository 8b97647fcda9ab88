"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from target_lock.cli import EXIT_INVALID_INPUT, EXIT_NOT_COMPUTABLE, EXIT_OK, main


class TestMain:
    """Tests for cli.main."""

    def test_prints_measurement(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Valid input prints the rendered measurement."""
        code = main(["-f", "1000", "-p", "500", "--height", "2.0", "--unit", "meters"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert out.splitlines()[0] == "4.00m • H=2.00m • 85%"

    def test_preset_height(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Preset titles supply the reference height."""
        code = main(["-f", "1000", "-p", "400", "--preset", "Child (1.20m)", "-u", "meters"])

        assert code == EXIT_OK
        assert capsys.readouterr().out.startswith("3.00m • H=1.20m")

    def test_prints_warnings(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Validator warnings are printed after the measurement."""
        code = main(["-f", "100", "-p", "1000", "--height", "1.0"])

        assert code == EXIT_OK
        assert "warning: Very close range" in capsys.readouterr().out

    def test_not_computable(self) -> None:
        """Zero pixel height exits with the not-computable code."""
        assert main(["-f", "1000", "-p", "0", "--height", "1.7"]) == EXIT_NOT_COMPUTABLE

    @pytest.mark.parametrize(
        "argv",
        [
            ["-f", "-1000", "-p", "500", "--height", "2"],
            ["-f", "1000", "-p", "nan", "--height", "2"],
        ],
    )
    def test_negative_or_nan_input_not_computable(
        self, argv: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Inputs giving a negative or NaN distance print nothing and exit 1."""
        assert main(argv) == EXIT_NOT_COMPUTABLE
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize(
        "argv",
        [
            ["-f", "1000", "-p", "500", "--height", "abc"],
            ["-f", "1000", "-p", "500", "--height", "-2"],
            ["-f", "1000", "-p", "500", "--preset", "Giraffe"],
            ["-p", "500"],
        ],
    )
    def test_invalid_input(self, argv: list[str]) -> None:
        """Bad heights, unknown presets and missing inputs are rejected."""
        assert main(argv) == EXIT_INVALID_INPUT

    def test_list_presets(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Preset listing needs no measurement inputs."""
        assert main(["--list-presets"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Adult Male (1.75m): 1.75 m" in out
        assert len(out.splitlines()) == 6

    def test_appends_to_history_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Each run appends to the JSON history and prints statistics."""
        path = tmp_path / "history.json"
        base = ["-f", "1000", "--height", "2.0", "-u", "meters", "--history", str(path)]

        assert main([*base, "-p", "500"]) == EXIT_OK
        assert main([*base, "-p", "1000"]) == EXIT_OK

        data = json.loads(path.read_text())
        assert data["count"] == 2
        assert "Count: 2  •  Avg: 3.00m  •  Min: 2.00m  •  Max: 4.00m" in capsys.readouterr().out

    def test_corrupt_history_file(self, tmp_path: Path) -> None:
        """Unreadable history is reported as invalid input."""
        path = tmp_path / "history.json"
        path.write_text("{broken")

        assert main(["-f", "1000", "-p", "500", "--history", str(path)]) == EXIT_INVALID_INPUT
