"""
Tests for the tssim command-line interface.
"""

import json

import pandas as pd
import pytest

from timeseries_sim.cli import main, parse_overrides


class TestParseOverrides:

    def test_pairs(self):
        assert parse_overrides(["phi1=0.5", " p = 2 "]) == {"phi1": "0.5", "p": "2"}

    def test_missing_equals(self):
        with pytest.raises(ValueError):
            parse_overrides(["phi1"])


class TestCommands:
    """Tests for each subcommand."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_list(self, capsys):
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        for name in ("white_noise", "trend", "seasonal", "ar", "ma", "arima", "stock_price", "gdp"):
            assert name in out

    def test_info(self, capsys):
        assert main(["info", "ar"]) == 0
        out = capsys.readouterr().out
        assert "phi1" in out
        assert "near_random_walk" in out
        assert "Autoregressive AR(3)" in out

    def test_info_unknown(self, capsys):
        assert main(["info", "garch"]) == 1
        assert "Unknown generator" in capsys.readouterr().out

    def test_generate_json_stdout(self, capsys):
        assert main(["generate", "ma", "-l", "20", "-s", "1", "-p", "theta1=0.3"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["generator"] == "ma"
        assert payload["length"] == 20
        assert payload["parameters"]["theta"] == [0.3, 0.0, 0.0]
        assert [d["time"] for d in payload["data"]] == list(range(20))

    def test_generate_csv_file(self, tmp_path):
        output = tmp_path / "out" / "ar.csv"
        assert main(["generate", "ar", "-l", "50", "-s", "42", "--preset", "persistent", "-o", str(output)]) == 0

        df = pd.read_csv(output)
        assert list(df.columns) == ["time", "value"]
        assert len(df) == 50
        assert (df["value"].iloc[:3] == 0).all()

    def test_generate_json_file(self, tmp_path):
        output = tmp_path / "arima.json"
        assert main(["generate", "arima", "-l", "40", "-p", "q=0", "-o", str(output)]) == 0

        with open(output) as f:
            payload = json.load(f)
        assert payload["parameters"]["branch"] == "ar_differenced"
        assert len(payload["data"]) == 40

    def test_generate_seeded_reproducible(self, capsys):
        main(["generate", "trend", "-l", "30", "-s", "7"])
        first = capsys.readouterr().out
        main(["generate", "trend", "-l", "30", "-s", "7"])
        assert capsys.readouterr().out == first

    def test_generate_unknown_generator(self, capsys):
        assert main(["generate", "garch"]) == 1
        assert "Unknown generator" in capsys.readouterr().out

    def test_generate_bad_param(self, capsys):
        assert main(["generate", "ar", "-p", "theta1=0.5"]) == 1
        assert "Unknown parameter" in capsys.readouterr().out

    def test_suite(self, tmp_path):
        output_dir = tmp_path / "suite"
        assert main(["suite", "-o", str(output_dir), "-l", "30", "60", "-s", "1"]) == 0

        with open(output_dir / "manifest.json") as f:
            manifest = json.load(f)

        # 9 defaults + 12 presets, two lengths each
        assert len(manifest) == 42
        for entry in manifest:
            df = pd.read_csv(output_dir / entry["filename"])
            assert len(df) == entry["length"]
