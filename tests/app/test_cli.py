"""Tests for the command line interface."""

import pandas as pd
import pytest
from click.testing import CliRunner

from ship_resistance.app import ShipConfig
from ship_resistance.app.cli import main


@pytest.fixture
def config_path(reference_hull, tmp_path):
    path = tmp_path / "ship.json"
    ShipConfig(hull=reference_hull, name="Cli", speed_knots=15.0).dump_json(path)
    return path


def test_single_speed_from_config(config_path):
    result = CliRunner().invoke(main, [str(config_path)])
    assert result.exit_code == 0, result.output
    assert "total_n" in result.output
    assert "15" in result.output


def test_speed_list_to_csv(config_path, tmp_path):
    output = tmp_path / "out" / "curve.csv"
    result = CliRunner().invoke(
        main,
        [
            str(config_path),
            "--speed-knots",
            "12",
            "--speed-knots",
            "14",
            "--output",
            str(output),
        ],
    )
    assert result.exit_code == 0, result.output
    assert f"Results saved to {output}" in result.output
    df = pd.read_csv(output, index_col="speed_knots")
    assert list(df.index) == [12.0, 14.0]
    assert "coefficient_of_resistance" in df.columns


def test_speed_range(config_path, tmp_path):
    output = tmp_path / "range.csv"
    result = CliRunner().invoke(
        main,
        [
            str(config_path),
            "--min-speed-knots",
            "10",
            "--max-speed-knots",
            "14",
            "--speed-step-knots",
            "2",
            "--output",
            str(output),
        ],
    )
    assert result.exit_code == 0, result.output
    df = pd.read_csv(output, index_col="speed_knots")
    assert list(df.index) == [10.0, 12.0, 14.0]


def test_bad_speed_range(config_path):
    result = CliRunner().invoke(
        main,
        [str(config_path), "--min-speed-knots", "14", "--max-speed-knots", "10"],
    )
    assert result.exit_code == 2


def test_dynamic_method_without_environment(config_path):
    result = CliRunner().invoke(main, [str(config_path), "--dynamic-method", "lang_mao"])
    assert result.exit_code == 0, result.output
    assert "added_n" not in result.output


def test_missing_config(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "missing.json")])
    assert result.exit_code != 0
