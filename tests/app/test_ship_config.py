"""Tests for ship configuration files."""

import json
import logging

import pytest

from ship_resistance.app import (
    ShipConfig,
    load_ship,
    resistance_method_from_name,
    ship_from_dict,
)
from ship_resistance.core import ConfigurationError, Environment
from ship_resistance.core.units import knots_to_ms
from ship_resistance.resistance import HoltropMethod, LangMaoMethod


HEAD_SEA = Environment(
    wave_height_m=2.0,
    wave_frequency_hz=0.12,
    wave_length_m=110.0,
    wave_azimuth_deg=180.0,
)


class TestResistanceMethodFromName:
    """Tests for looking up strategies by name."""

    def test_known_names(self):
        assert isinstance(resistance_method_from_name("holtrop"), HoltropMethod)
        assert isinstance(resistance_method_from_name(" Lang_Mao "), LangMaoMethod)

    def test_none_passes_through(self):
        assert resistance_method_from_name(None) is None

    def test_unknown_name_raises(self):
        with pytest.raises(ConfigurationError, match="Unknown resistance method"):
            resistance_method_from_name("guldhammer")


class TestShipConfig:
    """Tests for ShipConfig construction and serialisation."""

    def test_build_ship(self, reference_hull):
        config = ShipConfig(hull=reference_hull, name="Test", speed_knots=12.0)
        ship = config.build_ship()
        assert ship.name == "Test"
        assert ship.hull is reference_hull
        assert ship.speed_ms == knots_to_ms(12.0)
        assert isinstance(ship.resistance_strategy, HoltropMethod)
        assert ship.dynamic_resistance_strategy is None

    def test_build_ship_with_dynamic_method(self, reference_hull):
        config = ShipConfig(
            hull=reference_hull,
            environment=HEAD_SEA,
            dynamic_resistance_method="lang_mao",
        )
        ship = config.build_ship()
        assert ship.environment == HEAD_SEA
        assert isinstance(ship.dynamic_resistance_strategy, LangMaoMethod)

    def test_dict_roundtrip(self, reference_hull):
        config = ShipConfig(
            hull=reference_hull,
            name="Roundtrip",
            speed_knots=14.0,
            environment=HEAD_SEA,
            dynamic_resistance_method="lang_mao",
        )
        assert ShipConfig.from_dict(config.to_dict()) == config

    def test_json_roundtrip(self, reference_hull, tmp_path):
        config = ShipConfig(hull=reference_hull, name="Json", speed_knots=16.0)
        path = tmp_path / "configs" / "ship.json"
        config.dump_json(path)
        assert path.exists()
        assert json.loads(path.read_text())["hull"]["beam_m"] == 24.0
        assert ShipConfig.load_json(path) == config

    def test_load_ship(self, reference_hull, tmp_path):
        path = tmp_path / "ship.json"
        ShipConfig(hull=reference_hull, speed_knots=10.0).dump_json(path)
        ship = load_ship(path)
        assert ship.speed_ms == knots_to_ms(10.0)

    def test_minimal_dict(self):
        ship = ship_from_dict(
            {
                "hull": {
                    "waterline_length_m": 100.0,
                    "beam_m": 15.0,
                    "mean_draft_m": 5.0,
                    "block_coefficient": 0.6,
                    "midship_section_coefficient": 0.98,
                }
            }
        )
        assert ship.hull.volumetric_displacement_m3 == pytest.approx(4500.0)
        assert ship.speed_ms == 0.0

    def test_missing_hull_raises(self):
        with pytest.raises(ConfigurationError, match="hull"):
            ShipConfig.from_dict({"name": "No hull"})

    def test_unknown_keys_raise(self, reference_hull):
        data = ShipConfig(hull=reference_hull).to_dict()
        data["draught"] = 3.0
        with pytest.raises(ConfigurationError, match="draught"):
            ShipConfig.from_dict(data)

    def test_unknown_environment_keys_raise(self, reference_hull):
        data = ShipConfig(hull=reference_hull).to_dict()
        data["environment"] = {"wave_period_s": 8.0}
        with pytest.raises(ConfigurationError, match="environment"):
            ShipConfig.from_dict(data)

    def test_unknown_method_raises_on_build(self, reference_hull):
        data = ShipConfig(hull=reference_hull).to_dict()
        data["resistance_method"] = "unknown"
        with pytest.raises(ConfigurationError):
            ship_from_dict(data)

    def test_dynamic_method_without_environment_warns(self, reference_hull, caplog):
        data = ShipConfig(hull=reference_hull).to_dict()
        data["dynamic_resistance_method"] = "lang_mao"
        with caplog.at_level(logging.WARNING):
            ShipConfig.from_dict(data)
        assert "no environment" in caplog.text
