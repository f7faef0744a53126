from ship_resistance.core import Appendage, Environment, Ship
from ship_resistance.core.units import knots_to_ms
from ship_resistance.resistance import HoltropMethod, LangMaoMethod

from dataclasses import replace
import logging

import numpy as np


def test_ship_defaults_to_holtrop(reference_hull):
    ship = Ship(hull=reference_hull)
    assert isinstance(ship.resistance_strategy, HoltropMethod)
    assert ship.speed_ms == 0.0
    assert np.isclose(ship.max_speed_knots, 25.0)


def test_ship_speed_knots(reference_hull):
    ship = Ship(hull=reference_hull)
    ship.speed_knots = 15.0
    assert np.isclose(ship.speed_ms, knots_to_ms(15.0))
    assert np.isclose(ship.speed_knots, 15.0)


def test_ship_froude_number(reference_ship):
    expected = knots_to_ms(15.0) / np.sqrt(9.80665 * 147.7)
    assert np.isclose(reference_ship.froude_number, expected)


def test_set_resistance_strategy_replaces(reference_ship):
    strategy = LangMaoMethod()
    reference_ship.set_resistance_strategy(strategy)
    assert reference_ship.resistance_strategy is strategy


def test_set_resistance_strategy_logs_validity(hull_factory, caplog):
    with caplog.at_level(logging.WARNING):
        Ship(hull=hull_factory(prismatic_coefficient=0.9, block_coefficient=0.88))
    assert "Prismatic coefficient" in caplog.text


def test_set_resistance_strategy_checks_current_speed(reference_hull, caplog):
    ship = Ship(hull=reference_hull)
    ship.speed_knots = 35.0
    with caplog.at_level(logging.WARNING):
        ship.set_resistance_strategy(HoltropMethod())
    assert "Froude number" in caplog.text


def test_set_resistance_strategy_silent_at_moderate_speed(reference_ship, caplog):
    with caplog.at_level(logging.WARNING):
        reference_ship.set_resistance_strategy(HoltropMethod())
    assert "Froude number" not in caplog.text


def test_add_and_remove_appendage(reference_ship):
    reference_ship.add_appendage(Appendage.RUDDER_BEHIND_SKEG, 30.0)
    assert reference_ship.hull.total_appendage_area_m2 == 30.0
    reference_ship.remove_appendage(Appendage.RUDDER_BEHIND_SKEG)
    assert reference_ship.hull.appendages == ()


def test_set_surface_roughness(reference_ship):
    reference_ship.set_surface_roughness(300.0)
    assert reference_ship.hull.surface_roughness_nm == 300.0
    assert not reference_ship.hull.use_default_roughness


def test_total_resistance_without_environment_is_calm(reference_ship):
    calm = reference_ship.resistance_strategy.total_resistance(reference_ship)
    reference_ship.dynamic_resistance_strategy = LangMaoMethod()
    assert np.isclose(reference_ship.calculate_total_resistance(), calm)


def test_total_resistance_adds_dynamic_part(reference_ship):
    calm = reference_ship.calculate_total_resistance()
    reference_ship.environment = Environment(wind_north_ms=-15.0)
    reference_ship.dynamic_resistance_strategy = LangMaoMethod()
    reference_ship.hull = replace(
        reference_ship.hull, lengthwise_projection_area_m2=800.0
    )
    assert reference_ship.calculate_total_resistance() > calm


def test_total_resistance_speed_override(reference_ship):
    at_current = reference_ship.calculate_total_resistance()
    at_override = reference_ship.calculate_total_resistance(knots_to_ms(10.0))
    assert at_override < at_current
    assert np.isclose(
        reference_ship.calculate_total_resistance(float("nan")), at_current
    )
