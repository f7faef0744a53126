from ship_resistance.core import ConfigurationError
from ship_resistance.core.units import knots_to_ms, rpm_to_rad_s
from ship_resistance.propulsion import (
    EmissionTier,
    Engine,
    EngineCurves,
    EngineLoad,
    EngineProperties,
)

import numpy as np
import pytest


LAYOUT = (
    EngineProperties(brake_power_kw=2_500.0, rpm=60.0, efficiency=0.40),
    EngineProperties(brake_power_kw=5_000.0, rpm=80.0, efficiency=0.45),
    EngineProperties(brake_power_kw=7_500.0, rpm=95.0, efficiency=0.47),
    EngineProperties(brake_power_kw=10_000.0, rpm=105.0, efficiency=0.46),
)
MAX_SPEED_MS = knots_to_ms(20.0)


def make_engine(**kwargs):
    return Engine(EngineCurves.from_layout(LAYOUT), max_speed_ms=MAX_SPEED_MS, **kwargs)


def test_layout_is_sorted():
    curves = EngineCurves.from_layout(reversed(LAYOUT))
    assert curves.layout == LAYOUT
    assert curves.min_power_kw == 2_500.0
    assert curves.max_power_kw == 10_000.0


def test_layout_needs_four_points():
    with pytest.raises(ConfigurationError):
        EngineCurves.from_layout(LAYOUT[:3])


def test_properties_at_power_interpolate():
    props = EngineCurves.from_layout(LAYOUT).properties_at_power(3_750.0)
    assert np.isclose(props.rpm, 70.0)
    assert np.isclose(props.efficiency, 0.425)


def test_curves_from_files(tmp_path):
    rpm_path = tmp_path / "rpm.txt"
    eff_path = tmp_path / "eff.txt"
    rpm_path.write_text("1000 50\n4000 100\n")
    eff_path.write_text("1000 0.4\n4000 0.5\n")
    curves = EngineCurves.from_files(rpm_path, eff_path)
    assert [p.brake_power_kw for p in curves.layout] == [1000.0, 2000.0, 3000.0, 4000.0]
    economic = curves.properties_at_load(EngineLoad.ECONOMIC)
    assert np.isclose(economic.rpm, 50.0 + 1000.0 / 3000.0 * 50.0)


def test_engine_needs_tier_ii():
    with pytest.raises(ConfigurationError):
        Engine({EmissionTier.TIER_III: EngineCurves.from_layout(LAYOUT)}, MAX_SPEED_MS)


def test_engine_starts_at_mcr():
    engine = make_engine()
    assert engine.load == EngineLoad.MCR
    assert engine.target == LAYOUT[-1]
    assert engine.brake_power_kw == 0.0


def test_throttle_coefficient():
    engine = make_engine()
    ratio = 0.5
    expected = 1.0 / (1.0 + np.exp(-7.82605 * (ratio - 0.42606)))
    assert np.isclose(engine.hyperbolic_throttle_coef(ratio * MAX_SPEED_MS), expected)


def test_throttle_respects_max_power_ratio():
    engine = make_engine(max_power_ratio=0.5)
    assert engine.hyperbolic_throttle_coef(MAX_SPEED_MS) == 0.5


def test_update_sets_brake_power():
    engine = make_engine()
    engine.update(0.75 * MAX_SPEED_MS)
    raw = engine.hyperbolic_throttle_coef(0.75 * MAX_SPEED_MS) * 10_000.0
    props = engine.curves.properties_at_power(raw)
    assert np.isclose(engine.raw_power_kw, raw)
    assert np.isclose(engine.brake_power_kw, raw * props.efficiency)
    assert np.isclose(engine.rpm, props.rpm)


def test_update_power_grows_with_speed():
    engine = make_engine()
    engine.update(knots_to_ms(8.0))
    slow = engine.brake_power_kw
    engine.update(knots_to_ms(16.0))
    assert engine.brake_power_kw > slow
    assert engine.previous_brake_power_kw == slow


def test_update_clamps_to_table_range():
    engine = make_engine()
    engine.update(0.0)
    assert engine.raw_power_kw == 2_500.0
    assert np.isclose(engine.brake_power_kw, 2_500.0 * 0.40)


def test_brake_torque():
    engine = make_engine()
    engine.update(MAX_SPEED_MS)
    expected = engine.brake_power_kw * 1_000.0 / rpm_to_rad_s(engine.rpm)
    assert np.isclose(engine.brake_torque_nm, expected)


def test_turned_off_engine_delivers_nothing():
    engine = make_engine()
    engine.update(MAX_SPEED_MS)
    engine.turn_off()
    assert engine.brake_power_kw == 0.0
    engine.update(MAX_SPEED_MS)
    assert engine.brake_power_kw == 0.0
    assert engine.brake_torque_nm == 0.0
    engine.turn_on()
    engine.update(MAX_SPEED_MS)
    assert engine.brake_power_kw > 0


def test_load_steps():
    engine = make_engine()
    assert not engine.request_higher_power()
    assert engine.request_lower_power()
    assert engine.load == EngineLoad.REDUCED_MCR
    engine.set_load(EngineLoad.LOW)
    assert not engine.request_lower_power()
    assert engine.request_higher_power()
    assert engine.load == EngineLoad.ECONOMIC


def test_lower_load_lowers_power():
    engine = make_engine()
    engine.update(MAX_SPEED_MS)
    at_mcr = engine.brake_power_kw
    engine.set_load(EngineLoad.ECONOMIC)
    engine.update(MAX_SPEED_MS)
    assert engine.brake_power_kw < at_mcr


def test_set_tier():
    tier_iii = EngineCurves.from_layout(
        [
            EngineProperties(p.brake_power_kw, p.rpm, p.efficiency - 0.02)
            for p in LAYOUT
        ]
    )
    engine = Engine(
        {
            EmissionTier.TIER_II: EngineCurves.from_layout(LAYOUT),
            EmissionTier.TIER_III: tier_iii,
        },
        MAX_SPEED_MS,
    )
    assert not engine.set_tier(EmissionTier.TIER_II)
    assert engine.set_tier(EmissionTier.TIER_III)
    assert engine.curves is tier_iii


def test_set_tier_without_curves_raises():
    with pytest.raises(ConfigurationError):
        make_engine().set_tier(EmissionTier.TIER_III)


def test_rpm_range():
    assert make_engine().rpm_range == (60.0, 105.0)
