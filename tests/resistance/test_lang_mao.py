from ship_resistance.core import Environment, Ship
from ship_resistance.core.units import knots_to_ms
from ship_resistance.resistance import HoltropMethod, LangMaoMethod
from ship_resistance.resistance.lang_mao import (
    METHOD_NAME,
    wave_motion_resistance,
    wave_reflection_resistance,
    wind_resistance,
)

import numpy as np
import pytest


HEAD_SEA = Environment(
    wave_height_m=3.0,
    wave_frequency_hz=0.1,
    wave_length_m=156.0,
    wave_azimuth_deg=180.0,
)


@pytest.fixture
def ship_in_waves(hull_factory):
    return Ship(
        hull=hull_factory(lengthwise_projection_area_m2=900.0),
        speed_ms=knots_to_ms(12.0),
        heading_deg=0.0,
        environment=HEAD_SEA,
        dynamic_resistance_strategy=LangMaoMethod(),
    )


def test_no_environment_gives_zero(reference_ship):
    method = LangMaoMethod()
    assert method.wave_resistance(reference_ship) == 0.0
    assert method.air_resistance(reference_ship) == 0.0
    assert method.total_resistance(reference_ship) == 0.0


def test_calm_environment_gives_zero(reference_ship):
    reference_ship.environment = Environment()
    assert LangMaoMethod().total_resistance(reference_ship) == 0.0


def test_wave_resistance_terms_positive(ship_in_waves):
    speed = ship_in_waves.speed_ms
    assert wave_reflection_resistance(ship_in_waves, speed) > 0
    assert wave_motion_resistance(ship_in_waves, speed) > 0


def test_wave_resistance_is_sum_of_terms(ship_in_waves):
    speed = ship_in_waves.speed_ms
    assert np.isclose(
        LangMaoMethod().wave_resistance(ship_in_waves),
        wave_reflection_resistance(ship_in_waves, speed)
        + wave_motion_resistance(ship_in_waves, speed),
    )


def test_wave_resistance_grows_with_wave_height(ship_in_waves):
    method = LangMaoMethod()
    low = method.wave_resistance(ship_in_waves)
    ship_in_waves.environment = Environment(
        wave_height_m=6.0,
        wave_frequency_hz=0.1,
        wave_length_m=156.0,
        wave_azimuth_deg=180.0,
    )
    assert np.isclose(method.wave_resistance(ship_in_waves), 4.0 * low)


def test_negative_speed_gives_zero_wave_resistance(ship_in_waves):
    assert LangMaoMethod().wave_resistance(ship_in_waves, -1.0) == 0.0


def test_head_wind_resists(ship_in_waves):
    ship_in_waves.environment = Environment(wind_north_ms=-10.0)
    expected = 0.5 * 1.225 * 1.0 * 900.0 * 10.0**2
    assert np.isclose(wind_resistance(ship_in_waves), expected)


def test_following_wind_pushes(ship_in_waves):
    ship_in_waves.environment = Environment(wind_north_ms=10.0)
    assert wind_resistance(ship_in_waves) < 0


def test_cross_wind_gives_zero(ship_in_waves):
    ship_in_waves.environment = Environment(wind_east_ms=10.0)
    assert np.isclose(wind_resistance(ship_in_waves), 0.0)


def test_calm_water_components_are_zero(ship_in_waves):
    components = LangMaoMethod().resistance_components(ship_in_waves)
    assert components.frictional_n == 0.0
    assert components.appendage_n == 0.0
    assert components.bulbous_bow_n == 0.0
    assert components.immersed_transom_n == 0.0
    assert components.model_ship_correlation_n == 0.0
    assert components.wave_n > 0


def test_propulsion_factors_are_neutral(ship_in_waves):
    method = LangMaoMethod()
    assert method.hull_efficiency(ship_in_waves) == 1.0
    assert method.propeller_rotation_efficiency(ship_in_waves) == 1.0
    assert method.thrust_deduction_fraction(ship_in_waves) == 0.0
    assert method.speed_of_advance(ship_in_waves) == ship_in_waves.speed_ms


def test_ship_adds_added_resistance(ship_in_waves):
    calm = HoltropMethod().total_resistance(ship_in_waves)
    added = LangMaoMethod().total_resistance(ship_in_waves)
    assert np.isclose(ship_in_waves.calculate_total_resistance(), calm + added)


def test_method_name():
    assert LangMaoMethod().method_name() == METHOD_NAME


def test_added_wave_resistance_follows_froude_scaling(ship_in_waves, hull_factory):
    # lengths x4, speed and period x2: forces scale with 4**3
    scaled = Ship(
        hull=hull_factory(
            waterline_length_m=4.0 * 147.7,
            beam_m=4.0 * 24.0,
            mean_draft_m=4.0 * 8.2,
            forward_draft_m=4.0 * 8.2,
            aft_draft_m=4.0 * 8.2,
            volumetric_displacement_m3=64.0 * 18872.0,
            bulbous_bow_transverse_area_m2=16.0 * 14.0,
            wetted_surface_m2=16.0 * 4400.0,
            propeller_diameter_m=4.0 * 6.5,
            propeller_pitch_m=4.0 * 5.2,
            lengthwise_projection_area_m2=16.0 * 900.0,
        ),
        speed_ms=2.0 * knots_to_ms(12.0),
        heading_deg=0.0,
        environment=Environment(
            wave_height_m=4.0 * 3.0,
            wave_frequency_hz=0.1 / 2.0,
            wave_length_m=4.0 * 156.0,
            wave_azimuth_deg=180.0,
        ),
    )
    speed = ship_in_waves.speed_ms
    assert np.isclose(
        wave_reflection_resistance(scaled, scaled.speed_ms),
        64.0 * wave_reflection_resistance(ship_in_waves, speed),
    )
    assert np.isclose(
        wave_motion_resistance(scaled, scaled.speed_ms),
        64.0 * wave_motion_resistance(ship_in_waves, speed),
    )

