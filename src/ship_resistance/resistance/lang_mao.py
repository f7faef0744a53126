"""Added resistance in waves and wind after Lang and Mao.

    Lang, X., Mao, W.: A semi-empirical model for ship speed loss prediction at
    head sea and its validation by full-scale measurements, Ocean Engineering,
    209, 107494, 2020. https://doi.org/10.1016/j.oceaneng.2020.107494

The method only models the resistance added by the sea state. All calm water
components are zero and the propulsion factors are neutral, so it is meant to be
used as the dynamic strategy of a ship next to a calm water method.
"""

from __future__ import annotations

import math

from ..core.hydrology import froude_number, water_density
from .strategy import ResistanceStrategy, resolve_speed

METHOD_NAME = "Lang and Mao Added Resistance Method"

# longitudinal radius of gyration in units of Lpp (ITTC 7.5-02-07-02.1, 2021)
K_YY = 0.25

# head wind drag coefficient of the lateral projection
WIND_DRAG_COEFFICIENT = 1.0


def _froude(ship, speed_ms):
    return froude_number(
        speed_ms,
        ship.hull.waterline_length_m,
        g=ship.physics.gravity_acceleration_ms2,
    )


def _wave_amplitude(environment) -> float:
    return environment.wave_height_m / 1.5


def wave_reflection_resistance(ship, speed_ms: float) -> float:
    """Resistance in N from waves reflected at the bow."""
    env = ship.environment
    if env is None or not env.has_waves:
        return 0.0
    hull = ship.hull
    g = ship.physics.gravity_acceleration_ms2
    rho = water_density(env.salinity, env.temperature_c)
    encounter = math.radians(env.encounter_angle_deg(ship.heading_deg))

    bluntness = 2.25 * math.sin(math.radians(hull.half_entrance_angle_deg)) ** 2

    # wave number 2 pi / lambda, corrected for the encounter frequency
    k = 2.0 * math.pi / env.wave_length_m
    omega_ratio = speed_ms * env.wave_angular_frequency_rad_s / g
    k_e = k * (1.0 + omega_ratio * math.cos(encounter)) ** 2
    draft_coefficient = 1.0 - math.exp(-2.0 * k_e * hull.mean_draft_m)

    fn = _froude(ship, speed_ms)
    c_u = max(-310.0 * bluntness + 68.0, 10.0)
    advance_coefficient = 1.0 + c_u * fn

    return (
        0.5
        * rho
        * g
        * _wave_amplitude(env) ** 2
        * hull.beam_m
        * bluntness
        * draft_coefficient
        * advance_coefficient
        * (0.19 / hull.block_coefficient)
        * (env.wave_length_m / hull.length_between_perpendiculars_m) ** (fn - 1.11)
    )


def wave_motion_resistance(ship, speed_ms: float) -> float:
    """Resistance in N from heave and pitch motions in waves."""
    env = ship.environment
    if env is None or not env.has_waves:
        return 0.0
    hull = ship.hull
    g = ship.physics.gravity_acceleration_ms2
    cb = hull.block_coefficient
    lpp = hull.length_between_perpendiculars_m
    fn = _froude(ship, speed_ms)
    gyration_class = math.ceil(K_YY / 0.25)

    a_1 = 60.3 * cb**1.34 * (1.0 / cb) ** (1.0 + fn)

    c_1 = 0.4567 * cb / K_YY + 1.689
    omega_delta = (
        math.sqrt(lpp / g)
        * K_YY ** (1.0 / c_1)
        * max(fn, 0.05) ** 0.143
        * env.wave_angular_frequency_rad_s
        / (1.09 + gyration_class * 0.08)
    )

    if fn < 0.12:
        a_2 = 0.0072 + 0.24 * fn
    else:
        a_2 = fn ** (-1.05 * cb + 2.3) * math.exp(
            (-2.0 - gyration_class - math.floor(K_YY / 0.25)) * fn
        )

    if omega_delta < 1.0 and cb < 0.75:
        b_1 = (19.77 * cb / K_YY - 36.39) / gyration_class
        d_1 = 14.0
    elif omega_delta < 1.0:
        b_1 = 11.0 / gyration_class
        d_1 = 566.0 * (lpp / hull.beam_m) ** -2.66 * 2.0
    elif cb < 0.75:
        b_1 = -12.5 / gyration_class
        d_1 = -566.0 * (lpp / hull.beam_m) ** -2.66 * 6.0
    else:
        b_1 = -5.5 / gyration_class
        d_1 = -566.0 * (lpp / hull.beam_m) ** -2.66 * 6.0

    rho = water_density(env.salinity, env.temperature_c)
    return (
        4.0
        * rho
        * g
        * _wave_amplitude(env) ** 2
        * (hull.beam_m**2 / lpp)
        * omega_delta**b_1
        * math.exp((b_1 / d_1) * (1.0 - omega_delta**d_1))
        * a_1
        * a_2
    )


def wind_resistance(ship) -> float:
    """Resistance in N from the head wind component on the lateral projection.

    Positive for head wind, negative for following wind.
    """
    env = ship.environment
    if env is None:
        return 0.0
    head_wind_ms = -env.wind_speed_along_heading_ms(ship.heading_deg)
    return (
        0.5
        * ship.physics.air_density_kgm3
        * WIND_DRAG_COEFFICIENT
        * ship.hull.lengthwise_projection_area_m2
        * head_wind_ms
        * abs(head_wind_ms)
    )


class LangMaoMethod(ResistanceStrategy):
    """Added resistance in waves (reflection and motion) and wind."""

    def frictional_resistance(self, ship, speed_ms=None):
        return 0.0

    def appendage_resistance(self, ship, speed_ms=None):
        return 0.0

    def wave_resistance(self, ship, speed_ms=None):
        speed_ms = resolve_speed(ship, speed_ms)
        if speed_ms < 0:
            return 0.0
        return wave_reflection_resistance(ship, speed_ms) + wave_motion_resistance(
            ship, speed_ms
        )

    def bulbous_bow_resistance(self, ship, speed_ms=None):
        return 0.0

    def immersed_transom_pressure_resistance(self, ship, speed_ms=None):
        return 0.0

    def model_ship_correlation_resistance(self, ship, speed_ms=None):
        return 0.0

    def air_resistance(self, ship, speed_ms=None):
        return wind_resistance(ship)

    def speed_of_advance(self, ship, speed_ms=None):
        return resolve_speed(ship, speed_ms)

    def hull_efficiency(self, ship, speed_ms=None):
        return 1.0

    def propeller_rotation_efficiency(self, ship):
        return 1.0

    def thrust_deduction_fraction(self, ship):
        return 0.0

    def method_name(self):
        return METHOD_NAME
