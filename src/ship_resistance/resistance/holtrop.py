"""Resistance and propulsion prediction according to Holtrop and Mennen.

Every coefficient of the method is a module-level function of the (immutable,
hashable) hull and, where needed, of the Froude number or speed. Results are
memoised with ``functools.lru_cache`` keyed on these arguments, so evaluating
many ships or speeds with one ``HoltropMethod`` instance is safe.

.. rubric:: References
.. [1] J. Holtrop and G. G. J. Mennen, An Approximate Power Prediction
       Method, International Shipbuilding Progress, Vol. 29, 1982, pp. 166 ff
.. [2] J. Holtrop, A Statistical Re-analysis of Resistance and Propulsion
       Data, International Shipbuilding Progress, Vol. 31, 1984, pp. 272 ff
"""

from __future__ import annotations

from functools import lru_cache
import logging
import math

from ..core.config import MAX_CACHE_SIZE, PHYSICS_DEFAULT, Physics
from ..core.errors import ConfigurationError
from ..core.hull import (
    APPENDAGE_FORM_FACTORS,
    ScrewVesselType,
    ShipHull,
    holtrop_validity_warnings,
)
from ..core.hydrology import froude_number, reynolds_number
from ..core.units import nm_to_m
from .strategy import ResistanceStrategy, resolve_speed

METHOD_NAME = "Holtrop and Mennen Resistance Prediction Method"

# exponent of the Froude number in the wave resistance, [2] p. 273
D = -0.9

# Froude numbers bounding the blend of the two wave resistance formulas
FROUDE_LOW_SPEED_LIMIT = 0.4
FROUDE_HIGH_SPEED_LIMIT = 0.55


def _length(hull: ShipHull) -> float:
    return hull.waterline_length_m


def _dynamic_pressure(speed_ms: float, physics: Physics) -> float:
    return 0.5 * physics.sea_water_density_kgm3 * speed_ms**2


# Hull form coefficients


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_7(hull: ShipHull) -> float:
    r"""
    According to [1], p. 167:

    .. math::

        c_7 = 0.229577 (B/L)^{0.33333}  \text{ when } B/L < 0.11
        c_7 = B/L                        \text{ when } 0.11 \le B/L < 0.25
        c_7 = 0.5 - 0.0625 L/B           \text{ when } B/L \ge 0.25
    """
    b_l = hull.beam_m / _length(hull)
    if b_l < 0.11:
        return 0.229577 * b_l**0.33333
    elif b_l < 0.25:
        return b_l
    return 0.5 - 0.0625 * _length(hull) / hull.beam_m


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_1(hull: ShipHull) -> float:
    r"""
    According to [1], p. 167:

    .. math::

        c_1 = 2223105 c_7^{3.78613} (T/B)^{1.07961} (90 - i_E)^{-1.37565}
    """
    return (
        2223105.0
        * c_7(hull) ** 3.78613
        * (hull.mean_draft_m / hull.beam_m) ** 1.07961
        * (90.0 - hull.half_entrance_angle_deg) ** -1.37565
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_3(hull: ShipHull) -> float:
    r"""
    Influence of the bulbous bow on the wave resistance, [1] p. 167:

    .. math::

        c_3 = \frac{0.56 A_{BT}^{1.5}}{B T (0.31 \sqrt{A_{BT}} + T_F - h_B)}
    """
    a_bt = hull.bulbous_bow_transverse_area_m2
    return (
        0.56
        * a_bt**1.5
        / (
            hull.beam_m
            * hull.mean_draft_m
            * (
                0.31 * math.sqrt(a_bt)
                + hull.forward_draft_m
                - hull.bulbous_bow_center_height_m
            )
        )
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_2(hull: ShipHull) -> float:
    """Reduction of the wave resistance due to the bulbous bow: exp(-1.89 sqrt(c_3))."""
    return math.exp(-1.89 * math.sqrt(c_3(hull)))


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_4(hull: ShipHull) -> float:
    """T_F / L, capped at 0.04."""
    return min(hull.forward_draft_m / _length(hull), 0.04)


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_5(hull: ShipHull) -> float:
    """Influence of the immersed transom on the wave resistance."""
    return 1.0 - 0.8 * hull.immersed_transom_area_m2 / (
        hull.beam_m * hull.mean_draft_m * hull.midship_section_coefficient
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_14(hull: ShipHull) -> float:
    return 1.0 + 0.011 * int(hull.stern_shape)


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_15(hull: ShipHull) -> float:
    r"""
    According to [1], p. 167:

    .. math::

        c_{15} = -1.69385                                     \text{ when } L^3/\nabla < 512
        c_{15} = -1.69385 + (L/\nabla^{1/3} - 8) / 2.36       \text{ when } 512 \le L^3/\nabla < 1726.91
        c_{15} = 0                                            \text{ when } L^3/\nabla \ge 1726.91
    """
    volume = hull.volumetric_displacement_m3
    slenderness = _length(hull) ** 3 / volume
    if slenderness < 512.0:
        return -1.69385
    elif slenderness < 1726.91:
        return -1.69385 + (_length(hull) / volume ** (1.0 / 3.0) - 8.0) / 2.36
    return 0.0


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_16(hull: ShipHull) -> float:
    r"""
    According to [1], p. 167:

    .. math::

        c_{16} = 8.07981 C_P - 13.8673 C_P^2 + 6.984388 C_P^3 \text{ when } C_P < 0.8
        c_{16} = 1.73014 - 0.7067 C_P                         \text{ when } C_P \ge 0.8
    """
    cp = hull.prismatic_coefficient
    if cp < 0.8:
        return 8.07981 * cp - 13.8673 * cp**2 + 6.984388 * cp**3
    return 1.73014 - 0.7067 * cp


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_17(hull: ShipHull) -> float:
    r"""
    According to [2], p. 273:

    .. math::

        c_{17} = 6919.3 C_M^{-1.3346} (\nabla/L^3)^{2.00977} (L/B - 2)^{1.40692}
    """
    L = _length(hull)
    return (
        6919.3
        * hull.midship_section_coefficient**-1.3346
        * (hull.volumetric_displacement_m3 / L**3) ** 2.00977
        * (L / hull.beam_m - 2.0) ** 1.40692
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def lambda_(hull: ShipHull) -> float:
    """1.446 C_P - 0.03 L/B below L/B = 12, 1.446 C_P - 0.36 above."""
    l_b = _length(hull) / hull.beam_m
    if l_b < 12.0:
        return 1.446 * hull.prismatic_coefficient - 0.03 * l_b
    return 1.446 * hull.prismatic_coefficient - 0.36


@lru_cache(maxsize=MAX_CACHE_SIZE)
def m_1(hull: ShipHull) -> float:
    r"""
    According to [1], p. 167:

    .. math::

        m_1 = 0.0140407 L/T - 1.75254 \nabla^{1/3}/L - 4.79323 B/L - c_{16}
    """
    L = _length(hull)
    return (
        0.0140407 * L / hull.mean_draft_m
        - 1.75254 * hull.volumetric_displacement_m3 ** (1.0 / 3.0) / L
        - 4.79323 * hull.beam_m / L
        - c_16(hull)
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def m_3(hull: ShipHull) -> float:
    """-7.2035 (B/L)^0.326869 (T/B)^0.605375, [2] p. 273."""
    return (
        -7.2035
        * (hull.beam_m / _length(hull)) ** 0.326869
        * (hull.mean_draft_m / hull.beam_m) ** 0.605375
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def m_4(hull: ShipHull, froude: float) -> float:
    """c_15 0.4 exp(-0.034 Fn^-3.29); vanishes for Fn -> 0."""
    if froude <= 0:
        return 0.0
    return c_15(hull) * 0.4 * math.exp(-0.034 * froude**-3.29)


# Wave resistance


@lru_cache(maxsize=MAX_CACHE_SIZE)
def wave_resistance_low_speed(
    hull: ShipHull, froude: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    r"""
    Wave resistance for Fn <= 0.4, [2] p. 273:

    .. math::

        R_{Wa} = c_1 c_2 c_5 \nabla \rho g
                 \exp\left(m_1 F_n^d + m_4 \cos(\lambda F_n^{-2})\right)
    """
    if froude <= 0:
        return 0.0
    return (
        c_1(hull)
        * c_2(hull)
        * c_5(hull)
        * hull.volumetric_displacement_m3
        * physics.sea_water_density_kgm3
        * physics.gravity_acceleration_ms2
        * math.exp(
            m_1(hull) * froude**D
            + m_4(hull, froude) * math.cos(lambda_(hull) * froude**-2)
        )
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def wave_resistance_high_speed(
    hull: ShipHull, froude: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    r"""
    Wave resistance for Fn > 0.55, [2] p. 273:

    .. math::

        R_{Wb} = c_{17} c_2 c_5 \nabla \rho g
                 \exp\left(m_3 F_n^d + m_4 \cos(\lambda F_n^{-2})\right)
    """
    if froude <= 0:
        return 0.0
    return (
        c_17(hull)
        * c_2(hull)
        * c_5(hull)
        * hull.volumetric_displacement_m3
        * physics.sea_water_density_kgm3
        * physics.gravity_acceleration_ms2
        * math.exp(
            m_3(hull) * froude**D
            + m_4(hull, froude) * math.cos(lambda_(hull) * froude**-2)
        )
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def wave_resistance_at_froude(
    hull: ShipHull, froude: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """Wave resistance in N, blending both formulas for 0.4 < Fn < 0.55.

    In the transitional range the result interpolates linearly between R_Wa at
    Fn = 0.4 and R_Wb at Fn = 0.55 with weight (20 Fn - 8) / 3.
    """
    if froude <= FROUDE_LOW_SPEED_LIMIT:
        return wave_resistance_low_speed(hull, froude, physics)
    if froude >= FROUDE_HIGH_SPEED_LIMIT:
        return wave_resistance_high_speed(hull, froude, physics)
    r_wa = wave_resistance_low_speed(hull, FROUDE_LOW_SPEED_LIMIT, physics)
    r_wb = wave_resistance_high_speed(hull, FROUDE_HIGH_SPEED_LIMIT, physics)
    return r_wa + (20.0 * froude - 8.0) / 3.0 * (r_wb - r_wa)


# Friction and form


@lru_cache(maxsize=MAX_CACHE_SIZE)
def frictional_coefficient(hull: ShipHull, speed_ms: float) -> float:
    """ITTC-1957 friction line 0.075 / (log10(Rn) - 2)^2."""
    rn = reynolds_number(speed_ms, _length(hull))
    if rn <= 0:
        return 0.0
    return 0.075 / (math.log10(rn) - 2.0) ** 2


@lru_cache(maxsize=MAX_CACHE_SIZE)
def form_factor(hull: ShipHull) -> float:
    r"""
    Form factor of the bare hull, 1 + k_1, [1] p. 167:

    .. math::

        1 + k_1 = 0.93 + 0.487118 c_{14} (B/L)^{1.06806} (T/L)^{0.46106}
                  (L/L_R)^{0.121563} (L^3/\nabla)^{0.36486} (1 - C_P)^{-0.604247}
    """
    L = _length(hull)
    return 0.93 + 0.487118 * c_14(hull) * (
        (hull.beam_m / L) ** 1.06806
        * (hull.mean_draft_m / L) ** 0.46106
        * (L / hull.run_length_m) ** 0.121563
        * (L**3 / hull.volumetric_displacement_m3) ** 0.36486
        * (1.0 - hull.prismatic_coefficient) ** -0.604247
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def equivalent_appendage_form_factor(hull: ShipHull) -> float:
    """Area-weighted mean of 1 + k_2 over all appendages, 0 without appendages."""
    total_area = hull.total_appendage_area_m2
    if total_area <= 0:
        return 0.0
    weighted = sum(
        (1.0 + APPENDAGE_FORM_FACTORS[kind]) * area for kind, area in hull.appendages
    )
    return weighted / total_area


# Correlation


@lru_cache(maxsize=MAX_CACHE_SIZE)
def correlation_allowance(hull: ShipHull) -> float:
    r"""
    Model-ship correlation allowance, [1] p. 168:

    .. math::

        C_A = 0.006 (L + 100)^{-0.16} - 0.00205
              + 0.003 \sqrt{L / 7.5} C_B^4 c_2 (0.04 - c_4)
    """
    L = _length(hull)
    return (
        0.006 * (L + 100.0) ** -0.16
        - 0.00205
        + 0.003
        * math.sqrt(L / 7.5)
        * hull.block_coefficient**4
        * c_2(hull)
        * (0.04 - c_4(hull))
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def roughness_allowance(hull: ShipHull) -> float:
    """Increase of C_A for a hull rougher than the reference, [2] p. 273.

    Zero for hulls flagged with the reference roughness.
    """
    if hull.use_default_roughness:
        return 0.0
    k_s = nm_to_m(hull.surface_roughness_nm)
    return (0.105 * k_s ** (1.0 / 3.0) - 0.005579) / _length(hull) ** (1.0 / 3.0)


# Bulbous bow


@lru_cache(maxsize=MAX_CACHE_SIZE)
def trough_depression(hull: ShipHull, froude: float) -> float:
    """h_F, wave trough at the bow, at least -0.01 L, [2] p. 273."""
    h_f = (
        hull.prismatic_coefficient
        * hull.midship_section_coefficient
        * (hull.beam_m * hull.mean_draft_m / _length(hull))
        * (136.0 - 316.3 * froude)
        * froude**3
    )
    return max(h_f, -0.01 * _length(hull))


@lru_cache(maxsize=MAX_CACHE_SIZE)
def crest_elevation(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """h_W, wave crest at the bow, at most 0.01 L, [2] p. 273."""
    h_w = (
        hull.half_entrance_angle_deg
        * speed_ms**2
        / (400.0 * physics.gravity_acceleration_ms2)
    )
    return min(h_w, 0.01 * _length(hull))


@lru_cache(maxsize=MAX_CACHE_SIZE)
def bulb_emergence(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """P_B = 0.56 sqrt(A_BT) / (T_F - 1.5 h_B + h_F)."""
    fn = froude_number(speed_ms, _length(hull), g=physics.gravity_acceleration_ms2)
    return (
        0.56
        * math.sqrt(hull.bulbous_bow_transverse_area_m2)
        / (
            hull.forward_draft_m
            - 1.5 * hull.bulbous_bow_center_height_m
            + trough_depression(hull, fn)
        )
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def bulb_immersion(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """Effective immersion T_F - h_B - 0.25 sqrt(A_BT) + h_F + h_W of the bulb in m."""
    fn = froude_number(speed_ms, _length(hull), g=physics.gravity_acceleration_ms2)
    return (
        hull.forward_draft_m
        - hull.bulbous_bow_center_height_m
        - 0.25 * math.sqrt(hull.bulbous_bow_transverse_area_m2)
        + trough_depression(hull, fn)
        + crest_elevation(hull, speed_ms, physics)
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def immersion_froude_number(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    r"""
    Froude number based on the immersion of the bulb, [2] p. 273:

    .. math::

        F_{ni} = \frac{V}{\sqrt{g (T_F - h_B - 0.25 \sqrt{A_{BT}} + h_F + h_W)}}

    Zero for a bulb that is not immersed.
    """
    immersion = bulb_immersion(hull, speed_ms, physics)
    if immersion <= 0:
        return 0.0
    return speed_ms / math.sqrt(physics.gravity_acceleration_ms2 * immersion)


# Transom


@lru_cache(maxsize=MAX_CACHE_SIZE)
def transom_froude_number(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """Froude number based on the transom immersion, V / sqrt(2 g A_T / (B + B C_WP))."""
    a_t = hull.immersed_transom_area_m2
    if a_t <= 0:
        return math.inf
    return speed_ms / math.sqrt(
        2.0
        * physics.gravity_acceleration_ms2
        * a_t
        / (hull.beam_m + hull.beam_m * hull.waterplane_area_coefficient)
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_6(hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT) -> float:
    fn_t = transom_froude_number(hull, speed_ms, physics)
    if fn_t < 5.0:
        return 0.2 * (1.0 - 0.2 * fn_t)
    return 0.0


# Propulsion factors


def _propeller_diameter(hull: ShipHull) -> float:
    if hull.propeller_diameter_m is None or hull.propeller_diameter_m <= 0:
        raise ConfigurationError(
            "Propeller diameter is needed for wake fraction and thrust deduction."
        )
    return hull.propeller_diameter_m


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_8(hull: ShipHull) -> float:
    r"""
    According to [2], p. 273:

    .. math::

        c_8 = \frac{B S}{L D T_A}                             \text{ when } B/T_A \le 5
        c_8 = \frac{S (7 B/T_A - 25)}{L D (B/T_A - 3)}       \text{ when } B/T_A > 5
    """
    L = _length(hull)
    diameter = _propeller_diameter(hull)
    b_ta = hull.beam_m / hull.aft_draft_m
    if b_ta <= 5.0:
        return hull.beam_m * hull.wetted_surface_m2 / (L * diameter * hull.aft_draft_m)
    return hull.wetted_surface_m2 * (7.0 * b_ta - 25.0) / (L * diameter * (b_ta - 3.0))


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_9(hull: ShipHull) -> float:
    C_8 = c_8(hull)
    if C_8 <= 28.0:
        return C_8
    return 32.0 - 16.0 / (C_8 - 24.0)


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_11(hull: ShipHull) -> float:
    ta_d = hull.aft_draft_m / _propeller_diameter(hull)
    if ta_d <= 2.0:
        return ta_d
    return 0.0833333 * ta_d**3 + 1.33333


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_19(hull: ShipHull) -> float:
    r"""
    According to [2], p. 273:

    .. math::

        c_{19} = \frac{0.12997}{0.95 - C_B} - \frac{0.11056}{0.95 - C_P}
                 \text{ when } C_P \le 0.7
        c_{19} = \frac{0.18567}{1.3571 - C_M} - 0.71276 + 0.38648 C_P
                 \text{ when } C_P > 0.7
    """
    cp = hull.prismatic_coefficient
    if cp <= 0.7:
        return 0.12997 / (0.95 - hull.block_coefficient) - 0.11056 / (0.95 - cp)
    return 0.18567 / (1.3571 - hull.midship_section_coefficient) - 0.71276 + 0.38648 * cp


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_20(hull: ShipHull) -> float:
    return 1.0 + 0.015 * int(hull.stern_shape)


@lru_cache(maxsize=MAX_CACHE_SIZE)
def c_p1(hull: ShipHull) -> float:
    return (
        1.45 * hull.prismatic_coefficient
        - 0.315
        - 0.0225 * hull.longitudinal_buoyancy_center
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def viscous_resistance_coefficient(hull: ShipHull, speed_ms: float) -> float:
    """C_V = (1 + k_1) C_F + C_A."""
    return form_factor(hull) * frictional_coefficient(hull, speed_ms) + (
        correlation_allowance(hull)
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def wake_fraction(hull: ShipHull, speed_ms: float) -> float:
    r"""
    Effective wake fraction, [2] p. 273.

    Single screw:

    .. math::

        w = c_9 c_{20} C_V \frac{L}{T_A}
            \left(0.050776 + 0.93405 c_{11} \frac{C_V}{1 - C_{P1}}\right)
            + 0.27915 c_{20} \sqrt{\frac{B}{L (1 - C_{P1})}} + c_{19} c_{20}

    Twin screw:

    .. math::

        w = 0.3095 C_B + 10 C_V C_B - 0.23 \frac{D}{\sqrt{B T}}
    """
    c_v = viscous_resistance_coefficient(hull, speed_ms)
    if hull.screw_vessel_type == ScrewVesselType.SINGLE:
        L = _length(hull)
        C_P1 = c_p1(hull)
        C_20 = c_20(hull)
        return (
            c_9(hull)
            * C_20
            * c_v
            * (L / hull.aft_draft_m)
            * (0.050776 + 0.93405 * c_11(hull) * c_v / (1.0 - C_P1))
            + 0.27915 * C_20 * math.sqrt(hull.beam_m / (L * (1.0 - C_P1)))
            + c_19(hull) * C_20
        )
    elif hull.screw_vessel_type == ScrewVesselType.TWIN:
        return (
            0.3095 * hull.block_coefficient
            + 10.0 * c_v * hull.block_coefficient
            - 0.23
            * _propeller_diameter(hull)
            / math.sqrt(hull.beam_m * hull.mean_draft_m)
        )
    raise ConfigurationError(
        f"Unknown screw vessel type {hull.screw_vessel_type!r}."
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def thrust_deduction(hull: ShipHull) -> float:
    r"""
    Thrust deduction fraction, [2] p. 273.

    Single screw:

    .. math::

        t = \frac{0.25014 (B/L)^{0.28956} (\sqrt{B T}/D)^{0.2624}}
                 {(1 - C_P + 0.0225 lcb)^{0.01762}} + 0.0015 C_{stern}

    Twin screw:

    .. math::

        t = 0.325 C_B - 0.1885 \frac{D}{\sqrt{B T}}
    """
    diameter = _propeller_diameter(hull)
    sqrt_bt = math.sqrt(hull.beam_m * hull.mean_draft_m)
    if hull.screw_vessel_type == ScrewVesselType.SINGLE:
        return (
            0.25014
            * (hull.beam_m / _length(hull)) ** 0.28956
            * (sqrt_bt / diameter) ** 0.2624
            / (
                1.0
                - hull.prismatic_coefficient
                + 0.0225 * hull.longitudinal_buoyancy_center
            )
            ** 0.01762
            + 0.0015 * int(hull.stern_shape)
        )
    elif hull.screw_vessel_type == ScrewVesselType.TWIN:
        return 0.325 * hull.block_coefficient - 0.1885 * diameter / sqrt_bt
    raise ConfigurationError(
        f"Unknown screw vessel type {hull.screw_vessel_type!r}."
    )


@lru_cache(maxsize=MAX_CACHE_SIZE)
def relative_rotative_efficiency(hull: ShipHull) -> float:
    r"""
    Relative rotative efficiency eta_R, [2] p. 273.

    Single screw:

    .. math::

        \eta_R = 0.9922 - 0.05908 A_E/A_0 + 0.07424 (C_P - 0.0225 lcb)

    Twin screw:

    .. math::

        \eta_R = 0.9737 + 0.111 (C_P - 0.0225 lcb) - 0.06325 P/D
    """
    cp_lcb = hull.prismatic_coefficient - 0.0225 * hull.longitudinal_buoyancy_center
    if hull.screw_vessel_type == ScrewVesselType.SINGLE:
        if hull.propeller_expanded_area_ratio is None:
            raise ConfigurationError(
                "Propeller expanded area ratio is needed for eta_R of a single screw ship."
            )
        return 0.9922 - 0.05908 * hull.propeller_expanded_area_ratio + 0.07424 * cp_lcb
    elif hull.screw_vessel_type == ScrewVesselType.TWIN:
        if hull.propeller_pitch_m is None:
            raise ConfigurationError(
                "Propeller pitch is needed for eta_R of a twin screw ship."
            )
        pitch_ratio = hull.propeller_pitch_m / _propeller_diameter(hull)
        return 0.9737 + 0.111 * cp_lcb - 0.06325 * pitch_ratio
    raise ConfigurationError(
        f"Unknown screw vessel type {hull.screw_vessel_type!r}."
    )


# Resistance components in N


def frictional_resistance_n(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """R_F (1 + k_1) = C_F 0.5 rho V^2 S (1 + k_1)."""
    return (
        frictional_coefficient(hull, speed_ms)
        * _dynamic_pressure(speed_ms, physics)
        * hull.wetted_surface_m2
        * form_factor(hull)
    )


def appendage_resistance_n(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """R_APP = 0.5 rho V^2 S_APP (1 + k_2)_eq C_F."""
    return (
        _dynamic_pressure(speed_ms, physics)
        * hull.total_appendage_area_m2
        * equivalent_appendage_form_factor(hull)
        * frictional_coefficient(hull, speed_ms)
    )


def wave_resistance_n(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    fn = froude_number(speed_ms, _length(hull), g=physics.gravity_acceleration_ms2)
    return wave_resistance_at_froude(hull, fn, physics)


def bulbous_bow_resistance_n(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    r"""
    Additional resistance of a bulbous bow near the surface, [1] p. 168:

    .. math::

        R_B = 0.11 \exp(-3 P_B^{-2}) \frac{F_{ni}^3 A_{BT}^{1.5} \rho g}{1 + F_{ni}^2}
    """
    a_bt = hull.bulbous_bow_transverse_area_m2
    if a_bt <= 0 or speed_ms <= 0:
        return 0.0
    p_b = bulb_emergence(hull, speed_ms, physics)
    if p_b <= 0:
        return 0.0
    immersion = bulb_immersion(hull, speed_ms, physics)
    if immersion <= 0:
        logging.warning(
            f"Bulbous bow is not immersed (effective immersion {immersion:.3f} m)."
        )
        return 0.0
    fn_i = immersion_froude_number(hull, speed_ms, physics)
    return (
        0.11
        * math.exp(-3.0 * p_b**-2)
        * fn_i**3
        * a_bt**1.5
        * physics.sea_water_density_kgm3
        * physics.gravity_acceleration_ms2
        / (1.0 + fn_i**2)
    )


def immersed_transom_resistance_n(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """R_TR = 0.5 rho V^2 A_T c_6."""
    if hull.immersed_transom_area_m2 <= 0:
        return 0.0
    return (
        _dynamic_pressure(speed_ms, physics)
        * hull.immersed_transom_area_m2
        * c_6(hull, speed_ms, physics)
    )


def model_ship_correlation_resistance_n(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """R_A = 0.5 rho V^2 (S + S_APP) (C_A + dC_A)."""
    return (
        _dynamic_pressure(speed_ms, physics)
        * (hull.wetted_surface_m2 + hull.total_appendage_area_m2)
        * (correlation_allowance(hull) + roughness_allowance(hull))
    )


def air_resistance_n(
    hull: ShipHull, speed_ms: float, physics: Physics = PHYSICS_DEFAULT
) -> float:
    """Still-air drag of the hull and superstructure above the waterline."""
    return (
        0.5
        * physics.air_density_kgm3
        * physics.air_drag_coefficient
        * hull.projected_frontal_area_above_waterline_m2
        * speed_ms**2
    )


class HoltropMethod(ResistanceStrategy):
    """Calm water resistance and propulsion factors after Holtrop and Mennen.

    The instance holds no state. Environment data of the ship is ignored.
    """

    def _speed(self, ship, speed_ms):
        speed_ms = resolve_speed(ship, speed_ms)
        if speed_ms < 0:
            logging.error(f"Negative speed {speed_ms} m/s, resistance set to zero.")
            return 0.0
        return speed_ms

    def frictional_resistance(self, ship, speed_ms=None):
        return frictional_resistance_n(
            ship.hull, self._speed(ship, speed_ms), ship.physics
        )

    def appendage_resistance(self, ship, speed_ms=None):
        return appendage_resistance_n(
            ship.hull, self._speed(ship, speed_ms), ship.physics
        )

    def wave_resistance(self, ship, speed_ms=None):
        return wave_resistance_n(ship.hull, self._speed(ship, speed_ms), ship.physics)

    def bulbous_bow_resistance(self, ship, speed_ms=None):
        return bulbous_bow_resistance_n(
            ship.hull, self._speed(ship, speed_ms), ship.physics
        )

    def immersed_transom_pressure_resistance(self, ship, speed_ms=None):
        return immersed_transom_resistance_n(
            ship.hull, self._speed(ship, speed_ms), ship.physics
        )

    def model_ship_correlation_resistance(self, ship, speed_ms=None):
        return model_ship_correlation_resistance_n(
            ship.hull, self._speed(ship, speed_ms), ship.physics
        )

    def air_resistance(self, ship, speed_ms=None):
        return air_resistance_n(ship.hull, self._speed(ship, speed_ms), ship.physics)

    def wake_fraction(self, ship, speed_ms=None) -> float:
        return wake_fraction(ship.hull, self._speed(ship, speed_ms))

    def speed_of_advance(self, ship, speed_ms=None):
        speed_ms = self._speed(ship, speed_ms)
        return (1.0 - wake_fraction(ship.hull, speed_ms)) * speed_ms

    def hull_efficiency(self, ship, speed_ms=None):
        """(1 - t) / (1 - w)."""
        w = wake_fraction(ship.hull, self._speed(ship, speed_ms))
        return (1.0 - thrust_deduction(ship.hull)) / (1.0 - w)

    def propeller_rotation_efficiency(self, ship):
        return relative_rotative_efficiency(ship.hull)

    def thrust_deduction_fraction(self, ship):
        return thrust_deduction(ship.hull)

    def method_name(self):
        return METHOD_NAME

    def validity_warnings(self, ship, speed_ms=None):
        fn = froude_number(
            self._speed(ship, speed_ms),
            ship.hull.waterline_length_m,
            g=ship.physics.gravity_acceleration_ms2,
        )
        return holtrop_validity_warnings(ship.hull, fn)
