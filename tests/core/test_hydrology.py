from ship_resistance.core.hydrology import (
    froude_number,
    kinematic_viscosity,
    reynolds_number,
    water_density,
)
from ship_resistance.core.units import knots_to_ms, ms_to_knots

import numpy as np
import pytest


def test_froude_number_definition():
    assert np.isclose(froude_number(10.0, 100.0, g=9.81), 10.0 / np.sqrt(981.0))


def test_froude_number_negative_speed_is_zero():
    assert froude_number(-1.0, 100.0) == 0.0


def test_froude_number_zero_length_is_zero():
    assert froude_number(5.0, 0.0) == 0.0


def test_kinematic_viscosity_at_15_degrees():
    assert np.isclose(kinematic_viscosity(0.035, 15.0), 1.141115e-6, rtol=1e-9)


def test_kinematic_viscosity_decreases_with_temperature():
    assert kinematic_viscosity(0.035, 25.0) < kinematic_viscosity(0.035, 5.0)


@pytest.mark.parametrize("salinity, temperature_c", [(-0.1, 15.0), (1.5, 15.0), (0.035, -1.0)])
def test_kinematic_viscosity_out_of_range_is_zero(salinity, temperature_c):
    assert kinematic_viscosity(salinity, temperature_c) == 0.0


def test_water_density_sea_water():
    # UNESCO check value for S=35, T=5 C at atmospheric pressure
    assert np.isclose(water_density(0.035, 5.0), 1027.67547, atol=1e-2)


def test_water_density_pure_water():
    assert np.isclose(water_density(0.0, 4.0), 999.975, atol=1e-2)


def test_water_density_out_of_range_is_zero():
    assert water_density(2.0, 15.0) == 0.0


def test_reynolds_number_scales_with_speed_and_length():
    rn = reynolds_number(5.0, 100.0)
    assert np.isclose(reynolds_number(10.0, 100.0), 2 * rn)
    assert np.isclose(reynolds_number(5.0, 200.0), 2 * rn)


def test_reynolds_number_negative_input_is_zero():
    assert reynolds_number(-5.0, 100.0) == 0.0


def test_knots_roundtrip():
    assert np.isclose(knots_to_ms(1.0), 1852.0 / 3600.0)
    assert np.isclose(ms_to_knots(knots_to_ms(15.0)), 15.0)
