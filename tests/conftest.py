"""Pytest configuration and shared fixtures."""
from pathlib import Path

import pytest

from ship_resistance.core import Ship, ShipHull
from ship_resistance.core.units import knots_to_ms

# Project root is two levels up from this file
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Holtrop and Mennen (1982) example hull
REFERENCE_HULL_PARAMETERS = dict(
    waterline_length_m=147.7,
    beam_m=24.0,
    mean_draft_m=8.2,
    forward_draft_m=8.2,
    aft_draft_m=8.2,
    volumetric_displacement_m3=18872.0,
    block_coefficient=0.6492,
    midship_section_coefficient=0.984,
    prismatic_coefficient=0.665898,
    waterplane_area_coefficient=0.7675,
    half_entrance_angle_deg=19.231,
    longitudinal_buoyancy_center=0.4,
    bulbous_bow_transverse_area_m2=14.0,
    wetted_surface_m2=4400.0,
    propeller_diameter_m=6.5,
    propeller_pitch_m=5.2,
    propeller_expanded_area_ratio=0.6,
)


def make_hull(**overrides) -> ShipHull:
    return ShipHull(**{**REFERENCE_HULL_PARAMETERS, **overrides})


@pytest.fixture
def reference_hull():
    return make_hull()


@pytest.fixture
def reference_ship(reference_hull):
    return Ship(hull=reference_hull, speed_ms=knots_to_ms(15.0), name="Reference")


@pytest.fixture
def hull_factory():
    """Reference hull with selected parameters replaced."""
    return make_hull
