"""Core layer: physical constants, hydrology, hull geometry, environment and ship."""

from .config import Physics, MAX_CACHE_SIZE, PHYSICS_DEFAULT
from .errors import ConfigurationError
from .units import knots_to_ms, ms_to_knots
from .hydrology import (
    G,
    AIR_RHO,
    WATER_RHO,
    froude_number,
    reynolds_number,
    kinematic_viscosity,
    water_density,
)
from .hull import (
    Appendage,
    APPENDAGE_FORM_FACTORS,
    BlockCoefficientMethod,
    CStern,
    ScrewVesselType,
    ShipHull,
    WaterPlaneCoefficientMethod,
    WetSurfaceAreaMethod,
    calc_block_coefficient,
    calc_waterplane_coefficient,
    calc_wetted_surface,
    holtrop_validity_warnings,
)
from .environment import Environment
from .ship import Ship

__all__ = [
    "Physics",
    "MAX_CACHE_SIZE",
    "PHYSICS_DEFAULT",
    "ConfigurationError",
    "knots_to_ms",
    "ms_to_knots",
    "G",
    "AIR_RHO",
    "WATER_RHO",
    "froude_number",
    "reynolds_number",
    "kinematic_viscosity",
    "water_density",
    "Appendage",
    "APPENDAGE_FORM_FACTORS",
    "BlockCoefficientMethod",
    "CStern",
    "ScrewVesselType",
    "ShipHull",
    "WaterPlaneCoefficientMethod",
    "WetSurfaceAreaMethod",
    "calc_block_coefficient",
    "calc_waterplane_coefficient",
    "calc_wetted_surface",
    "holtrop_validity_warnings",
    "Environment",
    "Ship",
]
