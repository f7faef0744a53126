"""User-facing/app layer: ship configuration, resistance curves and CLI."""

from .config import (
    RESISTANCE_METHODS,
    ShipConfig,
    load_ship,
    resistance_method_from_name,
    ship_from_dict,
)
from .curves import resistance_curve, resistance_curve_dataset

__all__ = [
    "RESISTANCE_METHODS",
    "ShipConfig",
    "load_ship",
    "resistance_method_from_name",
    "ship_from_dict",
    "resistance_curve",
    "resistance_curve_dataset",
]
