"""Propulsion layer: engine, gearbox and propeller."""

from .curves import LookupCurve, read_curve_file
from .engine import (
    EmissionTier,
    Engine,
    EngineCurves,
    EngineLoad,
    EngineProperties,
)
from .gearbox import Gearbox
from .propeller import Propeller

__all__ = [
    "LookupCurve",
    "read_curve_file",
    "EmissionTier",
    "Engine",
    "EngineCurves",
    "EngineLoad",
    "EngineProperties",
    "Gearbox",
    "Propeller",
]
