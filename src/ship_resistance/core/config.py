from __future__ import annotations

from dataclasses import dataclass

MAX_CACHE_SIZE = 10_000


@dataclass(frozen=True)
class Physics:
    """Physical constants used in resistance estimation."""

    gravity_acceleration_ms2: float = 9.80665
    sea_water_density_kgm3: float = 1025.0
    air_density_kgm3: float = 1.225
    air_drag_coefficient: float = 0.8


PHYSICS_DEFAULT = Physics()
