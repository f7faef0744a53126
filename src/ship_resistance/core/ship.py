from __future__ import annotations

import logging

from .config import PHYSICS_DEFAULT, Physics
from .environment import Environment
from .hull import Appendage, ShipHull
from .hydrology import froude_number
from .units import knots_to_ms, ms_to_knots

DEFAULT_MAX_SPEED_KNOTS = 25.0


class Ship:
    """A hull together with its operating state and resistance strategies.

    The ship exclusively owns its calm water strategy (Holtrop and Mennen if none
    is given) and an optional dynamic strategy for added resistance in wind and
    waves, which is only evaluated when an environment is set. Replacing a
    strategy discards the old one.

    Parameters
    ----------
    hull: ShipHull
        Static hull geometry.
    speed_ms: float
        Current speed through water in m/s.  Defaults to: 0.0
    heading_deg: float
        Heading in degrees clockwise from north.  Defaults to: 0.0
    max_speed_ms: float
        Maximum speed in m/s.  Defaults to: 25 knots
    environment: Environment
        Sea state around the ship.  Defaults to: None (calm)
    resistance_strategy: ResistanceStrategy
        Calm water method.  Defaults to: HoltropMethod()
    dynamic_resistance_strategy: ResistanceStrategy
        Method for added resistance in wind and waves.  Defaults to: None
    physics: Physics
        Physical constants.
    name: str
        Identifier used in logs.  Defaults to: "Ship"
    """

    def __init__(
        self,
        hull: ShipHull,
        speed_ms: float = 0.0,
        heading_deg: float = 0.0,
        max_speed_ms: float = None,
        environment: Environment = None,
        resistance_strategy=None,
        dynamic_resistance_strategy=None,
        physics: Physics = PHYSICS_DEFAULT,
        name: str = "Ship",
    ):
        self.name = name
        self.hull = hull
        self.physics = physics
        self.speed_ms = speed_ms
        self.heading_deg = heading_deg
        self.max_speed_ms = (
            knots_to_ms(DEFAULT_MAX_SPEED_KNOTS) if max_speed_ms is None else max_speed_ms
        )
        self.environment = environment
        self.dynamic_resistance_strategy = dynamic_resistance_strategy
        self._resistance_strategy = None
        if resistance_strategy is None:
            from ..resistance.holtrop import HoltropMethod

            resistance_strategy = HoltropMethod()
        self.set_resistance_strategy(resistance_strategy)

    def __repr__(self):
        return (
            f"Ship(name={self.name!r}, speed_knots={self.speed_knots:.2f}, "
            f"strategy={self._resistance_strategy!r})"
        )

    @property
    def speed_knots(self) -> float:
        return ms_to_knots(self.speed_ms)

    @speed_knots.setter
    def speed_knots(self, value: float):
        self.speed_ms = knots_to_ms(value)

    @property
    def max_speed_knots(self) -> float:
        return ms_to_knots(self.max_speed_ms)

    @property
    def froude_number(self) -> float:
        return froude_number(
            self.speed_ms,
            self.hull.waterline_length_m,
            g=self.physics.gravity_acceleration_ms2,
        )

    @property
    def resistance_strategy(self):
        return self._resistance_strategy

    def set_resistance_strategy(self, strategy):
        """Install a calm water strategy and log where the hull leaves its validity range."""
        self._resistance_strategy = strategy
        for warning in strategy.validity_warnings(self, self.speed_ms):
            logging.warning(f"{self.name}: {warning}")

    def add_appendage(self, kind: Appendage, area_m2: float):
        self.hull = self.hull.with_appendage(kind, area_m2)

    def remove_appendage(self, kind: Appendage):
        self.hull = self.hull.without_appendage(kind)

    def set_surface_roughness(self, roughness_nm: float):
        self.hull = self.hull.with_surface_roughness(roughness_nm)

    def resistance_components(self, speed_ms: float = None):
        """Calm water resistance components at the current or given speed."""
        return self._resistance_strategy.resistance_components(self, speed_ms)

    def calculate_total_resistance(self, speed_ms: float = None) -> float:
        """Total resistance in N: calm water plus added resistance in wind and waves."""
        total = self._resistance_strategy.total_resistance(self, speed_ms)
        if self.dynamic_resistance_strategy is not None and self.environment is not None:
            total += self.dynamic_resistance_strategy.total_resistance(self, speed_ms)
        return total
