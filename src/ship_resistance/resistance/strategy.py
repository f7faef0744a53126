from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING
import math

if TYPE_CHECKING:
    from ..core.ship import Ship


def resolve_speed(ship: Ship, speed_ms: float = None) -> float:
    """Return the override speed, or the ship's current speed if it is unset or NaN."""
    if speed_ms is None or math.isnan(speed_ms):
        return ship.speed_ms
    return speed_ms


@dataclass(frozen=True)
class ResistanceComponents:
    """Resistance forces in N acting on a ship at one speed."""

    frictional_n: float = 0.0
    appendage_n: float = 0.0
    wave_n: float = 0.0
    bulbous_bow_n: float = 0.0
    immersed_transom_n: float = 0.0
    model_ship_correlation_n: float = 0.0
    air_n: float = 0.0
    warnings: tuple = ()

    @property
    def total_n(self) -> float:
        return (
            self.frictional_n
            + self.appendage_n
            + self.wave_n
            + self.bulbous_bow_n
            + self.model_ship_correlation_n
            + self.air_n
        )

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "warnings"}
        data["total_n"] = self.total_n
        return data


class ResistanceStrategy(ABC):
    """Interface of a resistance prediction method.

    Every method takes the ship and an optional override speed in m/s. If the
    override is ``None`` or NaN, the ship's current speed is used. Strategies
    never modify the ship and keep no per-ship state, so one instance can serve
    any number of ships.

    The total resistance is the sum of the frictional, appendage, wave, bulbous
    bow, correlation and air forces. The immersed transom pressure force is
    reported with the components but left out of the total. Methods that do not
    model a component return zero for it.
    """

    @abstractmethod
    def frictional_resistance(self, ship: Ship, speed_ms: float = None) -> float:
        pass

    @abstractmethod
    def appendage_resistance(self, ship: Ship, speed_ms: float = None) -> float:
        pass

    @abstractmethod
    def wave_resistance(self, ship: Ship, speed_ms: float = None) -> float:
        pass

    @abstractmethod
    def bulbous_bow_resistance(self, ship: Ship, speed_ms: float = None) -> float:
        pass

    @abstractmethod
    def immersed_transom_pressure_resistance(
        self, ship: Ship, speed_ms: float = None
    ) -> float:
        pass

    @abstractmethod
    def model_ship_correlation_resistance(
        self, ship: Ship, speed_ms: float = None
    ) -> float:
        pass

    @abstractmethod
    def air_resistance(self, ship: Ship, speed_ms: float = None) -> float:
        pass

    @abstractmethod
    def speed_of_advance(self, ship: Ship, speed_ms: float = None) -> float:
        """Speed of the water arriving at the propeller in m/s."""

    @abstractmethod
    def hull_efficiency(self, ship: Ship, speed_ms: float = None) -> float:
        pass

    @abstractmethod
    def propeller_rotation_efficiency(self, ship: Ship) -> float:
        pass

    @abstractmethod
    def thrust_deduction_fraction(self, ship: Ship) -> float:
        pass

    @abstractmethod
    def method_name(self) -> str:
        pass

    def validity_warnings(self, ship: Ship, speed_ms: float = None) -> tuple:
        """Describe where the ship leaves the range the method was fitted to."""
        return ()

    def resistance_components(
        self, ship: Ship, speed_ms: float = None
    ) -> ResistanceComponents:
        speed_ms = resolve_speed(ship, speed_ms)
        return ResistanceComponents(
            frictional_n=self.frictional_resistance(ship, speed_ms),
            appendage_n=self.appendage_resistance(ship, speed_ms),
            wave_n=self.wave_resistance(ship, speed_ms),
            bulbous_bow_n=self.bulbous_bow_resistance(ship, speed_ms),
            immersed_transom_n=self.immersed_transom_pressure_resistance(ship, speed_ms),
            model_ship_correlation_n=self.model_ship_correlation_resistance(
                ship, speed_ms
            ),
            air_n=self.air_resistance(ship, speed_ms),
            warnings=self.validity_warnings(ship, speed_ms),
        )

    def total_resistance(self, ship: Ship, speed_ms: float = None) -> float:
        """Total resistance in N."""
        return self.resistance_components(ship, speed_ms).total_n

    def coefficient_of_resistance(self, ship: Ship, speed_ms: float = None) -> float:
        """Total resistance made dimensionless with 0.5 rho V^2 S."""
        speed_ms = resolve_speed(ship, speed_ms)
        if speed_ms <= 0:
            return 0.0
        dynamic_pressure = 0.5 * ship.physics.sea_water_density_kgm3 * speed_ms**2
        return self.total_resistance(ship, speed_ms) / (
            dynamic_pressure * ship.hull.wetted_surface_m2
        )

    def __repr__(self):
        return f"{type(self).__name__}()"
