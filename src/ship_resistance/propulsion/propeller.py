from __future__ import annotations

import math

from ..core.errors import ConfigurationError
from ..core.hydrology import water_density
from ..core.units import kw_to_w, rpm_to_rad_s, rpm_to_rps, rps_to_rpm
from .curves import LookupCurve
from .gearbox import Gearbox


class Propeller:
    """Converts the gearbox output into thrust against the ship's resistance.

    Speed of advance and the hull interaction factors come from the ship's
    active resistance strategy. Thrust is effective power over speed of advance,
    bounded by the momentum limit of an actuator disk of the propeller diameter.

    Parameters
    ----------
    ship: Ship
        Ship the propeller drives.
    gearbox: Gearbox
        Power source of the shaft.
    open_water_efficiency: LookupCurve
        Open water efficiency over advance ratio J.
    shaft_efficiency: float
        Efficiency of the shaft line.  Defaults to: 0.98
    diameter_m: float
        Propeller diameter.  Defaults to: diameter of the hull
    pitch_m: float
        Propeller pitch.  Defaults to: pitch of the hull
    blade_count: int
        Number of blades.  Defaults to: 4
    """

    def __init__(
        self,
        ship,
        gearbox: Gearbox,
        open_water_efficiency: LookupCurve,
        shaft_efficiency: float = 0.98,
        diameter_m: float = None,
        pitch_m: float = None,
        blade_count: int = 4,
    ):
        self.ship = ship
        self.gearbox = gearbox
        self.open_water_efficiency_curve = open_water_efficiency
        self.shaft_efficiency = shaft_efficiency
        self.diameter_m = (
            ship.hull.propeller_diameter_m if diameter_m is None else diameter_m
        )
        self.pitch_m = ship.hull.propeller_pitch_m if pitch_m is None else pitch_m
        self.blade_count = blade_count
        if self.diameter_m is None or self.diameter_m <= 0:
            raise ConfigurationError("Propeller needs a positive diameter.")

    def __repr__(self):
        return (
            f"Propeller(diameter_m={self.diameter_m}, pitch_m={self.pitch_m}, "
            f"blade_count={self.blade_count})"
        )

    @property
    def disk_area_m2(self) -> float:
        return math.pi * self.diameter_m**2 / 4.0

    def _water_density(self) -> float:
        env = self.ship.environment
        if env is None:
            return self.ship.physics.sea_water_density_kgm3
        return water_density(env.salinity, env.temperature_c)

    def _speed_of_advance(self, speed_ms: float = None) -> float:
        return self.ship.resistance_strategy.speed_of_advance(self.ship, speed_ms)

    def update(self):
        """Move the driving engines to the current ship speed."""
        self.gearbox.update(self.ship.speed_ms)

    def rpm(self) -> float:
        return self.gearbox.output_rpm()

    def advance_ratio(self, rpm: float = None, speed_ms: float = None) -> float:
        """J = V_A / (n D), zero for a standing propeller."""
        n = rpm_to_rps(self.rpm() if rpm is None else rpm)
        if n <= 0:
            return 0.0
        return max(self._speed_of_advance(speed_ms) / (n * self.diameter_m), 0.0)

    def open_water_efficiency(self) -> float:
        return self.open_water_efficiency_curve(self.advance_ratio())

    def propeller_efficiency(self) -> float:
        """Open water efficiency times relative rotative efficiency."""
        eta_r = self.ship.resistance_strategy.propeller_rotation_efficiency(self.ship)
        return self.open_water_efficiency() * eta_r

    def shaft_power_kw(self) -> float:
        return self.gearbox.output_power_kw() * self.shaft_efficiency

    def effective_power_kw(self) -> float:
        hull_efficiency = self.ship.resistance_strategy.hull_efficiency(self.ship)
        return self.shaft_power_kw() * self.propeller_efficiency() * hull_efficiency

    def thrust_n(self) -> float:
        """Thrust in N.

        P_E / V_A, limited to the thrust (2 rho A P_E^2)^(1/3) of an ideal
        actuator disk. At zero speed of advance the limit itself is returned.
        """
        power_w = kw_to_w(self.effective_power_kw())
        if power_w <= 0:
            return 0.0
        limit = (2.0 * self._water_density() * self.disk_area_m2 * power_w**2) ** (
            1.0 / 3.0
        )
        speed_of_advance = self._speed_of_advance()
        if speed_of_advance <= 0:
            return limit
        return min(power_w / speed_of_advance, limit)

    def torque_nm(self) -> float:
        omega = rpm_to_rad_s(self.rpm())
        if omega <= 0:
            return 0.0
        return kw_to_w(self.effective_power_kw()) / omega

    def thrust_coefficient(self) -> float:
        """K_T = T / (rho n^2 D^4)."""
        n = rpm_to_rps(self.rpm())
        if n <= 0:
            return 0.0
        return self.thrust_n() / (self._water_density() * n**2 * self.diameter_m**4)

    def torque_coefficient(self) -> float:
        """K_Q = Q / (rho n^2 D^5)."""
        n = rpm_to_rps(self.rpm())
        if n <= 0:
            return 0.0
        return self.torque_nm() / (self._water_density() * n**2 * self.diameter_m**5)

    def ideal_advance_speed_ms(self) -> float:
        """Pitch times revolutions per second."""
        if self.pitch_m is None:
            raise ConfigurationError("Propeller pitch is not set.")
        return rpm_to_rps(self.rpm()) * self.pitch_m

    def slip(self) -> float:
        """Apparent slip 1 - V_A / (n P), zero for a standing propeller."""
        ideal = self.ideal_advance_speed_ms()
        if ideal <= 0:
            return 0.0
        return 1.0 - self._speed_of_advance() / ideal

    def rpm_for_advance_ratio(self, advance_ratio: float, speed_ms: float = None) -> float:
        """RPM at which the propeller runs with the given advance ratio."""
        if advance_ratio <= 0:
            raise ValueError("Advance ratio must be positive.")
        n = self._speed_of_advance(speed_ms) / (advance_ratio * self.diameter_m)
        return rps_to_rpm(n)
