from __future__ import annotations

from typing import Sequence

from ..core.errors import ConfigurationError
from ..core.units import kw_to_w, rpm_to_rad_s
from .engine import Engine


class Gearbox:
    """Couples one or more engines to a propeller shaft.

    Parameters
    ----------
    engines: Sequence[Engine]
        Engines driving the gearbox.
    gear_ratio: float
        Engine RPM over shaft RPM.  Defaults to: 1.0
    efficiency: float
        Power transmission efficiency.  Defaults to: 0.99
    """

    def __init__(
        self,
        engines: Sequence[Engine] = (),
        gear_ratio: float = 1.0,
        efficiency: float = 0.99,
    ):
        if gear_ratio <= 0:
            raise ConfigurationError("Gear ratio must be positive.")
        self.engines = list(engines)
        self.gear_ratio = gear_ratio
        self.efficiency = efficiency

    def __repr__(self):
        return (
            f"Gearbox(engines={len(self.engines)}, gear_ratio={self.gear_ratio}, "
            f"efficiency={self.efficiency})"
        )

    def update(self, speed_ms: float):
        """Move all engines to the given ship speed."""
        for engine in self.engines:
            engine.update(speed_ms)

    def output_power_kw(self) -> float:
        return self.efficiency * sum(engine.brake_power_kw for engine in self.engines)

    def output_rpm(self) -> float:
        """Shaft RPM from the power weighted engine RPM."""
        if not self.engines:
            return 0.0
        if len(self.engines) == 1:
            return self.engines[0].rpm / self.gear_ratio
        total_power = sum(engine.brake_power_kw for engine in self.engines)
        if total_power == 0:
            return 0.0
        weighted_rpm = (
            sum(engine.rpm * engine.brake_power_kw for engine in self.engines)
            / total_power
        )
        return weighted_rpm / self.gear_ratio

    def output_torque_nm(self) -> float:
        omega = rpm_to_rad_s(self.output_rpm())
        if omega <= 0:
            return 0.0
        return kw_to_w(self.output_power_kw()) / omega

    def set_engine_max_power_ratio(self, ratio: float):
        for engine in self.engines:
            engine.max_power_ratio = ratio
