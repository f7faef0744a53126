from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Sequence
import logging

import numpy as np

from ..core.errors import ConfigurationError
from ..core.units import kw_to_w, rpm_to_rad_s
from .curves import LookupCurve, read_curve_file


class EngineLoad(Enum):
    """Operational loads, ordered like the break points of the layout curve."""

    LOW = 0
    ECONOMIC = 1
    REDUCED_MCR = 2
    MCR = 3


class EmissionTier(Enum):
    TIER_II = "tier_ii"
    TIER_III = "tier_iii"


# logistic throttle response to the speed ratio
THROTTLE_STEEPNESS = 7.82605
THROTTLE_MIDPOINT = 0.42606


@dataclass(frozen=True)
class EngineProperties:
    """One operating point of an engine."""

    brake_power_kw: float = 0.0
    rpm: float = 0.0
    efficiency: float = 0.0


ENGINE_OFF = EngineProperties()


@dataclass(frozen=True)
class EngineCurves:
    """Lookup tables of an engine in one emission tier.

    ``layout`` holds the four break points (low, economic, reduced MCR, MCR) of
    the manufacturer's layout curve, sorted by power.
    """

    power_to_rpm: LookupCurve
    power_to_efficiency: LookupCurve
    layout: tuple

    def __post_init__(self):
        layout = tuple(sorted(self.layout, key=lambda p: p.brake_power_kw))
        if len(layout) != len(EngineLoad):
            raise ConfigurationError(
                f"Engine layout needs {len(EngineLoad)} break points, got {len(layout)}."
            )
        object.__setattr__(self, "layout", layout)

    @property
    def min_power_kw(self) -> float:
        return self.power_to_rpm.min_x

    @property
    def max_power_kw(self) -> float:
        return self.power_to_rpm.max_x

    def properties_at_power(self, power_kw: float) -> EngineProperties:
        return EngineProperties(
            brake_power_kw=power_kw,
            rpm=self.power_to_rpm(power_kw),
            efficiency=self.power_to_efficiency(power_kw),
        )

    def properties_at_load(self, load: EngineLoad) -> EngineProperties:
        return self.layout[load.value]

    @classmethod
    def from_layout(cls, layout: Sequence[EngineProperties]) -> EngineCurves:
        """Use the layout break points themselves as lookup tables."""
        layout = tuple(layout)
        return cls(
            power_to_rpm=LookupCurve.from_points(
                (p.brake_power_kw, p.rpm) for p in layout
            ),
            power_to_efficiency=LookupCurve.from_points(
                (p.brake_power_kw, p.efficiency) for p in layout
            ),
            layout=layout,
        )

    @classmethod
    def from_files(
        cls,
        power_rpm_path: Path | str,
        power_efficiency_path: Path | str,
        layout: Sequence[EngineProperties] = None,
    ) -> EngineCurves:
        """Read ``<power_kW> <RPM>`` and ``<power_kW> <efficiency>`` tables.

        Without a layout, the break points are placed at 25, 50, 75 and 100 %
        of the largest tabulated power.
        """
        power_to_rpm = read_curve_file(power_rpm_path)
        power_to_efficiency = read_curve_file(power_efficiency_path)
        if layout is None:
            layout = tuple(
                EngineProperties(
                    brake_power_kw=fraction * power_to_rpm.max_x,
                    rpm=power_to_rpm(fraction * power_to_rpm.max_x),
                    efficiency=power_to_efficiency(fraction * power_to_rpm.max_x),
                )
                for fraction in (0.25, 0.5, 0.75, 1.0)
            )
        return cls(
            power_to_rpm=power_to_rpm,
            power_to_efficiency=power_to_efficiency,
            layout=tuple(layout),
        )


class Engine:
    """A ship engine following the speed of its ship along its lookup curves.

    The engine targets the power of its current operational load. A logistic
    throttle on the ratio of ship speed to maximum speed scales this target to
    the raw power, which is clamped to the tabulated power range. RPM and
    efficiency are interpolated at the raw power and the brake power delivered
    is raw power times efficiency.

    Parameters
    ----------
    curves: Mapping[EmissionTier, EngineCurves]
        Lookup tables per emission tier. Tier II is required.
    max_speed_ms: float
        Maximum speed of the ship in m/s.
    load: EngineLoad
        Initial operational load.  Defaults to: MCR
    tier: EmissionTier
        Initial emission tier.  Defaults to: TIER_II
    max_power_ratio: float
        Upper bound of the throttle.  Defaults to: 1.0
    engine_id: int
        Identifier used in logs.  Defaults to: 0
    """

    def __init__(
        self,
        curves: Mapping[EmissionTier, EngineCurves],
        max_speed_ms: float,
        load: EngineLoad = EngineLoad.MCR,
        tier: EmissionTier = EmissionTier.TIER_II,
        max_power_ratio: float = 1.0,
        engine_id: int = 0,
    ):
        if isinstance(curves, EngineCurves):
            curves = {EmissionTier.TIER_II: curves}
        if EmissionTier.TIER_II not in curves:
            raise ConfigurationError("Engine needs lookup curves for tier II.")
        if max_speed_ms <= 0:
            raise ConfigurationError("Maximum speed must be positive.")
        self._curves = dict(curves)
        self.max_speed_ms = max_speed_ms
        self.engine_id = engine_id
        self.max_power_ratio = max_power_ratio
        self._load = EngineLoad(load)
        self._tier = EmissionTier.TIER_II
        self._is_working = True
        self._raw_power_kw = 0.0
        self._current = ENGINE_OFF
        self._previous = ENGINE_OFF
        self.set_tier(tier)

    def __repr__(self):
        return (
            f"Engine(id={self.engine_id}, load={self._load.name}, "
            f"tier={self._tier.name}, brake_power_kw={self.brake_power_kw:.1f})"
        )

    @property
    def curves(self) -> EngineCurves:
        """Lookup curves of the active emission tier."""
        return self._curves[self._tier]

    @property
    def load(self) -> EngineLoad:
        return self._load

    @property
    def tier(self) -> EmissionTier:
        return self._tier

    @property
    def target(self) -> EngineProperties:
        """Layout break point of the current operational load."""
        return self.curves.properties_at_load(self._load)

    @property
    def is_working(self) -> bool:
        return self._is_working

    @property
    def raw_power_kw(self) -> float:
        return self._raw_power_kw

    @property
    def brake_power_kw(self) -> float:
        return self._current.brake_power_kw

    @property
    def previous_brake_power_kw(self) -> float:
        return self._previous.brake_power_kw

    @property
    def rpm(self) -> float:
        return self._current.rpm

    @property
    def efficiency(self) -> float:
        return self._current.efficiency

    @property
    def rpm_range(self) -> tuple:
        curves = self.curves
        return (
            curves.power_to_rpm(curves.min_power_kw),
            curves.power_to_rpm(curves.max_power_kw),
        )

    @property
    def brake_torque_nm(self) -> float:
        """Brake power over angular speed, zero for a standing engine."""
        omega = rpm_to_rad_s(self.rpm)
        if omega <= 0:
            return 0.0
        return kw_to_w(self.brake_power_kw) / omega

    def hyperbolic_throttle_coef(self, speed_ms: float) -> float:
        """Logistic throttle 1 / (1 + exp(-7.82605 (v / v_max - 0.42606))).

        Clamped to [0, 1] and to the maximum power ratio.
        """
        speed_ratio = speed_ms / self.max_speed_ms
        coef = 1.0 / (
            1.0 + np.exp(-THROTTLE_STEEPNESS * (speed_ratio - THROTTLE_MIDPOINT))
        )
        coef = min(max(float(coef), 0.0), 1.0)
        return min(coef, self.max_power_ratio)

    def update(self, speed_ms: float) -> EngineProperties:
        """Move the operating point to the given ship speed."""
        self._previous = self._current
        if not self._is_working:
            self._raw_power_kw = 0.0
            self._current = ENGINE_OFF
            return self._current

        curves = self.curves
        raw_power_kw = (
            self.hyperbolic_throttle_coef(speed_ms) * self.target.brake_power_kw
        )
        raw_power_kw = min(max(raw_power_kw, curves.min_power_kw), curves.max_power_kw)
        at_raw_power = curves.properties_at_power(raw_power_kw)

        self._raw_power_kw = raw_power_kw
        self._current = EngineProperties(
            brake_power_kw=raw_power_kw * at_raw_power.efficiency,
            rpm=at_raw_power.rpm,
            efficiency=at_raw_power.efficiency,
        )
        return self._current

    def set_load(self, load: EngineLoad):
        self._load = EngineLoad(load)

    def request_higher_power(self) -> bool:
        """Step to the next higher load. Returns False at the top load."""
        if self._load.value + 1 >= len(EngineLoad):
            return False
        self._load = EngineLoad(self._load.value + 1)
        logging.info(f"Engine {self.engine_id}: load raised to {self._load.name}.")
        return True

    def request_lower_power(self) -> bool:
        """Step to the next lower load. Returns False at the lowest load."""
        if self._load.value == 0:
            return False
        self._load = EngineLoad(self._load.value - 1)
        logging.info(f"Engine {self.engine_id}: load lowered to {self._load.name}.")
        return True

    def set_tier(self, tier: EmissionTier) -> bool:
        """Switch the active lookup tables. Returns whether the tier changed."""
        tier = EmissionTier(tier)
        if tier not in self._curves:
            raise ConfigurationError(
                f"Engine {self.engine_id} has no curves for {tier.name}."
            )
        if tier == self._tier:
            return False
        self._tier = tier
        logging.info(f"Engine {self.engine_id}: switched to {tier.name}.")
        return True

    def turn_off(self):
        self._is_working = False
        self._raw_power_kw = 0.0
        self._current = ENGINE_OFF

    def turn_on(self):
        self._is_working = True
