from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping
import json
import logging

import numpy as np

from ..core.config import PHYSICS_DEFAULT, Physics
from ..core.environment import Environment
from ..core.errors import ConfigurationError
from ..core.hull import ShipHull
from ..core.ship import DEFAULT_MAX_SPEED_KNOTS, Ship
from ..core.units import knots_to_ms
from ..resistance.holtrop import HoltropMethod
from ..resistance.lang_mao import LangMaoMethod

RESISTANCE_METHODS = {
    "holtrop": HoltropMethod,
    "lang_mao": LangMaoMethod,
}


def resistance_method_from_name(name: str | None):
    """Instantiate a resistance strategy by its configuration name, e.g., 'holtrop'."""
    if name is None:
        return None
    try:
        return RESISTANCE_METHODS[name.strip().lower()]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown resistance method '{name}'. Known: {sorted(RESISTANCE_METHODS)}"
        )


def _from_known_keys(cls, data: Mapping[str, Any] | None, what: str):
    if data is None:
        return None
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ConfigurationError(f"Unknown {what} parameters: {sorted(unknown)}")
    return cls(**data)


@dataclass(frozen=True)
class ShipConfig:
    """Everything needed to set up a ship for resistance prediction.

    The JSON layout mirrors the fields, with ``hull``, ``environment`` and
    ``physics`` as nested objects:

    .. code-block:: json

        {
            "name": "KCS",
            "speed_knots": 15.0,
            "hull": {"waterline_length_m": 232.5, "beam_m": 32.2, ...},
            "environment": {"wave_height_m": 2.0, ...},
            "resistance_method": "holtrop",
            "dynamic_resistance_method": "lang_mao"
        }
    """

    hull: ShipHull
    name: str = "Ship"
    speed_knots: float = 0.0
    heading_deg: float = 0.0
    max_speed_knots: float = DEFAULT_MAX_SPEED_KNOTS
    environment: Environment | None = None
    physics: Physics = PHYSICS_DEFAULT
    resistance_method: str = "holtrop"
    dynamic_resistance_method: str | None = None

    def build_ship(self) -> Ship:
        return Ship(
            hull=self.hull,
            speed_ms=knots_to_ms(self.speed_knots),
            heading_deg=self.heading_deg,
            max_speed_ms=knots_to_ms(self.max_speed_knots),
            environment=self.environment,
            resistance_strategy=resistance_method_from_name(self.resistance_method),
            dynamic_resistance_strategy=resistance_method_from_name(
                self.dynamic_resistance_method
            ),
            physics=self.physics,
            name=self.name,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "name": self.name,
            "speed_knots": self.speed_knots,
            "heading_deg": self.heading_deg,
            "max_speed_knots": self.max_speed_knots,
            "hull": self.hull.to_dict(),
            "environment": (
                asdict(self.environment) if self.environment is not None else None
            ),
            "physics": asdict(self.physics),
            "resistance_method": self.resistance_method,
            "dynamic_resistance_method": self.dynamic_resistance_method,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipConfig:
        """Reconstruct ShipConfig from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown ship parameters: {sorted(unknown)}")
        if "hull" not in data:
            raise ConfigurationError("Ship configuration needs a 'hull' section.")
        kwargs = dict(data)
        kwargs["hull"] = ShipHull.from_dict(data["hull"])
        kwargs["environment"] = _from_known_keys(
            Environment, data.get("environment"), "environment"
        )
        if data.get("physics") is not None:
            kwargs["physics"] = _from_known_keys(Physics, data["physics"], "physics")
        else:
            kwargs.pop("physics", None)
        if kwargs["environment"] is None and kwargs.get("dynamic_resistance_method"):
            logging.warning(
                "Dynamic resistance method is set but no environment is given; "
                "added resistance will not be evaluated."
            )
        return cls(**kwargs)

    def dump_json(self, path: Path | str, *, indent: int = 2) -> None:
        """Write configuration to JSON."""

        def _default(obj: Any):
            if isinstance(obj, np.generic):
                return obj.item()
            if isinstance(obj, Path):
                return str(obj)
            raise TypeError(f"Object of type {type(obj)!r} is not JSON serialisable")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            json.dump(self.to_dict(), fh, indent=indent, default=_default)

    @classmethod
    def load_json(cls, path: Path | str) -> ShipConfig:
        """Load a ShipConfig from disk."""
        with Path(path).open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        return cls.from_dict(data)


def ship_from_dict(data: Mapping[str, Any]) -> Ship:
    return ShipConfig.from_dict(data).build_ship()


def load_ship(path: Path | str) -> Ship:
    """Read a JSON ship configuration and build the ship."""
    return ShipConfig.load_json(path).build_ship()
