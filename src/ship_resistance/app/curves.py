"""Resistance curves over a range of speeds."""

from __future__ import annotations

from typing import Iterable
import logging

import pandas as pd
import xarray as xr

from ..core.hydrology import froude_number
from ..core.ship import Ship
from ..core.units import knots_to_ms

UNITS = {
    "speed_ms": "m/s",
    "froude_number": "1",
    "frictional_n": "N",
    "appendage_n": "N",
    "wave_n": "N",
    "bulbous_bow_n": "N",
    "immersed_transom_n": "N",
    "model_ship_correlation_n": "N",
    "air_n": "N",
    "total_n": "N",
    "added_n": "N",
    "total_with_added_n": "N",
    "coefficient_of_resistance": "1",
    "effective_power_kw": "kW",
}


def resistance_curve(ship: Ship, speeds_knots: Iterable[float]) -> pd.DataFrame:
    """Tabulate the calm water components of the ship's strategy per speed.

    The ship is not modified. If the ship carries a dynamic strategy and an
    environment, the added resistance and the combined total are appended.

    Parameters
    ----------
    ship: Ship
        Ship to evaluate.
    speeds_knots: Iterable[float]
        Speeds through water in knots.

    Returns
    -------
    pd.DataFrame:
        One row per speed, indexed by ``speed_knots``.
    """
    strategy = ship.resistance_strategy
    with_added = (
        ship.dynamic_resistance_strategy is not None and ship.environment is not None
    )
    records = []
    for speed_knots in speeds_knots:
        speed_ms = knots_to_ms(speed_knots)
        components = strategy.resistance_components(ship, speed_ms)
        for warning in components.warnings:
            logging.warning(f"{ship.name} at {speed_knots} kn: {warning}")
        record = {
            "speed_knots": float(speed_knots),
            "speed_ms": speed_ms,
            "froude_number": froude_number(
                speed_ms,
                ship.hull.waterline_length_m,
                g=ship.physics.gravity_acceleration_ms2,
            ),
        }
        record.update(components.to_dict())
        if with_added:
            added = ship.dynamic_resistance_strategy.total_resistance(ship, speed_ms)
            record["added_n"] = added
            record["total_with_added_n"] = components.total_n + added
        record["coefficient_of_resistance"] = strategy.coefficient_of_resistance(
            ship, speed_ms
        )
        total = record.get("total_with_added_n", components.total_n)
        record["effective_power_kw"] = total * speed_ms / 1_000.0
        records.append(record)

    if not records:
        return pd.DataFrame(columns=["speed_knots", *UNITS]).set_index("speed_knots")
    return pd.DataFrame(records).set_index("speed_knots")


def resistance_curve_dataset(ship: Ship, speeds_knots: Iterable[float]) -> xr.Dataset:
    """Resistance curve as a dataset along ``speed_knots`` with unit attributes."""
    ds = resistance_curve(ship, speeds_knots).to_xarray()
    for name, units in UNITS.items():
        if name in ds:
            ds[name].attrs["units"] = units
    ds["speed_knots"].attrs["units"] = "knot"
    ds.attrs["ship"] = ship.name
    ds.attrs["method"] = ship.resistance_strategy.method_name()
    return ds
