from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging

import numpy as np
import pandas as pd
from scipy.interpolate import interp1d

from ..core.errors import ConfigurationError


@dataclass(frozen=True)
class LookupCurve:
    """Piecewise linear table y(x), held constant beyond its ends."""

    x: tuple
    y: tuple

    def __post_init__(self):
        if len(self.x) != len(self.y):
            raise ConfigurationError("Curve needs as many x as y values.")
        if len(self.x) == 0:
            raise ConfigurationError("Curve needs at least one point.")
        order = np.argsort(self.x, kind="stable")
        object.__setattr__(self, "x", tuple(float(self.x[i]) for i in order))
        object.__setattr__(self, "y", tuple(float(self.y[i]) for i in order))

    @property
    def min_x(self) -> float:
        return self.x[0]

    @property
    def max_x(self) -> float:
        return self.x[-1]

    def __call__(self, x: float) -> float:
        if len(self.x) == 1:
            return self.y[0]
        interpolator = interp1d(
            self.x,
            self.y,
            kind="linear",
            bounds_error=False,
            fill_value=(self.y[0], self.y[-1]),
            assume_sorted=True,
        )
        return float(interpolator(x))

    @property
    def data_frame(self):
        """Data frame with cols x and y."""
        return pd.DataFrame({"x": self.x, "y": self.y})

    @classmethod
    def from_data_frame(cls, data_frame: pd.DataFrame = None):
        """Construct curve from the first two columns of a data frame."""
        return cls(
            x=tuple(data_frame.iloc[:, 0]),
            y=tuple(data_frame.iloc[:, 1]),
        )

    @classmethod
    def from_points(cls, points) -> LookupCurve:
        """Construct curve from (x, y) pairs."""
        points = list(points)
        return cls(x=tuple(p[0] for p in points), y=tuple(p[1] for p in points))


def read_curve_file(path: Path | str) -> LookupCurve:
    """Read a two-column whitespace separated table, e.g., ``<power_kW> <RPM>``.

    Empty lines and lines starting with ``#`` are ignored. Rows that do not hold
    two numbers are skipped with a warning.
    """
    path = Path(path)
    points = []
    with path.open("r", encoding="utf-8") as fh:
        for line_number, line in enumerate(fh, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            if len(parts) < 2:
                logging.warning(f"{path}:{line_number}: skipping malformed row {line!r}")
                continue
            try:
                points.append((float(parts[0]), float(parts[1])))
            except ValueError:
                logging.warning(f"{path}:{line_number}: skipping malformed row {line!r}")
    if not points:
        raise ConfigurationError(f"No valid rows in curve file {path}.")
    return LookupCurve.from_points(points)
