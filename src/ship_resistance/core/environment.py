from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .hydrology import DEFAULT_SALINITY, DEFAULT_TEMPERATURE_C


@dataclass(frozen=True)
class Environment:
    """Sea state, wind and water properties around a ship.

    Wind components are the eastward and northward 10 m wind in m/s. The wave
    azimuth is the direction the waves travel to, in degrees clockwise from
    north; if it is not given, waves are assumed to run with the wind.
    Salinity is a fraction (0.035 for 35 ppt).
    """

    wave_height_m: float = 0.0
    wave_frequency_hz: float = 0.0
    wave_length_m: float = 0.0
    wave_azimuth_deg: float = None
    wind_east_ms: float = 0.0
    wind_north_ms: float = 0.0
    salinity: float = DEFAULT_SALINITY
    temperature_c: float = DEFAULT_TEMPERATURE_C
    water_depth_m: float = np.inf

    @property
    def wave_angular_frequency_rad_s(self) -> float:
        return 2.0 * np.pi * self.wave_frequency_hz

    @property
    def wind_azimuth_deg(self) -> float:
        """Direction the wind blows to, in [0, 360)."""
        return float(np.rad2deg(np.arctan2(self.wind_east_ms, self.wind_north_ms)) % 360.0)

    @property
    def effective_wave_azimuth_deg(self) -> float:
        if self.wave_azimuth_deg is None:
            return self.wind_azimuth_deg
        return float(self.wave_azimuth_deg % 360.0)

    @property
    def has_waves(self) -> bool:
        return (
            self.wave_height_m > 0
            and self.wave_length_m > 0
            and self.wave_frequency_hz > 0
        )

    @property
    def is_calm(self) -> bool:
        return not self.has_waves and self.wind_east_ms == 0 and self.wind_north_ms == 0

    def encounter_angle_deg(self, heading_deg: float) -> float:
        """Angle between wave azimuth and ship heading folded into [0, 180]."""
        mu = abs(self.effective_wave_azimuth_deg - heading_deg) % 360.0
        if mu > 180.0:
            mu = 360.0 - mu
        return mu

    def wind_speed_along_heading_ms(self, heading_deg: float) -> float:
        """Wind component along the ship heading (positive with the ship)."""
        heading = np.deg2rad(heading_deg)
        return float(
            self.wind_east_ms * np.sin(heading) + self.wind_north_ms * np.cos(heading)
        )
