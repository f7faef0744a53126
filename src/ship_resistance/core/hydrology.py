"""Hydrostatic and hydrodynamic helper functions.

All functions are pure. Physically malformed inputs (negative speeds or lengths,
salinity outside [0, 1], negative temperatures) are logged and evaluate to 0.0,
which callers have to treat as a failure sentinel and not as a physical value.
"""

import logging

import numpy as np

G = 9.80665  # m/s2
AIR_RHO = 1.225  # kg/m3
WATER_RHO = 1025.0  # kg/m3

DEFAULT_SALINITY = 0.035
DEFAULT_TEMPERATURE_C = 15.0


def kinematic_viscosity(
    salinity: float = DEFAULT_SALINITY, temperature_c: float = DEFAULT_TEMPERATURE_C
) -> float:
    """Kinematic viscosity of sea water in m2/s.

    Parameters
    ----------
    salinity: float
        Salinity as a fraction in [0, 1].  Defaults to: 0.035
    temperature_c: float
        Water temperature in degrees Celsius.  Defaults to: 15.0

    Returns
    -------
    float:
        Kinematic viscosity, or 0.0 for out-of-range inputs.
    """
    if salinity < 0 or salinity > 1:
        logging.error(f"Salinity must be in [0, 1], got {salinity}.")
        return 0.0
    if temperature_c < 0:
        logging.error(f"Temperature must be non-negative, got {temperature_c}.")
        return 0.0
    return 1e-6 * (
        0.014 * salinity + (0.000645 * temperature_c - 0.0503) * temperature_c + 1.75
    )


def water_density(
    salinity: float = DEFAULT_SALINITY, temperature_c: float = DEFAULT_TEMPERATURE_C
) -> float:
    """Density of sea water at atmospheric pressure in kg/m3.

    This is the one-atmosphere international equation of state of sea water
        UNESCO: Algorithms for computation of fundamental properties of seawater,
        UNESCO Technical Papers in Marine Science 44, 1983.
    Salinity is passed as a fraction and converted to parts per thousand.
    """
    if salinity < 0 or salinity > 1:
        logging.error(f"Salinity must be in [0, 1], got {salinity}.")
        return 0.0
    if temperature_c < 0:
        logging.error(f"Temperature must be non-negative, got {temperature_c}.")
        return 0.0

    s = salinity * 1000.0
    t = temperature_c

    # pure water
    rho_w = (
        999.842594
        + 6.793952e-2 * t
        - 9.095290e-3 * t**2
        + 1.001685e-4 * t**3
        - 1.120083e-6 * t**4
        + 6.536332e-9 * t**5
    )
    b = 8.24493e-1 - 4.0899e-3 * t + 7.6438e-5 * t**2 - 8.2467e-7 * t**3 + 5.3875e-9 * t**4
    c = -5.72466e-3 + 1.0227e-4 * t - 1.6546e-6 * t**2
    d = 4.8314e-4
    return rho_w + b * s + c * s**1.5 + d * s**2


def froude_number(speed_ms: float, length_m: float, g: float = G) -> float:
    """Froude number v / sqrt(g L).

    Returns 0.0 for negative speed or length and for zero length.
    """
    if speed_ms < 0 or length_m < 0:
        logging.error(
            f"Froude number needs non-negative speed and length, "
            f"got speed={speed_ms} m/s and length={length_m} m."
        )
        return 0.0
    if length_m == 0:
        logging.error("Froude number needs a positive length.")
        return 0.0
    return speed_ms / np.sqrt(length_m * g)


def reynolds_number(
    speed_ms: float,
    length_m: float,
    salinity: float = DEFAULT_SALINITY,
    temperature_c: float = DEFAULT_TEMPERATURE_C,
) -> float:
    """Reynolds number v L / nu."""
    if speed_ms < 0 or length_m < 0 or salinity < 0 or temperature_c < 0:
        logging.error(
            f"Reynolds number needs non-negative inputs, got speed={speed_ms} m/s, "
            f"length={length_m} m, salinity={salinity}, temperature={temperature_c} C."
        )
        return 0.0
    nu = kinematic_viscosity(salinity=salinity, temperature_c=temperature_c)
    if nu == 0:
        return 0.0
    return speed_ms * length_m / nu
