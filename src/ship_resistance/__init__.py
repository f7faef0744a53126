"""
Ship resistance and propulsion package.

Four-layer architecture:
- core: physical constants, hydrology, hull geometry, sea state and ship
- resistance: strategy interface, Holtrop and Mennen, Lang and Mao
- propulsion: lookup curves, engine, gearbox and propeller
- app: JSON ship configuration, resistance curves and CLI

Examples
--------
>>> from ship_resistance.core import Ship, ShipHull
>>> from ship_resistance.resistance import HoltropMethod, LangMaoMethod
>>> from ship_resistance.propulsion import Engine, Gearbox, Propeller
>>> from ship_resistance.app import load_ship, resistance_curve
"""

__version__ = "2025dev"
