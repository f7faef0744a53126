import pytest

from ship_resistance.core.units import knots_to_ms
from ship_resistance.propulsion import Engine, EngineCurves, EngineProperties


SHAFT_LAYOUT = (
    EngineProperties(brake_power_kw=2_500.0, rpm=60.0, efficiency=0.40),
    EngineProperties(brake_power_kw=5_000.0, rpm=80.0, efficiency=0.45),
    EngineProperties(brake_power_kw=7_500.0, rpm=95.0, efficiency=0.47),
    EngineProperties(brake_power_kw=10_000.0, rpm=105.0, efficiency=0.46),
)


@pytest.fixture
def engine_factory():
    """Engines of a slow two-stroke layout with a 20 knot design speed."""

    def make(**kwargs):
        return Engine(
            EngineCurves.from_layout(SHAFT_LAYOUT),
            max_speed_ms=knots_to_ms(20.0),
            **kwargs,
        )

    return make
