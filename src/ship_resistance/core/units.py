import pint

_ureg = pint.UnitRegistry()


def knots_to_ms(speed_knots: float) -> float:
    """Convert speed from knots to meters per second."""
    return float((speed_knots * _ureg.knot) / _ureg.meter_per_second)


def ms_to_knots(speed_ms: float) -> float:
    """Convert speed from meters per second to knots."""
    return float((speed_ms * _ureg.meter_per_second) / _ureg.knot)


def rpm_to_rad_s(rpm: float) -> float:
    """Convert revolutions per minute to angular velocity in rad/s."""
    return float((rpm * _ureg.revolutions_per_minute).to(_ureg.radian / _ureg.second).m)


def rpm_to_rps(rpm: float) -> float:
    """Convert revolutions per minute to revolutions per second."""
    return float((rpm * _ureg.revolutions_per_minute).to(_ureg.revolutions_per_second).m)


def rps_to_rpm(rps: float) -> float:
    """Convert revolutions per second to revolutions per minute."""
    return float((rps * _ureg.revolutions_per_second).to(_ureg.revolutions_per_minute).m)


def nm_to_m(length_nm: float) -> float:
    """Convert nanometers to meters."""
    return float((length_nm * _ureg.nanometer).to(_ureg.meter).m)


def kw_to_w(power_kw: float) -> float:
    return float((power_kw * _ureg.kilowatt).to(_ureg.watt).m)
