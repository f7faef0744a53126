from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Mapping
import math

from .errors import ConfigurationError
from .hydrology import froude_number


class CStern(IntEnum):
    """Stern shape parameter, used additively in several Holtrop coefficients."""

    PRAM_WITH_GONDOLA = -25
    V_SHAPED = -10
    NORMAL = 0
    U_SHAPED = 10


class ScrewVesselType(Enum):
    SINGLE = "single"
    TWIN = "twin"


class Appendage(Enum):
    RUDDER_BEHIND_SKEG = "rudder_behind_skeg"
    RUDDER_BEHIND_STERN = "rudder_behind_stern"
    SLENDER_TWIN_SCREW_RUDDER = "slender_twin_screw_rudder"
    THICK_TWIN_SCREW_RUDDER = "thick_twin_screw_rudder"
    SHAFT_BRACKETS = "shaft_brackets"
    SKEG = "skeg"
    STRUT_BOSSING = "strut_bossing"
    HULL_BOSSING = "hull_bossing"
    EXPOSED_SHAFTS_10_DEGREE = "exposed_shafts_10_degree"
    EXPOSED_SHAFTS_20_DEGREE = "exposed_shafts_20_degree"
    STABILIZER_FINS = "stabilizer_fins"
    DOME = "dome"
    BILGE_KEELS = "bilge_keels"


# k2 per appendage kind, the form factor is 1 + k2 (Holtrop & Mennen, 1982)
APPENDAGE_FORM_FACTORS: Mapping[Appendage, float] = MappingProxyType(
    {
        Appendage.RUDDER_BEHIND_SKEG: 0.5,
        Appendage.RUDDER_BEHIND_STERN: 0.5,
        Appendage.SLENDER_TWIN_SCREW_RUDDER: 1.5,
        Appendage.THICK_TWIN_SCREW_RUDDER: 2.5,
        Appendage.SHAFT_BRACKETS: 4.0,
        Appendage.SKEG: 1.0,
        Appendage.STRUT_BOSSING: 3.0,
        Appendage.HULL_BOSSING: 1.0,
        Appendage.EXPOSED_SHAFTS_10_DEGREE: 1.0,
        Appendage.EXPOSED_SHAFTS_20_DEGREE: 4.0,
        Appendage.STABILIZER_FINS: 1.8,
        Appendage.DOME: 1.7,
        Appendage.BILGE_KEELS: 0.4,
    }
)


class WetSurfaceAreaMethod(Enum):
    HOLTROP = "holtrop"
    SCHENZLE = "schenzle"
    CARGO = "cargo"
    TRAWLERS = "trawlers"


class WaterPlaneCoefficientMethod(Enum):
    U_SHAPE = "u_shape"
    AVERAGE_SECTION = "average_section"
    V_SECTION = "v_section"
    GENERAL_CARGO = "general_cargo"
    CONTAINER = "container"


class BlockCoefficientMethod(Enum):
    AYRE = "ayre"
    JENSEN = "jensen"
    SCHNEEKLUTH = "schneekluth"


DEFAULT_SURFACE_ROUGHNESS_NM = 150.0
DEFAULT_LONGITUDINAL_BUOYANCY_CENTER = 0.5

# validity range of the Holtrop regression
HOLTROP_MAX_FROUDE = 0.45
HOLTROP_PRISMATIC_RANGE = (0.55, 0.85)
HOLTROP_LENGTH_BEAM_RANGE = (3.9, 9.5)


def _normalize_appendages(appendages) -> tuple:
    if appendages is None:
        return ()
    if isinstance(appendages, Mapping):
        appendages = appendages.items()
    areas = {}
    for kind, area in appendages:
        areas[Appendage(kind)] = float(area)
    order = list(Appendage)
    return tuple(sorted(areas.items(), key=lambda item: order.index(item[0])))


@dataclass(frozen=True)
class ShipHull:
    """Static hull geometry of one ship.

    Fields left at ``None`` are derived in ``__post_init__``: drafts from each
    other, the missing one of block, prismatic and midship coefficient, the
    displacement, the waterplane coefficient, the wetted surface, the run length,
    the half entrance angle and the height of the bulb's centre of area.

    The hull is immutable and hashable so it can key the coefficient caches of
    the resistance methods. Appendages are stored as sorted ``(Appendage, area)``
    pairs; use ``with_appendage`` / ``without_appendage`` to get modified hulls.

    The ``use_default_roughness`` flag decides whether the roughness allowance
    of the correlation term vanishes. It is resolved once here and never
    inferred from the roughness value afterwards.
    """

    waterline_length_m: float = None
    length_between_perpendiculars_m: float = None
    beam_m: float = None
    mean_draft_m: float = None
    forward_draft_m: float = None
    aft_draft_m: float = None
    volumetric_displacement_m3: float = None
    wetted_surface_m2: float = None
    block_coefficient: float = None
    prismatic_coefficient: float = None
    midship_section_coefficient: float = None
    waterplane_area_coefficient: float = None
    longitudinal_buoyancy_center: float = DEFAULT_LONGITUDINAL_BUOYANCY_CENTER
    half_entrance_angle_deg: float = None
    run_length_m: float = None
    bulbous_bow_transverse_area_m2: float = 0.0
    bulbous_bow_center_height_m: float = None
    immersed_transom_area_m2: float = 0.0
    surface_roughness_nm: float = DEFAULT_SURFACE_ROUGHNESS_NM
    use_default_roughness: bool = None
    stern_shape: CStern = CStern.NORMAL
    screw_vessel_type: ScrewVesselType = ScrewVesselType.SINGLE
    appendages: tuple = ()
    propeller_diameter_m: float = None
    propeller_pitch_m: float = None
    propeller_expanded_area_ratio: float = None
    projected_frontal_area_above_waterline_m2: float = 0.0
    lengthwise_projection_area_m2: float = 0.0
    wet_surface_area_method: WetSurfaceAreaMethod = WetSurfaceAreaMethod.HOLTROP
    waterplane_coefficient_method: WaterPlaneCoefficientMethod = (
        WaterPlaneCoefficientMethod.AVERAGE_SECTION
    )

    def __post_init__(self):
        """Check required dimensions and fill in derived properties."""
        def _set(name, value):
            object.__setattr__(self, name, value)

        if self.waterline_length_m is None or self.waterline_length_m <= 0:
            raise ConfigurationError("Waterline length must be given and positive.")
        if self.beam_m is None or self.beam_m <= 0:
            raise ConfigurationError("Beam must be given and positive.")

        if self.length_between_perpendiculars_m is None:
            _set("length_between_perpendiculars_m", self.waterline_length_m)
        _set("stern_shape", CStern(self.stern_shape))
        _set("screw_vessel_type", ScrewVesselType(self.screw_vessel_type))
        _set("wet_surface_area_method", WetSurfaceAreaMethod(self.wet_surface_area_method))
        _set(
            "waterplane_coefficient_method",
            WaterPlaneCoefficientMethod(self.waterplane_coefficient_method),
        )
        _set("appendages", _normalize_appendages(self.appendages))

        # drafts
        fwd, aft, mean = self.forward_draft_m, self.aft_draft_m, self.mean_draft_m
        if mean is None:
            if fwd is not None and aft is not None:
                mean = (fwd + aft) / 2.0
            elif fwd is not None or aft is not None:
                mean = fwd if fwd is not None else aft
            else:
                raise ConfigurationError("At least one draft must be given.")
        fwd = mean if fwd is None else fwd
        aft = mean if aft is None else aft
        if min(fwd, aft, mean) < 0:
            raise ConfigurationError("Drafts must be non-negative.")
        _set("mean_draft_m", mean)
        _set("forward_draft_m", fwd)
        _set("aft_draft_m", aft)

        # block / prismatic / midship coefficients and displacement
        cb, cp, cm = (
            self.block_coefficient,
            self.prismatic_coefficient,
            self.midship_section_coefficient,
        )
        if cb is None and self.volumetric_displacement_m3 is not None:
            cb = self.volumetric_displacement_m3 / (
                self.waterline_length_m * self.beam_m * mean
            )
        if sum(c is None for c in (cb, cp, cm)) > 1:
            raise ConfigurationError(
                "At least two of block, prismatic and midship coefficients "
                "(or the displacement and one coefficient) must be given."
            )
        if cb is None:
            cb = cp * cm
        elif cp is None:
            cp = cb / cm
        elif cm is None:
            cm = cb / cp
        _set("block_coefficient", cb)
        _set("prismatic_coefficient", cp)
        _set("midship_section_coefficient", cm)
        if self.volumetric_displacement_m3 is None:
            _set(
                "volumetric_displacement_m3",
                self.waterline_length_m * self.beam_m * mean * cb,
            )

        if self.waterplane_area_coefficient is None:
            _set(
                "waterplane_area_coefficient",
                calc_waterplane_coefficient(self, self.waterplane_coefficient_method),
            )
        if self.bulbous_bow_center_height_m is None:
            _set("bulbous_bow_center_height_m", 0.6 * fwd)
        if self.wetted_surface_m2 is None:
            _set(
                "wetted_surface_m2",
                calc_wetted_surface(self, self.wet_surface_area_method),
            )
        if self.run_length_m is None:
            _set("run_length_m", calc_run_length(self))
        if self.half_entrance_angle_deg is None:
            _set("half_entrance_angle_deg", calc_half_entrance_angle(self))
        if self.use_default_roughness is None:
            _set(
                "use_default_roughness",
                self.surface_roughness_nm == DEFAULT_SURFACE_ROUGHNESS_NM,
            )

    @property
    def total_appendage_area_m2(self) -> float:
        return sum(area for _, area in self.appendages)

    @property
    def appendage_areas(self) -> dict:
        """Appendage wetted areas keyed by appendage kind."""
        return dict(self.appendages)

    @property
    def length_beam_ratio(self) -> float:
        return self.waterline_length_m / self.beam_m

    def with_appendage(self, kind: Appendage, area_m2: float) -> ShipHull:
        """Return a hull with the given appendage added or its area replaced."""
        areas = self.appendage_areas
        areas[Appendage(kind)] = area_m2
        return replace(self, appendages=tuple(areas.items()))

    def without_appendage(self, kind: Appendage) -> ShipHull:
        areas = self.appendage_areas
        areas.pop(Appendage(kind), None)
        return replace(self, appendages=tuple(areas.items()))

    def with_surface_roughness(self, roughness_nm: float) -> ShipHull:
        """Return a hull with a measured (non-reference) surface roughness."""
        return replace(
            self, surface_roughness_nm=roughness_nm, use_default_roughness=False
        )

    def to_dict(self) -> dict[str, Any]:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.name.lower()
            data[f.name] = value
        data["appendages"] = {kind.value: area for kind, area in self.appendages}
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipHull:
        """Construct a hull from a plain dictionary, e.g., parsed from JSON."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown hull parameters: {sorted(unknown)}")
        kwargs = dict(data)
        enum_fields = {
            "stern_shape": CStern,
            "screw_vessel_type": ScrewVesselType,
            "wet_surface_area_method": WetSurfaceAreaMethod,
            "waterplane_coefficient_method": WaterPlaneCoefficientMethod,
        }
        for name, enum_type in enum_fields.items():
            if name in kwargs and isinstance(kwargs[name], str):
                kwargs[name] = _enum_from_string(enum_type, kwargs[name])
        if "appendages" in kwargs:
            kwargs["appendages"] = tuple(
                (_enum_from_string(Appendage, kind), area)
                for kind, area in dict(kwargs["appendages"]).items()
            )
        return cls(**kwargs)


def _enum_from_string(enum_type, value: str):
    key = value.strip().upper()
    if key in enum_type.__members__:
        return enum_type[key]
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown {enum_type.__name__} '{value}'. "
            f"Known: {[m.name.lower() for m in enum_type]}"
        )


def calc_wetted_surface(hull: ShipHull, method: WetSurfaceAreaMethod) -> float:
    """Wetted hull surface in m2 from main dimensions.

    Parameters
    ----------
    hull: ShipHull
        Hull with main dimensions and form coefficients.
    method: WetSurfaceAreaMethod
        HOLTROP (Holtrop & Mennen, 1982), SCHENZLE, CARGO or TRAWLERS
        (regressions for cargo vessels and trawlers after Schneekluth & Bertram).

    Returns
    -------
    float:
        Wetted surface without appendages in m2.
    """
    L = hull.waterline_length_m
    B = hull.beam_m
    T = hull.mean_draft_m
    CB = hull.block_coefficient
    CM = hull.midship_section_coefficient
    CWP = hull.waterplane_area_coefficient
    V = hull.volumetric_displacement_m3

    if method == WetSurfaceAreaMethod.HOLTROP:
        return L * (2.0 * T + B) * math.sqrt(CM) * (
            0.453
            + 0.4425 * CB
            - 0.2862 * CM
            - 0.003467 * B / T
            + 0.3696 * CWP
        ) + 2.38 * hull.bulbous_bow_transverse_area_m2 / CB
    elif method == WetSurfaceAreaMethod.SCHENZLE:
        b = CWP * B / T
        c = L / B / CM
        a1 = (1.0 + b / 2.0 - math.sqrt(1.0 + b * b / 4.0)) * 2.0 / b
        a2 = 1.0 + c - math.sqrt(1.0 + c * c)
        cn1 = 0.8 + 0.2 * b
        cn2 = 1.15 + 0.2833 * c
        cpx = CB / CM
        cpz = CB / CWP
        c1 = 1.0 - a1 * math.sqrt(1.0 - math.pow(2.0 * cpz - 1.0, cn1))
        c2 = 1.0 - a2 * math.sqrt(1.0 - math.pow(2.0 * cpx - 1.0, cn2))
        return (2.0 + c1 * b + 2.0 * c2 / c) * L * T
    elif method == WetSurfaceAreaMethod.CARGO:
        return (V / B) * (1.7 / (CB - 0.2 * (CB - 0.65))) + B / T
    elif method == WetSurfaceAreaMethod.TRAWLERS:
        return (V / B) * (1.7 / CB) + (B / T) * (0.92 + 0.092 / CB)
    raise ConfigurationError(f"Unknown wetted surface method: {method!r}")


def calc_waterplane_coefficient(
    hull: ShipHull, method: WaterPlaneCoefficientMethod
) -> float:
    """Waterplane area coefficient estimated from block / prismatic coefficient."""
    CB = hull.block_coefficient
    CP = hull.prismatic_coefficient
    if method == WaterPlaneCoefficientMethod.U_SHAPE:
        return 0.95 * CP + 0.17 * (1.0 - CP) ** (1.0 / 3.0)
    elif method == WaterPlaneCoefficientMethod.AVERAGE_SECTION:
        return (1.0 + 2.0 * CB) / 3.0
    elif method == WaterPlaneCoefficientMethod.V_SECTION:
        return math.sqrt(CB) - 0.025
    elif method == WaterPlaneCoefficientMethod.GENERAL_CARGO:
        return 0.763 * (CP + 0.34)
    elif method == WaterPlaneCoefficientMethod.CONTAINER:
        return 3.226 * (CP - 0.36)
    raise ConfigurationError(f"Unknown waterplane coefficient method: {method!r}")


def calc_block_coefficient(
    speed_ms: float,
    length_m: float,
    beam_m: float,
    method: BlockCoefficientMethod,
) -> float:
    """Block coefficient estimated from the design speed.

    Jensen's regression is valid for 0.15 < Fn < 0.32 and Schneekluth's for
    0.14 <= Fn <= 0.32; outside these ranges a ``ConfigurationError`` is raised.
    Schneekluth's estimate uses Fn capped at 0.30 and is clamped to [0.48, 0.85].
    """
    fn = froude_number(speed_ms, length_m)
    if method == BlockCoefficientMethod.AYRE:
        return 1.06 - 1.68 * fn
    elif method == BlockCoefficientMethod.JENSEN:
        if not 0.15 < fn < 0.32:
            raise ConfigurationError(
                f"Jensen's block coefficient is valid for 0.15 < Fn < 0.32, got Fn={fn:.3f}."
            )
        return -4.22 + 27.8 * math.sqrt(fn) - 39.1 * fn + 46.6 * fn**3
    elif method == BlockCoefficientMethod.SCHNEEKLUTH:
        if not 0.14 <= fn <= 0.32:
            raise ConfigurationError(
                f"Schneekluth's block coefficient is valid for 0.14 <= Fn <= 0.32, "
                f"got Fn={fn:.3f}."
            )
        fn = min(fn, 0.30)
        cb = (0.14 / fn) * ((length_m / beam_m + 20.0) / 26.0)
        return min(max(cb, 0.48), 0.85)
    raise ConfigurationError(f"Unknown block coefficient method: {method!r}")


def calc_run_length(hull: ShipHull) -> float:
    """Length of run in m (Holtrop & Mennen, 1982)."""
    CP = hull.prismatic_coefficient
    lcb = hull.longitudinal_buoyancy_center
    return hull.waterline_length_m * (
        1.0 - CP + 0.06 * CP * lcb / (4.0 * CP - 1.0)
    )


def calc_half_entrance_angle(hull: ShipHull) -> float:
    """Half angle of entrance of the waterline in degrees (Holtrop, 1984)."""
    L = hull.waterline_length_m
    B = hull.beam_m
    CP = hull.prismatic_coefficient
    lcb = hull.longitudinal_buoyancy_center
    exponent = -(
        (L / B) ** 0.80856
        * (1.0 - hull.waterplane_area_coefficient) ** 0.30484
        * (1.0 - CP - 0.0225 * lcb) ** 0.6367
        * (hull.run_length_m / B) ** 0.34574
        * (100.0 * hull.volumetric_displacement_m3 / L**3) ** 0.16302
    )
    return 1.0 + 89.0 * math.exp(exponent)


def holtrop_validity_warnings(hull: ShipHull, froude: float = None) -> tuple:
    """Describe where the hull (and speed) leave the range of the Holtrop regression."""
    warnings = []
    if froude is not None and froude > HOLTROP_MAX_FROUDE:
        warnings.append(
            f"Froude number {froude:.3f} exceeds {HOLTROP_MAX_FROUDE} "
            "of the Holtrop regression."
        )
    cp_min, cp_max = HOLTROP_PRISMATIC_RANGE
    if not cp_min <= hull.prismatic_coefficient <= cp_max:
        warnings.append(
            f"Prismatic coefficient {hull.prismatic_coefficient:.3f} "
            f"is outside [{cp_min}, {cp_max}]."
        )
    lb_min, lb_max = HOLTROP_LENGTH_BEAM_RANGE
    if not lb_min <= hull.length_beam_ratio <= lb_max:
        warnings.append(
            f"Length/beam ratio {hull.length_beam_ratio:.2f} "
            f"is outside [{lb_min}, {lb_max}]."
        )
    return tuple(warnings)
