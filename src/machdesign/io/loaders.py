"""
Value objects and JSON input/output for design cases.

A design case bundles the parameter sets the calculator evaluates: a gear
train, a four-bar linkage and a bearing load case, each optional.

Uses Pydantic for automatic validation and enum coercion. Models only check
types; physical ranges are enforced by the calculator so they surface as
design errors rather than schema errors.
"""

import json
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, validator

from ..enums import BearingType, FixedMember, LinkageClass, StageKind

SCHEMA_VERSION = "1.0"

# Check Pydantic version for API compatibility
try:
    from pydantic import __version__ as PYDANTIC_VERSION
    PYDANTIC_V2 = int(PYDANTIC_VERSION.split('.')[0]) >= 2
except (ImportError, ValueError):
    PYDANTIC_V2 = False


def _coerce_enum(enum_class, v):
    if isinstance(v, str):
        return enum_class(v.lower())
    return v


class GearStage(BaseModel):
    """Simple gear mesh: one driver, one driven gear."""
    module_mm: float
    teeth_driver: int
    teeth_driven: int
    kind: StageKind = StageKind.EXTERNAL

    @validator('kind', pre=True)
    def coerce_kind(cls, v):
        return _coerce_enum(StageKind, v)

    class Config:
        extra = 'ignore'
        frozen = True


class PlanetaryStage(BaseModel):
    """Sun / planets / ring stage with one member held stationary."""
    module_mm: float
    sun_teeth: int
    planet_teeth: int
    ring_teeth: int
    fixed_member: Optional[FixedMember] = None  # Required by the composer, never inferred
    num_planets: int = 3
    kind: StageKind = StageKind.PLANETARY

    @validator('kind', pre=True)
    def coerce_kind(cls, v):
        return _coerce_enum(StageKind, v)

    @validator('fixed_member', pre=True)
    def coerce_fixed_member(cls, v):
        if v is None:
            return None
        return _coerce_enum(FixedMember, v)

    class Config:
        extra = 'ignore'
        frozen = True


AnyStage = Union[GearStage, PlanetaryStage]


class GearTrain(BaseModel):
    """Ordered sequence of stages, input first."""
    stages: List[AnyStage]

    @validator('stages', pre=True)
    def dispatch_stages(cls, v):
        # Tagged variant: pick the stage model from 'kind'
        if not isinstance(v, (list, tuple)):
            return v
        stages = []
        for item in v:
            if isinstance(item, dict):
                kind = _coerce_enum(StageKind, item.get('kind', StageKind.EXTERNAL))
                if kind == StageKind.PLANETARY:
                    item = _parse_obj(PlanetaryStage, item)
                else:
                    item = _parse_obj(GearStage, item)
            stages.append(item)
        return stages

    class Config:
        extra = 'ignore'
        frozen = True


class FourBarLinkage(BaseModel):
    """Four-bar linkage with link lengths given in role order."""
    link_lengths: Tuple[float, float, float, float]  # ground, crank, coupler, rocker (mm)

    @property
    def ground(self) -> float:
        return self.link_lengths[0]

    @property
    def crank(self) -> float:
        return self.link_lengths[1]

    @property
    def coupler(self) -> float:
        return self.link_lengths[2]

    @property
    def rocker(self) -> float:
        return self.link_lengths[3]

    class Config:
        extra = 'ignore'
        frozen = True


class BearingLoadCase(BaseModel):
    """Applied loads and catalogue rating for one rolling bearing."""
    radial_force_n: float
    axial_force_n: float = 0.0
    x_factor: float = 1.0
    y_factor: float = 0.0
    dynamic_capacity_n: float
    bearing_type: BearingType = BearingType.BALL
    life_exponent: Optional[float] = None  # 3 for ball, 10/3 for roller when omitted

    @validator('bearing_type', pre=True)
    def coerce_bearing_type(cls, v):
        return _coerce_enum(BearingType, v)

    class Config:
        extra = 'ignore'
        frozen = True


class DesignCase(BaseModel):
    """Complete input document for one analysis run."""
    name: Optional[str] = None
    gear_train: Optional[GearTrain] = None
    linkage: Optional[FourBarLinkage] = None
    bearing: Optional[BearingLoadCase] = None
    speed_rpm: Optional[float] = None  # Bearing shaft speed
    required_life_hours: Optional[float] = None
    reliability_percent: int = 90

    class Config:
        extra = 'ignore'
        frozen = True


# ─── Results ─────────────────────────────────────────────────────────────


class GearTrainResult(BaseModel):
    """Composed gear train ratio."""
    overall_ratio: float  # Magnitude, input speed / output speed
    direction: int  # +1 output turns with input, -1 reversed
    stage_ratios: Tuple[float, ...]
    stage_directions: Tuple[int, ...]
    centre_distances_mm: Tuple[float, ...] = ()

    @property
    def signed_ratio(self) -> float:
        return self.overall_ratio * self.direction

    class Config:
        extra = 'ignore'
        frozen = True


class LinkageResult(BaseModel):
    """Four-bar feasibility and transmission angle bounds."""
    is_crank_rocker: bool
    is_grashof: bool
    linkage_class: LinkageClass
    transmission_angle_range: Tuple[float, float]  # (min, max) degrees
    poor_transmission: bool

    class Config:
        extra = 'ignore'
        frozen = True


class BearingLifeResult(BaseModel):
    """Rating life and margin for one bearing load case."""
    equivalent_load_n: float
    l10_revolutions: float
    l10_hours: float
    load_ratio: float  # C / P
    reliability_percent: int
    adjusted_life_hours: float
    required_life_hours: Optional[float] = None
    safety_margin: Optional[float] = None  # adjusted life / required life

    @property
    def meets_requirement(self) -> Optional[bool]:
        if self.safety_margin is None:
            return None
        return self.safety_margin >= 1.0

    class Config:
        extra = 'ignore'
        frozen = True


class AnalysisReport(BaseModel):
    """Results for every section present in a DesignCase."""
    name: Optional[str] = None
    gear_train: Optional[GearTrainResult] = None
    linkage: Optional[LinkageResult] = None
    bearing: Optional[BearingLifeResult] = None

    class Config:
        extra = 'ignore'
        frozen = True


def _parse_obj(model_class, data: dict):
    """Parse dict to model, handling both Pydantic v1 and v2."""
    if PYDANTIC_V2:
        return model_class.model_validate(data)
    else:
        return model_class.parse_obj(data)


def _to_dict(model) -> dict:
    """Convert model to a JSON-compatible dict, handling both Pydantic v1 and v2."""
    if PYDANTIC_V2:
        return model.model_dump(mode='json', exclude_none=True)
    else:
        return json.loads(model.json(exclude_none=True))


def load_case_json(filepath: Union[str, Path]) -> DesignCase:
    """
    Load a design case from JSON.

    Args:
        filepath: Path to a case file

    Returns:
        DesignCase with whichever sections the file defines

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON is malformed or defines no section
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Case file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    # Accept a 'case' wrapper
    if isinstance(data, dict) and 'case' in data:
        data = data['case']

    if not isinstance(data, dict):
        raise ValueError("Invalid case JSON - root must be an object")

    if not any(section in data for section in ('gear_train', 'linkage', 'bearing')):
        raise ValueError(
            "Invalid case JSON - must contain at least one of 'gear_train', 'linkage', 'bearing'"
        )

    return _parse_obj(DesignCase, data)


def save_case_json(case: DesignCase, filepath: Union[str, Path]) -> None:
    """Save a design case to JSON, tagged with the schema version."""
    filepath = Path(filepath)

    data = _to_dict(case)
    data['schema_version'] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)
