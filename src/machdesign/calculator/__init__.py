"""
Machine Design Calculator - gear trains, four-bar linkages and bearing life.

All calculators are pure functions over immutable value objects from
``machdesign.io``.

Example:
    >>> from machdesign.calculator import compose, analyze, evaluate_bearing
    >>> from machdesign.io import GearTrain, GearStage
    >>>
    >>> train = GearTrain(stages=[GearStage(module_mm=2.0, teeth_driver=20, teeth_driven=60)])
    >>> compose(train).overall_ratio
    3.0
"""

from .constants import (
    MM_TO_M,
    M_TO_MM,
    SECONDS_PER_MINUTE,
    MILLION_REVOLUTIONS,
    RPM_TO_RAD_PER_S,
    STANDARD_MODULES_MM,
    TRANSMISSION_ANGLE_MIN_DEG,
    TRANSMISSION_ANGLE_MAX_DEG,
    LIFE_EXPONENT_BALL,
    LIFE_EXPONENT_ROLLER,
    RELIABILITY_FACTORS,
)

from .errors import (
    DesignError,
    InvalidGeometry,
    ConfigurationError,
    UnclosableLinkage,
    InvalidLoad,
    InvalidSpeed,
    DivisionByZero,
)

from .formulas import (
    gear_ratio,
    pitch_diameter,
    tip_diameter,
    root_diameter,
    centre_distance,
    belt_ratio,
    open_belt_length,
    chain_length_pitches,
    spring_index,
    wahl_factor,
    solid_shaft_diameter,
    flywheel_energy,
    bolt_tensile_stress_area,
    pitch_line_velocity,
    planet_circle_clearance,
)

from .gear_train import (
    compose,
    stage_ratio,
    output_speed,
    output_torque,
)

from .linkage import (
    analyze,
    is_grashof,
    grashof_class,
    transmission_angle,
)

from .bearing import (
    equivalent_load,
    life_exponent,
    life_revolutions,
    life_hours,
    reliability_factor,
    adjusted_life_hours,
    required_dynamic_capacity,
)
from .bearing import evaluate as evaluate_bearing

from .validation import (
    Severity,
    ValidationMessage,
    ValidationResult,
    is_standard_module,
    validate_gear_train,
    validate_linkage,
    validate_bearing,
    evaluate_case,
)

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

from ..enums import StageKind, FixedMember, LinkageClass, BearingType


__all__ = [
    # Units and constants
    "MM_TO_M",
    "M_TO_MM",
    "SECONDS_PER_MINUTE",
    "MILLION_REVOLUTIONS",
    "RPM_TO_RAD_PER_S",
    "STANDARD_MODULES_MM",
    "TRANSMISSION_ANGLE_MIN_DEG",
    "TRANSMISSION_ANGLE_MAX_DEG",
    "LIFE_EXPONENT_BALL",
    "LIFE_EXPONENT_ROLLER",
    "RELIABILITY_FACTORS",

    # Enums
    "StageKind",
    "FixedMember",
    "LinkageClass",
    "BearingType",

    # Errors
    "DesignError",
    "InvalidGeometry",
    "ConfigurationError",
    "UnclosableLinkage",
    "InvalidLoad",
    "InvalidSpeed",
    "DivisionByZero",

    # Formulas
    "gear_ratio",
    "pitch_diameter",
    "tip_diameter",
    "root_diameter",
    "centre_distance",
    "belt_ratio",
    "open_belt_length",
    "chain_length_pitches",
    "spring_index",
    "wahl_factor",
    "solid_shaft_diameter",
    "flywheel_energy",
    "bolt_tensile_stress_area",
    "pitch_line_velocity",
    "planet_circle_clearance",

    # Gear trains
    "compose",
    "stage_ratio",
    "output_speed",
    "output_torque",

    # Linkages
    "analyze",
    "is_grashof",
    "grashof_class",
    "transmission_angle",

    # Bearings
    "equivalent_load",
    "life_exponent",
    "life_revolutions",
    "life_hours",
    "reliability_factor",
    "adjusted_life_hours",
    "required_dynamic_capacity",
    "evaluate_bearing",

    # Validation
    "Severity",
    "ValidationMessage",
    "ValidationResult",
    "is_standard_module",
    "validate_gear_train",
    "validate_linkage",
    "validate_bearing",
    "evaluate_case",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
