"""
Design Validation Rules

Advisory checks on computed results, based on:
- ISO 281 validity range for rating life
- Common gear and linkage design practice
- Planetary assembly constraints

Validation never raises for a bad design. Hard failures from the
calculators are reported as ERROR messages carrying the error's code, so a
whole case can be checked in one pass.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..io import (
    AnalysisReport,
    BearingLifeResult,
    DesignCase,
    GearTrain,
    GearTrainResult,
    LinkageResult,
    PlanetaryStage,
)
from ..enums import LinkageClass
from . import bearing, gear_train, linkage
from .constants import (
    LOAD_RATIO_MAX,
    LOAD_RATIO_MIN,
    STAGE_RATIO_MAX,
    STAGE_RATIO_MIN_REDUCTION,
    STANDARD_MODULES_MM,
    TRANSMISSION_ANGLE_MAX_DEG,
    TRANSMISSION_ANGLE_MIN_DEG,
)
from .errors import DesignError
from .formulas import planet_circle_clearance


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def _result(messages: List[ValidationMessage]) -> ValidationResult:
    has_errors = any(m.severity == Severity.ERROR for m in messages)
    return ValidationResult(valid=not has_errors, messages=messages)


def _error_message(section: str, error: DesignError) -> ValidationMessage:
    return ValidationMessage(
        severity=Severity.ERROR,
        code=error.code,
        message=f"{section}: {error}",
        suggestion=None
    )


def is_standard_module(module: float, tolerance: float = 0.001) -> bool:
    """Check if module is an ISO 54 value"""
    nearest = min(STANDARD_MODULES_MM, key=lambda m: abs(m - module))
    return abs(module - nearest) < tolerance


# ─── Gear train ──────────────────────────────────────────────────────────


def _validate_stage_ratios(result: GearTrainResult) -> List[ValidationMessage]:
    """Flag single stages outside the practical ratio window"""
    messages = []

    for index, ratio in enumerate(result.stage_ratios, start=1):
        if ratio > STAGE_RATIO_MAX:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="STAGE_RATIO_HIGH",
                message=f"Stage {index} ratio {ratio:.2f}:1 exceeds {STAGE_RATIO_MAX}:1 for a single mesh",
                suggestion="Split the reduction over two stages"
            ))
        elif ratio < STAGE_RATIO_MIN_REDUCTION:
            messages.append(ValidationMessage(
                severity=Severity.INFO,
                code="STAGE_RATIO_OVERDRIVE",
                message=f"Stage {index} is an overdrive ({ratio:.3f}:1)",
                suggestion=None
            ))

    return messages


def _validate_planetary(train: GearTrain) -> List[ValidationMessage]:
    """Equal-spacing assembly and planet tip clearance"""
    messages = []

    for index, stage in enumerate(train.stages, start=1):
        if not isinstance(stage, PlanetaryStage):
            continue

        if (stage.sun_teeth + stage.ring_teeth) % stage.num_planets != 0:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="PLANET_ASSEMBLY",
                message=f"Stage {index}: {stage.num_planets} planets cannot be equally spaced "
                        f"(sun + ring = {stage.sun_teeth + stage.ring_teeth} teeth)",
                suggestion="Choose sun and ring teeth whose sum is divisible by the planet count"
            ))

        clearance = planet_circle_clearance(
            stage.module_mm, stage.sun_teeth, stage.planet_teeth, stage.num_planets
        )
        if clearance <= 0:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="PLANET_CLEARANCE",
                message=f"Stage {index}: adjacent planet tips overlap by {-clearance:.2f}mm",
                suggestion="Reduce the planet count or the planet size"
            ))

    return messages


def _validate_modules(train: GearTrain) -> List[ValidationMessage]:
    """Flag non-standard modules"""
    messages = []

    for index, stage in enumerate(train.stages, start=1):
        if not is_standard_module(stage.module_mm):
            messages.append(ValidationMessage(
                severity=Severity.INFO,
                code="MODULE_NON_STANDARD",
                message=f"Stage {index} module {stage.module_mm:.3f}mm is non-standard (ISO 54)",
                suggestion="Standard modules keep cutters and gauges off the special-order list"
            ))

    return messages


def validate_gear_train(train: GearTrain, result: GearTrainResult) -> ValidationResult:
    """Re-check a composed gear train against design practice."""
    messages: List[ValidationMessage] = []
    messages.extend(_validate_stage_ratios(result))
    messages.extend(_validate_planetary(train))
    messages.extend(_validate_modules(train))
    return _result(messages)


# ─── Linkage ─────────────────────────────────────────────────────────────


def _validate_transmission_angle(result: LinkageResult) -> List[ValidationMessage]:
    messages = []
    mu_min, mu_max = result.transmission_angle_range

    if result.poor_transmission:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="TRANSMISSION_ANGLE_POOR",
            message=f"Transmission angle ranges {mu_min:.1f}°..{mu_max:.1f}°, "
                    f"outside {TRANSMISSION_ANGLE_MIN_DEG:.0f}°..{TRANSMISSION_ANGLE_MAX_DEG:.0f}°",
            suggestion="Shorten the crank or lengthen coupler and rocker"
        ))

    return messages


def _validate_linkage_class(result: LinkageResult) -> List[ValidationMessage]:
    messages = []

    if result.linkage_class == LinkageClass.CHANGE_POINT:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="CHANGE_POINT",
            message="Linkage is a change-point mechanism (s + l = p + q)",
            suggestion="Output may switch branch at the folded position; add a guide or change a length"
        ))
    elif not result.is_crank_rocker:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="NON_CRANK_ROCKER",
            message=f"Linkage is a {result.linkage_class.value}, not a crank-rocker",
            suggestion=None
        ))

    return messages


def validate_linkage(result: LinkageResult) -> ValidationResult:
    """Re-check an analyzed linkage against design practice."""
    messages: List[ValidationMessage] = []
    messages.extend(_validate_transmission_angle(result))
    messages.extend(_validate_linkage_class(result))
    return _result(messages)


# ─── Bearing ─────────────────────────────────────────────────────────────


def _validate_load_ratio(result: BearingLifeResult) -> List[ValidationMessage]:
    """ISO 281 rating life validity range"""
    messages = []
    p_over_c = 1.0 / result.load_ratio

    if p_over_c > LOAD_RATIO_MAX:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="LOAD_RATIO_HIGH",
            message=f"P/C = {p_over_c:.2f} exceeds {LOAD_RATIO_MAX}: rating life is optimistic",
            suggestion="Select a bearing with a higher dynamic rating"
        ))
    elif p_over_c < LOAD_RATIO_MIN:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="LOAD_TOO_LIGHT",
            message=f"P/C = {p_over_c:.3f} is below {LOAD_RATIO_MIN}: rolling elements may skid",
            suggestion="Apply a minimum preload or choose a smaller bearing"
        ))

    return messages


def _validate_required_life(result: BearingLifeResult) -> List[ValidationMessage]:
    messages = []

    if result.meets_requirement is False:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="LIFE_BELOW_REQUIRED",
            message=f"Life {result.adjusted_life_hours:.0f}h at {result.reliability_percent}% reliability "
                    f"is below the required {result.required_life_hours:.0f}h "
                    f"(margin {result.safety_margin:.2f})",
            suggestion="Select a bearing with a higher dynamic rating or reduce the load"
        ))

    return messages


def validate_bearing(result: BearingLifeResult) -> ValidationResult:
    """Re-check a bearing life result against ISO 281 validity and the requirement."""
    messages: List[ValidationMessage] = []
    messages.extend(_validate_load_ratio(result))
    messages.extend(_validate_required_life(result))
    return _result(messages)


# ─── Whole case ──────────────────────────────────────────────────────────


def evaluate_case(case: DesignCase) -> Tuple[AnalysisReport, ValidationResult]:
    """
    Analyze every section of a design case and validate the results.

    A section whose calculation raises a DesignError is left out of the
    report and recorded as an ERROR message.

    Returns:
        Tuple of (AnalysisReport, ValidationResult)
    """
    messages: List[ValidationMessage] = []
    train_result = None
    linkage_result = None
    bearing_result = None

    if case.gear_train is not None:
        try:
            train_result = gear_train.compose(case.gear_train)
        except DesignError as e:
            messages.append(_error_message("gear_train", e))
        else:
            messages.extend(validate_gear_train(case.gear_train, train_result).messages)

    if case.linkage is not None:
        try:
            linkage_result = linkage.analyze(case.linkage)
        except DesignError as e:
            messages.append(_error_message("linkage", e))
        else:
            messages.extend(validate_linkage(linkage_result).messages)

    if case.bearing is not None:
        if case.speed_rpm is None:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="SPEED_MISSING",
                message="bearing: speed_rpm is required to compute rating life in hours",
                suggestion="Add speed_rpm to the case"
            ))
        else:
            try:
                bearing_result = bearing.evaluate(
                    case.bearing,
                    case.speed_rpm,
                    required_life_hours=case.required_life_hours,
                    reliability_percent=case.reliability_percent,
                )
            except DesignError as e:
                messages.append(_error_message("bearing", e))
            else:
                messages.extend(validate_bearing(bearing_result).messages)

    report = AnalysisReport(
        name=case.name,
        gear_train=train_result,
        linkage=linkage_result,
        bearing=bearing_result,
    )
    return report, _result(messages)
