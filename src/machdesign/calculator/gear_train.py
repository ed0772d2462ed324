"""
Gear Train Composer

Composes the speed ratio of a multi-stage train from simple external,
internal (ring) and planetary stages.

Ratios are speed reductions (input speed / output speed). Each stage
reports its magnitude and its direction separately; the overall magnitude
is the product of stage magnitudes and the overall direction the product of
stage directions.

Planetary relations (Willis equation, standard proportions):
- Ring fixed:    sun → carrier,  i = 1 + Zr/Zs,        same direction
- Sun fixed:     carrier → ring, i = Zr / (Zr + Zs),   same direction
- Carrier fixed: sun → ring,     i = Zr / Zs,          reversed
"""

import logging
from typing import List, Optional, Tuple

from ..enums import FixedMember, StageKind
from ..io import GearTrain, GearTrainResult, PlanetaryStage
from .constants import MODULE_MAX_MM, MODULE_MIN_MM, TEETH_MAX, TEETH_MIN
from .errors import ConfigurationError, InvalidGeometry
from .formulas import centre_distance, gear_ratio
from .ranges import check_integral, check_positive, check_range, check_teeth

logger = logging.getLogger(__name__)


def _validate_stage(stage, index: int) -> None:
    """Gate one stage before any ratio is computed."""
    prefix = f"stage {index}"
    module = check_positive(f"{prefix} module_mm", stage.module_mm)
    check_range(f"{prefix} module_mm", module, MODULE_MIN_MM, MODULE_MAX_MM, unit="mm")

    if isinstance(stage, PlanetaryStage):
        if stage.kind != StageKind.PLANETARY:
            raise ConfigurationError(
                f"{prefix}: sun/planet/ring stage must have kind 'planetary', got '{stage.kind.value}'"
            )
        sun = check_teeth(f"{prefix} sun_teeth", stage.sun_teeth, TEETH_MIN, TEETH_MAX)
        planet = check_teeth(f"{prefix} planet_teeth", stage.planet_teeth, TEETH_MIN, TEETH_MAX)
        ring = check_teeth(f"{prefix} ring_teeth", stage.ring_teeth, TEETH_MIN, TEETH_MAX)
        check_integral(f"{prefix} num_planets", stage.num_planets)
        check_positive(f"{prefix} num_planets", stage.num_planets)

        if stage.fixed_member is None:
            raise ConfigurationError(
                f"{prefix}: planetary stage must state which member is fixed (ring, sun or carrier)"
            )
        if ring != sun + 2 * planet:
            raise ConfigurationError(
                f"{prefix}: ring_teeth ({ring}) must equal sun_teeth + 2 × planet_teeth "
                f"({sun} + 2 × {planet} = {sun + 2 * planet})"
            )
        return

    if stage.kind == StageKind.PLANETARY:
        raise ConfigurationError(
            f"{prefix}: planetary stage needs sun_teeth, planet_teeth and ring_teeth"
        )
    check_teeth(f"{prefix} teeth_driver", stage.teeth_driver, TEETH_MIN, TEETH_MAX)
    check_teeth(f"{prefix} teeth_driven", stage.teeth_driven, TEETH_MIN, TEETH_MAX)


def _planetary_ratio(stage: PlanetaryStage) -> Tuple[float, int]:
    sun = stage.sun_teeth
    ring = stage.ring_teeth

    if stage.fixed_member == FixedMember.RING:
        return 1 + ring / sun, +1
    if stage.fixed_member == FixedMember.SUN:
        return ring / (ring + sun), +1
    if stage.fixed_member == FixedMember.CARRIER:
        return ring / sun, -1

    raise ConfigurationError(f"Unknown fixed member: {stage.fixed_member!r}")


def _stage_ratio(stage) -> Tuple[float, int]:
    if isinstance(stage, PlanetaryStage):
        return _planetary_ratio(stage)

    magnitude = gear_ratio(stage.teeth_driver, stage.teeth_driven)
    direction = +1 if stage.kind == StageKind.INTERNAL else -1
    return magnitude, direction


def _stage_centre_distance(stage) -> float:
    if isinstance(stage, PlanetaryStage):
        # Carrier arm: sun centre to planet centre
        return centre_distance(stage.module_mm, stage.sun_teeth, stage.planet_teeth)
    return centre_distance(
        stage.module_mm,
        stage.teeth_driver,
        stage.teeth_driven,
        internal=stage.kind == StageKind.INTERNAL
    )


def stage_ratio(stage) -> Tuple[float, int]:
    """
    Speed ratio of a single stage.

    Args:
        stage: GearStage or PlanetaryStage

    Returns:
        Tuple of (magnitude, direction) where direction is +1 or -1

    Raises:
        InvalidGeometry: Non-positive or out-of-range teeth or module
        ConfigurationError: Missing fixed member or inconsistent planetary teeth
    """
    _validate_stage(stage, 1)
    return _stage_ratio(stage)


def compose(train: GearTrain) -> GearTrainResult:
    """
    Compose the overall ratio of a gear train.

    All stages are validated before any ratio is computed, so a bad stage
    anywhere in the train fails the whole call.

    Args:
        train: GearTrain with stages in power-flow order

    Returns:
        GearTrainResult with overall magnitude, overall direction and the
        per-stage ratios, directions and centre distances

    Raises:
        InvalidGeometry: Empty train, non-positive or out-of-range teeth/module
        ConfigurationError: Planetary stage without a fixed member, or with
            ring_teeth != sun_teeth + 2 * planet_teeth
    """
    if not train.stages:
        raise InvalidGeometry("Gear train must contain at least one stage")

    for index, stage in enumerate(train.stages, start=1):
        _validate_stage(stage, index)

    stage_ratios: List[float] = []
    stage_directions: List[int] = []
    centre_distances: List[float] = []
    overall_ratio = 1.0
    direction = 1

    for stage in train.stages:
        magnitude, stage_direction = _stage_ratio(stage)
        stage_ratios.append(magnitude)
        stage_directions.append(stage_direction)
        centre_distances.append(_stage_centre_distance(stage))
        overall_ratio *= magnitude
        direction *= stage_direction

    logger.debug(
        f"Composed {len(stage_ratios)} stages: ratio={overall_ratio:.6g}, direction={direction:+d}"
    )

    return GearTrainResult(
        overall_ratio=overall_ratio,
        direction=direction,
        stage_ratios=tuple(stage_ratios),
        stage_directions=tuple(stage_directions),
        centre_distances_mm=tuple(centre_distances),
    )


def output_speed(train: GearTrain, input_rpm: float) -> float:
    """Signed output speed (rpm); negative means opposite to the input."""
    result = compose(train)
    return input_rpm * result.direction / result.overall_ratio


def output_torque(
    train: GearTrain,
    input_torque_nm: float,
    efficiency: Optional[float] = None
) -> float:
    """
    Output torque magnitude (N·m).

    Args:
        train: Gear train
        input_torque_nm: Torque at the input shaft
        efficiency: Overall mechanical efficiency in (0, 1], default lossless
    """
    if efficiency is None:
        efficiency = 1.0
    check_range("efficiency", efficiency, 0.0, 1.0, error=ConfigurationError)
    check_positive("efficiency", efficiency, error=ConfigurationError)
    return input_torque_nm * compose(train).overall_ratio * efficiency
