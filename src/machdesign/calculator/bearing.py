"""
Bearing Life Engine

Basic rating life of rolling bearings per ISO 281:

    P   = X Fr + Y Fa                  equivalent dynamic load (N)
    L10 = (C / P)^p × 10^6             revolutions, p = 3 ball / 10/3 roller
    L10h = L10 / (60 n)                hours at n rpm
    Lnh = a1 × L10h                    adjusted for reliability

Each step is independently callable. A zero equivalent load is an error,
not an infinite life.
"""

import logging
from math import isfinite
from typing import Optional

from ..enums import BearingType
from ..io import BearingLifeResult, BearingLoadCase
from .constants import (
    DEFAULT_RELIABILITY_PERCENT,
    LIFE_EXPONENT_BALL,
    LIFE_EXPONENT_ROLLER,
    MILLION_REVOLUTIONS,
    MINUTES_PER_HOUR,
    RELIABILITY_FACTORS,
)
from .errors import ConfigurationError, DivisionByZero, InvalidLoad, InvalidSpeed
from .ranges import check_non_negative, check_positive

logger = logging.getLogger(__name__)


def _finite_life(name: str, value: float, error=InvalidLoad) -> float:
    if not isfinite(value):
        raise error(f"{name} is beyond floating point range")
    return value


def life_exponent(case: BearingLoadCase) -> float:
    """Life exponent p: explicit value, else 3 for ball or 10/3 for roller bearings."""
    if case.life_exponent is not None:
        return case.life_exponent
    if case.bearing_type == BearingType.ROLLER:
        return LIFE_EXPONENT_ROLLER
    return LIFE_EXPONENT_BALL


def equivalent_load(case: BearingLoadCase) -> float:
    """
    Equivalent dynamic load P = X Fr + Y Fa (N).

    Raises:
        InvalidLoad: Any force or load factor is negative
    """
    fr = check_non_negative("radial_force_n", case.radial_force_n, InvalidLoad)
    fa = check_non_negative("axial_force_n", case.axial_force_n, InvalidLoad)
    x = check_non_negative("x_factor", case.x_factor, InvalidLoad)
    y = check_non_negative("y_factor", case.y_factor, InvalidLoad)
    return x * fr + y * fa


def life_revolutions(dynamic_capacity_n: float, equivalent_load_n: float, exponent: float) -> float:
    """
    Basic rating life L10 in revolutions.

    Args:
        dynamic_capacity_n: Basic dynamic load rating C (N)
        equivalent_load_n: Equivalent dynamic load P (N)
        exponent: Life exponent p

    Raises:
        InvalidLoad: C or p not positive, P negative, or C/P so large the
            life is beyond floating point range
        DivisionByZero: P is zero
    """
    check_positive("dynamic_capacity_n", dynamic_capacity_n, InvalidLoad)
    check_positive("life exponent", exponent, InvalidLoad)
    check_non_negative("equivalent_load_n", equivalent_load_n, InvalidLoad)
    if equivalent_load_n == 0:
        raise DivisionByZero("Equivalent load is zero: rating life is undefined")

    ratio = dynamic_capacity_n / equivalent_load_n
    try:
        l10 = ratio ** exponent * MILLION_REVOLUTIONS
    except OverflowError:
        raise InvalidLoad(
            f"C/P = {ratio:.3g} gives a rating life beyond floating point range"
        ) from None
    return _finite_life(f"Rating life for C/P = {ratio:.3g}", l10)


def life_hours(l10_revolutions: float, speed_rpm: float) -> float:
    """
    Convert a life in revolutions to operating hours at constant speed.

    Raises:
        InvalidSpeed: speed_rpm is not positive, or so small the hours overflow
        InvalidLoad: negative life
    """
    check_positive("speed_rpm", speed_rpm, InvalidSpeed)
    check_non_negative("l10_revolutions", l10_revolutions, InvalidLoad)
    return _finite_life(
        "Rating life in hours", l10_revolutions / (MINUTES_PER_HOUR * speed_rpm), InvalidSpeed
    )


def reliability_factor(reliability_percent: int) -> float:
    """ISO 281 life adjustment factor a1."""
    try:
        return RELIABILITY_FACTORS[reliability_percent]
    except KeyError:
        supported = ", ".join(str(k) for k in sorted(RELIABILITY_FACTORS))
        raise ConfigurationError(
            f"Unsupported reliability {reliability_percent}%. Supported: {supported}"
        ) from None


def adjusted_life_hours(hours: float, reliability_percent: int = DEFAULT_RELIABILITY_PERCENT) -> float:
    """Rating life for a reliability other than 90 %: Lnh = a1 × L10h."""
    return hours * reliability_factor(reliability_percent)


def required_dynamic_capacity(
    equivalent_load_n: float,
    life_hours_required: float,
    speed_rpm: float,
    exponent: float = LIFE_EXPONENT_BALL
) -> float:
    """
    Minimum dynamic load rating C (N) to reach a required life.

    C = P × (L10h × 60 n / 10^6)^(1/p)
    """
    check_positive("equivalent_load_n", equivalent_load_n, InvalidLoad)
    check_positive("life_hours_required", life_hours_required, InvalidLoad)
    check_positive("speed_rpm", speed_rpm, InvalidSpeed)
    check_positive("life exponent", exponent, InvalidLoad)

    revolutions = life_hours_required * MINUTES_PER_HOUR * speed_rpm
    try:
        capacity = equivalent_load_n * (revolutions / MILLION_REVOLUTIONS) ** (1 / exponent)
    except OverflowError:
        raise InvalidLoad(
            f"Required life of {life_hours_required:.3g}h at {speed_rpm} rpm is beyond floating point range"
        ) from None
    return _finite_life("Required dynamic capacity", capacity)


def evaluate(
    case: BearingLoadCase,
    speed_rpm: float,
    required_life_hours: Optional[float] = None,
    reliability_percent: int = DEFAULT_RELIABILITY_PERCENT
) -> BearingLifeResult:
    """
    Run the full life chain for one bearing.

    Args:
        case: Loads and rating
        speed_rpm: Shaft speed
        required_life_hours: Target life; when given, the result carries the
            safety margin (adjusted life / required life)
        reliability_percent: Survival probability for the adjusted life

    Returns:
        BearingLifeResult
    """
    # Fail fast on every input before computing anything
    check_positive("speed_rpm", speed_rpm, InvalidSpeed)
    factor = reliability_factor(reliability_percent)
    if required_life_hours is not None:
        check_positive("required_life_hours", required_life_hours, InvalidLoad)

    p = equivalent_load(case)
    exponent = life_exponent(case)
    l10 = life_revolutions(case.dynamic_capacity_n, p, exponent)
    hours = life_hours(l10, speed_rpm)
    adjusted = hours * factor

    margin = None
    if required_life_hours is not None:
        margin = adjusted / required_life_hours

    logger.debug(
        f"Bearing P={p:.1f}N C={case.dynamic_capacity_n:.1f}N p={exponent:.3f}: "
        f"L10={l10:.4g} rev, {hours:.1f} h at {speed_rpm} rpm"
    )

    return BearingLifeResult(
        equivalent_load_n=p,
        l10_revolutions=l10,
        l10_hours=hours,
        load_ratio=case.dynamic_capacity_n / p,
        reliability_percent=reliability_percent,
        adjusted_life_hours=adjusted,
        required_life_hours=required_life_hours,
        safety_margin=margin,
    )
