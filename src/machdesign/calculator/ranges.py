"""
Range checks for scalar inputs.

Each check raises the error class supplied by the caller, so the same
helper gates tooth counts (InvalidGeometry), forces (InvalidLoad) and
speeds (InvalidSpeed). Bounds are inclusive.
"""

from math import isfinite
from typing import Type

from .errors import DesignError, InvalidGeometry


def _check_finite(name: str, value: float, error: Type[DesignError]) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise error(f"{name} must be a number, got {value!r}")
    if not isfinite(value):
        raise error(f"{name} must be finite, got {value}")


def check_positive(name: str, value: float, error: Type[DesignError] = InvalidGeometry) -> float:
    """Require value > 0."""
    _check_finite(name, value, error)
    if value <= 0:
        raise error(f"{name} must be positive, got {value}")
    return value


def check_non_negative(name: str, value: float, error: Type[DesignError] = InvalidGeometry) -> float:
    """Require value >= 0."""
    _check_finite(name, value, error)
    if value < 0:
        raise error(f"{name} must be non-negative, got {value}")
    return value


def check_range(
    name: str,
    value: float,
    low: float,
    high: float,
    error: Type[DesignError] = InvalidGeometry,
    unit: str = ""
) -> float:
    """Require low <= value <= high."""
    _check_finite(name, value, error)
    if not low <= value <= high:
        raise error(f"{name} {value}{unit} is outside the valid range [{low}, {high}]{unit}")
    return value


def check_integral(name: str, value: int, error: Type[DesignError] = InvalidGeometry) -> int:
    """Require a whole number (tooth counts, planet counts)."""
    _check_finite(name, value, error)
    if int(value) != value:
        raise error(f"{name} must be a whole number, got {value}")
    return int(value)


def check_teeth(name: str, teeth: int, low: int, high: int) -> int:
    """Tooth count: whole, positive, within [low, high]."""
    teeth = check_integral(name, teeth)
    check_positive(name, teeth)
    return int(check_range(name, teeth, low, high))
