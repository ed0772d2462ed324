"""
Engineering constants and unit conventions for machdesign calculations.

This module centralizes all numerical constants used by the calculator and
validation modules. Each constant is documented with its source (ISO
standard, textbook, or engineering practice).

MODIFICATION GUIDELINES:
- Never change ISO constants without updating the standard reference
- Engineering practice constants may be adjusted based on experience
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_MM, _DEG, _N, _RPM)

Unit policy at the public API:
- Lengths in millimetres
- Forces in newtons
- Rotational speed in revolutions per minute
- Angles in degrees

Constants are grouped by category:
- Unit conversion
- ISO 54: Gear modules and tooth proportions
- Four-bar linkages
- ISO 281: Rolling bearing rating life
"""

from math import pi
from types import MappingProxyType
from typing import Mapping, Tuple

# =============================================================================
# Unit Conversion
# =============================================================================

MM_TO_M: float = 1e-3
M_TO_MM: float = 1e3
SECONDS_PER_MINUTE: float = 60.0
MINUTES_PER_HOUR: float = 60.0
RPM_TO_RAD_PER_S: float = 2.0 * pi / SECONDS_PER_MINUTE

# Bearing ratings are quoted per million revolutions
MILLION_REVOLUTIONS: float = 1e6

# =============================================================================
# ISO 54 / ISO 53 - Gear Modules and Tooth Proportions
# =============================================================================

# Accepted tooth count range for a single gear in a composed train
TEETH_MIN: int = 10    # Below: undercut without heavy profile shift
TEETH_MAX: int = 200   # Above: impractically large blank for a stage

# Accepted module range (mm)
MODULE_MIN_MM: float = 0.5
MODULE_MAX_MM: float = 20.0

# ISO 53 basic rack: addendum = 1.0 × m, dedendum = 1.25 × m
ADDENDUM_COEFFICIENT: float = 1.0
DEDENDUM_COEFFICIENT: float = 1.25

# Standard module series per ISO 54 (first and second choice)
STANDARD_MODULES_MM: Tuple[float, ...] = (
    0.5, 0.6, 0.7, 0.8, 0.9, 1.0,
    1.125, 1.25, 1.375, 1.5, 1.75, 2.0, 2.25, 2.5, 2.75,
    3.0, 3.5, 4.0, 4.5, 5.0, 5.5, 6.0, 7.0, 8.0, 9.0, 10.0,
    11.0, 12.0, 14.0, 16.0, 18.0, 20.0
)

# Practical single-stage limits
# Source: Shigley's Mechanical Engineering Design, spur/helical practice
STAGE_RATIO_MAX: float = 8.0         # Above: split into two stages
STAGE_RATIO_MIN_REDUCTION: float = 1.0

# =============================================================================
# Four-Bar Linkages
# =============================================================================

# Acceptable transmission angle window
# Source: Norton, Design of Machinery - keep μ within 40°..140°
TRANSMISSION_ANGLE_MIN_DEG: float = 40.0
TRANSMISSION_ANGLE_MAX_DEG: float = 140.0

# Relative tolerance for length sums compared at Grashof and closure
# boundaries, so (0.4, 0.1, 0.4, 0.7) is a change-point like (4, 1, 4, 7)
LENGTH_REL_TOLERANCE: float = 1e-9

# =============================================================================
# ISO 281 - Rolling Bearing Rating Life
# =============================================================================

# Life exponent p in L10 = (C/P)^p
LIFE_EXPONENT_BALL: float = 3.0
LIFE_EXPONENT_ROLLER: float = 10.0 / 3.0

# Life adjustment factor a1 for reliability (ISO 281:2007 Table 12)
RELIABILITY_FACTORS: Mapping[int, float] = MappingProxyType({
    90: 1.00,
    95: 0.64,
    96: 0.55,
    97: 0.47,
    98: 0.37,
    99: 0.25,
})

DEFAULT_RELIABILITY_PERCENT: int = 90

# Load ratio P/C bounds for the basic rating life to be meaningful
# Above 0.5: plastic deformation likely, formula optimistic
# Below 0.02: rolling elements may skid instead of roll
LOAD_RATIO_MAX: float = 0.5
LOAD_RATIO_MIN: float = 0.02
