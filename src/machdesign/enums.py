"""Type-safe enums for the machine design calculator."""

from enum import Enum


class StageKind(Enum):
    """Gear stage mesh type"""
    EXTERNAL = "external"  # Two external gears - output reverses direction
    INTERNAL = "internal"  # Pinion driving a ring gear - direction preserved
    PLANETARY = "planetary"  # Sun / planets / ring with one member held


class FixedMember(Enum):
    """Planetary member held stationary.

    Determines which pair of members carries input and output:
    - RING fixed: sun in, carrier out (reduction)
    - SUN fixed: carrier in, ring out (overdrive)
    - CARRIER fixed: sun in, ring out (star arrangement, reverses)
    """
    RING = "ring"
    SUN = "sun"
    CARRIER = "carrier"


class LinkageClass(Enum):
    """Grashof classification of a four-bar linkage"""
    CRANK_ROCKER = "crank-rocker"  # Shortest link is crank or rocker
    DOUBLE_CRANK = "double-crank"  # Shortest link is ground (drag link)
    DOUBLE_ROCKER = "double-rocker"  # Shortest link is coupler
    CHANGE_POINT = "change-point"  # s + l == p + q, links can fold flat
    TRIPLE_ROCKER = "triple-rocker"  # Non-Grashof, no link fully rotates


class BearingType(Enum):
    """Rolling element type - selects the life exponent"""
    BALL = "ball"
    ROLLER = "roller"
