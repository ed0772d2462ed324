"""
Four-Bar Linkage Analyzer

Feasibility and transmission quality of a planar four-bar linkage whose
links are given by role: ground, crank (input), coupler, rocker (output).

Roles are never inferred from length order. The same four lengths give a
crank-rocker, a double-crank or a double-rocker depending on which link is
grounded.

Notation: g ground, a crank, b coupler, c rocker; s shortest, l longest,
p and q the other two. Grashof: s + l <= p + q. Sums of lengths are
compared to a relative tolerance so boundary cases do not depend on
binary rounding of decimal lengths.

Transmission angle μ is the angle between coupler and rocker. With d the
diagonal from crank pin to rocker pivot:

    d² = g² + a² - 2 g a cos θ
    cos μ = (b² + c² - d²) / (2 b c)

d is smallest with the crank folded over the ground link (θ = 0) and largest
with the crank extended along it (θ = 180°), which bound μ.
"""

import logging
from math import acos, cos, degrees, radians, sqrt
from typing import Sequence, Tuple

from ..enums import LinkageClass
from ..io import FourBarLinkage, LinkageResult
from .constants import (
    LENGTH_REL_TOLERANCE,
    TRANSMISSION_ANGLE_MAX_DEG,
    TRANSMISSION_ANGLE_MIN_DEG,
)
from .errors import InvalidGeometry, UnclosableLinkage
from .ranges import check_positive

logger = logging.getLogger(__name__)

ROLES = ("ground", "crank", "coupler", "rocker")


def _validate_lengths(linkage: FourBarLinkage) -> Tuple[float, float, float, float]:
    if len(linkage.link_lengths) != 4:
        raise InvalidGeometry(f"Four-bar linkage needs 4 link lengths, got {len(linkage.link_lengths)}")
    for role, length in zip(ROLES, linkage.link_lengths):
        check_positive(f"{role} length", length)
    return linkage.link_lengths


def _exceeds(a: float, b: float, scale: float) -> bool:
    """a > b by more than rounding noise on lengths of size scale"""
    return a - b > LENGTH_REL_TOLERANCE * scale


def _same(a: float, b: float, scale: float) -> bool:
    return abs(a - b) <= LENGTH_REL_TOLERANCE * scale


def is_grashof(lengths: Sequence[float]) -> bool:
    """True if s + l <= p + q (independent of which link is grounded)."""
    ordered = sorted(lengths)
    s, p, q, l = ordered
    return not _exceeds(s + l, p + q, sum(ordered))


def grashof_class(linkage: FourBarLinkage) -> LinkageClass:
    """
    Classify a linkage by the Grashof condition and the grounded link.

    - s + l > p + q: triple-rocker (no link can fully rotate)
    - s + l = p + q: change-point (links pass through a folded position)
    - s + l < p + q: by the role of the shortest link
        ground → double-crank, crank or rocker → crank-rocker,
        coupler → double-rocker
    """
    ground, crank, coupler, rocker = _validate_lengths(linkage)
    ordered = sorted(linkage.link_lengths)
    s, p, q, l = ordered

    if _same(s + l, p + q, sum(ordered)):
        return LinkageClass.CHANGE_POINT
    if s + l > p + q:
        return LinkageClass.TRIPLE_ROCKER
    # Strict Grashof means the shortest link is unique
    if ground == s:
        return LinkageClass.DOUBLE_CRANK
    if coupler == s:
        return LinkageClass.DOUBLE_ROCKER
    return LinkageClass.CRANK_ROCKER


def _check_closure(ground: float, crank: float, coupler: float, rocker: float) -> None:
    """
    Reject linkages that cannot be assembled over the crank's extreme positions.

    Boundary equalities are accepted: the loop closes with two links collinear.
    Equality is judged to LENGTH_REL_TOLERANCE of the total link length.
    """
    lengths = (ground, crank, coupler, rocker)
    total = sum(lengths)
    for role, length in zip(ROLES, lengths):
        if _exceeds(length, total - length, total):
            raise UnclosableLinkage(
                f"{role} length {length} exceeds the sum of the other three links ({total - length})"
            )

    d_min = abs(ground - crank)
    d_max = ground + crank
    reach_min = abs(coupler - rocker)
    reach_max = coupler + rocker

    if _exceeds(reach_min, d_min, total):
        raise UnclosableLinkage(
            f"Loop cannot close with crank folded over ground: diagonal {d_min} "
            f"< |coupler - rocker| = {reach_min}"
        )
    if _exceeds(d_max, reach_max, total):
        raise UnclosableLinkage(
            f"Loop cannot close with crank extended along ground: diagonal {d_max} "
            f"> coupler + rocker = {reach_max}"
        )


def _angle_for_diagonal(coupler: float, rocker: float, diagonal: float) -> float:
    cos_mu = (coupler ** 2 + rocker ** 2 - diagonal ** 2) / (2 * coupler * rocker)
    # Collinear boundary cases may land a rounding error outside [-1, 1]
    cos_mu = max(-1.0, min(1.0, cos_mu))
    return degrees(acos(cos_mu))


def transmission_angle(linkage: FourBarLinkage, crank_angle_deg: float) -> float:
    """
    Transmission angle μ (degrees) at a given crank angle.

    Args:
        linkage: Four-bar linkage
        crank_angle_deg: Crank angle from the ground line, 0° with the crank
            folded toward the rocker pivot

    Raises:
        InvalidGeometry: Non-positive link length
        UnclosableLinkage: Loop cannot close at this crank angle
    """
    ground, crank, coupler, rocker = _validate_lengths(linkage)
    theta = radians(crank_angle_deg)
    diagonal = sqrt(max(0.0, ground ** 2 + crank ** 2 - 2 * ground * crank * cos(theta)))

    total = ground + crank + coupler + rocker
    if _exceeds(abs(coupler - rocker), diagonal, total) or _exceeds(diagonal, coupler + rocker, total):
        raise UnclosableLinkage(
            f"Loop cannot close at crank angle {crank_angle_deg}°: diagonal {diagonal:.4f} "
            f"outside [{abs(coupler - rocker)}, {coupler + rocker}]"
        )
    return _angle_for_diagonal(coupler, rocker, diagonal)


def analyze(linkage: FourBarLinkage) -> LinkageResult:
    """
    Evaluate feasibility and transmission angle bounds of a four-bar linkage.

    Args:
        linkage: FourBarLinkage with lengths in role order
            (ground, crank, coupler, rocker)

    Returns:
        LinkageResult. ``poor_transmission`` is advisory and never fails the
        analysis; only closure does.

    Raises:
        InvalidGeometry: Any link length is non-positive
        UnclosableLinkage: Lengths cannot form a closed loop at both extreme
            crank positions
    """
    ground, crank, coupler, rocker = _validate_lengths(linkage)
    _check_closure(ground, crank, coupler, rocker)

    grashof = is_grashof(linkage.link_lengths)
    linkage_class = grashof_class(linkage)
    shortest = min(linkage.link_lengths)
    is_crank_rocker = grashof and ground != shortest and shortest in (crank, rocker)

    mu_min = _angle_for_diagonal(coupler, rocker, abs(ground - crank))
    mu_max = _angle_for_diagonal(coupler, rocker, ground + crank)
    poor = mu_min < TRANSMISSION_ANGLE_MIN_DEG or mu_max > TRANSMISSION_ANGLE_MAX_DEG

    logger.debug(
        f"Linkage {linkage.link_lengths}: {linkage_class.value}, "
        f"μ {mu_min:.2f}°..{mu_max:.2f}°"
    )

    return LinkageResult(
        is_crank_rocker=is_crank_rocker,
        is_grashof=grashof,
        linkage_class=linkage_class,
        transmission_angle_range=(mu_min, mu_max),
        poor_transmission=poor,
    )
