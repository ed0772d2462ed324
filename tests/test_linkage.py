"""
Tests for four-bar linkage feasibility and transmission angle.
"""

import itertools
import math
import pytest

from machdesign.calculator import (
    analyze,
    grashof_class,
    is_grashof,
    transmission_angle,
    InvalidGeometry,
    UnclosableLinkage,
)
from machdesign.enums import LinkageClass
from machdesign.io import FourBarLinkage, LinkageResult


def _linkage(*lengths):
    return FourBarLinkage(link_lengths=lengths)


class TestCrankRocker:
    """Well-proportioned crank-rocker."""

    def test_classification(self, crank_rocker):
        result = analyze(crank_rocker)

        assert isinstance(result, LinkageResult)
        assert result.is_crank_rocker is True
        assert result.is_grashof is True
        assert result.linkage_class == LinkageClass.CRANK_ROCKER

    def test_transmission_angle_bounds(self, crank_rocker):
        """μ from the law of cosines at crank folded and extended."""
        mu_min, mu_max = analyze(crank_rocker).transmission_angle_range

        assert mu_min == pytest.approx(math.degrees(math.acos(11 / 15)))
        assert mu_max == pytest.approx(math.degrees(math.acos(1 / 15)))
        assert mu_min < mu_max

    def test_good_transmission(self, crank_rocker):
        assert analyze(crank_rocker).poor_transmission is False

    def test_poor_transmission_is_advisory(self):
        """Poor transmission is flagged, never raised."""
        result = analyze(_linkage(25, 10, 30, 28))

        assert result.is_crank_rocker is True
        assert result.poor_transmission is True
        assert result.transmission_angle_range[0] == pytest.approx(29.72, abs=0.01)

    def test_shortest_link_as_rocker(self):
        """Shortest link on the output side classifies as a crank-rocker."""
        assert grashof_class(_linkage(50, 45, 50, 15)) == LinkageClass.CRANK_ROCKER

    def test_idempotent(self, crank_rocker):
        assert analyze(crank_rocker) == analyze(crank_rocker)


class TestGroundingSensitivity:
    """Roles come from position, not from length order."""

    def test_same_lengths_grounded_on_shortest(self):
        """Grounding the shortest link gives a double-crank."""
        result = analyze(_linkage(15, 50, 50, 45))

        assert result.is_grashof is True
        assert result.is_crank_rocker is False
        assert result.linkage_class == LinkageClass.DOUBLE_CRANK

    def test_same_lengths_different_classes(self):
        """One length set, three groundings, three classes."""
        assert grashof_class(_linkage(50, 15, 50, 45)) == LinkageClass.CRANK_ROCKER
        assert grashof_class(_linkage(15, 50, 50, 45)) == LinkageClass.DOUBLE_CRANK
        assert grashof_class(_linkage(50, 50, 15, 45)) == LinkageClass.DOUBLE_ROCKER

    def test_grashof_independent_of_order(self):
        """Grashof condition holds for every permutation of the same lengths."""
        for lengths in itertools.permutations((50, 15, 50, 45)):
            assert is_grashof(lengths) is True
        for lengths in itertools.permutations((10, 20, 25, 50)):
            assert is_grashof(lengths) is False


class TestGrashofClass:
    """Classification by s + l against p + q."""

    def test_triple_rocker(self):
        assert grashof_class(_linkage(10, 20, 25, 50)) == LinkageClass.TRIPLE_ROCKER

    def test_change_point(self):
        assert grashof_class(_linkage(20, 10, 15, 15)) == LinkageClass.CHANGE_POINT

    def test_change_point_is_grashof(self):
        """Equality counts as Grashof."""
        assert is_grashof((20, 10, 15, 15)) is True

    def test_decimal_change_point(self):
        """0.1 + 0.7 rounds below 0.8 in binary; still a change-point."""
        linkage = _linkage(0.4, 0.1, 0.4, 0.7)

        assert grashof_class(linkage) == LinkageClass.CHANGE_POINT
        assert analyze(linkage).linkage_class == LinkageClass.CHANGE_POINT

    @pytest.mark.parametrize("scale", [1e-3, 0.1, 1.0, 10.0, 1e4])
    def test_classification_is_scale_free(self, scale):
        linkage = _linkage(*(scale * x for x in (4, 1, 4, 7)))

        assert grashof_class(linkage) == LinkageClass.CHANGE_POINT


class TestClosure:
    """Loops that cannot be assembled raise UnclosableLinkage."""

    def test_crank_too_long_for_coupler_and_rocker(self):
        """Extended crank: 10 + 25 > 10 + 10."""
        with pytest.raises(UnclosableLinkage, match="crank extended"):
            analyze(_linkage(10, 25, 10, 10))

    def test_one_link_longer_than_the_rest(self):
        with pytest.raises(UnclosableLinkage, match="exceeds the sum"):
            analyze(_linkage(10, 35, 10, 10))

    def test_ground_equal_to_sum_cannot_rotate_crank(self):
        """Ground = sum of others: crank cannot be extended along ground."""
        with pytest.raises(UnclosableLinkage):
            analyze(_linkage(30, 10, 10, 10))

    def test_double_rocker_does_not_close_at_crank_extremes(self):
        with pytest.raises(UnclosableLinkage):
            analyze(_linkage(50, 50, 15, 45))

    def test_triple_rocker_does_not_close_at_crank_extremes(self):
        with pytest.raises(UnclosableLinkage):
            analyze(_linkage(10, 20, 25, 50))

    def test_extended_boundary_closes(self):
        """ground + crank == coupler + rocker: closes with links collinear."""
        result = analyze(_linkage(20, 10, 15, 15))

        assert result.linkage_class == LinkageClass.CHANGE_POINT
        assert result.transmission_angle_range[1] == pytest.approx(180.0)
        assert result.poor_transmission is True

    def test_decimal_extended_boundary_closes(self):
        """0.2 + 0.1 rounds above 0.15 + 0.15 in binary; still closes."""
        result = analyze(_linkage(0.2, 0.1, 0.15, 0.15))

        assert result.transmission_angle_range[1] == pytest.approx(180.0)

    def test_decimal_boundary_at_crank_angle(self):
        assert transmission_angle(_linkage(0.2, 0.1, 0.15, 0.15), 180) == pytest.approx(180.0)

    def test_extended_boundary_exceeded(self):
        with pytest.raises(UnclosableLinkage, match="extended"):
            analyze(_linkage(20, 11, 15, 15))

    def test_folded_boundary_closes(self):
        """|ground - crank| == |coupler - rocker|: μ reaches 0°."""
        result = analyze(_linkage(30, 10, 40, 20))

        assert result.transmission_angle_range[0] == pytest.approx(0.0, abs=1e-6)

    def test_folded_boundary_exceeded(self):
        with pytest.raises(UnclosableLinkage, match="folded"):
            analyze(_linkage(30, 11, 40, 20))

    def test_unclosable_is_a_value_error(self):
        with pytest.raises(ValueError):
            analyze(_linkage(10, 25, 10, 10))


class TestInvalidLengths:

    @pytest.mark.parametrize("lengths", [
        (0, 15, 50, 45),
        (50, -15, 50, 45),
        (50, 15, 0, 45),
        (50, 15, 50, -1),
    ])
    def test_non_positive_length(self, lengths):
        with pytest.raises(InvalidGeometry):
            analyze(_linkage(*lengths))

    def test_non_finite_length(self):
        with pytest.raises(InvalidGeometry):
            analyze(_linkage(50, float("inf"), 50, 45))


class TestTransmissionAngle:
    """Transmission angle at an arbitrary crank angle."""

    def test_matches_bounds_at_extremes(self, crank_rocker):
        mu_min, mu_max = analyze(crank_rocker).transmission_angle_range

        assert transmission_angle(crank_rocker, 0) == pytest.approx(mu_min)
        assert transmission_angle(crank_rocker, 180) == pytest.approx(mu_max)

    def test_crank_perpendicular(self, crank_rocker):
        """θ = 90°: d² = g² + a², cos μ = 0.4."""
        assert transmission_angle(crank_rocker, 90) == pytest.approx(math.degrees(math.acos(0.4)))

    def test_within_bounds_over_full_turn(self, crank_rocker):
        mu_min, mu_max = analyze(crank_rocker).transmission_angle_range

        for theta in range(0, 360, 15):
            mu = transmission_angle(crank_rocker, theta)
            assert mu_min - 1e-9 <= mu <= mu_max + 1e-9

    def test_unreachable_crank_angle(self):
        """Loop closes at 90° but not with the crank folded."""
        linkage = _linkage(30, 11, 40, 20)

        assert transmission_angle(linkage, 90) > 0
        with pytest.raises(UnclosableLinkage):
            transmission_angle(linkage, 0)
