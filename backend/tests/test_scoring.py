"""
Tests for shared score arithmetic.
"""
import pytest


class TestRounding:

    @pytest.mark.parametrize("value,expected", [
        (22.5, 23),
        (27.5, 28),
        (53.333, 53),
        (0.5, 1),
        (2.49, 2),
        (-2.5, -3),
    ])
    def test_round_half_up(self, value, expected):
        from launchpad.services.scoring import round_half_up

        assert round_half_up(value) == expected

    @pytest.mark.parametrize("value,expected", [(-12, 0), (110, 100), (79.5, 80), (40, 40)])
    def test_clamp_score(self, value, expected):
        from launchpad.services.scoring import clamp_score

        assert clamp_score(value) == expected


class TestTiers:

    @pytest.mark.parametrize("score,tier", [
        (100, "excellent"),
        (80, "excellent"),
        (79, "good"),
        (60, "good"),
        (59, "fair"),
        (40, "fair"),
        (39, "needs-development"),
        (0, "needs-development"),
    ])
    def test_tier_boundaries(self, score, tier):
        from launchpad.services.scoring import tier_of

        assert tier_of(score) == tier
