"""Unit tests for level / percentile evaluation."""
import math

import pytest

from brainmark.scores.helpers.evaluation import (
    LEVEL_INFO,
    calculate_level_progress,
    determine_level,
    evaluate,
    get_level_style,
)
from brainmark.scores.registry import (
    ABOVE_AVERAGE,
    AVERAGE,
    BEGINNER,
    BELOW_AVERAGE,
    EXCELLENT,
    EXPERT,
    LEVELS,
    TEST_REGISTRY,
    UnknownTestType,
)


# ─────────────────────────────────────────────────────────────────────────────
# Level selection
# ─────────────────────────────────────────────────────────────────────────────

class TestDetermineLevel:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (150, EXPERT),
            (180, EXPERT),
            (200, EXCELLENT),
            (220, EXCELLENT),
            (250, ABOVE_AVERAGE),
            (300, AVERAGE),
            (400, BELOW_AVERAGE),
            (600, BEGINNER),
        ],
    )
    def test_reaction_levels(self, score, expected):
        assert evaluate("reaction", score).level == expected

    @pytest.mark.parametrize(
        "score, expected",
        [
            (120, EXPERT),
            (90, EXPERT),
            (72, EXCELLENT),
            (70, EXCELLENT),
            (60, ABOVE_AVERAGE),
            (40, AVERAGE),
            (25, BELOW_AVERAGE),
            (10, BEGINNER),
        ],
    )
    def test_typing_levels(self, score, expected):
        assert evaluate("typing", score).level == expected

    def test_schulte_is_lower_better(self):
        assert evaluate("schulte", 11_000).level == EXPERT
        assert evaluate("schulte", 40_000).level == BEGINNER

    def test_falls_back_to_beginner(self):
        thresholds = TEST_REGISTRY["memory"]["thresholds"]
        assert determine_level(-1, thresholds, True) == BEGINNER

    def test_nan_is_beginner(self):
        assert evaluate("memory", math.nan).level == BEGINNER


# ─────────────────────────────────────────────────────────────────────────────
# Boundaries
# ─────────────────────────────────────────────────────────────────────────────

class TestBoundaries:
    def test_reaction_zero_is_expert(self):
        result = evaluate("reaction", 0)
        assert result.level == EXPERT
        assert 0 <= result.percentile <= 100

    def test_memory_infinity_is_expert(self):
        result = evaluate("memory", math.inf)
        assert result.level == EXPERT
        assert 0 <= result.percentile <= 100

    def test_threshold_equal_lands_in_better_level(self):
        assert evaluate("reaction", 220).level == EXCELLENT
        assert evaluate("reaction", 221).level == ABOVE_AVERAGE
        assert evaluate("memory", 9).level == EXCELLENT
        assert evaluate("memory", 8).level == ABOVE_AVERAGE


# ─────────────────────────────────────────────────────────────────────────────
# Percentile
# ─────────────────────────────────────────────────────────────────────────────

class TestPercentile:
    def test_typing_72_between_band_bounds(self):
        result = evaluate("typing", 72)
        assert result.level == EXCELLENT
        assert 4 / 6 * 100 < result.percentile < 5 / 6 * 100
        assert result.percentile == 68

    def test_expert_band_uses_midpoint(self):
        assert evaluate("reaction", 100).percentile == 92
        assert evaluate("reaction", 180).percentile == 92

    def test_beginner_band_uses_midpoint(self):
        assert evaluate("typing", 5).percentile == 8
        assert evaluate("reaction", 900).percentile == 8

    def test_level_start_has_zero_progress(self):
        assert evaluate("reaction", 220).percentile == 67

    def test_progress_clamped(self):
        assert calculate_level_progress(500, 70, 90, True) == 1.0
        assert calculate_level_progress(10, 70, 90, True) == 0.0

    def test_progress_open_bounds(self):
        assert calculate_level_progress(50, 20, None, True) == 0.5
        assert calculate_level_progress(500, math.inf, 450, False) == 0.5
        assert calculate_level_progress(10, 0, 20, True) == 0.5

    @pytest.mark.parametrize("test_type", list(TEST_REGISTRY))
    def test_monotonic(self, test_type):
        config = TEST_REGISTRY[test_type]
        finite = [t for t in config["thresholds"].values() if math.isfinite(t)]
        top = max(finite) * 1.5
        steps = [top * i / 400 for i in range(401)]
        if not config["higher_is_better"]:
            steps = list(reversed(steps))
        # steps go from worst to best
        percentiles = [evaluate(test_type, s).percentile for s in steps]
        assert percentiles == sorted(percentiles)
        assert all(0 <= p <= 100 for p in percentiles)

    @pytest.mark.parametrize("test_type", list(TEST_REGISTRY))
    def test_higher_level_never_lower_percentile(self, test_type):
        config = TEST_REGISTRY[test_type]
        by_level = {}
        for level in LEVELS:
            threshold = config["thresholds"][level]
            if math.isfinite(threshold):
                by_level[level] = evaluate(test_type, threshold).percentile
        ordered = [by_level[level] for level in LEVELS if level in by_level]
        assert ordered == sorted(ordered, reverse=True)


# ─────────────────────────────────────────────────────────────────────────────
# Output
# ─────────────────────────────────────────────────────────────────────────────

class TestEvaluateOutput:
    def test_carries_display_metadata(self):
        result = evaluate("typing", 72)
        assert result.title == LEVEL_INFO[EXCELLENT]["title"]
        assert result.emoji == LEVEL_INFO[EXCELLENT]["emoji"]
        assert result.color == LEVEL_INFO[EXCELLENT]["color"]
        assert "72 WPM" in result.description
        assert result.suggestion == TEST_REGISTRY["typing"]["suggestions"][EXCELLENT]

    def test_as_dict(self):
        data = evaluate("reaction", 250).as_dict()
        assert set(data) == {
            "level", "score", "percentile", "title",
            "description", "suggestion", "emoji", "color",
        }

    def test_whole_float_rendered_without_decimal(self):
        assert "250ms" in evaluate("reaction", 250.0).description

    def test_every_level_has_style(self):
        for level in LEVELS:
            assert get_level_style(level)["color"].startswith("text-")

    def test_unknown_test_type_raises(self):
        with pytest.raises(UnknownTestType):
            evaluate("juggling", 10)

    def test_unknown_test_type_is_value_error(self):
        with pytest.raises(ValueError):
            evaluate("", 10)

    def test_deterministic(self):
        assert evaluate("sequence", 8) == evaluate("sequence", 8)
