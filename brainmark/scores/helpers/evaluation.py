"""
Level and percentile evaluation for a single test result.

All functions are pure (no ORM calls); they depend only on the threshold
tables in TEST_REGISTRY.

The percentile is a display heuristic derived from the fixed thresholds,
not a population statistic computed from stored results.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass

from brainmark.scores.registry import (
    ABOVE_AVERAGE,
    AVERAGE,
    BEGINNER,
    BELOW_AVERAGE,
    EXCELLENT,
    EXPERT,
    LEVELS,
    get_test_config,
)

LEVEL_INFO: dict[str, dict] = {
    BEGINNER: {
        "title": "Beginner",
        "emoji": "\U0001F331",
        "color": "text-gray-600",
        "bg_color": "bg-gray-100",
        "border_color": "border-gray-300",
    },
    BELOW_AVERAGE: {
        "title": "Below Average",
        "emoji": "\U0001F4C8",
        "color": "text-orange-600",
        "bg_color": "bg-orange-100",
        "border_color": "border-orange-300",
    },
    AVERAGE: {
        "title": "Average",
        "emoji": "\U0001F44D",
        "color": "text-blue-600",
        "bg_color": "bg-blue-100",
        "border_color": "border-blue-300",
    },
    ABOVE_AVERAGE: {
        "title": "Above Average",
        "emoji": "⭐",
        "color": "text-green-600",
        "bg_color": "bg-green-100",
        "border_color": "border-green-300",
    },
    EXCELLENT: {
        "title": "Excellent",
        "emoji": "\U0001F3C6",
        "color": "text-purple-600",
        "bg_color": "bg-purple-100",
        "border_color": "border-purple-300",
    },
    EXPERT: {
        "title": "Expert",
        "emoji": "\U0001F680",
        "color": "text-red-600",
        "bg_color": "bg-red-100",
        "border_color": "border-red-300",
    },
}


@dataclass(frozen=True)
class EvaluationResult:
    level: str
    score: float
    percentile: int
    title: str
    description: str
    suggestion: str
    emoji: str
    color: str

    def as_dict(self) -> dict:
        return asdict(self)


def evaluate(test_type: str, score: float) -> EvaluationResult:
    """
    Evaluate *score* for *test_type*.

    Raises:
        UnknownTestType: if *test_type* is not registered.
    """
    config = get_test_config(test_type)
    thresholds = config["thresholds"]
    higher_is_better = config["higher_is_better"]

    level = determine_level(score, thresholds, higher_is_better)
    percentile = calculate_percentile(score, thresholds, higher_is_better)
    info = LEVEL_INFO[level]

    return EvaluationResult(
        level=level,
        score=score,
        percentile=percentile,
        title=info["title"],
        description=config["descriptions"][level].format(
            score=_display_number(score), unit=config["unit"]
        ),
        suggestion=config["suggestions"][level],
        emoji=info["emoji"],
        color=info["color"],
    )


def determine_level(score: float, thresholds: dict, higher_is_better: bool) -> str:
    """
    Return the best level whose threshold *score* meets.

    Higher-is-better: first level (best to worst) with threshold <= score.
    Lower-is-better:  first level (best to worst) with threshold >= score.
    Falls back to BEGINNER when nothing matches.
    """
    return LEVELS[_level_index(score, thresholds, higher_is_better)]


def calculate_percentile(score: float, thresholds: dict, higher_is_better: bool) -> int:
    """
    Return a 0-100 display percentile.

    Combines the level rank (0 for beginner, 5 for expert) with the linear
    progress through the level's band towards the next better threshold.
    """
    index = _level_index(score, thresholds, higher_is_better)
    rank = len(LEVELS) - 1 - index
    threshold = thresholds[LEVELS[index]]
    better_threshold = thresholds[LEVELS[index - 1]] if index > 0 else None
    progress = calculate_level_progress(score, threshold, better_threshold, higher_is_better)
    return _round_half_up((rank + progress) / len(LEVELS) * 100)


def calculate_level_progress(
    score: float,
    threshold: float,
    better_threshold: float | None,
    higher_is_better: bool,
) -> float:
    """Return progress (0-1) of *score* from *threshold* towards *better_threshold*."""
    if better_threshold is None or _is_open_bound(threshold) or _is_open_bound(better_threshold):
        return 0.5
    if higher_is_better:
        progress = (score - threshold) / (better_threshold - threshold)
    else:
        progress = (threshold - score) / (threshold - better_threshold)
    if math.isnan(progress):
        return 0.5
    return max(0.0, min(1.0, progress))


def get_level_style(level: str) -> dict:
    return LEVEL_INFO[level]


def _level_index(score: float, thresholds: dict, higher_is_better: bool) -> int:
    for index, level in enumerate(LEVELS):
        threshold = thresholds[level]
        if higher_is_better and threshold <= score:
            return index
        if not higher_is_better and threshold >= score:
            return index
    return len(LEVELS) - 1


def _is_open_bound(value: float) -> bool:
    return math.isinf(value) or value == 0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _display_number(score):
    if isinstance(score, float) and score.is_integer():
        return int(score)
    return score
