"""
Completing a test attempt: evaluate, update the personal best, then upload.

The three steps run in that order for each attempt. Upload failures are
reported on the outcome and never raised, so a failed upload cannot stop the
player from seeing their score or playing again.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from brainmark.client.api import SubmissionError
from brainmark.scores.helpers.evaluation import EvaluationResult, evaluate
from brainmark.scores.helpers.metrics import METRIC_COMPUTERS
from brainmark.scores.registry import get_test_config

logger = logging.getLogger(__name__)


@dataclass
class AttemptOutcome:
    """``evaluation`` is None when the attempt produced no score to record."""

    evaluation: EvaluationResult | None
    is_new_best: bool
    submitted: bool
    notice: str | None = None


def summarise_trials(test_type: str, *args, **kwargs) -> tuple[float | None, dict]:
    """
    Run the test's scoring formula over raw trial data.

    Returns (result, metadata); result is None when the attempt produced no
    recordable score (e.g. a reaction-test anticipation).
    """
    get_test_config(test_type)
    summary = dict(METRIC_COMPUTERS[test_type](*args, **kwargs))
    result = summary.pop("result")
    return result, summary


def should_submit(test_type: str, result) -> bool:
    if result is None or not math.isfinite(result) or result <= 0:
        return False
    return result >= get_test_config(test_type)["minimum_submittable"]


def complete_attempt(test_type: str, result: float | None, metadata: dict | None = None, *, best_scores, api) -> AttemptOutcome:
    """
    Finish an attempt with the *result* from summarise_trials.

    A None result (e.g. an anticipation) records nothing.

    Args:
        best_scores:  BestScoreStore for the player's browser.
        api:          ScoreApiClient, or None to skip uploading.
    """
    get_test_config(test_type)
    if result is None:
        return AttemptOutcome(evaluation=None, is_new_best=False, submitted=False)

    evaluation = evaluate(test_type, result)
    is_new_best = best_scores.save_best_score(test_type, result) if result > 0 else False

    if api is None or not should_submit(test_type, result):
        return AttemptOutcome(evaluation=evaluation, is_new_best=is_new_best, submitted=False)

    try:
        api.submit_score(test_type, result, metadata)
    except SubmissionError as exc:
        logger.warning("Score upload for %s failed: %s", test_type, exc)
        return AttemptOutcome(
            evaluation=evaluation,
            is_new_best=is_new_best,
            submitted=False,
            notice=exc.user_message,
        )
    return AttemptOutcome(evaluation=evaluation, is_new_best=is_new_best, submitted=True)
