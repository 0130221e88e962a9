"""
Personal best per test type, kept in the injected key-value store.

All bests live under one key as a JSON object mapping test type to
``{score, date, testType}``. Storage failures never propagate: reads come
back empty and writes report no new best.
"""
from __future__ import annotations

import datetime
import json
import logging
import math
from dataclasses import dataclass

from brainmark.client.storage import StorageUnavailable
from brainmark.scores.registry import is_higher_better

logger = logging.getLogger(__name__)

BEST_SCORES_KEY = "brain-mark-best-scores"


@dataclass(frozen=True)
class BestScore:
    score: float
    date: str
    test_type: str

    def to_json(self) -> dict:
        return {"score": self.score, "date": self.date, "testType": self.test_type}

    @classmethod
    def from_json(cls, data: dict) -> BestScore:
        return cls(score=data["score"], date=data["date"], test_type=data["testType"])


def is_score_better(test_type: str, new_score: float, current_best: float | None = None) -> bool:
    """
    Return True if *new_score* beats *current_best* for *test_type*.

    No current best always counts as better. Ties are never better.
    """
    if current_best is None:
        return True
    if is_higher_better(test_type):
        return new_score > current_best
    return new_score < current_best


class BestScoreStore:
    def __init__(self, store):
        self.store = store

    def get_best_scores(self) -> dict[str, BestScore]:
        try:
            raw = self.store.get(BEST_SCORES_KEY)
        except StorageUnavailable:
            logger.warning("Storage unavailable; best scores disabled for this session")
            return {}
        if not raw:
            return {}
        try:
            data = json.loads(raw)
            return {test_type: BestScore.from_json(entry) for test_type, entry in data.items()}
        except (ValueError, TypeError, KeyError, AttributeError):
            logger.warning("Ignoring unreadable best-score record")
            return {}

    def get_best_score(self, test_type: str) -> BestScore | None:
        return self.get_best_scores().get(test_type)

    def save_best_score(self, test_type: str, score: float) -> bool:
        """
        Record *score* if it beats the stored best for *test_type*.

        Returns True only when a new best was written; non-finite scores are ignored.
        """
        if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
            logger.warning("Ignoring non-finite %s score %r", test_type, score)
            return False
        best_scores = self.get_best_scores()
        current = best_scores.get(test_type)
        if not is_score_better(test_type, score, current.score if current else None):
            return False

        best_scores[test_type] = BestScore(
            score=score,
            date=datetime.datetime.now(datetime.timezone.utc).isoformat(),
            test_type=test_type,
        )
        payload = json.dumps({key: best.to_json() for key, best in best_scores.items()})
        try:
            self.store.set(BEST_SCORES_KEY, payload)
        except StorageUnavailable:
            logger.warning("Could not save best score for %s", test_type)
            return False
        return True

    def clear_best_scores(self) -> None:
        try:
            self.store.remove(BEST_SCORES_KEY)
        except StorageUnavailable:
            logger.warning("Could not clear best scores")
