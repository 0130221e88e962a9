import json
import logging
import math

from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from brainmark.scores.helpers.evaluation import evaluate
from brainmark.scores.helpers.leaderboard import get_leaderboard, get_test_stats
from brainmark.scores.helpers.rate_limits import check_submission_rate_limit, window_bucket_for
from brainmark.scores.models import Score
from brainmark.scores.registry import TEST_REGISTRY, is_registered

logger = logging.getLogger(__name__)

LEADERBOARD_DEFAULT_LIMIT: int = getattr(settings, "LEADERBOARD_DEFAULT_LIMIT", 50)
LEADERBOARD_MAX_LIMIT: int = getattr(settings, "LEADERBOARD_MAX_LIMIT", 100)


def _error(message, status):
    return JsonResponse({"success": False, "error": message}, status=status)


def _parse_number(value):
    """Return *value* as a finite float, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


@method_decorator(csrf_exempt, name="dispatch")
class ScoreSubmitView(View):
    """
    Receives an anonymous score from the browser and stores it.

    POST body: {testType, result, fingerprint, anonymousId, metadata?}

    Returns:
        200 {"success": true, "message": ...}
        400 invalid JSON, missing fields, unknown testType or non-numeric result
        429 the same fingerprint submitted this test type within the window
        500 database failure
    """

    REQUIRED_FIELDS = ("testType", "result", "fingerprint", "anonymousId")

    def post(self, request):
        try:
            data = json.loads(request.body)
        except (json.JSONDecodeError, ValueError):
            return _error("Invalid JSON", 400)
        if not isinstance(data, dict):
            return _error("Invalid JSON", 400)

        missing = [f for f in self.REQUIRED_FIELDS if data.get(f) in (None, "")]
        if missing:
            return _error(f"Missing fields: {', '.join(missing)}", 400)

        test_type = data["testType"]
        if not is_registered(test_type):
            return _error(f"Unknown testType: '{test_type}'", 400)

        result = _parse_number(data["result"])
        if result is None:
            return _error("result must be a finite number", 400)

        for field, model_field in (("fingerprint", "fingerprint"), ("anonymousId", "anonymous_id")):
            max_length = Score._meta.get_field(model_field).max_length
            if not isinstance(data[field], str) or len(data[field]) > max_length:
                return _error(f"{field} must be a string of at most {max_length} characters", 400)

        fingerprint = data["fingerprint"]
        anonymous_id = data["anonymousId"]
        metadata = data.get("metadata") or {}

        try:
            allowed, reason = check_submission_rate_limit(fingerprint, test_type)
            if not allowed:
                logger.info("Rate-limited %s submission from anonymous_id=%s", test_type, anonymous_id)
                return _error(reason, 429)

            try:
                with transaction.atomic():
                    score = Score.objects.create(
                        test_type=test_type,
                        result=result,
                        fingerprint=fingerprint,
                        anonymous_id=anonymous_id,
                        metadata=metadata,
                        window_bucket=window_bucket_for(),
                    )
            except IntegrityError:
                # Only reachable in strict mode: a concurrent insert won the bucket.
                logger.info("Rate-limit bucket collision for %s submission", test_type)
                return _error("Please wait before submitting another score for this test.", 429)
        except DatabaseError:
            logger.exception("Failed to store %s score", test_type)
            return _error("Internal server error", 500)

        logger.info("Stored %s score %s (id=%s)", test_type, result, score.id)
        return JsonResponse({"success": True, "message": "Score submitted"})


class LeaderboardView(View):
    """
    JSON API: ranked scores plus aggregate stats for one test type.

    Query params:
        limit  number of rankings to return (default 50, max 100)

    Returns:
        200 {"rankings": [...], "stats": {"totalPlayers", "averageScore", "bestScore"}}
        400 unknown test type
    """

    def get(self, request, test_type):
        if not is_registered(test_type):
            return _error(f"Unknown test type: '{test_type}'", 400)

        limit = self._parse_limit(request.GET.get("limit"))
        try:
            rankings = get_leaderboard(test_type, limit)
            stats = get_test_stats(test_type)
        except DatabaseError:
            logger.exception("Failed to read %s leaderboard", test_type)
            return _error("Internal server error", 500)

        return JsonResponse({"rankings": rankings, "stats": stats})

    def _parse_limit(self, raw):
        try:
            limit = int(raw)
        except (TypeError, ValueError):
            return LEADERBOARD_DEFAULT_LIMIT
        return max(1, min(limit, LEADERBOARD_MAX_LIMIT))


class CatalogView(View):
    """Lists registered test types with their label, unit and ranking direction."""

    def get(self, request):
        tests = [
            {
                "type": key,
                "label": entry["label"],
                "unit": entry["unit"],
                "higher_is_better": entry["higher_is_better"],
            }
            for key, entry in TEST_REGISTRY.items()
        ]
        return JsonResponse({"tests": tests})


class EvaluateView(View):
    """
    Evaluates a score without storing it.

    GET ?score=<number>
    Returns 200 with the evaluation dict, 400 for an unknown test type or bad score.
    """

    def get(self, request, test_type):
        if not is_registered(test_type):
            return _error(f"Unknown test type: '{test_type}'", 400)
        raw = request.GET.get("score")
        score = _parse_number(raw) if raw is not None else None
        if score is None:
            return _error("score must be a finite number", 400)
        return JsonResponse(evaluate(test_type, score).as_dict())


score_submit_view = ScoreSubmitView.as_view()
leaderboard_view = LeaderboardView.as_view()
catalog_view = CatalogView.as_view()
evaluate_view = EvaluateView.as_view()
