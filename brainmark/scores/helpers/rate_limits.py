"""
Anti-abuse submission rate limit.

A device fingerprint may have at most one accepted score per test type within
a rolling window (10 minutes by default). The check is a read followed by a
separate insert, so two near-simultaneous requests can both pass; enabling
SCORE_STRICT_RATE_LIMIT adds a unique (fingerprint, test_type, window_bucket)
key that turns the losing insert into an IntegrityError.

Limits are configurable via Django settings so they can be adjusted without
code changes.
"""
import datetime

from django.conf import settings
from django.utils import timezone


# Defaults, overridable via settings
SCORE_SUBMISSION_WINDOW_MINUTES: int = getattr(settings, "SCORE_SUBMISSION_WINDOW_MINUTES", 10)
SCORE_STRICT_RATE_LIMIT: bool = getattr(settings, "SCORE_STRICT_RATE_LIMIT", False)


def check_submission_rate_limit(fingerprint: str, test_type: str, now=None) -> tuple[bool, str | None]:
    """
    Check whether *fingerprint* may submit another *test_type* score.

    Returns:
        (True, None)         allowed
        (False, reason_str)  blocked; reason_str is a human-readable explanation.
    """
    from brainmark.scores.models import Score

    now = now or timezone.now()
    cutoff = now - datetime.timedelta(minutes=SCORE_SUBMISSION_WINDOW_MINUTES)
    recent = Score.objects.filter(
        fingerprint=fingerprint,
        test_type=test_type,
        created_at__gte=cutoff,
    ).exists()
    if recent:
        return (
            False,
            (
                f"Please wait {SCORE_SUBMISSION_WINDOW_MINUTES} minutes "
                "before submitting another score for this test."
            ),
        )
    return True, None


def window_bucket_for(now=None) -> int | None:
    """
    Return the fixed rate-limit bucket for *now*, or None when strict mode is off.

    Buckets are consecutive, non-overlapping windows of
    SCORE_SUBMISSION_WINDOW_MINUTES counted from the Unix epoch.
    """
    if not SCORE_STRICT_RATE_LIMIT:
        return None
    now = now or timezone.now()
    return int(now.timestamp() // (SCORE_SUBMISSION_WINDOW_MINUTES * 60))
