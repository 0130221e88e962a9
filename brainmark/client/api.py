"""
HTTP client for the score submission and leaderboard endpoints.

Every request carries an explicit timeout; a hung server surfaces as a
TransientNetworkError rather than blocking the caller.
"""
import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request

from brainmark.client.fingerprint import generate_fingerprint
from brainmark.client.identity import get_anonymous_id

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10

SUBMIT_PATH = "/api/scores/submit/"
LEADERBOARD_PATH = "/api/leaderboard/{test_type}/"

EMPTY_STATS = {"totalPlayers": 0, "averageScore": 0, "bestScore": 0}

# Connection, timeout and truncated-body failures; URLError and timeouts are OSErrors.
NETWORK_ERRORS = (OSError, http.client.HTTPException, ValueError)


class ScoreApiError(Exception):
    """Base class for API failures; ``user_message`` is safe to show."""

    user_message = "Something went wrong."

    def __init__(self, detail: str = "", status: int | None = None):
        super().__init__(detail or self.user_message)
        self.status = status


class SubmissionError(ScoreApiError):
    """Raised when a score could not be submitted."""


class ValidationError(SubmissionError):
    user_message = "Invalid request."


class RateLimitError(SubmissionError):
    user_message = "Please wait before submitting again."


class TransientNetworkError(SubmissionError):
    user_message = "Score upload failed, result kept locally."


class LeaderboardError(ScoreApiError):
    user_message = "Could not load the leaderboard."


class ScoreApiClient:
    """
    Args:
        base_url:     Site root, e.g. ``https://example.com``.
        store:        Key-value store holding the anonymous id.
        timeout:      Seconds before a request is abandoned.
        fingerprint:  Pre-computed fingerprint; generated from the environment if omitted.
    """

    def __init__(self, base_url: str, store, timeout: float = DEFAULT_TIMEOUT, fingerprint: str | None = None):
        self.base_url = base_url.rstrip("/")
        self.store = store
        self.timeout = timeout
        self._fingerprint = fingerprint

    @property
    def fingerprint(self) -> str:
        if self._fingerprint is None:
            self._fingerprint = generate_fingerprint()
        return self._fingerprint

    def submit_score(self, test_type: str, result: float, metadata: dict | None = None) -> dict:
        """
        Submit one result.

        Raises:
            ValidationError:        the server rejected the payload (400).
            RateLimitError:         this device already submitted this test recently (429).
            TransientNetworkError:  network failure, timeout or server error.
        """
        payload = {
            "testType": test_type,
            "result": result,
            "fingerprint": self.fingerprint,
            "anonymousId": get_anonymous_id(self.store),
            "metadata": metadata or {},
        }
        request = urllib.request.Request(
            self.base_url + SUBMIT_PATH,
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json; charset=utf-8"},
            method="POST",
        )
        try:
            return self._send(request)
        except urllib.error.HTTPError as exc:
            detail = _error_detail(exc)
            if exc.code == 400:
                raise ValidationError(detail, status=exc.code) from exc
            if exc.code == 429:
                raise RateLimitError(detail, status=exc.code) from exc
            raise TransientNetworkError(f"HTTP {exc.code}: {detail}", status=exc.code) from exc
        except NETWORK_ERRORS as exc:
            raise TransientNetworkError(str(exc)) from exc

    def get_leaderboard(self, test_type: str, limit: int = 10) -> list[dict]:
        """Return ranked records for *test_type*; raises LeaderboardError on failure."""
        data = self._get_leaderboard_payload(test_type, limit)
        return data.get("rankings") or []

    def get_test_stats(self, test_type: str) -> dict:
        """Return ``{totalPlayers, averageScore, bestScore}``; zeros if the request fails."""
        try:
            data = self._get_leaderboard_payload(test_type, 1)
        except LeaderboardError:
            logger.warning("Could not fetch %s stats", test_type, exc_info=True)
            return dict(EMPTY_STATS)
        return data.get("stats") or dict(EMPTY_STATS)

    def _get_leaderboard_payload(self, test_type, limit):
        query = urllib.parse.urlencode({"limit": limit})
        path = LEADERBOARD_PATH.format(test_type=urllib.parse.quote(test_type, safe=""))
        request = urllib.request.Request(f"{self.base_url}{path}?{query}", method="GET")
        try:
            return self._send(request)
        except urllib.error.HTTPError as exc:
            raise LeaderboardError(_error_detail(exc), status=exc.code) from exc
        except NETWORK_ERRORS as exc:
            raise LeaderboardError(str(exc)) from exc

    def _send(self, request) -> dict:
        with urllib.request.urlopen(request, timeout=self.timeout) as response:
            return json.loads(response.read().decode("utf-8"))


def _error_detail(exc: urllib.error.HTTPError) -> str:
    try:
        body = exc.read().decode("utf-8", errors="replace") if exc.fp is not None else ""
    except NETWORK_ERRORS:
        return ""
    try:
        return json.loads(body).get("error") or body
    except (ValueError, AttributeError):
        return body
