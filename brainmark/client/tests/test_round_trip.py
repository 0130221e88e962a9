"""Client against the real views, with the Django test client as transport."""
import io
import json
import urllib.error
import urllib.parse

import pytest
from django.test import Client

from brainmark.client.api import RateLimitError, ScoreApiClient, ValidationError
from brainmark.client.attempt import complete_attempt


class DjangoTransportClient(ScoreApiClient):
    def __init__(self, store, fingerprint="fp-round-trip"):
        super().__init__("http://testserver", store, fingerprint=fingerprint)
        self.django_client = Client()

    def _send(self, request):
        parts = urllib.parse.urlsplit(request.full_url)
        path = parts.path + (f"?{parts.query}" if parts.query else "")
        if request.get_method() == "POST":
            response = self.django_client.post(path, data=request.data, content_type="application/json")
        else:
            response = self.django_client.get(path)
        if response.status_code >= 400:
            raise urllib.error.HTTPError(
                request.full_url, response.status_code, "error", None, io.BytesIO(response.content)
            )
        return json.loads(response.content)


@pytest.mark.django_db
class TestRoundTrip:
    def test_submit_then_read_back(self, store):
        api = DjangoTransportClient(store)
        api.submit_score("typing", 72, {"accuracy": 97})

        rankings = api.get_leaderboard("typing")
        assert rankings[0]["result"] == 72
        assert api.get_test_stats("typing") == {"totalPlayers": 1, "averageScore": 72, "bestScore": 72}

    def test_second_submission_rate_limited(self, store):
        api = DjangoTransportClient(store)
        api.submit_score("typing", 72)
        with pytest.raises(RateLimitError):
            api.submit_score("typing", 80)

    def test_unknown_test_type_is_validation_error(self, store):
        with pytest.raises(ValidationError):
            DjangoTransportClient(store).submit_score("juggling", 1)

    def test_complete_attempt_reports_rate_limit(self, store, best_scores):
        api = DjangoTransportClient(store)
        first = complete_attempt("reaction", 240, best_scores=best_scores, api=api)
        second = complete_attempt("reaction", 210, best_scores=best_scores, api=api)
        assert first.submitted is True
        assert second.submitted is False
        assert second.notice == RateLimitError.user_message
        assert second.is_new_best is True
