from uuid import uuid4

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import CharField
from django.db.models import DateTimeField
from django.db.models import FloatField
from django.db.models import JSONField
from django.db.models import Model
from django.db.models import PositiveBigIntegerField
from django.db.models import UUIDField

from brainmark.scores.registry import TEST_REGISTRY
from brainmark.scores.registry import TEST_TYPE_CHOICES


class Score(Model):
    """
    One submitted attempt.

    ``fingerprint`` is used only for rate limiting and is never exposed;
    ``anonymous_id`` is the displayed player identity.
    """

    id = UUIDField(primary_key=True, default=uuid4, editable=False)
    test_type = CharField(max_length=32, choices=TEST_TYPE_CHOICES)
    result = FloatField()
    fingerprint = CharField(max_length=128)
    anonymous_id = CharField(max_length=64)
    metadata = JSONField(null=True, blank=True)
    created_at = DateTimeField(auto_now_add=True, db_index=True)
    # Populated only when SCORE_STRICT_RATE_LIMIT is on; NULLs never collide.
    window_bucket = PositiveBigIntegerField(null=True, blank=True, editable=False)

    class Meta:
        db_table = "scores"
        indexes = [
            models.Index(fields=["test_type", "result"], name="idx_scores_type_result"),
            models.Index(fields=["test_type", "fingerprint"], name="idx_scores_type_fingerprint"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["fingerprint", "test_type", "window_bucket"],
                name="uniq_scores_rate_limit_bucket",
            ),
        ]

    def clean(self):
        if self.test_type not in TEST_REGISTRY:
            raise ValidationError(
                {"test_type": f"'{self.test_type}' is not a registered test type."}
            )

    def __str__(self) -> str:
        return f"{self.test_type} {self.result} – {self.anonymous_id}"
