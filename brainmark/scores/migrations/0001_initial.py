import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Score",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "test_type",
                    models.CharField(
                        choices=[
                            ("reaction", "Reaction Time"),
                            ("memory", "Number Memory"),
                            ("visual", "Visual Memory"),
                            ("typing", "Typing Speed"),
                            ("sequence", "Sequence Memory"),
                            ("chimp", "Chimp Test"),
                            ("aim", "Aim Trainer"),
                            ("stroop", "Stroop Test"),
                            ("schulte", "Schulte Grid"),
                        ],
                        max_length=32,
                    ),
                ),
                ("result", models.FloatField()),
                ("fingerprint", models.CharField(max_length=128)),
                ("anonymous_id", models.CharField(max_length=64)),
                ("metadata", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("window_bucket", models.PositiveBigIntegerField(blank=True, editable=False, null=True)),
            ],
            options={
                "db_table": "scores",
                "indexes": [
                    models.Index(fields=["test_type", "result"], name="idx_scores_type_result"),
                    models.Index(fields=["test_type", "fingerprint"], name="idx_scores_type_fingerprint"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("fingerprint", "test_type", "window_bucket"),
                        name="uniq_scores_rate_limit_bucket",
                    )
                ],
            },
        ),
    ]
