"""Leaderboard queries over the scores table."""
from django.db.models import Avg, Count, Max, Min

from brainmark.scores.registry import is_higher_better


def ranked_queryset(test_type: str):
    """
    Scores for *test_type* in ranking order.

    Best result first; equal results keep insertion order.
    """
    from brainmark.scores.models import Score

    result_order = "-result" if is_higher_better(test_type) else "result"
    return Score.objects.filter(test_type=test_type).order_by(result_order, "created_at", "pk")


def get_leaderboard(test_type: str, limit: int) -> list[dict]:
    """
    Return the top *limit* scores for *test_type* with a 1-based ``rank``.

    Records never include the device fingerprint.
    """
    rows = ranked_queryset(test_type).values(
        "id", "test_type", "result", "anonymous_id", "created_at", "metadata"
    )[:limit]
    return [
        {
            "id": str(row["id"]),
            "test_type": row["test_type"],
            "result": row["result"],
            "anonymous_id": row["anonymous_id"],
            "created_at": row["created_at"].isoformat(),
            "rank": rank,
            "metadata": row["metadata"],
        }
        for rank, row in enumerate(rows, start=1)
    ]


def get_test_stats(test_type: str) -> dict:
    """
    Aggregate statistics for *test_type*.

    Returns:
        {"totalPlayers": int, "averageScore": float (2 dp), "bestScore": float}
        All zero when there are no scores.
    """
    from brainmark.scores.models import Score

    best = Max("result") if is_higher_better(test_type) else Min("result")
    stats = Score.objects.filter(test_type=test_type).aggregate(
        total=Count("id"),
        average=Avg("result"),
        best=best,
    )
    return {
        "totalPlayers": stats["total"] or 0,
        "averageScore": round(stats["average"], 2) if stats["average"] is not None else 0,
        "bestScore": stats["best"] if stats["best"] is not None else 0,
    }
