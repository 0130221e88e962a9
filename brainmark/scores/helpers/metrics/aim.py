"""Summary metrics for the aim trainer."""
import statistics


def compute_aim_summary(reaction_times_ms, hits, misses):
    """
    Combine speed and precision into a single aim score.

    score = round(1000 / avg_rt * accuracy_fraction * 100)

    A run with no hits scores 0.
    """
    avg_rt = int(round(statistics.mean(reaction_times_ms))) if reaction_times_ms else 0
    attempts = hits + misses
    accuracy = hits / attempts * 100 if attempts else 0.0

    if avg_rt <= 0 or hits == 0:
        score = 0
    else:
        score = int(round((1000 / avg_rt) * (accuracy / 100) * 100))

    return {
        "result": score,
        "avgReactionTime": avg_rt,
        "accuracy": int(round(accuracy)),
        "hits": hits,
        "misses": misses,
    }
