"""Summary metrics for the Stroop colour-word test."""
import statistics

# Average used when no trial was answered correctly.
NO_RESPONSE_AVG_MS = 999


def compute_stroop_summary(correct_reaction_times_ms, correct, wrong, total_trials):
    """
    Score a Stroop run from accuracy and mean reaction time on correct trials.

    score = round(accuracy_fraction * 1000 / avg_rt * 100)
    """
    if correct_reaction_times_ms:
        avg_rt = int(round(statistics.mean(correct_reaction_times_ms)))
    else:
        avg_rt = NO_RESPONSE_AVG_MS
    accuracy = correct / total_trials * 100 if total_trials else 0.0
    score = int(round((accuracy / 100) * (1000 / avg_rt) * 100)) if avg_rt > 0 else 0

    return {
        "result": score,
        "avgReactionTime": avg_rt,
        "accuracy": int(round(accuracy)),
        "correct": correct,
        "wrong": wrong,
    }
