"""Summary metrics for the typing speed test."""

# Standard convention: five characters make one word.
CHARS_PER_WORD = 5


def compute_typing_summary(typed_text: str, target_text: str, elapsed_seconds: float) -> dict:
    """
    Compute words-per-minute and accuracy for a typing run.

    Only characters that match the target at the same position count as
    correct; WPM is derived from correct characters alone.

    Returns dict with:
      result        : WPM (int), 0 when elapsed_seconds <= 0
      accuracy      : correct / typed * 100, 2 dp (0 when nothing typed)
      correctChars, totalChars, timeElapsed (s, 2 dp)
    """
    correct_chars = sum(1 for typed, expected in zip(typed_text, target_text) if typed == expected)
    total_chars = len(typed_text)
    accuracy = (correct_chars / total_chars) * 100 if total_chars else 0.0

    if elapsed_seconds and elapsed_seconds > 0:
        wpm = int(round((correct_chars / CHARS_PER_WORD) / elapsed_seconds * 60))
    else:
        wpm = 0

    return {
        "result": wpm,
        "accuracy": round(accuracy, 2),
        "correctChars": correct_chars,
        "totalChars": total_chars,
        "timeElapsed": round(elapsed_seconds or 0.0, 2),
    }
