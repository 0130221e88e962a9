"""Summary metrics for the single-trial reaction time test."""


def compute_reaction_summary(rt_ms):
    """
    Return the reaction time summary for one trial.

    A click before the stimulus appears (rt_ms <= 0 or None) is an
    anticipation and yields result None; nothing should be recorded.
    """
    if rt_ms is None or rt_ms <= 0:
        return {"result": None, "is_anticipation": True}
    return {"result": int(round(rt_ms)), "is_anticipation": False}
