"""Summary metrics for level-count games (memory, visual, sequence, chimp)."""


def compute_level_summary(max_level):
    """The result is simply the highest level cleared."""
    max_level = int(max_level or 0)
    return {"result": max_level, "finalLevel": max_level}
