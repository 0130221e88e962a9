"""Summary metrics for the Schulte grid."""


def compute_schulte_summary(elapsed_ms, grid_size=5):
    """Return the completion time in ms (result) and seconds to 2 dp."""
    completion_time = round(elapsed_ms / 1000, 2)
    return {
        "result": int(round(completion_time * 1000)),
        "gridSize": grid_size,
        "completionTime": completion_time,
    }
