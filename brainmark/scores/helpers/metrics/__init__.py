from brainmark.scores.helpers.metrics.aim import compute_aim_summary
from brainmark.scores.helpers.metrics.levels import compute_level_summary
from brainmark.scores.helpers.metrics.reaction import compute_reaction_summary
from brainmark.scores.helpers.metrics.schulte import compute_schulte_summary
from brainmark.scores.helpers.metrics.stroop import compute_stroop_summary
from brainmark.scores.helpers.metrics.typing_speed import compute_typing_summary

# Maps test_type → function turning raw trial data into {"result": ..., **metadata}
METRIC_COMPUTERS = {
    "reaction": compute_reaction_summary,
    "memory": compute_level_summary,
    "visual": compute_level_summary,
    "sequence": compute_level_summary,
    "chimp": compute_level_summary,
    "typing": compute_typing_summary,
    "aim": compute_aim_summary,
    "stroop": compute_stroop_summary,
    "schulte": compute_schulte_summary,
}
