# Registry of all test types offered on the site.
# Each entry carries everything the scoring pipeline needs for that test:
# ranking direction, level thresholds (best to worst), canned feedback text
# and the smallest result worth uploading.

import math

EXPERT = "expert"
EXCELLENT = "excellent"
ABOVE_AVERAGE = "above_average"
AVERAGE = "average"
BELOW_AVERAGE = "below_average"
BEGINNER = "beginner"

# Best to worst.
LEVELS: tuple[str, ...] = (EXPERT, EXCELLENT, ABOVE_AVERAGE, AVERAGE, BELOW_AVERAGE, BEGINNER)

INF = math.inf


class UnknownTestType(ValueError):
    """Raised when a test type is not present in TEST_REGISTRY."""


TEST_REGISTRY: dict[str, dict] = {
    "reaction": {
        "label": "Reaction Time",
        "unit": "ms",
        "higher_is_better": False,
        "minimum_submittable": 1,
        "thresholds": {
            EXPERT: 180,
            EXCELLENT: 220,
            ABOVE_AVERAGE: 280,
            AVERAGE: 350,
            BELOW_AVERAGE: 450,
            BEGINNER: INF,
        },
        "descriptions": {
            EXPERT: "A reaction time of {score}{unit} is expert level. Your reflexes are exceptionally sharp.",
            EXCELLENT: "{score}{unit} is an excellent reaction time, faster than most people.",
            ABOVE_AVERAGE: "{score}{unit} is above average. Nicely done.",
            AVERAGE: "{score}{unit} is a typical reaction time, right around the average.",
            BELOW_AVERAGE: "{score}{unit} is a little slower than average.",
            BEGINNER: "{score}{unit} leaves plenty of room for improvement.",
        },
        "suggestions": {
            EXPERT: "Keep those reflexes sharp and try some more demanding reaction drills.",
            EXCELLENT: "Stay in shape with games or sports that reward quick reactions.",
            ABOVE_AVERAGE: "Great result! Regular practice can push it further.",
            AVERAGE: "Reaction training games are a good way to get faster.",
            BELOW_AVERAGE: "Practise reaction drills, go easy on caffeine and get enough sleep.",
            BEGINNER: "Practise often, rest well and avoid testing while tired.",
        },
    },
    "memory": {
        "label": "Number Memory",
        "unit": " digits",
        "higher_is_better": True,
        "minimum_submittable": 1,
        "thresholds": {
            EXPERT: 12,
            EXCELLENT: 9,
            ABOVE_AVERAGE: 7,
            AVERAGE: 5,
            BELOW_AVERAGE: 3,
            BEGINNER: 0,
        },
        "descriptions": {
            EXPERT: "Remembering {score}{unit} shows an extraordinary memory!",
            EXCELLENT: "Recalling {score}{unit} is an excellent result. Your memory is strong.",
            ABOVE_AVERAGE: "A span of {score}{unit} is above average.",
            AVERAGE: "Remembering {score}{unit} is a typical digit span.",
            BELOW_AVERAGE: "A span of {score}{unit} can still be improved.",
            BEGINNER: "Remembering {score}{unit} is a fine place to start.",
        },
        "suggestions": {
            EXPERT: "Astonishing memory! Try harder memory challenges.",
            EXCELLENT: "Excellent recall, keep it up.",
            ABOVE_AVERAGE: "Good memory. Techniques like the memory palace can take you further.",
            AVERAGE: "Grouping digits and repetition will help you improve.",
            BELOW_AVERAGE: "Try memory techniques such as chunking and association.",
            BEGINNER: "Start with short numbers, build up length gradually and use chunking.",
        },
    },
    "visual": {
        "label": "Visual Memory",
        "unit": " levels",
        "higher_is_better": True,
        "minimum_submittable": 1,
        "thresholds": {
            EXPERT: 11,
            EXCELLENT: 8,
            ABOVE_AVERAGE: 6,
            AVERAGE: 4,
            BELOW_AVERAGE: 2,
            BEGINNER: 0,
        },
        "descriptions": {
            EXPERT: "Clearing {score}{unit} of visual memory shows outstanding spatial recall!",
            EXCELLENT: "{score}{unit} is an excellent visual memory result.",
            ABOVE_AVERAGE: "Clearing {score}{unit} puts your visual memory above average.",
            AVERAGE: "{score}{unit} is a typical visual memory result.",
            BELOW_AVERAGE: "{score}{unit} leaves room to improve.",
            BEGINNER: "{score}{unit} is a good start.",
        },
        "suggestions": {
            EXPERT: "Superb spatial memory! Try more complex visual tasks.",
            EXCELLENT: "Strong visual memory, keep it up.",
            ABOVE_AVERAGE: "Good visual memory. Spatial puzzles can sharpen it further.",
            AVERAGE: "Observation drills and spatial games will help.",
            BELOW_AVERAGE: "Work on visual attention to sharpen your observation.",
            BEGINNER: "Start with simple patterns and raise the complexity step by step.",
        },
    },
    "typing": {
        "label": "Typing Speed",
        "unit": " WPM",
        "higher_is_better": True,
        "minimum_submittable": 1,
        "thresholds": {
            EXPERT: 90,
            EXCELLENT: 70,
            ABOVE_AVERAGE: 50,
            AVERAGE: 35,
            BELOW_AVERAGE: 20,
            BEGINNER: 0,
        },
        "descriptions": {
            EXPERT: "{score}{unit} is expert-level typing!",
            EXCELLENT: "{score}{unit} is an excellent typing speed.",
            ABOVE_AVERAGE: "{score}{unit} is faster than the average typist.",
            AVERAGE: "{score}{unit} is a typical typing speed.",
            BELOW_AVERAGE: "{score}{unit} has room to grow.",
            BEGINNER: "{score}{unit} is a good start.",
        },
        "suggestions": {
            EXPERT: "Professional speed! Consider entering a typing competition.",
            EXCELLENT: "Excellent typing skills, keep it up.",
            ABOVE_AVERAGE: "Good speed. More practice will make you faster still.",
            AVERAGE: "Typing tutors can improve both speed and accuracy.",
            BELOW_AVERAGE: "Learn correct finger placement and practise regularly.",
            BEGINNER: "Start with the home row and aim for accuracy before speed.",
        },
    },
    "sequence": {
        "label": "Sequence Memory",
        "unit": " levels",
        "higher_is_better": True,
        "minimum_submittable": 1,
        "thresholds": {
            EXPERT: 13,
            EXCELLENT: 10,
            ABOVE_AVERAGE: 7,
            AVERAGE: 5,
            BELOW_AVERAGE: 3,
            BEGINNER: 0,
        },
        "descriptions": {
            EXPERT: "Clearing {score}{unit} of sequences shows a remarkable working memory!",
            EXCELLENT: "{score}{unit} is an excellent sequence memory result.",
            ABOVE_AVERAGE: "Clearing {score}{unit} is a solid sequence memory result.",
            AVERAGE: "{score}{unit} is a typical sequence memory result.",
            BELOW_AVERAGE: "{score}{unit} can keep improving.",
            BEGINNER: "{score}{unit} is a good start.",
        },
        "suggestions": {
            EXPERT: "Outstanding working memory! Try more complex sequence tasks.",
            EXCELLENT: "Excellent sequence memory, keep it up.",
            ABOVE_AVERAGE: "Good working memory. N-back training can take it further.",
            AVERAGE: "Sequence memory games will strengthen your working memory.",
            BELOW_AVERAGE: "Working memory drills will help you stay focused.",
            BEGINNER: "Start with short sequences and build up length and complexity.",
        },
    },
    "chimp": {
        "label": "Chimp Test",
        "unit": " numbers",
        "higher_is_better": True,
        # A chimp run always starts at four numbers.
        "minimum_submittable": 4,
        "thresholds": {
            EXPERT: 14,
            EXCELLENT: 10,
            ABOVE_AVERAGE: 8,
            AVERAGE: 6,
            BELOW_AVERAGE: 4,
            BEGINNER: 0,
        },
        "descriptions": {
            EXPERT: "Tracking {score}{unit} puts you in chimpanzee territory!",
            EXCELLENT: "{score}{unit} is an excellent working memory span.",
            ABOVE_AVERAGE: "Tracking {score}{unit} is above average.",
            AVERAGE: "{score}{unit} is a typical result.",
            BELOW_AVERAGE: "{score}{unit} can be improved with practice.",
            BEGINNER: "{score}{unit} is a good start.",
        },
        "suggestions": {
            EXPERT: "Remarkable! Keep challenging yourself with longer runs.",
            EXCELLENT: "Excellent span, keep practising to hold it.",
            ABOVE_AVERAGE: "Try to memorise the whole layout at a glance before clicking.",
            AVERAGE: "Focus on the positions of the first few numbers.",
            BELOW_AVERAGE: "Take a moment to study the grid before clicking the first number.",
            BEGINNER: "Start slowly and build the habit of scanning the grid in order.",
        },
    },
    "aim": {
        "label": "Aim Trainer",
        "unit": " pts",
        "higher_is_better": True,
        "minimum_submittable": 1,
        "thresholds": {
            EXPERT: 140,
            EXCELLENT: 100,
            ABOVE_AVERAGE: 80,
            AVERAGE: 60,
            BELOW_AVERAGE: 40,
            BEGINNER: 0,
        },
        "descriptions": {
            EXPERT: "{score}{unit} is pinpoint, expert-level aim!",
            EXCELLENT: "{score}{unit} is excellent speed and precision.",
            ABOVE_AVERAGE: "{score}{unit} is above average aim.",
            AVERAGE: "{score}{unit} is typical aim.",
            BELOW_AVERAGE: "{score}{unit} leaves room for sharper aim.",
            BEGINNER: "{score}{unit} is a good start.",
        },
        "suggestions": {
            EXPERT: "Outstanding accuracy! Try smaller targets.",
            EXCELLENT: "Great hand-eye coordination, keep it up.",
            ABOVE_AVERAGE: "Work on consistency to cut down on misses.",
            AVERAGE: "Balance speed and accuracy; misses cost more than slow clicks.",
            BELOW_AVERAGE: "Slow down a little and focus on hitting every target.",
            BEGINNER: "Start with accuracy, speed will follow.",
        },
    },
    "stroop": {
        "label": "Stroop Test",
        "unit": " pts",
        "higher_is_better": True,
        "minimum_submittable": 1,
        "thresholds": {
            EXPERT: 140,
            EXCELLENT: 100,
            ABOVE_AVERAGE: 80,
            AVERAGE: 60,
            BELOW_AVERAGE: 40,
            BEGINNER: 0,
        },
        "descriptions": {
            EXPERT: "{score}{unit} shows expert-level cognitive control!",
            EXCELLENT: "{score}{unit} is excellent resistance to interference.",
            ABOVE_AVERAGE: "{score}{unit} is above average.",
            AVERAGE: "{score}{unit} is a typical Stroop result.",
            BELOW_AVERAGE: "{score}{unit} can be improved.",
            BEGINNER: "{score}{unit} is a good start.",
        },
        "suggestions": {
            EXPERT: "Exceptional focus! Try a shorter response window.",
            EXCELLENT: "Excellent attention control, keep it up.",
            ABOVE_AVERAGE: "Keep practising to respond faster without losing accuracy.",
            AVERAGE: "Focus on the ink colour and ignore the word itself.",
            BELOW_AVERAGE: "Slow down slightly to avoid errors; accuracy matters most.",
            BEGINNER: "Practise naming colours aloud before trying for speed.",
        },
    },
    "schulte": {
        "label": "Schulte Grid",
        "unit": "ms",
        "higher_is_better": False,
        "minimum_submittable": 1,
        "thresholds": {
            EXPERT: 12_000,
            EXCELLENT: 16_000,
            ABOVE_AVERAGE: 20_000,
            AVERAGE: 26_000,
            BELOW_AVERAGE: 35_000,
            BEGINNER: INF,
        },
        "descriptions": {
            EXPERT: "Finishing in {score}{unit} shows expert-level visual search!",
            EXCELLENT: "{score}{unit} is an excellent completion time.",
            ABOVE_AVERAGE: "{score}{unit} is faster than average.",
            AVERAGE: "{score}{unit} is a typical completion time.",
            BELOW_AVERAGE: "{score}{unit} is a little slower than average.",
            BEGINNER: "{score}{unit} is a good start.",
        },
        "suggestions": {
            EXPERT: "Superb peripheral vision! Try a larger grid.",
            EXCELLENT: "Excellent scanning speed, keep it up.",
            ABOVE_AVERAGE: "Fix your gaze on the centre and use peripheral vision.",
            AVERAGE: "Try not to move your eyes too much; let the numbers come to you.",
            BELOW_AVERAGE: "Practise daily on smaller grids to build scanning speed.",
            BEGINNER: "Start with a 3x3 grid and work your way up.",
        },
    },
}

TEST_TYPE_CHOICES = [(key, entry["label"]) for key, entry in TEST_REGISTRY.items()]


def is_registered(test_type) -> bool:
    return isinstance(test_type, str) and test_type in TEST_REGISTRY


def get_test_config(test_type: str) -> dict:
    """Return the registry entry for *test_type* or raise UnknownTestType."""
    if not is_registered(test_type):
        raise UnknownTestType(f"Unknown test type: {test_type!r}")
    return TEST_REGISTRY[test_type]


def is_higher_better(test_type: str) -> bool:
    return get_test_config(test_type)["higher_is_better"]


def format_result(test_type: str, result) -> str:
    """Return *result* with the test's display unit, e.g. ``"72 WPM"``."""
    config = get_test_config(test_type)
    if isinstance(result, float) and result.is_integer():
        result = int(result)
    return f"{result}{config['unit']}"
