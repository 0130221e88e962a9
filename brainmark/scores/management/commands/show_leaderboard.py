"""Management command to print a test's leaderboard and stats."""
from django.core.management.base import BaseCommand, CommandError

from brainmark.scores.helpers.leaderboard import get_leaderboard, get_test_stats
from brainmark.scores.registry import TEST_REGISTRY, format_result, is_registered


class Command(BaseCommand):
    help = "Print the ranked scores and aggregate stats for one test type."

    def add_arguments(self, parser):
        parser.add_argument("test_type", choices=sorted(TEST_REGISTRY))
        parser.add_argument("--limit", type=int, default=10, help="Number of rankings to show.")

    def handle(self, *args, **options):
        test_type = options["test_type"]
        if not is_registered(test_type):
            raise CommandError(f"Unknown test type: {test_type}")

        stats = get_test_stats(test_type)
        self.stdout.write(
            f"{TEST_REGISTRY[test_type]['label']}: {stats['totalPlayers']} score(s), "
            f"average {stats['averageScore']}, best {format_result(test_type, stats['bestScore'])}"
        )
        for record in get_leaderboard(test_type, options["limit"]):
            self.stdout.write(
                f"{record['rank']:>3}. {record['anonymous_id'][:12]:<12} "
                f"{format_result(test_type, record['result'])}"
            )
