from django.core.management.base import BaseCommand

from word_ladder.apps import get_engine
from word_ladder.puzzles import DIFFICULTIES


class Command(BaseCommand):
    help = "Show the loaded word ladder dictionary and the active puzzle catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "--difficulty",
            choices=DIFFICULTIES,
            help="Only list puzzles of this difficulty.",
        )

    def handle(self, *args, **options):
        # PUBLIC_INTERFACE
        # Read-only: reports what WordLadderConfig.ready() loaded.
        engine = get_engine()
        difficulty = options.get("difficulty")

        source = "built-in fallback" if engine.used_fallback else "word list"
        self.stdout.write(f"Dictionary: {len(engine.word_set)} words from {source}.")

        puzzles = engine.puzzles_for(difficulty) if difficulty else engine.catalog
        for p in puzzles:
            self.stdout.write(f"{p.id:>3} {p.difficulty:<6} {p.start_word} -> {p.target_word}")
        self.stdout.write(self.style.SUCCESS(f"{len(puzzles)} active puzzles."))

        for d in engine.discarded:
            self.stdout.write(self.style.WARNING(f"Discarded puzzle {d.id}: {d.reason}"))
