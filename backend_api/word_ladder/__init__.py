"""
Word ladder app package initializer.

Re-exports the engine and hint utilities so callers can import from
word_ladder directly, e.g.:

    from word_ladder import WordLadderEngine, suggest_next_words
"""

# PUBLIC_INTERFACE
from .puzzles import (
    WordLadderEngine,
    Puzzle,
    ValidationResult,
    EmptyCatalogError,
    build_engine,
    suggest_next_words,
)

__all__ = [
    "WordLadderEngine",
    "Puzzle",
    "ValidationResult",
    "EmptyCatalogError",
    "build_engine",
    "suggest_next_words",
]
