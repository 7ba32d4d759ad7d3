"""
Word ladder engine, catalog loading, hints and scoring.

Exports:
- WordLadderEngine with its Puzzle and ValidationResult records
- build_engine and read_word_lines for start-up loading
- suggest_next_words and puzzle_hint hint helpers
- compute_score_breakdown for completed ladders

These modules are framework-agnostic and can be reused by views or management
commands without importing request objects.
"""

from .engine import (
    DEFAULT_DIFFICULTY,
    DIFFICULTIES,
    EmptyCatalogError,
    Puzzle,
    ValidationResult,
    WordLadderEngine,
)
from .loader import build_engine, read_word_lines
from .hints import suggest_next_words, puzzle_hint
from .scoring import ScoreBreakdown, compute_score_breakdown

__all__ = [
    "DEFAULT_DIFFICULTY",
    "DIFFICULTIES",
    "EmptyCatalogError",
    "Puzzle",
    "ValidationResult",
    "WordLadderEngine",
    "build_engine",
    "read_word_lines",
    "suggest_next_words",
    "puzzle_hint",
    "ScoreBreakdown",
    "compute_score_breakdown",
]
