from __future__ import annotations

import random
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .engine import Puzzle

DEFAULT_HINT_LIMIT = 5


# Keep hint helpers usable with any object exposing the engine lookup.
@runtime_checkable
class _NeighbourSource(Protocol):
    """Minimal interface required from the engine for hint computations."""

    def find_possible_next_words(self, word: Any) -> List[str]: ...


# PUBLIC_INTERFACE
def suggest_next_words(
    engine: _NeighbourSource,
    word: Any,
    limit: int = DEFAULT_HINT_LIMIT,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Suggest up to `limit` dictionary words one letter away from `word`.

    When more candidates exist than the limit, a random sample is returned so
    repeated requests can surface different suggestions.

    Returns:
        A list of at most `limit` words; empty when `word` is not a dictionary word.

    Raises:
        ValueError: if limit is smaller than 1.
    """
    if limit < 1:
        raise ValueError("Hint limit must be at least 1.")
    candidates = engine.find_possible_next_words(word)
    if len(candidates) <= limit:
        return candidates
    return (rng or random).sample(candidates, limit)


# PUBLIC_INTERFACE
def puzzle_hint(puzzle: Puzzle) -> Dict[str, Any]:
    """Return the textual hint payload of a puzzle.

    Returns:
        {
            "puzzleId": int,
            "hint": str | None,     # None when the puzzle ships no hint
            "minSteps": int | None
        }
    """
    return {
        "puzzleId": puzzle.id,
        "hint": puzzle.hint,
        "minSteps": puzzle.min_steps,
    }
