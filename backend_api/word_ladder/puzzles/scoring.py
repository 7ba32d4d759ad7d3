from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BASE_SCORE = 100
DEFAULT_MIN_STEPS = 5
STEP_PENALTY = 5
HINT_PENALTY = 2


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class ScoreBreakdown:
    """Score for a completed ladder with its components."""

    score: int
    base_score: int
    step_penalty: int
    hint_penalty: int


def _compute_step_penalty(steps: int, min_steps: int) -> int:
    """Penalty for every step taken beyond the puzzle minimum."""
    return max(steps - min_steps, 0) * STEP_PENALTY


def _compute_hint_penalty(hints_used: int) -> int:
    return hints_used * HINT_PENALTY


# PUBLIC_INTERFACE
def compute_score_breakdown(
    steps: int, hints_used: int = 0, min_steps: Optional[int] = None
) -> ScoreBreakdown:
    """Score a solved ladder.

    Parameters:
        steps: number of words entered after the start word.
        hints_used: number of hint requests made while solving.
        min_steps: the puzzle's minimum step count (defaults to 5 when unknown).

    Raises:
        ValueError: if steps or hints_used is negative.
    """
    if steps < 0 or hints_used < 0:
        raise ValueError("steps and hints_used must be non-negative.")
    minimum = DEFAULT_MIN_STEPS if min_steps is None else min_steps
    step_penalty = _compute_step_penalty(steps, minimum)
    hint_penalty = _compute_hint_penalty(hints_used)
    score = max(BASE_SCORE - step_penalty - hint_penalty, 0)
    return ScoreBreakdown(
        score=score,
        base_score=BASE_SCORE,
        step_penalty=step_penalty,
        hint_penalty=hint_penalty,
    )
