from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .catalog import FALLBACK_WORDS

logger = logging.getLogger(__name__)

DIFFICULTIES: Tuple[str, ...] = ("easy", "medium", "hard")
DEFAULT_DIFFICULTY = "medium"


class EmptyCatalogError(RuntimeError):
    """Raised when no puzzle survives validation against the dictionary."""


def _puzzle_id(value: Any) -> int:
    """Accept ints and digit strings; floats and bools are malformed ids."""
    if isinstance(value, bool):
        raise ValueError(f"puzzle id must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    raise ValueError(f"puzzle id must be an integer, got {value!r}")


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Puzzle:
    """A word ladder puzzle from start_word to target_word."""

    id: int
    start_word: str
    target_word: str
    difficulty: str
    min_steps: Optional[int] = None
    hint: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Puzzle":
        """Build a puzzle from a raw mapping; words are normalized to lowercase."""
        min_steps = record.get("min_steps")
        return cls(
            id=_puzzle_id(record["id"]),
            start_word=str(record["start_word"]).strip().lower(),
            target_word=str(record["target_word"]).strip().lower(),
            difficulty=str(record.get("difficulty") or "").strip().lower(),
            min_steps=int(min_steps) if min_steps is not None else None,
            hint=record.get("hint") or None,
        )


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a step or solution check."""

    valid: bool
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"valid": self.valid}
        if self.reason is not None:
            data["reason"] = self.reason
        return data


@dataclass(frozen=True)
class DiscardedPuzzle:
    """A raw puzzle record rejected while building the catalog."""

    id: Any
    reason: str


def _normalize_words(lines: Iterable[str]) -> List[str]:
    """Strip and lowercase lines, keeping ASCII-alphabetic words once each."""
    seen: Dict[str, None] = {}
    for line in lines:
        if not isinstance(line, str):
            continue
        word = line.strip().lower()
        if word and word.isascii() and word.isalpha():
            seen.setdefault(word, None)
    return list(seen)


# PUBLIC_INTERFACE
class WordLadderEngine:
    """Dictionary and puzzle catalog for word ladders.

    All state is computed in __init__ and only read afterwards, so one
    instance can be shared by concurrent requests.

    Parameters:
        words: raw candidate lines (any case, surrounding whitespace allowed).
        puzzles: raw puzzle records, see Puzzle.from_record.

    Raises:
        EmptyCatalogError: if no puzzle record is playable with the dictionary.
    """

    def __init__(self, words: Iterable[str], puzzles: Iterable[Mapping[str, Any]]) -> None:
        self.used_fallback = False
        self._load_words(words)
        self._load_puzzles(puzzles)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<WordLadderEngine words={len(self.word_set)} puzzles={len(self.catalog)}>"

    def _load_words(self, lines: Iterable[str]) -> None:
        normalized = _normalize_words(lines)
        if not normalized:
            logger.warning(
                "Word source is empty or unavailable; using %d built-in fallback words.",
                len(FALLBACK_WORDS),
            )
            normalized = _normalize_words(FALLBACK_WORDS)
            self.used_fallback = True

        buckets: Dict[int, List[str]] = {}
        for word in normalized:
            buckets.setdefault(len(word), []).append(word)

        self.word_set = frozenset(normalized)
        self.words_by_length = {length: tuple(bucket) for length, bucket in buckets.items()}

    def _load_puzzles(self, records: Iterable[Mapping[str, Any]]) -> None:
        valid: List[Puzzle] = []
        discarded: List[DiscardedPuzzle] = []
        seen_ids = set()

        for record in records:
            try:
                puzzle = Puzzle.from_record(record)
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                record_id = record.get("id") if isinstance(record, Mapping) else None
                reason = f"malformed puzzle record: {exc!r}"
                discarded.append(DiscardedPuzzle(id=record_id, reason=reason))
                logger.warning("Discarding puzzle %s: %s", record_id, reason)
                continue

            reason = self._rejection_reason(puzzle, seen_ids)
            if reason:
                discarded.append(DiscardedPuzzle(id=puzzle.id, reason=reason))
                logger.warning("Discarding puzzle %s: %s", puzzle.id, reason)
                continue

            seen_ids.add(puzzle.id)
            valid.append(puzzle)

        if not valid:
            raise EmptyCatalogError(
                f"No valid word ladder puzzles: all {len(discarded)} records were discarded."
            )

        self.catalog = tuple(valid)
        self.discarded = tuple(discarded)
        self._by_id: Dict[int, Puzzle] = {p.id: p for p in valid}
        self._by_difficulty: Dict[str, Tuple[Puzzle, ...]] = {
            level: tuple(p for p in valid if p.difficulty == level) for level in DIFFICULTIES
        }

    def _rejection_reason(self, puzzle: Puzzle, seen_ids: set) -> Optional[str]:
        if puzzle.id in seen_ids:
            return f"duplicate puzzle id {puzzle.id}"
        if puzzle.difficulty not in DIFFICULTIES:
            return f"unknown difficulty {puzzle.difficulty!r}"
        start_ok = self.is_valid_word(puzzle.start_word)
        target_ok = self.is_valid_word(puzzle.target_word)
        if not start_ok or not target_ok:
            return (
                f"invalid puzzle words: {puzzle.start_word} ({start_ok}) -> "
                f"{puzzle.target_word} ({target_ok})"
            )
        if len(puzzle.start_word) != len(puzzle.target_word):
            return (
                f"mismatched word lengths: {puzzle.start_word} ({len(puzzle.start_word)}) -> "
                f"{puzzle.target_word} ({len(puzzle.target_word)})"
            )
        return None

    # PUBLIC_INTERFACE
    def is_valid_word(self, word: Any) -> bool:
        """Return True if the lowercase form of word is in the dictionary."""
        if not isinstance(word, str) or not word:
            return False
        return word.lower() in self.word_set

    # PUBLIC_INTERFACE
    def is_valid_step(self, current_word: Any, next_word: Any) -> bool:
        """Return True if the words have equal length and differ in exactly one position.

        Comparison is case-insensitive. Dictionary membership is not checked.
        """
        if not isinstance(current_word, str) or not isinstance(next_word, str):
            return False
        if not current_word or not next_word or len(current_word) != len(next_word):
            return False

        differences = 0
        # Lower each position separately; some characters lengthen when lowercased.
        for a, b in zip(current_word, next_word):
            if a.lower() != b.lower():
                differences += 1
                if differences > 1:
                    return False
        return differences == 1

    # PUBLIC_INTERFACE
    def find_possible_next_words(self, word: Any) -> List[str]:
        """Return every dictionary word one letter away from word.

        Returns an empty list when word itself is not in the dictionary.
        """
        if not self.is_valid_word(word):
            return []
        normalized = word.lower()
        same_length = self.words_by_length.get(len(normalized), ())
        return [c for c in same_length if c != normalized and self.is_valid_step(normalized, c)]

    # PUBLIC_INTERFACE
    def get_random_puzzle(
        self, difficulty: str = DEFAULT_DIFFICULTY, rng: Optional[random.Random] = None
    ) -> Puzzle:
        """Pick a random puzzle of the given difficulty.

        When the difficulty has no puzzles, picks from the whole catalog instead.
        """
        chooser = rng or random
        key = (difficulty or "").strip().lower()
        candidates = self._by_difficulty.get(key, ())
        if not candidates:
            logger.warning("No puzzles found for difficulty %r, using random puzzle", difficulty)
            candidates = self.catalog
        return chooser.choice(candidates)

    # PUBLIC_INTERFACE
    def get_puzzle_by_id(self, puzzle_id: int) -> Optional[Puzzle]:
        """Return the puzzle with this id, or None when it is not in the catalog."""
        return self._by_id.get(puzzle_id)

    def puzzles_for(self, difficulty: str) -> Tuple[Puzzle, ...]:
        return self._by_difficulty.get(difficulty, ())

    # PUBLIC_INTERFACE
    def validate_solution(
        self, start_word: str, target_word: str, path: Iterable[str]
    ) -> ValidationResult:
        """Check a ladder from start_word through path.

        path holds the words entered after start_word, ending with the target.
        Words may repeat; only dictionary membership and one-letter steps are
        enforced. An empty path is valid only when start and target are equal.
        """
        full_path = [(start_word or "").lower()] + [(w or "").lower() for w in path]

        if full_path[-1] != (target_word or "").lower():
            return ValidationResult(False, "Path doesn't end with the target word")

        for current, nxt in zip(full_path, full_path[1:]):
            if not self.is_valid_word(current):
                return ValidationResult(False, f'"{current}" is not a valid word')
            if not self.is_valid_word(nxt):
                return ValidationResult(False, f'"{nxt}" is not a valid word')
            if not self.is_valid_step(current, nxt):
                return ValidationResult(
                    False,
                    f'Invalid step from "{current}" to "{nxt}" - must change exactly one letter',
                )

        return ValidationResult(True)
