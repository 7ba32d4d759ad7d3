from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from .catalog import PREDEFINED_PUZZLES
from .engine import WordLadderEngine

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).resolve().parent.parent / "data" / "words.txt"


# PUBLIC_INTERFACE
def read_word_lines(path: Union[str, Path]) -> List[str]:
    """Read candidate words from a text file, one per line.

    Returns an empty list when the file cannot be read so the engine can fall
    back to its built-in words instead of failing start-up.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            return fh.read().splitlines()
    except OSError as exc:
        logger.warning("Could not read word list %s: %s", path, exc)
        return []


# PUBLIC_INTERFACE
def build_engine(
    words_path: Union[str, Path, None] = None,
    puzzles: Optional[Iterable[Mapping[str, Any]]] = None,
) -> WordLadderEngine:
    """Load the dictionary file and build an engine over the puzzle catalog.

    Example:
        engine = build_engine("/srv/words.txt")
        engine.get_random_puzzle("easy")
    """
    path = words_path or DEFAULT_WORDS_PATH
    engine = WordLadderEngine(
        words=read_word_lines(path),
        puzzles=PREDEFINED_PUZZLES if puzzles is None else puzzles,
    )
    logger.info("Word Ladder: loaded %d words", len(engine.word_set))
    logger.info("Word lengths: %s", ", ".join(str(n) for n in sorted(engine.words_by_length)))
    logger.info("Word Ladder: loaded %d valid puzzles", len(engine.catalog))
    return engine
