from typing import Any, Dict, List

# Used when the dictionary file is missing or yields no usable words.
FALLBACK_WORDS: List[str] = [
    "cat", "bat", "hat", "mat", "rat",
    "dog", "log", "fog", "bog", "cog",
]

PREDEFINED_PUZZLES: List[Dict[str, Any]] = [
    # Easy: 3-4 letter words with obvious paths
    {
        "id": 1,
        "start_word": "cat",
        "target_word": "dog",
        "difficulty": "easy",
        "min_steps": 3,
        "hint": "Try changing one letter at a time. CAT → COT → DOT → DOG is one possible path.",
    },
    {
        "id": 2,
        "start_word": "cold",
        "target_word": "warm",
        "difficulty": "easy",
        "min_steps": 4,
        "hint": "Try COLD → CORD → CARD → WARD → WARM",
    },
    {
        "id": 3,
        "start_word": "fly",
        "target_word": "ant",
        "difficulty": "easy",
        "min_steps": 3,
        "hint": "Consider FLY → FAY → FAT → ANT",
    },
    {
        "id": 4,
        "start_word": "four",
        "target_word": "five",
        "difficulty": "easy",
        "min_steps": 4,
        "hint": "Try FOUR → FOUL → FOIL → FAIL → FIVE",
    },
    {
        "id": 5,
        "start_word": "sick",
        "target_word": "well",
        "difficulty": "easy",
        "min_steps": 4,
        "hint": "Consider SICK → SILK → SILL → SELL → WELL",
    },
    # Medium: 4-5 letter words with less obvious paths
    {
        "id": 6,
        "start_word": "hide",
        "target_word": "seek",
        "difficulty": "medium",
        "min_steps": 5,
        "hint": "Try words like SIDE, SITE, SITS, SETS",
    },
    {
        "id": 7,
        "start_word": "white",
        "target_word": "black",
        "difficulty": "medium",
        "min_steps": 6,
        "hint": "Think of changing one letter at a time - possibly through WHILE, WHALE, SHALE, SHAKE, SLACK",
    },
    {
        "id": 8,
        "start_word": "happy",
        "target_word": "angry",
        "difficulty": "medium",
        "min_steps": 5,
        "hint": "Consider paths through words like HARPY, HARDY",
    },
    {
        "id": 9,
        "start_word": "bread",
        "target_word": "toast",
        "difficulty": "medium",
        "min_steps": 7,
        "hint": "One possible path involves TREAD, TREAT",
    },
    {
        "id": 10,
        "start_word": "money",
        "target_word": "coins",
        "difficulty": "medium",
        "min_steps": 6,
    },
    # Hard: 5-6 letter words with complex paths
    {"id": 11, "start_word": "listen", "target_word": "sounds", "difficulty": "hard", "min_steps": 9},
    {"id": 12, "start_word": "friend", "target_word": "enemy", "difficulty": "hard", "min_steps": 8},
    {"id": 13, "start_word": "flower", "target_word": "garden", "difficulty": "hard", "min_steps": 10},
    {"id": 14, "start_word": "planet", "target_word": "galaxy", "difficulty": "hard", "min_steps": 9},
    {"id": 15, "start_word": "dream", "target_word": "sleep", "difficulty": "hard", "min_steps": 7},
]
