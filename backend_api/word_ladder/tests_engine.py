import random
from itertools import product

from django.test import SimpleTestCase

from word_ladder.puzzles import (
    build_engine,
    EmptyCatalogError,
    WordLadderEngine,
    compute_score_breakdown,
    puzzle_hint,
    read_word_lines,
    suggest_next_words,
)
from word_ladder.puzzles.catalog import FALLBACK_WORDS

WORDS = ["cat", "cot", "cog", "dog", "bat", "hat", "cut", "cold", "cord", "card"]
PUZZLES = [
    {"id": 1, "start_word": "cat", "target_word": "dog", "difficulty": "easy", "min_steps": 3},
    {"id": 2, "start_word": "cold", "target_word": "card", "difficulty": "easy", "hint": "Try CORD"},
]


def make_engine(words=None, puzzles=None):
    return WordLadderEngine(words=WORDS if words is None else words, puzzles=puzzles or PUZZLES)


class DictionaryLoadTests(SimpleTestCase):
    def test_words_are_normalized_and_filtered(self):
        engine = make_engine(words=["  Cat\n", "DOG", "it's", "café", "", "b4d", "cat"] + ["cold", "card"])
        self.assertEqual(engine.word_set, frozenset({"cat", "dog", "cold", "card"}))
        self.assertFalse(engine.used_fallback)

    def test_words_bucketed_by_exact_length(self):
        engine = make_engine()
        self.assertEqual(set(engine.words_by_length), {3, 4})
        self.assertEqual(engine.words_by_length[4], ("cold", "cord", "card"))
        bucketed = [w for bucket in engine.words_by_length.values() for w in bucket]
        self.assertEqual(sorted(bucketed), sorted(engine.word_set))

    def test_empty_word_source_uses_fallback_words(self):
        with self.assertLogs("word_ladder.puzzles.engine", level="WARNING"):
            engine = make_engine(words=[], puzzles=[PUZZLES[0]])
        self.assertTrue(engine.used_fallback)
        self.assertEqual(engine.word_set, frozenset(FALLBACK_WORDS))
        self.assertEqual([p.id for p in engine.catalog], [1])

    def test_missing_word_file_builds_engine_from_fallback(self):
        with self.assertLogs("word_ladder.puzzles", level="WARNING"):
            engine = build_engine("/nonexistent/words.txt")
        self.assertTrue(engine.used_fallback)
        self.assertEqual(engine.word_set, frozenset(FALLBACK_WORDS))
        self.assertEqual([p.id for p in engine.catalog], [1])

    def test_unreadable_word_file_returns_no_lines(self):
        with self.assertLogs("word_ladder.puzzles.loader", level="WARNING"):
            self.assertEqual(read_word_lines("/nonexistent/words.txt"), [])


class CatalogTests(SimpleTestCase):
    def test_invalid_puzzles_are_discarded(self):
        records = PUZZLES + [
            {"id": 3, "start_word": "cat", "target_word": "zzz", "difficulty": "easy"},
            {"id": 4, "start_word": "cat", "target_word": "cold", "difficulty": "medium"},
            {"id": 5, "start_word": "cat", "target_word": "cot", "difficulty": "extreme"},
            {"id": 1, "start_word": "cot", "target_word": "cog", "difficulty": "hard"},
            {"start_word": "cat", "target_word": "cot"},
        ]
        with self.assertLogs("word_ladder.puzzles.engine", level="WARNING") as logs:
            engine = make_engine(puzzles=records)

        self.assertEqual([p.id for p in engine.catalog], [1, 2])
        self.assertEqual([d.id for d in engine.discarded], [3, 4, 5, 1, None])
        self.assertEqual(len(logs.records), 5)
        self.assertIn("mismatched word lengths", engine.discarded[1].reason)

    def test_catalog_entries_satisfy_dictionary_invariant(self):
        engine = make_engine()
        for p in engine.catalog:
            self.assertTrue(engine.is_valid_word(p.start_word))
            self.assertTrue(engine.is_valid_word(p.target_word))
            self.assertEqual(len(p.start_word), len(p.target_word))

    def test_empty_catalog_is_fatal(self):
        with self.assertRaises(EmptyCatalogError):
            make_engine(puzzles=[{"id": 9, "start_word": "abc", "target_word": "xyz", "difficulty": "easy"}])

    def test_non_integral_ids_are_malformed(self):
        records = PUZZLES + [
            {"id": 1.9, "start_word": "cot", "target_word": "cog", "difficulty": "easy"},
            {"id": True, "start_word": "cot", "target_word": "cog", "difficulty": "easy"},
            {"id": "3", "start_word": "cot", "target_word": "cog", "difficulty": "easy"},
        ]
        with self.assertLogs("word_ladder.puzzles.engine", level="WARNING"):
            engine = make_engine(puzzles=records)
        self.assertEqual([p.id for p in engine.catalog], [1, 2, 3])
        self.assertEqual([d.id for d in engine.discarded], [1.9, True])
        for d in engine.discarded:
            self.assertIn("malformed", d.reason)

    def test_puzzle_words_are_lowercased(self):
        engine = make_engine(puzzles=[{"id": 7, "start_word": "CAT", "target_word": "Dog", "difficulty": "Easy"}])
        puzzle = engine.get_puzzle_by_id(7)
        self.assertEqual((puzzle.start_word, puzzle.target_word, puzzle.difficulty), ("cat", "dog", "easy"))

    def test_get_puzzle_by_id(self):
        engine = make_engine()
        self.assertEqual(engine.get_puzzle_by_id(2).hint, "Try CORD")
        self.assertIsNone(engine.get_puzzle_by_id(99))

    def test_random_puzzle_matches_difficulty(self):
        records = PUZZLES + [{"id": 3, "start_word": "cot", "target_word": "cog", "difficulty": "medium"}]
        engine = make_engine(puzzles=records)
        rng = random.Random(7)
        for _ in range(20):
            self.assertEqual(engine.get_random_puzzle("medium", rng=rng).id, 3)

    def test_random_puzzle_falls_back_to_whole_catalog(self):
        engine = make_engine()
        with self.assertLogs("word_ladder.puzzles.engine", level="WARNING"):
            puzzle = engine.get_random_puzzle("hard", rng=random.Random(1))
        self.assertIn(puzzle, engine.catalog)


class WordAndStepTests(SimpleTestCase):
    def setUp(self):
        self.engine = make_engine()

    def test_is_valid_word(self):
        self.assertTrue(self.engine.is_valid_word("cat"))
        self.assertTrue(self.engine.is_valid_word("CaT"))
        self.assertFalse(self.engine.is_valid_word("zzz"))
        self.assertFalse(self.engine.is_valid_word(""))
        self.assertFalse(self.engine.is_valid_word(None))
        self.assertFalse(self.engine.is_valid_word(42))

    def test_is_valid_step(self):
        self.assertTrue(self.engine.is_valid_step("cat", "cot"))
        self.assertTrue(self.engine.is_valid_step("CAT", "cot"))
        self.assertFalse(self.engine.is_valid_step("cat", "dog"))
        self.assertFalse(self.engine.is_valid_step("cat", "cats"))
        self.assertFalse(self.engine.is_valid_step("", "a"))
        self.assertFalse(self.engine.is_valid_step("", ""))
        self.assertFalse(self.engine.is_valid_step(None, "cat"))

    def test_step_compares_positions_when_lowercasing_lengthens(self):
        # "\u0130".lower() is two code points long.
        self.assertFalse(self.engine.is_valid_step("b\u0130x", "bit"))
        self.assertFalse(self.engine.is_valid_step("bit", "b\u0130x"))
        self.assertTrue(self.engine.is_valid_step("b\u0130t", "bat"))

    def test_step_does_not_check_dictionary(self):
        self.assertTrue(self.engine.is_valid_step("zzz", "zza"))

    def test_step_is_symmetric_and_irreflexive(self):
        samples = ["cat", "cot", "cog", "dog", "CAT", "xyz", "cold", "cord", "ab", ""]
        for a, b in product(samples, repeat=2):
            self.assertEqual(self.engine.is_valid_step(a, b), self.engine.is_valid_step(b, a), (a, b))
            if len(a) != len(b):
                self.assertFalse(self.engine.is_valid_step(a, b), (a, b))
        for a in samples:
            self.assertFalse(self.engine.is_valid_step(a, a))

    def test_find_possible_next_words(self):
        self.assertEqual(set(self.engine.find_possible_next_words("cat")), {"cot", "bat", "hat", "cut"})
        self.assertEqual(set(self.engine.find_possible_next_words("COLD")), {"cord"})

    def test_next_words_are_valid_steps(self):
        for word in self.engine.word_set:
            for candidate in self.engine.find_possible_next_words(word):
                self.assertNotEqual(candidate, word)
                self.assertTrue(self.engine.is_valid_word(candidate))
                self.assertTrue(self.engine.is_valid_step(word, candidate))

    def test_next_words_for_unknown_word_is_empty(self):
        self.assertEqual(self.engine.find_possible_next_words("zzzzz"), [])
        self.assertEqual(self.engine.find_possible_next_words(""), [])


class ValidateSolutionTests(SimpleTestCase):
    def setUp(self):
        self.engine = make_engine()

    def test_happy_path(self):
        result = self.engine.validate_solution("cat", "dog", ["cot", "cog", "dog"])
        self.assertTrue(result.valid)
        self.assertIsNone(result.reason)
        self.assertEqual(result.to_dict(), {"valid": True})

    def test_path_must_end_at_target(self):
        result = self.engine.validate_solution("cat", "dog", ["cot", "cog"])
        self.assertFalse(result.valid)
        self.assertEqual(result.reason, "Path doesn't end with the target word")

    def test_bad_step_mentions_one_letter_rule(self):
        result = self.engine.validate_solution("cat", "dog", ["dog"])
        self.assertFalse(result.valid)
        self.assertIn("exactly one letter", result.reason)

    def test_unknown_word_is_named(self):
        result = self.engine.validate_solution("cat", "dog", ["cxt", "cot", "cog", "dog"])
        self.assertFalse(result.valid)
        self.assertEqual(result.reason, '"cxt" is not a valid word')

    def test_zero_step_identity(self):
        self.assertTrue(self.engine.validate_solution("cat", "cat", []).valid)
        self.assertFalse(self.engine.validate_solution("cat", "dog", []).valid)

    def test_case_insensitive(self):
        self.assertTrue(self.engine.validate_solution("CAT", "Dog", ["COT", "cOg", "DOG"]).valid)

    def test_revisiting_a_word_is_allowed(self):
        result = self.engine.validate_solution("cat", "dog", ["cot", "cat", "cot", "cog", "dog"])
        self.assertTrue(result.valid)


class HintAndScoreTests(SimpleTestCase):
    def setUp(self):
        self.engine = make_engine()

    def test_suggestions_are_truncated(self):
        words = suggest_next_words(self.engine, "cat", limit=2, rng=random.Random(3))
        self.assertEqual(len(words), 2)
        self.assertTrue(set(words) <= {"cot", "bat", "hat", "cut"})

    def test_suggestions_under_limit_returned_whole(self):
        self.assertEqual(suggest_next_words(self.engine, "cold"), ["cord"])
        self.assertEqual(suggest_next_words(self.engine, "zzz"), [])

    def test_invalid_limit(self):
        with self.assertRaises(ValueError):
            suggest_next_words(self.engine, "cat", limit=0)

    def test_puzzle_hint_payload(self):
        payload = puzzle_hint(self.engine.get_puzzle_by_id(2))
        self.assertEqual(payload, {"puzzleId": 2, "hint": "Try CORD", "minSteps": None})

    def test_score_breakdown(self):
        self.assertEqual(compute_score_breakdown(3, 0, 3).score, 100)
        breakdown = compute_score_breakdown(steps=6, hints_used=2, min_steps=4)
        self.assertEqual((breakdown.step_penalty, breakdown.hint_penalty, breakdown.score), (10, 4, 86))
        # Unknown minimum defaults to five steps.
        self.assertEqual(compute_score_breakdown(7).step_penalty, 10)
        self.assertEqual(compute_score_breakdown(50, 10, 3).score, 0)

    def test_score_rejects_negative_input(self):
        with self.assertRaises(ValueError):
            compute_score_breakdown(-1)
