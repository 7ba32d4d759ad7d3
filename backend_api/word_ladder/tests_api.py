import os
import tempfile
from io import StringIO

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.core.management import call_command
from django.test import override_settings
from django.urls import reverse
from rest_framework.test import APISimpleTestCase

from word_ladder.apps import get_engine


class PuzzleEndpointTests(APISimpleTestCase):
    def test_health(self):
        resp = self.client.get(reverse('Health'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Server is up!"})

    def test_random_puzzle_defaults_to_medium(self):
        resp = self.client.get(reverse('random-puzzle'))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["difficulty"], "medium")
        self.assertEqual(len(data["startWord"]), len(data["targetWord"]))

    def test_random_puzzle_for_difficulty(self):
        resp = self.client.get(reverse('random-puzzle'), {"difficulty": "hard"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["difficulty"], "hard")

    def test_random_puzzle_rejects_unknown_difficulty(self):
        resp = self.client.get(reverse('random-puzzle'), {"difficulty": "extreme"})
        self.assertEqual(resp.status_code, 400)

    def test_puzzle_by_id(self):
        resp = self.client.get(reverse('puzzle-detail', kwargs={"puzzle_id": 1}))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["id"], 1)
        self.assertEqual(data["startWord"], "cat")
        self.assertEqual(data["targetWord"], "dog")
        self.assertEqual(data["minSteps"], 3)
        self.assertIn("hint", data)

    def test_optional_fields_omitted(self):
        data = self.client.get(reverse('puzzle-detail', kwargs={"puzzle_id": 10})).json()
        self.assertNotIn("hint", data)
        self.assertEqual(data["minSteps"], 6)

    def test_discarded_puzzle_not_found(self):
        # "friend" -> "enemy" has mismatched lengths and never enters the catalog.
        resp = self.client.get(reverse('puzzle-detail', kwargs={"puzzle_id": 12}))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Puzzle not found."})

    def test_puzzle_hint(self):
        resp = self.client.get(reverse('puzzle-hint', kwargs={"puzzle_id": 2}))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["puzzleId"], 2)
        self.assertIn("CORD", resp.json()["hint"])
        self.assertEqual(self.client.get(reverse('puzzle-hint', kwargs={"puzzle_id": 999})).status_code, 404)

    def test_difficulties(self):
        resp = self.client.get(reverse('get-difficulties'))
        self.assertEqual(resp.status_code, 200)
        counts = {e["difficulty"]: e["count"] for e in resp.json()}
        self.assertEqual(counts, {"easy": 5, "medium": 5, "hard": 4})

    def test_diagnostics(self):
        data = self.client.get(reverse('diagnostics-validate')).json()
        self.assertFalse(data["usedFallback"])
        self.assertEqual(data["puzzleCount"], 14)
        self.assertEqual([d["id"] for d in data["discarded"]], [12])
        self.assertIn(3, data["wordLengths"])


class ValidationEndpointTests(APISimpleTestCase):
    def post_step(self, current, nxt):
        return self.client.post(reverse('validate-step'), {"currentWord": current, "nextWord": nxt}, format="json")

    def test_valid_step(self):
        resp = self.post_step("cat", "COT")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"valid": True})

    def test_step_changing_several_letters(self):
        data = self.post_step("cat", "dog").json()
        self.assertFalse(data["valid"])
        self.assertIn("exactly one letter", data["reason"])

    def test_step_to_unknown_word(self):
        data = self.post_step("cat", "cxt").json()
        self.assertEqual(data, {"valid": False, "reason": '"cxt" is not a valid word'})

    def test_step_with_blank_word(self):
        data = self.post_step("cat", "").json()
        self.assertFalse(data["valid"])
        self.assertIn("reason", data)

    def test_step_length_mismatch(self):
        data = self.post_step("cat", "cold").json()
        self.assertFalse(data["valid"])

    def test_solution_valid_with_score(self):
        resp = self.client.post(
            reverse('validate-solution'),
            {"startWord": "cat", "targetWord": "dog", "solution": ["cot", "dot", "dog"], "puzzleId": 1, "hintsUsed": 2},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data["valid"])
        self.assertEqual(data["score"], 96)
        self.assertEqual(data["stepPenalty"], 0)
        self.assertEqual(data["hintPenalty"], 4)

    def test_solution_valid_without_puzzle(self):
        resp = self.client.post(
            reverse('validate-solution'),
            {"startWord": "cat", "targetWord": "dog", "solution": ["cot", "dot", "dog"]},
            format="json",
        )
        self.assertEqual(resp.json(), {"valid": True})

    def test_solution_not_ending_at_target(self):
        data = self.client.post(
            reverse('validate-solution'),
            {"startWord": "cat", "targetWord": "dog", "solution": ["cot", "cog"], "puzzleId": 1},
            format="json",
        ).json()
        self.assertFalse(data["valid"])
        self.assertNotIn("score", data)

    def test_solution_must_be_list(self):
        resp = self.client.post(
            reverse('validate-solution'),
            {"startWord": "cat", "targetWord": "dog", "solution": "dog"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)


class HintEndpointTests(APISimpleTestCase):
    def test_hints_are_truncated_neighbours(self):
        resp = self.client.get(reverse('hints'), {"word": "Cat"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["word"], "cat")
        self.assertEqual(len(data["possibleNextWords"]), 5)
        engine = get_engine()
        for word in data["possibleNextWords"]:
            self.assertTrue(engine.is_valid_step("cat", word))

    def test_hints_limit(self):
        data = self.client.get(reverse('hints'), {"word": "cat", "limit": 2}).json()
        self.assertEqual(len(data["possibleNextWords"]), 2)

    def test_hints_for_unknown_word(self):
        data = self.client.get(reverse('hints'), {"word": "zzzzz"}).json()
        self.assertEqual(data["possibleNextWords"], [])

    def test_hints_require_word(self):
        self.assertEqual(self.client.get(reverse('hints')).status_code, 400)
        self.assertEqual(self.client.get(reverse('hints'), {"word": "cat", "limit": 0}).status_code, 400)

    @override_settings(WORD_LADDER={"HINT_LIMIT": 2, "MAX_HINT_LIMIT": 3})
    def test_hint_limits_follow_settings(self):
        data = self.client.get(reverse('hints'), {"word": "cat"}).json()
        self.assertEqual(len(data["possibleNextWords"]), 2)
        self.assertEqual(self.client.get(reverse('hints'), {"word": "cat", "limit": 4}).status_code, 400)


class LadderCatalogCommandTests(APISimpleTestCase):
    def test_lists_catalog_and_discards(self):
        out = StringIO()
        call_command("ladder_catalog", "--difficulty", "easy", stdout=out)
        text = out.getvalue()
        self.assertIn("1 easy   cat -> dog", text)
        self.assertIn("5 active puzzles.", text)
        self.assertIn("Discarded puzzle 12", text)


class StartupTests(APISimpleTestCase):
    def test_empty_catalog_aborts_startup(self):
        # Only "zzz" is loaded: no fallback, and every predefined puzzle is discarded.
        fd, path = tempfile.mkstemp(suffix=".txt")
        self.addCleanup(os.remove, path)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write("zzz\n")

        config = apps.get_app_config("word_ladder")
        engine = config.engine
        with override_settings(WORD_LADDER={"WORDS_PATH": path}):
            with self.assertLogs("word_ladder", level="WARNING"):
                with self.assertRaises(ImproperlyConfigured):
                    config.ready()
        self.assertIs(config.engine, engine)
