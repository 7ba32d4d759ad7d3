from __future__ import annotations

from typing import Any, Dict

from django.conf import settings
from rest_framework import serializers

from .puzzles import DEFAULT_DIFFICULTY, DIFFICULTIES

HINT_LIMIT = 5
MAX_HINT_LIMIT = 20

DIFFICULTY_CHOICES = [(d, d) for d in DIFFICULTIES]


def _word_field(**kwargs) -> serializers.CharField:
    """Word inputs may be blank; the engine reports them as invalid words."""
    return serializers.CharField(required=False, allow_blank=True, default="", **kwargs)


# PUBLIC_INTERFACE
class PuzzleSerializer(serializers.Serializer):
    """Public representation of a puzzle.

    Optional fields (minSteps, hint) are omitted when the puzzle has none.
    """

    id = serializers.IntegerField()
    startWord = serializers.CharField(source="start_word")
    targetWord = serializers.CharField(source="target_word")
    difficulty = serializers.ChoiceField(choices=DIFFICULTY_CHOICES)
    minSteps = serializers.IntegerField(source="min_steps", allow_null=True, required=False)
    hint = serializers.CharField(allow_null=True, required=False)

    def to_representation(self, instance) -> Dict[str, Any]:
        data = super().to_representation(instance)
        for key in ("minSteps", "hint"):
            if data.get(key) is None:
                data.pop(key, None)
        return data


# PUBLIC_INTERFACE
class PuzzleQuerySerializer(serializers.Serializer):
    """Query parameters for fetching a random puzzle."""

    difficulty = serializers.ChoiceField(
        required=False, choices=DIFFICULTY_CHOICES, default=DEFAULT_DIFFICULTY
    )


# PUBLIC_INTERFACE
class ValidateStepRequestSerializer(serializers.Serializer):
    """Request payload for checking a single ladder step."""

    currentWord = _word_field()
    nextWord = _word_field()


# PUBLIC_INTERFACE
class ValidateSolutionRequestSerializer(serializers.Serializer):
    """Request payload for checking a complete ladder.

    Fields:
    - startWord, targetWord: the puzzle endpoints
    - solution: words entered after startWord, ending with targetWord
    - puzzleId (optional): when given and valid, the response includes a score
    - hintsUsed (optional, default 0): hints requested while solving
    """

    startWord = _word_field()
    targetWord = _word_field()
    solution = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False, default=list
    )
    puzzleId = serializers.IntegerField(required=False, allow_null=True)
    hintsUsed = serializers.IntegerField(required=False, min_value=0, default=0)


# PUBLIC_INTERFACE
class ValidationResponseSerializer(serializers.Serializer):
    """Result of a step or solution check, with a score for solved puzzles."""

    valid = serializers.BooleanField()
    reason = serializers.CharField(required=False)
    score = serializers.IntegerField(required=False)
    baseScore = serializers.IntegerField(required=False)
    stepPenalty = serializers.IntegerField(required=False)
    hintPenalty = serializers.IntegerField(required=False)


# PUBLIC_INTERFACE
class HintQuerySerializer(serializers.Serializer):
    """Query parameters for next-word suggestions."""

    word = serializers.CharField(allow_blank=True)
    limit = serializers.IntegerField(
        required=False, min_value=1, max_value=MAX_HINT_LIMIT, default=HINT_LIMIT
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Settings are read per request so override_settings applies.
        options: Dict[str, Any] = getattr(settings, "WORD_LADDER", {})
        self.fields["limit"] = serializers.IntegerField(
            required=False,
            min_value=1,
            max_value=options.get("MAX_HINT_LIMIT", MAX_HINT_LIMIT),
            default=options.get("HINT_LIMIT", HINT_LIMIT),
        )


# PUBLIC_INTERFACE
class HintResponseSerializer(serializers.Serializer):
    word = serializers.CharField(allow_blank=True)
    possibleNextWords = serializers.ListField(child=serializers.CharField())


# PUBLIC_INTERFACE
class PuzzleHintResponseSerializer(serializers.Serializer):
    puzzleId = serializers.IntegerField()
    hint = serializers.CharField(allow_null=True)
    minSteps = serializers.IntegerField(allow_null=True)


# PUBLIC_INTERFACE
class DifficultyCountSerializer(serializers.Serializer):
    difficulty = serializers.ChoiceField(choices=DIFFICULTY_CHOICES)
    count = serializers.IntegerField()


# PUBLIC_INTERFACE
class DiagnosticsResponseSerializer(serializers.Serializer):
    """Summary of the loaded dictionary and catalog."""

    wordCount = serializers.IntegerField()
    wordLengths = serializers.ListField(child=serializers.IntegerField())
    usedFallback = serializers.BooleanField()
    puzzleCount = serializers.IntegerField()
    discarded = serializers.ListField(
        child=serializers.DictField(), help_text="Rejected puzzle records with the reason."
    )
