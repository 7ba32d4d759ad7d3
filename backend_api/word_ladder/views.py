from __future__ import annotations

from typing import Any, Dict, List

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status, permissions
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .apps import get_engine
from .puzzles import (
    DIFFICULTIES,
    ValidationResult,
    WordLadderEngine,
    compute_score_breakdown,
    puzzle_hint,
    suggest_next_words,
)
from .serializers import (
    DiagnosticsResponseSerializer,
    DifficultyCountSerializer,
    HintQuerySerializer,
    HintResponseSerializer,
    PuzzleHintResponseSerializer,
    PuzzleQuerySerializer,
    PuzzleSerializer,
    ValidateSolutionRequestSerializer,
    ValidateStepRequestSerializer,
    ValidationResponseSerializer,
)

PUZZLE_NOT_FOUND = {"error": "Puzzle not found."}


def _check_step(engine: WordLadderEngine, current_word: str, next_word: str) -> ValidationResult:
    """A step is playable when the next word is a dictionary word one letter away."""
    if not current_word or not next_word:
        return ValidationResult(False, "Both currentWord and nextWord are required.")
    if not engine.is_valid_word(next_word):
        return ValidationResult(False, f'"{next_word.lower()}" is not a valid word')
    if len(current_word) != len(next_word):
        return ValidationResult(False, "Words must have the same length")
    if not engine.is_valid_step(current_word, next_word):
        return ValidationResult(False, "Must change exactly one letter")
    return ValidationResult(True)


def _with_score(payload: Dict[str, Any], engine: WordLadderEngine, vd: Dict[str, Any]) -> Dict[str, Any]:
    """Attach a score breakdown when a valid solution names a known puzzle."""
    puzzle_id = vd.get("puzzleId")
    if not payload["valid"] or puzzle_id is None:
        return payload
    puzzle = engine.get_puzzle_by_id(puzzle_id)
    if puzzle is None:
        return payload
    breakdown = compute_score_breakdown(
        steps=len(vd["solution"]),
        hints_used=vd.get("hintsUsed", 0),
        min_steps=puzzle.min_steps,
    )
    payload.update(
        {
            "score": breakdown.score,
            "baseScore": breakdown.base_score,
            "stepPenalty": breakdown.step_penalty,
            "hintPenalty": breakdown.hint_penalty,
        }
    )
    return payload


# PUBLIC_INTERFACE
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!"}
    """
    return Response({"message": "Server is up!"})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="random_puzzle",
    operation_summary="Get a random word ladder puzzle",
    operation_description="""
Pick a random puzzle of the requested difficulty. When the catalog has no
puzzle of that difficulty, any puzzle is returned instead.

Query params:
- difficulty (optional, default 'medium'): easy | medium | hard
""",
    query_serializer=PuzzleQuerySerializer,
    responses={200: PuzzleSerializer},
    tags=["word-ladder"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def random_puzzle(request):
    """Return a random puzzle for the requested difficulty."""
    serializer = PuzzleQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    puzzle = get_engine().get_random_puzzle(serializer.validated_data["difficulty"])
    return Response(PuzzleSerializer(puzzle).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="puzzle_detail",
    operation_summary="Get a puzzle by id",
    responses={200: PuzzleSerializer, 404: openapi.Response("Puzzle not found.")},
    tags=["word-ladder"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def get_puzzle(request, puzzle_id: int):
    """Retrieve a catalog puzzle by ID."""
    puzzle = get_engine().get_puzzle_by_id(puzzle_id)
    if puzzle is None:
        return Response(PUZZLE_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
    return Response(PuzzleSerializer(puzzle).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="puzzle_hint",
    operation_summary="Get the text hint of a puzzle",
    responses={200: PuzzleHintResponseSerializer, 404: openapi.Response("Puzzle not found.")},
    tags=["word-ladder", "hints"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def get_puzzle_hint(request, puzzle_id: int):
    """Return the puzzle's hint text and minimum step count."""
    puzzle = get_engine().get_puzzle_by_id(puzzle_id)
    if puzzle is None:
        return Response(PUZZLE_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
    return Response(PuzzleHintResponseSerializer(puzzle_hint(puzzle)).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="validate_step",
    operation_summary="Validate one ladder step",
    operation_description="""
Check that nextWord is a dictionary word that differs from currentWord in
exactly one letter.

Request body:
- currentWord (string)
- nextWord (string)

Response:
- valid (bool), reason (string, only when invalid)
""",
    request_body=ValidateStepRequestSerializer,
    responses={200: ValidationResponseSerializer},
    tags=["word-ladder"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def validate_step(request):
    """Validate a single transition between two words."""
    serializer = ValidateStepRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data

    result = _check_step(get_engine(), vd["currentWord"], vd["nextWord"])
    return Response(ValidationResponseSerializer(result.to_dict()).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="validate_solution",
    operation_summary="Validate a complete ladder",
    operation_description="""
Check a full ladder from startWord to targetWord.

Request body:
- startWord (string), targetWord (string)
- solution (list of strings): the words after startWord, ending with targetWord
- puzzleId (int, optional): score the solution against this puzzle
- hintsUsed (int, optional, default 0)

Response:
- valid (bool), reason (string, only when invalid)
- score, baseScore, stepPenalty, hintPenalty when valid and puzzleId is known
""",
    request_body=ValidateSolutionRequestSerializer,
    responses={200: ValidationResponseSerializer},
    tags=["word-ladder"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def validate_solution(request):
    """Validate a full solution path and score it when possible."""
    serializer = ValidateSolutionRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data

    engine = get_engine()
    result = engine.validate_solution(vd["startWord"], vd["targetWord"], vd["solution"])
    payload = _with_score(result.to_dict(), engine, vd)
    return Response(ValidationResponseSerializer(payload).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="next_word_hints",
    operation_summary="Suggest possible next words",
    operation_description="""
List dictionary words one letter away from the given word, truncated to the
requested limit. Unknown words yield an empty list.

Query params:
- word (string, required)
- limit (int, optional, default 5)
""",
    query_serializer=HintQuerySerializer,
    responses={200: HintResponseSerializer},
    tags=["word-ladder", "hints"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def next_word_hints(request):
    """Suggest next words for the hint panel."""
    serializer = HintQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data

    words = suggest_next_words(get_engine(), vd["word"], limit=vd["limit"])
    resp = {"word": vd["word"].lower(), "possibleNextWords": words}
    return Response(HintResponseSerializer(resp).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="get_difficulties",
    operation_summary="List difficulties with puzzle counts",
    responses={200: DifficultyCountSerializer(many=True)},
    tags=["meta"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def get_difficulties(request):
    """List each difficulty with the number of active puzzles."""
    engine = get_engine()
    entries: List[Dict[str, Any]] = [
        {"difficulty": level, "count": len(engine.puzzles_for(level))} for level in DIFFICULTIES
    ]
    return Response(DifficultyCountSerializer(entries, many=True).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="diagnostics_validate",
    operation_summary="Inspect the loaded dictionary and catalog",
    operation_description="Reports dictionary size, word lengths and puzzles discarded at start-up.",
    responses={200: DiagnosticsResponseSerializer},
    tags=["meta"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def diagnostics_validate(request):
    """Report how the dictionary and puzzle catalog were loaded."""
    engine = get_engine()
    resp = {
        "wordCount": len(engine.word_set),
        "wordLengths": sorted(engine.words_by_length),
        "usedFallback": engine.used_fallback,
        "puzzleCount": len(engine.catalog),
        "discarded": [{"id": d.id, "reason": d.reason} for d in engine.discarded],
    }
    return Response(DiagnosticsResponseSerializer(resp).data, status=status.HTTP_200_OK)
