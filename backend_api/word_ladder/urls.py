from django.urls import path
from .views import (
    health,
    random_puzzle,
    get_puzzle,
    get_puzzle_hint,
    validate_step,
    validate_solution,
    next_word_hints,
    get_difficulties,
    diagnostics_validate,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('puzzle', random_puzzle, name='random-puzzle'),
    path('puzzle/<int:puzzle_id>', get_puzzle, name='puzzle-detail'),
    path('puzzle/<int:puzzle_id>/hint', get_puzzle_hint, name='puzzle-hint'),
    path('validate-step', validate_step, name='validate-step'),
    path('validate-solution', validate_solution, name='validate-solution'),
    path('hints', next_word_hints, name='hints'),
    path('difficulties', get_difficulties, name='get-difficulties'),
    path('diagnostics/validate', diagnostics_validate, name='diagnostics-validate'),
]
