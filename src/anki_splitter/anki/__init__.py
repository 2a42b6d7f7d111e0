"""Anki review-statistics helpers."""

from .difficulty import (
    DEFAULT_THRESHOLDS,
    assess_difficulty,
    compute_difficulty_score,
    find_difficult_cards,
    get_difficulty_reasons,
)

__all__ = [
    "DEFAULT_THRESHOLDS",
    "assess_difficulty",
    "compute_difficulty_score",
    "find_difficult_cards",
    "get_difficulty_reasons",
]
