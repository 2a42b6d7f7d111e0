"""Difficulty scoring from Anki review statistics.

Cards that are failed often, have a low ease factor and keep a short
interval are the ones most likely to hold too many concepts. The score
ranks them as split candidates.

Score weights (0-100, higher is harder):
- lapses: 50 points, saturating at 10 lapses
- ease factor: 30 points, from 2500 (default ease, 250%) down to 1300 (minimum)
- interval: 20 points, from 365 days down to 0
"""

import math
from collections.abc import Iterable

from ..models import (
    CardStats,
    DifficultCard,
    DifficultyResult,
    DifficultyThresholds,
)

DEFAULT_THRESHOLDS = DifficultyThresholds(min_lapses=3, max_ease_factor=2100, min_reps=5)

LAPSES_WEIGHT = 50
EASE_WEIGHT = 30
INTERVAL_WEIGHT = 20

LAPSES_SATURATION = 10
DEFAULT_EASE_FACTOR = 2500
MIN_EASE_FACTOR = 1300
STABLE_INTERVAL_DAYS = 365

MAX_PREVIEW_LENGTH = 200


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def compute_difficulty_score(
    lapses: int, ease_factor: int, interval: int, reps: int
) -> int:
    """Composite difficulty score in 0..100; 0 for cards never reviewed."""
    if reps == 0:
        return 0

    lapses_score = _clamp(lapses / LAPSES_SATURATION) * LAPSES_WEIGHT
    ease_score = (
        _clamp((DEFAULT_EASE_FACTOR - ease_factor) / (DEFAULT_EASE_FACTOR - MIN_EASE_FACTOR))
        * EASE_WEIGHT
    )
    interval_score = _clamp(1 - interval / STABLE_INTERVAL_DAYS) * INTERVAL_WEIGHT

    # Halves round up
    return math.floor(lapses_score + ease_score + interval_score + 0.5)


def get_difficulty_reasons(
    lapses: int,
    ease_factor: int,
    reps: int,
    thresholds: DifficultyThresholds = DEFAULT_THRESHOLDS,
) -> list[str]:
    """Human-readable reasons a card counts as difficult.

    Args:
        lapses: Number of times the card was forgotten
        ease_factor: Ease in per-mille (2500 == 250%)
        reps: Number of reviews
        thresholds: Cut-offs for each reason

    Returns:
        Reasons in the order lapses, ease, failure rate; empty if none apply
    """
    reasons: list[str] = []

    if lapses >= thresholds.min_lapses:
        reasons.append(f"{lapses} lapses")

    if ease_factor <= thresholds.max_ease_factor:
        reasons.append(f"Ease {ease_factor / 10:.0f}%")

    if reps > 0 and reps >= thresholds.min_reps and lapses > 0:
        reasons.append(f"Failure rate {lapses / reps * 100:.0f}%")

    return reasons


def assess_difficulty(
    lapses: int,
    ease_factor: int,
    interval: int,
    reps: int,
    thresholds: DifficultyThresholds = DEFAULT_THRESHOLDS,
) -> DifficultyResult:
    return DifficultyResult(
        score=compute_difficulty_score(lapses, ease_factor, interval, reps),
        reasons=get_difficulty_reasons(lapses, ease_factor, reps, thresholds),
    )


def _preview(text: str) -> str:
    if len(text) > MAX_PREVIEW_LENGTH:
        return text[:MAX_PREVIEW_LENGTH] + "..."
    return text


def find_difficult_cards(
    cards: Iterable[CardStats],
    thresholds: DifficultyThresholds | None = None,
) -> list[DifficultCard]:
    """Select split candidates from a deck's card statistics.

    A note is represented by its card with the most lapses. Notes below
    ``min_reps`` or ``min_lapses``, or above ``max_ease_factor``, are
    dropped. The rest are returned hardest first.

    Args:
        cards: Card statistics already fetched from the card store
        thresholds: Selection cut-offs (defaults to DEFAULT_THRESHOLDS)

    Returns:
        Difficult cards sorted by descending score
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS

    by_note: dict[int, CardStats] = {}
    for card in cards:
        existing = by_note.get(card.note_id)
        if existing is None or card.lapses > existing.lapses:
            by_note[card.note_id] = card

    results: list[DifficultCard] = []
    for card in by_note.values():
        if (
            card.reps < thresholds.min_reps
            or card.lapses < thresholds.min_lapses
            or card.factor > thresholds.max_ease_factor
        ):
            continue

        results.append(
            DifficultCard(
                note_id=card.note_id,
                card_id=card.card_id,
                text=_preview(card.text),
                tags=list(card.tags),
                lapses=card.lapses,
                ease_factor=card.factor,
                interval=card.interval,
                reps=card.reps,
                difficulty=assess_difficulty(
                    card.lapses, card.factor, card.interval, card.reps, thresholds
                ),
            )
        )

    results.sort(key=lambda c: c.difficulty.score, reverse=True)
    return results
