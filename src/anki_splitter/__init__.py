"""Structural splitting of Anki cards into atomic cards.

Parsers for the card markup dialect (clozes, ``:::`` containers and nid
links), split eligibility analysis, header-based splitting, and a
difficulty score used to pick split candidates.
"""

from anki_splitter.anki.difficulty import (
    DEFAULT_THRESHOLDS,
    assess_difficulty,
    compute_difficulty_score,
    find_difficult_cards,
    get_difficulty_reasons,
)
from anki_splitter.models import (
    CardStats,
    ClozeSpan,
    ContainerBlock,
    ContainerType,
    DifficultCard,
    DifficultyResult,
    DifficultyThresholds,
    Fragment,
    HardSplitPoint,
    NidLink,
    SplitAnalysis,
    SplitPointKind,
    ToggleSubtype,
)
from anki_splitter.splitter.analysis import analyze_for_split
from anki_splitter.splitter.atomic import extract_todo_blocks, perform_hard_split

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_THRESHOLDS",
    "CardStats",
    "ClozeSpan",
    "ContainerBlock",
    "ContainerType",
    "DifficultCard",
    "DifficultyResult",
    "DifficultyThresholds",
    "Fragment",
    "HardSplitPoint",
    "NidLink",
    "SplitAnalysis",
    "SplitPointKind",
    "ToggleSubtype",
    "analyze_for_split",
    "assess_difficulty",
    "compute_difficulty_score",
    "extract_todo_blocks",
    "find_difficult_cards",
    "get_difficulty_reasons",
    "perform_hard_split",
]
