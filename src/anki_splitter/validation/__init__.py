"""Validation of payloads received from external split services."""

from anki_splitter.validation.split_response import (
    AnalysisResponse,
    ClozeCoverage,
    SplitCard,
    SplitResponse,
    validate_all_cards_have_cloze,
    validate_analysis_response,
    validate_split_response,
)

__all__ = [
    "AnalysisResponse",
    "ClozeCoverage",
    "SplitCard",
    "SplitResponse",
    "validate_all_cards_have_cloze",
    "validate_analysis_response",
    "validate_split_response",
]
