"""Validation of split/analysis payloads returned by an external split service.

The structural splitter only handles cards with header markers. Other cards
are split by a content-aware service whose JSON answers are checked here
before anything is written back to the card store. Payload keys are
camelCase; snake_case field names are accepted as well.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..exceptions import ValidationError
from ..parser.cloze import has_cloze
from ..utils.logging import get_logger

logger = get_logger(__name__)


class _PayloadModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SplitCard(_PayloadModel):
    """One card proposed by the split service."""

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    inherit_images: list[str] = Field(default_factory=list)
    inherit_tags: list[str] = Field(default_factory=list)
    preserved_links: list[str] = Field(default_factory=list)
    back_links: list[str] = Field(default_factory=list)


class SplitResponse(_PayloadModel):
    """Split proposal for a single source card."""

    original_note_id: str
    should_split: bool
    main_card_index: int = Field(ge=0)
    split_cards: list[SplitCard]
    split_reason: str
    split_type: Literal["hard", "soft", "none"]

    @field_validator("original_note_id", mode="before")
    @classmethod
    def stringify_note_id(cls, v: Any) -> Any:
        """Note ids arrive as numbers or strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class AnalysisResponse(_PayloadModel):
    """Answer to "does this card need splitting?"."""

    needs_split: bool
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    reason: str
    suggested_split_count: int = Field(ge=0)
    split_points: list[str] | None = None


class ClozeCoverage(BaseModel):
    """Which proposed cards lack a cloze deletion."""

    valid: bool
    invalid_indices: list[int] = Field(default_factory=list)


def _format_errors(error: PydanticValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}" for e in error.errors()
    )


def validate_split_response(data: Any) -> SplitResponse:
    """Validate a split payload.

    Args:
        data: Decoded JSON payload

    Returns:
        Parsed SplitResponse

    Raises:
        ValidationError: If the payload does not match the schema, claims a
            split without cards, or has an out-of-range main card index
    """
    try:
        response = SplitResponse.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Split response validation failed: {_format_errors(e)}",
            error_code="SPLIT-SCHEMA",
        ) from e

    if response.should_split and not response.split_cards:
        raise ValidationError(
            "Split response claims a split but split_cards is empty",
            error_code="SPLIT-EMPTY",
            context={"original_note_id": response.original_note_id},
        )

    if response.should_split and response.main_card_index >= len(response.split_cards):
        raise ValidationError(
            f"main_card_index ({response.main_card_index}) is outside split_cards "
            f"(size {len(response.split_cards)})",
            error_code="SPLIT-MAIN-INDEX",
            context={"original_note_id": response.original_note_id},
        )

    logger.debug(
        "split_response_validated",
        source_id=response.original_note_id,
        cards=len(response.split_cards),
        split_type=response.split_type,
    )
    return response


def validate_analysis_response(data: Any) -> AnalysisResponse:
    """Validate an analysis payload.

    Raises:
        ValidationError: If the payload does not match the schema
    """
    try:
        return AnalysisResponse.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Analysis response validation failed: {_format_errors(e)}",
            error_code="ANALYSIS-SCHEMA",
        ) from e


def validate_all_cards_have_cloze(cards: list[SplitCard]) -> ClozeCoverage:
    invalid = [i for i, card in enumerate(cards) if not has_cloze(card.content)]
    return ClozeCoverage(valid=not invalid, invalid_indices=invalid)
