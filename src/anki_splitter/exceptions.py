"""Exception hierarchy for anki-splitter.

The parsing and splitting core never raises on malformed card text: a missing
pattern yields an empty result and an ineligible card yields ``None``. The
exceptions below cover the edges around that core (configuration files and
payloads received from external split services).

Exception Hierarchy:
    AnkiSplitterError (base)
     ConfigurationError - Configuration loading/validation errors
     ValidationError - Rejected external split/analysis payloads

Usage Examples:
    try:
        response = validate_split_response(payload)
    except ValidationError as e:
        logger.error("split_response_rejected", **e.to_dict())
"""

from typing import Any


class AnkiSplitterError(Exception):
    """Base exception for all anki-splitter errors.

    Attributes:
        message: Human-readable error message
        suggestion: Optional suggestion for resolving the error
        error_code: Structured error code for machine-readable handling
        context: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.message = message
        self.suggestion = suggestion
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with error code and suggestion if available."""
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}] {self.message}")
        else:
            parts.append(self.message)
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging.

        Returns:
            Dictionary with error details
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "suggestion": self.suggestion,
            "context": self.context,
            "type": type(self).__name__,
        }


class ConfigurationError(AnkiSplitterError):
    """Configuration loading or validation errors.

    Raised when:
    - Config file is malformed YAML
    - Configuration values fail validation
    """


class ValidationError(AnkiSplitterError):
    """A split or analysis payload from an external service was rejected.

    Raised when:
    - The payload does not match the expected schema
    - A split is claimed but no cards were returned
    - The main card index points outside the returned cards
    """
