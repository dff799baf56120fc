"""Centralized exception hierarchy for mdcards.

All custom exceptions inherit from MdCardsError, making it easy to catch
every error raised while loading, parsing or exporting cards.

Exception Hierarchy:
    MdCardsError (base)
     ConfigurationError - Settings loading/validation errors
     DocumentReadError - Source document cannot be read
     InvalidBlockError - Content block of the wrong kind for a card side
     ExportError - Rendered output cannot be written

Usage Examples:
    try:
        cards = load_cards(path)
    except DocumentReadError as e:
        logger.error("load_failed", **e.to_dict())

    raise ExportError(
        "Output file already exists",
        error_code=ErrorCode.EXP_FILE_EXISTS.value,
        context={"output": str(path)},
    )
"""

from typing import Any


class MdCardsError(Exception):
    """Base exception for all mdcards errors.

    Attributes:
        message: Human-readable error message
        suggestion: Optional suggestion for resolving the error
        error_code: Structured error code for machine-readable handling
        context: Additional context for debugging (e.g., file paths)
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
        """Convert exception to dictionary for structured logging."""
        return {
            "message": self.message,
            "error_code": self.error_code,
            "suggestion": self.suggestion,
            "context": self.context,
            "type": type(self).__name__,
        }


class ConfigurationError(MdCardsError):
    """Configuration loading or validation errors.

    Raised when:
    - Config file is malformed
    - Configuration values fail validation
    """


class DocumentReadError(MdCardsError):
    """The Markdown source document could not be read.

    Raised when:
    - The path does not exist or is not a file
    - The file cannot be decoded with the configured encoding

    No partial card list is produced.
    """


class InvalidBlockError(MdCardsError, ValueError):
    """A content block of the wrong kind was given for a card side.

    Raised when replacing the front content of a SimpleCard with anything
    other than a Heading block.
    """


class ExportError(MdCardsError):
    """Rendered cards could not be written to the output file."""


__all__ = [
    "ConfigurationError",
    "DocumentReadError",
    "ExportError",
    "InvalidBlockError",
    "MdCardsError",
]
