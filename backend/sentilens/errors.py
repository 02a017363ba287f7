"""Domain errors surfaced to API callers.

Only the messages defined here ever reach the end user; technical detail
(transport exceptions, JSON/schema errors) stays in the logs.
"""

ANALYSIS_FAILED_MESSAGE = (
    "Failed to analyze text. The model may be unavailable or the input may be invalid."
)
COMPARISON_FAILED_MESSAGE = (
    "Failed to compare texts. The model may be unavailable or the input may be invalid."
)
EMPTY_ANALYSIS_INPUT_MESSAGE = "Please enter some text to analyze."
EMPTY_COMPARISON_INPUT_MESSAGE = "Please provide text in both fields to compare."


class SentilensError(Exception):
    """Base class for errors carrying a user-facing message."""

    default_message = "An unknown error occurred."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InputValidationError(SentilensError):
    """Caller-side input rejected before any model call."""

    default_message = EMPTY_ANALYSIS_INPUT_MESSAGE


class AnalysisError(SentilensError):
    default_message = ANALYSIS_FAILED_MESSAGE


class ComparisonError(SentilensError):
    default_message = COMPARISON_FAILED_MESSAGE


class DocumentExtractionError(SentilensError):
    default_message = "An unknown error occurred while processing the file."


class ExportError(SentilensError):
    default_message = "Export failed."


def require_text(text: str | None, message: str = EMPTY_ANALYSIS_INPUT_MESSAGE) -> str:
    """Reject empty or whitespace-only input."""
    if text is None or not text.strip():
        raise InputValidationError(message)
    return text
