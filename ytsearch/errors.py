"""Pipeline errors and API error classification."""

import re
from dataclasses import dataclass
from typing import Any

_MARKUP_PATTERN = re.compile(r"<[^>]+>")

UNKNOWN_REASON = "Unknown reason"
NO_EXTENDED_HELP = "No extended help available"


@dataclass(frozen=True)
class StructuredError:
    """Diagnostic extracted from an API error envelope."""

    code: int | None
    message: str
    reason: str
    extended_help: str
    parsed: bool = True

    def describe(self) -> str:
        """Render the diagnostic shown to the operator."""
        if not self.parsed:
            return "API Error: Unable to parse error information."
        return (
            f"Error Code: {self.code}\n"
            f"Message: {self.message}\n"
            f"Reason: {self.reason}\n"
            f"Extended Help: {self.extended_help}"
        )


UNPARSABLE_API_ERROR = StructuredError(
    code=None,
    message="Unable to parse error information.",
    reason=UNKNOWN_REASON,
    extended_help=NO_EXTENDED_HELP,
    parsed=False,
)


def classify_api_error(data: Any) -> StructuredError:
    """Translate an API error envelope into a structured diagnostic.

    The envelope looks like ``{"error": {"code": 403, "message": "...",
    "errors": [{"reason": "quotaExceeded", "extendedHelp": "..."}]}}``.

    Args:
        data: Decoded response body

    Returns:
        StructuredError with the first error entry's details, or the
        generic unparsable diagnostic when the shape does not match
    """
    if not isinstance(data, dict):
        return UNPARSABLE_API_ERROR

    error = data.get("error")
    if not isinstance(error, dict):
        return UNPARSABLE_API_ERROR

    code = error.get("code")
    message = error.get("message")
    errors = error.get("errors")
    # bool is an int subclass
    if not isinstance(code, int) or isinstance(code, bool):
        return UNPARSABLE_API_ERROR
    if not isinstance(message, str) or not isinstance(errors, list) or not errors:
        return UNPARSABLE_API_ERROR

    first = errors[0] if isinstance(errors[0], dict) else {}
    reason = first.get("reason")
    extended_help = first.get("extendedHelp")

    return StructuredError(
        code=code,
        message=_MARKUP_PATTERN.sub("", message),
        reason=reason if isinstance(reason, str) else UNKNOWN_REASON,
        extended_help=extended_help if isinstance(extended_help, str) else NO_EXTENDED_HELP,
    )


class SearchPipelineError(Exception):
    """Error with pipeline stage context."""

    code = "PIPELINE_ERROR"

    def __init__(self, stage: str, message: str):
        self.stage = stage
        self.message = message
        super().__init__(f"[{stage}] {self.code}: {message}")

    def describe(self) -> str:
        """Render the diagnostic shown to the operator."""
        return f"Error: {self.message}"


class TransportError(SearchPipelineError):
    """The request could not be completed (connection failure, timeout)."""

    code = "TRANSPORT_ERROR"


class DecodeError(SearchPipelineError):
    """The response body is not a JSON object."""

    code = "DECODE_ERROR"


class StructuralError(SearchPipelineError):
    """The response is valid JSON but lacks a required top-level key."""

    code = "STRUCTURE_ERROR"


class APIError(SearchPipelineError):
    """The API reported an error."""

    code = "API_ERROR"

    def __init__(self, stage: str, error: StructuredError, status_code: int | None = None):
        self.error = error
        self.status_code = status_code
        super().__init__(stage, error.message)

    def describe(self) -> str:
        return self.error.describe()
