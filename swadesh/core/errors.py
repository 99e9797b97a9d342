"""
Error taxonomy. Every failure a handler can surface maps to one of these.

The message is public (sent to the client as {"error": message}); internal
causes are logged, never returned.
"""

from typing import Optional


class AppError(Exception):
    """Base for errors that map to an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Request body failed schema validation. Always the client's fault."""

    status_code = 400
    default_message = "Invalid request"


class Unauthorized(AppError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(AppError):
    """Resource absent, or owned by someone else. The two are indistinguishable."""

    status_code = 404
    default_message = "Not found"


class StorageUnavailable(AppError):
    """Persistence is unconfigured or unreachable."""

    status_code = 500
    default_message = "Storage is unavailable"


class GenerationFailed(AppError):
    """The external model call failed, timed out, or returned nothing."""

    status_code = 500
    default_message = "Failed to generate response"


def format_validation_errors(errors) -> str:
    """Flatten pydantic error dicts into one readable line: `msg at "field.path"`."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f'{err.get("msg", "Invalid value")} at "{loc}"' if loc else err.get("msg", "Invalid value"))
    return "; ".join(parts) or ValidationError.default_message
