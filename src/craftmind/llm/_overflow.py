from __future__ import annotations

from typing import Optional

from .errors import ContextOverflowError

OVERFLOW_FINISH_REASON = "length"
OVERFLOW_ERROR_CODE = "context_length_exceeded"
OVERFLOW_MESSAGE = "Context length exceeded"


def is_context_overflow(
    *,
    finish_reason: Optional[str] = None,
    code: Optional[str] = None,
    message: Optional[str] = None,
) -> bool:
    """Return True when a completion or provider error means the prompt is too long.

    A "length" finish reason counts even though the API call itself succeeded.
    """

    return (
        finish_reason == OVERFLOW_FINISH_REASON
        or code == OVERFLOW_ERROR_CODE
        or message == OVERFLOW_MESSAGE
    )


def is_overflow_error(error: BaseException) -> bool:
    if isinstance(error, ContextOverflowError):
        return True
    code = getattr(error, "code", None)
    return is_context_overflow(
        code=code if isinstance(code, str) else None,
        message=str(error),
    )
