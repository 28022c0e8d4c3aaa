from __future__ import annotations

from typing import Any

from .errors import ProviderUnavailableError, RateLimitError
from .metrics import errors_classified_total
from .router_contracts import AIError
from .tiering import ErrorCode, Provider, provider_id

# Checked in order; the first matching entry wins.
_MESSAGE_PATTERNS: tuple[tuple[ErrorCode, tuple[str, ...]], ...] = (
    (ErrorCode.RATE_LIMIT, ("rate limit",)),
    (ErrorCode.PROVIDER_DOWN, ("network", "timeout")),
    (ErrorCode.MODEL_ERROR, ("not found", "model")),
    (ErrorCode.INVALID_REQUEST, ("invalid",)),
)

_RETRYABLE = frozenset({ErrorCode.RATE_LIMIT, ErrorCode.PROVIDER_DOWN})


def _message_of(raw: Any) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    try:
        if isinstance(raw, BaseException):
            return str(raw)
        message = getattr(raw, "message", None)
    except Exception:
        # Broken __str__ or message property; classify as UNKNOWN.
        return None
    return message if isinstance(message, str) else None


def categorize_error(raw: Any) -> ErrorCode:
    """
    Map a raw provider failure to an ``ErrorCode``.

    Structured adapter errors are trusted first. Anything else falls back to
    substring matching on the lower-cased message. Never raises.
    """
    if isinstance(raw, RateLimitError):
        return ErrorCode.RATE_LIMIT
    if isinstance(raw, (ProviderUnavailableError, TimeoutError)):
        return ErrorCode.PROVIDER_DOWN

    message = _message_of(raw)
    if not message:
        return ErrorCode.UNKNOWN
    lowered = message.lower()
    for code, needles in _MESSAGE_PATTERNS:
        if any(needle in lowered for needle in needles):
            return code
    return ErrorCode.UNKNOWN


def is_retryable(code: ErrorCode) -> bool:
    return code in _RETRYABLE


def build_ai_error(raw: Any, provider: Provider | str | None = None) -> AIError:
    code = categorize_error(raw)
    errors_classified_total.labels(code=code.value).inc()
    retry_after = raw.retry_after_seconds if isinstance(raw, RateLimitError) else None
    return AIError(
        code=code,
        message=_message_of(raw) or "Unknown error",
        retryable=is_retryable(code),
        provider=provider_id(provider) if provider is not None else None,
        retry_after=retry_after,
    )
