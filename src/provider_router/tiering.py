from __future__ import annotations

from enum import Enum


class Provider(str, Enum):
    GROQ = "groq"
    GOOGLE = "google"
    ANTHROPIC = "anthropic"


class CostTier(str, Enum):
    FREE = "free"
    PAID = "paid"


class TaskComplexity(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class RateTier(str, Enum):
    FREE = "free"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class ErrorCode(str, Enum):
    RATE_LIMIT = "RATE_LIMIT"
    PROVIDER_DOWN = "PROVIDER_DOWN"
    MODEL_ERROR = "MODEL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN = "UNKNOWN"


def provider_id(provider: Provider | str) -> str:
    # Enum members hash by name, so tables are keyed by the plain value.
    if isinstance(provider, Enum):
        return str(provider.value)
    return str(provider)
