from __future__ import annotations

import os

from pydantic import BaseModel, Field

from .errors import ConfigurationError
from .router_contracts import SelectionCriteria
from .tiering import TaskComplexity


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _default_fallback_criteria() -> SelectionCriteria:
    return SelectionCriteria(
        task_complexity=TaskComplexity.MODERATE,
        requires_reasoning=False,
        requires_vision=False,
        max_latency_ms=5000,
    )


class RouterConfig(BaseModel):
    # Routing behavior
    fallback_enabled: bool = Field(default_factory=lambda: _env_bool("ROUTER_FALLBACK_ENABLED", "true"))
    rate_limiting: bool = Field(default_factory=lambda: _env_bool("ROUTER_RATE_LIMITING", "true"))
    default_retry_after_seconds: int = Field(
        default_factory=lambda: int(os.getenv("ROUTER_DEFAULT_RETRY_AFTER_SECONDS", "60")),
        ge=0,
    )
    # Used by handle_error when the caller did not keep the failed request's criteria.
    fallback_criteria: SelectionCriteria = Field(default_factory=_default_fallback_criteria)

    # Provider credentials, handed to adapters and redacted from logs
    groq_api_key: str | None = Field(default_factory=lambda: os.getenv("GROQ_API_KEY"))
    google_api_key: str | None = Field(default_factory=lambda: os.getenv("GOOGLE_GENERATIVE_AI_API_KEY"))
    anthropic_api_key: str | None = Field(default_factory=lambda: os.getenv("ANTHROPIC_API_KEY"))

    # Observability
    enable_metrics: bool = Field(default_factory=lambda: _env_bool("ENABLE_METRICS", "false"))
    metrics_bind: str = Field(default_factory=lambda: os.getenv("METRICS_BIND", "127.0.0.1"))
    metrics_port: int = Field(default_factory=lambda: int(os.getenv("METRICS_PORT", "9109")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = Field(default_factory=lambda: os.getenv("LOG_FORMAT", "json"))

    def api_keys(self) -> dict[str, str]:
        keys = {
            "groq": self.groq_api_key,
            "google": self.google_api_key,
            "anthropic": self.anthropic_api_key,
        }
        return {provider: key for provider, key in keys.items() if key}

    def require_api_key(self, provider: str) -> str:
        key = self.api_keys().get(provider)
        if not key:
            raise ConfigurationError(f"No API key configured for provider {provider!r}.")
        return key
