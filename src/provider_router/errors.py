from __future__ import annotations


class RouterError(Exception):
    """Base error for routing failures."""


class ConfigurationError(RouterError):
    pass


class NoAvailableModelError(RouterError):
    def __init__(self, message: str = "No available models meet the specified criteria"):
        super().__init__(message)


class UnknownRateTierError(RouterError):
    def __init__(self, tier: str):
        super().__init__(f"Unknown rate tier: {tier!r}")
        self.tier = tier


class UnsupportedProviderError(RouterError):
    def __init__(self, provider: str):
        super().__init__(f"Unsupported provider: {provider}")
        self.provider = provider


class ProviderError(Exception):
    """Raw failure raised by a provider adapter."""


class RateLimitError(ProviderError):
    def __init__(self, retry_after_seconds: int | None = None, message: str = "Rate limit exceeded"):
        super().__init__(message)
        self.retry_after_seconds = retry_after_seconds


class ProviderUnavailableError(ProviderError):
    """Upstream unreachable or temporarily down."""
