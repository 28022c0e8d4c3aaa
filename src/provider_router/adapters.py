from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

import structlog

from .errors import UnsupportedProviderError
from .tiering import Provider, provider_id

log = structlog.get_logger()


@runtime_checkable
class ProviderAdapter(Protocol):
    """
    Client-side seam for one upstream vendor.

    Implementations build whatever client object their SDK needs for a model id,
    authenticated with the key configured for their provider.
    The router only looks adapters up; it never calls the provider itself.
    """

    provider: str

    def client_for(self, model_id: str, *, api_key: str) -> Any: ...


class AdapterRegistry:
    def __init__(self, adapters: Iterable[ProviderAdapter] = ()):
        self._adapters: dict[str, ProviderAdapter] = {}
        for adapter in adapters:
            self.register(adapter)

    def register(self, adapter: ProviderAdapter) -> None:
        key = provider_id(adapter.provider)
        if key in self._adapters:
            log.warning("adapter_replaced", provider=key)
        self._adapters[key] = adapter

    def get(self, provider: Provider | str) -> ProviderAdapter:
        key = provider_id(provider)
        adapter = self._adapters.get(key)
        if adapter is None:
            raise UnsupportedProviderError(key)
        return adapter

    def providers(self) -> list[str]:
        return list(self._adapters)

    def __contains__(self, provider: object) -> bool:
        if not isinstance(provider, (str, Provider)):
            return False
        return provider_id(provider) in self._adapters
