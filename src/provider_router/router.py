from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .adapters import AdapterRegistry, ProviderAdapter
from .catalog import ModelCatalog
from .config import RouterConfig
from .costs import COST_TABLE, ProviderPricing, calculate_cost
from .failover import FailoverResolver
from .logging import configure_logging
from .metrics import maybe_start_metrics
from .rate_limits import RateLimitTracker
from .rate_tiers import RateTierConfig, get_rate_limit_for_tier
from .router_contracts import AIError, Model, SelectionCriteria
from .selection import SelectionEngine
from .tiering import Provider, RateTier


class ProviderRouter:
    """
    Routing and failover engine for one tenant.

    Each instance owns its own rate-limit tracker, so independent routers never
    observe each other's throttling state.
    """

    def __init__(
        self,
        cfg: RouterConfig | None = None,
        *,
        catalog: ModelCatalog | None = None,
        tracker: RateLimitTracker | None = None,
        adapters: AdapterRegistry | Iterable[ProviderAdapter] | None = None,
        cost_table: Mapping[str, ProviderPricing] | None = None,
    ):
        self.cfg = cfg or RouterConfig()
        self.catalog = catalog or ModelCatalog()
        self.tracker = tracker or RateLimitTracker()
        if isinstance(adapters, AdapterRegistry):
            self.adapters = adapters
        else:
            self.adapters = AdapterRegistry(adapters or ())
        self.cost_table = cost_table if cost_table is not None else COST_TABLE
        self.engine = SelectionEngine(self.catalog, self.tracker, rate_limiting=self.cfg.rate_limiting)
        self.failover = FailoverResolver(self.engine, self.tracker, self.cfg)

    def select_model(self, criteria: SelectionCriteria) -> Model:
        return self.engine.select_model(criteria)

    def handle_error(self, error: AIError, criteria: SelectionCriteria | None = None) -> Model | None:
        return self.failover.handle_error(error, criteria)

    def mark_rate_limited(self, provider: Provider | str, seconds: float) -> None:
        self.tracker.mark_rate_limited(provider, seconds)

    def is_rate_limited(self, provider: Provider | str) -> bool:
        return self.tracker.is_rate_limited(provider)

    def calculate_cost(self, provider: Provider | str, prompt_tokens: int, completion_tokens: int) -> float:
        return calculate_cost(provider, prompt_tokens, completion_tokens, table=self.cost_table)

    def get_rate_limit_for_tier(self, tier: RateTier | str) -> RateTierConfig:
        return get_rate_limit_for_tier(tier)

    def available_models(self) -> list[Model]:
        return self.catalog.models()

    def adapter_for(self, model: Model) -> ProviderAdapter:
        return self.adapters.get(model.provider)

    def client_for(self, model: Model) -> Any:
        adapter = self.adapter_for(model)
        return adapter.client_for(model.id, api_key=self.cfg.require_api_key(model.provider))


def create_router(cfg: RouterConfig | None = None, **kwargs: Any) -> ProviderRouter:
    cfg = cfg or RouterConfig()
    configure_logging(
        level=cfg.log_level,
        fmt=cfg.log_format,
        api_keys=cfg.api_keys(),
    )
    maybe_start_metrics(enable=cfg.enable_metrics, bind=cfg.metrics_bind, port=cfg.metrics_port)
    return ProviderRouter(cfg, **kwargs)
