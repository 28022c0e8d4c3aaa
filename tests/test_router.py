import pytest

from provider_router import (
    AdapterRegistry,
    ConfigurationError,
    NoAvailableModelError,
    ProviderAdapter,
    ProviderRouter,
    RouterConfig,
    SelectionCriteria,
    UnknownRateTierError,
    UnsupportedProviderError,
    create_router,
)


class FakeAdapter:
    def __init__(self, provider):
        self.provider = provider
        self.requested = []

    def client_for(self, model_id, *, api_key):
        self.requested.append((model_id, api_key))
        return f"{self.provider}:{model_id}"


def test_fake_adapter_satisfies_protocol():
    assert isinstance(FakeAdapter("groq"), ProviderAdapter)


def test_registry_lookup_and_unsupported_provider():
    registry = AdapterRegistry([FakeAdapter("groq")])
    assert "groq" in registry
    assert "google" not in registry
    assert registry.providers() == ["groq"]

    with pytest.raises(UnsupportedProviderError, match="Unsupported provider: unsupported"):
        registry.get("unsupported")


def test_registering_same_provider_replaces_adapter():
    first, second = FakeAdapter("groq"), FakeAdapter("groq")
    registry = AdapterRegistry([first])
    registry.register(second)
    assert registry.get("groq") is second


def test_router_resolves_client_for_selected_model():
    groq = FakeAdapter("groq")
    router = ProviderRouter(RouterConfig(groq_api_key="gsk_test"), adapters=[groq, FakeAdapter("google")])

    model = router.select_model(SelectionCriteria(task_complexity="simple", max_latency_ms=500))
    assert router.client_for(model) == "groq:llama-3.1-8b-instant"
    assert groq.requested == [("llama-3.1-8b-instant", "gsk_test")]


def test_router_client_requires_provider_key():
    google = FakeAdapter("google")
    router = ProviderRouter(
        RouterConfig(groq_api_key=None, google_api_key=None, anthropic_api_key=None),
        adapters=[google],
    )
    model = router.catalog.get("gemini-1.5-flash")
    with pytest.raises(ConfigurationError, match="No API key configured"):
        router.client_for(model)
    assert google.requested == []


def test_router_without_adapter_for_provider():
    router = ProviderRouter(RouterConfig())
    model = router.available_models()[0]
    with pytest.raises(UnsupportedProviderError):
        router.adapter_for(model)


def test_routers_have_isolated_rate_limit_state():
    a = ProviderRouter(RouterConfig())
    b = ProviderRouter(RouterConfig())
    criteria = SelectionCriteria(task_complexity="moderate", max_latency_ms=5000)

    a.mark_rate_limited("groq", 60)
    assert a.select_model(criteria).provider != "groq"
    assert b.select_model(criteria).provider == "groq"


def test_router_facade_exposes_costs_and_tiers():
    router = ProviderRouter(RouterConfig())
    assert router.calculate_cost("groq", 1000, 500) == pytest.approx(0.000985)
    assert router.get_rate_limit_for_tier("pro").concurrent_requests == 25
    with pytest.raises(UnknownRateTierError):
        router.get_rate_limit_for_tier("gold")


def test_router_raises_when_every_provider_limited():
    router = ProviderRouter(RouterConfig())
    for provider in router.catalog.providers():
        router.mark_rate_limited(provider, 60)
    with pytest.raises(NoAvailableModelError):
        router.select_model(
            SelectionCriteria(
                task_complexity="complex",
                requires_reasoning=True,
                requires_vision=True,
                max_latency_ms=1,
            )
        )


def test_create_router_configures_logging_without_metrics():
    router = create_router(RouterConfig(enable_metrics=False, log_format="console", groq_api_key="gsk_secret"))
    assert isinstance(router, ProviderRouter)
    assert router.is_rate_limited("groq") is False
