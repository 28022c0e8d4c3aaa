from concurrent.futures import ThreadPoolExecutor

import pytest

from provider_router import (
    CostTier,
    Model,
    ModelCapabilities,
    ModelCatalog,
    NoAvailableModelError,
    SelectionCriteria,
)
from provider_router.selection import SelectionEngine


def _criteria(complexity="moderate", *, reasoning=False, vision=False, latency=5000, preferred=None):
    return SelectionCriteria(
        task_complexity=complexity,
        requires_reasoning=reasoning,
        requires_vision=vision,
        max_latency_ms=latency,
        preferred_provider=preferred,
    )


def _model(model_id, provider, *, priority, cost_tier=CostTier.FREE):
    return Model(
        id=model_id,
        provider=provider,
        name=model_id,
        capabilities=ModelCapabilities(
            reasoning=True,
            vision=False,
            streaming=True,
            max_tokens=8192,
            context_window=32768,
            cost_tier=cost_tier,
        ),
        priority=priority,
        typical_latency_ms=100,
    )


@pytest.fixture
def engine(tracker):
    return SelectionEngine(ModelCatalog(), tracker)


def test_simple_fast_task_selects_fast_streaming_groq_model(engine):
    model = engine.select_model(_criteria("simple", latency=500))
    assert model.provider == "groq"
    assert "8b" in model.id
    assert model.capabilities.streaming is True


def test_complex_reasoning_task(engine):
    model = engine.select_model(_criteria("complex", reasoning=True, latency=10_000))
    assert model.capabilities.reasoning is True
    assert model.capabilities.max_tokens >= 4000
    assert model.id == "llama-3.1-70b-versatile"


def test_vision_requirement(engine):
    model = engine.select_model(_criteria(vision=True, latency=3000))
    assert model.capabilities.vision is True
    assert model.provider == "google"


def test_rate_limited_provider_is_skipped(engine, tracker):
    tracker.mark_rate_limited("groq", 60)
    model = engine.select_model(_criteria(latency=2000))
    assert model.provider != "groq"
    assert model.provider == "google"


def test_rate_limit_expiry_restores_provider(engine, tracker, clock):
    tracker.mark_rate_limited("groq", 60)
    clock.advance(61)
    assert engine.select_model(_criteria()).provider == "groq"


def test_rate_limiting_disabled_ignores_tracker(tracker):
    engine = SelectionEngine(ModelCatalog(), tracker, rate_limiting=False)
    tracker.mark_rate_limited("groq", 60)
    assert engine.select_model(_criteria()).provider == "groq"


def test_all_providers_limited_and_impossible_latency_raises(engine, tracker):
    for provider in ("groq", "google", "anthropic"):
        tracker.mark_rate_limited(provider, 60)
    with pytest.raises(NoAvailableModelError, match="No available models meet the specified criteria"):
        engine.select_model(_criteria("complex", reasoning=True, vision=True, latency=1))


def test_preferred_provider_is_honoured_when_available(engine):
    assert engine.select_model(_criteria(preferred="anthropic")).provider == "anthropic"


def test_preferred_provider_ignored_when_unavailable(engine, tracker):
    tracker.mark_rate_limited("anthropic", 60)
    assert engine.select_model(_criteria(preferred="anthropic")).provider == "groq"


def test_priority_tie_prefers_free_tier(tracker):
    catalog = ModelCatalog(
        [
            _model("paid-first", "anthropic", priority=1, cost_tier=CostTier.PAID),
            _model("free-second", "google", priority=1),
        ]
    )
    engine = SelectionEngine(catalog, tracker)
    assert engine.select_model(_criteria()).id == "free-second"


def test_full_tie_falls_back_to_catalog_order(tracker):
    catalog = ModelCatalog([_model("a", "groq", priority=1), _model("b", "google", priority=1)])
    engine = SelectionEngine(catalog, tracker)
    assert engine.select_model(_criteria()).id == "a"


def test_concurrent_selections_are_consistent(engine):
    criteria = _criteria("simple", latency=1000)

    with ThreadPoolExecutor(max_workers=10) as pool:
        models = list(pool.map(lambda _: engine.select_model(criteria), range(10)))

    assert len(models) == 10
    assert {m.id for m in models} == {models[0].id}
    assert models[0].provider
