from __future__ import annotations

from collections.abc import Iterable

from .errors import ConfigurationError
from .router_contracts import Model, ModelCapabilities, SelectionCriteria
from .tiering import CostTier, Provider, TaskComplexity

# Minimum output token budget a model must offer for each task class.
COMPLEXITY_TOKENS: dict[TaskComplexity, int] = {
    TaskComplexity.SIMPLE: 1000,
    TaskComplexity.MODERATE: 4000,
    TaskComplexity.COMPLEX: 8000,
}

DEFAULT_MODELS: tuple[Model, ...] = (
    Model(
        id="llama-3.1-70b-versatile",
        provider=Provider.GROQ,
        name="Llama 3.1 70B",
        capabilities=ModelCapabilities(
            reasoning=True,
            vision=False,
            streaming=True,
            max_tokens=8192,
            context_window=32768,
            cost_tier=CostTier.FREE,
        ),
        priority=1,
        typical_latency_ms=800,
    ),
    Model(
        id="llama-3.1-8b-instant",
        provider=Provider.GROQ,
        name="Llama 3.1 8B",
        capabilities=ModelCapabilities(
            reasoning=False,
            vision=False,
            streaming=True,
            max_tokens=8192,
            context_window=32768,
            cost_tier=CostTier.FREE,
        ),
        priority=2,
        typical_latency_ms=250,
    ),
    Model(
        id="gemini-1.5-flash",
        provider=Provider.GOOGLE,
        name="Gemini 1.5 Flash",
        capabilities=ModelCapabilities(
            reasoning=True,
            vision=True,
            streaming=True,
            max_tokens=8192,
            context_window=32768,
            cost_tier=CostTier.FREE,
        ),
        priority=3,
        typical_latency_ms=450,
    ),
    Model(
        id="claude-3-opus-20240229",
        provider=Provider.ANTHROPIC,
        name="Claude 3 Opus",
        capabilities=ModelCapabilities(
            reasoning=True,
            vision=True,
            streaming=True,
            max_tokens=4096,
            context_window=200000,
            cost_tier=CostTier.PAID,
        ),
        priority=4,
        typical_latency_ms=2500,
    ),
)


class ModelCatalog:
    """
    Ordered, immutable registry of known models.

    Catalog order is significant: it is the final tie-breaker during selection.
    """

    def __init__(self, models: Iterable[Model] = DEFAULT_MODELS):
        self._models = tuple(models)
        seen: set[str] = set()
        for model in self._models:
            if model.id in seen:
                raise ConfigurationError(f"Duplicate model id in catalog: {model.id!r}")
            seen.add(model.id)
        self._by_id = {m.id: m for m in self._models}

    def __len__(self) -> int:
        return len(self._models)

    def models(self) -> list[Model]:
        return list(self._models)

    def get(self, model_id: str) -> Model:
        return self._by_id[model_id]

    def providers(self) -> list[str]:
        return list(dict.fromkeys(m.provider for m in self._models))

    def candidates(self, criteria: SelectionCriteria) -> list[Model]:
        required_tokens = COMPLEXITY_TOKENS[criteria.task_complexity]
        out: list[Model] = []
        for model in self._models:
            caps = model.capabilities
            if criteria.requires_reasoning and not caps.reasoning:
                continue
            if criteria.requires_vision and not caps.vision:
                continue
            if caps.max_tokens < required_tokens:
                continue
            if model.typical_latency_ms > criteria.max_latency_ms:
                continue
            out.append(model)
        return out
