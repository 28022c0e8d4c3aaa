from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .tiering import Provider, provider_id


@dataclass(frozen=True)
class ProviderPricing:
    prompt_price_per_1k: float
    completion_price_per_1k: float
    currency: str = "USD"


# USD per 1K tokens (prompt, completion).
COST_TABLE: dict[str, ProviderPricing] = {
    Provider.GROQ.value: ProviderPricing(prompt_price_per_1k=0.00059, completion_price_per_1k=0.00079),
    Provider.GOOGLE.value: ProviderPricing(prompt_price_per_1k=0.000125, completion_price_per_1k=0.000375),
    Provider.ANTHROPIC.value: ProviderPricing(prompt_price_per_1k=0.015, completion_price_per_1k=0.075),
}


@dataclass(frozen=True)
class BudgetLimits:
    daily: float = 50.0
    weekly: float = 300.0
    monthly: float = 1000.0


@dataclass(frozen=True)
class BudgetStatus:
    daily_exceeded: bool
    weekly_exceeded: bool
    monthly_exceeded: bool
    daily_cost: float
    weekly_cost: float
    monthly_cost: float

    @property
    def any_exceeded(self) -> bool:
        return self.daily_exceeded or self.weekly_exceeded or self.monthly_exceeded


BUDGET_LIMITS = BudgetLimits()


def calculate_cost(
    provider: Provider | str,
    prompt_tokens: int,
    completion_tokens: int,
    table: Mapping[str, ProviderPricing] = COST_TABLE,
) -> float:
    """Estimated cost of one call. Unknown providers cost 0.0; no rounding is applied."""
    pricing = table.get(provider_id(provider))
    if pricing is None:
        return 0.0
    prompt_cost = (prompt_tokens / 1000) * pricing.prompt_price_per_1k
    completion_cost = (completion_tokens / 1000) * pricing.completion_price_per_1k
    return prompt_cost + completion_cost


def check_budget_limits(
    daily_cost: float,
    weekly_cost: float,
    monthly_cost: float,
    limits: BudgetLimits = BUDGET_LIMITS,
) -> BudgetStatus:
    return BudgetStatus(
        daily_exceeded=daily_cost > limits.daily,
        weekly_exceeded=weekly_cost > limits.weekly,
        monthly_exceeded=monthly_cost > limits.monthly,
        daily_cost=daily_cost,
        weekly_cost=weekly_cost,
        monthly_cost=monthly_cost,
    )
