from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .errors import UnknownRateTierError
from .tiering import RateTier

UNLIMITED = -1


class RateTierConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    requests_per_hour: int
    tokens_per_month: int
    concurrent_requests: int

    def is_unlimited(self, field: Literal["requests_per_hour", "tokens_per_month", "concurrent_requests"]) -> bool:
        return getattr(self, field) == UNLIMITED


RATE_TIERS: dict[str, RateTierConfig] = {
    RateTier.FREE.value: RateTierConfig(requests_per_hour=100, tokens_per_month=50_000, concurrent_requests=5),
    RateTier.PRO.value: RateTierConfig(requests_per_hour=1000, tokens_per_month=1_000_000, concurrent_requests=25),
    RateTier.ENTERPRISE.value: RateTierConfig(
        requests_per_hour=UNLIMITED,
        tokens_per_month=UNLIMITED,
        concurrent_requests=100,
    ),
}


def get_rate_limit_for_tier(tier: RateTier | str) -> RateTierConfig:
    key = tier.value if isinstance(tier, RateTier) else str(tier)
    try:
        return RATE_TIERS[key]
    except KeyError:
        raise UnknownRateTierError(key) from None
