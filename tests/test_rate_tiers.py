import pytest

from provider_router import RateTier, UnknownRateTierError, get_rate_limit_for_tier


def test_free_tier():
    limits = get_rate_limit_for_tier("free")
    assert limits.requests_per_hour == 100
    assert limits.tokens_per_month == 50000
    assert limits.concurrent_requests == 5


def test_pro_tier():
    limits = get_rate_limit_for_tier(RateTier.PRO)
    assert limits.requests_per_hour == 1000
    assert limits.tokens_per_month == 1000000
    assert limits.concurrent_requests == 25


def test_enterprise_tier_is_unlimited_where_declared():
    limits = get_rate_limit_for_tier("enterprise")
    assert limits.requests_per_hour == -1
    assert limits.tokens_per_month == -1
    assert limits.concurrent_requests == 100
    assert limits.is_unlimited("requests_per_hour") is True
    assert limits.is_unlimited("concurrent_requests") is False


def test_unknown_tier_raises():
    with pytest.raises(UnknownRateTierError) as exc:
        get_rate_limit_for_tier("platinum")
    assert exc.value.tier == "platinum"
