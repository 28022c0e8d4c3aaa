from .adapters import AdapterRegistry, ProviderAdapter
from .catalog import DEFAULT_MODELS, ModelCatalog
from .classifier import build_ai_error, categorize_error, is_retryable
from .config import RouterConfig
from .costs import calculate_cost, check_budget_limits
from .errors import (
    ConfigurationError,
    NoAvailableModelError,
    ProviderError,
    ProviderUnavailableError,
    RateLimitError,
    RouterError,
    UnknownRateTierError,
    UnsupportedProviderError,
)
from .presets import get_model_preset
from .rate_limits import RateLimitTracker
from .rate_tiers import RateTierConfig, get_rate_limit_for_tier
from .router import ProviderRouter, create_router
from .router_contracts import AIError, Model, ModelCapabilities, SelectionCriteria
from .tiering import CostTier, ErrorCode, Provider, RateTier, TaskComplexity

__all__ = [
    "AIError",
    "AdapterRegistry",
    "ConfigurationError",
    "CostTier",
    "DEFAULT_MODELS",
    "ErrorCode",
    "Model",
    "ModelCapabilities",
    "ModelCatalog",
    "NoAvailableModelError",
    "Provider",
    "ProviderAdapter",
    "ProviderError",
    "ProviderRouter",
    "ProviderUnavailableError",
    "RateLimitError",
    "RateLimitTracker",
    "RateTier",
    "RateTierConfig",
    "RouterConfig",
    "RouterError",
    "SelectionCriteria",
    "TaskComplexity",
    "UnknownRateTierError",
    "UnsupportedProviderError",
    "build_ai_error",
    "calculate_cost",
    "categorize_error",
    "check_budget_limits",
    "create_router",
    "get_model_preset",
    "get_rate_limit_for_tier",
    "is_retryable",
]
