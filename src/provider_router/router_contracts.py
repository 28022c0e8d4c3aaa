from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .tiering import CostTier, ErrorCode, Provider, TaskComplexity, provider_id


class ModelCapabilities(BaseModel):
    model_config = ConfigDict(frozen=True)

    reasoning: bool
    vision: bool
    streaming: bool
    max_tokens: int = Field(gt=0)
    context_window: int = Field(gt=0)
    cost_tier: CostTier


class Model(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    provider: str
    name: str
    capabilities: ModelCapabilities
    priority: int
    typical_latency_ms: int = Field(gt=0)

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, v: Provider | str) -> str:
        return provider_id(v)


class SelectionCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    task_complexity: TaskComplexity
    requires_reasoning: bool = False
    requires_vision: bool = False
    max_latency_ms: int = Field(gt=0)
    preferred_provider: str | None = None

    @field_validator("preferred_provider", mode="before")
    @classmethod
    def _normalize_provider(cls, v: Provider | str | None) -> str | None:
        if v is None:
            return None
        return provider_id(v)


@dataclass(frozen=True)
class AIError:
    code: ErrorCode
    message: str
    retryable: bool
    provider: str | None = None
    retry_after: int | None = None
