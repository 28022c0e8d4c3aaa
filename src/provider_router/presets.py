from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .tiering import Provider


@dataclass(frozen=True)
class ModelPreset:
    provider: str
    model: str
    temperature: float
    max_tokens: int
    description: str


MODEL_PRESETS: dict[str, ModelPreset] = {
    "fast": ModelPreset(
        provider=Provider.GROQ.value,
        model="llama-3.1-8b-instant",
        temperature=0.3,
        max_tokens=1000,
        description="Quick responses, simple tasks",
    ),
    "balanced": ModelPreset(
        provider=Provider.GROQ.value,
        model="llama-3.1-70b-versatile",
        temperature=0.7,
        max_tokens=2000,
        description="Balanced quality and speed",
    ),
    "powerful": ModelPreset(
        provider=Provider.GOOGLE.value,
        model="gemini-1.5-flash",
        temperature=0.7,
        max_tokens=4000,
        description="High-quality responses with vision support",
    ),
    "reasoning": ModelPreset(
        provider=Provider.ANTHROPIC.value,
        model="claude-3-opus-20240229",
        temperature=0.1,
        max_tokens=4000,
        description="Deep reasoning and analysis",
    ),
}


def get_model_preset(name: str) -> ModelPreset:
    try:
        return MODEL_PRESETS[name]
    except KeyError:
        raise ConfigurationError(f"Unknown model preset: {name!r}") from None
