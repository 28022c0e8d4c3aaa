from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, TypeAlias, cast

import structlog

ProcessorReturn: TypeAlias = Mapping[str, Any] | str | bytes | bytearray | tuple[Any, ...]
Processor: TypeAlias = Callable[[Any, str, MutableMapping[str, Any]], ProcessorReturn]

_REDACTED = "[REDACTED]"


def _redact(obj: Any, *, api_keys: Mapping[str, str], key_fields: frozenset[str]) -> Any:
    if isinstance(obj, str):
        for key in api_keys.values():
            obj = obj.replace(key, _REDACTED)
        return obj
    if isinstance(obj, list):
        return [_redact(v, api_keys=api_keys, key_fields=key_fields) for v in obj]
    if isinstance(obj, dict):
        return {
            k: _REDACTED if str(k).lower() in key_fields else _redact(v, api_keys=api_keys, key_fields=key_fields)
            for k, v in obj.items()
        }
    return obj


def make_redaction_processor(*, api_keys: Mapping[str, str]) -> Processor:
    """Scrub configured provider API keys from log events, by value and by ``<provider>_api_key`` field."""
    keys = {provider: key for provider, key in api_keys.items() if key}
    key_fields = frozenset(f"{provider}_api_key" for provider in keys)

    def _processor(_logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]) -> ProcessorReturn:
        return cast(dict[str, Any], _redact(dict(event_dict), api_keys=keys, key_fields=key_fields))

    return _processor


def configure_logging(
    level: str = "INFO",
    fmt: str = "json",
    *,
    api_keys: Mapping[str, str] | None = None,
) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level)

    processors: list[Processor] = [
        cast(Processor, structlog.contextvars.merge_contextvars),
        cast(Processor, structlog.processors.add_log_level),
        cast(Processor, structlog.processors.TimeStamper(fmt="iso")),
    ]

    if api_keys:
        processors.append(make_redaction_processor(api_keys=api_keys))

    if fmt == "json":
        processors.append(cast(Processor, structlog.processors.JSONRenderer()))
    else:
        processors.append(cast(Processor, structlog.dev.ConsoleRenderer()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )
