from __future__ import annotations

import structlog

from .config import RouterConfig
from .errors import NoAvailableModelError
from .metrics import failovers_total
from .rate_limits import RateLimitTracker
from .router_contracts import AIError, Model, SelectionCriteria
from .selection import SelectionEngine
from .tiering import ErrorCode

log = structlog.get_logger()


class FailoverResolver:
    """
    Recommends an alternate model after a failed provider call.

    Never retries by itself. ``None`` means "give up": either the error does not
    warrant a retry or no alternative model is available.
    """

    def __init__(self, engine: SelectionEngine, tracker: RateLimitTracker, cfg: RouterConfig):
        self.engine = engine
        self.tracker = tracker
        self.cfg = cfg

    def handle_error(self, error: AIError, criteria: SelectionCriteria | None = None) -> Model | None:
        if not self.cfg.fallback_enabled or not error.retryable:
            failovers_total.labels(outcome="not_retryable").inc()
            log.info("failover_skipped", code=error.code.value, provider=error.provider)
            return None

        if error.code == ErrorCode.RATE_LIMIT and error.provider:
            window = error.retry_after or self.cfg.default_retry_after_seconds
            self.tracker.mark_rate_limited(error.provider, window)

        try:
            model = self.engine.select_model(criteria or self.cfg.fallback_criteria)
        except NoAvailableModelError:
            failovers_total.labels(outcome="exhausted").inc()
            log.warning("failover_exhausted", code=error.code.value, provider=error.provider)
            return None

        failovers_total.labels(outcome="alternate").inc()
        log.info(
            "failover_alternate",
            code=error.code.value,
            failed_provider=error.provider,
            model=model.id,
            provider=model.provider,
        )
        return model
