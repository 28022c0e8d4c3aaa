from __future__ import annotations

import structlog

from .catalog import ModelCatalog
from .errors import NoAvailableModelError
from .metrics import selection_latency_seconds, selections_total
from .rate_limits import RateLimitTracker
from .router_contracts import Model, SelectionCriteria
from .tiering import CostTier

log = structlog.get_logger()


def _rank(model: Model) -> tuple[int, int]:
    # Lower priority first; free beats paid on ties. sorted() is stable, so
    # catalog order settles anything left.
    return (model.priority, 0 if model.capabilities.cost_tier == CostTier.FREE else 1)


class SelectionEngine:
    def __init__(self, catalog: ModelCatalog, tracker: RateLimitTracker, *, rate_limiting: bool = True):
        self.catalog = catalog
        self.tracker = tracker
        self.rate_limiting = rate_limiting

    def select_model(self, criteria: SelectionCriteria) -> Model:
        with selection_latency_seconds.time():
            excluded: frozenset[str] = frozenset()
            if self.rate_limiting:
                # One snapshot per call keeps the result consistent for this selection.
                excluded = self.tracker.limited_providers()

            available = [m for m in self.catalog.candidates(criteria) if m.provider not in excluded]

            if criteria.preferred_provider:
                preferred = [m for m in available if m.provider == criteria.preferred_provider]
                if preferred:
                    available = preferred

            if not available:
                selections_total.labels(provider="none", status="no_model").inc()
                log.warning(
                    "no_available_model",
                    task_complexity=criteria.task_complexity.value,
                    excluded=sorted(excluded),
                )
                raise NoAvailableModelError()

            chosen = sorted(available, key=_rank)[0]

        selections_total.labels(provider=chosen.provider, status="selected").inc()
        log.debug(
            "model_selected",
            model=chosen.id,
            provider=chosen.provider,
            task_complexity=criteria.task_complexity.value,
            candidates=len(available),
        )
        return chosen
