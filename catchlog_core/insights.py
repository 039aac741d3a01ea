from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from .aggregate import aggregate_catches
from .config import InsightsConfig, load_config
from .filters import effective_selection, filter_catches
from .models import (
    SCOPE_LAST_OUTING,
    CatchRecord,
    EffectiveFilters,
    InsightsResult,
    OutingRecord,
    TimeScope,
)
from .time_scope import resolve_time_scope

logger = logging.getLogger(__name__)


def build_insights(
    catches: Sequence[CatchRecord],
    outings: Sequence[OutingRecord],
    scope: TimeScope | None = None,
    venue: str | None = None,
    outing_id: str | None = None,
    now: datetime | None = None,
    config: InsightsConfig | None = None,
) -> InsightsResult:
    config = config or load_config()
    scope = scope or TimeScope.all()
    tz = config.tz
    now = now or datetime.now(timezone.utc)

    effective_venue, effective_outing = effective_selection(catches, outings, venue, outing_id)
    resolved = resolve_time_scope(
        scope,
        now,
        outings,
        catches,
        tz,
        recent_days=config.recent_days,
    )
    if resolved.kind == SCOPE_LAST_OUTING and resolved.outing_id:
        effective_outing = resolved.outing_id

    working_set = filter_catches(
        catches,
        tz,
        start=resolved.start,
        end=resolved.end,
        outing_id=effective_outing,
        venue=effective_venue,
    )
    logger.debug(
        "insights_working_set",
        extra={"scope": resolved.kind, "catches": len(catches), "working_set": len(working_set)},
    )

    filters = EffectiveFilters(
        start=resolved.start,
        end=resolved.end,
        scope=resolved.kind,
        outing_id=effective_outing,
        venue=effective_venue,
        last_outing_unavailable=resolved.last_outing_unavailable,
    )
    return InsightsResult(report=aggregate_catches(working_set, outings, config), filters=filters)
