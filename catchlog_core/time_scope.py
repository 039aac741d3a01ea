from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterable, Sequence

from .models import (
    SCOPE_ALL,
    SCOPE_CUSTOM,
    SCOPE_LAST_30_DAYS,
    SCOPE_LAST_OUTING,
    SCOPE_SEASON,
    CatchRecord,
    OutingRecord,
    ResolvedRange,
    TimeScope,
)
from .normalize import parse_timestamp, primary_timestamp

logger = logging.getLogger(__name__)


def start_of_day(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def end_of_day(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.max, tzinfo=tz)


def _local_date(value: date | datetime, tz: tzinfo) -> date:
    if isinstance(value, datetime):
        parsed = parse_timestamp(value, tz)
        return parsed.date() if parsed else value.date()
    return value


def _sort_value(moment: datetime | None) -> float:
    return moment.timestamp() if moment is not None else -math.inf


def _outing_moment(outing: OutingRecord, tz: tzinfo) -> datetime | None:
    if outing.date:
        return parse_timestamp(outing.date, tz)
    return parse_timestamp(outing.created_at, tz)


def latest_outing_id(
    catches: Iterable[CatchRecord],
    outings: Iterable[OutingRecord],
    tz: tzinfo,
) -> str | None:
    candidate: tuple[str, float] | None = None
    for record in catches:
        if not record.outing_id:
            continue
        value = _sort_value(primary_timestamp(record, tz))
        if candidate is None or value > candidate[1]:
            candidate = (record.outing_id, value)
    if candidate is not None:
        return candidate[0]

    fallback: tuple[str, float] | None = None
    for outing in outings:
        value = _sort_value(_outing_moment(outing, tz))
        if fallback is None or value > fallback[1]:
            fallback = (outing.id, value)
    return fallback[0] if fallback is not None else None


def _resolve_last_outing(
    outings: Sequence[OutingRecord],
    catches: Sequence[CatchRecord],
    tz: tzinfo,
) -> ResolvedRange:
    target = latest_outing_id(catches, outings, tz) if outings else None
    if target is None:
        logger.info("last_outing_unavailable", extra={"outings": len(outings), "catches": len(catches)})
        return ResolvedRange(None, None, kind=SCOPE_ALL, last_outing_unavailable=True)

    moments = [
        moment
        for moment in (primary_timestamp(r, tz) for r in catches if r.outing_id == target)
        if moment is not None
    ]
    if moments:
        return ResolvedRange(
            start_of_day(min(moments).date(), tz),
            end_of_day(max(moments).date(), tz),
            kind=SCOPE_LAST_OUTING,
            outing_id=target,
        )

    outing = next((o for o in outings if o.id == target), None)
    outing_day = parse_timestamp(outing.date, tz) if outing is not None else None
    if outing_day is not None:
        return ResolvedRange(
            start_of_day(outing_day.date(), tz),
            end_of_day(outing_day.date(), tz),
            kind=SCOPE_LAST_OUTING,
            outing_id=target,
        )
    logger.debug("last_outing_without_dates", extra={"outing_id": target})
    return ResolvedRange(None, None, kind=SCOPE_LAST_OUTING, outing_id=target)


def resolve_time_scope(
    scope: TimeScope,
    now: datetime,
    outings: Sequence[OutingRecord],
    catches: Sequence[CatchRecord],
    tz: tzinfo,
    recent_days: int = 30,
) -> ResolvedRange:
    current = parse_timestamp(now, tz)
    today = current.date()

    if scope.kind == SCOPE_LAST_30_DAYS:
        start_day = today - timedelta(days=recent_days - 1)
        return ResolvedRange(start_of_day(start_day, tz), end_of_day(today, tz), kind=scope.kind)

    if scope.kind == SCOPE_SEASON:
        return ResolvedRange(start_of_day(date(today.year, 1, 1), tz), end_of_day(today, tz), kind=scope.kind)

    if scope.kind == SCOPE_CUSTOM:
        start_day = _local_date(scope.start, tz) if scope.start is not None else None
        end_day = _local_date(scope.end, tz) if scope.end is not None else start_day
        return ResolvedRange(
            start_of_day(start_day, tz) if start_day is not None else None,
            end_of_day(end_day, tz) if end_day is not None else None,
            kind=scope.kind,
        )

    if scope.kind == SCOPE_LAST_OUTING:
        return _resolve_last_outing(outings, catches, tz)

    return ResolvedRange(None, None, kind=SCOPE_ALL)
