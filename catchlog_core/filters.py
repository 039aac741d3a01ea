from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Iterable, Sequence

from .models import CatchRecord, OutingRecord
from .normalize import parse_timestamp, primary_timestamp

logger = logging.getLogger(__name__)


def filter_catches(
    catches: Iterable[CatchRecord],
    tz: tzinfo,
    start: datetime | None = None,
    end: datetime | None = None,
    outing_id: str | None = None,
    venue: str | None = None,
) -> list[CatchRecord]:
    kept: list[CatchRecord] = []
    for record in catches:
        if outing_id and record.outing_id != outing_id:
            continue
        if venue is not None and record.venue != venue:
            continue
        if start is not None or end is not None:
            moment = primary_timestamp(record, tz)
            if moment is None:
                continue
            if start is not None and moment < start:
                continue
            if end is not None and moment > end:
                continue
        kept.append(record)
    return kept


def venue_options(catches: Iterable[CatchRecord]) -> list[str]:
    return sorted({r.venue for r in catches if r.venue}, key=str.casefold)


def outing_label(outing: OutingRecord, tz: tzinfo) -> str:
    if outing.title:
        return outing.title
    moment = parse_timestamp(outing.date, tz) if outing.date else parse_timestamp(outing.created_at, tz)
    if moment is not None:
        return moment.date().isoformat()
    return f"Session {outing.id[:6]}"


def outing_options(outings: Iterable[OutingRecord], tz: tzinfo) -> list[tuple[str, str]]:
    return [(o.id, outing_label(o, tz)) for o in outings]


def effective_selection(
    catches: Sequence[CatchRecord],
    outings: Sequence[OutingRecord],
    venue: str | None,
    outing_id: str | None,
) -> tuple[str | None, str | None]:
    effective_venue = venue
    if venue is not None and venue not in {r.venue for r in catches if r.venue}:
        logger.debug("venue_selection_reset", extra={"venue": venue})
        effective_venue = None

    effective_outing = outing_id
    if outing_id and not any(o.id == outing_id for o in outings):
        logger.debug("outing_selection_reset", extra={"outing_id": outing_id})
        effective_outing = None
    return effective_venue, effective_outing or None
