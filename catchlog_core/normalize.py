"""Per-record label and value derivation.

Every function here is pure and tolerant: malformed optional data resolves to
``None`` (or an empty label) instead of raising.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone, tzinfo
from typing import Any

from .models import CatchRecord, Timestamp
from .vocabulary import (
    OTHER_CODE,
    WEIGHT_UNIT_FACTORS,
    get_species_label,
    get_technique_label,
)

UNKNOWN_TIME_OF_DAY = "Unknown"
OTHER_SPECIES_LABEL = "Other species"
OTHER_TECHNIQUE_LABEL = "Other method"

# Date-only strings are read as UTC midnight instants.
_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def humanize(value: str | None) -> str:
    if not value:
        return ""
    words = [w for w in re.split(r"[\s_-]+", value) if w]
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def _clean(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def to_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_timestamp(value: Timestamp | date, tz: tzinfo) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
        if _DATE_ONLY.match(text):
            parsed = parsed.replace(tzinfo=timezone.utc)
    else:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def primary_timestamp(record: CatchRecord, tz: tzinfo) -> datetime | None:
    raw = record.caught_at if record.caught_at is not None else record.logged_at
    return parse_timestamp(raw, tz)


def species_label(record: CatchRecord) -> str:
    code = _clean(record.species)
    custom = _clean(record.conditions.custom.species)
    if code is None:
        return humanize(custom)
    if code.lower() == OTHER_CODE:
        return humanize(custom) if custom else OTHER_SPECIES_LABEL
    return get_species_label(code) or humanize(code)


def technique_label(record: CatchRecord) -> str:
    code = _clean(record.technique)
    custom = _clean(record.conditions.custom.technique)
    if code is None:
        return humanize(custom)
    if code.lower() == OTHER_CODE:
        return humanize(custom) if custom else OTHER_TECHNIQUE_LABEL
    return get_technique_label(code) or humanize(code)


def bait_label(record: CatchRecord) -> str:
    return humanize(_clean(record.bait))


def time_of_day_label(record: CatchRecord, tz: tzinfo) -> str:
    code = _clean(record.time_of_day)
    if code:
        return humanize(code)

    moment = primary_timestamp(record, tz)
    if moment is None:
        return UNKNOWN_TIME_OF_DAY
    hour = moment.hour
    if 5 <= hour < 12:
        return "Morning"
    if 12 <= hour < 17:
        return "Afternoon"
    if 17 <= hour < 21:
        return "Evening"
    return "Night"


def weather_label(record: CatchRecord) -> str:
    return humanize(_clean(record.conditions.weather))


def water_clarity_label(record: CatchRecord) -> str:
    return humanize(_clean(record.conditions.water_clarity))


def wind_direction_label(record: CatchRecord) -> str:
    raw = _clean(record.conditions.wind_direction)
    if raw is None:
        return ""
    # Short values are compass points such as "SW".
    if len(raw) <= 4:
        return raw.upper()
    return humanize(raw)


def air_temperature(record: CatchRecord) -> float | None:
    return to_number(record.conditions.air_temperature)


def weight_value(record: CatchRecord) -> float | None:
    weight = to_number(record.weight)
    if not weight:
        return None
    return weight


def to_kilograms(weight: float, unit: str | None) -> float:
    if not unit:
        return weight
    return weight * WEIGHT_UNIT_FACTORS.get(unit.strip().lower(), 1.0)


def weight_kg(record: CatchRecord) -> float | None:
    weight = weight_value(record)
    if weight is None:
        return None
    return to_kilograms(weight, record.weight_unit)
