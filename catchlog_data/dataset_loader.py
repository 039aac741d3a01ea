from __future__ import annotations

import json
import logging
from datetime import tzinfo
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from catchlog_core.models import CatchConditions, CatchRecord, CustomFields, OutingRecord
from catchlog_core.normalize import (
    air_temperature,
    bait_label,
    primary_timestamp,
    species_label,
    technique_label,
    time_of_day_label,
    water_clarity_label,
    weather_label,
    weight_kg,
    wind_direction_label,
)

logger = logging.getLogger(__name__)

CATCH_COLUMNS = [
    "id",
    "outing_id",
    "timestamp",
    "venue",
    "species",
    "technique",
    "bait",
    "time_of_day",
    "weather",
    "water_clarity",
    "wind_direction",
    "air_temp",
    "weight_kg",
]


def load_dataset(path: str | Path) -> dict[str, Any]:
    dataset_path = Path(path)
    try:
        with dataset_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Catch dataset file not found: {dataset_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in catch dataset file: {e}")

    if not isinstance(data, dict):
        raise TypeError(f"Catch dataset must be a JSON object, got {type(data).__name__}")
    if "catches" not in data:
        raise KeyError("Catch dataset JSON must contain 'catches' key")
    for key in ("catches", "sessions"):
        if not isinstance(data.get(key, []), list):
            raise TypeError(f"'{key}' must be a list, got {type(data[key]).__name__}")
    return data


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def catch_from_row(row: dict[str, Any]) -> CatchRecord:
    conditions = _mapping(row.get("conditions"))
    custom = _mapping(conditions.get("customFields"))
    return CatchRecord(
        id=str(row["id"]),
        angler_id=str(row.get("user_id") or ""),
        outing_id=_text(row.get("session_id")),
        caught_at=row.get("caught_at"),
        logged_at=row.get("created_at"),
        venue=_text(row.get("location")),
        species=_text(row.get("species")),
        technique=_text(row.get("method")),
        bait=_text(row.get("bait_used")),
        weight=row.get("weight"),
        weight_unit=_text(row.get("weight_unit")),
        time_of_day=_text(row.get("time_of_day")),
        conditions=CatchConditions(
            weather=_text(conditions.get("weather")),
            air_temperature=conditions.get("airTemp"),
            water_clarity=_text(conditions.get("waterClarity")),
            wind_direction=_text(conditions.get("windDirection")),
            custom=CustomFields(
                species=_text(custom.get("species")),
                technique=_text(custom.get("method")),
                water_type=_text(custom.get("waterType")),
            ),
        ),
    )


def outing_from_row(row: dict[str, Any]) -> OutingRecord:
    return OutingRecord(
        id=str(row["id"]),
        title=_text(row.get("title")),
        venue=_text(row.get("venue")),
        date=row.get("date"),
        created_at=row.get("created_at"),
    )


def _convert_rows(rows: Iterable[Any], converter, kind: str) -> list:
    records = []
    skipped: list[tuple[int, str]] = []
    for idx, row in enumerate(rows):
        if not isinstance(row, dict) or row.get("id") in (None, ""):
            skipped.append((idx, "missing id"))
            continue
        records.append(converter(row))
    if skipped:
        logger.warning("dataset_rows_skipped", extra={"kind": kind, "count": len(skipped), "rows": skipped})
    return records


def load_records(path: str | Path) -> tuple[list[CatchRecord], list[OutingRecord]]:
    data = load_dataset(path)
    catches = _convert_rows(data.get("catches", []), catch_from_row, "catch")
    outings = _convert_rows(data.get("sessions", []), outing_from_row, "session")
    return catches, outings


def catches_frame(catches: Iterable[CatchRecord], tz: tzinfo) -> pd.DataFrame:
    rows: list[dict[str, Any]] = []
    for record in catches:
        moment = primary_timestamp(record, tz)
        rows.append(
            {
                "id": record.id,
                "outing_id": record.outing_id,
                "timestamp": moment.isoformat() if moment is not None else None,
                "venue": record.venue,
                "species": species_label(record) or None,
                "technique": technique_label(record) or None,
                "bait": bait_label(record) or None,
                "time_of_day": time_of_day_label(record, tz),
                "weather": weather_label(record) or None,
                "water_clarity": water_clarity_label(record) or None,
                "wind_direction": wind_direction_label(record) or None,
                "air_temp": air_temperature(record),
                "weight_kg": weight_kg(record),
            }
        )
    return pd.DataFrame(rows, columns=CATCH_COLUMNS)
