from __future__ import annotations

import sys
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from catchlog_core.normalize import parse_timestamp, to_number
from catchlog_core.vocabulary import is_known_unit
from catchlog_data.dataset_loader import load_dataset

REQUIRED_CATCH_FIELDS = {"id", "user_id", "created_at"}
REQUIRED_SESSION_FIELDS = {"id", "created_at"}

_UTC = ZoneInfo("UTC")


def _missing_fields(row: dict[str, Any], required: set[str]) -> set[str]:
    return {field for field in required if field not in row}


def validate_dataset(path: str | Path) -> list[str]:
    errors: list[str] = []
    dataset = load_dataset(path)
    catches = dataset.get("catches", [])
    sessions = dataset.get("sessions", [])
    if not catches:
        return ["Dataset has no catches."]

    session_ids: set[str] = set()
    for idx, session in enumerate(sessions):
        missing = _missing_fields(session, REQUIRED_SESSION_FIELDS)
        if missing:
            errors.append(f"Session {idx} missing fields: {sorted(missing)}")
            continue
        session_ids.add(str(session["id"]))
        if session.get("date") and parse_timestamp(session["date"], _UTC) is None:
            errors.append(f"Session '{session['id']}' has unparseable date {session['date']!r}")

    for idx, row in enumerate(catches):
        missing = _missing_fields(row, REQUIRED_CATCH_FIELDS)
        if missing:
            errors.append(f"Catch {idx} missing fields: {sorted(missing)}")
            continue
        catch_id = row["id"]
        session_id = row.get("session_id")
        if session_id and str(session_id) not in session_ids:
            errors.append(f"Catch '{catch_id}' references unknown session_id {session_id}")
        timestamp = row.get("caught_at") if row.get("caught_at") is not None else row.get("created_at")
        if parse_timestamp(timestamp, _UTC) is None:
            errors.append(f"Catch '{catch_id}' has no parseable caught_at/created_at")
        unit = row.get("weight_unit")
        if unit and not is_known_unit(str(unit)):
            errors.append(f"Catch '{catch_id}' uses unknown weight_unit {unit!r}; treated as kilograms")
        weight = row.get("weight")
        if weight not in (None, "") and to_number(weight) is None:
            errors.append(f"Catch '{catch_id}' has non-numeric weight {weight!r}")

    return errors


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python -m catchlog_data.validator DATASET.json")
        raise SystemExit(2)
    problems = validate_dataset(path=sys.argv[1])
    if problems:
        print("Catch dataset validation failed:")
        for p in problems:
            print(f"- {p}")
        raise SystemExit(1)
    print("Catch dataset validation passed.")
