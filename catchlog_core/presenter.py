from __future__ import annotations

from typing import Any

from .normalize import to_number
from .vocabulary import LB_PER_KG, UNIT_DISPLAY

EMPTY = "—"


def _fmt_number(value: float, places: int = 1) -> str:
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_weight_kg(kilograms: float | None, places: int = 1) -> str:
    if kilograms is None:
        return EMPTY
    pounds = kilograms * LB_PER_KG
    return f"{kilograms:.{places}f} kg ({pounds:.{places}f} lb)"


def format_weight_label(weight: Any, unit: str | None, fallback: str = "No weight recorded") -> str:
    value = to_number(weight)
    if value is None:
        return fallback
    if not unit:
        return _fmt_number(value)
    normalized = unit.strip().lower()
    return f"{_fmt_number(value)} {UNIT_DISPLAY.get(normalized, normalized)}"


def format_temperature(value: float | None, places: int = 1) -> str:
    if value is None:
        return EMPTY
    return f"{value:.{places}f}°C"


def format_per_outing(value: float | None, places: int = 1) -> str:
    if value is None:
        return EMPTY
    return f"{value:.{places}f}"


def format_count(count: int, noun: str, plural: str | None = None) -> str:
    word = noun if count == 1 else (plural or f"{noun}s")
    return f"{count} {word}"


def summarize_report(report) -> dict[str, str]:
    top_species = report.species[0] if report.species else None
    top_outing = report.top_outings[0] if report.top_outings else None
    return {
        "total_catches": str(report.total_catches),
        "personal_best": report.personal_best.label if report.personal_best else EMPTY,
        "personal_best_kg": format_weight_kg(report.personal_best.weight_kg if report.personal_best else None),
        "average_weight": format_weight_kg(report.average_weight_kg),
        "total_weight": format_weight_kg(report.total_weight_kg if report.weighed_count else None),
        "weighed_catches": format_count(report.weighed_count, "weighed catch", "weighed catches"),
        "average_air_temp": format_temperature(report.average_air_temp),
        "top_species": top_species.label if top_species else "No species data yet",
        "top_species_seen": f"Seen {format_count(top_species.count, 'time')}" if top_species else "",
        "top_venue": report.top_venue or EMPTY,
        "top_time_of_day": report.top_time_of_day or EMPTY,
        "top_weather": report.weather[0].label if report.weather else EMPTY,
        "top_water_clarity": report.water_clarity[0].label if report.water_clarity else EMPTY,
        "top_wind_direction": report.wind_direction[0].label if report.wind_direction else EMPTY,
        "outings": str(report.outing_count),
        "average_per_outing": format_per_outing(report.average_per_outing),
        "top_outing": (
            f"{top_outing.label} · {format_count(top_outing.count, 'catch', 'catches')}" if top_outing else EMPTY
        ),
    }
