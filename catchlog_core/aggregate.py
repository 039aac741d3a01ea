from __future__ import annotations

from datetime import date, tzinfo
from typing import Iterable, Sequence

from .config import InsightsConfig
from .models import (
    AggregatedReport,
    CatchRecord,
    FacetTally,
    OutingRecord,
    OutingSummary,
    PersonalBest,
    TrendPoint,
)
from .normalize import (
    air_temperature,
    bait_label,
    parse_timestamp,
    primary_timestamp,
    species_label,
    technique_label,
    time_of_day_label,
    water_clarity_label,
    weather_label,
    weight_kg,
    wind_direction_label,
)
from .presenter import format_weight_label

FACETS = ("species", "techniques", "baits", "time_of_day", "weather", "water_clarity", "wind_direction", "venues")


def _bump(counts: dict[str, int], label: str) -> None:
    if label:
        counts[label] = counts.get(label, 0) + 1


def rank_counts(counts: dict[str, int], limit: int | None = None) -> list[FacetTally]:
    """Order tallies by count, highest first; equal counts keep first-encounter order."""
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return [FacetTally(label, count) for label, count in ranked]


def _month_label(key: str) -> str:
    year, month = key.split("-")
    return date(int(year), int(month), 1).strftime("%b %Y")


def build_trend(month_counts: dict[str, int], months: int = 12) -> list[TrendPoint]:
    keys = sorted(month_counts)[-months:] if months > 0 else []
    return [TrendPoint(key, _month_label(key), month_counts[key]) for key in keys]


def summarize_outings(
    outing_counts: dict[str, int],
    outings: Iterable[OutingRecord],
    tz: tzinfo,
    limit: int = 3,
) -> list[OutingSummary]:
    by_id = {o.id: o for o in outings}
    summaries: list[OutingSummary] = []
    for outing_id, count in sorted(outing_counts.items(), key=lambda item: item[1], reverse=True)[:limit]:
        outing = by_id.get(outing_id)
        label = outing.title if outing is not None and outing.title else f"Session {outing_id[:6]}"
        date_label = None
        if outing is not None:
            moment = parse_timestamp(outing.date, tz) if outing.date else parse_timestamp(outing.created_at, tz)
            date_label = moment.date().isoformat() if moment is not None else None
        summaries.append(OutingSummary(outing_id, count, label, date_label))
    return summaries


def empty_report() -> AggregatedReport:
    return AggregatedReport()


def aggregate_catches(
    catches: Sequence[CatchRecord],
    outings: Sequence[OutingRecord],
    config: InsightsConfig | None = None,
) -> AggregatedReport:
    config = config or InsightsConfig()
    if not catches:
        return empty_report()

    tz = config.tz
    tallies: dict[str, dict[str, int]] = {facet: {} for facet in FACETS}
    month_counts: dict[str, int] = {}
    outing_counts: dict[str, int] = {}

    best: CatchRecord | None = None
    best_kg = 0.0
    weight_sum = 0.0
    weighed = 0
    temp_sum = 0.0
    temp_count = 0

    for record in catches:
        _bump(tallies["species"], species_label(record))
        _bump(tallies["techniques"], technique_label(record))
        _bump(tallies["baits"], bait_label(record))
        _bump(tallies["time_of_day"], time_of_day_label(record, tz))
        _bump(tallies["weather"], weather_label(record))
        _bump(tallies["water_clarity"], water_clarity_label(record))
        _bump(tallies["wind_direction"], wind_direction_label(record))
        _bump(tallies["venues"], record.venue or "")

        kg = weight_kg(record)
        if kg is not None:
            weight_sum += kg
            weighed += 1
            if best is None or kg > best_kg:
                best, best_kg = record, kg

        temp = air_temperature(record)
        if temp is not None:
            temp_sum += temp
            temp_count += 1

        moment = primary_timestamp(record, tz)
        if moment is not None:
            _bump(month_counts, f"{moment.year:04d}-{moment.month:02d}")

        if record.outing_id:
            _bump(outing_counts, record.outing_id)

    venues = rank_counts(tallies["venues"])
    time_of_day = rank_counts(tallies["time_of_day"])
    personal_best = None
    if best is not None:
        personal_best = PersonalBest(best, best_kg, format_weight_label(best.weight, best.weight_unit))

    return AggregatedReport(
        total_catches=len(catches),
        personal_best=personal_best,
        top_venue=venues[0].label if venues else None,
        top_time_of_day=time_of_day[0].label if time_of_day else None,
        species=rank_counts(tallies["species"]),
        techniques=rank_counts(tallies["techniques"], config.technique_limit),
        baits=rank_counts(tallies["baits"], config.bait_limit),
        time_of_day=time_of_day,
        weather=rank_counts(tallies["weather"]),
        water_clarity=rank_counts(tallies["water_clarity"]),
        wind_direction=rank_counts(tallies["wind_direction"]),
        venues=venues[: config.venue_limit],
        average_weight_kg=weight_sum / weighed if weighed else None,
        total_weight_kg=weight_sum,
        weighed_count=weighed,
        average_air_temp=temp_sum / temp_count if temp_count else None,
        monthly_trend=build_trend(month_counts, config.trend_months),
        outing_counts=outing_counts,
        outing_count=len(outing_counts),
        average_per_outing=len(catches) / len(outing_counts) if outing_counts else None,
        top_outings=summarize_outings(outing_counts, outings, tz, config.top_outings),
    )
