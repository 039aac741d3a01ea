from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

SCOPE_ALL = "all"
SCOPE_LAST_30_DAYS = "last-30"
SCOPE_SEASON = "season"
SCOPE_LAST_OUTING = "last-session"
SCOPE_CUSTOM = "custom"

TIME_SCOPES = (SCOPE_ALL, SCOPE_LAST_30_DAYS, SCOPE_SEASON, SCOPE_LAST_OUTING, SCOPE_CUSTOM)

Timestamp = str | datetime | None


@dataclass(frozen=True)
class CustomFields:
    species: str | None = None
    technique: str | None = None
    water_type: str | None = None


@dataclass(frozen=True)
class CatchConditions:
    weather: str | None = None
    air_temperature: float | str | None = None
    water_clarity: str | None = None
    wind_direction: str | None = None
    custom: CustomFields = field(default_factory=CustomFields)


@dataclass(frozen=True)
class CatchRecord:
    id: str
    angler_id: str = ""
    outing_id: str | None = None
    caught_at: Timestamp = None
    logged_at: Timestamp = None
    venue: str | None = None
    species: str | None = None
    technique: str | None = None
    bait: str | None = None
    weight: float | str | None = None
    weight_unit: str | None = None
    time_of_day: str | None = None
    conditions: CatchConditions = field(default_factory=CatchConditions)


@dataclass(frozen=True)
class OutingRecord:
    id: str
    title: str | None = None
    venue: str | None = None
    date: Timestamp = None
    created_at: Timestamp = None


@dataclass(frozen=True)
class TimeScope:
    kind: str = SCOPE_ALL
    start: date | datetime | None = None
    end: date | datetime | None = None

    def __post_init__(self) -> None:
        if self.kind not in TIME_SCOPES:
            raise ValueError(f"Unknown time scope '{self.kind}'. Expected one of: {', '.join(TIME_SCOPES)}")
        if self.kind != SCOPE_CUSTOM and (self.start is not None or self.end is not None):
            raise ValueError("Only custom time scopes take start/end bounds")

    @classmethod
    def all(cls) -> TimeScope:
        return cls(SCOPE_ALL)

    @classmethod
    def last_30_days(cls) -> TimeScope:
        return cls(SCOPE_LAST_30_DAYS)

    @classmethod
    def season_to_date(cls) -> TimeScope:
        return cls(SCOPE_SEASON)

    @classmethod
    def last_outing(cls) -> TimeScope:
        return cls(SCOPE_LAST_OUTING)

    @classmethod
    def custom(cls, start: date | datetime | None = None, end: date | datetime | None = None) -> TimeScope:
        return cls(SCOPE_CUSTOM, start, end)


@dataclass(frozen=True)
class ResolvedRange:
    start: datetime | None
    end: datetime | None
    kind: str = SCOPE_ALL
    outing_id: str | None = None
    last_outing_unavailable: bool = False

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None


@dataclass(frozen=True)
class FacetTally:
    label: str
    count: int


@dataclass(frozen=True)
class PersonalBest:
    record: CatchRecord
    weight_kg: float
    label: str


@dataclass(frozen=True)
class TrendPoint:
    key: str
    label: str
    count: int


@dataclass(frozen=True)
class OutingSummary:
    outing_id: str
    count: int
    label: str
    date_label: str | None = None


@dataclass
class AggregatedReport:
    total_catches: int = 0
    personal_best: PersonalBest | None = None
    top_venue: str | None = None
    top_time_of_day: str | None = None
    species: list[FacetTally] = field(default_factory=list)
    techniques: list[FacetTally] = field(default_factory=list)
    baits: list[FacetTally] = field(default_factory=list)
    time_of_day: list[FacetTally] = field(default_factory=list)
    weather: list[FacetTally] = field(default_factory=list)
    water_clarity: list[FacetTally] = field(default_factory=list)
    wind_direction: list[FacetTally] = field(default_factory=list)
    venues: list[FacetTally] = field(default_factory=list)
    average_weight_kg: float | None = None
    total_weight_kg: float = 0.0
    weighed_count: int = 0
    average_air_temp: float | None = None
    monthly_trend: list[TrendPoint] = field(default_factory=list)
    outing_counts: dict[str, int] = field(default_factory=dict)
    outing_count: int = 0
    average_per_outing: float | None = None
    top_outings: list[OutingSummary] = field(default_factory=list)


@dataclass(frozen=True)
class EffectiveFilters:
    start: datetime | None
    end: datetime | None
    scope: str
    outing_id: str | None
    venue: str | None
    last_outing_unavailable: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "scope": self.scope,
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
            "outing_id": self.outing_id,
            "venue": self.venue,
            "last_outing_unavailable": self.last_outing_unavailable,
        }


@dataclass(frozen=True)
class InsightsResult:
    report: AggregatedReport
    filters: EffectiveFilters
