from .aggregate import aggregate_catches, empty_report, rank_counts
from .config import InsightsConfig, load_config
from .filters import effective_selection, filter_catches, outing_options, venue_options
from .insights import build_insights
from .models import (
    AggregatedReport,
    CatchConditions,
    CatchRecord,
    CustomFields,
    EffectiveFilters,
    FacetTally,
    InsightsResult,
    OutingRecord,
    OutingSummary,
    PersonalBest,
    ResolvedRange,
    TimeScope,
    TrendPoint,
)
from .normalize import humanize, to_kilograms
from .presenter import format_weight_kg, format_weight_label, summarize_report
from .time_scope import latest_outing_id, resolve_time_scope

__all__ = [
    "build_insights",
    "aggregate_catches",
    "empty_report",
    "rank_counts",
    "filter_catches",
    "effective_selection",
    "venue_options",
    "outing_options",
    "resolve_time_scope",
    "latest_outing_id",
    "humanize",
    "to_kilograms",
    "format_weight_kg",
    "format_weight_label",
    "summarize_report",
    "InsightsConfig",
    "load_config",
    "AggregatedReport",
    "CatchConditions",
    "CatchRecord",
    "CustomFields",
    "EffectiveFilters",
    "FacetTally",
    "InsightsResult",
    "OutingRecord",
    "OutingSummary",
    "PersonalBest",
    "ResolvedRange",
    "TimeScope",
    "TrendPoint",
]
