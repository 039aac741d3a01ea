from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from pathlib import Path

import pandas as pd

from catchlog_core.models import AggregatedReport, FacetTally, InsightsResult

FACET_FIELDS = (
    "species",
    "techniques",
    "baits",
    "time_of_day",
    "weather",
    "water_clarity",
    "wind_direction",
    "venues",
)


def _tally_frame(tallies: list[FacetTally]) -> pd.DataFrame:
    return pd.DataFrame([{"label": t.label, "count": t.count} for t in tallies], columns=["label", "count"])


def report_frames(report: AggregatedReport) -> dict[str, pd.DataFrame]:
    frames = {facet: _tally_frame(getattr(report, facet)) for facet in FACET_FIELDS}
    frames["monthly_trend"] = pd.DataFrame(
        [{"month": p.key, "label": p.label, "count": p.count} for p in report.monthly_trend],
        columns=["month", "label", "count"],
    )
    frames["top_outings"] = pd.DataFrame(
        [
            {"outing_id": s.outing_id, "label": s.label, "date": s.date_label, "count": s.count}
            for s in report.top_outings
        ],
        columns=["outing_id", "label", "date", "count"],
    )
    return frames


def build_export_frame(result: InsightsResult) -> pd.DataFrame:
    filter_meta = result.filters.to_dict()
    frames: list[pd.DataFrame] = []
    for source, df in report_frames(result.report).items():
        if df.empty:
            continue
        enriched = df.copy()
        enriched.insert(0, "source", source)
        frames.append(enriched)
    if not frames:
        return pd.DataFrame([{"source": "empty", "total_catches": 0}])
    export_df = pd.concat(frames, ignore_index=True, sort=False)
    export_df["scope"] = filter_meta["scope"]
    return export_df


def build_export_csv(result: InsightsResult) -> str:
    export_df = build_export_frame(result)
    filters = result.filters.to_dict()
    report = result.report
    timestamp = datetime.now(timezone.utc).isoformat()
    date_txt = (
        "All"
        if filters["start"] is None and filters["end"] is None
        else f"{filters['start'] or '…'} to {filters['end'] or '…'}"
    )
    header_lines = [
        f"# Export generated_at_utc: {timestamp}",
        f"# Filter scope: {filters['scope']}",
        f"# Filter date_range: {date_txt}",
        f"# Filter venue: {filters['venue'] or 'All venues'}",
        f"# Filter session: {filters['outing_id'] or 'All sessions'}",
        f"# Last session unavailable: {'yes' if filters['last_outing_unavailable'] else 'no'}",
        f"# Total catches: {report.total_catches}",
    ]
    buffer = StringIO()
    export_df.to_csv(buffer, index=False)
    return "\n".join(header_lines) + "\n" + buffer.getvalue()


def export_report_csv(path: str | Path, result: InsightsResult) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(build_export_csv(result), encoding="utf-8")
    return out_path
