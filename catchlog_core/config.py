from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE = "UTC"


@dataclass(frozen=True)
class InsightsConfig:
    timezone: str = DEFAULT_TIMEZONE
    technique_limit: int = 6
    bait_limit: int = 6
    venue_limit: int = 5
    trend_months: int = 12
    top_outings: int = 3
    recent_days: int = 30

    @property
    def tz(self) -> ZoneInfo:
        return resolve_zone(self.timezone)


def resolve_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Invalid timezone '{name}'. Use IANA timezone identifiers.")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_config() -> InsightsConfig:
    timezone = os.getenv("CATCHLOG_TIMEZONE", DEFAULT_TIMEZONE).strip() or DEFAULT_TIMEZONE
    resolve_zone(timezone)
    return InsightsConfig(
        timezone=timezone,
        trend_months=_env_int("CATCHLOG_TREND_MONTHS", 12),
        recent_days=_env_int("CATCHLOG_RECENT_DAYS", 30),
    )
