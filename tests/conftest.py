from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_catchlog_env(monkeypatch):
    for name in ("CATCHLOG_TIMEZONE", "CATCHLOG_TREND_MONTHS", "CATCHLOG_RECENT_DAYS"):
        monkeypatch.delenv(name, raising=False)
