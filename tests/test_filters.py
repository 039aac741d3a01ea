from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

from catchlog_core.filters import effective_selection, filter_catches, outing_label, outing_options, venue_options
from catchlog_core.models import CatchRecord, OutingRecord
from catchlog_core.time_scope import end_of_day, start_of_day

UTC = ZoneInfo("UTC")


def _catch(catch_id: str, caught_at: str | None = "2023-06-10T10:00:00Z", **overrides) -> CatchRecord:
    return CatchRecord(id=catch_id, angler_id="u1", caught_at=caught_at, **overrides)


def test_no_filters_keeps_everything_in_input_order():
    catches = [_catch("b"), _catch("a", caught_at=None), _catch("c")]
    assert [r.id for r in filter_catches(catches, UTC)] == ["b", "a", "c"]


def test_venue_filter_is_exact_match():
    catches = [
        _catch("c1", venue="Linear Fisheries"),
        _catch("c2", venue="linear fisheries"),
        _catch("c3"),
    ]
    kept = filter_catches(catches, UTC, venue="Linear Fisheries")
    assert [r.id for r in kept] == ["c1"]


def test_outing_filter():
    catches = [_catch("c1", outing_id="s1"), _catch("c2", outing_id="s2"), _catch("c3")]
    assert [r.id for r in filter_catches(catches, UTC, outing_id="s2")] == ["c2"]


def test_interval_filter_is_inclusive_and_excludes_undated_records():
    start = start_of_day(date(2023, 6, 1), UTC)
    end = end_of_day(date(2023, 6, 30), UTC)
    catches = [
        _catch("first-moment", caught_at="2023-06-01T00:00:00Z"),
        _catch("last-moment", caught_at="2023-06-30T23:59:59Z"),
        _catch("before", caught_at="2023-05-31T23:59:59Z"),
        _catch("after", caught_at="2023-07-01T00:00:00Z"),
        _catch("undated", caught_at=None),
        _catch("garbage", caught_at="soon"),
        _catch("fallback", caught_at=None, logged_at="2023-06-15T08:00:00Z"),
    ]
    kept = filter_catches(catches, UTC, start=start, end=end)
    assert [r.id for r in kept] == ["first-moment", "last-moment", "fallback"]


def test_half_open_interval_still_excludes_undated_records():
    start = start_of_day(date(2023, 6, 1), UTC)
    catches = [_catch("dated"), _catch("undated", caught_at=None)]
    assert [r.id for r in filter_catches(catches, UTC, start=start)] == ["dated"]


def test_empty_result_is_valid():
    assert filter_catches([_catch("c1")], UTC, venue="Nowhere") == []
    assert filter_catches([], UTC) == []


def test_venue_options_sorted_and_distinct():
    catches = [_catch("1", venue="Yateley"), _catch("2", venue="avington"), _catch("3", venue="Yateley"), _catch("4")]
    assert venue_options(catches) == ["avington", "Yateley"]


def test_outing_labels_fall_back_to_date_then_identifier():
    outings = [
        OutingRecord("abcdef123", title="Dawn raid"),
        OutingRecord("bcdefa234", date="2023-04-02"),
        OutingRecord("cdefab345"),
    ]
    assert outing_options(outings, UTC) == [
        ("abcdef123", "Dawn raid"),
        ("bcdefa234", "2023-04-02"),
        ("cdefab345", "Session cdefab"),
    ]
    assert outing_label(OutingRecord("x", created_at="2023-01-09T10:00:00Z"), UTC) == "2023-01-09"


def test_effective_selection_resets_stale_choices():
    catches = [_catch("c1", venue="Yateley", outing_id="s1")]
    outings = [OutingRecord("s1")]
    assert effective_selection(catches, outings, "Yateley", "s1") == ("Yateley", "s1")
    assert effective_selection(catches, outings, "Gone Lake", "missing") == (None, None)
    assert effective_selection(catches, outings, None, None) == (None, None)
