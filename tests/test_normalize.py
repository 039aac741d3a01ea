from __future__ import annotations

import math
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from catchlog_core.models import CatchConditions, CatchRecord, CustomFields
from catchlog_core.normalize import (
    air_temperature,
    bait_label,
    humanize,
    parse_timestamp,
    primary_timestamp,
    species_label,
    technique_label,
    time_of_day_label,
    to_kilograms,
    water_clarity_label,
    weather_label,
    weight_kg,
    wind_direction_label,
)

UTC = ZoneInfo("UTC")


def _catch(custom: CustomFields | None = None, conditions: dict | None = None, **overrides) -> CatchRecord:
    fields = {"id": "c1", "angler_id": "u1", "caught_at": "2024-05-04T09:30:00Z"}
    fields.update(overrides)
    cond = dict(conditions or {})
    cond["custom"] = custom or CustomFields()
    return CatchRecord(conditions=CatchConditions(**cond), **fields)


def test_humanize_replaces_separators_and_title_cases():
    assert humanize("float_fishing") == "Float Fishing"
    assert humanize("pop-up BOILIE") == "Pop Up Boilie"
    assert humanize("") == ""
    assert humanize(None) == ""


def test_species_label_uses_vocabulary_then_humanizes_unknown_codes():
    assert species_label(_catch(species="pike")) == "Northern Pike"
    assert species_label(_catch(species="common-carp")) == "Common Carp"
    assert species_label(_catch(species="carp")) == "Carp"
    assert species_label(_catch(species="brown_trout")) == "Brown Trout"


def test_species_label_other_and_custom_precedence():
    assert species_label(_catch(species="other", custom=CustomFields(species="golden tench"))) == "Golden Tench"
    assert species_label(_catch(species="other")) == "Other species"
    assert species_label(_catch(custom=CustomFields(species="sturgeon"))) == "Sturgeon"
    assert species_label(_catch()) == ""


def test_technique_label_follows_same_precedence():
    assert technique_label(_catch(technique="float-fishing")) == "Float Fishing"
    assert technique_label(_catch(technique="drop_shot")) == "Drop Shot"
    assert technique_label(_catch(technique="other")) == "Other method"
    assert technique_label(_catch(technique="other", custom=CustomFields(technique="zig rig"))) == "Zig Rig"
    assert technique_label(_catch(custom=CustomFields(technique="margin fishing"))) == "Margin Fishing"
    assert technique_label(_catch()) == ""


def test_bait_label_humanizes_free_text():
    assert bait_label(_catch(bait="sweetcorn")) == "Sweetcorn"
    assert bait_label(_catch()) == ""


@pytest.mark.parametrize(
    "stamp,expected",
    [
        ("2024-05-04T05:00:00Z", "Morning"),
        ("2024-05-04T11:59:00Z", "Morning"),
        ("2024-05-04T12:00:00Z", "Afternoon"),
        ("2024-05-04T16:59:00Z", "Afternoon"),
        ("2024-05-04T17:00:00Z", "Evening"),
        ("2024-05-04T20:59:00Z", "Evening"),
        ("2024-05-04T21:00:00Z", "Night"),
        ("2024-05-04T04:59:00Z", "Night"),
    ],
)
def test_time_of_day_derived_from_hour(stamp, expected):
    assert time_of_day_label(_catch(caught_at=stamp), UTC) == expected


def test_time_of_day_explicit_code_and_unknown_fallback():
    assert time_of_day_label(_catch(time_of_day="evening", caught_at="2024-05-04T09:00:00Z"), UTC) == "Evening"
    assert time_of_day_label(_catch(caught_at="not a date"), UTC) == "Unknown"
    assert time_of_day_label(_catch(caught_at=None), UTC) == "Unknown"


def test_time_of_day_uses_configured_zone():
    record = _catch(caught_at="2024-07-01T11:30:00Z")
    assert time_of_day_label(record, UTC) == "Morning"
    assert time_of_day_label(record, ZoneInfo("Europe/London")) == "Afternoon"


def test_primary_timestamp_falls_back_to_logged_at():
    record = _catch(caught_at=None, logged_at="2024-03-02T18:15:00+00:00")
    assert primary_timestamp(record, UTC) == datetime(2024, 3, 2, 18, 15, tzinfo=UTC)
    assert time_of_day_label(record, UTC) == "Evening"


def test_parse_timestamp_handles_naive_and_garbage():
    assert parse_timestamp("2024-01-05T08:00:00", UTC) == datetime(2024, 1, 5, 8, tzinfo=UTC)
    assert parse_timestamp("2024-01-05", UTC) == datetime(2024, 1, 5, tzinfo=UTC)
    assert parse_timestamp("yesterday", UTC) is None
    assert parse_timestamp("", UTC) is None
    assert parse_timestamp(12345, UTC) is None


def test_date_only_strings_are_utc_midnight_instants():
    new_york = ZoneInfo("America/New_York")
    parsed = parse_timestamp("2023-01-01", new_york)
    assert parsed == datetime(2023, 1, 1, tzinfo=UTC)
    assert parsed.date().isoformat() == "2022-12-31"
    assert parse_timestamp("2023-01-01T00:00:00", new_york).date().isoformat() == "2023-01-01"


def test_condition_labels():
    record = _catch(conditions={"weather": "light_rain", "water_clarity": "slightly-coloured"})
    assert weather_label(record) == "Light Rain"
    assert water_clarity_label(record) == "Slightly Coloured"
    assert weather_label(_catch()) == ""


def test_wind_direction_compass_abbreviations_upper_cased():
    assert wind_direction_label(_catch(conditions={"wind_direction": "sw"})) == "SW"
    assert wind_direction_label(_catch(conditions={"wind_direction": "NNE"})) == "NNE"
    assert wind_direction_label(_catch(conditions={"wind_direction": "north-west"})) == "North West"
    assert wind_direction_label(_catch()) == ""


def test_air_temperature_coercion():
    assert air_temperature(_catch(conditions={"air_temperature": "12.5"})) == 12.5
    assert air_temperature(_catch(conditions={"air_temperature": 0})) == 0.0
    assert air_temperature(_catch(conditions={"air_temperature": "warm"})) is None
    assert air_temperature(_catch()) is None


def test_to_kilograms_conversions():
    assert to_kilograms(5.0, "kilograms") == 5.0
    assert to_kilograms(5.0, "kg") == 5.0
    assert math.isclose(to_kilograms(11.0, "pounds"), 11.0 * 0.453592)
    assert math.isclose(to_kilograms(11.0, "lb_oz"), 11.0 * 0.453592)
    assert math.isclose(to_kilograms(11.0, "LBS"), 11.0 * 0.453592)
    assert to_kilograms(7.0, "stone") == 7.0
    assert to_kilograms(7.0, None) == 7.0


def test_weight_kg_treats_missing_and_unparseable_as_absent():
    assert weight_kg(_catch(weight=None)) is None
    assert weight_kg(_catch(weight="heavy")) is None
    assert weight_kg(_catch(weight=0)) is None
    assert weight_kg(_catch(weight="4.5", weight_unit="kg")) == 4.5
