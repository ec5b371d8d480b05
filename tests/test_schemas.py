from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from corona_tracker.api.schemas import Report, TimelinePoint


def test_decodes_wire_payload(germany_report):
    assert germany_report.latest.confirmed == 100
    loc = germany_report.locations[0]
    assert loc.country == "Germany"
    assert loc.country_code == "DE"
    assert loc.coordinates.latitude == "51"
    assert loc.last_updated == datetime(2020, 4, 5, 11, 51, 23, 435498, tzinfo=timezone.utc)
    key = datetime(2020, 3, 2, tzinfo=timezone.utc)
    assert loc.timelines.confirmed.timeline[key] == 50


def test_wire_round_trip(germany_report):
    assert Report.from_wire(germany_report.to_wire()) == germany_report


def test_to_wire_uses_documented_keys(germany_report):
    wire = germany_report.to_wire()
    assert set(wire) == {"latest", "locations"}
    loc = wire["locations"][0]
    assert set(loc) == {
        "coordinates", "country", "country_code", "id",
        "last_updated", "latest", "province", "timelines",
    }
    assert all(isinstance(k, str) for k in loc["timelines"]["deaths"]["timeline"])


def test_report_without_locations_is_valid(empty_payload):
    report = Report.from_wire(empty_payload)
    assert report.locations == []


def test_timelines_may_be_absent(germany_payload):
    del germany_payload["locations"][0]["timelines"]
    report = Report.from_wire(germany_payload)
    assert report.locations[0].timelines is None
    assert report.locations[0].timeline("recovered") == {}
    assert "timelines" not in report.to_wire()["locations"][0]
    assert Report.from_wire(report.to_wire()) == report


def test_rejects_wrong_shape():
    with pytest.raises(ValidationError):
        Report.from_wire({"latest": {}, "locations": [{"country": "Germany"}]})


def test_series_order(germany_report):
    names = [name for name, _ in germany_report.locations[0].timelines.series()]
    assert names == ["confirmed", "deaths", "recovered"]


def test_point_unix_treats_naive_as_utc():
    aware = TimelinePoint(timestamp=datetime(2020, 3, 1, tzinfo=timezone.utc), count=1)
    naive = TimelinePoint(timestamp=datetime(2020, 3, 1), count=1)
    assert aware.unix == naive.unix == 1583020800.0


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"locations": []},
        {"latest": {"confirmed": 1}, "locations": []},
    ],
)
def test_missing_counts_are_not_zero_filled(payload):
    with pytest.raises(ValidationError):
        Report.from_wire(payload)


def test_metric_without_latest_rejected(germany_payload):
    del germany_payload["locations"][0]["timelines"]["deaths"]["latest"]
    with pytest.raises(ValidationError):
        Report.from_wire(germany_payload)
