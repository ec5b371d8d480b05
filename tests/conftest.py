from __future__ import annotations

import json
from typing import Any, List, Optional

import pytest
import requests
from requests.adapters import BaseAdapter

from corona_tracker.api.schemas import Report


def _metric(latest: int, timeline: dict) -> dict:
    return {"latest": latest, "timeline": timeline}


@pytest.fixture
def germany_payload() -> dict:
    """Wire payload for one German location; timelines deliberately unordered."""
    return {
        "latest": {"confirmed": 100, "deaths": 3, "recovered": 40},
        "locations": [
            {
                "coordinates": {"latitude": "51", "longitude": "9"},
                "country": "Germany",
                "country_code": "DE",
                "id": 120,
                "last_updated": "2020-04-05T11:51:23.435498Z",
                "latest": {"confirmed": 100, "deaths": 3, "recovered": 40},
                "province": "",
                "timelines": {
                    "confirmed": _metric(100, {
                        "2020-03-02T00:00:00Z": 50,
                        "2020-03-01T00:00:00Z": 10,
                        "2020-03-03T00:00:00Z": 100,
                    }),
                    "deaths": _metric(3, {
                        "2020-03-03T00:00:00Z": 3,
                        "2020-03-01T00:00:00Z": 0,
                        "2020-03-02T00:00:00Z": 1,
                    }),
                    "recovered": _metric(40, {
                        "2020-03-02T00:00:00Z": 20,
                        "2020-03-03T00:00:00Z": 40,
                        "2020-03-01T00:00:00Z": 5,
                    }),
                },
            }
        ],
    }


@pytest.fixture
def germany_report(germany_payload) -> Report:
    return Report.from_wire(germany_payload)


class FakeAdapter(BaseAdapter):
    """Transport adapter that answers every request with a canned response."""

    def __init__(self, status: int = 200, body: Any = None, raw: Optional[bytes] = None,
                 exc: Optional[Exception] = None):
        super().__init__()
        self.status = status
        self.body = body
        self.raw = raw
        self.exc = exc
        self.requests: List[requests.PreparedRequest] = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        resp = requests.Response()
        resp.status_code = self.status
        resp._content = self.raw if self.raw is not None else json.dumps(self.body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass


@pytest.fixture
def make_session():
    """Build a requests.Session whose https traffic goes to a FakeAdapter."""

    def _make(**kwargs):
        adapter = FakeAdapter(**kwargs)
        session = requests.Session()
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session, adapter

    return _make


@pytest.fixture
def empty_payload() -> dict:
    """Valid payload with global totals but no locations."""
    return {"latest": {"confirmed": 0, "deaths": 0, "recovered": 0}, "locations": []}
