"""Pytest fixtures for policeuk tests."""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from policeuk.config import Settings

BASE_URL = "https://data.police.uk/api"

MALFORMED_JSON = b'{"hello":"world"'
UNEXPECTED_JSON = {"hello": "world"}


class FakeAPI:
    """Records requests and replays a canned response through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content = b"[]"
        self.error: Exception | None = None

    def respond(self, body: Any, status_code: int = 200) -> None:
        """Reply with ``body``; bytes and str are sent as-is, anything else as JSON."""
        if isinstance(body, str):
            body = body.encode()
        elif not isinstance(body, bytes):
            body = json.dumps(body).encode()
        self.content = body
        self.status_code = status_code

    def fail(self, message: str = "connection refused") -> None:
        """Make every request fail at the transport level."""
        self.error = httpx.ConnectError(message)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()


@pytest_asyncio.fixture
async def http_client(fake_api: FakeAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """AsyncClient whose transport is the fake API."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler)) as client:
        yield client


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults."""
    return Settings(base_url=BASE_URL, timeout=5.0)


@pytest.fixture
def sample_force() -> dict[str, Any]:
    """Force record as returned by /forces/{id}."""
    return {
        "description": "<p>Serving <b>Avon</b> and Somerset</p>",
        "url": "http://www.avonandsomerset.police.uk",
        "engagement_methods": [
            {
                "url": "https://www.facebook.com/avonandsomersetpolice/",
                "type": "facebook",
                "description": "<p>Like us on Facebook</p>",
                "title": "facebook",
            },
            {
                "url": "http://twitter.com/aspolice",
                "type": "twitter",
                "description": None,
                "title": "twitter",
            },
        ],
        "telephone": "101",
        "id": "avon-and-somerset",
        "name": "Avon and Somerset Constabulary",
    }


@pytest.fixture
def sample_no_location_crimes() -> list[dict[str, Any]]:
    """Crime records from /crimes-no-location."""
    return [
        {
            "category": "burglary",
            "persistent_id": "4ea1d4da29bd8b9e362af35cbabb6157149f62b65d37486dffd185a18e1aaadd",
            "location_subtype": "",
            "id": 56862854,
            "location": None,
            "context": "",
            "month": "2017-03",
            "location_type": None,
            "outcome_status": {
                "category": "Investigation complete; no suspect identified",
                "date": "2017-03",
            },
        },
        {
            "category": "criminal-damage-arson",
            "persistent_id": "979f2338f25f62196268b52c8405ca8ff431fd2fb02ab11b2192c479816547e5",
            "location_subtype": "",
            "id": 56866806,
            "location": None,
            "context": "",
            "month": "2017-03",
            "location_type": None,
            "outcome_status": {"category": "Under investigation", "date": "2017-03"},
        },
    ]


@pytest.fixture
def sample_located_crimes() -> list[dict[str, Any]]:
    """Crime records from /crimes-at-location."""
    return [
        {
            "category": "burglary",
            "persistent_id": "4ea1d4da29bd8b9e362af35cbabb6157149f62b65d37486dffd185a18e1aaadd",
            "location_subtype": "",
            "id": 56862854,
            "location": {
                "latitude": "52.6333",
                "street": {"id": 884327, "name": "On or near The Green"},
                "longitude": "-1.13333",
            },
            "context": "",
            "month": "2017-03",
            "location_type": "Force",
            "outcome_status": {
                "category": "Investigation complete; no suspect identified",
                "date": "2017-03",
            },
        },
        {
            "category": "criminal-damage-arson",
            "persistent_id": "979f2338f25f62196268b52c8405ca8ff431fd2fb02ab11b2192c479816547e5",
            "location_subtype": "",
            "id": 56866806,
            "location": {
                "latitude": "52.6333",
                "street": {"id": 884327, "name": "On or near The Green"},
                "longitude": "-1.13333",
            },
            "context": "",
            "month": "2017-03",
            "location_type": "Force",
            "outcome_status": None,
        },
    ]


@pytest.fixture
def sample_street_crime() -> dict[str, Any]:
    """Street-level crime record from /crimes-street/all-crime."""
    return {
        "category": "anti-social-behaviour",
        "location_type": "Force",
        "location": {
            "latitude": "52.640961",
            "street": {"id": 884343, "name": "On or near Wharf Street North"},
            "longitude": "-1.126371",
        },
        "context": "",
        "outcome_status": None,
        "persistent_id": "",
        "id": 54164419,
        "location_subtype": "",
        "month": "2017-01",
    }


@pytest.fixture
def sample_outcome() -> dict[str, Any]:
    """Response body of /outcomes-for-crime/{id}."""
    return {
        "crime": {
            "category": "violent-crime",
            "persistent_id": "590d68b69228a9ff95b675bb4af591b38de561aa03129dc09a03ef34f537588c",
            "location_subtype": "",
            "location_type": "Force",
            "location": {
                "latitude": "52.639814",
                "street": {"id": 883235, "name": "On or near Sanvey Gate"},
                "longitude": "-1.139118",
            },
            "context": "",
            "month": "2017-05",
            "id": 56880258,
        },
        "outcomes": [
            {
                "category": {"code": "under-investigation", "name": "Under investigation"},
                "date": "2017-05",
                "person_id": None,
            },
            {
                "category": {
                    "code": "formal-action-not-in-public-interest",
                    "name": "Formal action is not in the public interest",
                },
                "date": "2017-06",
                "person_id": 1234,
            },
        ],
    }


@pytest.fixture
def sample_neighbourhood() -> dict[str, Any]:
    """Response body of /{force}/{neighbourhood}."""
    return {
        "url_force": "http://www.leics.police.uk/local-policing/city-centre",
        "contact_details": {
            "twitter": "http://www.twitter.com/centralleicsNPA",
            "facebook": "http://www.facebook.com/leicspolice",
            "telephone": "101",
            "email": "centralleicester.npa@leicestershire.pnn.police.uk",
        },
        "name": "City Centre",
        "links": [
            {"url": "http://www.leicester.gov.uk/", "description": None, "title": "Leicester City Council"}
        ],
        "centre": {"latitude": "52.6389", "longitude": "-1.13619"},
        "locations": [
            {
                "name": "Mansfield House",
                "longitude": None,
                "postcode": "LE1 3GG",
                "address": "74 Belgrave Gate\n, Leicester",
                "latitude": None,
                "type": "station",
                "description": None,
            }
        ],
        "description": "<p>The Castle neighbourhood covers all of the City Centre.</p>",
        "id": "NC04",
        "population": "0",
    }


@pytest.fixture
def sample_stops() -> list[dict[str, Any]]:
    """Stop and search records from /stops-no-location."""
    return [
        {
            "age_range": "over 34",
            "self_defined_ethnicity": "White - White British (W1)",
            "outcome_linked_to_object_of_search": None,
            "datetime": "2017-01-24T01:50:00+00:00",
            "removal_of_more_than_outer_clothing": None,
            "operation": None,
            "officer_defined_ethnicity": "White",
            "object_of_search": "Controlled drugs",
            "involved_person": True,
            "gender": "Male",
            "legislation": "Misuse of Drugs Act 1971 (section 23)",
            "location": None,
            "outcome": False,
            "type": "Person search",
            "operation_name": None,
        },
        {
            "age_range": "25-34",
            "self_defined_ethnicity": "White - White British (W1)",
            "outcome_linked_to_object_of_search": "true",
            "datetime": "2017-01-22T19:40:00+00:00",
            "removal_of_more_than_outer_clothing": False,
            "operation": None,
            "officer_defined_ethnicity": "White",
            "object_of_search": "Controlled drugs",
            "involved_person": True,
            "gender": "Male",
            "legislation": "Misuse of Drugs Act 1971 (section 23)",
            "location": None,
            "outcome": True,
            "type": "Person and Vehicle search",
            "operation_name": None,
        },
    ]
