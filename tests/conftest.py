"""Pytest configuration and fixtures for Geocodio client tests."""

import json
from typing import Any, Mapping

import pytest

from geocodio_client.client import GeocodioClient
from geocodio_client.config import GeocodioSettings
from geocodio_client.transport import RawResponse, Transport

SAMPLE_GEOCODE_RESPONSE = {
    "input": {
        "address_components": {
            "number": "1109",
            "predirectional": "N",
            "street": "Highland",
            "suffix": "St",
            "formatted_street": "N Highland St",
            "city": "Arlington",
            "state": "VA",
            "zip": "22201",
            "country": "US",
        },
        "formatted_address": "1109 N Highland St, Arlington, VA 22201",
    },
    "results": [
        {
            "address_components": {
                "number": "1109",
                "predirectional": "N",
                "street": "Highland",
                "suffix": "St",
                "formatted_street": "N Highland St",
                "city": "Arlington",
                "county": "Arlington County",
                "state": "VA",
                "zip": "22201",
                "country": "US",
            },
            "formatted_address": "1109 N Highland St, Arlington, VA 22201",
            "location": {"lat": 38.886665, "lng": -77.094733},
            "accuracy": 1,
            "accuracy_type": "rooftop",
            "source": "Virginia GIS Clearinghouse",
        }
    ],
}


class FakeTransport(Transport):
    """Transport double that records requests and replays canned responses."""

    def __init__(self, responses: list[RawResponse] | None = None):
        self.responses = list(responses or [])
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, status_code: int = 200, reason: str = "OK", body: Any = None) -> None:
        content = body if isinstance(body, bytes) else json.dumps(body or {}).encode("utf-8")
        self.responses.append(RawResponse(status_code, reason, content))

    def get(self, url: str, params: Mapping[str, str]) -> RawResponse:
        self.calls.append({"method": "GET", "url": url, "params": dict(params)})
        return self.responses.pop(0)

    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> RawResponse:
        self.calls.append({"method": "POST", "url": url, "headers": dict(headers), "body": body})
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> FakeTransport:
    """Provide an empty fake transport."""
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> GeocodioClient:
    """Provide a client wired to the fake transport."""
    return GeocodioClient(api_key="test-key", transport=transport)


@pytest.fixture
def test_settings() -> GeocodioSettings:
    """Provide settings that do not depend on the environment."""
    return GeocodioSettings(
        _env_file=None,
        api_key="settings-key",
        base_url="https://api.example.test/v1",
        timeout=5,
        log_level="DEBUG",
    )
