"""Tests for result envelopes and response models."""

import json

import pytest

from geocodio_client.envelope import BatchEnvelope, GeocodeEnvelope, ParseEnvelope
from geocodio_client.exceptions import GeocodioTransportError, ResponseDecodeError
from geocodio_client.models import GeocodeResult

from .conftest import SAMPLE_GEOCODE_RESPONSE


class TestGeocodeEnvelope:
    """Tests for GeocodeEnvelope."""

    def test_from_content_keeps_decoded_body(self):
        """Test that data equals the JSON that was sent."""
        envelope = GeocodeEnvelope.from_content(json.dumps(SAMPLE_GEOCODE_RESPONSE).encode())

        assert envelope.data == SAMPLE_GEOCODE_RESPONSE
        assert envelope.to_dict() == SAMPLE_GEOCODE_RESPONSE
        assert envelope.to_dict() is not envelope.data

    def test_typed_accessors(self):
        """Test typed access to the first result."""
        envelope = GeocodeEnvelope(SAMPLE_GEOCODE_RESPONSE)

        best = envelope.first()
        assert isinstance(best, GeocodeResult)
        assert best.address_components.county == "Arlington County"
        assert best.accuracy == 1.0
        assert envelope.input.address_components.zip == "22201"
        assert list(envelope) == envelope.results
        assert "results" in envelope
        assert envelope.get("missing", "default") == "default"

    def test_empty_results(self):
        """Test an envelope with no matches."""
        envelope = GeocodeEnvelope({"results": []})

        assert envelope.first() is None
        assert envelope.formatted_address is None
        assert envelope.location is None
        assert len(envelope) == 0

    def test_missing_optional_fields(self):
        """Test that results missing optional fields still decode."""
        envelope = GeocodeEnvelope({"results": [{"formatted_address": "Somewhere"}]})

        best = envelope.first()
        assert best.formatted_address == "Somewhere"
        assert best.location is None
        assert best.accuracy is None
        assert best.address_components.city is None

    def test_unknown_fields_are_kept(self):
        """Test that fields outside the schema are preserved."""
        body = {
            "results": [
                {
                    "formatted_address": "Somewhere",
                    "location": {"lat": 1, "lng": 2, "precision": "high"},
                    "census": {"timezone": {"name": "America/New_York"}},
                }
            ],
            "debug": True,
        }

        envelope = GeocodeEnvelope(body)

        best = envelope.first()
        assert best.census == {"timezone": {"name": "America/New_York"}}
        assert best.location.precision == "high"
        assert best.model_extra["census"]["timezone"]["name"] == "America/New_York"
        assert envelope["debug"] is True

    def test_models_are_read_only(self):
        """Test that decoded models cannot be modified."""
        envelope = GeocodeEnvelope(SAMPLE_GEOCODE_RESPONSE)

        with pytest.raises(Exception):
            envelope.first().formatted_address = "changed"

    @pytest.mark.parametrize("content", [b"", b"not json", b"{\"results\": [", b"\xff\xfe"])
    def test_malformed_json(self, content):
        """Test that undecodable bodies raise a decode error."""
        with pytest.raises(ResponseDecodeError):
            GeocodeEnvelope.from_content(content)

    @pytest.mark.parametrize(
        "body",
        [
            [],
            "text",
            {"results": "nope"},
            {"results": [{"location": {"lat": "north"}}]},
        ],
    )
    def test_unexpected_structure(self, body):
        """Test that bodies not matching the schema raise a transport error."""
        with pytest.raises(GeocodioTransportError):
            GeocodeEnvelope(body)


class TestParseEnvelope:
    """Tests for ParseEnvelope."""

    def test_parse_accessors(self):
        """Test typed access to a parsed address."""
        envelope = ParseEnvelope(SAMPLE_GEOCODE_RESPONSE["input"])

        assert envelope.address_components.formatted_street == "N Highland St"
        assert envelope.formatted_address == "1109 N Highland St, Arlington, VA 22201"

    def test_parse_without_components(self):
        """Test a parse response with no components."""
        envelope = ParseEnvelope({})

        assert envelope.formatted_address is None
        assert envelope.address_components.street is None


class TestBatchEnvelope:
    """Tests for BatchEnvelope."""

    def test_item_without_response(self):
        """Test that a batch entry missing its response decodes as no match."""
        envelope = BatchEnvelope({"results": {"a": {"query": "x"}}})

        assert envelope.result("a").first() is None

    def test_unknown_key(self):
        """Test looking up an identifier that is not in the batch."""
        envelope = BatchEnvelope({"results": {"a": {"query": "x", "response": {"results": []}}}})

        with pytest.raises(KeyError):
            envelope.result("b")


class TestReadOnlyData:
    """Tests that decoded data cannot be changed through the envelope."""

    def test_mutating_data_does_not_change_envelope(self):
        envelope = GeocodeEnvelope(json.loads(json.dumps(SAMPLE_GEOCODE_RESPONSE)))

        data = envelope.data
        data["results"].clear()
        envelope["results"].append({"formatted_address": "elsewhere"})
        envelope.get("input")["formatted_address"] = "changed"

        assert envelope.data == SAMPLE_GEOCODE_RESPONSE
        assert len(envelope.data["results"]) == len(envelope.results) == 1

    def test_get_missing_key_returns_default(self):
        envelope = ParseEnvelope({})
        assert envelope.get("formatted_address") is None
