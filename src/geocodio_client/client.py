"""Client for the Geocodio geocoding API."""

import json
from typing import Optional
from urllib.parse import urlencode

from loguru import logger

from geocodio_client.config import DEFAULT_BASE_URL, GeocodioSettings
from geocodio_client.envelope import (
    BatchEnvelope,
    GeocodeEnvelope,
    ParseEnvelope,
    ResultEnvelope,
)
from geocodio_client.queries import BatchQuery, Query, format_batch, format_query
from geocodio_client.status import check_response
from geocodio_client.transport import HttpxTransport, RawResponse, Transport

JSON_HEADERS = {"Content-Type": "application/json"}


class GeocodioClient:
    """Geocodio API client (forward geocoding, address parsing, batches).

    Every public method issues exactly one HTTP request and either returns
    an envelope for a 200 response or raises a GeocodioError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        """Initialize the client.

        Args:
            api_key: Geocodio API key; may also be set later with set_api_key()
            transport: Transport to send requests with; an HttpxTransport
                is created when omitted
            base_url: API origin including the version segment
        """
        self._api_key = api_key
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.transport = transport if transport is not None else self._new_transport()

    @classmethod
    def from_settings(cls, settings: GeocodioSettings) -> "GeocodioClient":
        """Build a client from loaded settings."""
        return cls(
            api_key=settings.api_key,
            transport=HttpxTransport(timeout=settings.timeout),
            base_url=settings.base_url,
        )

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @api_key.setter
    def api_key(self, value: Optional[str]) -> None:
        self._api_key = value

    def set_api_key(self, api_key: Optional[str]) -> None:
        """Replace the API key used by subsequent requests."""
        self._api_key = api_key

    def geocode(self, query: Query) -> GeocodeEnvelope:
        """Geocode a single address or coordinate pair.

        Args:
            query: Address string, (lat, lng) pair or mapping of address
                components

        Returns:
            GeocodeEnvelope with the candidate results

        Raises:
            GeocodioDataError: If the query cannot be interpreted
            GeocodioError: On any non-200 response or transport failure
        """
        return self._get(query, "geocode", GeocodeEnvelope)

    def reverse_parse(self, query: Query) -> ParseEnvelope:
        """Parse an address into its components without geocoding it."""
        return self._get(query, "parse", ParseEnvelope)

    parse = reverse_parse

    def batch_geocode(self, queries: BatchQuery) -> BatchEnvelope:
        """Geocode many queries in one request.

        Args:
            queries: Mapping of identifier to query, or a list of queries

        Returns:
            BatchEnvelope keyed like the submitted batch

        Raises:
            GeocodioDataError: If the batch is empty or holds an invalid query
            GeocodioError: On any non-200 response or transport failure
        """
        payload = format_batch(queries)
        url = self._url("geocode") + "?" + urlencode({"api_key": self._key_param()})
        body = json.dumps(payload).encode("utf-8")

        logger.info("Submitting batch of {} queries to Geocodio", len(payload))
        response = self.transport.post(url, JSON_HEADERS, body)
        return self._new_envelope(check_response(response), BatchEnvelope)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "GeocodioClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, query: Query, verb: str, envelope_class: type[ResultEnvelope]):
        params = {"q": format_query(query), "api_key": self._key_param()}

        logger.debug("Sending Geocodio {} request", verb)
        response = self.transport.get(self._url(verb), params)
        return self._new_envelope(check_response(response), envelope_class)

    def _url(self, verb: str) -> str:
        return self.base_url + verb

    def _key_param(self) -> str:
        if not self._api_key:
            logger.warning("No Geocodio API key configured; the request will likely be rejected")
            return ""
        return self._api_key

    def _new_transport(self) -> Transport:
        """Create the default transport. Override to substitute another."""
        return HttpxTransport()

    def _new_envelope(self, response: RawResponse, envelope_class: type[ResultEnvelope]):
        envelope = envelope_class.from_content(response.content)
        logger.debug("Decoded Geocodio response ({} bytes)", len(response.content))
        return envelope
