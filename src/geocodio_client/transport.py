"""HTTP transport used by the Geocodio client."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional

import httpx
from loguru import logger

from geocodio_client.exceptions import GeocodioTransportError


@dataclass(frozen=True)
class RawResponse:
    """Status, reason phrase and body of a single HTTP response."""

    status_code: int
    reason_phrase: str
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport(ABC):
    """Abstract base class for the client's network seam."""

    @abstractmethod
    def get(self, url: str, params: Mapping[str, str]) -> RawResponse:
        """Issue a GET request.

        Args:
            url: Absolute request URL
            params: Query string parameters

        Returns:
            RawResponse for any HTTP status

        Raises:
            GeocodioTransportError: If no HTTP response was received
        """
        pass

    @abstractmethod
    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> RawResponse:
        """Issue a POST request.

        Args:
            url: Absolute request URL, including any query string
            headers: Request headers
            body: Encoded request body

        Returns:
            RawResponse for any HTTP status

        Raises:
            GeocodioTransportError: If no HTTP response was received
        """
        pass

    def close(self) -> None:
        """Release any resources held by the transport."""


class HttpxTransport(Transport):
    """Transport backed by a blocking httpx.Client."""

    def __init__(self, timeout: float = 60.0, client: Optional[httpx.Client] = None):
        self.timeout = timeout
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def get(self, url: str, params: Mapping[str, str]) -> RawResponse:
        return self._send("GET", url, params=dict(params))

    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> RawResponse:
        return self._send("POST", url, headers=dict(headers), content=body)

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, url: str, **kwargs) -> RawResponse:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.error("Geocodio API request timed out after {}s", self.timeout)
            raise GeocodioTransportError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error("Geocodio API transport error: {}", e)
            raise GeocodioTransportError(f"Request failed: {e}") from e

        logger.debug(
            "{} {} -> {} ({} bytes)",
            method,
            response.url.copy_remove_param("api_key"),
            response.status_code,
            len(response.content),
        )
        return RawResponse(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            content=response.content,
        )
