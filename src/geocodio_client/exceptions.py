"""Domain errors raised by the Geocodio client."""

from enum import Enum
from typing import Optional


class ResponseKind(Enum):
    """Outcome of a Geocodio request."""

    SUCCESS = "success"
    AUTH = "auth"  # 403 - invalid or missing API key
    DATA = "data"  # 422 - query could not be processed
    SERVER = "server"  # 500 - upstream failure
    UNKNOWN = "unknown"  # any other status code
    TRANSPORT = "transport"  # no usable HTTP response


class GeocodioError(Exception):
    """Base class for every error crossing the client's public API."""

    kind: ResponseKind = ResponseKind.UNKNOWN

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(self.format_message(reason))
        self.reason = reason
        self.status_code = status_code

    @classmethod
    def format_message(cls, reason: str) -> str:
        return reason

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"reason={self.reason!r}, status_code={self.status_code!r})"
        )


class GeocodioAuthError(GeocodioError):
    """The API key was rejected (HTTP 403)."""

    kind = ResponseKind.AUTH


class GeocodioDataError(GeocodioError):
    """The query data was malformed or could not be geocoded (HTTP 422)."""

    kind = ResponseKind.DATA


class GeocodioServerError(GeocodioError):
    """The Geocodio service failed (HTTP 500)."""

    kind = ResponseKind.SERVER


class GeocodioUnknownError(GeocodioError):
    """Any other non-success status code."""

    kind = ResponseKind.UNKNOWN

    @classmethod
    def format_message(cls, reason: str) -> str:
        return f"There was a problem with your request - {reason}"


class GeocodioTransportError(GeocodioError):
    """The request never produced a usable HTTP response."""

    kind = ResponseKind.TRANSPORT


class ResponseDecodeError(GeocodioTransportError):
    """A 200 response carried a body that could not be decoded."""
