"""Client library for the Geocodio geocoding API.

Forward geocoding, address parsing and batch geocoding, with typed result
envelopes and a fixed mapping of HTTP status codes onto domain errors.
"""

from loguru import logger

from .client import GeocodioClient
from .config import GeocodioSettings, get_settings
from .envelope import BatchEnvelope, GeocodeEnvelope, ParseEnvelope, ResultEnvelope
from .exceptions import (
    GeocodioAuthError,
    GeocodioDataError,
    GeocodioError,
    GeocodioServerError,
    GeocodioTransportError,
    GeocodioUnknownError,
    ResponseDecodeError,
    ResponseKind,
)
from .models import (
    AddressComponents,
    BatchItem,
    BatchResponse,
    GeocodeResponse,
    GeocodeResult,
    Location,
    ParsedAddress,
)
from .logging import setup_logging
from .status import check_response, classify
from .transport import HttpxTransport, RawResponse, Transport

__all__ = [
    "GeocodioClient",
    "GeocodioSettings",
    "get_settings",
    "setup_logging",
    "ResultEnvelope",
    "GeocodeEnvelope",
    "ParseEnvelope",
    "BatchEnvelope",
    "GeocodioError",
    "GeocodioAuthError",
    "GeocodioDataError",
    "GeocodioServerError",
    "GeocodioUnknownError",
    "GeocodioTransportError",
    "ResponseDecodeError",
    "ResponseKind",
    "AddressComponents",
    "BatchItem",
    "BatchResponse",
    "GeocodeResponse",
    "GeocodeResult",
    "Location",
    "ParsedAddress",
    "classify",
    "check_response",
    "Transport",
    "HttpxTransport",
    "RawResponse",
]

logger.disable(__name__)
