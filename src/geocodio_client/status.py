"""Mapping of HTTP status codes onto Geocodio response kinds."""

from loguru import logger

from geocodio_client.exceptions import (
    GeocodioAuthError,
    GeocodioDataError,
    GeocodioError,
    GeocodioServerError,
    GeocodioUnknownError,
    ResponseKind,
)
from geocodio_client.transport import RawResponse

_STATUS_KINDS: dict[int, ResponseKind] = {
    200: ResponseKind.SUCCESS,
    403: ResponseKind.AUTH,
    422: ResponseKind.DATA,
    500: ResponseKind.SERVER,
}

ERROR_CLASSES: dict[ResponseKind, type[GeocodioError]] = {
    ResponseKind.AUTH: GeocodioAuthError,
    ResponseKind.DATA: GeocodioDataError,
    ResponseKind.SERVER: GeocodioServerError,
    ResponseKind.UNKNOWN: GeocodioUnknownError,
}


def classify(status_code: int) -> ResponseKind:
    """
    Classify an HTTP status code.

    Any code without an explicit mapping is UNKNOWN, so a response can only
    succeed on 200.

    Args:
        status_code: HTTP status code returned by the service.

    Returns:
        The ResponseKind for the code. Never TRANSPORT.
    """
    return _STATUS_KINDS.get(status_code, ResponseKind.UNKNOWN)


def check_response(response: RawResponse) -> RawResponse:
    """
    Pass a successful response through or raise the matching domain error.

    Args:
        response: Response returned by the transport.

    Returns:
        The same response when its status is 200.

    Raises:
        GeocodioError: Subclass matching the classified kind, carrying the
            reason phrase and status code.
    """
    kind = classify(response.status_code)
    if kind is ResponseKind.SUCCESS:
        return response

    error = ERROR_CLASSES[kind](response.reason_phrase, status_code=response.status_code)
    if kind is ResponseKind.AUTH:
        logger.error("Geocodio API authentication failed - check API key")
    else:
        logger.warning("Geocodio API returned {}: {}", response.status_code, error)
    raise error
