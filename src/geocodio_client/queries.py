"""Normalization of caller queries into Geocodio query strings."""

from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any, Union

from geocodio_client.exceptions import GeocodioDataError

# Order in which structured address components are joined into `q`
COMPONENT_ORDER = ("street", "city", "state", "postal_code", "country")

Query = Union[str, Sequence[float], Mapping[str, Any]]
BatchQuery = Union[Mapping[str, Query], Sequence[Query]]


def format_query(query: Query) -> str:
    """
    Render a single query as the value of the `q` parameter.

    Accepts a free-text address or "lat,lng" string, a (lat, lng) pair,
    a mapping of address components (street, city, state, postal_code,
    country), or a mapping holding only a free-text `q`.

    Args:
        query: Query to render.

    Returns:
        Query string ready to be sent to the API.

    Raises:
        GeocodioDataError: If the query is empty or cannot be interpreted.
    """
    if isinstance(query, str):
        text = query.strip()
        if not text:
            raise GeocodioDataError("Query must not be empty")
        return text

    if isinstance(query, Mapping):
        if set(query) == {"q"}:
            return format_query(query["q"])
        unknown = set(query) - set(COMPONENT_ORDER)
        if unknown:
            raise GeocodioDataError(f"Unknown address components: {', '.join(sorted(unknown))}")
        parts = [str(query[key]).strip() for key in COMPONENT_ORDER if query.get(key)]
        if not parts:
            raise GeocodioDataError("Structured query has no address components")
        return ", ".join(parts)

    if isinstance(query, Sequence) and len(query) == 2 and all(
        isinstance(value, Real) and not isinstance(value, bool) for value in query
    ):
        lat, lng = query
        return f"{lat},{lng}"

    raise GeocodioDataError(f"Unsupported query: {query!r}")


def format_batch(queries: BatchQuery) -> Union[dict[str, str], list[str]]:
    """
    Render a batch of queries, keeping the container shape.

    A mapping stays keyed by the caller's identifiers and a sequence stays
    ordered, so the response can be matched back to the input.

    Args:
        queries: Mapping of identifier to query, or a sequence of queries.

    Returns:
        Dict or list of query strings, suitable for a JSON body.

    Raises:
        GeocodioDataError: If the batch is empty or holds an invalid query.
    """
    if isinstance(queries, str):
        raise GeocodioDataError("Batch queries must be a mapping or a sequence, not a string")

    if isinstance(queries, Mapping):
        batch: Union[dict[str, str], list[str]] = {
            str(key): format_query(value) for key, value in queries.items()
        }
    elif isinstance(queries, Sequence):
        batch = [format_query(value) for value in queries]
    else:
        raise GeocodioDataError(f"Batch queries must be a mapping or a sequence, not {type(queries).__name__}")

    if not batch:
        raise GeocodioDataError("Batch must contain at least one query")
    return batch
