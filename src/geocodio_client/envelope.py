"""Result envelopes wrapping decoded Geocodio responses."""

import copy
import json
from typing import Any, ClassVar, Iterator, Optional, Union

from pydantic import BaseModel, ValidationError

from geocodio_client.exceptions import ResponseDecodeError
from geocodio_client.models import (
    AddressComponents,
    BatchResponse,
    GeocodeResponse,
    GeocodeResult,
    Location,
    ParsedAddress,
)


class ResultEnvelope:
    """Read-only wrapper around a decoded response body.

    `data` is the JSON exactly as decoded; `model` is the same data
    validated against the response schema for typed access.
    """

    schema: ClassVar[type[BaseModel]]

    def __init__(self, data: Any):
        try:
            self._model = self.schema.model_validate(data)
        except (ValidationError, RecursionError) as e:
            raise ResponseDecodeError(f"Unexpected response structure: {e}") from e
        self._data = data

    @classmethod
    def from_content(cls, content: bytes) -> "ResultEnvelope":
        """Decode a raw response body into an envelope.

        Raises:
            ResponseDecodeError: If the body is not valid JSON or does not
                match the response schema
        """
        try:
            data = json.loads(content)
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise ResponseDecodeError(f"Invalid JSON in response body: {e}") from e
        return cls(data)

    @property
    def data(self) -> Any:
        """Decoded body. A copy, so the envelope cannot be changed through it."""
        return copy.deepcopy(self._data)

    @property
    def model(self) -> BaseModel:
        return self._model

    def __getitem__(self, key: str) -> Any:
        return copy.deepcopy(self._data[key])

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def to_dict(self) -> Any:
        """Return a deep copy of the decoded body."""
        return copy.deepcopy(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class GeocodeEnvelope(ResultEnvelope):
    """Response of a single geocode request."""

    schema = GeocodeResponse

    @property
    def input(self) -> Optional[ParsedAddress]:
        return self._model.input

    @property
    def results(self) -> list[GeocodeResult]:
        return self._model.results

    def first(self) -> Optional[GeocodeResult]:
        """Best match, or None when nothing matched."""
        return self._model.results[0] if self._model.results else None

    @property
    def formatted_address(self) -> Optional[str]:
        best = self.first()
        return best.formatted_address if best else None

    @property
    def location(self) -> Optional[Location]:
        best = self.first()
        return best.location if best else None

    def __len__(self) -> int:
        return len(self._model.results)

    def __iter__(self) -> Iterator[GeocodeResult]:
        return iter(self._model.results)


class ParseEnvelope(ResultEnvelope):
    """Response of a parse request."""

    schema = ParsedAddress

    @property
    def address_components(self) -> AddressComponents:
        return self._model.address_components

    @property
    def formatted_address(self) -> Optional[str]:
        return self._model.formatted_address


class BatchEnvelope(ResultEnvelope):
    """Response of a batch geocode request.

    Results are keyed by the caller's identifiers when the batch was a
    mapping, and by position when it was a list.
    """

    schema = BatchResponse

    def items(self) -> list[tuple[Union[str, int], GeocodeEnvelope]]:
        """Pairs of (identifier or index, envelope for that query)."""
        raw = self._data.get("results", [])
        if isinstance(raw, dict):
            return [(key, GeocodeEnvelope(item.get("response", {}))) for key, item in raw.items()]
        return [(index, GeocodeEnvelope(item.get("response", {}))) for index, item in enumerate(raw)]

    def result(self, key: Union[str, int]) -> GeocodeEnvelope:
        """Envelope for one query of the batch.

        Raises:
            KeyError: If the batch has no entry for `key`
        """
        raw = self._data.get("results", [])
        if isinstance(raw, dict):
            key = str(key)
        try:
            item = raw[key]
        except (IndexError, TypeError) as e:
            raise KeyError(key) from e
        return GeocodeEnvelope(item.get("response", {}))

    def __len__(self) -> int:
        return len(self._model.results)
