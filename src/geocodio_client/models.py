"""Typed schemas for Geocodio API responses.

Every model accepts fields it does not declare, and documented fields are
optional, so additions to the API never break decoding.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class GeocodioModel(BaseModel):
    """Base model that keeps unknown fields and accepts numbers for string fields."""

    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)


class Location(GeocodioModel):
    lat: float
    lng: float


class AddressComponents(GeocodioModel):
    """Structured address parts as returned by geocode and parse."""

    number: Optional[str] = None
    predirectional: Optional[str] = None
    prefix: Optional[str] = None
    street: Optional[str] = None
    suffix: Optional[str] = None
    postdirectional: Optional[str] = None
    secondaryunit: Optional[str] = None
    secondarynumber: Optional[str] = None
    formatted_street: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None


class GeocodeResult(GeocodioModel):
    """A single candidate match for a query."""

    address_components: AddressComponents = Field(default_factory=AddressComponents)
    formatted_address: Optional[str] = None
    location: Optional[Location] = None
    accuracy: Optional[float] = None  # 0.0-1.0
    accuracy_type: Optional[str] = None  # rooftop, range_interpolation, ...
    source: Optional[str] = None


class ParsedAddress(GeocodioModel):
    """Body of a parse request, also echoed as `input` by geocode."""

    address_components: AddressComponents = Field(default_factory=AddressComponents)
    formatted_address: Optional[str] = None


class GeocodeResponse(GeocodioModel):
    """Body of a single geocode request."""

    input: Optional[ParsedAddress] = None
    results: list[GeocodeResult] = Field(default_factory=list)


class BatchItem(GeocodioModel):
    """One query of a batch together with its geocode response."""

    query: Any = None
    response: GeocodeResponse = Field(default_factory=GeocodeResponse)


class BatchResponse(GeocodioModel):
    """Body of a batch request, keyed like the submitted batch."""

    results: Union[list[BatchItem], dict[str, BatchItem]] = Field(default_factory=list)
