"""Request descriptors, one per API endpoint.

Each descriptor is an immutable dataclass whose fields are the endpoint's
query parameters. ``request()`` validates required fields and encodes the
rest, leaving out any parameter that still holds its zero value.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, ClassVar, List, Sequence, Tuple, Union

from zomato.errors import ValidationError
from zomato.transport import RawRequest, build_request


class Sort(str, enum.Enum):
    """Sort types used when searching."""

    COST = "cost"
    RATING = "rating"
    REAL_DISTANCE = "real_distance"


class Order(str, enum.Enum):
    """Ordering used together with ``Sort``."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class EntityType(str, enum.Enum):
    """Location types returned by the locations endpoint."""

    CITY = "city"
    SUBZONE = "subzone"
    ZONE = "zone"
    LANDMARK = "landmark"
    METRO = "metro"
    GROUP = "group"


def param(name: str, default: Any = 0, required: bool = False) -> Any:
    """Declare a query parameter sent as ``name``."""
    return dataclasses.field(default=default, metadata={"query": name, "required": required})


def is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, str)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def validate_required(descriptor: Any) -> None:
    """Raise ``ValidationError`` for the first required field left at zero."""
    for f in dataclasses.fields(descriptor):
        if f.metadata.get("required") and is_zero(getattr(descriptor, f.name)):
            raise ValidationError(f.name)


@dataclass(frozen=True)
class Endpoint:
    path: ClassVar[str] = ""

    def params(self) -> List[Tuple[str, Any]]:
        return [
            (f.metadata["query"], getattr(self, f.name))
            for f in dataclasses.fields(self)
            if "query" in f.metadata
        ]

    def request(self) -> RawRequest:
        validate_required(self)
        return build_request(self.path, self.params())


# ============================================================================
# Common
# ============================================================================

@dataclass(frozen=True)
class CategoriesReq(Endpoint):
    path: ClassVar[str] = "/categories"


@dataclass(frozen=True)
class CitiesReq(Endpoint):
    path: ClassVar[str] = "/cities"

    query: str = param("q", "")  # query by city name
    latitude: float = param("lat")
    longitude: float = param("lon")
    city_ids: Sequence[int] = param("city_ids", ())  # sent comma separated
    count: int = param("count")  # max number of results


@dataclass(frozen=True)
class CollectionsReq(Endpoint):
    path: ClassVar[str] = "/collections"

    city_id: int = param("city_id")
    latitude: float = param("lat")  # any point within a city
    longitude: float = param("lon")
    count: int = param("count")


@dataclass(frozen=True)
class CuisinesReq(Endpoint):
    path: ClassVar[str] = "/cuisines"

    city_id: int = param("city_id")
    latitude: float = param("lat")
    longitude: float = param("lon")


@dataclass(frozen=True)
class EstablishmentsReq(Endpoint):
    path: ClassVar[str] = "/establishments"

    city_id: int = param("city_id")
    latitude: float = param("lat")
    longitude: float = param("lon")


@dataclass(frozen=True)
class GeoCodeReq(Endpoint):
    path: ClassVar[str] = "/geocode"

    latitude: float = param("lat", required=True)
    longitude: float = param("lon", required=True)


# ============================================================================
# Location
# ============================================================================

@dataclass(frozen=True)
class LocationDetailsReq(Endpoint):
    path: ClassVar[str] = "/location_details"

    # Both obtained from the locations endpoint
    entity_id: int = param("entity_id", required=True)
    entity_type: Union[EntityType, str] = param("entity_type", "", required=True)


@dataclass(frozen=True)
class LocationsReq(Endpoint):
    path: ClassVar[str] = "/locations"

    query: str = param("query", "", required=True)  # suggestion for location name
    latitude: float = param("lat")
    longitude: float = param("lon")
    count: int = param("count")


# ============================================================================
# Restaurant
# ============================================================================

@dataclass(frozen=True)
class DailyMenuReq(Endpoint):
    path: ClassVar[str] = "/dailymenu"

    restaurant_id: int = param("res_id", required=True)


@dataclass(frozen=True)
class RestaurantReq(Endpoint):
    path: ClassVar[str] = "/restaurant"

    restaurant_id: int = param("res_id", required=True)


@dataclass(frozen=True)
class ReviewsReq(Endpoint):
    path: ClassVar[str] = "/reviews"

    restaurant_id: int = param("res_id", required=True)
    start: int = param("start")  # fetch results after this offset
    count: int = param("count")


# ============================================================================
# Search
# ============================================================================

@dataclass(frozen=True)
class SearchReq(Endpoint):
    """Search parameters.

    The location is given either as ``entity_id``/``entity_type`` or as
    coordinates, optionally with a ``radius`` in meters. Cuisine,
    establishment, collection and category IDs come from their respective
    endpoints.
    """

    path: ClassVar[str] = "/search"

    query: str = param("q", "")
    entity_id: int = param("entity_id")
    entity_type: Union[EntityType, str] = param("entity_type", "")
    latitude: float = param("lat")
    longitude: float = param("lon")
    start: int = param("start")
    count: int = param("count")
    radius: float = param("radius")
    establishment: str = param("establishment_type", "")
    cuisines: Sequence[str] = param("cuisines", ())  # sent comma separated
    collection: str = param("collection_id", "")
    category: str = param("category", "")
    sort: Union[Sort, str] = param("sort", "")
    order: Union[Order, str] = param("order", "")
