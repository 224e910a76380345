"""Client for the Zomato restaurant-data API.

API documentation: https://developers.zomato.com/api
"""

import logging

from zomato.client import Client, new_client
from zomato.endpoints import (
    CategoriesReq,
    CitiesReq,
    CollectionsReq,
    CuisinesReq,
    DailyMenuReq,
    EntityType,
    EstablishmentsReq,
    GeoCodeReq,
    LocationDetailsReq,
    LocationsReq,
    Order,
    RestaurantReq,
    ReviewsReq,
    SearchReq,
    Sort,
)
from zomato.errors import (
    APIError,
    Cancelled,
    DecodeError,
    MissingCredential,
    RequestBuildError,
    TransportError,
    ValidationError,
    ZomatoError,
)
from zomato.normalize import decode
from zomato.transport import CancelToken, RawRequest, RequesterFunc, build_request, new_auth

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "CancelToken",
    "Cancelled",
    "CategoriesReq",
    "CitiesReq",
    "Client",
    "CollectionsReq",
    "CuisinesReq",
    "DailyMenuReq",
    "DecodeError",
    "EntityType",
    "EstablishmentsReq",
    "GeoCodeReq",
    "LocationDetailsReq",
    "LocationsReq",
    "MissingCredential",
    "Order",
    "RawRequest",
    "RequestBuildError",
    "RequesterFunc",
    "RestaurantReq",
    "ReviewsReq",
    "SearchReq",
    "Sort",
    "TransportError",
    "ValidationError",
    "ZomatoError",
    "build_request",
    "decode",
    "new_auth",
    "new_client",
]
