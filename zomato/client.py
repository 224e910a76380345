"""Zomato REST API client.

Usage:
    from zomato import ReviewsReq, SearchReq, new_client

    client = new_client(API_KEY)

    # Restaurant details
    res = client.restaurant(463)

    # Search for restaurants
    found = client.search(SearchReq(query="delhi", radius=200))

    # Reviews of a restaurant, aborting after five seconds
    reviews = client.reviews(ReviewsReq(restaurant_id=463, count=100), timeout=5)

A ``Client`` holds no per-call state and may be shared between threads.
"""

from __future__ import annotations

from typing import Callable, Optional, Type, TypeVar, Union

import httpx

from zomato import config, models
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
    RestaurantReq,
    ReviewsReq,
    SearchReq,
)
from zomato.errors import MissingCredential, ZomatoError
from zomato.normalize import decode
from zomato.transport import CancelToken, Requester, Transport, new_auth

R = TypeVar("R", bound=models.Record)

Authenticator = Callable[[Requester], Requester]


class Client:
    """Authenticated client for the Zomato API.

    Args:
        auth: authenticator from ``new_auth``; calls fail with
            ``MissingCredential`` while it is ``None``
        base_url: overrides scheme and host of every request
        user_agent: ``User-Agent`` header value
        http_client: ``httpx.Client`` to send requests with
        timeout: default per-call timeout in seconds
    """

    def __init__(
        self,
        auth: Optional[Authenticator] = None,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        self._auth = auth
        self._transport = Transport(
            base_url=base_url,
            user_agent=user_agent,
            http_client=http_client,
            timeout=timeout,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "Client":
        """Build a client authenticated with ``ZOMATO_API_KEY``, if set."""
        api_key = config.get_api_key()
        return cls(auth=new_auth(api_key) if api_key else None, **kwargs)

    @property
    def auth(self) -> Optional[Authenticator]:
        return self._auth

    @property
    def transport(self) -> Transport:
        return self._transport

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def do(
        self,
        requester: Requester,
        model: Type[R],
        operation: str,
        cancel: Optional[CancelToken] = None,
        timeout: Optional[float] = None,
    ) -> R:
        """Authenticate and send ``requester``, decoding the body into ``model``."""
        try:
            if self._auth is None:
                raise MissingCredential()
            raw = self._auth(requester).request()
            body = self._transport.execute(raw, cancel=cancel, timeout=timeout)
            return decode(model, body, endpoint=httpx.URL(raw.url).path)
        except ZomatoError as exc:
            if exc.operation is None:
                exc.operation = operation
            raise

    # ------------------------------------------------------------------
    # Common
    # ------------------------------------------------------------------

    def categories(self, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None) -> models.CategoriesResp:
        """Get the list of restaurant categories."""
        return self.do(CategoriesReq(), models.CategoriesResp, "categories", cancel, timeout)

    def cities(self, req: CitiesReq, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None) -> models.CitiesResp:
        """Find cities by name, coordinates or IDs."""
        return self.do(req, models.CitiesResp, "cities", cancel, timeout)

    def collections(
        self, req: CollectionsReq, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None
    ) -> models.CollectionsResp:
        """Get curated restaurant collections of a city."""
        return self.do(req, models.CollectionsResp, "collections", cancel, timeout)

    def cuisines(self, req: CuisinesReq, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None) -> models.CuisinesResp:
        """Get the cuisines available in a city."""
        return self.do(req, models.CuisinesResp, "cuisines", cancel, timeout)

    def establishments(
        self, req: EstablishmentsReq, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None
    ) -> models.EstablishmentsResp:
        """Get the establishment types of a city."""
        return self.do(req, models.EstablishmentsResp, "establishments", cancel, timeout)

    def geocode(
        self, latitude: float, longitude: float, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None
    ) -> models.GeoCodeResp:
        """Get foodie and nightlife indices, popular cuisines and nearby
        restaurants around the given coordinates."""
        req = GeoCodeReq(latitude=latitude, longitude=longitude)
        return self.do(req, models.GeoCodeResp, "geocode", cancel, timeout)

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------

    def location_details(
        self,
        entity_id: int,
        entity_type: Union[EntityType, str],
        *,
        cancel: Optional[CancelToken] = None,
        timeout: Optional[float] = None,
    ) -> models.LocationDetailsResp:
        """Get indices, top cuisines and best rated restaurants of a location."""
        req = LocationDetailsReq(entity_id=entity_id, entity_type=entity_type)
        return self.do(req, models.LocationDetailsResp, "location_details", cancel, timeout)

    def locations(self, req: LocationsReq, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None) -> models.LocationsResp:
        """Search locations by keyword; coordinates improve the results."""
        return self.do(req, models.LocationsResp, "locations", cancel, timeout)

    # ------------------------------------------------------------------
    # Restaurant
    # ------------------------------------------------------------------

    def daily_menu(
        self, restaurant_id: int, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None
    ) -> models.DailyMenuResp:
        """Get the daily menus of a restaurant."""
        return self.do(DailyMenuReq(restaurant_id=restaurant_id), models.DailyMenuResp, "daily_menu", cancel, timeout)

    def restaurant(
        self, restaurant_id: int, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None
    ) -> models.Restaurant:
        """Get restaurant details.

        Photos and reviews are only included with partner access.
        """
        return self.do(RestaurantReq(restaurant_id=restaurant_id), models.Restaurant, "restaurant", cancel, timeout)

    def reviews(self, req: ReviewsReq, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None) -> models.ReviewsResp:
        """Get restaurant reviews. The basic plan only returns the 5 latest."""
        return self.do(req, models.ReviewsResp, "reviews", cancel, timeout)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, req: SearchReq, *, cancel: Optional[CancelToken] = None, timeout: Optional[float] = None) -> models.SearchResp:
        """Search restaurants.

        Up to 100 restaurants can be paged through with ``start`` and
        ``count``; ``count`` is capped at 20 by the API.
        """
        return self.do(req, models.SearchResp, "search", cancel, timeout)


def new_client(api_key: str, **kwargs) -> Client:
    """Return a client that authenticates every request with ``api_key``."""
    return Client(auth=new_auth(api_key), **kwargs)
