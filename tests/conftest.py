"""Pytest fixtures for offline client tests."""

from __future__ import annotations

import json
import os
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

import zomato

# Keep a developer's real key out of the tests.
os.environ.pop("ZOMATO_API_KEY", None)
os.environ.pop("ZOMATO_USER_KEY", None)


class FakeAPI:
    """Stand-in for the Zomato server behind an ``httpx.MockTransport``.

    Every request that reaches the transport is recorded in ``calls``; an
    empty ``calls`` list means nothing was sent.
    """

    def __init__(
        self,
        payload: Any = None,
        status_code: int = 200,
        content: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ):
        self.payload = payload
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}
        self.handler = handler
        self.calls: List[httpx.Request] = []
        self.client: Optional[zomato.Client] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.handler is not None:
            return self.handler(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content, headers=self.headers)
        return httpx.Response(
            self.status_code,
            content=json.dumps(self.payload if self.payload is not None else {}).encode(),
            headers={"Content-Type": "application/json", **self.headers},
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.calls[-1]


@pytest.fixture
def fake_api():
    """Factory returning a ``FakeAPI`` whose ``client`` talks only to it.

    Pass ``api_key=None`` for a client without an authenticator.
    """
    http_clients: List[httpx.Client] = []

    def _factory(
        payload: Any = None,
        status_code: int = 200,
        content: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
        api_key: Optional[str] = "test-key",
        **client_kwargs: Any,
    ) -> FakeAPI:
        fake = FakeAPI(payload, status_code, content, headers, handler)
        http_client = httpx.Client(transport=httpx.MockTransport(fake))
        http_clients.append(http_client)
        if api_key is None:
            fake.client = zomato.Client(http_client=http_client, **client_kwargs)
        else:
            fake.client = zomato.new_client(api_key, http_client=http_client, **client_kwargs)
        return fake

    yield _factory

    for http_client in http_clients:
        http_client.close()


@pytest.fixture
def restaurant_payload() -> Dict[str, Any]:
    """A restaurant as the API sends it, quirks included."""
    return {
        "R": {"res_id": 16774318},
        "apikey": "abc123",
        "id": "16774318",
        "name": "Otto Enoteca & Pizzeria",
        "url": "https://www.zomato.com/new-york-city/otto-enoteca-pizzeria-greenwich-village",
        "location": {
            "address": "1 5th Avenue, New York, NY 10003",
            "locality": "Greenwich Village",
            "city": "New York City",
            "city_id": 280,
            "latitude": "40.7321",
            "longitude": "-73.9962",
            "zipcode": "10003",
            "country_id": 216,
            "locality_verbose": "Greenwich Village, New York City",
        },
        "switch_to_order_menu": 0,
        "cuisines": "Pizza, Italian",
        "average_cost_for_two": 60,
        "price_range": 2,
        "currency": "$",
        "offers": [],
        "opentable_support": 0,
        "is_zomato_book_res": 0,
        "thumb": "https://b.zmtcdn.com/data/pictures/thumb.jpg",
        "user_rating": {
            "aggregate_rating": "3.7",
            "rating_text": "Very Good",
            "rating_color": "5BA829",
            "votes": "1046",
        },
        "photos_url": "https://www.zomato.com/photos",
        "menu_url": "https://www.zomato.com/menu",
        "featured_image": "https://b.zmtcdn.com/data/pictures/featured.jpg",
        "has_online_delivery": 1,
        "is_delivering_now": 0,
        "deeplink": "zomato://restaurant/16774318",
        "has_table_booking": 0,
        "events_url": "https://www.zomato.com/events",
        "establishment_types": [{"establishment_type": {"id": 1, "name": "Casual Dining"}}],
    }
