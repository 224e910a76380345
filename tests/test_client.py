"""End-to-end tests of the client operations against a fake API."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

import zomato
from zomato import models
from zomato.endpoints import (
    CitiesReq,
    CollectionsReq,
    CuisinesReq,
    EntityType,
    EstablishmentsReq,
    LocationsReq,
    ReviewsReq,
    SearchReq,
    Sort,
)
from zomato.errors import APIError, Cancelled, DecodeError, MissingCredential, ValidationError
from zomato.transport import CancelToken


def test_categories(fake_api):
    fake = fake_api({"categories": [{"categories": {"id": 1, "name": "Delivery"}}]})
    resp = fake.client.categories()

    assert resp == models.CategoriesResp(categories=[models.Category(id=1, name="Delivery")])
    request = fake.last_request
    assert request.method == "GET"
    assert request.url.path == "/api/v2.1/categories"
    assert request.url.query == b""
    assert request.headers["user-key"] == "test-key"


def test_api_error_keeps_body(fake_api):
    fake = fake_api(content=b'{"message":"not found"}', status_code=404)
    with pytest.raises(APIError) as excinfo:
        fake.client.restaurant(1)

    err = excinfo.value
    assert err.status_code == 404
    assert err.body == b'{"message":"not found"}'
    assert err.operation == "restaurant"
    assert str(err).startswith("zomato: restaurant: request to ")


def test_missing_credential_sends_nothing(fake_api):
    fake = fake_api({}, api_key=None)
    with pytest.raises(MissingCredential) as excinfo:
        fake.client.categories()
    assert fake.calls == []
    assert excinfo.value.operation == "categories"


def test_empty_api_key_sends_nothing(fake_api):
    fake = fake_api({}, api_key="")
    with pytest.raises(MissingCredential):
        fake.client.categories()
    assert fake.calls == []


def test_validation_error_sends_nothing(fake_api):
    fake = fake_api({})
    with pytest.raises(ValidationError) as excinfo:
        fake.client.restaurant(0)
    assert excinfo.value.field == "restaurant_id"
    assert excinfo.value.operation == "restaurant"
    assert fake.calls == []


def test_cancelled_call_sends_nothing(fake_api):
    fake = fake_api({})
    token = CancelToken()
    token.cancel()
    with pytest.raises(Cancelled) as excinfo:
        fake.client.categories(cancel=token)
    assert excinfo.value.operation == "categories"
    assert fake.calls == []


def test_decode_error_names_endpoint(fake_api):
    fake = fake_api(content=b"not json")
    with pytest.raises(DecodeError) as excinfo:
        fake.client.categories()
    assert excinfo.value.endpoint == "/api/v2.1/categories"
    assert excinfo.value.operation == "categories"


def test_cities(fake_api):
    fake = fake_api(
        {
            "location_suggestions": [
                {
                    "id": 1,
                    "name": "Delhi NCR",
                    "country_id": 1,
                    "country_name": "India",
                    "should_experiment_with": 0,
                    "discovery_enabled": 1,
                    "has_new_ad_format": 1,
                    "is_state": 0,
                    "state_id": 0,
                    "state_name": "",
                    "state_code": "",
                }
            ],
            "status": "success",
            "has_more": 0,
            "has_total": 0,
        }
    )
    resp = fake.client.cities(CitiesReq(query="delhi", city_ids=[1, 2]))

    city = resp.location_suggestions[0]
    assert city.name == "Delhi NCR"
    assert city.discovery_enabled is True
    assert city.should_experiment_with is None
    assert resp.status == "success"
    assert resp.has_more is None

    params = fake.last_request.url.params
    assert fake.last_request.url.path == "/api/v2.1/cities"
    assert params["q"] == "delhi"
    assert params["city_ids"] == "1,2"


def test_collections(fake_api):
    fake = fake_api(
        {
            "collections": [
                {
                    "collection": {
                        "collection_id": 1,
                        "res_count": 30,
                        "image_url": "https://b.zmtcdn.com/collection.jpg",
                        "url": "https://www.zomato.com/ncr/top-restaurants",
                        "title": "Trending This Week",
                        "description": "Most popular restaurants in town this week",
                        "share_url": "http://www.zoma.to/c-1/1",
                    }
                }
            ],
            "has_more": 1,
            "share_url": "http://www.zoma.to/c-1",
            "display_text": "Show all 30 collections",
            "has_total": 1,
        }
    )
    resp = fake.client.collections(CollectionsReq(city_id=1))

    assert resp.collections == [
        models.Collection(
            id=1,
            restaurants_count=30,
            image_url="https://b.zmtcdn.com/collection.jpg",
            url="https://www.zomato.com/ncr/top-restaurants",
            title="Trending This Week",
            description="Most popular restaurants in town this week",
            share_url="http://www.zoma.to/c-1/1",
        )
    ]
    assert resp.has_more is True
    assert fake.last_request.url.params["city_id"] == "1"


def test_cuisines_and_establishments(fake_api):
    fake = fake_api({"cuisines": [{"cuisine": {"cuisine_id": 55, "cuisine_name": "Italian"}}]})
    resp = fake.client.cuisines(CuisinesReq(city_id=280))
    assert resp.cuisines == [models.Cuisine(id=55, name="Italian")]
    assert fake.last_request.url.path == "/api/v2.1/cuisines"

    fake = fake_api({"establishments": [{"establishment": {"id": 16, "name": "Casual Dining"}}]})
    resp = fake.client.establishments(EstablishmentsReq(latitude=40.7321, longitude=-73.9962))
    assert resp.establishments == [models.Establishment(id=16, name="Casual Dining")]
    params = fake.last_request.url.params
    assert params["lat"] == "40.7321"
    assert params["lon"] == "-73.9962"


def test_geocode(fake_api, restaurant_payload):
    fake = fake_api(
        {
            "location": {
                "entity_type": "subzone",
                "entity_id": 3,
                "title": "Connaught Place",
                "latitude": "28.6315",
                "longitude": "77.2167",
                "city_id": 1,
                "city_name": "Delhi NCR",
            },
            "popularity": {
                "popularity": "4.92",
                "nightlife_index": "5.00",
                "nearby_res": ["308322", "18361447"],
                "top_cuisines": ["North Indian", "Chinese"],
                "popularity_res": "100",
                "nightlife_res": "10",
                "subzone": "Connaught Place",
                "subzone_id": 3,
                "city": "Delhi NCR",
            },
            "link": "https://www.zomato.com/ncr/connaught-place-restaurants",
            "nearby_restaurants": [{"restaurant": restaurant_payload}],
        }
    )
    resp = fake.client.geocode(28.6315, 77.2167)

    assert resp.location.latitude == 28.6315
    assert resp.popularity.popularity == 4.92
    assert resp.popularity.nearby_restaurant_ids == [308322, 18361447]
    assert resp.popularity.popularity_restaurant == 100
    assert resp.link_url.endswith("connaught-place-restaurants")
    assert resp.nearby_restaurants[0].id == 16774318

    params = fake.last_request.url.params
    assert params["lat"] == "28.6315"
    assert params["lon"] == "77.2167"


def test_geocode_requires_coordinates(fake_api):
    fake = fake_api({})
    with pytest.raises(ValidationError) as excinfo:
        fake.client.geocode(0, 77.2167)
    assert excinfo.value.field == "latitude"
    assert fake.calls == []


def test_location_details(fake_api, restaurant_payload):
    fake = fake_api(
        {
            "location": {"entity_type": "zone", "entity_id": 94741, "title": "Connaught Place"},
            "num_restaurant": "1190",
            "best_rated_restaurant": [{"restaurant": restaurant_payload}],
            "experts": [{"user": {"name": "Foodie", "foodie_level_num": 12, "profile_image": "x.jpg"}}],
        }
    )
    resp = fake.client.location_details(94741, EntityType.ZONE)

    assert resp.number_of_restaurants == 1190
    assert resp.best_rated_restaurants[0].name == "Otto Enoteca & Pizzeria"
    assert resp.experts == [models.User(name="Foodie", foodie_level_number=12, profile_image_url="x.jpg")]
    params = fake.last_request.url.params
    assert params["entity_id"] == "94741"
    assert params["entity_type"] == "zone"


def test_locations(fake_api):
    fake = fake_api(
        {
            "location_suggestions": [
                {"entity_type": "city", "entity_id": 1, "title": "Delhi NCR", "latitude": 28.625789, "longitude": 77.210276}
            ],
            "status": "success",
            "has_more": 0,
            "has_total": 0,
        }
    )
    resp = fake.client.locations(LocationsReq(query="delhi", count=1))

    assert resp.location_suggestions[0].entity_type == "city"
    assert resp.location_suggestions[0].longitude == 77.210276
    assert dict(fake.last_request.url.params) == {"query": "delhi", "count": "1"}


def test_daily_menu(fake_api):
    fake = fake_api(
        {
            "daily_menus": [
                {
                    "daily_menu": {
                        "daily_menu_id": "16507624",
                        "name": "Vinohradský pivovar",
                        "start_date": "2016-03-08 11:00:00",
                        "end_date": "2016-03-08 15:00:00",
                        "dishes": [{"dish": {"dish_id": "104089345", "name": "Tatarák", "price": "149 Kč"}}],
                    }
                }
            ],
            "status": "success",
        }
    )
    resp = fake.client.daily_menu(16507624)

    menu = resp.daily_menus[0]
    assert menu.id == 16507624
    assert menu.start_date.hour == 11
    assert menu.dishes == [models.Dish(id=104089345, name="Tatarák", price="149 Kč")]
    assert fake.last_request.url.params["res_id"] == "16507624"
    assert fake.last_request.url.path == "/api/v2.1/dailymenu"


def test_restaurant(fake_api, restaurant_payload):
    fake = fake_api(restaurant_payload)
    res = fake.client.restaurant(16774318)

    assert res.id == 16774318
    assert res.cuisines == ["Pizza", "Italian"]
    assert res.user_rating.votes == 1046
    assert fake.last_request.url.params["res_id"] == "16774318"


def test_reviews(fake_api):
    fake = fake_api(
        {
            "reviews_count": 5,
            "reviews_start": 0,
            "reviews_shown": 1,
            "user_reviews": [
                {
                    "review": {
                        "rating": 5,
                        "review_text": "The best latte I've ever had.",
                        "id": "24127336",
                        "rating_color": "305D02",
                        "review_time_friendly": "2 months ago",
                        "rating_text": "Insane!",
                        "timestamp": 1435507367,
                        "likes": "0",
                        "user": {"name": "Ana", "foodie_level": "Super Foodie"},
                        "comments_count": 0,
                    }
                }
            ],
            "Respond to reviews via Zomato Dashboard": "https://www.zomato.com/business/apps",
        }
    )
    resp = fake.client.reviews(ReviewsReq(restaurant_id=463, start=0, count=1))

    assert resp.reviews_count == 5
    assert resp.reviews_start == 0
    review = resp.user_reviews[0]
    assert review.id == 24127336
    assert review.rating == 5.0
    assert review.likes == 0
    assert review.timestamp.year == 2015
    assert review.user.foodie_level == "Super Foodie"
    assert resp.respond_to_reviews_url == "https://www.zomato.com/business/apps"
    assert dict(fake.last_request.url.params) == {"res_id": "463", "count": "1"}


def test_search(fake_api, restaurant_payload):
    fake = fake_api(
        {
            "results_found": 6458,
            "results_start": "0",
            "results_shown": 1,
            "restaurants": [{"restaurant": restaurant_payload}, {"restaurant": None}],
        }
    )
    resp = fake.client.search(SearchReq(query="pizza", entity_id=280, entity_type="city", sort=Sort.RATING, count=1))

    assert resp.results_found == 6458
    assert resp.results_start == 0
    assert [r.id for r in resp.restaurants] == [16774318]
    params = fake.last_request.url.params
    assert params["q"] == "pizza"
    assert params["sort"] == "rating"
    assert params["entity_type"] == "city"
    assert "order" not in params


def test_search_reports_nested_decode_path(fake_api, restaurant_payload):
    restaurant_payload["location"]["zipcode"] = "SW1"
    fake = fake_api({"restaurants": [{"restaurant": restaurant_payload}]})
    with pytest.raises(DecodeError) as excinfo:
        fake.client.search(SearchReq(query="pizza"))
    assert excinfo.value.field == "restaurants[0].restaurant.location.zipcode"
    assert excinfo.value.operation == "search"


def test_from_env(monkeypatch):
    monkeypatch.setenv("ZOMATO_API_KEY", "env-key")
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, content=b'{"categories": []}')

    with httpx.Client(transport=httpx.MockTransport(handler)) as http_client:
        client = zomato.Client.from_env(http_client=http_client)
        assert client.categories() == models.CategoriesResp(categories=[])
    assert seen[0].headers["user-key"] == "env-key"


def test_from_env_without_key(monkeypatch):
    monkeypatch.delenv("ZOMATO_API_KEY", raising=False)
    monkeypatch.delenv("ZOMATO_USER_KEY", raising=False)
    client = zomato.Client.from_env()
    assert client.auth is None
    with pytest.raises(MissingCredential):
        client.categories()
    client.close()


def test_concurrent_calls_share_one_client(fake_api, restaurant_payload):
    def handler(request):
        payload = dict(restaurant_payload, id=request.url.params["res_id"])
        return httpx.Response(200, content=json.dumps(payload).encode())

    fake = fake_api(handler=handler)
    ids = list(range(1, 21))
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(fake.client.restaurant, ids))

    assert [r.id for r in results] == ids
    assert len(fake.calls) == len(ids)


def test_client_context_manager_closes_owned_client():
    with zomato.Client() as client:
        http_client = client.transport._http_client
    assert http_client.is_closed
