"""Conversion from wire shapes to canonical records.

One converter per record. Converters are pure: they read a validated wire
model and return a new canonical model, passing the dotted path of the
record down so conversion errors name the exact field.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Tuple, Type, TypeVar, Union

import pydantic

from zomato import models, wire
from zomato.convert import (
    Layout,
    parse_timestamp,
    split_csv,
    to_float,
    to_int,
    to_int_list,
    unwrap_single_key_list,
    zero_one_to_bool,
)
from zomato.errors import DecodeError

R = TypeVar("R", bound=models.Record)


def _sub(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _optional(value, convert, path):
    return convert(value, path) if value is not None else None


def _each(values, convert, path):
    if values is None:
        return None
    return [convert(value, f"{path}[{i}]") for i, value in enumerate(values)]


# ============================================================================
# Common
# ============================================================================

def category(w: wire.Category, path: str = "category") -> models.Category:
    return models.Category(id=w.id, name=w.name)


def categories_resp(w: wire.CategoriesResp, path: str = "") -> models.CategoriesResp:
    return models.CategoriesResp(
        categories=unwrap_single_key_list(w.categories, "categories", category, _sub(path, "categories")),
    )


def city(w: wire.City, path: str = "city") -> models.City:
    return models.City(
        id=w.id,
        name=w.name,
        country_id=w.country_id,
        country_name=w.country_name,
        country_flag_url=w.country_flag_url,
        should_experiment_with=zero_one_to_bool(w.should_experiment_with, _sub(path, "should_experiment_with")),
        discovery_enabled=zero_one_to_bool(w.discovery_enabled, _sub(path, "discovery_enabled")),
        has_new_ad_format=zero_one_to_bool(w.has_new_ad_format, _sub(path, "has_new_ad_format")),
        is_state=zero_one_to_bool(w.is_state, _sub(path, "is_state")),
        state_id=w.state_id,
        state_name=w.state_name,
        state_code=w.state_code,
    )


def cities_resp(w: wire.CitiesResp, path: str = "") -> models.CitiesResp:
    return models.CitiesResp(
        location_suggestions=_each(w.location_suggestions, city, _sub(path, "location_suggestions")),
        status=w.status,
        has_more=zero_one_to_bool(w.has_more, _sub(path, "has_more")),
        has_total=zero_one_to_bool(w.has_total, _sub(path, "has_total")),
    )


def collection(w: wire.Collection, path: str = "collection") -> models.Collection:
    return models.Collection(
        id=w.collection_id,
        url=w.url,
        title=w.title,
        description=w.description,
        restaurants_count=w.res_count,
        image_url=w.image_url,
        share_url=w.share_url,
    )


def collections_resp(w: wire.CollectionsResp, path: str = "") -> models.CollectionsResp:
    return models.CollectionsResp(
        collections=unwrap_single_key_list(w.collections, "collection", collection, _sub(path, "collections")),
        share_url=w.share_url,
        display_text=w.display_text,
        has_more=zero_one_to_bool(w.has_more, _sub(path, "has_more")),
        has_total=zero_one_to_bool(w.has_total, _sub(path, "has_total")),
    )


def cuisine(w: wire.Cuisine, path: str = "cuisine") -> models.Cuisine:
    return models.Cuisine(id=w.cuisine_id, name=w.cuisine_name)


def cuisines_resp(w: wire.CuisinesResp, path: str = "") -> models.CuisinesResp:
    return models.CuisinesResp(
        cuisines=unwrap_single_key_list(w.cuisines, "cuisine", cuisine, _sub(path, "cuisines")),
    )


def establishment(w: wire.Establishment, path: str = "establishment") -> models.Establishment:
    return models.Establishment(id=w.id, name=w.name)


def establishments_resp(w: wire.EstablishmentsResp, path: str = "") -> models.EstablishmentsResp:
    return models.EstablishmentsResp(
        establishments=unwrap_single_key_list(
            w.establishments, "establishment", establishment, _sub(path, "establishments")
        ),
    )


def popularity(w: wire.Popularity, path: str = "popularity") -> models.Popularity:
    return models.Popularity(
        popularity=to_float(w.popularity, _sub(path, "popularity")),
        nightlife_index=to_float(w.nightlife_index, _sub(path, "nightlife_index")),
        nearby_restaurant_ids=to_int_list(w.nearby_res, _sub(path, "nearby_res")),
        top_cuisines=w.top_cuisines,
        popularity_restaurant=to_int(w.popularity_res, _sub(path, "popularity_res")),
        nightlife_restaurant=to_int(w.nightlife_res, _sub(path, "nightlife_res")),
        subzone=w.subzone,
        subzone_id=w.subzone_id,
        city=w.city,
    )


def geocode_resp(w: wire.GeoCodeResp, path: str = "") -> models.GeoCodeResp:
    return models.GeoCodeResp(
        location=_optional(w.location, location, _sub(path, "location")),
        popularity=_optional(w.popularity, popularity, _sub(path, "popularity")),
        link_url=w.link,
        nearby_restaurants=unwrap_single_key_list(
            w.nearby_restaurants, "restaurant", restaurant, _sub(path, "nearby_restaurants")
        ),
    )


# ============================================================================
# Location
# ============================================================================

def location(w: wire.Location, path: str = "location") -> models.Location:
    return models.Location(
        entity_type=w.entity_type,
        entity_id=w.entity_id,
        title=w.title,
        latitude=to_float(w.latitude, _sub(path, "latitude")),
        longitude=to_float(w.longitude, _sub(path, "longitude")),
        city_id=w.city_id,
        city_name=w.city_name,
        country_id=w.country_id,
        country_name=w.country_name,
    )


def locations_resp(w: wire.LocationsResp, path: str = "") -> models.LocationsResp:
    return models.LocationsResp(
        location_suggestions=_each(w.location_suggestions, location, _sub(path, "location_suggestions")),
        status=w.status,
        has_more=zero_one_to_bool(w.has_more, _sub(path, "has_more")),
        has_total=zero_one_to_bool(w.has_total, _sub(path, "has_total")),
    )


def location_details_resp(w: wire.LocationDetailsResp, path: str = "") -> models.LocationDetailsResp:
    return models.LocationDetailsResp(
        location=_optional(w.location, location, _sub(path, "location")),
        number_of_restaurants=to_int(w.num_restaurant, _sub(path, "num_restaurant")),
        best_rated_restaurants=unwrap_single_key_list(
            w.best_rated_restaurant, "restaurant", restaurant, _sub(path, "best_rated_restaurant")
        ),
        experts=unwrap_single_key_list(w.experts, "user", user, _sub(path, "experts")),
    )


# ============================================================================
# Restaurant
# ============================================================================

def user(w: wire.User, path: str = "user") -> models.User:
    return models.User(
        name=w.name,
        zomato_handle=w.zomato_handle,
        foodie_level=w.foodie_level,
        foodie_level_number=w.foodie_level_num,
        foodie_color=w.foodie_color,
        profile_url=w.profile_url,
        profile_deeplink_url=w.profile_deeplink,
        profile_image_url=w.profile_image,
    )


def dish(w: wire.Dish, path: str = "dish") -> models.Dish:
    return models.Dish(id=to_int(w.dish_id, _sub(path, "dish_id")), name=w.name, price=w.price)


def daily_menu(w: wire.DailyMenu, path: str = "daily_menu") -> models.DailyMenu:
    return models.DailyMenu(
        id=to_int(w.daily_menu_id, _sub(path, "daily_menu_id")),
        name=w.name,
        start_date=parse_timestamp(w.start_date, Layout.DATETIME, _sub(path, "start_date")),
        end_date=parse_timestamp(w.end_date, Layout.DATETIME, _sub(path, "end_date")),
        dishes=unwrap_single_key_list(w.dishes, "dish", dish, _sub(path, "dishes")),
    )


def daily_menu_resp(w: wire.DailyMenuResp, path: str = "") -> models.DailyMenuResp:
    return models.DailyMenuResp(
        status=w.status,
        daily_menus=unwrap_single_key_list(w.daily_menus, "daily_menu", daily_menu, _sub(path, "daily_menus")),
    )


def restaurant_location(w: wire.RestaurantLocation, path: str = "location") -> models.RestaurantLocation:
    return models.RestaurantLocation(
        address=w.address,
        locality=w.locality,
        city=w.city,
        city_id=w.city_id,
        latitude=to_float(w.latitude, _sub(path, "latitude")),
        longitude=to_float(w.longitude, _sub(path, "longitude")),
        zipcode=to_int(w.zipcode, _sub(path, "zipcode")),
        country_id=w.country_id,
        locality_verbose=w.locality_verbose,
    )


def user_rating(w: wire.UserRating, path: str = "user_rating") -> models.UserRating:
    return models.UserRating(
        aggregate_rating=to_float(w.aggregate_rating, _sub(path, "aggregate_rating")),
        rating_text=w.rating_text,
        rating_color=w.rating_color,
        votes=to_int(w.votes, _sub(path, "votes")),
    )


def photo(w: wire.Photo, path: str = "photo") -> models.Photo:
    return models.Photo(
        url=w.url,
        thumbnail_url=w.thumb_url,
        order=w.order,
        md5sum=w.md5sum,
        photo_id=w.photo_id,
        uuid=w.uuid,
        type=w.type,
        id=w.id,
        user=_optional(w.user, user, _sub(path, "user")),
        restaurant_id=to_int(w.res_id, _sub(path, "res_id")),
        caption=w.caption,
        timestamp=parse_timestamp(w.timestamp, Layout.EPOCH, _sub(path, "timestamp")),
        friendly_time=w.friendly_time,
        width=to_int(w.width, _sub(path, "width")),
        height=to_int(w.height, _sub(path, "height")),
        comments_count=to_int(w.comments_count, _sub(path, "comments_count")),
        likes_count=to_int(w.likes_count, _sub(path, "likes_count")),
    )


def review(w: wire.Review, path: str = "review") -> models.Review:
    return models.Review(
        id=to_int(w.id, _sub(path, "id")),
        rating=to_float(w.rating, _sub(path, "rating")),
        review_text=w.review_text,
        rating_color=w.rating_color,
        review_time_friendly=w.review_time_friendly,
        rating_text=w.rating_text,
        timestamp=parse_timestamp(w.timestamp, Layout.EPOCH, _sub(path, "timestamp")),
        likes=to_int(w.likes, _sub(path, "likes")),
        user=_optional(w.user, user, _sub(path, "user")),
        comments_count=to_int(w.comments_count, _sub(path, "comments_count")),
    )


def event(w: wire.Event, path: str = "event") -> models.Event:
    return models.Event(
        id=w.event_id,
        start_date=parse_timestamp(w.start_date, Layout.DATE, _sub(path, "start_date")),
        end_date=parse_timestamp(w.end_date, Layout.DATE, _sub(path, "end_date")),
        start_time=parse_timestamp(w.start_time, Layout.TIME, _sub(path, "start_time")),
        end_time=parse_timestamp(w.end_time, Layout.TIME, _sub(path, "end_time")),
        date_added=parse_timestamp(w.date_added, Layout.DATETIME, _sub(path, "date_added")),
        is_active=zero_one_to_bool(w.is_active, _sub(path, "is_active")),
        is_valid=zero_one_to_bool(w.is_valid, _sub(path, "is_valid")),
        show_share_url=zero_one_to_bool(w.show_share_url, _sub(path, "show_share_url")),
        is_end_time_set=zero_one_to_bool(w.is_end_time_set, _sub(path, "is_end_time_set")),
        photos=unwrap_single_key_list(w.photos, "photo", photo, _sub(path, "photos")),
        restaurants=_each(w.restaurants, restaurant, _sub(path, "restaurants")),
        share_url=w.share_url,
        title=w.title,
        description=w.description,
        display_time=w.display_time,
        display_date=w.display_date,
        disclaimer=w.disclaimer,
        event_category=w.event_category,
        event_category_name=w.event_category_name,
        book_link_url=w.book_link,
        friendly_start_date=w.friendly_start_date,
        friendly_end_date=w.friendly_end_date,
        friendly_timing=w.friendly_timing_str,
    )


def restaurant(w: wire.Restaurant, path: str = "restaurant") -> models.Restaurant:
    return models.Restaurant(
        id=to_int(w.id, _sub(path, "id")),
        name=w.name,
        url=w.url,
        location=_optional(w.location, restaurant_location, _sub(path, "location")),
        cuisines=split_csv(w.cuisines, _sub(path, "cuisines")),
        average_cost_for_two=to_int(w.average_cost_for_two, _sub(path, "average_cost_for_two")),
        price_range=to_int(w.price_range, _sub(path, "price_range")),
        currency=w.currency,
        user_rating=_optional(w.user_rating, user_rating, _sub(path, "user_rating")),
        thumbnail_url=w.thumb,
        photos_url=w.photos_url,
        menu_url=w.menu_url,
        featured_image_url=w.featured_image,
        events_url=w.events_url,
        deeplink_url=w.deeplink,
        order_url=w.order_url,
        order_deeplink_url=w.order_deeplink,
        book_url=w.book_url,
        has_online_delivery=zero_one_to_bool(w.has_online_delivery, _sub(path, "has_online_delivery")),
        is_delivering_now=zero_one_to_bool(w.is_delivering_now, _sub(path, "is_delivering_now")),
        has_table_booking=zero_one_to_bool(w.has_table_booking, _sub(path, "has_table_booking")),
        switch_to_order_menu=zero_one_to_bool(w.switch_to_order_menu, _sub(path, "switch_to_order_menu")),
        offers=w.offers,
        establishment_types=w.establishment_types,
        zomato_events=unwrap_single_key_list(w.zomato_events, "event", event, _sub(path, "zomato_events")),
        api_key=w.apikey,
        r_restaurant_id=to_int(w.R.res_id, _sub(path, "R.res_id")) if w.R is not None else None,
        reviews_count=to_int(w.all_reviews_count, _sub(path, "all_reviews_count")),
        photo_count=to_int(w.photo_count, _sub(path, "photo_count")),
        phone_numbers=w.phone_numbers,
        photos=_each(w.photos, photo, _sub(path, "photos")),
        reviews=_each(w.all_reviews, review, _sub(path, "all_reviews")),
    )


def reviews_resp(w: wire.ReviewsResp, path: str = "") -> models.ReviewsResp:
    return models.ReviewsResp(
        reviews_count=to_int(w.reviews_count, _sub(path, "reviews_count")),
        reviews_start=to_int(w.reviews_start, _sub(path, "reviews_start")),
        reviews_shown=to_int(w.reviews_shown, _sub(path, "reviews_shown")),
        user_reviews=unwrap_single_key_list(w.user_reviews, "review", review, _sub(path, "user_reviews")),
        respond_to_reviews_url=w.respond_to_reviews,
    )


# ============================================================================
# Search
# ============================================================================

def search_resp(w: wire.SearchResp, path: str = "") -> models.SearchResp:
    return models.SearchResp(
        results_found=to_int(w.results_found, _sub(path, "results_found")),
        results_start=to_int(w.results_start, _sub(path, "results_start")),
        results_shown=to_int(w.results_shown, _sub(path, "results_shown")),
        restaurants=unwrap_single_key_list(w.restaurants, "restaurant", restaurant, _sub(path, "restaurants")),
    )


# ============================================================================
# Decoding
# ============================================================================

# canonical type -> (wire type, converter)
CONVERTERS: Dict[Type[models.Record], Tuple[Type[wire.WireModel], Callable[..., Any]]] = {
    models.CategoriesResp: (wire.CategoriesResp, categories_resp),
    models.CitiesResp: (wire.CitiesResp, cities_resp),
    models.CollectionsResp: (wire.CollectionsResp, collections_resp),
    models.CuisinesResp: (wire.CuisinesResp, cuisines_resp),
    models.EstablishmentsResp: (wire.EstablishmentsResp, establishments_resp),
    models.GeoCodeResp: (wire.GeoCodeResp, geocode_resp),
    models.LocationDetailsResp: (wire.LocationDetailsResp, location_details_resp),
    models.LocationsResp: (wire.LocationsResp, locations_resp),
    models.DailyMenuResp: (wire.DailyMenuResp, daily_menu_resp),
    models.Restaurant: (wire.Restaurant, restaurant),
    models.ReviewsResp: (wire.ReviewsResp, reviews_resp),
    models.SearchResp: (wire.SearchResp, search_resp),
    models.City: (wire.City, city),
    models.Location: (wire.Location, location),
    models.Event: (wire.Event, event),
    models.Photo: (wire.Photo, photo),
    models.Review: (wire.Review, review),
}


def _loc_path(loc: Tuple[Union[int, str], ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = _sub(path, part)
    return path


def decode(model: Type[R], data: Union[bytes, str, Any], endpoint: str = "") -> R:
    """Decode a response payload into the canonical ``model``.

    ``data`` is raw JSON (bytes or str) or an already parsed JSON value.

    Raises:
        DecodeError: the payload is not JSON, does not match the wire shape,
            or one of its fields cannot be converted
    """
    try:
        wire_model, convert = CONVERTERS[model]
    except KeyError:
        raise TypeError(f"no converter registered for {model.__name__}") from None

    if isinstance(data, (bytes, bytearray, str)):
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise DecodeError(f"UnmarshalJSON failed: {exc}", endpoint=endpoint) from exc

    try:
        parsed = wire_model.model_validate(data)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        raise DecodeError(first["msg"], field=_loc_path(first["loc"]) or None, endpoint=endpoint) from exc

    try:
        return convert(parsed, "")
    except DecodeError as exc:
        exc.endpoint = endpoint
        raise
