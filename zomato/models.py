"""Canonical records returned by the client.

Every field is optional: ``None`` means the API did not send a usable value.
Records are immutable once built.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# ============================================================================
# Common
# ============================================================================

class Category(Record):
    """Category type, e.g. Delivery or Dine-out."""
    id: Optional[int] = None
    name: Optional[str] = None


class CategoriesResp(Record):
    categories: Optional[List[Category]] = None


class City(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    country_id: Optional[int] = None
    country_name: Optional[str] = None
    country_flag_url: Optional[str] = None
    should_experiment_with: Optional[bool] = None
    discovery_enabled: Optional[bool] = None
    has_new_ad_format: Optional[bool] = None
    # Whether this location is a state
    is_state: Optional[bool] = None
    state_id: Optional[int] = None
    state_name: Optional[str] = None
    state_code: Optional[str] = None


class CitiesResp(Record):
    location_suggestions: Optional[List[City]] = None
    status: Optional[str] = None
    has_more: Optional[bool] = None
    has_total: Optional[bool] = None


class Collection(Record):
    """Curated list of restaurants, e.g. "Trending this week"."""
    id: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    restaurants_count: Optional[int] = None
    image_url: Optional[str] = None
    # Short URL for apps and social sharing
    share_url: Optional[str] = None


class CollectionsResp(Record):
    collections: Optional[List[Collection]] = None
    share_url: Optional[str] = None
    display_text: Optional[str] = None
    has_more: Optional[bool] = None
    has_total: Optional[bool] = None


class Cuisine(Record):
    id: Optional[int] = None
    name: Optional[str] = None


class CuisinesResp(Record):
    cuisines: Optional[List[Cuisine]] = None


class Establishment(Record):
    id: Optional[int] = None
    name: Optional[str] = None


class EstablishmentsResp(Record):
    establishments: Optional[List[Establishment]] = None


class Popularity(Record):
    """Foodie and nightlife indices of a locality, each out of 5.00."""
    popularity: Optional[float] = None
    nightlife_index: Optional[float] = None
    nearby_restaurant_ids: Optional[List[int]] = None
    top_cuisines: Optional[List[str]] = None
    popularity_restaurant: Optional[int] = None
    nightlife_restaurant: Optional[int] = None
    subzone: Optional[str] = None
    subzone_id: Optional[int] = None
    city: Optional[str] = None


class GeoCodeResp(Record):
    location: Optional[Location] = None
    popularity: Optional[Popularity] = None
    link_url: Optional[str] = None
    nearby_restaurants: Optional[List[Restaurant]] = None


# ============================================================================
# Location
# ============================================================================

class Location(Record):
    """A location; ``(entity_id, entity_type)`` identifies it uniquely."""
    # One of city, zone, subzone, landmark, group, metro, street
    entity_type: Optional[str] = None
    entity_id: Optional[int] = None
    title: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    city_id: Optional[int] = None
    city_name: Optional[str] = None
    country_id: Optional[int] = None
    country_name: Optional[str] = None


class LocationsResp(Record):
    location_suggestions: Optional[List[Location]] = None
    status: Optional[str] = None
    has_more: Optional[bool] = None
    has_total: Optional[bool] = None


class LocationDetailsResp(Record):
    location: Optional[Location] = None
    number_of_restaurants: Optional[int] = None
    best_rated_restaurants: Optional[List[Restaurant]] = None
    experts: Optional[List[User]] = None


# ============================================================================
# Restaurant
# ============================================================================

class User(Record):
    name: Optional[str] = None
    # User's @handle; uniquely identifies a user
    zomato_handle: Optional[str] = None
    foodie_level: Optional[str] = None
    # Ranges from 0 to 10
    foodie_level_number: Optional[int] = None
    foodie_color: Optional[str] = None
    profile_url: Optional[str] = None
    profile_deeplink_url: Optional[str] = None
    profile_image_url: Optional[str] = None


class Dish(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    price: Optional[str] = None


class DailyMenu(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    dishes: Optional[List[Dish]] = None


class DailyMenuResp(Record):
    status: Optional[str] = None
    daily_menus: Optional[List[DailyMenu]] = None


class RestaurantLocation(Record):
    address: Optional[str] = None
    locality: Optional[str] = None
    city: Optional[str] = None
    city_id: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    zipcode: Optional[int] = None
    country_id: Optional[int] = None
    locality_verbose: Optional[str] = None


class UserRating(Record):
    # 0.0 to 5.0 in increments of 0.1
    aggregate_rating: Optional[float] = None
    rating_text: Optional[str] = None
    rating_color: Optional[str] = None
    votes: Optional[int] = None


class Photo(Record):
    url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    order: Optional[int] = None
    md5sum: Optional[str] = None
    photo_id: Optional[int] = None
    uuid: Optional[int] = None
    type: Optional[str] = None
    id: Optional[str] = None
    user: Optional[User] = None
    restaurant_id: Optional[int] = None
    caption: Optional[str] = None
    timestamp: Optional[datetime] = None
    friendly_time: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    comments_count: Optional[int] = None
    likes_count: Optional[int] = None


class Review(Record):
    id: Optional[int] = None
    # 0 to 5 in increments of 0.5
    rating: Optional[float] = None
    review_text: Optional[str] = None
    rating_color: Optional[str] = None
    review_time_friendly: Optional[str] = None
    rating_text: Optional[str] = None
    timestamp: Optional[datetime] = None
    likes: Optional[int] = None
    user: Optional[User] = None
    comments_count: Optional[int] = None


class Event(Record):
    id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    date_added: Optional[datetime] = None
    is_active: Optional[bool] = None
    is_valid: Optional[bool] = None
    show_share_url: Optional[bool] = None
    is_end_time_set: Optional[bool] = None
    photos: Optional[List[Photo]] = None
    restaurants: Optional[List[Restaurant]] = None
    share_url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    display_time: Optional[str] = None
    display_date: Optional[str] = None
    disclaimer: Optional[str] = None
    event_category: Optional[int] = None
    event_category_name: Optional[str] = None
    book_link_url: Optional[str] = None
    friendly_start_date: Optional[str] = None
    friendly_end_date: Optional[str] = None
    friendly_timing: Optional[str] = None


class Restaurant(Record):
    """Restaurant details.

    ``reviews_count``, ``photo_count``, ``phone_numbers``, ``photos`` and
    ``reviews`` are only sent to accounts with partner access.
    """
    id: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None
    location: Optional[RestaurantLocation] = None
    cuisines: Optional[List[str]] = None
    average_cost_for_two: Optional[int] = None
    # 1 being pocket friendly and 4 being the costliest
    price_range: Optional[int] = None
    currency: Optional[str] = None
    user_rating: Optional[UserRating] = None
    thumbnail_url: Optional[str] = None
    photos_url: Optional[str] = None
    menu_url: Optional[str] = None
    featured_image_url: Optional[str] = None
    events_url: Optional[str] = None
    deeplink_url: Optional[str] = None
    order_url: Optional[str] = None
    order_deeplink_url: Optional[str] = None
    book_url: Optional[str] = None
    has_online_delivery: Optional[bool] = None
    # Only meaningful when has_online_delivery is set
    is_delivering_now: Optional[bool] = None
    has_table_booking: Optional[bool] = None
    switch_to_order_menu: Optional[bool] = None
    # Undocumented upstream; passed through untouched
    offers: Optional[List[Any]] = None
    establishment_types: Optional[List[Any]] = None
    zomato_events: Optional[List[Event]] = None
    api_key: Optional[str] = None
    r_restaurant_id: Optional[int] = None
    reviews_count: Optional[int] = None
    photo_count: Optional[int] = None
    # Comma separated, as sent
    phone_numbers: Optional[str] = None
    photos: Optional[List[Photo]] = None
    reviews: Optional[List[Review]] = None


class ReviewsResp(Record):
    reviews_count: Optional[int] = None
    reviews_start: Optional[int] = None
    reviews_shown: Optional[int] = None
    user_reviews: Optional[List[Review]] = None
    respond_to_reviews_url: Optional[str] = None


# ============================================================================
# Search
# ============================================================================

class SearchResp(Record):
    results_found: Optional[int] = None
    # Offset of the first result; used for paging
    results_start: Optional[int] = None
    results_shown: Optional[int] = None
    restaurants: Optional[List[Restaurant]] = None


for _model in (Event, Restaurant, GeoCodeResp, LocationDetailsResp, SearchResp):
    _model.model_rebuild()
