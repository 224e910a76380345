"""Wire shapes: response JSON exactly as the API transmits it.

Fields with inconsistent encodings are typed loosely here (``Flag`` for 0/1
codes, ``Numeric`` for numbers that may arrive quoted, ``str`` for dates and
comma joined lists). ``zomato.normalize`` turns these into the canonical
records of ``zomato.models``. Unknown keys are ignored, including keys sitting
next to the entity in single-key list wrappers such as
``{"restaurant": {...}}``; those wrappers are the ``*Item`` models.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# 0/1 code, occasionally sent as a string or a JSON boolean
Flag = Optional[Union[bool, int, str]]

# Number that may arrive as a JSON number or a quoted string
Numeric = Optional[Union[int, float, str]]


class WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ============================================================================
# Common
# ============================================================================

class Category(WireModel):
    id: Optional[int] = None
    name: Optional[str] = None


class CategoryItem(WireModel):
    categories: Optional[Category] = None


class CategoriesResp(WireModel):
    categories: Optional[List[CategoryItem]] = None


class City(WireModel):
    id: Optional[int] = None
    name: Optional[str] = None
    country_id: Optional[int] = None
    country_name: Optional[str] = None
    country_flag_url: Optional[str] = None
    should_experiment_with: Flag = None
    discovery_enabled: Flag = None
    has_new_ad_format: Flag = None
    is_state: Flag = None
    state_id: Optional[int] = None
    state_name: Optional[str] = None
    state_code: Optional[str] = None


class CitiesResp(WireModel):
    location_suggestions: Optional[List[City]] = None
    status: Optional[str] = None
    has_more: Flag = None
    has_total: Flag = None


class Collection(WireModel):
    collection_id: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    res_count: Optional[int] = None
    image_url: Optional[str] = None
    share_url: Optional[str] = None


class CollectionItem(WireModel):
    collection: Optional[Collection] = None


class CollectionsResp(WireModel):
    collections: Optional[List[CollectionItem]] = None
    share_url: Optional[str] = None
    display_text: Optional[str] = None
    has_more: Flag = None
    has_total: Flag = None


class Cuisine(WireModel):
    cuisine_id: Optional[int] = None
    cuisine_name: Optional[str] = None


class CuisineItem(WireModel):
    cuisine: Optional[Cuisine] = None


class CuisinesResp(WireModel):
    cuisines: Optional[List[CuisineItem]] = None


class Establishment(WireModel):
    id: Optional[int] = None
    name: Optional[str] = None


class EstablishmentItem(WireModel):
    establishment: Optional[Establishment] = None


class EstablishmentsResp(WireModel):
    establishments: Optional[List[EstablishmentItem]] = None


class Popularity(WireModel):
    popularity: Numeric = None
    nightlife_index: Numeric = None
    nearby_res: Optional[List[Union[int, str]]] = None
    top_cuisines: Optional[List[str]] = None
    popularity_res: Numeric = None
    nightlife_res: Numeric = None
    subzone: Optional[str] = None
    subzone_id: Optional[int] = None
    city: Optional[str] = None


class GeoCodeResp(WireModel):
    location: Optional[Location] = None
    popularity: Optional[Popularity] = None
    link: Optional[str] = None
    nearby_restaurants: Optional[List[RestaurantItem]] = None


# ============================================================================
# Location
# ============================================================================

class Location(WireModel):
    entity_type: Optional[str] = None
    entity_id: Optional[int] = None
    title: Optional[str] = None
    latitude: Numeric = None
    longitude: Numeric = None
    city_id: Optional[int] = None
    city_name: Optional[str] = None
    country_id: Optional[int] = None
    country_name: Optional[str] = None


class LocationsResp(WireModel):
    location_suggestions: Optional[List[Location]] = None
    status: Optional[str] = None
    has_more: Flag = None
    has_total: Flag = None


class LocationDetailsResp(WireModel):
    location: Optional[Location] = None
    num_restaurant: Numeric = None
    best_rated_restaurant: Optional[List[RestaurantItem]] = None
    experts: Optional[List[UserItem]] = None


# ============================================================================
# Restaurant
# ============================================================================

class User(WireModel):
    name: Optional[str] = None
    zomato_handle: Optional[str] = None
    foodie_level: Optional[str] = None
    foodie_level_num: Optional[int] = None
    foodie_color: Optional[str] = None
    profile_url: Optional[str] = None
    profile_deeplink: Optional[str] = None
    profile_image: Optional[str] = None


class UserItem(WireModel):
    user: Optional[User] = None


class Dish(WireModel):
    dish_id: Numeric = None
    name: Optional[str] = None
    price: Optional[str] = None


class DishItem(WireModel):
    dish: Optional[Dish] = None


class DailyMenu(WireModel):
    daily_menu_id: Numeric = None
    name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    dishes: Optional[List[DishItem]] = None


class DailyMenuItem(WireModel):
    daily_menu: Optional[DailyMenu] = None


class DailyMenuResp(WireModel):
    status: Optional[str] = None
    daily_menus: Optional[List[DailyMenuItem]] = None


class RestaurantLocation(WireModel):
    address: Optional[str] = None
    locality: Optional[str] = None
    city: Optional[str] = None
    city_id: Optional[int] = None
    latitude: Numeric = None
    longitude: Numeric = None
    zipcode: Numeric = None
    country_id: Optional[int] = None
    locality_verbose: Optional[str] = None


class UserRating(WireModel):
    aggregate_rating: Numeric = None
    rating_text: Optional[str] = None
    rating_color: Optional[str] = None
    votes: Numeric = None


class Photo(WireModel):
    url: Optional[str] = None
    thumb_url: Optional[str] = None
    order: Optional[int] = None
    md5sum: Optional[str] = None
    photo_id: Optional[int] = None
    uuid: Optional[int] = None
    type: Optional[str] = None
    id: Optional[str] = None
    user: Optional[User] = None
    res_id: Numeric = None
    caption: Optional[str] = None
    timestamp: Numeric = None
    friendly_time: Optional[str] = None
    width: Numeric = None
    height: Numeric = None
    comments_count: Numeric = None
    likes_count: Numeric = None


class PhotoItem(WireModel):
    photo: Optional[Photo] = None


class Review(WireModel):
    id: Numeric = None
    rating: Numeric = None
    review_text: Optional[str] = None
    rating_color: Optional[str] = None
    review_time_friendly: Optional[str] = None
    rating_text: Optional[str] = None
    timestamp: Numeric = None
    likes: Numeric = None
    user: Optional[User] = None
    comments_count: Numeric = None


class ReviewItem(WireModel):
    review: Optional[Review] = None


class Event(WireModel):
    event_id: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    end_time: Optional[str] = None
    start_time: Optional[str] = None
    date_added: Optional[str] = None
    is_active: Flag = None
    is_valid: Flag = None
    show_share_url: Flag = None
    is_end_time_set: Flag = None
    photos: Optional[List[PhotoItem]] = None
    restaurants: Optional[List[Restaurant]] = None
    share_url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    display_time: Optional[str] = None
    display_date: Optional[str] = None
    disclaimer: Optional[str] = None
    event_category: Optional[int] = None
    event_category_name: Optional[str] = None
    book_link: Optional[str] = None
    friendly_start_date: Optional[str] = None
    friendly_end_date: Optional[str] = None
    friendly_timing_str: Optional[str] = None


class EventItem(WireModel):
    event: Optional[Event] = None


class RestaurantIDs(WireModel):
    res_id: Numeric = None


class Restaurant(WireModel):
    id: Numeric = None
    name: Optional[str] = None
    url: Optional[str] = None
    location: Optional[RestaurantLocation] = None
    cuisines: Optional[str] = None
    average_cost_for_two: Numeric = None
    price_range: Numeric = None
    currency: Optional[str] = None
    user_rating: Optional[UserRating] = None
    thumb: Optional[str] = None
    photos_url: Optional[str] = None
    menu_url: Optional[str] = None
    featured_image: Optional[str] = None
    events_url: Optional[str] = None
    deeplink: Optional[str] = None
    order_url: Optional[str] = None
    order_deeplink: Optional[str] = None
    book_url: Optional[str] = None
    has_online_delivery: Flag = None
    is_delivering_now: Flag = None
    has_table_booking: Flag = None
    switch_to_order_menu: Flag = None
    offers: Optional[List[Any]] = None
    establishment_types: Optional[List[Any]] = None
    zomato_events: Optional[List[EventItem]] = None
    apikey: Optional[str] = None
    R: Optional[RestaurantIDs] = None
    all_reviews_count: Numeric = None
    photo_count: Numeric = None
    phone_numbers: Optional[str] = None
    photos: Optional[List[Photo]] = None
    all_reviews: Optional[List[Review]] = None


class RestaurantItem(WireModel):
    restaurant: Optional[Restaurant] = None


class ReviewsResp(WireModel):
    reviews_count: Numeric = None
    reviews_start: Numeric = None
    reviews_shown: Numeric = None
    user_reviews: Optional[List[ReviewItem]] = None
    respond_to_reviews: Optional[str] = Field(None, alias="Respond to reviews via Zomato Dashboard")


# ============================================================================
# Search
# ============================================================================

class SearchResp(WireModel):
    results_found: Numeric = None
    results_start: Numeric = None
    results_shown: Numeric = None
    restaurants: Optional[List[RestaurantItem]] = None


for _model in (Event, EventItem, Restaurant, RestaurantItem, GeoCodeResp, LocationDetailsResp, SearchResp):
    _model.model_rebuild()
