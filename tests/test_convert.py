"""Tests for the field transforms in ``zomato.convert``."""

from __future__ import annotations

from datetime import date, datetime, time, timezone

import pytest

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


def test_zero_one_to_bool_one_is_true():
    assert zero_one_to_bool(1, "has_more") is True
    assert zero_one_to_bool("1", "has_more") is True
    assert zero_one_to_bool(True, "has_more") is True


@pytest.mark.parametrize("code", [0, "0", None, "", False])
def test_zero_one_to_bool_zero_or_missing_is_absent(code):
    assert zero_one_to_bool(code, "has_more") is None


def test_zero_one_to_bool_rejects_other_codes():
    with pytest.raises(DecodeError) as excinfo:
        zero_one_to_bool(2, "city.is_state")
    assert excinfo.value.field == "city.is_state"


def test_to_int_parses_quoted_numbers():
    assert to_int("123", "votes") == 123
    assert to_int(" 42 ", "votes") == 42
    assert to_int(123, "votes") == 123
    assert to_int(12.0, "votes") == 12


def test_to_int_zero_is_a_value():
    assert to_int("0", "likes") == 0
    assert to_int(0, "likes") == 0


@pytest.mark.parametrize("value", ["", "   ", None])
def test_to_int_empty_is_absent(value):
    assert to_int(value, "votes") is None


def test_to_int_unparseable_names_field():
    with pytest.raises(DecodeError) as excinfo:
        to_int("abc", "user_rating.votes")
    assert excinfo.value.field == "user_rating.votes"
    assert "user_rating.votes" in str(excinfo.value)


@pytest.mark.parametrize("value", [True, 1.5, ["1"]])
def test_to_int_rejects_non_integers(value):
    with pytest.raises(DecodeError):
        to_int(value, "id")


def test_to_float():
    assert to_float("3.7", "aggregate_rating") == 3.7
    assert to_float(4, "aggregate_rating") == 4.0
    assert to_float("", "aggregate_rating") is None
    with pytest.raises(DecodeError):
        to_float("n/a", "aggregate_rating")


def test_to_int_list():
    assert to_int_list(["1", 2, "3"], "nearby_res") == [1, 2, 3]
    assert to_int_list(None, "nearby_res") is None
    with pytest.raises(DecodeError) as excinfo:
        to_int_list(["1", "x"], "nearby_res")
    assert excinfo.value.field == "nearby_res[1]"


def test_parse_timestamp_datetime_is_utc_instant():
    parsed = parse_timestamp("2023-01-02 15:04:05", Layout.DATETIME, "date_added")
    assert parsed == datetime(2023, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


def test_parse_timestamp_date_and_time_layouts():
    assert parse_timestamp("2018-01-10", Layout.DATE, "start_date") == date(2018, 1, 10)
    assert parse_timestamp("19:30:00", Layout.TIME, "start_time") == time(19, 30)


def test_parse_timestamp_epoch():
    parsed = parse_timestamp("1516000000", Layout.EPOCH, "timestamp")
    assert parsed == datetime.fromtimestamp(1516000000, tz=timezone.utc)
    assert parsed.year == 2018
    assert parse_timestamp(1516000000, Layout.EPOCH, "timestamp") == parsed


@pytest.mark.parametrize("value", ["", "0", None])
def test_parse_timestamp_short_or_missing_is_absent(value):
    assert parse_timestamp(value, Layout.DATETIME, "start_date") is None


def test_parse_timestamp_zero_epoch_is_absent():
    assert parse_timestamp(0, Layout.EPOCH, "timestamp") is None
    assert parse_timestamp("", Layout.EPOCH, "timestamp") is None


def test_parse_timestamp_uses_only_the_given_layout():
    # A valid date is still an error for a date-time field.
    with pytest.raises(DecodeError) as excinfo:
        parse_timestamp("2018-01-10", Layout.DATETIME, "daily_menu.start_date")
    assert excinfo.value.field == "daily_menu.start_date"


def test_parse_timestamp_malformed():
    with pytest.raises(DecodeError):
        parse_timestamp("2023-13-45 00:00:00", Layout.DATETIME, "date_added")
    with pytest.raises(DecodeError):
        parse_timestamp("yesterday", Layout.EPOCH, "timestamp")


def test_split_csv():
    assert split_csv("North Indian, Chinese,,Mughlai", "cuisines") == ["North Indian", "Chinese", "Mughlai"]
    assert split_csv("Pizza", "cuisines") == ["Pizza"]
    assert split_csv("", "cuisines") is None
    assert split_csv(None, "cuisines") is None


def test_unwrap_single_key_list_keeps_order():
    items = [{"restaurant": "a"}, {"restaurant": "b"}, {"restaurant": "c"}]
    out = unwrap_single_key_list(items, "restaurant", lambda value, path: value, "restaurants")
    assert out == ["a", "b", "c"]


def test_unwrap_single_key_list_drops_empty_wrappers():
    items = [{"restaurant": "a"}, {"restaurant": None}, {}, {"restaurant": "d"}]
    out = unwrap_single_key_list(items, "restaurant", lambda value, path: value, "restaurants")
    assert out == ["a", "d"]


def test_unwrap_single_key_list_passes_item_paths():
    seen = []
    unwrap_single_key_list(
        [{"dish": 1}, {"dish": 2}],
        "dish",
        lambda value, path: seen.append(path),
        "daily_menu.dishes",
    )
    assert seen == ["daily_menu.dishes[0].dish", "daily_menu.dishes[1].dish"]


def test_unwrap_single_key_list_missing_list_is_absent():
    assert unwrap_single_key_list(None, "restaurant", lambda value, path: value, "restaurants") is None
