"""Field transforms that repair the API's wire encodings.

Every function takes the raw wire value plus the dotted path of the field it
came from; the path is only used to name the field in a ``DecodeError``.
``None`` is the absent marker throughout: a missing value never turns into
``0``, ``False`` or ``""``.
"""

from __future__ import annotations

import enum
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Iterable, List, Mapping, Optional, TypeVar, Union

from zomato.errors import DecodeError

T = TypeVar("T")
U = TypeVar("U")

Timestamp = Union[date, time, datetime]


class Layout(enum.Enum):
    """The single timestamp format a field is transmitted in."""

    DATE = "%Y-%m-%d"
    TIME = "%H:%M:%S"
    DATETIME = "%Y-%m-%d %H:%M:%S"
    EPOCH = "epoch"


def zero_one_to_bool(code: Any, field: str) -> Optional[bool]:
    """Map the API's 0/1 flags: 1 is ``True``, 0 or missing is absent.

    The wire format cannot tell "false" apart from "not sent", so 0 never
    becomes ``False``.
    """
    if code is None or code is False or code == "":
        return None
    if code is True:
        return True
    if isinstance(code, int):
        if code == 1:
            return True
        if code == 0:
            return None
    if isinstance(code, str):
        if code.strip() == "1":
            return True
        if code.strip() == "0":
            return None
    raise DecodeError(f"expected 0 or 1, got {code!r}", field=field)


def _as_number_text(value: Any, field: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise DecodeError(f"expected a number, got {value!r}", field=field)
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return value.strip() or None
    raise DecodeError(f"expected a number, got {type(value).__name__}", field=field)


def to_int(value: Any, field: str) -> Optional[int]:
    """Parse an integer sent as a number or a quoted string."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise DecodeError(f"expected an integer, got {value!r}", field=field)
    text = _as_number_text(value, field)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError as exc:
        raise DecodeError(str(exc), field=field) from exc


def to_float(value: Any, field: str) -> Optional[float]:
    """Parse a float sent as a number or a quoted string."""
    text = _as_number_text(value, field)
    if text is None:
        return None
    try:
        return float(text)
    except ValueError as exc:
        raise DecodeError(str(exc), field=field) from exc


def to_int_list(values: Optional[Iterable[Any]], field: str) -> Optional[List[int]]:
    if values is None:
        return None
    out: List[int] = []
    for i, value in enumerate(values):
        parsed = to_int(value, f"{field}[{i}]")
        if parsed is not None:
            out.append(parsed)
    return out


def parse_timestamp(value: Any, layout: Layout, field: str) -> Optional[Timestamp]:
    """Parse ``value`` with exactly one ``layout``.

    Strings of length 1 or less are absent, as is the zero epoch. DATE gives
    a ``date``, TIME a ``time``; DATETIME and EPOCH give UTC datetimes.
    """
    if value is None:
        return None

    if layout is Layout.EPOCH:
        seconds = to_int(value, field)
        if not seconds:
            return None
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise DecodeError(str(exc), field=field) from exc

    if not isinstance(value, str):
        raise DecodeError(f"expected a string, got {type(value).__name__}", field=field)
    if len(value) <= 1:
        return None

    try:
        parsed = datetime.strptime(value, layout.value)
    except ValueError as exc:
        raise DecodeError(str(exc), field=field) from exc

    if layout is Layout.DATE:
        return parsed.date()
    if layout is Layout.TIME:
        return parsed.time()
    return parsed.replace(tzinfo=timezone.utc)


def split_csv(value: Optional[str], field: str) -> Optional[List[str]]:
    """Split a comma joined string, e.g. ``"North Indian, Chinese"``."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"expected a string, got {type(value).__name__}", field=field)
    items = [item.strip() for item in value.split(",")]
    items = [item for item in items if item]
    return items or None


def unwrap_single_key_list(
    items: Optional[Iterable[Any]],
    key: str,
    convert: Callable[[T, str], U],
    field: str,
) -> Optional[List[U]]:
    """Flatten ``[{key: value}, ...]`` into converted values, keeping order.

    Wrappers are mappings or wire models holding the entity under ``key``;
    any other keys are ignored. Wrappers without a value under ``key`` are
    dropped.
    """
    if items is None:
        return None
    out: List[U] = []
    for i, wrapper in enumerate(items):
        if wrapper is None:
            continue
        if isinstance(wrapper, Mapping):
            inner = wrapper.get(key)
        else:
            inner = getattr(wrapper, key, None)
        if inner is None:
            continue
        out.append(convert(inner, f"{field}[{i}].{key}"))
    return out
