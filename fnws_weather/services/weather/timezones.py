from __future__ import annotations

import logging
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timezonefinder import TimezoneFinder

from fnws_weather.core.errors import TimezoneLookupFailure


logger = logging.getLogger(__name__)

UTC = ZoneInfo("UTC")


@lru_cache(maxsize=1)
def get_timezone_finder() -> TimezoneFinder:
    return TimezoneFinder()


def lookup_timezone(lat: float, lon: float) -> ZoneInfo:
    try:
        name = get_timezone_finder().timezone_at(lng=lon, lat=lat)
    except ValueError as exc:
        raise TimezoneLookupFailure(f"no timezone for ({lat}, {lon}): {exc}") from exc
    if not name:
        raise TimezoneLookupFailure(f"no timezone for ({lat}, {lon})")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise TimezoneLookupFailure(f"unknown timezone {name!r} for ({lat}, {lon})") from exc


def resolve_timezone(lat: float, lon: float) -> ZoneInfo:
    try:
        return lookup_timezone(lat, lon)
    except TimezoneLookupFailure as exc:
        logger.warning("Falling back to UTC: %s", exc.detail)
        return UTC
