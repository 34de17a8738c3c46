from __future__ import annotations

from datetime import date, datetime, timezone as dt_timezone
from typing import Any, Mapping
from zoneinfo import ZoneInfo

from fnws_weather.core.errors import MalformedUpstreamData
from fnws_weather.schemas.weather import Forecast
from fnws_weather.services.weather.codes import condition_description, legacy_icon


SECONDS_PER_DAY = 86400

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

DAILY_COLUMNS = (
    "time",
    "temperature_2m_min",
    "temperature_2m_max",
    "sunrise",
    "sunset",
    "weather_code",
)


def weekday_name(day: date) -> str:
    return WEEKDAYS[day.weekday()]


def localize(value: str, tz: ZoneInfo) -> datetime:
    """Attach `tz` to a provider wall-clock timestamp, using the offset in force at that instant."""
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def format_local(value: str, tz: ZoneInfo) -> str:
    return localize(value, tz).isoformat(timespec="seconds")


def _read_columns(document: Mapping[str, Any]) -> list[list[Any]]:
    try:
        daily = document["daily"]
        columns = [list(daily[name]) for name in DAILY_COLUMNS]
    except (KeyError, TypeError) as exc:
        raise MalformedUpstreamData(f"daily block is missing {exc}") from exc

    lengths = {name: len(column) for name, column in zip(DAILY_COLUMNS, columns)}
    if len(set(lengths.values())) > 1:
        raise MalformedUpstreamData(f"daily arrays differ in length: {lengths}")
    return columns


def _translate_day(
    day: str,
    min_temp: float,
    max_temp: float,
    sunrise: str,
    sunset: str,
    code: int,
    *,
    tz: ZoneInfo,
) -> Forecast:
    parsed = date.fromisoformat(day)
    valid_time = int(datetime(parsed.year, parsed.month, parsed.day, tzinfo=dt_timezone.utc).timestamp())
    code_int = int(code)
    return Forecast(
        day_of_week=weekday_name(parsed),
        expire_time=valid_time + SECONDS_PER_DAY,
        valid_time=valid_time,
        max_temp=round(max_temp),
        min_temp=round(min_temp),
        sunrise_local=format_local(sunrise, tz),
        sunset_local=format_local(sunset, tz),
        icon_code=legacy_icon(code_int),
        condition_text=condition_description(code_int),
        timezone=tz.key,
    )


def parse_forecasts(document: Mapping[str, Any], tz: ZoneInfo) -> list[Forecast]:
    """Turn Open-Meteo's column-oriented daily block into one Forecast per day, in order."""
    columns = _read_columns(document)
    try:
        return [_translate_day(*row, tz=tz) for row in zip(*columns)]
    except (TypeError, ValueError, OverflowError) as exc:
        raise MalformedUpstreamData(f"daily entry could not be translated: {exc}") from exc
