from __future__ import annotations

import logging
from typing import Any

import httpx

from fnws_weather.core.config import get_settings
from fnws_weather.core.errors import MalformedUpstreamData, UpstreamUnavailable
from fnws_weather.schemas.weather import WeatherQuery, WeatherReport
from fnws_weather.services.weather.report import translate_report
from fnws_weather.services.weather.timezones import resolve_timezone
from fnws_weather.services.weather.units import resolve_units


logger = logging.getLogger(__name__)


DAILY_FIELDS = [
    "temperature_2m_min",
    "temperature_2m_max",
    "apparent_temperature_min",
    "sunrise",
    "sunset",
    "precipitation_probability_max",
    "weather_code",
]

CURRENT_FIELDS = [
    "temperature_2m",
    "wind_speed_10m",
    "wind_direction_10m",
    "weather_code",
]


def build_request_params(
    *,
    lat: float,
    lon: float,
    timezone: str,
    temperature_unit: str,
    windspeed_unit: str,
) -> dict[str, str]:
    return {
        "latitude": f"{lat:.2f}",
        "longitude": f"{lon:.2f}",
        "daily": ",".join(DAILY_FIELDS),
        "current": ",".join(CURRENT_FIELDS),
        "timezone": timezone,
        "temperature_unit": temperature_unit,
        "windspeed_unit": windspeed_unit,
    }


async def fetch_forecast_document(
    client: httpx.AsyncClient,
    *,
    url: str,
    params: dict[str, str],
) -> dict[str, Any]:
    try:
        resp = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        logger.warning("Open-Meteo request failed: %s", type(exc).__name__)
        raise UpstreamUnavailable(f"Weather upstream error: {type(exc).__name__}") from exc

    if not resp.is_success:
        logger.warning("Open-Meteo answered with status %s", resp.status_code)
        raise UpstreamUnavailable(f"Weather upstream status {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as exc:
        raise MalformedUpstreamData("Weather upstream returned a non-JSON body") from exc
    if not isinstance(data, dict):
        raise MalformedUpstreamData("Weather upstream returned an unexpected JSON document")
    return data


async def get_weather_report(client: httpx.AsyncClient, *, query: WeatherQuery) -> WeatherReport:
    settings = get_settings()
    tz = resolve_timezone(query.latitude, query.longitude)
    temperature_unit, windspeed_unit = resolve_units(query.units)

    logger.info(
        "Getting weather forecast for %s, %s in %s with units %s",
        query.latitude,
        query.longitude,
        tz.key,
        query.units,
    )

    params = build_request_params(
        lat=query.latitude,
        lon=query.longitude,
        timezone=tz.key,
        temperature_unit=temperature_unit,
        windspeed_unit=windspeed_unit,
    )
    document = await fetch_forecast_document(client, url=settings.open_meteo_url, params=params)
    return translate_report(document, tz=tz, units=query.units)
