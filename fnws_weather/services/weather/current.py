from __future__ import annotations

from typing import Any, Mapping, Sequence
from zoneinfo import ZoneInfo

from fnws_weather.core.errors import MalformedUpstreamData
from fnws_weather.schemas.weather import ConditionsMetadata, Forecast, Observation, ObservationMeasurements
from fnws_weather.services.weather.codes import condition_description, legacy_icon
from fnws_weather.services.weather.forecast import localize, weekday_name
from fnws_weather.services.weather.units import resolve_unit_family_label


OBSERVATION_TTL_SECONDS = 600


def parse_current_conditions(
    document: Mapping[str, Any],
    forecasts: Sequence[Forecast],
    tz: ZoneInfo,
    units: str | None,
) -> Observation:
    if not forecasts:
        raise MalformedUpstreamData("no daily forecast to take 24 hour extremes from")
    today = forecasts[0]

    try:
        current = document["current"]
        observed = localize(current["time"], tz)
        temperature = round(current["temperature_2m"])
        code = int(current["weather_code"])
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        raise MalformedUpstreamData(f"current block could not be translated: {exc!r}") from exc

    observed_time = int(observed.timestamp())
    icon = legacy_icon(code)
    return Observation(
        day_of_week=weekday_name(observed.date()),
        expire_time=observed_time + OBSERVATION_TTL_SECONDS,
        icon_code=icon,
        icon_code_extended=icon * 100,
        observed_time=observed_time,
        unit_family=resolve_unit_family_label(units),
        measurements=ObservationMeasurements(
            feels_like=temperature,
            temp=temperature,
            temp_max_24h=today.max_temp,
            temp_min_24h=today.min_temp,
        ),
        condition_text=condition_description(code),
    )


def build_conditions_metadata(
    observation: Observation,
    forecasts: Sequence[Forecast],
    units: str | None,
) -> ConditionsMetadata:
    # Known defect kept for compatibility with existing consumers: latitude and
    # longitude carry the first forecast's valid time, not the query coordinates.
    bogus_coordinate = round(float(forecasts[0].valid_time), 2)
    return ConditionsMetadata(
        expire_time_gmt=observation.expire_time,
        latitude=bogus_coordinate,
        longitude=bogus_coordinate,
        units=units,
    )
