from __future__ import annotations

import time
from typing import Any, Mapping, Sequence
from zoneinfo import ZoneInfo

from fnws_weather.schemas.weather import (
    ConditionsData,
    ConditionsMetadata,
    ConditionsSection,
    Forecast,
    ForecastDailyData,
    ForecastDailySection,
    Observation,
    ReportMetadata,
    WeatherReport,
)
from fnws_weather.services.weather.current import build_conditions_metadata, parse_current_conditions
from fnws_weather.services.weather.forecast import parse_forecasts


def assemble_report(
    observation: Observation,
    metadata: ConditionsMetadata,
    forecasts: Sequence[Forecast],
    *,
    now: float | None = None,
) -> WeatherReport:
    issued_at = int(time.time() if now is None else now)
    return WeatherReport(
        conditions=ConditionsSection(data=ConditionsData(observation=observation, metadata=metadata)),
        forecast_daily=ForecastDailySection(data=ForecastDailyData(forecasts=list(forecasts))),
        metadata=ReportMetadata(transaction_id=str(issued_at)),
    )


def translate_report(
    document: Mapping[str, Any],
    *,
    tz: ZoneInfo,
    units: str | None,
    now: float | None = None,
) -> WeatherReport:
    """Translate one parsed Open-Meteo document. Raises MalformedUpstreamData, never returns a partial report."""
    forecasts = parse_forecasts(document, tz)
    observation = parse_current_conditions(document, forecasts, tz, units)
    metadata = build_conditions_metadata(observation, forecasts, units)
    return assemble_report(observation, metadata, forecasts, now=now)
