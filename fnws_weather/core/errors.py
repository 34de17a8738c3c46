from __future__ import annotations


class WeatherAdapterError(Exception):
    """Base for failures that abort a weather request."""

    status_code: int = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class UpstreamUnavailable(WeatherAdapterError):
    """Open-Meteo could not be reached or answered with a non-2xx status."""

    status_code = 502


class MalformedUpstreamData(WeatherAdapterError):
    """The upstream document is missing fields or cannot be translated."""

    status_code = 502


class TimezoneLookupFailure(WeatherAdapterError):
    """No timezone could be resolved for a coordinate.

    Recovered inside the timezone resolver; never reaches a client.
    """
