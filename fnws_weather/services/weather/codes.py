from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


UNKNOWN_CONDITION_TEXT = "Unknown weather condition"
UNKNOWN_CONDITION_ICON = 28


# WMO weather interpretation codes as reported by Open-Meteo.
WEATHER_CODE_TEXT: Mapping[int, str] = MappingProxyType(
    {
        0: "Clear sky",
        1: "Mainly clear",
        2: "Partly cloudy",
        3: "Overcast",
        45: "Fog",
        48: "Depositing rime fog",
        51: "Light drizzle",
        53: "Moderate drizzle",
        55: "Dense drizzle",
        56: "Light freezing drizzle",
        57: "Dense freezing drizzle",
        61: "Slight rain",
        63: "Moderate rain",
        65: "Heavy rain",
        66: "Light freezing rain",
        67: "Heavy freezing rain",
        71: "Slight snow fall",
        73: "Moderate snow fall",
        75: "Heavy snow fall",
        77: "Snow grains",
        80: "Slight rain showers",
        81: "Moderate rain showers",
        82: "Violent rain showers",
        85: "Slight snow showers",
        86: "Heavy snow showers",
        95: "Thunderstorm",
        96: "Thunderstorm with slight hail",
        99: "Thunderstorm with heavy hail",
    }
)


# Icon ids of the watch face icon set. 96 and 99 map to 0, which is a real icon.
WEATHER_CODE_ICON: Mapping[int, int] = MappingProxyType(
    {
        0: 31,
        1: 31,
        2: 29,
        3: 28,
        45: 27,
        48: 27,
        51: 11,
        53: 11,
        55: 11,
        56: 11,
        57: 11,
        61: 11,
        63: 11,
        65: 11,
        66: 11,
        67: 11,
        80: 11,
        81: 11,
        82: 11,
        71: 41,
        73: 41,
        75: 41,
        77: 41,
        85: 41,
        86: 41,
        95: 1,
        96: 0,
        99: 0,
    }
)


COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def condition_description(code: int) -> str:
    return WEATHER_CODE_TEXT.get(code, UNKNOWN_CONDITION_TEXT)


def legacy_icon(code: int) -> int:
    return WEATHER_CODE_ICON.get(code, UNKNOWN_CONDITION_ICON)


def compass_direction(degrees: int) -> str:
    """Bucket a bearing into one of eight 45 degree sectors centred on the compass points."""
    return COMPASS_POINTS[round(degrees / 45) % 8]
