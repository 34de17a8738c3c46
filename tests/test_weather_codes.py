import pytest

from fnws_weather.services.weather.codes import (
    UNKNOWN_CONDITION_ICON,
    UNKNOWN_CONDITION_TEXT,
    WEATHER_CODE_ICON,
    WEATHER_CODE_TEXT,
    compass_direction,
    condition_description,
    legacy_icon,
)


DOCUMENTED_CODES = [
    (0, "Clear sky", 31),
    (1, "Mainly clear", 31),
    (2, "Partly cloudy", 29),
    (3, "Overcast", 28),
    (45, "Fog", 27),
    (48, "Depositing rime fog", 27),
    (51, "Light drizzle", 11),
    (53, "Moderate drizzle", 11),
    (55, "Dense drizzle", 11),
    (56, "Light freezing drizzle", 11),
    (57, "Dense freezing drizzle", 11),
    (61, "Slight rain", 11),
    (63, "Moderate rain", 11),
    (65, "Heavy rain", 11),
    (66, "Light freezing rain", 11),
    (67, "Heavy freezing rain", 11),
    (71, "Slight snow fall", 41),
    (73, "Moderate snow fall", 41),
    (75, "Heavy snow fall", 41),
    (77, "Snow grains", 41),
    (80, "Slight rain showers", 11),
    (81, "Moderate rain showers", 11),
    (82, "Violent rain showers", 11),
    (85, "Slight snow showers", 41),
    (86, "Heavy snow showers", 41),
    (95, "Thunderstorm", 1),
    (96, "Thunderstorm with slight hail", 0),
    (99, "Thunderstorm with heavy hail", 0),
]


@pytest.mark.parametrize(("code", "text", "icon"), DOCUMENTED_CODES)
def test_known_codes(code, text, icon):
    assert condition_description(code) == text
    assert legacy_icon(code) == icon


@pytest.mark.parametrize("code", [4, 50, 100, -1, 1000])
def test_unknown_codes_fall_back(code):
    assert condition_description(code) == "Unknown weather condition"
    assert legacy_icon(code) == 28


def test_tables_cover_the_same_codes():
    assert set(WEATHER_CODE_TEXT) == set(WEATHER_CODE_ICON)
    assert UNKNOWN_CONDITION_TEXT == "Unknown weather condition"
    assert UNKNOWN_CONDITION_ICON == 28


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        WEATHER_CODE_TEXT[0] = "Sunny"  # type: ignore[index]


@pytest.mark.parametrize(
    ("degrees", "label"),
    [(0, "N"), (22, "N"), (348, "N"), (359, "N"), (360, "N"), (23, "NE"), (67, "NE"), (90, "E"), (180, "S"), (270, "W"), (315, "NW")],
)
def test_compass_direction(degrees, label):
    assert compass_direction(degrees) == label


def test_compass_direction_is_periodic():
    for degrees in range(0, 360):
        assert compass_direction(degrees) == compass_direction(degrees + 360)


def test_documented_codes_are_the_whole_table():
    assert {code for code, _, _ in DOCUMENTED_CODES} == set(WEATHER_CODE_TEXT)
    assert len(DOCUMENTED_CODES) == 28
