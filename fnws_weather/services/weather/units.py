from __future__ import annotations

from fnws_weather.schemas.weather import UnitFamily


# The provider request only distinguishes imperial from everything else; the
# output document knows three unit families.

IMPERIAL_PROVIDER_UNITS = ("fahrenheit", "mph")
METRIC_PROVIDER_UNITS = ("celsius", "kmh")

UNIT_FAMILY_BY_PREFERENCE = {
    "m": UnitFamily.metric,
    "h": UnitFamily.uk_hybrid,
    "e": UnitFamily.imperial,
}


def resolve_units(preference: str | None) -> tuple[str, str]:
    """Return (temperature_unit, windspeed_unit) in Open-Meteo's vocabulary."""
    if preference == "e":
        return IMPERIAL_PROVIDER_UNITS
    return METRIC_PROVIDER_UNITS


def resolve_unit_family_label(preference: str | None) -> UnitFamily:
    if preference is None:
        return UnitFamily.metric
    return UNIT_FAMILY_BY_PREFERENCE.get(preference, UnitFamily.metric)
