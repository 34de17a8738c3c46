from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    computed_field,
    field_serializer,
    model_serializer,
)


# Legacy consumers read the document by these exact key names. Attributes carry
# descriptive names and serialize under the legacy key via `alias`.


class UnitFamily(str, Enum):
    metric = "metric"
    uk_hybrid = "uk_hybrid"
    imperial = "imperial"


class WeatherQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    units: str | None = None


class DayPart(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="daypart_name")
    period_indicator: str = Field(..., alias="day_ind")
    valid_time_local: str = Field(..., alias="fcst_valid_local")
    icon_code: int
    condition_text: str = Field(..., alias="phrase_12char")
    temperature: int = Field(..., alias="temp")

    @computed_field(alias="alt_daypart_name")
    @property
    def alt_name(self) -> str:
        return self.name

    @computed_field(alias="long_daypart_name")
    @property
    def long_name(self) -> str:
        return self.name

    @computed_field(alias="fcst_valid")
    @property
    def valid_time(self) -> int:
        return int(datetime.fromisoformat(self.valid_time_local).timestamp())

    @computed_field
    @property
    def golf_category(self) -> str:
        return "boring sports"

    @computed_field(alias="icon_code_extd")
    @property
    def icon_code_extended(self) -> int:
        return self.icon_code * 100

    @computed_field
    @property
    def phrase_22char(self) -> str:
        return self.condition_text

    @computed_field
    @property
    def phrase_32char(self) -> str:
        return self.condition_text

    @computed_field(alias="temp_phrase")
    @property
    def temperature_phrase(self) -> str:
        if self.period_indicator == "D":
            return f"High of {self.temperature}°"
        if self.period_indicator == "N":
            return f"Low of {self.temperature}°"
        return f"{self.temperature}°"

    @computed_field
    @property
    def narrative(self) -> str:
        return f"{self.condition_text} with a {self.temperature_phrase}."


class Forecast(BaseModel):
    """One provider day, with day and night halves derived on read."""

    model_config = ConfigDict(populate_by_name=True)

    day_of_week: str = Field(..., alias="dow")
    expire_time: int = Field(..., alias="expire_time_gmt", description="Epoch seconds.")
    valid_time: int = Field(..., alias="fcst_valid", description="UTC midnight of the day, epoch seconds.")
    max_temp: int
    min_temp: int
    sunrise_local: str = Field(..., alias="sunrise")
    sunset_local: str = Field(..., alias="sunset")
    icon_code: int
    condition_text: str = Field(..., alias="weathercode")
    timezone: str = Field(..., description="IANA timezone id.")

    @computed_field
    @property
    def day(self) -> DayPart:
        return DayPart(
            name=self.day_of_week,
            period_indicator="D",
            valid_time_local=self.sunrise_local,
            icon_code=self.icon_code,
            condition_text=self.condition_text,
            temperature=self.max_temp,
        )

    @computed_field
    @property
    def night(self) -> DayPart:
        return DayPart(
            name=self.day_of_week,
            period_indicator="N",
            valid_time_local=self.sunset_local,
            icon_code=self.icon_code,
            condition_text=self.condition_text,
            temperature=self.min_temp,
        )

    @computed_field(alias="fcst_valid_local")
    @property
    def valid_time_local(self) -> str:
        moment = datetime.fromtimestamp(self.valid_time, tz=ZoneInfo(self.timezone))
        return moment.isoformat(timespec="seconds")


class ObservationMeasurements(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    feels_like: int
    temp: int
    temp_max_24h: int = Field(..., alias="temp_max_24hour")
    temp_min_24h: int = Field(..., alias="temp_min_24hour")


class Observation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    record_class: str = Field("observation", alias="class")
    day_ind: str = "D"
    day_of_week: str = Field(..., alias="dow")
    expire_time: int = Field(..., alias="expire_time_gmt")
    icon_code: int
    icon_code_extended: int = Field(..., alias="icon_extd")
    observed_time: int = Field(..., alias="obs_time")
    unit_family: UnitFamily = Field(..., exclude=True)
    measurements: ObservationMeasurements
    condition_text: str = Field(..., alias="phrase_12char")

    @computed_field
    @property
    def phrase_22char(self) -> str:
        return self.condition_text

    @computed_field
    @property
    def phrase_32char(self) -> str:
        return self.condition_text

    @model_serializer(mode="wrap")
    def _key_measurements_by_unit_family(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {(self.unit_family.value if key == "measurements" else key): value for key, value in data.items()}


class ConditionsMetadata(BaseModel):
    expire_time_gmt: int
    language: str = "en_US"
    latitude: float
    longitude: float
    status_code: int = 200
    transaction_id: str = "lol!"
    units: str | None = None
    version: str = "1"

    @field_serializer("latitude", "longitude")
    def _whole_numbers_without_fraction(self, value: float) -> float | int:
        return int(value) if value.is_integer() else value


class ConditionsData(BaseModel):
    observation: Observation
    metadata: ConditionsMetadata


class ConditionsSection(BaseModel):
    data: ConditionsData
    errors: bool = False


class ForecastDailyData(BaseModel):
    forecasts: list[Forecast] = Field(default_factory=list)


class ForecastDailySection(BaseModel):
    data: ForecastDailyData
    errors: bool = False


class ReportMetadata(BaseModel):
    version: int = 2
    transaction_id: str


class WeatherReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conditions: ConditionsSection
    forecast_daily: ForecastDailySection = Field(..., alias="fcstdaily7")
    metadata: ReportMetadata

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
