"""Typed models for OpenWeather 2.5 ``weather`` and ``forecast`` responses.

Raw response models mirror the JSON payload and carry the defaults the
dashboard relies on; ``to_current`` / ``to_samples`` turn them into the
immutable records the rest of the application works with.
"""

from __future__ import annotations

from datetime import datetime, tzinfo

from pydantic import BaseModel, ConfigDict, Field, model_validator

from weatherdesk.models.base import TimeStampModel
from weatherdesk.utils.time import TimeUtils

# Provider code for "clear sky", used when a payload omits the condition
CLEAR_SKY_CODE = 800

# Fragment of ``dt_txt`` that marks the provider's noon forecast slot
MIDDAY_MARKER = "12:00:00"

# ─────────────────────────── primitives ──────────────────────────────────────


class WeatherCondition(BaseModel):
    """Weather condition information from OpenWeather."""

    id: int = CLEAR_SKY_CODE
    main: str = ""
    description: str = "Unknown"
    icon: str = ""

    model_config = ConfigDict(extra="ignore")


def _primary_condition(conditions: list[WeatherCondition]) -> WeatherCondition:
    return conditions[0] if conditions else WeatherCondition()


# ─────────────────────────── current weather ─────────────────────────────────


class MainBlock(BaseModel):
    """``main`` block of the current weather payload."""

    temp: float
    feels_like: float | None = None
    humidity: float = 0
    pressure: float = 0

    @model_validator(mode="after")
    def default_feels_like(self) -> MainBlock:
        if self.feels_like is None:
            self.feels_like = self.temp
        return self


class WindBlock(BaseModel):
    speed: float = 0


class SysBlock(TimeStampModel):
    """Sunrise and sunset; a zero timestamp means "not reported"."""

    sunrise: datetime | None = None
    sunset: datetime | None = None

    _validate_sunrise = TimeStampModel.timestamp_validator("sunrise", zero_is_missing=True)
    _validate_sunset = TimeStampModel.timestamp_validator("sunset", zero_is_missing=True)


class CurrentResponse(BaseModel):
    """Payload of ``/data/2.5/weather``."""

    main: MainBlock
    wind: WindBlock = Field(default_factory=WindBlock)
    sys: SysBlock = Field(default_factory=SysBlock)
    weather: list[WeatherCondition] = Field(default_factory=list)
    visibility: float = 0
    name: str | None = None
    cod: int | str | None = None

    model_config = ConfigDict(extra="allow")

    def to_current(self, time_format: str, tz: tzinfo | None = None) -> CurrentWeather:
        """Flatten the payload into a CurrentWeather snapshot.

        Args:
            time_format: strftime format for sunrise/sunset
            tz: Display timezone (system local when None)
        """
        condition = _primary_condition(self.weather)
        return CurrentWeather(
            temperature=self.main.temp,
            feels_like=self.main.feels_like if self.main.feels_like is not None else self.main.temp,
            humidity=self.main.humidity,
            wind_speed=self.wind.speed,
            pressure=self.main.pressure,
            visibility=self.visibility,
            condition_code=condition.id,
            description=condition.description,
            sunrise=TimeUtils.format_local(self.sys.sunrise, time_format, tz),
            sunset=TimeUtils.format_local(self.sys.sunset, time_format, tz),
            city=self.name,
        )


class CurrentWeather(BaseModel):
    """Snapshot of current conditions, replaced wholesale on every fetch."""

    temperature: float
    feels_like: float
    humidity: float = 0
    wind_speed: float = 0
    pressure: float = 0
    visibility: float = 0
    condition_code: int = CLEAR_SKY_CODE
    description: str = "Unknown"
    sunrise: str = "--"
    sunset: str = "--"
    city: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def visibility_km(self) -> float:
        """Visibility converted from meters to kilometers."""
        return self.visibility / 1000.0


# ─────────────────────────── forecast ────────────────────────────────────────


class ForecastMain(BaseModel):
    temp: float = 0


class ForecastItem(TimeStampModel):
    """One 3-hour slot of the ``/data/2.5/forecast`` payload."""

    dt: datetime
    dt_txt: str = ""
    main: ForecastMain = Field(default_factory=ForecastMain)
    weather: list[WeatherCondition] = Field(default_factory=list)

    _validate_dt = TimeStampModel.timestamp_validator("dt")

    def to_sample(self) -> ForecastSample:
        return ForecastSample(
            dt=self.dt,
            dt_txt=self.dt_txt,
            temp=self.main.temp,
            condition_code=_primary_condition(self.weather).id,
        )


class ForecastResponse(BaseModel):
    """Payload of ``/data/2.5/forecast``."""

    cod: int | str | None = None
    items: list[ForecastItem] = Field(alias="list")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_samples(self) -> list[ForecastSample]:
        return [item.to_sample() for item in self.items]


class ForecastSample(BaseModel):
    """Raw forecast point, consumed immediately by the reducer."""

    dt: datetime
    dt_txt: str = ""
    temp: float
    condition_code: int = CLEAR_SKY_CODE

    model_config = ConfigDict(frozen=True)

    @property
    def is_midday(self) -> bool:
        """Whether this is the provider's canonical noon slot."""
        return MIDDAY_MARKER in self.dt_txt


class ForecastDay(BaseModel):
    """Representative forecast for one day."""

    day: str
    temp: float
    condition_code: int = CLEAR_SKY_CODE

    model_config = ConfigDict(frozen=True)
