"""Models of the raw WeatherSTEM API payload."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# A station that is down reports some of its string scalars as JSON numbers,
# and may send null for a list or a whole envelope.
_RAW_CONFIG = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class ReadingInfo(BaseModel):
    """One sensor measurement, value and unit encoded as strings."""

    model_config = _RAW_CONFIG

    id: str | None = None
    sensor: str | None = None
    sensor_type: str | None = None
    transmitter: str | None = None
    unit: str | None = None
    unit_symbol: str | None = None
    value: str | None = None


class HiloInfo(BaseModel):
    """Station minimum/maximum over the latest window, usually 24 hours."""

    model_config = _RAW_CONFIG

    name: str | None = None
    min: str | None = None
    max: str | None = None
    min_time: str | None = None
    max_time: str | None = None
    symbol: str | None = None
    property: str | None = None
    type: str | None = None
    unit: str | None = None


class DomainInfo(BaseModel):
    """The WeatherSTEM domain a station belongs to."""

    model_config = _RAW_CONFIG

    name: str | None = None
    handle: str | None = None


class CameraInfo(BaseModel):
    """Pointer to a recent image from a station camera."""

    model_config = _RAW_CONFIG

    image: str | None = None
    name: str | None = None


class RecordInfo(BaseModel):
    """The latest observation record of a station."""

    model_config = _RAW_CONFIG

    readings: list[ReadingInfo] = Field(default_factory=list)
    last_rain_time: str | None = None
    time: str | None = None
    id: str | None = None
    hilo: HiloInfo | None = None
    now: str | None = None
    derived: int | None = None
    down_since: str | None = None

    @field_validator("readings", mode="before")
    @classmethod
    def _null_readings(cls, value: Any) -> Any:
        return [] if value is None else value


class StationInfo(BaseModel):
    """Descriptive info about the station that recorded the data."""

    model_config = _RAW_CONFIG

    domain: DomainInfo | None = None
    cameras: list[CameraInfo] = Field(default_factory=list)
    name: str | None = None
    handle: str | None = None
    lat: str | None = None
    lon: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    wunderground: str | None = None

    @field_validator("cameras", mode="before")
    @classmethod
    def _null_cameras(cls, value: Any) -> Any:
        return [] if value is None else value


class WeatherInfo(BaseModel):
    """One element of the API response array."""

    model_config = _RAW_CONFIG

    record: RecordInfo = Field(default_factory=RecordInfo)
    station: StationInfo = Field(default_factory=StationInfo)

    @field_validator("record", "station", mode="before")
    @classmethod
    def _null_envelope(cls, value: Any) -> Any:
        return {} if value is None else value
