"""weatherstem data models."""

from weatherstem.models.config import Config
from weatherstem.models.normalized import TopoUnits, WeatherData, WeatherUnits
from weatherstem.models.raw import (
    CameraInfo,
    DomainInfo,
    HiloInfo,
    ReadingInfo,
    RecordInfo,
    StationInfo,
    WeatherInfo,
)

__all__ = [
    "CameraInfo",
    "Config",
    "DomainInfo",
    "HiloInfo",
    "ReadingInfo",
    "RecordInfo",
    "StationInfo",
    "TopoUnits",
    "WeatherData",
    "WeatherInfo",
    "WeatherUnits",
]
