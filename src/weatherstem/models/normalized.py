"""Fixed-schema weather record and its parallel units record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from weatherstem.geodesy import Coord

_NORMALIZED_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class WeatherData(BaseModel):
    """Converted numeric data of one station.

    Slot order inside each tuple is fixed:

    - temperature: air, dewpoint, wet bulb globe, wind chill, heat index
    - windspeed: sustained, 10 minute gust, direction in degrees
    - wind: compass abbreviation, compass name
    - rain: gauge accumulation, rate
    - sun: solar radiation, UV radiation
    """

    model_config = _NORMALIZED_CONFIG

    label: str = "data"
    stations: tuple[str, str, str] = ("", "", "")
    topo: Coord = Field(default_factory=Coord)
    distance: float = 0.0
    temperature: tuple[float, float, float, float, float] = Field(
        default=(0.0, 0.0, 0.0, 0.0, 0.0), alias="temp"
    )
    humidity: float = 0.0
    windspeed: tuple[float, float, float] = (0.0, 0.0, 0.0)
    wind: tuple[str, str] = ("", "")
    pressure: float = 0.0
    pressure_trend: str = Field(default="", alias="ptrend")
    rain: tuple[float, float] = (0.0, 0.0)
    sun: tuple[float, float] = (0.0, 0.0)

    @property
    def handle(self) -> str:
        return self.stations[0]

    @property
    def display_name(self) -> str:
        return self.stations[1]

    @property
    def observed_at(self) -> str:
        return self.stations[2]


class TopoUnits(BaseModel):
    """Units of the station coordinate, HTML-escaped like the API's own."""

    model_config = _NORMALIZED_CONFIG

    lat: str = Field(default="&deg;", alias="Lat")
    lon: str = Field(default="&deg;", alias="Lon")


class WeatherUnits(BaseModel):
    """Unit symbols matching each slot of WeatherData."""

    model_config = _NORMALIZED_CONFIG

    label: str = "units"
    stations: tuple[str, str, str] = ("", "", "")
    topo: TopoUnits = Field(default_factory=TopoUnits)
    distance: str = ""
    temperature: tuple[str, str, str, str, str] = Field(
        default=("", "", "", "", ""), alias="temp"
    )
    humidity: str = ""
    windspeed: tuple[str, str, str] = ("", "", "")
    wind: tuple[str, str] = ("", "")
    pressure: str = ""
    pressure_trend: str = Field(default="", alias="ptrend")
    rain: tuple[str, str] = ("", "")
    sun: tuple[str, str] = ("", "")
