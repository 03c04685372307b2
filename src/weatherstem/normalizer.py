"""Conversion of a station's raw readings into the fixed WeatherData schema."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from weatherstem._parsing import parse_float_or_zero
from weatherstem.compass import degree_to_heading
from weatherstem.geodesy import Coord
from weatherstem.models.normalized import WeatherData, WeatherUnits
from weatherstem.models.raw import ReadingInfo, RecordInfo, StationInfo, WeatherInfo


@dataclass(frozen=True)
class SensorSlot:
    """Where a sensor type lands in WeatherData.

    ``index`` is None for scalar slots. Categorical slots keep the raw string.
    """

    field: str
    index: int | None = None
    categorical: bool = False


SENSOR_SLOTS: dict[str, SensorSlot] = {
    "Thermometer": SensorSlot("temperature", 0),
    "Dewpoint": SensorSlot("temperature", 1),
    "Wet Bulb Globe Temperature": SensorSlot("temperature", 2),
    "Wind Chill": SensorSlot("temperature", 3),
    "Heat Index": SensorSlot("temperature", 4),
    "Hygrometer": SensorSlot("humidity"),
    "Anemometer": SensorSlot("windspeed", 0),
    "10 Minute Wind Gust": SensorSlot("windspeed", 1),
    "Wind Vane": SensorSlot("windspeed", 2),
    "Barometer": SensorSlot("pressure"),
    "Barometer Tendency": SensorSlot("pressure_trend", categorical=True),
    "Rain Gauge": SensorSlot("rain", 0),
    "Rain Rate": SensorSlot("rain", 1),
    "Solar Radiation Sensor": SensorSlot("sun", 0),
    "UV Radiation Sensor": SensorSlot("sun", 1),
}

WIND_DIRECTION_SENSOR = "Wind Vane"

_VECTOR_SIZES = {"temperature": 5, "windspeed": 3, "rain": 2, "sun": 2}
_SCALAR_DEFAULTS: dict[str, Any] = {"humidity": 0.0, "pressure": 0.0, "pressure_trend": ""}


def normalize(
    station: StationInfo,
    record: RecordInfo,
    readings: Iterable[ReadingInfo],
    *,
    plain_rose: bool = False,
) -> tuple[WeatherData, WeatherUnits]:
    """Map a station's readings onto WeatherData and WeatherUnits.

    Readings are matched on their exact sensor_type. Unknown types are
    ignored, and when a type repeats the later reading wins. Slots with no
    reading keep a zero value and an empty unit. Never raises.

    Args:
        station: Station envelope; handle, name and lat/lon are used.
        record: Record envelope; its observation time is used.
        readings: The raw readings, in API order.
        plain_rose: Name the wind direction with the plain compass rose
                    instead of the ornate one.
    """
    values: dict[str, Any] = {
        name: [0.0] * size for name, size in _VECTOR_SIZES.items()
    }
    values.update(_SCALAR_DEFAULTS)
    units: dict[str, Any] = {name: [""] * size for name, size in _VECTOR_SIZES.items()}
    units.update({name: "" for name in _SCALAR_DEFAULTS})
    wind_direction_seen = False

    for reading in readings:
        slot = SENSOR_SLOTS.get(reading.sensor_type or "")
        if slot is None:
            continue
        if slot.categorical:
            value: Any = reading.value or ""
        else:
            value = parse_float_or_zero(reading.value)
        unit = reading.unit_symbol or ""
        if slot.index is None:
            values[slot.field] = value
            units[slot.field] = unit
        else:
            values[slot.field][slot.index] = value
            units[slot.field][slot.index] = unit
        if reading.sensor_type == WIND_DIRECTION_SENSOR:
            wind_direction_seen = True

    wind = ("", "")
    if wind_direction_seen:
        wind = degree_to_heading(values["windspeed"][2], precision=3, plain=plain_rose)

    identity = (station.handle or "", station.name or "", record.time or "")
    topo = Coord(
        lat=parse_float_or_zero(station.lat),
        lon=parse_float_or_zero(station.lon),
    )

    data = WeatherData(
        stations=identity,
        topo=topo,
        wind=wind,
        **{name: _freeze(v) for name, v in values.items()},
    )
    weather_units = WeatherUnits(
        stations=identity,
        **{name: _freeze(v) for name, v in units.items()},
    )
    return data, weather_units


def normalize_info(
    info: WeatherInfo, *, plain_rose: bool = False
) -> tuple[WeatherData, WeatherUnits]:
    """Normalize one element of the API response."""
    return normalize(
        info.station, info.record, info.record.readings, plain_rose=plain_rose
    )


def _freeze(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value
