"""Text and JSON renderings of normalized station data."""

from __future__ import annotations

import html

from weatherstem.models.normalized import WeatherData, WeatherUnits
from weatherstem.models.raw import WeatherInfo

MBAR_PER_INHG = 33.86386

# Wet bulb globe temperature thresholds in °F, lowest first.
WBGT_LEVELS: list[tuple[float, str]] = [
    (82.0, " "),
    (87.0, "⚊"),
    (90.0, "⚌"),
    (92.0, "☰"),
]
WBGT_TOP_FLAG = "⚑"

WBGT_LEGEND = "\n".join([
    "Current WBGT flags:",
    "   <82°F       - normal",
    " ⚊ 82°F - 87°F - Level 1",
    " ⚌ 87°F - 90°F - Level 2",
    " ☰ 90°F - 92°F - Level 3",
    " ⚑ >92°F       - Level 4",
])


def wbgt_flag(temp: float) -> str:
    """Return the heat danger flag for a wet bulb globe temperature."""
    for limit, flag in WBGT_LEVELS:
        if temp < limit:
            return flag
    return WBGT_TOP_FLAG


def _num(value: float) -> str:
    return f"{value:g}"


def _unit(symbol: str) -> str:
    # Many of the API's unit strings are HTML-escaped
    return html.unescape(symbol)


def format_lite(data: WeatherData) -> str:
    """Values only, no units."""
    t = data.temperature
    ws = data.windspeed
    return "\n".join([
        f"{data.display_name} ({data.handle}) {data.observed_at} {_num(data.distance)}",
        f"   T: {_num(t[0])} DP: {_num(t[1])} H: {_num(data.humidity)}",
        f"{wbgt_flag(t[2])} WB: {_num(t[2])} WC: {_num(t[3])} HI: {_num(t[4])}",
        f"   P: {_num(data.pressure)} {data.pressure_trend}",
        f"   W: {_num(ws[0])} {_num(ws[1])} gust ({ws[2]:.0f}° {data.wind[1]})",
        f"   R: {_num(data.rain[0])} gauge {_num(data.rain[1])} rate",
    ])


def format_full(data: WeatherData, units: WeatherUnits) -> str:
    """Values with their units. Pressure is assumed to be inHg for the mbar figure."""
    t, tu = data.temperature, units.temperature
    ws, wu = data.windspeed, units.windspeed
    return "\n".join([
        f"{data.display_name} ({data.handle}) "
        f"{data.distance:.2f}{units.distance} {data.observed_at}",
        f" T: {t[0]:.1f}{_unit(tu[0])} DP: {t[1]:.1f}{_unit(tu[1])} "
        f"H: {data.humidity:.1f}%",
        f"WB: {t[2]:.1f}{_unit(tu[2])} {wbgt_flag(t[2])} "
        f"WC: {t[3]:.1f}{_unit(tu[3])} HI: {t[4]:.1f}{_unit(tu[4])}",
        f" P: {data.pressure:.3f}{_unit(units.pressure)} "
        f"[{data.pressure * MBAR_PER_INHG:.2f}mbar] {data.pressure_trend}",
        f" W: {ws[0]:.1f}{_unit(wu[0])} {ws[1]:.1f}{_unit(wu[1])} gust, "
        f"{_num(ws[2])}{_unit(wu[2])} {data.wind[1]}",
        f" R: {data.rain[0]:.2f}{_unit(units.rain[0])} "
        f"{data.rain[1]:.2f}{_unit(units.rain[1])}",
    ])


def format_json(data: WeatherData, units: WeatherUnits) -> str:
    """The data record and the units record, one JSON document per line."""
    return "\n".join([
        data.model_dump_json(by_alias=True),
        units.model_dump_json(by_alias=True),
    ])


def format_original(info: WeatherInfo) -> str:
    """The raw API record of a station as JSON."""
    return info.model_dump_json()
