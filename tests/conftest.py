"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

API_URL = "https://api.weatherstem.com/api"


def reading(sensor_type: str, value: str, unit_symbol: str = "") -> dict:
    return {
        "id": "1",
        "sensor": f"{sensor_type} sensor",
        "sensor_type": sensor_type,
        "transmitter": "t1",
        "unit": "unit",
        "unit_symbol": unit_symbol,
        "value": value,
    }


SAMPLE_READINGS = [
    reading("Thermometer", "85.2", "&deg;F"),
    reading("Dewpoint", "70.1", "&deg;F"),
    reading("Wet Bulb Globe Temperature", "83.5", "&deg;F"),
    reading("Wind Chill", "85.2", "&deg;F"),
    reading("Heat Index", "90.3", "&deg;F"),
    reading("Hygrometer", "62", "%"),
    reading("Anemometer", "5.4", "mph"),
    reading("10 Minute Wind Gust", "12.1", "mph"),
    reading("Wind Vane", "22", "&deg;"),
    reading("Barometer", "30.01", "inHg"),
    reading("Barometer Tendency", "Rising", "trend"),
    reading("Rain Gauge", "0.12", "in"),
    reading("Rain Rate", "0.05", "in/h"),
    reading("Solar Radiation Sensor", "640", "W/m&sup2;"),
    reading("UV Radiation Sensor", "7", "index"),
]

SAMPLE_STATION = {
    "domain": {"name": "Volusia County", "handle": "volusia"},
    "cameras": [{"image": "https://cdn.weatherstem.com/ponceinlet.jpg", "name": "North"}],
    "name": "Ponce Inlet",
    "handle": "ponceinlet",
    "lat": "29.0805",
    "lon": "-80.9270",
    "facebook": "",
    "twitter": "ponceinletwx",
    "wunderground": "KFLPONCE3",
}

SAMPLE_RECORD = {
    "readings": SAMPLE_READINGS,
    "last_rain_time": "2020-08-13 17:40:00",
    "time": "2020-08-14 10:15:00",
    "id": "8867321",
    "hilo": {
        "name": "Thermometer",
        "min": "76.1",
        "max": "86.0",
        "min_time": "2020-08-14 06:05:00",
        "max_time": "2020-08-13 14:20:00",
        "symbol": "&deg;F",
        "property": "temperature",
        "type": "hilo",
        "unit": "degrees Fahrenheit",
    },
    "now": "2020-08-14 10:16:02",
    "derived": 0,
}

SAMPLE_WEATHER_INFO = {"record": SAMPLE_RECORD, "station": SAMPLE_STATION}

# A station that is down: coordinates replaced by a sentinel, numbers where
# strings are expected.
DOWN_WEATHER_INFO = {
    "record": {
        "readings": [
            {"sensor_type": "Thermometer", "value": 0, "unit_symbol": "&deg;F"},
            {"sensor_type": "Hygrometer", "value": "N/A", "unit_symbol": "%"},
        ],
        "time": "2020-06-01 00:00:00",
        "id": 8800001,
        "derived": 1,
        "down_since": "2020-05-31 22:00:00",
    },
    "station": {
        "name": "Daytona Beach Shores",
        "handle": "fswndaytonabch",
        "lat": "down",
        "lon": "down",
    },
}

SAMPLE_CONFIG = {
    "version": "3.0",
    "api_url": API_URL,
    "api_key": "happy3solar9fly",
    "stations": ["ponceinlet@volusia.weatherstem.com", "fswndaytonabch@volusia.weatherstem.com"],
    "me": {"lat": 29.13, "lon": -80.95},
}


def write_config(path: Path, data: dict | str) -> Path:
    """Write a config file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def api_url() -> str:
    return API_URL


@pytest.fixture(autouse=True)
def log_file(tmp_path):
    """Reset the package logger and send its output to a file under tmp_path."""
    import weatherstem._logging as mod

    old_logger = mod._logger
    old_file = mod._LOG_FILE
    old_level = mod._LOG_LEVEL

    named_logger = logging.getLogger(mod.LOGGER_NAME)
    named_logger.handlers.clear()

    path = tmp_path / "weatherstem.log"
    mod._logger = None
    mod._LOG_FILE = str(path)
    mod._LOG_LEVEL = "DEBUG"

    yield path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_FILE = old_file
    mod._LOG_LEVEL = old_level
