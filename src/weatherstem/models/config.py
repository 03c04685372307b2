"""Operator configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from weatherstem.geodesy import Coord


class Config(BaseModel):
    """API user settings, ala:

        {"version": "3.0",
         "api_url": "https://api.weatherstem.com/api",
         "api_key": "yourApiKey",
         "stations": ["station1@domain.weatherstem.com"],
         "me": {"lat": 29.13, "lon": -80.95}}

    Version 2 added ``me``. Version 3 uses the ``station@domain`` handles of
    the v1 API.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    version: str
    api_url: str = ""
    api_key: str = ""
    stations: list[str] = Field(default_factory=list)
    me: Coord | None = None
