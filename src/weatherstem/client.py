"""Public client for the WeatherSTEM API."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from weatherstem._http import DEFAULT_TIMEOUT, SyncTransport
from weatherstem._logging import log_api_call
from weatherstem.exceptions import WeatherstemValidationError
from weatherstem.models.config import Config
from weatherstem.models.raw import WeatherInfo

_RESPONSE_ADAPTER = TypeAdapter(list[WeatherInfo])


def validate_response(data: Any) -> list[WeatherInfo]:
    """Validate a decoded API response against the expected array shape."""
    try:
        return _RESPONSE_ADAPTER.validate_python(data)
    except Exception as exc:
        raise WeatherstemValidationError(
            f"Failed to validate WeatherInfo response: {exc}"
        ) from exc


def load_response(path: str | os.PathLike[str]) -> list[WeatherInfo]:
    """Read a saved API response from disk, for working without the network."""
    raw = Path(path).read_bytes()
    try:
        return _RESPONSE_ADAPTER.validate_json(raw)
    except Exception as exc:
        raise WeatherstemValidationError(
            f"Failed to validate WeatherInfo response from {path}: {exc}"
        ) from exc


class WeatherstemClient:
    """Synchronous client for the WeatherSTEM station API.

    Usage:
        with WeatherstemClient(config) as ws:
            infos = ws.fetch()
    """

    def __init__(
        self,
        config: Config,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = False,
    ) -> None:
        self._config = config
        self._transport = SyncTransport(timeout=timeout, verify=verify)

    def __enter__(self) -> WeatherstemClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def fetch(self, stations: list[str] | None = None) -> list[WeatherInfo]:
        """Get the latest record of each station, in API order.

        Defaults to the stations listed in the config.
        """
        payload = {
            "api_key": self._config.api_key,
            "stations": list(self._config.stations if stations is None else stations),
        }
        data = self._transport.post(self._config.api_url, payload)
        return validate_response(data)
