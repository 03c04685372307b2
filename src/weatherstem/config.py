"""Discovery, version checking and migration of the operator config file."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from weatherstem._logging import get_logger
from weatherstem.exceptions import (
    ConfigNotFoundError,
    MalformedConfigError,
    MissingVersionError,
    UnsupportedConfigVersionError,
)
from weatherstem.geodesy import Coord
from weatherstem.models.config import Config

CONFIG_VERSION = "3.0"
CONFIG_FILENAME = "weatherstem.json"

# Where an old config without a location ends up: Manhattan.
FALLBACK_LOCATION = Coord(lat=40.7678, lon=-73.9814)

_VERSION_RE = re.compile(r'"version"\s*:\s*(?:"([^"]*)"|([0-9][0-9.]*))')

EXAMPLE_CONFIG = (
    '{"version":"3.0","api_url":"https://api.weatherstem.com/api",'
    '"api_key":"yourApiKey",'
    '"stations":["station1@domain.weatherstem.com","stationX@domain.weatherstem.com"],'
    '"me":{"lat":43.14,"lon":-111.275}}'
)


def candidate_paths(home: str | None = None) -> list[str]:
    """Return the config files to probe, in order.

    Uses $HOME when ``home`` is not given. Without a home directory only the
    current directory is searched.
    """
    if home is None:
        home = os.environ.get("HOME")
    paths = [CONFIG_FILENAME]
    if home:
        paths.append(os.path.join(home, f".{CONFIG_FILENAME}"))
        paths.append(os.path.join(home, ".config", CONFIG_FILENAME))
    return paths


def extract_version(text: str) -> str | None:
    """Find the declared version in raw config text without parsing it as JSON."""
    match = _VERSION_RE.search(text)
    if match is None:
        return None
    return match.group(1) if match.group(1) is not None else match.group(2)


def resolve(paths: Iterable[str | os.PathLike[str]]) -> Config:
    """Load the first readable config file and bring it up to the current version.

    Raises:
        ConfigNotFoundError: No candidate could be read.
        MissingVersionError: The file declares no version.
        MalformedConfigError: The file is not a valid config structure.
        UnsupportedConfigVersionError: The file is newer than CONFIG_VERSION.
    """
    logger = get_logger()
    tried: list[str] = []
    for path in paths:
        tried.append(str(path))
        try:
            text = Path(path).read_bytes()
        except OSError as exc:
            logger.debug("Config candidate %s not readable: %s", path, exc)
            continue
        logger.debug("Using config file %s", path)
        return _load(str(path), text)
    raise ConfigNotFoundError(tried)


def find_config() -> Config:
    """Resolve the config from the usual candidate locations."""
    return resolve(candidate_paths())


def _load(path: str, raw: bytes) -> Config:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedConfigError(path, str(exc)) from exc

    version = extract_version(text)
    if version is None:
        raise MissingVersionError(path)

    if version == CONFIG_VERSION:
        return _parse(path, text)

    # Plain string comparison, so "10.0" sorts before "3.0".
    if version < CONFIG_VERSION:
        logger = get_logger()
        logger.warning(
            "Using a version %s config file in a version %s app.",
            version, CONFIG_VERSION,
        )
        logger.warning("Version 2 added your geolocation. Your location could become NYC.")
        logger.warning(
            "Version 3 uses the Aug 2020 API v1 'station@domain.weatherstem.com' syntax."
        )
        return _migrate(_parse(path, text))

    raise UnsupportedConfigVersionError(path, version, CONFIG_VERSION)


def _parse(path: str, text: str) -> Config:
    try:
        return Config.model_validate_json(text)
    except ValidationError as exc:
        raise MalformedConfigError(path, str(exc)) from exc


def _migrate(config: Config) -> Config:
    """Fill location components an older schema left at zero."""
    me = config.me or Coord()
    lat = me.lat if me.lat != 0.0 else FALLBACK_LOCATION.lat
    lon = me.lon if me.lon != 0.0 else FALLBACK_LOCATION.lon
    return config.model_copy(update={"me": Coord(lat=lat, lon=lon)})
