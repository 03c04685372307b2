"""weatherstem: local WeatherSTEM station conditions from the command line."""

from weatherstem.client import WeatherstemClient, load_response
from weatherstem.config import CONFIG_VERSION, find_config, resolve
from weatherstem.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    MalformedConfigError,
    MissingVersionError,
    UnsupportedConfigVersionError,
    WeatherstemAPIError,
    WeatherstemConnectionError,
    WeatherstemError,
    WeatherstemTimeoutError,
    WeatherstemValidationError,
)
from weatherstem.normalizer import normalize, normalize_info

__all__ = [
    "CONFIG_VERSION",
    "ConfigError",
    "ConfigNotFoundError",
    "MalformedConfigError",
    "MissingVersionError",
    "UnsupportedConfigVersionError",
    "WeatherstemAPIError",
    "WeatherstemClient",
    "WeatherstemConnectionError",
    "WeatherstemError",
    "WeatherstemTimeoutError",
    "WeatherstemValidationError",
    "find_config",
    "load_response",
    "normalize",
    "normalize_info",
    "resolve",
]

__version__ = "3.0.0"
