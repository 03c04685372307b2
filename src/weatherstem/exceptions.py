"""Custom exceptions for the weatherstem client."""

from __future__ import annotations


class WeatherstemError(Exception):
    """Base exception for all weatherstem errors."""


class ConfigError(WeatherstemError):
    """Base exception for configuration problems. Always fatal."""


class ConfigNotFoundError(ConfigError):
    """Raised when none of the candidate config files can be read."""

    def __init__(self, paths: list[str]) -> None:
        self.paths = paths
        super().__init__(f"No readable config file among: {', '.join(paths)}")


class MissingVersionError(ConfigError):
    """Raised when a config file does not declare a version."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No version in config file {path}")


class MalformedConfigError(ConfigError):
    """Raised when a config file of a known version fails to parse."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot parse config {path}: {message}")


class UnsupportedConfigVersionError(ConfigError):
    """Raised when a config file declares a version newer than this build."""

    def __init__(self, path: str, version: str, supported: str) -> None:
        self.path = path
        self.version = version
        self.supported = supported
        super().__init__(
            f"Config version mismatch in {path}, {version} should be {supported}"
        )


class WeatherstemConnectionError(WeatherstemError):
    """Raised when the client cannot connect to the API."""


class WeatherstemTimeoutError(WeatherstemError):
    """Raised when a request to the API times out."""


class WeatherstemAPIError(WeatherstemError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class WeatherstemValidationError(WeatherstemError):
    """Raised when API response data fails model validation."""
