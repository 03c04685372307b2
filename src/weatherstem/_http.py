"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from weatherstem.exceptions import (
    WeatherstemAPIError,
    WeatherstemConnectionError,
    WeatherstemTimeoutError,
    WeatherstemValidationError,
)

DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise WeatherstemAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise WeatherstemValidationError(
            f"Response is not JSON: {response.text[:200]!r}"
        ) from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client.

    Certificate verification is off unless ``verify=True`` is passed.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = False,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout,
            verify=verify,
            headers={"Accept": "application/json"},
        )

    def post(self, url: str, payload: dict[str, Any]) -> Any:
        """Perform a JSON POST request and return parsed JSON."""
        try:
            response = self._client.post(url, json=payload)
        except httpx.ConnectError as exc:
            raise WeatherstemConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise WeatherstemTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise WeatherstemConnectionError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()
