"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from speedradar.exceptions import (
    RadarAPIError,
    RadarConnectionError,
    RadarTimeoutError,
)

DEFAULT_BASE_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 5.0


def _handle_response(response: httpx.Response) -> None:
    """Raise for error statuses."""
    if response.status_code >= 400:
        raise RadarAPIError(
            status_code=response.status_code,
            message=response.text,
        )


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def post(self, endpoint: str, payload: dict[str, Any]) -> None:
        """Perform a POST request with a JSON body."""
        try:
            response = self._client.post(endpoint, json=payload)
        except httpx.ConnectError as exc:
            raise RadarConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise RadarTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise RadarConnectionError(str(exc)) from exc
        _handle_response(response)

    def close(self) -> None:
        self._client.close()
