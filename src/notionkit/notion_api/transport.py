"""Sync and async HTTP transports for the Notion API.

Each transport performs one request per call:

1. Drop ``None`` values from the query string and JSON body.
2. Send the request with auth and version headers.
3. On ``2xx``, return the parsed JSON body (``{}`` for empty bodies).
4. On anything else, raise the :class:`NotionKitError` subclass for the
   status.  ``429`` carries ``Retry-After`` in the error context.
5. On timeout / connection failure, raise :class:`NotionKitTimeoutError`
   or :class:`NotionKitNetworkError`.

Nothing is retried or paced here; that is the caller's decision.
"""

from __future__ import annotations

import time
from typing import Any

import httpx

from notionkit.config import NotionKitConfig
from notionkit.errors import (
    NotionKitAuthError,
    NotionKitConflictError,
    NotionKitError,
    NotionKitNetworkError,
    NotionKitNotFoundError,
    NotionKitPermissionError,
    NotionKitRateLimitError,
    NotionKitServerError,
    NotionKitTimeoutError,
    NotionKitValidationError,
)
from notionkit.observability import fields, get_logger

log = get_logger("notionkit.transport")

_STATUS_ERRORS: dict[int, type[NotionKitError]] = {
    400: NotionKitValidationError,
    401: NotionKitAuthError,
    403: NotionKitPermissionError,
    404: NotionKitNotFoundError,
    409: NotionKitConflictError,
    429: NotionKitRateLimitError,
}

_STATUS_LABELS: dict[int, str] = {
    400: "Validation error",
    401: "Authentication failed",
    403: "Permission denied",
    404: "Resource not found",
    409: "Conflict",
    429: "Rate limited",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def compact(values: dict[str, Any] | None) -> dict[str, Any]:
    """Return a copy of *values* without ``None`` entries."""
    if not values:
        return {}
    return {k: v for k, v in values.items() if v is not None}


def _parse_retry_after(response: httpx.Response) -> float | None:
    """Extract the ``Retry-After`` header value as a float, or ``None``."""
    raw = response.headers.get("retry-after")
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _error_for_response(response: httpx.Response, method: str, path: str) -> NotionKitError:
    """Build the typed error for a non-2xx *response*."""
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    notion_message = body.get("message") or response.text[:500]
    context: dict[str, Any] = {
        "status_code": status,
        "notion_code": body.get("code", ""),
    }

    if status >= 500:
        return NotionKitServerError(
            message=f"Server error {status} on {method} {path}: {notion_message}",
            context=context,
        )

    error_cls = _STATUS_ERRORS.get(status, NotionKitValidationError)
    label = _STATUS_LABELS.get(status, f"Client error {status}")

    if status == 403:
        context["operation"] = f"{method} {path}"
    elif status == 404:
        context["path"] = path
    elif status == 429:
        context["retry_after_seconds"] = _parse_retry_after(response)
    elif error_cls is NotionKitValidationError:
        context["body"] = body

    return error_cls(
        message=f"{label} on {method} {path}: {notion_message}",
        context=context,
    )


def _network_error(exc: httpx.TransportError, method: str, path: str) -> NotionKitError:
    error_cls = NotionKitTimeoutError if isinstance(exc, httpx.TimeoutException) else NotionKitNetworkError
    kind = "Timeout" if error_cls is NotionKitTimeoutError else "Network error"
    return error_cls(
        message=f"{kind} on {method} {path}: {exc}",
        context={"method": method, "path": path},
        cause=exc,
    )


def _client_kwargs(config: NotionKitConfig, transport: Any) -> dict[str, Any]:
    return {
        "transport": transport,
        "base_url": config.base_url,
        "headers": config.auth_headers(),
        "timeout": httpx.Timeout(config.timeout_seconds),
        "proxy": config.http_proxy,
    }


def _handle_response(response: httpx.Response, method: str, path: str, elapsed_ms: float) -> dict[str, Any]:
    log.debug(
        "request complete",
        extra=fields(
            op="request",
            method=method,
            path=path,
            status=response.status_code,
            duration_ms=round(elapsed_ms, 1),
        ),
    )

    if 200 <= response.status_code < 300:
        if response.status_code == 204 or not response.content:
            return {}
        result: dict[str, Any] = response.json()
        return result

    error = _error_for_response(response, method, path)
    log.warning(
        "request failed",
        extra=fields(
            op="request",
            method=method,
            path=path,
            status=response.status_code,
            error_code=error.code,
            notion_code=error.context.get("notion_code"),
        ),
    )
    raise error


# ---------------------------------------------------------------------------
# Sync transport
# ---------------------------------------------------------------------------

class NotionTransport:
    """Synchronous HTTP transport.

    Parameters
    ----------
    config:
        Connection settings.
    http_transport:
        Optional httpx transport, e.g. an :class:`httpx.MockTransport` in
        tests.  Defaults to httpx's own connection pool.
    """

    def __init__(self, config: NotionKitConfig, http_transport: httpx.BaseTransport | None = None) -> None:
        self._config = config
        self._client = httpx.Client(**_client_kwargs(config, http_transport))

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute one request against the Notion API.

        Parameters
        ----------
        method:
            HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
        path:
            API path relative to ``base_url``, e.g. ``/users``.
        params:
            Query-string parameters; ``None`` values are dropped.
        json:
            JSON body; top-level ``None`` values are dropped.  Omitted
            entirely for ``GET``.

        Returns
        -------
        dict
            The parsed JSON response.

        Raises
        ------
        NotionKitError
            The subclass matching the HTTP status or transport failure.
        """
        body = compact(json) if method.upper() != "GET" else None
        t0 = time.monotonic()
        try:
            response = self._client.request(method, path, params=compact(params), json=body)
        except httpx.TransportError as exc:
            raise _network_error(exc, method, path) from exc
        return _handle_response(response, method, path, (time.monotonic() - t0) * 1000)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> NotionTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Async transport
# ---------------------------------------------------------------------------

class AsyncNotionTransport:
    """Asynchronous HTTP transport.

    Mirrors :class:`NotionTransport` on top of :class:`httpx.AsyncClient`.
    """

    def __init__(
        self,
        config: NotionKitConfig,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.AsyncClient(**_client_kwargs(config, http_transport))

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute one request (async).  See :meth:`NotionTransport.request`."""
        body = compact(json) if method.upper() != "GET" else None
        t0 = time.monotonic()
        try:
            response = await self._client.request(method, path, params=compact(params), json=body)
        except httpx.TransportError as exc:
            raise _network_error(exc, method, path) from exc
        return _handle_response(response, method, path, (time.monotonic() - t0) * 1000)

    async def aclose(self) -> None:
        """Close the underlying async HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncNotionTransport:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()
