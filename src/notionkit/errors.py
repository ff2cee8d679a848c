"""Error hierarchy for the notionkit client.

Only the HTTP layer raises.  The helper modules (:mod:`notionkit.ids`,
:mod:`notionkit.rich_text`, :mod:`notionkit.shapes`,
:mod:`notionkit.properties`) are total and return empty values on bad
input, and :mod:`notionkit.pagination` lets whatever the list call raised
propagate untouched.

Every error carries a machine-readable ``code`` (an :class:`ErrorCode`),
a ``message``, a structured ``context`` dict and an optional ``cause``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeGuard

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the client can raise."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    PERMISSION_ERROR = "PERMISSION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    RATE_LIMITED = "RATE_LIMITED"
    SERVER_ERROR = "SERVER_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class NotionKitError(Exception):
    """Base exception for all notionkit errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` identifying the error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Structured diagnostic data.  HTTP errors always include
        ``status_code`` and, when Notion sent one, ``notion_code``.
    cause:
        The underlying exception, if this error wraps another.
    """

    default_code: str = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
        *,
        code: str | None = None,
    ) -> None:
        self.code: str = code if code is not None else self.default_code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def status_code(self) -> int | None:
        """HTTP status of the failed response, ``None`` for network errors."""
        return self.context.get("status_code")

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# HTTP status errors
# ---------------------------------------------------------------------------

class NotionKitValidationError(NotionKitError):
    """400 (or any unmapped 4xx): the request was rejected as invalid.

    Context keys: ``status_code``, ``notion_code``, ``body``.
    """

    default_code = ErrorCode.VALIDATION_ERROR


class NotionKitAuthError(NotionKitError):
    """401: the integration token is missing, invalid or revoked."""

    default_code = ErrorCode.AUTH_ERROR


class NotionKitPermissionError(NotionKitError):
    """403: the integration has not been shared with the resource.

    Context keys: ``status_code``, ``notion_code``, ``operation``.
    """

    default_code = ErrorCode.PERMISSION_ERROR


class NotionKitNotFoundError(NotionKitError):
    """404: the resource does not exist or is not visible to the integration.

    Context keys: ``status_code``, ``notion_code``, ``path``.
    """

    default_code = ErrorCode.NOT_FOUND


class NotionKitConflictError(NotionKitError):
    """409: the resource was modified concurrently."""

    default_code = ErrorCode.CONFLICT


class NotionKitRateLimitError(NotionKitError):
    """429: the integration exceeded Notion's request rate.

    Nothing is retried here; ``context["retry_after_seconds"]`` carries the
    server's ``Retry-After`` value (or ``None``) for the caller to act on.
    """

    default_code = ErrorCode.RATE_LIMITED

    @property
    def retry_after(self) -> float | None:
        return self.context.get("retry_after_seconds")


class NotionKitServerError(NotionKitError):
    """5xx: Notion failed to process the request."""

    default_code = ErrorCode.SERVER_ERROR


# ---------------------------------------------------------------------------
# Transport errors
# ---------------------------------------------------------------------------

class NotionKitNetworkError(NotionKitError):
    """A connection-level failure (DNS, refused, reset).

    Context keys: ``method``, ``path``.
    """

    default_code = ErrorCode.NETWORK_ERROR


class NotionKitTimeoutError(NotionKitNetworkError):
    """The request did not complete within ``timeout_seconds``."""

    default_code = ErrorCode.TIMEOUT


def is_notionkit_error(error: object) -> TypeGuard[NotionKitError]:
    """Return ``True`` if *error* was raised by notionkit."""
    return isinstance(error, NotionKitError)
