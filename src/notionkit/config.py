"""Client configuration for notionkit.

:class:`NotionKitConfig` holds the handful of knobs the HTTP layer needs.
The helper modules are configuration-free.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from urllib.parse import urlparse

DEFAULT_BASE_URL = "https://api.notion.com/v1"

DEFAULT_NOTION_VERSION = "2025-09-03"

DEFAULT_LOG_LEVEL = "WARNING"

_LOCAL_HOSTS = ("localhost", "127.0.0.1", "::1")


@dataclass
class NotionKitConfig:
    """Configuration shared by :class:`NotionKitClient` and
    :class:`AsyncNotionKitClient`.

    Parameters
    ----------
    token:
        Notion integration token.  Never logged.
    notion_version:
        Value of the ``Notion-Version`` header sent with every request.
    base_url:
        API root URL.  Plain ``http`` is accepted only for local hosts.
    timeout_seconds:
        Per-request timeout handed to httpx.
    http_proxy:
        Optional HTTP/HTTPS proxy URL.
    log_level:
        Level for the process-wide ``notionkit`` logger.  Only a non-default
        value is applied when a client is created, so a second client left at
        the default does not reset a level set by an earlier one.
    """

    token: str = ""

    notion_version: str = DEFAULT_NOTION_VERSION

    base_url: str = DEFAULT_BASE_URL

    timeout_seconds: float = 60.0

    http_proxy: str | None = None

    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if parsed.scheme == "http" and parsed.hostname not in _LOCAL_HOSTS:
            raise ValueError(
                f"base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your API token, or target localhost for testing."
            )
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")
        self.base_url = self.base_url.rstrip("/")

    def auth_headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        return {
            "Authorization": f"Bearer {self.token}",
            "Notion-Version": self.notion_version,
            "Content-Type": "application/json",
        }

    def __repr__(self) -> str:
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "token":
                masked = f"...{val[-4:]}" if len(val) >= 8 else "****"
                parts.append(f"token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"NotionKitConfig({', '.join(parts)})"
