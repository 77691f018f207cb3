"""
Backend locator.

Decides, from the inbound request host, whether the backend is addressed on
the local machine or on the remote host, and builds outbound URLs.
"""

import re
from typing import Mapping, Optional
from urllib.parse import quote

from ..config import DEFAULT_LOCAL_API_BASE, DEFAULT_REMOTE_API_BASE, WebConfig

LOCAL_HOST_PATTERN = re.compile(r"^(localhost|127\.0\.0\.1)(:\d+)?$", re.IGNORECASE)
# Punctuation left literal in query values, alongside alphanumerics and -_.
_URI_COMPONENT_SAFE = "!~*'()"


def host_from_headers(headers: Mapping[str, str]) -> str:
    """Return X-Forwarded-Host when present, else Host, else an empty string."""
    return headers.get("x-forwarded-host") or headers.get("host") or ""


def is_local_host(host: str) -> bool:
    return bool(LOCAL_HOST_PATTERN.match(host))


def _strip_trailing_slash(url: str) -> str:
    return url[:-1] if url.endswith("/") else url


def _with_https(url: str) -> str:
    if url.lower().startswith("http://"):
        return "https://" + url[len("http://") :]
    return url


class BackendLocator:
    """
    Pure host -> backend base URL mapping.

    Holds no per-request state, so one instance is shared by all requests.
    """

    def __init__(self, local_base: str = "", remote_base: str = "", prefer_https: bool = False):
        self.local_base = local_base or DEFAULT_LOCAL_API_BASE
        self.remote_base = remote_base or DEFAULT_REMOTE_API_BASE
        self.prefer_https = prefer_https

    @classmethod
    def from_config(cls, config: WebConfig) -> "BackendLocator":
        return cls(
            local_base=config.LOCAL_API_BASE,
            remote_base=config.REMOTE_API_BASE,
            prefer_https=config.PREFER_HTTPS,
        )

    def locate(self, host_header: str, prefer_https: Optional[bool] = None) -> str:
        """
        Resolve the backend base URL for a request host.

        Args:
            host_header: X-Forwarded-Host or Host value, may be empty
            prefer_https: remote scheme override; defaults to the instance setting

        Returns:
            Base URL without a trailing slash
        """
        if is_local_host(host_header or ""):
            return _strip_trailing_slash(self.local_base)

        if prefer_https is None:
            prefer_https = self.prefer_https
        base = self.remote_base
        if prefer_https:
            base = _with_https(base)
        return _strip_trailing_slash(base)


def build_url(base: str, path: str, **params: str) -> str:
    """
    Join base + path and append URL-encoded query parameters.

    Spaces become %20, never "+".
    """
    url = f"{base}{path}"
    if params:
        query = "&".join(
            f"{key}={quote(str(value), safe=_URI_COMPONENT_SAFE)}" for key, value in params.items()
        )
        url = f"{url}?{query}"
    return url
