import logging
from typing import Optional

import httpx

from .config import BaseAppConfig

logger = logging.getLogger(__name__)


class HttpClientFactory:
    """
    Owns the outbound client settings: SSL verification, pool limits and the
    timeout policy for buffered versus streamed backend calls.
    """

    def __init__(self, config: BaseAppConfig, timeout: float = 30.0):
        self.config = config
        self.timeout = timeout

    def unary_timeout(self) -> httpx.Timeout:
        """Single limit for connect, read, write and pool on buffered calls."""
        return httpx.Timeout(self.timeout)

    def stream_timeout(self, read_timeout: Optional[float]) -> httpx.Timeout:
        """
        Timeout for long-lived streams.

        Connect, write and pool keep the unary limit; read bounds the gap
        between two chunks and None waits indefinitely.
        """
        return httpx.Timeout(self.timeout, read=read_timeout)

    def create_async_client(self, **kwargs) -> httpx.AsyncClient:
        """
        Create the shared httpx.AsyncClient for backend calls.

        Args:
            **kwargs: Overrides for httpx.AsyncClient arguments
        """
        verify = kwargs.pop("verify", None)
        if verify is None:
            verify = self.config.VERIFY_SSL
        if not verify:
            logger.debug("Backend TLS certificates are not verified (VERIFY_SSL=False)")

        kwargs.setdefault("timeout", self.unary_timeout())
        # Each SSE relay holds one pooled connection for its whole lifetime.
        kwargs.setdefault(
            "limits", httpx.Limits(max_keepalive_connections=20, max_connections=100)
        )
        # The backend is addressed directly; host proxy variables are ignored unless asked for.
        kwargs.setdefault("trust_env", False)

        return httpx.AsyncClient(verify=verify, **kwargs)
