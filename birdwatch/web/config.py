"""
Web proxy configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

from typing import Optional

from pydantic import Field

from birdwatch.common.core.config import BaseAppConfig

DEFAULT_LOCAL_API_BASE = "http://127.0.0.1:9000"
DEFAULT_REMOTE_API_BASE = "http://some.server.com:9000"


class WebConfig(BaseAppConfig):
    """
    Configuration management for the Birdwatch web proxy.
    """

    # Server settings
    UVICORN_BIND_ADDR: str = Field(default="0.0.0.0:3000", description="Listen address")
    LOG_CONFIG_PATH: str = Field(
        default="config/web_log.yaml", description="Logging dictConfig YAML path"
    )

    # Backend addressing
    LOCAL_API_BASE: str = Field(
        default=DEFAULT_LOCAL_API_BASE, description="Backend base URL for localhost requests"
    )
    REMOTE_API_BASE: str = Field(
        default=DEFAULT_REMOTE_API_BASE, description="Backend base URL for all other requests"
    )
    PREFER_HTTPS: bool = Field(
        default=False, description="Use https for the remote backend (local is always http)"
    )
    BIRD_SUBMIT_PATH: str = Field(
        default="/birdsubmit", description="Backend path receiving image submissions"
    )

    # Timeouts
    UPSTREAM_TIMEOUT: float = Field(
        default=30.0, description="Unary backend call timeout (seconds)"
    )
    STREAM_READ_TIMEOUT: Optional[float] = Field(
        default=None, description="Read timeout between SSE chunks (None waits forever)"
    )

    # FastAPI settings
    root_path: str = Field(default="", description="API root path (for proxy)")
