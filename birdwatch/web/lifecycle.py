"""
Where: birdwatch/web/lifecycle.py
What: Startup/shutdown of the shared outbound HTTP client and locator.
Why: Keep main.py focused on app assembly.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from birdwatch.common.core.http_client import HttpClientFactory

from .config import WebConfig
from .core.locator import BackendLocator

logger = logging.getLogger("birdwatch.web")


@asynccontextmanager
async def manage_lifespan(app: FastAPI, config: WebConfig) -> AsyncIterator[None]:
    """Manage application lifecycle."""
    factory = HttpClientFactory(config, timeout=config.UPSTREAM_TIMEOUT)
    client = factory.create_async_client()

    try:
        app.state.config = config
        app.state.http_client = client
        app.state.http_client_factory = factory
        app.state.locator = BackendLocator.from_config(config)

        logger.info(
            "Birdwatch web proxy initialized",
            extra={
                "local_api_base": config.LOCAL_API_BASE,
                "remote_api_base": config.REMOTE_API_BASE,
            },
        )
        yield
    finally:
        logger.info("Birdwatch web proxy shutting down, closing http client.")
        await client.aclose()
