"""
Birdwatch web proxy

Same-origin HTTP surface for the browser client: relays chat (unary and
SSE), species listing and image classification to the inference backend.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI

from .api.routes import router
from .config import WebConfig
from .core.logging_config import setup_logging
from .exceptions import register_exception_handlers
from .lifecycle import manage_lifespan
from .middleware import request_id_middleware


def create_app(config: Optional[WebConfig] = None) -> FastAPI:
    """Assemble the application around one configuration object."""
    if config is None:
        config = WebConfig()

    def lifespan(app: FastAPI):
        return manage_lifespan(app, config)

    app = FastAPI(
        title="Birdwatch Web", version="1.0.0", lifespan=lifespan, root_path=config.root_path
    )
    app.state.config = config

    app.middleware("http")(request_id_middleware)
    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    app.include_router(router)
    return app


config = WebConfig()
setup_logging(config)
app = create_app(config)


def run():
    import uvicorn

    host, _, port = config.UVICORN_BIND_ADDR.rpartition(":")
    uvicorn.run(app, host=host or "0.0.0.0", port=int(port), log_config=None)


if __name__ == "__main__":
    run()
