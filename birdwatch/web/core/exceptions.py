"""
Custom exception classes.

Represent errors raised while proxying a request to the backend, and the
handlers that turn them into the {error, details} JSON envelope.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("birdwatch.web")


class ProxyError(Exception):
    """Base exception class for proxy failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_content(self) -> Dict[str, Any]:
        return {"error": str(self)}


class MissingParameterError(ProxyError):
    """Raised when a required request parameter is absent or empty."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing {name} parameter")


class MissingImageError(ProxyError):
    """Raised when the multipart upload carries no image bytes."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__("Missing image file")


class UpstreamProxyError(ProxyError):
    """Raised when the backend call fails or returns an unusable body."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[str] = None,
    ):
        self.message = message
        self.cause = cause
        self.status_code = status_code
        self.details = details if details is not None else (str(cause) if cause else None)
        super().__init__(message)

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            content["details"] = self.details
        return content


class UpstreamStreamUnavailableError(UpstreamProxyError):
    """Raised when the backend answers the stream request without a body."""

    def __init__(self):
        super().__init__(
            "Upstream did not provide a stream", status_code=status.HTTP_502_BAD_GATEWAY
        )


# ===========================================
# Exception Handlers
# ===========================================


async def proxy_error_handler(request: Request, exc: ProxyError):
    if exc.status_code >= 500:
        logger.error(
            f"Proxy request failed: {exc}",
            exc_info=getattr(exc, "cause", None) is not None,
            extra={
                "path": request.url.path,
                "method": request.method,
                "status": exc.status_code,
            },
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unhandled exceptions.
    """
    logger.error(
        f"Global exception handler caught: {exc}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error", "details": str(exc)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "Validation Error", "details": str(exc.errors())},
    )
