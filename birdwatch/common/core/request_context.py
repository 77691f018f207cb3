"""
RequestContext management.
Use ContextVar to share the request id across async execution.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current Request ID."""
    return _request_id_var.get()


def set_request_id(request_id: str) -> str:
    """Adopt an externally supplied Request ID (e.g. X-Request-Id)."""
    _request_id_var.set(request_id)
    return request_id


def generate_request_id() -> str:
    """
    Generate and set a new Request ID (UUID) for the current context.
    """
    new_id = str(uuid.uuid4())
    _request_id_var.set(new_id)
    return new_id


def clear_request_id() -> None:
    _request_id_var.set(None)
