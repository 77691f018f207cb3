"""
Core logic package.

Provides backend location, unary upstream calls and the SSE relay.
"""

from .locator import BackendLocator, build_url, host_from_headers, is_local_host
from .relay import SSERelayResponse, has_readable_body, open_stream, relay_chunks
from .upstream import JsonBody, TextBody, UpstreamBody, read_body

__all__ = [
    "BackendLocator",
    "build_url",
    "host_from_headers",
    "is_local_host",
    "SSERelayResponse",
    "has_readable_body",
    "open_stream",
    "relay_chunks",
    "JsonBody",
    "TextBody",
    "UpstreamBody",
    "read_body",
]
