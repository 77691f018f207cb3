"""
Server-sent events relay.

Opens one streaming GET against the backend and forwards the event payload
to the client unmodified, in arrival order. The relay does not parse events;
any content coding the backend applies is removed before relaying because the
client response never carries Content-Encoding.
"""

import logging
from typing import AsyncIterator, Optional

import anyio
import httpx
from starlette.responses import StreamingResponse
from starlette.types import Receive, Scope, Send

logger = logging.getLogger("birdwatch.relay")

SSE_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
}
SSE_MEDIA_TYPE = "text/event-stream; charset=utf-8"
STREAM_REQUEST_HEADERS = {"Accept": "text/event-stream", "Accept-Encoding": "identity"}

_EMPTY_BODY_STATUSES = frozenset({204, 205, 304})


async def open_stream(
    client: httpx.AsyncClient, url: str, timeout: Optional[httpx.Timeout] = None
) -> httpx.Response:
    """
    Send the upstream request and return as soon as headers arrive.

    `timeout` defaults to the client's own; the caller owns the returned
    response and must close it.
    """
    request = client.build_request(
        "GET",
        url,
        headers=STREAM_REQUEST_HEADERS,
        timeout=timeout if timeout is not None else client.timeout,
    )
    return await client.send(request, stream=True)


def has_readable_body(response: httpx.Response) -> bool:
    return response.status_code not in _EMPTY_BODY_STATUSES


async def close_upstream(response: httpx.Response) -> None:
    """Close the upstream response even while the calling task is being cancelled."""
    with anyio.CancelScope(shield=True):
        await response.aclose()


async def relay_chunks(response: httpx.Response) -> AsyncIterator[bytes]:
    """
    Yield decoded upstream chunks in order until the backend closes the stream.

    Upstream read errors propagate and abort the client connection.
    """
    chunks = 0
    try:
        async for chunk in response.aiter_bytes():
            if chunk:
                chunks += 1
                yield chunk
    except httpx.HTTPError as e:
        logger.warning(
            f"Upstream stream failed: {e}",
            extra={"chunks": chunks, "error_type": type(e).__name__},
        )
        raise
    finally:
        await close_upstream(response)
        logger.debug("Upstream stream closed", extra={"chunks": chunks})


class SSERelayResponse(StreamingResponse):
    """
    StreamingResponse bound to one upstream httpx response.

    The upstream response is closed when the ASGI call ends for any reason:
    end of stream, upstream error, client disconnect or cancellation.
    """

    def __init__(self, upstream: httpx.Response):
        self.upstream = upstream
        super().__init__(
            relay_chunks(upstream),
            status_code=upstream.status_code,
            headers=SSE_HEADERS,
            media_type=SSE_MEDIA_TYPE,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            if not self.upstream.is_closed:
                logger.info("Client left before upstream finished, closing upstream stream")
            await close_upstream(self.upstream)
