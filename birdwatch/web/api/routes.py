"""
Proxy endpoints consumed by the browser client.

Every handler makes at most one backend call and never retries.
"""

import logging
from typing import Annotated, Optional

import httpx
from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    MissingImageError,
    MissingParameterError,
    UpstreamProxyError,
    UpstreamStreamUnavailableError,
)
from ..core.locator import build_url
from ..core.relay import SSERelayResponse, has_readable_body, open_stream
from ..core.upstream import JsonBody, fetch_chat, fetch_species, submit_image
from ..models import ChatTextEnvelope, ErrorEnvelope, ModelChoice, Prediction, SpeciesList
from .deps import BackendBaseDep, ConfigDep, HttpClientDep, HttpClientFactoryDep

logger = logging.getLogger("birdwatch.web")

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope},
    500: {"model": ErrorEnvelope},
}


@router.get("/chatbot", responses=_ERROR_RESPONSES)
async def chatbot(base: BackendBaseDep, client: HttpClientDep, prompt: Optional[str] = None):
    """Synchronous chat: one prompt in, one backend answer out."""
    if not prompt:
        raise MissingParameterError("prompt")

    try:
        body = await fetch_chat(client, base, prompt)
    except (httpx.HTTPError, ValueError) as e:
        raise UpstreamProxyError("Failed to proxy chatbot request", cause=e) from e

    if isinstance(body, JsonBody):
        return JSONResponse(status_code=body.status_code, content=body.value)

    # Plain text answers are wrapped so the client always receives JSON.
    envelope = ChatTextEnvelope(response=body.text)
    return JSONResponse(status_code=body.status_code, content=envelope.model_dump())


@router.get(
    "/chatbotsse",
    responses={**_ERROR_RESPONSES, 502: {"model": ErrorEnvelope}},
)
async def chatbot_sse(
    base: BackendBaseDep,
    client: HttpClientDep,
    factory: HttpClientFactoryDep,
    config: ConfigDep,
    prompt: Optional[str] = None,
):
    """
    Streaming chat.

    The backend's text/event-stream body (``update`` events carrying
    ``{content}`` payloads) is relayed chunk by chunk.
    """
    if not prompt:
        raise MissingParameterError("prompt")

    url = build_url(base, "/ollama/stream", prompt=prompt)
    try:
        upstream = await open_stream(
            client, url, timeout=factory.stream_timeout(config.STREAM_READ_TIMEOUT)
        )
    except httpx.HTTPError as e:
        raise UpstreamProxyError("Failed to proxy chatbot stream", cause=e) from e

    if not has_readable_body(upstream):
        await upstream.aclose()
        raise UpstreamStreamUnavailableError()

    logger.debug("Relaying upstream stream", extra={"status": upstream.status_code})
    return SSERelayResponse(upstream)


@router.get("/species", responses={200: {"model": SpeciesList}, 500: {"model": ErrorEnvelope}})
async def species(base: BackendBaseDep, client: HttpClientDep):
    """List the species the classifier knows about."""
    try:
        body = await fetch_species(client, base)
    except (httpx.HTTPError, ValueError) as e:
        raise UpstreamProxyError("Failed to proxy species", cause=e) from e

    return JSONResponse(status_code=body.status_code, content=body.value)


@router.post(
    "/birdsubmit",
    responses={200: {"model": Prediction}, **_ERROR_RESPONSES, 502: {"model": ErrorEnvelope}},
)
async def bird_submit(
    base: BackendBaseDep,
    client: HttpClientDep,
    config: ConfigDep,
    image: Annotated[Optional[UploadFile], File()] = None,
    model: ModelChoice = ModelChoice.SELF,
):
    """Classify an uploaded photo; answers with predicted_species and confidence."""
    if image is None:
        raise MissingImageError()
    data = await image.read()
    if not data:
        raise MissingImageError()

    try:
        body = await submit_image(
            client,
            base,
            config.BIRD_SUBMIT_PATH,
            image=data,
            filename=image.filename or "upload",
            content_type=image.content_type or "application/octet-stream",
            model=model.value,
        )
    except (httpx.HTTPError, ValueError) as e:
        raise UpstreamProxyError("Failed to proxy image submission", cause=e) from e

    if not isinstance(body, JsonBody):
        raise UpstreamProxyError(
            "Upstream returned non-JSON response", status_code=502, details=body.text
        )
    return JSONResponse(status_code=body.status_code, content=body.value)
