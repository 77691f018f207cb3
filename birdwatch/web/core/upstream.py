"""
Unary backend calls.

Each helper issues exactly one outbound request and reduces the answer to a
tagged body (JsonBody or TextBody) decided once from the content type.
"""

import logging
from dataclasses import dataclass
from typing import Any, Union

import httpx

from .locator import build_url

logger = logging.getLogger("birdwatch.upstream")

CHAT_ACCEPT = "application/json, text/plain, */*"


@dataclass(frozen=True)
class JsonBody:
    status_code: int
    value: Any


@dataclass(frozen=True)
class TextBody:
    status_code: int
    text: str


UpstreamBody = Union[JsonBody, TextBody]


def is_json_response(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


def read_body(response: httpx.Response) -> UpstreamBody:
    """
    Classify a buffered backend response.

    Raises:
        json.JSONDecodeError: the body claims JSON but does not parse
    """
    if is_json_response(response):
        return JsonBody(response.status_code, response.json())
    return TextBody(response.status_code, response.text)


async def fetch_chat(client: httpx.AsyncClient, base: str, prompt: str) -> UpstreamBody:
    url = build_url(base, "/ollama", prompt=prompt)
    response = await client.get(url, headers={"Accept": CHAT_ACCEPT})
    logger.debug(
        "Chat upstream answered",
        extra={
            "status": response.status_code,
            "content_type": response.headers.get("content-type"),
        },
    )
    return read_body(response)


async def fetch_species(client: httpx.AsyncClient, base: str) -> JsonBody:
    """Species list is always JSON; anything else is a malformed response."""
    response = await client.get(build_url(base, "/species"))
    return JsonBody(response.status_code, response.json())


async def submit_image(
    client: httpx.AsyncClient,
    base: str,
    path: str,
    image: bytes,
    filename: str,
    content_type: str,
    model: str,
) -> UpstreamBody:
    """
    Forward an uploaded image as multipart/form-data.

    Args:
        path: backend submission path (BIRD_SUBMIT_PATH)
        model: classifier selector ("self" or "hf")
    """
    url = build_url(base, path, model=model)
    response = await client.post(url, files={"image": (filename, image, content_type)})
    return read_body(response)
