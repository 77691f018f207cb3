import json

import httpx
import pytest
import respx

from birdwatch.web.core.upstream import (
    JsonBody,
    TextBody,
    fetch_chat,
    fetch_species,
    read_body,
    submit_image,
)

BASE = "http://backend:9000"


class TestReadBody:
    def test_json_content_type_gives_json_body(self):
        response = httpx.Response(201, json={"ok": True})

        assert read_body(response) == JsonBody(201, {"ok": True})

    def test_json_with_charset_is_still_json(self):
        response = httpx.Response(
            200, content=b'{"a": 1}', headers={"content-type": "application/json; charset=utf-8"}
        )

        assert read_body(response) == JsonBody(200, {"a": 1})

    def test_other_content_types_give_text_body(self):
        response = httpx.Response(200, text="plain answer")

        assert read_body(response) == TextBody(200, "plain answer")

    def test_missing_content_type_is_text(self):
        response = httpx.Response(200, content=b'{"looks": "json"}')

        assert isinstance(read_body(response), TextBody)

    def test_malformed_json_raises(self):
        response = httpx.Response(
            200, content=b"{oops", headers={"content-type": "application/json"}
        )

        with pytest.raises(json.JSONDecodeError):
            read_body(response)


@pytest.mark.asyncio
@respx.mock
async def test_fetch_chat_builds_encoded_url():
    route = respx.get(f"{BASE}/ollama").mock(
        return_value=httpx.Response(200, json={"response": "hi"})
    )

    async with httpx.AsyncClient() as client:
        body = await fetch_chat(client, BASE, "a b&c")

    assert body == JsonBody(200, {"response": "hi"})
    assert route.calls.last.request.url.raw_path == b"/ollama?prompt=a%20b%26c"


@pytest.mark.asyncio
@respx.mock
async def test_fetch_species_returns_json():
    respx.get(f"{BASE}/species").mock(
        return_value=httpx.Response(200, json={"species": ["Kea"]})
    )

    async with httpx.AsyncClient() as client:
        body = await fetch_species(client, BASE)

    assert body == JsonBody(200, {"species": ["Kea"]})


@pytest.mark.asyncio
@respx.mock
async def test_submit_image_sends_multipart_and_model():
    route = respx.post(f"{BASE}/birdsubmit", params={"model": "hf"}).mock(
        return_value=httpx.Response(200, json={"predicted_species": "Kea", "confidence": 0.93})
    )

    async with httpx.AsyncClient() as client:
        body = await submit_image(
            client,
            BASE,
            "/birdsubmit",
            image=b"\x89PNG fake",
            filename="kea.png",
            content_type="image/png",
            model="hf",
        )

    assert body == JsonBody(200, {"predicted_species": "Kea", "confidence": 0.93})
    request = route.calls.last.request
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'name="image"; filename="kea.png"' in request.content
    assert b"\x89PNG fake" in request.content
