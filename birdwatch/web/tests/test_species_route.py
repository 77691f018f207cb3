"""
Where: birdwatch/web/tests/test_species_route.py
What: GET /species relays the backend species list.
"""

import httpx

SPECIES = {"species": ["Blue Jay", "Northern Cardinal", "American Robin"]}


def test_species_forwarded_verbatim(client, backend, remote_base):
    backend.get(f"{remote_base}/species").mock(return_value=httpx.Response(200, json=SPECIES))

    response = client.get("/species")

    assert response.status_code == 200
    assert response.json() == SPECIES


def test_species_repeated_requests_return_same_body(client, backend, remote_base):
    route = backend.get(f"{remote_base}/species").mock(
        return_value=httpx.Response(200, json=SPECIES)
    )

    first = client.get("/species")
    second = client.get("/species")

    assert first.json() == second.json() == SPECIES
    # Each call reaches the backend; nothing is cached in between.
    assert route.call_count == 2


def test_species_upstream_status_is_forwarded(client, backend, remote_base):
    backend.get(f"{remote_base}/species").mock(
        return_value=httpx.Response(503, json={"error": "classifier offline"})
    )

    response = client.get("/species")

    assert response.status_code == 503
    assert response.json() == {"error": "classifier offline"}


def test_species_connection_refused(client, backend, remote_base):
    backend.get(f"{remote_base}/species").mock(side_effect=httpx.ConnectError("refused"))

    response = client.get("/species")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to proxy species", "details": "refused"}


def test_species_non_json_body_is_an_error(client, backend, remote_base):
    backend.get(f"{remote_base}/species").mock(
        return_value=httpx.Response(502, text="<html>Bad Gateway</html>")
    )

    response = client.get("/species")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to proxy species"
    assert "details" in response.json()
