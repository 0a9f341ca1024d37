from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tests.helpers.catalog import SPRITE_URL

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

    from tests.helpers.catalog import RecordingSubscriber


def _payload(**overrides: Any) -> dict[str, Any]:  # noqa: ANN401
    payload: dict[str, Any] = {
        "name": "Pikachu",
        "height": 0.4,
        "weight": 6,
        "base_experience": 112,
        "sprite_url": SPRITE_URL,
    }
    payload.update(overrides)
    return payload


def test_create_returns_201_with_types(client: TestClient, recorder: RecordingSubscriber) -> None:
    response = client.post("/pokemon", json=_payload(typeNames=["Electric"]))

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Pikachu"
    assert body["height"] == 0.4
    assert body["weight"] == 6.0
    assert body["sprite_url"] == SPRITE_URL
    assert [t["name"] for t in body["types"]] == ["electric"]
    assert "created_at" in body
    assert len(recorder.events) == 1


def test_list_and_get(client: TestClient) -> None:
    first = client.post("/pokemon", json=_payload(name="Bulbasaur")).json()
    client.post("/pokemon", json=_payload(name="Charmander"))

    listed = client.get("/pokemon")
    fetched = client.get(f"/pokemon/{first['id']}")

    assert listed.status_code == 200
    assert [p["name"] for p in listed.json()] == ["Bulbasaur", "Charmander"]
    assert fetched.json() == first


def test_missing_pokemon_is_404(client: TestClient, recorder: RecordingSubscriber) -> None:
    for response in (
        client.get("/pokemon/999"),
        client.put("/pokemon/999", json={"name": "x"}),
        client.delete("/pokemon/999"),
    ):
        assert response.status_code == 404
        assert response.json() == {"detail": "Pokemon with id 999 not found"}
    assert recorder.events == []


def test_partial_update_keeps_unsupplied_fields(client: TestClient) -> None:
    created = client.post("/pokemon", json=_payload(typeNames=["electric"])).json()

    response = client.put(f"/pokemon/{created['id']}", json={"weight": 30.5})

    assert response.status_code == 200
    body = response.json()
    assert body["weight"] == 30.5
    assert body["height"] == created["height"]
    assert body["types"] == created["types"]


def test_update_with_empty_type_list_clears_types(client: TestClient) -> None:
    created = client.post("/pokemon", json=_payload(typeNames=["fire", "flying"])).json()

    response = client.put(f"/pokemon/{created['id']}", json={"typeIds": []})

    assert response.json()["types"] == []


def test_delete_returns_204(client: TestClient) -> None:
    created = client.post("/pokemon", json=_payload(typeNames=["bug"])).json()

    response = client.delete(f"/pokemon/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/pokemon").json() == []
    assert [t["name"] for t in client.get("/type").json()] == ["bug"]


def test_invalid_payloads_are_422(client: TestClient, recorder: RecordingSubscriber) -> None:
    invalid = [
        _payload(height=1000),
        _payload(weight=1.234),
        _payload(sprite_url="not a url"),
        _payload(extra="field"),
        _payload(typeNames=["   "]),
        _payload(typeNames=["fire", "x" * 51]),
        {"name": "Missing fields"},
    ]

    for payload in invalid:
        assert client.post("/pokemon", json=payload).status_code == 422

    assert client.get("/pokemon").json() == []
    assert recorder.events == []


def test_update_rejects_overlong_type_name(client: TestClient) -> None:
    created = client.post("/pokemon", json=_payload()).json()

    response = client.put(f"/pokemon/{created['id']}", json={"typeNames": ["y" * 51]})

    assert response.status_code == 422
    assert client.get(f"/pokemon/{created['id']}").json()["types"] == []
