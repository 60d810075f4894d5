import pytest


@pytest.mark.asyncio
async def test_create_translation_dictionary_hit(async_client):
    r = await async_client.post(
        "/translations",
        json={"source_text": "Hello", "source_language": "en", "target_language": "zh", "user_id": "u1"},
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["status"] == "ok"
    data = body["data"]
    assert data["translated_text"] == "你好"
    assert data["user_id"] == "u1"
    assert data["id"] > 0
    assert data["created_at"]


@pytest.mark.asyncio
async def test_create_translation_anonymous_fallback(async_client):
    r = await async_client.post(
        "/translations",
        json={"source_text": "猫", "source_language": "zh", "target_language": "en"},
    )
    assert r.status_code == 201
    data = r.json()["data"]
    assert data["translated_text"] == "English translation of 猫"
    assert data["user_id"] is None


@pytest.mark.asyncio
async def test_history_scopes(async_client):
    for payload in (
        {"source_text": "hello", "user_id": "u1"},
        {"source_text": "goodbye", "user_id": "u2"},
        {"source_text": "thank you", "user_id": None},
    ):
        r = await async_client.post(
            "/translations",
            json={**payload, "source_language": "en", "target_language": "zh"},
        )
        assert r.status_code == 201

    everything = (await async_client.get("/translations/history")).json()["data"]
    assert [t["source_text"] for t in everything] == ["thank you", "goodbye", "hello"]
    assert all(t["is_favorite"] is False for t in everything)

    anonymous = (await async_client.get("/translations/history", params={"anonymous_only": "true"})).json()["data"]
    assert [t["source_text"] for t in anonymous] == ["thank you"]

    owned = (await async_client.get("/translations/history", params={"user_id": "u1"})).json()["data"]
    assert [t["source_text"] for t in owned] == ["hello"]


@pytest.mark.asyncio
async def test_history_marks_owner_favorites(async_client):
    created = await async_client.post(
        "/translations",
        json={"source_text": "hello", "source_language": "en", "target_language": "zh", "user_id": "u1"},
    )
    translation_id = created.json()["data"]["id"]
    await async_client.post("/favorites", json={"translation_id": translation_id, "user_id": "u1"})

    owned = (await async_client.get("/translations/history", params={"user_id": "u1"})).json()["data"]
    assert owned[0]["is_favorite"] is True


@pytest.mark.asyncio
async def test_history_pagination(async_client):
    for text in ("one", "two", "three"):
        await async_client.post(
            "/translations",
            json={"source_text": text, "source_language": "en", "target_language": "zh"},
        )

    page = (await async_client.get("/translations/history", params={"limit": 1, "offset": 1})).json()["data"]
    assert [t["source_text"] for t in page] == ["two"]


@pytest.mark.asyncio
async def test_history_rejects_zero_limit(async_client):
    r = await async_client.get("/translations/history", params={"limit": 0})
    assert r.status_code == 422
    assert r.json()["error_code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_get_translation_by_id_visibility(async_client):
    created = await async_client.post(
        "/translations",
        json={"source_text": "hello", "source_language": "en", "target_language": "zh", "user_id": "u1"},
    )
    translation_id = created.json()["data"]["id"]

    r = await async_client.get(f"/translations/{translation_id}", params={"user_id": "u1"})
    assert r.status_code == 200
    assert r.json()["data"]["source_text"] == "hello"

    r = await async_client.get(f"/translations/{translation_id}", params={"user_id": "u2"})
    assert r.status_code == 404

    r = await async_client.get(f"/translations/{translation_id}")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_get_public_translation_without_user(async_client):
    created = await async_client.post(
        "/translations",
        json={"source_text": "hello", "source_language": "en", "target_language": "zh"},
    )
    translation_id = created.json()["data"]["id"]

    r = await async_client.get(f"/translations/{translation_id}")
    assert r.status_code == 200
    r = await async_client.get(f"/translations/{translation_id}", params={"user_id": "anyone"})
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_get_missing_translation(async_client):
    r = await async_client.get("/translations/999")
    assert r.status_code == 404
    assert r.json()["error_code"] == "NOT_FOUND"
