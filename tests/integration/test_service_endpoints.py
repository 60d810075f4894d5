import pytest
from fastapi.testclient import TestClient

from app.core.db import Base
from app.main import app

client = TestClient(app)


def test_root():
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "running"
    assert "version" in body


def test_detect_language_chinese():
    r = client.get("/detect-language", params={"text": "你好 world"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data == {"detected_language": "zh", "confidence": 0.95}


def test_detect_language_english():
    r = client.get("/detect-language", params={"text": "good morning"})
    assert r.json()["data"]["detected_language"] == "en"


def test_detect_language_requires_text():
    r = client.get("/detect-language", params={"text": ""})
    assert r.status_code == 422
    assert r.json()["error_code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_health_ok(async_client):
    r = await async_client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["database"] == {"status": "ok"}
    assert body["environment"] == "testing"
    assert "timestamp" in body


@pytest.mark.asyncio
async def test_health_survives_missing_tables(async_client, engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    r = await async_client.get("/health")
    assert r.status_code == 200
