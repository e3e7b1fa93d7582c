"""
Tests for the health endpoint and error envelope.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"code": 200, "message": "API is healthy."}


@pytest.mark.asyncio
async def test_malformed_json_body_is_400(client: AsyncClient):
    response = await client.post(
        "/api/buttons",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False
