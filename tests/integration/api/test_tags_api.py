"""Integration tests for Tags API."""

import pytest
from httpx import AsyncClient


class TestTagsAPI:
    """Integration tests for tag listings."""

    @pytest.mark.asyncio
    async def test_list_tags(self, api_client: AsyncClient):
        """Test GET /api/v1/tags."""
        await api_client.post("/api/v1/entries", json={"content": "a", "tags": ["web", "code"]})
        await api_client.post("/api/v1/entries", json={"content": "b", "tags": ["code"]})

        response = await api_client.get("/api/v1/tags")

        assert response.status_code == 200
        assert response.json()["data"] == ["code", "web"]

    @pytest.mark.asyncio
    async def test_list_tags_empty(self, api_client: AsyncClient):
        response = await api_client.get("/api/v1/tags")

        assert response.status_code == 200
        assert response.json()["data"] == []

    @pytest.mark.asyncio
    async def test_popular_tags(self, api_client: AsyncClient):
        """Test GET /api/v1/tags/popular."""
        await api_client.post("/api/v1/entries", json={"content": "a", "tags": ["web", "code"]})
        await api_client.post("/api/v1/entries", json={"content": "b", "tags": ["code"]})

        response = await api_client.get("/api/v1/tags/popular")

        assert response.status_code == 200
        assert response.json()["data"] == [
            {"tag": "code", "count": 2},
            {"tag": "web", "count": 1},
        ]

    @pytest.mark.asyncio
    async def test_popular_tags_limit(self, api_client: AsyncClient):
        await api_client.post("/api/v1/entries", json={"content": "a", "tags": ["x", "y", "z"]})

        response = await api_client.get("/api/v1/tags/popular", params={"limit": 1})

        assert response.json()["data"] == [{"tag": "x", "count": 1}]

    @pytest.mark.asyncio
    async def test_popular_tags_limit_out_of_range(self, api_client: AsyncClient):
        response = await api_client.get("/api/v1/tags/popular", params={"limit": 51})

        assert response.status_code == 422
