"""Tests for pages API endpoint."""

from typing import Any

import pytest
from markline.config import Config
from markline.server import create_app


class TestGetPage:
    """Tests for GET /api/pages/{path}."""

    @pytest.mark.asyncio
    async def test__existing_page__returns_rendered_content(
        self,
        aiohttp_client: Any,
        test_config: Config,
    ) -> None:
        """Return rendered page for existing markdown file."""
        source_dir = test_config.docs.source_dir
        (source_dir / "guide.md").write_text("# Guide\nThis is a guide.")
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/pages/guide")

        assert response.status == 200
        data = await response.json()
        assert data["meta"]["path"] == "/guide"
        assert data["meta"]["source_file"] == str(source_dir / "guide.md")
        assert data["content"] == "<h1>Guide</h1><p>This is a guide.</p>"
        assert response.headers["Cache-Control"] == "private, max-age=60"
        assert "Last-Modified" in response.headers

    @pytest.mark.asyncio
    async def test__missing_page__returns_404(
        self,
        aiohttp_client: Any,
        test_config: Config,
    ) -> None:
        """Return 404 for non-existent page."""
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/pages/nonexistent")

        assert response.status == 404
        data = await response.json()
        assert data["error"] == "Page not found"
        assert data["path"] == "nonexistent"

    @pytest.mark.asyncio
    async def test__matching_etag__returns_304(
        self,
        aiohttp_client: Any,
        test_config: Config,
    ) -> None:
        """Return 304 when If-None-Match matches the content ETag."""
        (test_config.docs.source_dir / "guide.md").write_text("# Guide")
        client = await aiohttp_client(create_app(test_config))

        first = await client.get("/api/pages/guide")
        etag = first.headers["ETag"]
        second = await client.get("/api/pages/guide", headers={"If-None-Match": etag})

        assert second.status == 304

    @pytest.mark.asyncio
    async def test__root_path__renders_index(
        self,
        aiohttp_client: Any,
        test_config: Config,
    ) -> None:
        """Render index.md for the root path."""
        (test_config.docs.source_dir / "index.md").write_text("Home")
        client = await aiohttp_client(create_app(test_config))

        response = await client.get("/api/pages/")

        assert response.status == 200
        data = await response.json()
        assert data["meta"]["path"] == "/"
        assert data["content"] == "<p>Home</p>"
