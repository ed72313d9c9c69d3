"""Tests for the demo web server."""

import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pyheroicons.body_cache import IconBodyCache
from pyheroicons.dataset.sources import InMemoryDatasetSource
from pyheroicons.models.config import AppConfig
from pyheroicons.models.icon import Icon, IconVariant
from pyheroicons.renderer import IconRenderer
from pyheroicons.server.main import DemoServer, lifespan


@pytest.fixture()
def registry() -> dict[str, Icon]:
    """Template icons matching the sample dataset."""
    return {
        "moon": Icon(name="moon"),
        "moon-solid": Icon(name="moon-solid", variant=IconVariant.SOLID),
        "moon-20-solid": Icon(name="moon-20-solid", variant=IconVariant.MINI),
        "moon-16-solid": Icon(name="moon-16-solid", variant=IconVariant.MICRO),
        "sun": Icon(name="sun"),
    }


@pytest.fixture()
def server(app_config: AppConfig, renderer, registry) -> DemoServer:
    """A demo server over the sample dataset."""
    return DemoServer(app_config, renderer=renderer, registry=registry)


@pytest.fixture()
def client(server: DemoServer) -> TestClient:
    """Test client for the demo server."""
    return TestClient(server.app)


class TestHealth:
    """Test the health endpoint."""

    def test_health(self, client):
        """Test the health check reports the icon count."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "icons": 5}


class TestIconEndpoint:
    """Test the standalone SVG endpoint."""

    def test_icon_svg(self, client):
        """Test an icon is served as SVG."""
        response = client.get("/icons/moon.svg")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text == (
            '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24"'
            ' viewBox="0 0 24 24" fill="none" stroke-width="1.5" stroke="currentColor">'
            '<path d="M1"/></svg>'
        )

    def test_icon_svg_overrides(self, client):
        """Test query parameters override the template."""
        response = client.get(
            "/icons/moon.svg",
            params={"size": 48, "stroke": "red", "stroke_width": "2", "color": "#000"},
        )

        assert response.status_code == 200
        assert 'width="48" height="48" viewBox="0 0 24 24"' in response.text
        assert 'stroke-width="2" stroke="red" color="#000">' in response.text

    def test_icon_svg_fill(self, client):
        """Test the fill override on a filled variant."""
        response = client.get("/icons/moon-20-solid.svg", params={"fill": "blue"})
        assert 'viewBox="0 0 20 20" fill="blue">' in response.text

    def test_unknown_icon(self, client):
        """Test unknown icons are a 404."""
        response = client.get("/icons/nonexistent.svg")
        assert response.status_code == 404
        assert "nonexistent" in response.json()["detail"]

    def test_invalid_size(self, client):
        """Test non-positive sizes are rejected by validation."""
        response = client.get("/icons/moon.svg", params={"size": 0})
        assert response.status_code == 422

    def test_malformed_dataset(self, app_config, registry):
        """Test a broken dataset is a server error."""
        renderer = IconRenderer(IconBodyCache(InMemoryDatasetSource("{}")))
        client = TestClient(DemoServer(app_config, renderer=renderer, registry=registry).app)

        response = client.get("/icons/moon.svg")
        assert response.status_code == 500

    def test_template_without_body(self, app_config, renderer):
        """Test a registered icon missing from the dataset is a 404."""
        registry = {"star": Icon(name="star")}
        client = TestClient(DemoServer(app_config, renderer=renderer, registry=registry).app)

        response = client.get("/icons/star.svg")
        assert response.status_code == 404


class TestGallery:
    """Test the gallery page."""

    def test_gallery_lists_all_icons(self, client):
        """Test every icon appears on the page."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "5 of 5 icons" in response.text
        assert '<code>moon-16-solid</code>' in response.text
        assert 'width="32" height="32"' in response.text
        assert 'aria-hidden="true"' in response.text

    def test_gallery_variant_filter(self, client):
        """Test the variant filter narrows the list."""
        response = client.get("/", params={"variant": "Mini"})

        assert "1 of 5 icons" in response.text
        assert "<code>moon-20-solid</code>" in response.text
        assert "<code>sun</code>" not in response.text
        assert '<option value="Mini" selected>' in response.text

    def test_gallery_search(self, client):
        """Test the search query matches name substrings."""
        response = client.get("/", params={"q": "SUN"})
        assert "1 of 5 icons" in response.text
        assert "<code>sun</code>" in response.text

    def test_gallery_no_match(self, client):
        """Test an empty result shows a placeholder."""
        response = client.get("/", params={"q": "star"})
        assert "No icons match." in response.text

    def test_gallery_unknown_variant(self, client):
        """Test unknown variants are a bad request."""
        response = client.get("/", params={"variant": "Duotone"})
        assert response.status_code == 400

    def test_gallery_query_is_escaped(self, client):
        """Test the search text is escaped in the page."""
        response = client.get("/", params={"q": '"><script>'})
        assert "<script>" not in response.text

    def test_gallery_with_malformed_dataset(self, app_config, registry):
        """Test a broken dataset renders error comments instead of failing the page."""
        renderer = IconRenderer(IconBodyCache(InMemoryDatasetSource("not json")))
        client = TestClient(DemoServer(app_config, renderer=renderer, registry=registry).app)

        response = client.get("/")

        assert response.status_code == 200
        assert "<code>moon</code>" in response.text
        assert "<!-- Error: Failed to parse heroicons dataset" in response.text
        assert "<svg" not in response.text


class TestSelectIcons:
    """Test icon filtering."""

    def test_select_all_sorted(self, server):
        """Test no filters return every icon by name."""
        names = [icon.name for icon in server.select_icons()]
        assert names == ["moon", "moon-16-solid", "moon-20-solid", "moon-solid", "sun"]

    def test_select_by_variant_and_query(self, server):
        """Test filters combine."""
        icons = server.select_icons(variant="Solid", query="moon")
        assert [icon.name for icon in icons] == ["moon-solid"]


class TestServerSetup:
    """Test construction and startup."""

    def test_default_registry(self, app_config):
        """Test the generated icons are served by default."""
        from pyheroicons.icons import ICONS

        server = DemoServer(app_config)
        assert server.registry is ICONS

    def test_app_factory(self, app_config, renderer, registry):
        """Test a custom app factory is used."""
        app = FastAPI()
        server = DemoServer(
            app_config, renderer=renderer, registry=registry, app_factory=lambda: app
        )
        assert server.app is app

    def test_run_uses_config(self, server):
        """Test run() starts uvicorn with the configured address."""
        with patch("uvicorn.run") as mock_run:
            server.run()

        mock_run.assert_called_once_with(server.app, host="127.0.0.1", port=8000, log_config=None)

    def test_run_overrides(self, server):
        """Test explicit host and port win over the config."""
        with patch("uvicorn.run") as mock_run:
            server.run(host="0.0.0.0", port=9000)

        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
        assert mock_run.call_args.kwargs["port"] == 9000

    @pytest.mark.asyncio()
    async def test_lifespan_logs(self, caplog):
        """Test startup and shutdown are logged."""
        with caplog.at_level(logging.INFO, logger="pyheroicons.server.main"):
            async with lifespan(MagicMock()):
                pass

        assert "Starting Heroicons demo server" in caplog.text
        assert "Shutting down Heroicons demo server" in caplog.text
