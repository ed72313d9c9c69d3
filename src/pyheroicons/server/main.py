"""Demo web server for browsing and rendering icons.

Implements a small FastAPI application: an HTML gallery of every template
icon, a standalone SVG endpoint that applies query-string overrides, and a
health check.
"""

import logging
from collections.abc import AsyncIterator, Callable, Mapping
from contextlib import asynccontextmanager

import jinja2
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, Response

from pyheroicons.builder import IconBuilder
from pyheroicons.constants import DEFAULT_SERVER_HOST, GALLERY_TEMPLATE, SVG_MEDIA_TYPE
from pyheroicons.exceptions import DatasetMalformedError
from pyheroicons.icons import ICONS
from pyheroicons.models.config import AppConfig
from pyheroicons.models.icon import Icon, IconVariant
from pyheroicons.renderer import IconRenderer, default_renderer
from pyheroicons.templating import IconTemplateManager
from pyheroicons.utils.path_utils import path_resolver


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown.

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting Heroicons demo server")

    yield

    logger.info("Shutting down Heroicons demo server")


class DemoServer:
    """Demo server application.

    Attributes:
        config: Application configuration
        logger: Logger instance
        app: FastAPI application instance
        renderer: Renderer shared by every route
        registry: Template icons by name
        jinja_env: Environment for the gallery page
    """

    def __init__(
        self,
        config: AppConfig,
        renderer: IconRenderer | None = None,
        registry: Mapping[str, Icon] | None = None,
        app_factory: Callable[[], FastAPI] = lambda: FastAPI(
            title="Heroicons Demo", lifespan=lifespan
        ),
    ) -> None:
        """Initialize the server.

        Args:
            config: Application configuration.
            renderer: Renderer to use; defaults to the shared renderer.
            registry: Template icons; defaults to the generated set.
            app_factory: Optional factory function to create FastAPI app.
        """
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.app = app_factory()
        self.renderer = renderer if renderer is not None else default_renderer
        self.registry = registry if registry is not None else ICONS

        template_dir = path_resolver.get_templates_dir()
        self.logger.info(f"Using templates directory: {template_dir}")
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(template_dir), autoescape=True
        )
        IconTemplateManager(self.jinja_env, self.renderer, self.registry).register_all()

        self._setup_routes()

        self.logger.info(f"Heroicons demo server initialized with {len(self.registry)} icons")

    def _setup_routes(self) -> None:
        """Set up FastAPI routes.

        Registers route handlers for:
        - GET /health: Health check with the icon count
        - GET /: HTML gallery, filterable by variant and name
        - GET /icons/{name}.svg: A single icon as a standalone SVG
        """

        @self.app.get("/health")
        async def health() -> dict[str, str | int]:
            """Health check endpoint."""
            return {"status": "ok", "icons": len(self.registry)}

        @self.app.get("/", response_class=HTMLResponse)
        async def gallery(variant: str | None = None, q: str | None = None) -> HTMLResponse:
            """Render the icon gallery page.

            Args:
                variant: Only show icons of this variant.
                q: Only show icons whose name contains this text.

            Raises:
                HTTPException: 400 for an unknown variant.
            """
            return HTMLResponse(self._render_gallery(variant, q))

        @self.app.get("/icons/{name}.svg")
        async def icon_svg(
            name: str,
            size: int | None = Query(default=None, ge=1),
            stroke: str | None = None,
            stroke_width: str | None = None,
            fill: str | None = None,
            color: str | None = None,
        ) -> Response:
            """Render one icon as an SVG document.

            Raises:
                HTTPException: 404 if the icon does not exist, 500 if the
                    dataset cannot be decoded.
            """
            template = self.registry.get(name)
            try:
                available = template is not None and name in self.renderer.body_cache
            except DatasetMalformedError as e:
                self.logger.error(f"Cannot render icon {name!r}: {e}")
                raise HTTPException(status_code=500, detail=e.message) from e
            if not available:
                raise HTTPException(status_code=404, detail=f"icon '{name}' not found")

            builder = IconBuilder(template, self.renderer)
            if size is not None:
                builder.set_size(size)
            if stroke is not None:
                builder.set_stroke(stroke)
            if stroke_width is not None:
                builder.set_stroke_width(stroke_width)
            if fill is not None:
                builder.set_fill(fill)
            if color is not None:
                builder.set_color(color)

            return Response(content=str(builder.render()), media_type=SVG_MEDIA_TYPE)

    def select_icons(self, variant: str | None = None, query: str | None = None) -> list[Icon]:
        """Filter the template icons for the gallery.

        Args:
            variant: Variant value to keep, or None for all
            query: Case-insensitive name substring, or None for all

        Returns:
            Matching icons sorted by name.
        """
        needle = query.strip().lower() if query else ""
        return [
            icon
            for name, icon in sorted(self.registry.items())
            if (not variant or icon.variant == variant) and needle in name
        ]

    def _render_gallery(self, variant: str | None, query: str | None) -> str:
        variants = [v.value for v in IconVariant]
        if variant and variant not in variants:
            raise HTTPException(status_code=400, detail=f"Unknown variant: {variant}")

        try:
            template = self.jinja_env.get_template(GALLERY_TEMPLATE)
            return template.render(
                icons=self.select_icons(variant, query),
                total=len(self.registry),
                variants=variants,
                selected_variant=variant or "",
                query=query or "",
                icon_size=self.config.server.demo_icon_size,
            )
        except jinja2.TemplateError as e:
            self.logger.error(f"Error rendering gallery: {e}")
            raise HTTPException(status_code=500, detail=str(e)) from e

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Run the server.

        Starts the Uvicorn ASGI server with the configured FastAPI application.

        Args:
            host: Host to bind to. Defaults to server config or 127.0.0.1 (localhost).
            port: Port to bind to. Defaults to server config or 8000.
        """
        import uvicorn

        bind_host = host or self.config.server.host or DEFAULT_SERVER_HOST
        bind_port = port or self.config.server.port

        self.logger.info(f"Starting Heroicons demo server on http://{bind_host}:{bind_port}")

        uvicorn.run(self.app, host=bind_host, port=bind_port, log_config=None)
