"""Jinja2 integration for rendering icons inside templates.

Registers a ``heroicon`` global and a ``heroicon`` filter on a Jinja2
environment:

    {{ heroicon("moon", size=32, css_class="h-8 w-8") }}
    {{ icons.SunSolid | heroicon(color="#f59e0b") }}

Both return Markup, so the SVG is emitted as-is even with autoescaping on.
"""

from collections.abc import Mapping

import jinja2
from markupsafe import Markup

from pyheroicons.builder import IconBuilder
from pyheroicons.icons import ICONS
from pyheroicons.models.icon import Icon
from pyheroicons.renderer import IconRenderer


class IconTemplateManager:
    """Manages the icon globals and filters of a Jinja2 environment.

    Attributes:
        jinja_env: Environment the helpers are registered on
        renderer: Renderer used for every icon, None for the shared one
        registry: Icon name to template icon lookup
    """

    def __init__(
        self,
        jinja_env: jinja2.Environment,
        renderer: IconRenderer | None = None,
        registry: Mapping[str, Icon] | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            jinja_env: Jinja2 environment to register helpers on
            renderer: Renderer to use; defaults to the shared renderer
            registry: Template icons by name; defaults to the generated set
        """
        self.jinja_env = jinja_env
        self.renderer = renderer
        self.registry = registry if registry is not None else ICONS

    def register_all(self) -> None:
        """Register the icon global and filter."""
        self.jinja_env.globals["heroicon"] = self.heroicon
        self.jinja_env.filters["heroicon"] = self.heroicon_filter

    def heroicon(
        self,
        name: str,
        size: int | None = None,
        stroke: str | None = None,
        stroke_width: str | None = None,
        fill: str | None = None,
        color: str | None = None,
        attrs: Mapping[str, str] | None = None,
        css_class: str | None = None,
    ) -> Markup:
        """Render an icon by name.

        Names without a template are rendered as a plain Outline icon, which
        yields the not-found comment when the dataset lacks them too.
        """
        template = self.registry.get(name)
        if template is None:
            template = Icon(name=name)
        return self._render(
            template, size, stroke, stroke_width, fill, color, attrs, css_class
        )

    def heroicon_filter(
        self,
        icon: Icon,
        size: int | None = None,
        stroke: str | None = None,
        stroke_width: str | None = None,
        fill: str | None = None,
        color: str | None = None,
        attrs: Mapping[str, str] | None = None,
        css_class: str | None = None,
    ) -> Markup:
        """Render a template icon passed through the filter pipe."""
        return self._render(icon, size, stroke, stroke_width, fill, color, attrs, css_class)

    def _render(
        self,
        template: Icon,
        size: int | None,
        stroke: str | None,
        stroke_width: str | None,
        fill: str | None,
        color: str | None,
        attrs: Mapping[str, str] | None,
        css_class: str | None,
    ) -> Markup:
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

        extra = dict(attrs or {})
        if css_class:
            extra["class"] = css_class
        if extra:
            builder.set_attrs(extra)

        return builder.render()


def register_jinja_globals(
    jinja_env: jinja2.Environment, renderer: IconRenderer | None = None
) -> IconTemplateManager:
    """Register the icon helpers on an environment.

    Args:
        jinja_env: Jinja2 environment to extend
        renderer: Renderer to use; defaults to the shared renderer

    Returns:
        The manager that owns the registered helpers.
    """
    manager = IconTemplateManager(jinja_env, renderer)
    manager.register_all()
    return manager
