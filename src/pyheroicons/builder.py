"""Fluent icon configuration.

An IconBuilder owns a private clone of a template icon, so chained overrides
never reach the template:

    configure_icon(icons.Moon).set_size(32).set_stroke("#0f172a").render()

A builder is meant for a single call chain on a single thread. ``build()``
returns a fresh snapshot on every call, so records it has already handed out
are unaffected by later builder calls.
"""

from collections.abc import Mapping

from markupsafe import Markup

from pyheroicons.models.icon import Icon
from pyheroicons.renderer import IconRenderer, default_renderer


class IconBuilder:
    """Chainable overrides on a private icon clone."""

    def __init__(self, icon: Icon, renderer: IconRenderer | None = None) -> None:
        """Create a builder from a template icon.

        Args:
            icon: Template icon; it is cloned once and never modified
            renderer: Renderer used by render(); defaults to the shared one
        """
        self._icon = icon.clone()
        self._renderer = renderer

    def set_size(self, size: int) -> "IconBuilder":
        """Set the rendered width and height in pixels."""
        self._icon.size = size
        return self

    def set_stroke(self, value: str) -> "IconBuilder":
        """Set the Outline stroke color."""
        self._icon.stroke = value
        return self

    def set_stroke_width(self, value: str) -> "IconBuilder":
        """Set the Outline stroke width."""
        self._icon.stroke_width = value
        return self

    def set_fill(self, value: str) -> "IconBuilder":
        """Set the fill."""
        self._icon.fill = value
        return self

    def set_color(self, value: str) -> "IconBuilder":
        """Set the CSS color that currentColor resolves to."""
        self._icon.color = value
        return self

    def set_attrs(self, attrs: Mapping[str, str]) -> "IconBuilder":
        """Replace the extra attributes.

        Args:
            attrs: Attribute name to string value mapping

        Raises:
            ValidationError: If a value is not a string.
        """
        self._icon.attrs = dict(attrs)
        return self

    def build(self) -> Icon:
        """Return a snapshot of the configured icon."""
        return self._icon.clone()

    def render(self) -> Markup:
        """Render a snapshot of the configured icon."""
        renderer = self._renderer if self._renderer is not None else default_renderer
        return renderer.render(self.build())


def configure_icon(icon: Icon, renderer: IconRenderer | None = None) -> IconBuilder:
    """Start a configuration chain from a template icon."""
    return IconBuilder(icon, renderer)
