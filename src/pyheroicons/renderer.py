"""Icon markup rendering.

Serializes an Icon into an inline <svg> tag:

    <svg xmlns=... width=S height=S viewBox="0 0 D D" [variant defaults]
         [color] [extra attrs, sorted]>BODY</svg>

S is the icon's size and D the variant's canonical dimension, so changing
the size scales the drawing without touching its coordinate space.
"""

import logging

from markupsafe import Markup, escape

from pyheroicons.body_cache import IconBodyCache, default_body_cache
from pyheroicons.constants import (
    DEFAULT_OUTLINE_FILL,
    DEFAULT_SOLID_FILL,
    DEFAULT_STROKE,
    DEFAULT_STROKE_WIDTH,
    ERROR_COMMENT_TEMPLATE,
    RESERVED_SVG_ATTRIBUTES,
    SVG_NAMESPACE,
)
from pyheroicons.exceptions import DatasetMalformedError, IconError
from pyheroicons.models.icon import Icon, IconVariant
from pyheroicons.sanitizer import format_attributes, sanitize_attributes


def error_comment(error: Exception) -> Markup:
    """Render an error as an HTML comment that cannot break out of itself."""
    return Markup(ERROR_COMMENT_TEMPLATE.format(error=escape(str(error))))


def variant_attributes(icon: Icon) -> str:
    """Get the default visual attributes for the icon's variant.

    Overrides set on the icon replace the defaults. Unknown variants get no
    visual attributes at all.
    """
    match icon.variant:
        case IconVariant.OUTLINE:
            fill = escape(icon.fill or DEFAULT_OUTLINE_FILL)
            stroke_width = escape(icon.stroke_width or DEFAULT_STROKE_WIDTH)
            stroke = escape(icon.stroke or DEFAULT_STROKE)
            return f' fill="{fill}" stroke-width="{stroke_width}" stroke="{stroke}"'
        case IconVariant.SOLID | IconVariant.MINI | IconVariant.MICRO:
            fill = escape(icon.fill or DEFAULT_SOLID_FILL)
            return f' fill="{fill}"'
        case _:
            return ""


class IconRenderer:
    """Renderer for icons to inline SVG markup.

    Attributes:
        body_cache: Cache used to resolve bodies that are not set yet
        logger: Logger instance
    """

    def __init__(self, body_cache: IconBodyCache | None = None) -> None:
        """Initialize the renderer.

        Args:
            body_cache: Body cache to use; defaults to the shared cache.
        """
        self.body_cache = body_cache if body_cache is not None else default_body_cache
        self.logger = logging.getLogger(__name__)

    def render(self, icon: Icon) -> Markup:
        """Render an icon.

        An icon whose body cannot be resolved renders as an HTML comment
        naming the problem, so one bad reference or a broken dataset never
        breaks the surrounding page. The body cache itself still raises.

        Args:
            icon: Icon to render; its body is resolved and stored if unset

        Returns:
            The markup, marked safe for Jinja2 and other Markup-aware hosts.
        """
        if icon.body is None:
            try:
                icon.body = self.body_cache.resolve(icon.name)
            except IconError as e:
                self.logger.warning(f"Cannot render icon: {e}")
                return error_comment(e)
            except DatasetMalformedError as e:
                self.logger.error(f"Cannot render icon {icon.name!r}: {e}")
                return error_comment(e)

        dimension = icon.canonical_size
        parts = [
            f'<svg xmlns="{SVG_NAMESPACE}"',
            f' width="{icon.size}" height="{icon.size}" viewBox="0 0 {dimension} {dimension}"',
            variant_attributes(icon),
        ]

        reserved = RESERVED_SVG_ATTRIBUTES
        if icon.color:
            parts.append(f' color="{escape(icon.color)}"')
            reserved = reserved | {"color"}

        parts.append(format_attributes(sanitize_attributes(icon.attrs, reserved)))
        parts.append(">")
        parts.append(icon.body)
        parts.append("</svg>")

        return Markup("".join(parts))


# Shared renderer backed by the shared body cache
default_renderer = IconRenderer()


def render_icon(icon: Icon) -> Markup:
    """Render an icon with the shared renderer."""
    return default_renderer.render(icon)
