"""Parametrized inline SVG rendering for Heroicons.

Typical use:

    from pyheroicons import configure_icon, icons

    markup = configure_icon(icons.Moon).set_size(32).set_attrs({"class": "h-8"}).render()
"""

from pyheroicons.body_cache import IconBodyCache, default_body_cache
from pyheroicons.builder import IconBuilder, configure_icon
from pyheroicons.exceptions import (
    CodegenError,
    ConfigFileNotFoundError,
    ConfigurationError,
    DatasetError,
    DatasetFetchError,
    DatasetMalformedError,
    HeroiconsError,
    IconError,
    IconNotFoundError,
    InvalidConfigError,
)
from pyheroicons.models.icon import Icon, IconVariant
from pyheroicons.renderer import IconRenderer, default_renderer, render_icon

__version__ = "0.1.0"

__all__ = [
    # Icon model
    "Icon",
    "IconVariant",
    # Building and rendering
    "IconBuilder",
    "configure_icon",
    "IconRenderer",
    "default_renderer",
    "render_icon",
    # Body cache
    "IconBodyCache",
    "default_body_cache",
    # Exceptions
    "HeroiconsError",
    "ConfigurationError",
    "InvalidConfigError",
    "ConfigFileNotFoundError",
    "IconError",
    "IconNotFoundError",
    "DatasetError",
    "DatasetMalformedError",
    "DatasetFetchError",
    "CodegenError",
]
