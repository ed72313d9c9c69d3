"""Icon models.

Defines the icon variants with their canonical coordinate space and the
Icon record that carries an icon's identity, its visual overrides and its
lazily resolved path-data body.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyheroicons.constants import (
    DEFAULT_CANONICAL_SIZE,
    MICRO_CANONICAL_SIZE,
    MINI_CANONICAL_SIZE,
)

if TYPE_CHECKING:
    from markupsafe import Markup


class IconVariant(str, Enum):
    """Heroicons style variant."""

    OUTLINE = "Outline"
    SOLID = "Solid"
    MINI = "Mini"
    MICRO = "Micro"


def canonical_size(variant: str) -> str:
    """Get the coordinate-space size of a variant's source art.

    Unknown variants fall back to the 24px grid.

    Args:
        variant: Variant name (an IconVariant or its string value)

    Returns:
        The canonical dimension as a decimal string.
    """
    match variant:
        case IconVariant.MINI:
            return MINI_CANONICAL_SIZE
        case IconVariant.MICRO:
            return MICRO_CANONICAL_SIZE
        case _:
            return DEFAULT_CANONICAL_SIZE


class Icon(BaseModel):
    """A single icon and its rendering overrides.

    ``name`` and ``variant`` are fixed at construction. ``size``, the
    stroke/fill overrides, ``color`` and ``attrs`` may change; ``None``
    means the variant default applies at render time. ``body`` is filled in
    once from the body cache and never changes afterwards.

    Attributes:
        name: Dataset icon name, also the body cache key
        variant: One of the IconVariant values; other strings render
            without variant defaults
        size: Rendered width and height, defaults to the canonical size
        stroke: Outline stroke color override
        stroke_width: Outline stroke width override
        fill: Fill override
        color: Optional CSS color the currentColor defaults inherit
        attrs: Extra string attributes appended to the root tag
        body: Opaque path data placed inside the root tag
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(frozen=True)
    variant: str = Field(default=IconVariant.OUTLINE.value, frozen=True)
    size: str = ""
    stroke: str | None = None
    stroke_width: str | None = None
    fill: str | None = None
    color: str | None = None
    attrs: dict[str, str] = Field(default_factory=dict)
    body: str | None = None

    @field_validator("variant", mode="before")
    @classmethod
    def normalize_variant(cls, v: Any) -> Any:
        """Store variants as plain strings."""
        if isinstance(v, IconVariant):
            return v.value
        return v

    @field_validator("size", mode="before")
    @classmethod
    def normalize_size(cls, v: Any) -> str:
        """Normalize the size to a decimal string.

        Args:
            v: An int or a string of digits; empty means "use the default".

        Returns:
            The size as a decimal string.

        Raises:
            ValueError: If the value is not integer-convertible.
        """
        if isinstance(v, bool):
            raise ValueError("Size must be an integer")
        if isinstance(v, int):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError("Size must be an integer or a string of digits")
        v = v.strip()
        if v and not v.isdigit():
            raise ValueError(f"Size must be a non-negative integer, got {v!r}")
        return v

    def model_post_init(self, __context: Any) -> None:
        """Apply the variant's canonical size when none was given."""
        if not self.size:
            self.size = canonical_size(self.variant)

    @property
    def canonical_size(self) -> str:
        """Coordinate-space size used for the viewBox."""
        return canonical_size(self.variant)

    def clone(self) -> "Icon":
        """Return a copy whose mutation never affects this icon.

        The attrs mapping is copied; the body string is immutable and shared.
        """
        return self.model_copy(deep=True)

    def render(self) -> "Markup":
        """Render this icon with the default renderer."""
        # Imported here to avoid a circular import with the renderer
        from pyheroicons.renderer import render_icon

        return render_icon(self)
