"""Attribute sanitization for the root <svg> tag.

Extra attributes supplied by callers must never override the attributes the
renderer controls and must not smuggle script into the page:

- names that are not valid XML attribute names are dropped, so a key can
  never smuggle a second attribute into the tag
- reserved names (xmlns, viewBox, width, height, stroke-width, stroke, fill)
  are always dropped
- allowlisted event handlers (onclick, onchange, onhover) are dropped when
  their value contains a script tag or a javascript: URI
- everything else is kept with key and value HTML-escaped

Rejections are a policy filter, not an error, so they are only debug-logged.
"""

import logging
import re
from collections.abc import Mapping, Set

from markupsafe import escape

from pyheroicons.constants import (
    ALLOWED_EVENT_ATTRIBUTES,
    RESERVED_SVG_ATTRIBUTES,
    UNSAFE_EVENT_VALUE_MARKERS,
)

logger = logging.getLogger(__name__)

# XML Name production restricted to ASCII
ATTRIBUTE_NAME_PATTERN = re.compile(r"[A-Za-z_:][-A-Za-z0-9_:.]*")


def is_valid_attribute_name(key: object) -> bool:
    """Check that a key is a single well-formed attribute name."""
    return isinstance(key, str) and ATTRIBUTE_NAME_PATTERN.fullmatch(key) is not None


def is_reserved(key: str, reserved: Set[str] = RESERVED_SVG_ATTRIBUTES) -> bool:
    """Check whether an attribute name is controlled by the renderer.

    Attribute names are case-insensitive in HTML, so ``Fill`` is as
    reserved as ``fill``.
    """
    lowered = key.lower()
    return any(lowered == name.lower() for name in reserved)


def is_event_attribute(key: str) -> bool:
    """Check whether an attribute name is an allowlisted event handler."""
    return key.lower() in ALLOWED_EVENT_ATTRIBUTES


def is_safe_event_value(value: str) -> bool:
    """Check an event handler value for script markers (case-insensitive)."""
    lowered = value.lower()
    return not any(marker in lowered for marker in UNSAFE_EVENT_VALUE_MARKERS)


def sanitize_attribute(key: str, value: str) -> tuple[str, str] | None:
    """Sanitize a single non-reserved attribute.

    Args:
        key: Attribute name
        value: Attribute value

    Returns:
        The escaped (key, value) pair, or None if the attribute is unsafe.
    """
    if not is_valid_attribute_name(key):
        return None
    if is_event_attribute(key) and not is_safe_event_value(value):
        return None

    # str() first so pre-escaped Markup values are escaped like any other input
    return str(escape(str(key))), str(escape(str(value)))


def sanitize_attributes(
    attrs: Mapping[str, object], reserved: Set[str] = RESERVED_SVG_ATTRIBUTES
) -> list[tuple[str, str]]:
    """Filter and escape extra attributes in deterministic order.

    Args:
        attrs: Attribute name to value mapping; non-string values are skipped
        reserved: Names that are always skipped

    Returns:
        Escaped (key, value) pairs sorted by key.
    """
    sanitized: list[tuple[str, str]] = []

    for key in sorted(attrs):
        value = attrs[key]
        if not isinstance(value, str):
            logger.debug(f"Skipping attribute {key!r} with non-string value")
            continue

        if not is_valid_attribute_name(key):
            logger.debug(f"Skipping invalid attribute name {key!r}")
            continue

        if is_reserved(key, reserved):
            logger.debug(f"Skipping reserved attribute {key!r}")
            continue

        pair = sanitize_attribute(key, value)
        if pair is None:
            logger.debug(f"Dropping unsafe event attribute {key!r}")
            continue

        sanitized.append(pair)

    return sanitized


def format_attributes(pairs: list[tuple[str, str]]) -> str:
    """Serialize sanitized pairs as ` key="value"` fragments."""
    return "".join(f' {key}="{value}"' for key, value in pairs)
