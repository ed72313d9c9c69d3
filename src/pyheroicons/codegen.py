"""Generator for the icon constants module.

Turns the iconify dataset names into template Icon constants:

    academic-cap          -> AcademicCap       (Outline)
    academic-cap-solid    -> AcademicCapSolid  (Solid)
    academic-cap-20-solid -> AcademicCapMini   (Mini)
    academic-cap-16-solid -> AcademicCapMicro  (Micro)

The module text is rendered from a Jinja2 template and written atomically,
so an interrupted run never leaves a half-written module behind.
"""

import keyword
import logging
import re
from collections.abc import Iterable
from pathlib import Path

import jinja2
from pydantic import BaseModel

from pyheroicons.constants import (
    GENERATED_MODULE_FILENAME,
    GENERATED_MODULE_TEMPLATE,
    ICON_NAME_VARIANT_FRAGMENTS,
)
from pyheroicons.exceptions import CodegenError, chain_exception
from pyheroicons.models.dataset import IconDataset
from pyheroicons.models.icon import IconVariant
from pyheroicons.utils.file_utils import PathLike, atomic_write
from pyheroicons.utils.path_utils import path_resolver

logger = logging.getLogger(__name__)

# Lower-case words joined by single hyphens
ICON_NAME_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

# Names the generated module defines itself
RESERVED_MODULE_NAMES = frozenset({"Icon", "IconVariant", "IconNotFoundError", "ICONS"})


class IconDefinition(BaseModel):
    """One constant in the generated module."""

    name: str
    constant: str
    variant: IconVariant


def detect_variant(name: str) -> IconVariant:
    """Detect an icon's variant from its dataset name.

    Size markers take precedence over the ``solid`` marker, since the mini
    and micro sets only exist in solid form.
    """
    segments = name.split("-")
    if "16" in segments:
        return IconVariant.MICRO
    if "20" in segments:
        return IconVariant.MINI
    if "solid" in segments:
        return IconVariant.SOLID
    return IconVariant.OUTLINE


def clean_icon_name(name: str) -> str:
    """Strip the variant markers from a dataset name."""
    cleaned = f"{name}-"
    for fragment in ICON_NAME_VARIANT_FRAGMENTS:
        cleaned = cleaned.replace(f"{fragment}-", "-")
    return cleaned.rstrip("-")


def to_pascal_case(name: str) -> str:
    """Convert a hyphenated name to PascalCase (``x-mark`` -> ``XMark``)."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("-") if part)


def constant_name(name: str, variant: IconVariant) -> str:
    """Build the Python identifier for an icon.

    Args:
        name: Dataset icon name
        variant: Detected variant

    Returns:
        PascalCase base name plus the variant suffix for non-Outline icons,
        prefixed with ``Icon`` when that alone is not a usable identifier.
    """
    base = to_pascal_case(clean_icon_name(name))
    identifier = base if variant == IconVariant.OUTLINE else f"{base}{variant.value}"

    if (
        not identifier.isidentifier()
        or keyword.iskeyword(identifier)
        or identifier in RESERVED_MODULE_NAMES
    ):
        identifier = f"Icon{identifier}"
    return identifier


def build_definitions(names: Iterable[str]) -> list[IconDefinition]:
    """Build the constant definitions for a set of dataset names.

    Names are processed in sorted order, so when two names map to the same
    identifier the first one wins on every run. Invalid names and later
    duplicates are logged and skipped.

    Returns:
        Definitions sorted by constant name.
    """
    definitions: dict[str, IconDefinition] = {}

    for name in sorted(set(names)):
        if not ICON_NAME_PATTERN.match(name):
            logger.warning(f"Skipping icon with invalid name {name!r}")
            continue

        variant = detect_variant(name)
        constant = constant_name(name, variant)

        existing = definitions.get(constant)
        if existing is not None:
            logger.warning(
                f"Skipping icon {name!r}: constant {constant} already used by {existing.name!r}"
            )
            continue

        definitions[constant] = IconDefinition(name=name, constant=constant, variant=variant)

    return [definitions[constant] for constant in sorted(definitions)]


def create_environment(templates_dir: Path | None = None) -> jinja2.Environment:
    """Create the Jinja2 environment for Python source templates."""
    loader_dir = templates_dir if templates_dir is not None else path_resolver.get_templates_dir()
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(loader_dir),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_module(
    definitions: list[IconDefinition], jinja_env: jinja2.Environment | None = None
) -> str:
    """Render the constants module source.

    Raises:
        CodegenError: If the template cannot be loaded or rendered.
    """
    env = jinja_env if jinja_env is not None else create_environment()
    try:
        template = env.get_template(GENERATED_MODULE_TEMPLATE)
        return template.render(definitions=definitions)
    except jinja2.TemplateError as e:
        logger.error(f"Failed to render {GENERATED_MODULE_TEMPLATE}: {e}")
        raise chain_exception(
            CodegenError(
                "Failed to render icon constants module",
                {"template": GENERATED_MODULE_TEMPLATE, "error": str(e)},
            ),
            e,
        ) from e


def default_output_path() -> Path:
    """Location of the constants module inside the installed package."""
    return path_resolver.package_dir / GENERATED_MODULE_FILENAME


def generate_icons_module(dataset: IconDataset, output_path: PathLike | None = None) -> Path:
    """Generate the icon constants module from a dataset.

    Args:
        dataset: Parsed icon dataset
        output_path: Destination file; defaults to the package's icons.py

    Returns:
        Path of the written module.

    Raises:
        CodegenError: If the dataset yields no icons or the file cannot be written.
    """
    definitions = build_definitions(dataset.icons)
    if not definitions:
        raise CodegenError(
            "Dataset contains no usable icons", {"prefix": dataset.prefix or "unknown"}
        )

    source = render_module(definitions)
    target = (
        path_resolver.normalize_path(output_path)
        if output_path is not None
        else default_output_path()
    )

    try:
        atomic_write(target, source)
    except OSError as e:
        logger.error(f"Failed to write icon constants module to {target}: {e}")
        raise chain_exception(
            CodegenError(
                "Failed to write icon constants module", {"path": str(target), "error": str(e)}
            ),
            e,
        ) from e

    logger.info(f"Generated {len(definitions)} icon constants in {target}")
    return target
