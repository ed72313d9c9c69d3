"""Command line interface for pyheroicons.

Subcommands:
- fetch: refresh the cached icon dataset
- generate: regenerate the icon constants module (and optionally the bundled dataset)
- serve: run the demo web server
- render: print the markup for one icon
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from pyheroicons.builder import IconBuilder
from pyheroicons.codegen import generate_icons_module
from pyheroicons.constants import CLI_PROG_NAME, DATASET_FILENAME
from pyheroicons.dataset.fetcher import DatasetFetcher
from pyheroicons.exceptions import (
    CodegenError,
    ConfigurationError,
    HeroiconsError,
    IconNotFoundError,
    InvalidConfigError,
    chain_exception,
)
from pyheroicons.icons import get_icon
from pyheroicons.models.config import AppConfig
from pyheroicons.models.icon import Icon
from pyheroicons.utils import file_utils
from pyheroicons.utils.early_error_handler import handle_keyboard_interrupt, handle_startup_error
from pyheroicons.utils.logging import setup_logging
from pyheroicons.utils.path_utils import path_resolver, validate_config_path

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130

logger = logging.getLogger(__name__)


def parse_attribute(value: str) -> tuple[str, str]:
    """Parse a ``key=value`` command line attribute.

    Raises:
        argparse.ArgumentTypeError: If there is no ``=`` or the key is empty.
    """
    key, sep, attr_value = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got {value!r}")
    return key, attr_value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog=CLI_PROG_NAME, description="Render Heroicons as inline SVG markup"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,  # Will use path_resolver to search the standard locations
        help="Path to configuration file (default: search ./, ~/.config, /etc)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch = subparsers.add_parser("fetch", help="Download the icon dataset into the cache")
    fetch.add_argument("--force", action="store_true", help="Ignore a fresh cache file")
    fetch.set_defaults(handler=run_fetch)

    generate = subparsers.add_parser("generate", help="Generate the icon constants module")
    generate.add_argument("--force", action="store_true", help="Ignore a fresh cache file")
    generate.add_argument(
        "--output", type=Path, default=None, help="Output module (default: package icons.py)"
    )
    generate.add_argument(
        "--bundle", action="store_true", help="Also copy the dataset into the package data"
    )
    generate.set_defaults(handler=run_generate)

    serve = subparsers.add_parser("serve", help="Run the demo web server")
    serve.add_argument("--host", type=str, help="Host to bind to (default: config value)")
    serve.add_argument("--port", type=int, help="Port to bind to (default: config value)")
    serve.set_defaults(handler=run_serve)

    render = subparsers.add_parser("render", help="Print the SVG markup for an icon")
    render.add_argument("name", help="Dataset icon name, e.g. moon or moon-20-solid")
    render.add_argument("--size", type=int, help="Width and height in pixels")
    render.add_argument("--stroke", help="Outline stroke color")
    render.add_argument("--stroke-width", dest="stroke_width", help="Outline stroke width")
    render.add_argument("--fill", help="Fill color")
    render.add_argument("--color", help="CSS color inherited by currentColor")
    render.add_argument(
        "--attr",
        dest="attrs",
        action="append",
        type=parse_attribute,
        default=[],
        metavar="KEY=VALUE",
        help="Extra attribute for the svg tag (repeatable)",
    )
    render.set_defaults(handler=run_render)

    return parser


def load_config(config_path: Path | None) -> AppConfig:
    """Load the application configuration.

    Args:
        config_path: Explicit configuration file, or None to search for one

    Returns:
        The loaded configuration, or the defaults when no file exists.

    Raises:
        ConfigFileNotFoundError: If an explicit path does not exist.
        InvalidConfigError: If the file is not valid YAML or fails validation.
    """
    resolved_path = validate_config_path(config_path)
    if resolved_path is None:
        return AppConfig()

    try:
        return AppConfig.from_yaml(resolved_path)
    except (ValidationError, yaml.YAMLError) as e:
        raise chain_exception(
            InvalidConfigError(
                "Invalid configuration file", {"path": str(resolved_path), "error": str(e)}
            ),
            e,
        ) from e


def run_fetch(args: argparse.Namespace, config: AppConfig) -> int:
    """Refresh the dataset cache."""
    fetcher = DatasetFetcher(config.dataset)
    dataset = asyncio.run(fetcher.fetch_and_cache(force=args.force))
    logger.info(f"Dataset ready with {len(dataset.icons)} icons")
    print(fetcher.cache_path)
    return EXIT_OK


def run_generate(args: argparse.Namespace, config: AppConfig) -> int:
    """Regenerate the icon constants module from the dataset."""
    fetcher = DatasetFetcher(config.dataset)
    dataset = asyncio.run(fetcher.fetch_and_cache(force=args.force))

    output = args.output or config.codegen.output_file or None
    module_path = generate_icons_module(dataset, output)
    print(module_path)

    if args.bundle:
        bundle_path = path_resolver.get_data_file(DATASET_FILENAME)
        try:
            file_utils.atomic_write(bundle_path, file_utils.read_bytes(fetcher.cache_path))
        except OSError as e:
            raise chain_exception(
                CodegenError(
                    "Failed to bundle dataset",
                    {"source": str(fetcher.cache_path), "path": str(bundle_path)},
                ),
                e,
            ) from e
        logger.info(f"Bundled dataset to {bundle_path}")
        print(bundle_path)

    return EXIT_OK


def run_serve(args: argparse.Namespace, config: AppConfig) -> int:
    """Run the demo server until interrupted."""
    # Imported here so the other commands do not pay for FastAPI
    from pyheroicons.server.main import DemoServer

    DemoServer(config).run(host=args.host, port=args.port)
    return EXIT_OK


def run_render(args: argparse.Namespace, config: AppConfig) -> int:
    """Print one icon's markup; unknown icons print the error comment."""
    exit_code = EXIT_OK
    try:
        template = get_icon(args.name)
    except IconNotFoundError as e:
        logger.error(str(e))
        template = Icon(name=args.name)
        exit_code = EXIT_FAILURE

    builder = IconBuilder(template)
    if args.size is not None:
        try:
            builder.set_size(args.size)
        except ValidationError as e:
            logger.error(f"Invalid size {args.size}: {e.errors()[0]['msg']}")
            return EXIT_FAILURE
    if args.stroke is not None:
        builder.set_stroke(args.stroke)
    if args.stroke_width is not None:
        builder.set_stroke_width(args.stroke_width)
    if args.fill is not None:
        builder.set_fill(args.fill)
    if args.color is not None:
        builder.set_color(args.color)
    if args.attrs:
        builder.set_attrs(dict(args.attrs))

    print(builder.render())
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        handle_startup_error("CONFIG_ERROR", e)
        return EXIT_CONFIG_ERROR

    logging_config = config.logging
    if config.debug:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    setup_logging(logging_config, "pyheroicons")

    try:
        return args.handler(args, config)
    except KeyboardInterrupt:
        handle_keyboard_interrupt()
        return EXIT_INTERRUPTED
    except HeroiconsError as e:
        logger.error(str(e))
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
