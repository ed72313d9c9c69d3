"""Reporting for CLI failures that happen before logging is configured.

Configuration and log file problems surface before setup_logging() is done,
so they are written straight to stderr in the CLI's own format:

    pyheroicons: CONFIG_ERROR: Configuration file not found
      path: /etc/pyheroicons/config.yaml
"""

import sys

from pyheroicons.constants import CLI_PROG_NAME
from pyheroicons.exceptions import HeroiconsError


def format_startup_error(error_type: str, error: HeroiconsError) -> str:
    """Format a domain error as a prefixed message plus indented details.

    Args:
        error_type: Short tag such as CONFIG_ERROR or LOGGING_FILE_ERROR
        error: The error to report

    Returns:
        The newline-terminated report.
    """
    lines = [f"{CLI_PROG_NAME}: {error_type}: {error.message}"]
    lines.extend(f"  {key}: {value}" for key, value in sorted(error.details.items()))
    return "\n".join(lines) + "\n"


def handle_startup_error(error_type: str, error: HeroiconsError) -> None:
    """Write a startup error to stderr."""
    sys.stderr.write(format_startup_error(error_type, error))
    sys.stderr.flush()


def handle_keyboard_interrupt() -> None:
    sys.stderr.write(f"\n{CLI_PROG_NAME}: interrupted, shutting down\n")
    sys.stderr.flush()
