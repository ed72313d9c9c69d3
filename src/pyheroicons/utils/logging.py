"""Logging configuration module for pyheroicons.

Provides structured logging setup with support for console and file output
in both JSON and human-readable formats. Library modules only ever call
logging.getLogger(__name__); this setup is applied by the CLI.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

import structlog
from structlog.stdlib import ProcessorFormatter

from pyheroicons.constants import BYTES_PER_MEGABYTE
from pyheroicons.exceptions import ConfigurationError, chain_exception
from pyheroicons.models.config import LoggingConfig
from pyheroicons.utils.early_error_handler import handle_startup_error
from pyheroicons.utils.path_utils import path_resolver


def setup_logging(config: LoggingConfig, name: str) -> logging.Logger:
    """Set up logging with the specified configuration.

    Args:
        config: Logging configuration.
        name: Logger name, usually the top-level package.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.handlers = []

    level = getattr(logging, config.level.upper(), logging.INFO)
    logger.setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    # Records from plain stdlib loggers go through the same renderer
    formatter = ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
    )

    handler: logging.Handler
    if config.file:
        try:
            log_path = path_resolver.normalize_path(config.file)
            path_resolver.ensure_dir_exists(log_path.parent)
            handler = RotatingFileHandler(
                log_path,
                maxBytes=config.max_size_mb * BYTES_PER_MEGABYTE,
                backupCount=config.backup_count,
            )
        except OSError as e:
            error = chain_exception(
                ConfigurationError(
                    "Failed to set up file logging", {"log_file": config.file, "error": str(e)}
                ),
                e,
            )
            handle_startup_error("LOGGING_FILE_ERROR", error)
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(formatter)
            handler.setLevel(level)
            logger.addHandler(handler)
            logger.error(str(error))
            return logger
    else:
        # stdout carries rendered markup for the render command
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger
