"""Module initialization."""

from pyheroicons.models.config import (
    AppConfig,
    CodegenConfig,
    DatasetConfig,
    LoggingConfig,
    ServerConfig,
)
from pyheroicons.models.dataset import IconDataset, IconEntry
from pyheroicons.models.icon import Icon, IconVariant, canonical_size

__all__ = [
    # Configuration
    "AppConfig",
    "CodegenConfig",
    "DatasetConfig",
    "LoggingConfig",
    "ServerConfig",
    # Dataset
    "IconDataset",
    "IconEntry",
    # Icons
    "Icon",
    "IconVariant",
    "canonical_size",
]
