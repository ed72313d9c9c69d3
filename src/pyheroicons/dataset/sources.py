"""Icon dataset sources and parsing.

A DatasetSource hands raw JSON to the body cache. The bundled source reads
the dataset shipped inside the package; file and in-memory sources let
callers and tests substitute their own data.
"""

import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from pyheroicons.constants import DATASET_FILENAME
from pyheroicons.exceptions import DatasetMalformedError, chain_exception
from pyheroicons.models.dataset import IconDataset
from pyheroicons.utils import file_utils
from pyheroicons.utils.path_utils import path_resolver

logger = logging.getLogger(__name__)


class DatasetSource(Protocol):
    """Anything that can supply the raw dataset document."""

    @property
    def description(self) -> str:
        """Human-readable origin of the data, used in errors and logs."""
        ...

    def read(self) -> str | bytes:
        """Return the raw JSON document."""
        ...


class FileDatasetSource:
    """Dataset read from a JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = path_resolver.normalize_path(path)

    @property
    def description(self) -> str:
        return str(self.path)

    def read(self) -> bytes:
        return file_utils.read_bytes(self.path)


class BundledDatasetSource(FileDatasetSource):
    """Dataset shipped in the package data directory."""

    def __init__(self) -> None:
        super().__init__(path_resolver.get_data_file(DATASET_FILENAME))

    @property
    def description(self) -> str:
        return f"bundled:{DATASET_FILENAME}"


class InMemoryDatasetSource:
    """Dataset held in memory, mainly for tests and embedding."""

    def __init__(self, raw: str | bytes, description: str = "<memory>") -> None:
        self.raw = raw
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def read(self) -> str | bytes:
        return self.raw


def parse_dataset(raw: str | bytes, source: str = "<memory>") -> IconDataset:
    """Parse and structurally validate a dataset document.

    Args:
        raw: JSON document
        source: Description of where the document came from

    Returns:
        The validated dataset.

    Raises:
        DatasetMalformedError: If the document is not valid JSON or lacks the
            ``icons`` mapping of objects with string ``body`` fields.
    """
    try:
        return IconDataset.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"Heroicons dataset from {source} is malformed: {e.error_count()} errors")
        raise chain_exception(
            DatasetMalformedError(
                "Failed to parse heroicons dataset",
                {"source": source, "error": str(e.errors()[0]["msg"])},
            ),
            e,
        ) from e


def load_dataset(source: DatasetSource) -> IconDataset:
    """Read and parse a dataset from a source.

    Raises:
        DatasetMalformedError: If the source cannot be read or parsed.
    """
    try:
        raw = source.read()
    except OSError as e:
        logger.error(f"Could not read heroicons dataset from {source.description}: {e}")
        raise chain_exception(
            DatasetMalformedError(
                "Failed to read heroicons dataset",
                {"source": source.description, "error": str(e)},
            ),
            e,
        ) from e
    return parse_dataset(raw, source.description)
