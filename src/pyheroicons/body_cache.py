"""Thread-safe icon body cache.

Maps icon names to their path-data bodies. The dataset is decoded once, on
first use, and every icon it contains is cached in that single pass. Entries
are never evicted.
"""

import logging
import threading

from pyheroicons.dataset.sources import BundledDatasetSource, DatasetSource, load_dataset
from pyheroicons.exceptions import DatasetMalformedError, IconNotFoundError, chain_exception


class IconBodyCache:
    """Lazily populated, process-wide icon body lookup.

    Lookups after the first load take a lock-free path. The first load is
    serialized by a lock so that concurrent callers decode the dataset only
    once and all of them see the fully populated mapping.

    A malformed dataset is a packaging defect: the error is remembered and
    raised again on every later lookup without decoding a second time.

    Attributes:
        source: Where the raw dataset comes from
        logger: Logger instance
    """

    def __init__(self, source: DatasetSource | None = None) -> None:
        """Initialize an empty cache.

        Args:
            source: Dataset source; defaults to the bundled dataset.
        """
        self.source = source if source is not None else BundledDatasetSource()
        self.logger = logging.getLogger(__name__)
        self._bodies: dict[str, str] = {}
        self._loaded = False
        self._load_error: DatasetMalformedError | None = None
        self._lock = threading.Lock()

    def resolve(self, name: str) -> str:
        """Get the body for an icon name.

        Args:
            name: Icon name from the dataset

        Returns:
            The icon's opaque path-data body.

        Raises:
            IconNotFoundError: If the name is empty or not in the dataset.
            DatasetMalformedError: If the dataset cannot be decoded.
        """
        if not name:
            raise IconNotFoundError(name)

        if not self._loaded:
            self._ensure_loaded()

        body = self._bodies.get(name)
        if body is None:
            self.logger.debug(f"Icon {name!r} not in dataset from {self.source.description}")
            raise IconNotFoundError(name)
        return body

    def _ensure_loaded(self) -> None:
        """Decode the dataset into the cache if no thread has done so yet."""
        with self._lock:
            if self._loaded:
                return
            if self._load_error is not None:
                # Fresh instance so the remembered traceback is never extended
                raise chain_exception(
                    DatasetMalformedError(self._load_error.message, self._load_error.details),
                    self._load_error,
                ) from self._load_error

            try:
                dataset = load_dataset(self.source)
            except DatasetMalformedError as e:
                self._load_error = e
                raise

            # Publish the complete mapping before flipping the flag
            self._bodies = dataset.bodies
            self._loaded = True
            self.logger.info(
                f"Loaded {len(self._bodies)} icon bodies from {self.source.description}"
            )

    @property
    def is_loaded(self) -> bool:
        """Whether the dataset has been decoded."""
        return self._loaded

    def names(self) -> list[str]:
        """All icon names in the dataset, sorted.

        Raises:
            DatasetMalformedError: If the dataset cannot be decoded.
        """
        if not self._loaded:
            self._ensure_loaded()
        return sorted(self._bodies)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or not name:
            return False
        if not self._loaded:
            self._ensure_loaded()
        return name in self._bodies

    def __len__(self) -> int:
        if not self._loaded:
            self._ensure_loaded()
        return len(self._bodies)


# Shared cache backing the module-level rendering helpers
default_body_cache = IconBodyCache()
