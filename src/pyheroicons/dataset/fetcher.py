"""Remote dataset fetcher with a local file cache.

Downloads the iconify heroicons document over HTTP and keeps it in a cache
file that is considered fresh for a configurable number of days. Payloads
are validated before they replace the cache, so a bad download never
clobbers a good cache.
"""

import asyncio
import logging
from pathlib import Path

import httpx

from pyheroicons.constants import DATASET_FILENAME
from pyheroicons.dataset.sources import FileDatasetSource, load_dataset, parse_dataset
from pyheroicons.exceptions import (
    DatasetFetchError,
    DatasetMalformedError,
    chain_exception,
)
from pyheroicons.models.config import DatasetConfig
from pyheroicons.models.dataset import IconDataset
from pyheroicons.utils import file_utils
from pyheroicons.utils.path_utils import path_resolver


class DatasetFetcher:
    """Fetches the icon dataset and maintains its cache file.

    Attributes:
        config: Dataset configuration (URL, cache file, retry policy)
        transport: Optional httpx transport, used to stub the network in tests
        logger: Logger instance
    """

    def __init__(
        self, config: DatasetConfig, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Dataset configuration.
            transport: Transport handed to the HTTP client.
        """
        self.config = config
        self.transport = transport
        self.logger = logging.getLogger(__name__)

    @property
    def cache_path(self) -> Path:
        """Path of the cache file, the configured one or the user cache default."""
        if self.config.cache_file:
            return path_resolver.normalize_path(self.config.cache_file)
        return path_resolver.get_cache_file(DATASET_FILENAME)

    def is_cache_fresh(self) -> bool:
        """Check whether the cache file exists and is within its age limit."""
        return file_utils.is_file_fresh(self.cache_path, self.config.cache_max_age_seconds)

    async def fetch_with_retry(self) -> bytes:
        """Download the raw dataset, retrying with a fixed delay.

        Returns:
            The response body.

        Raises:
            DatasetFetchError: If every attempt fails.
        """
        attempts = self.config.retry_attempts
        last_error: httpx.HTTPError | None = None

        async with httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            for attempt in range(1, attempts + 1):
                try:
                    response = await client.get(self.config.url)
                    response.raise_for_status()
                    return response.content
                except httpx.HTTPError as e:
                    last_error = e
                    self.logger.warning(
                        f"Dataset fetch attempt {attempt}/{attempts} from {self.config.url} "
                        f"failed: {e}"
                    )

                if attempt < attempts:
                    await asyncio.sleep(self.config.retry_delay_seconds)

        self.logger.error(f"Giving up on {self.config.url} after {attempts} attempts")
        error = DatasetFetchError(
            "Failed to fetch heroicons dataset",
            {"url": self.config.url, "attempts": attempts, "error": str(last_error)},
        )
        if last_error is not None:
            raise chain_exception(error, last_error) from last_error
        raise error

    async def fetch_and_cache(self, force: bool = False) -> IconDataset:
        """Get the dataset, from the cache when fresh or else from the network.

        Args:
            force: Download even when the cache is fresh.

        Returns:
            The parsed dataset.

        Raises:
            DatasetFetchError: If the download fails.
            DatasetMalformedError: If the downloaded document is invalid.
        """
        cache_path = self.cache_path

        if not force and self.is_cache_fresh():
            try:
                dataset = load_dataset(FileDatasetSource(cache_path))
                self.logger.info(f"Using cached dataset from {cache_path}")
                return dataset
            except DatasetMalformedError as e:
                self.logger.warning(f"Ignoring unusable cache file {cache_path}: {e}")

        raw = await self.fetch_with_retry()
        dataset = parse_dataset(raw, self.config.url)

        try:
            file_utils.atomic_write(cache_path, raw)
        except OSError as e:
            # The fresh dataset is still usable without a cache
            self.logger.warning(f"Failed to write dataset cache {cache_path}: {e}")
        else:
            self.logger.info(f"Cached {len(dataset.icons)} icons to {cache_path}")

        return dataset
