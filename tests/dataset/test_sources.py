"""Tests for dataset sources and parsing."""

from pathlib import Path

import pytest

from pyheroicons.dataset.sources import (
    BundledDatasetSource,
    FileDatasetSource,
    InMemoryDatasetSource,
    load_dataset,
    parse_dataset,
)
from pyheroicons.exceptions import DatasetMalformedError


class TestParseDataset:
    """Test document parsing."""

    def test_parse_valid(self, sample_dataset_json: str):
        """Test the iconify layout parses and extra fields are ignored."""
        dataset = parse_dataset(sample_dataset_json)
        assert dataset.prefix == "heroicons"
        assert dataset.bodies["moon"] == '<path d="M1"/>'
        assert len(dataset.icons) == 5

    def test_parse_bytes(self, sample_dataset_json: str):
        """Test raw bytes are accepted."""
        dataset = parse_dataset(sample_dataset_json.encode("utf-8"))
        assert "sun" in dataset.icons

    def test_prefix_is_optional(self):
        """Test only the icons mapping is required."""
        dataset = parse_dataset('{"icons": {"moon": {"body": "<path/>"}}}')
        assert dataset.prefix is None

    def test_parse_invalid(self):
        """Test invalid documents raise with source details."""
        with pytest.raises(DatasetMalformedError) as exc_info:
            parse_dataset('{"icons": {"moon": {"width": 24}}}', source="test.json")

        assert exc_info.value.details["source"] == "test.json"
        assert exc_info.value.details["error"]
        assert exc_info.value.__cause__ is not None


class TestSources:
    """Test the source implementations."""

    def test_in_memory_source(self, sample_dataset_json: str):
        """Test in-memory sources return their data."""
        source = InMemoryDatasetSource(sample_dataset_json)
        assert source.description == "<memory>"
        assert load_dataset(source).bodies["sun"] == '<path d="M5"/>'

    def test_file_source(self, tmp_path: Path, sample_dataset_json: str):
        """Test file sources read from disk."""
        path = tmp_path / "heroicons.json"
        path.write_text(sample_dataset_json, encoding="utf-8")

        source = FileDatasetSource(str(path))
        assert source.path == path
        assert source.description == str(path)
        assert "moon-solid" in load_dataset(source).icons

    def test_file_source_missing(self, tmp_path: Path):
        """Test missing files become dataset errors."""
        with pytest.raises(DatasetMalformedError) as exc_info:
            load_dataset(FileDatasetSource(tmp_path / "nope.json"))

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_bundled_source(self):
        """Test the bundled dataset is present and valid."""
        source = BundledDatasetSource()
        assert source.description == "bundled:heroicons_cache.json"
        assert source.path.name == "heroicons_cache.json"

        dataset = load_dataset(source)
        assert dataset.prefix == "heroicons"
        assert "academic-cap-16-solid" in dataset.icons
