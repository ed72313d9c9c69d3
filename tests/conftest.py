"""Common fixtures for testing pyheroicons."""

import json
from typing import Any

import pytest

from pyheroicons.body_cache import IconBodyCache
from pyheroicons.dataset.sources import InMemoryDatasetSource
from pyheroicons.models.config import AppConfig
from pyheroicons.renderer import IconRenderer

MOON_BODY = '<path d="M1"/>'
MOON_SOLID_BODY = '<path fill-rule="evenodd" d="M2"/>'
MOON_MINI_BODY = '<path fill-rule="evenodd" d="M3"/>'
MOON_MICRO_BODY = '<path d="M4"/>'
SUN_BODY = '<path d="M5"/>'


@pytest.fixture()
def sample_dataset_data() -> dict[str, Any]:
    """A small dataset in the iconify layout."""
    return {
        "prefix": "heroicons",
        "info": {"name": "HeroIcons", "total": 5},
        "icons": {
            "moon": {"body": MOON_BODY},
            "moon-solid": {"body": MOON_SOLID_BODY},
            "moon-20-solid": {"body": MOON_MINI_BODY},
            "moon-16-solid": {"body": MOON_MICRO_BODY},
            "sun": {"body": SUN_BODY, "hidden": False},
        },
        "width": 24,
        "height": 24,
    }


@pytest.fixture()
def sample_dataset_json(sample_dataset_data: dict[str, Any]) -> str:
    """The sample dataset serialized as JSON."""
    return json.dumps(sample_dataset_data)


@pytest.fixture()
def sample_source(sample_dataset_json: str) -> InMemoryDatasetSource:
    """In-memory source serving the sample dataset."""
    return InMemoryDatasetSource(sample_dataset_json, description="sample")


@pytest.fixture()
def body_cache(sample_source: InMemoryDatasetSource) -> IconBodyCache:
    """A fresh body cache over the sample dataset."""
    return IconBodyCache(sample_source)


@pytest.fixture()
def renderer(body_cache: IconBodyCache) -> IconRenderer:
    """A renderer backed by the sample body cache."""
    return IconRenderer(body_cache)


@pytest.fixture()
def app_config() -> AppConfig:
    """Default application configuration."""
    return AppConfig()
