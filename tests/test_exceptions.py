"""Tests for custom exception hierarchy."""

import pytest

from pyheroicons.exceptions import (
    CodegenError,
    ConfigFileNotFoundError,
    ConfigurationError,
    DatasetError,
    DatasetFetchError,
    DatasetMalformedError,
    HeroiconsError,
    IconError,
    IconNotFoundError,
    InvalidConfigError,
    chain_exception,
)


class TestHeroiconsError:
    """Test base exception class."""

    def test_base_exception_with_message_only(self):
        """Test creating exception with just a message."""
        exc = HeroiconsError("Test error")
        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.details == {}

    def test_base_exception_with_details(self):
        """Test creating exception with message and details."""
        details = {"field": "test", "value": 123}
        exc = HeroiconsError("Test error", details)
        assert exc.message == "Test error"
        assert exc.details == details
        assert str(exc) == "Test error - Details: {'field': 'test', 'value': 123}"

    def test_inheritance_chain(self):
        """Test that all exceptions inherit from base."""
        exc = InvalidConfigError("Config error")
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, HeroiconsError)
        assert isinstance(exc, Exception)


class TestExceptionHierarchy:
    """Test where each exception sits in the hierarchy."""

    @pytest.mark.parametrize(
        ("exc_class", "parent"),
        [
            (InvalidConfigError, ConfigurationError),
            (ConfigFileNotFoundError, ConfigurationError),
            (IconNotFoundError, IconError),
            (DatasetMalformedError, DatasetError),
            (DatasetFetchError, DatasetError),
            (CodegenError, HeroiconsError),
        ],
    )
    def test_parent_class(self, exc_class, parent):
        """Test each exception derives from its category."""
        assert issubclass(exc_class, parent)
        assert issubclass(exc_class, HeroiconsError)


class TestIconNotFoundError:
    """Test the not-found error."""

    def test_message_names_icon(self):
        """Test the message quotes the icon name."""
        exc = IconNotFoundError("nonexistent")
        assert str(exc) == "icon 'nonexistent' not found"
        assert exc.name == "nonexistent"
        assert exc.details == {}

    def test_empty_name(self):
        """Test an empty name is still reported."""
        exc = IconNotFoundError("")
        assert exc.name == ""
        assert "''" in str(exc)


class TestChainException:
    """Test exception chaining helper."""

    def test_chain_exception_sets_cause(self):
        """Test chaining preserves the original exception."""
        cause = ValueError("bad json")
        exc = chain_exception(DatasetMalformedError("Failed"), cause)
        assert exc.__cause__ is cause
        assert isinstance(exc, DatasetMalformedError)

    def test_chain_exception_in_raise(self):
        """Test chaining works with raise ... from."""
        with pytest.raises(DatasetFetchError) as exc_info:
            try:
                raise TimeoutError("timed out")
            except TimeoutError as e:
                raise chain_exception(DatasetFetchError("Fetch failed"), e) from e

        assert isinstance(exc_info.value.__cause__, TimeoutError)
