"""Custom exception hierarchy for pyheroicons.

Exception Hierarchy:
    HeroiconsError (Base)
    ├── ConfigurationError
    │   ├── InvalidConfigError
    │   └── ConfigFileNotFoundError
    ├── IconError
    │   └── IconNotFoundError
    ├── DatasetError
    │   ├── DatasetMalformedError
    │   └── DatasetFetchError
    └── CodegenError
"""

from typing import Any


# Base Exception
class HeroiconsError(Exception):
    """Base exception for all pyheroicons errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception with message and optional details.

        Args:
            message: Human-readable error description
            details: Optional dictionary containing additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(HeroiconsError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration contains invalid values.

    Example:
        raise InvalidConfigError(
            "Invalid configuration file",
            {"path": "config.yaml", "error": "port: Input should be less than 65536"}
        )
    """
    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when configuration file cannot be found.

    Example:
        raise ConfigFileNotFoundError(
            "Configuration file not found",
            {"path": "/etc/pyheroicons/config.yaml"}
        )
    """
    pass


# Icon Exceptions
class IconError(HeroiconsError):
    """Base exception for icon lookup errors."""
    pass


class IconNotFoundError(IconError):
    """Raised when an icon name is empty or absent from the dataset.

    The message is kept free of details so it can be embedded verbatim in
    the diagnostic comment the renderer emits.

    Example:
        raise IconNotFoundError("moonn")
    """

    def __init__(self, name: str) -> None:
        """Initialize with the requested icon name.

        Args:
            name: The icon name that could not be resolved
        """
        super().__init__(f"icon '{name}' not found")
        self.name = name


# Dataset Exceptions
class DatasetError(HeroiconsError):
    """Base exception for icon dataset errors."""
    pass


class DatasetMalformedError(DatasetError):
    """Raised when the icon dataset fails structural validation.

    Example:
        raise DatasetMalformedError(
            "Failed to parse heroicons dataset",
            {"source": "bundled:heroicons_cache.json", "error": "icons: Field required"}
        )
    """
    pass


class DatasetFetchError(DatasetError):
    """Raised when the remote dataset cannot be downloaded.

    Example:
        raise DatasetFetchError(
            "Failed to fetch heroicons dataset",
            {"url": "https://example.com/heroicons.json", "attempts": 3}
        )
    """
    pass


class CodegenError(HeroiconsError):
    """Raised when the icon constants module cannot be generated.

    Example:
        raise CodegenError("Dataset contains no icons", {"source": "heroicons_cache.json"})
    """
    pass


# Utility function for exception chaining
def chain_exception(new_exception: HeroiconsError, cause: Exception) -> HeroiconsError:
    """Chain a new exception with its underlying cause.

    Args:
        new_exception: The new domain-specific exception to raise
        cause: The underlying exception that caused this error

    Returns:
        The new exception with cause properly chained

    Example:
        try:
            dataset = IconDataset.model_validate_json(raw)
        except ValidationError as e:
            raise chain_exception(
                DatasetMalformedError("Failed to parse heroicons dataset", {"error": str(e)}),
                e
            ) from e
    """
    new_exception.__cause__ = cause
    return new_exception
