"""Configuration models for pyheroicons.

Defines Pydantic models for the dataset fetcher, the code generator, the demo
server and logging. Every field has a default, so an empty YAML file (or no
file at all) yields a working configuration.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from pyheroicons.constants import (
    DATASET_CACHE_MAX_AGE_DAYS,
    DATASET_RETRY_ATTEMPTS,
    DATASET_RETRY_DELAY_SECONDS,
    DATASET_TIMEOUT_SECONDS,
    DATASET_URL,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    DEMO_ICON_SIZE,
    SECONDS_PER_DAY,
)


def _normalize_path(path: str | Path) -> Path:
    """Convert a string path to a Path object.

    Internal utility function to avoid circular imports with path_resolver.
    """
    return Path(path) if isinstance(path, str) else path


class DatasetConfig(BaseModel):
    """Remote dataset and local cache file configuration."""

    url: str = DATASET_URL
    cache_file: str = ""  # Empty string means use the default from path_resolver
    cache_max_age_days: int = DATASET_CACHE_MAX_AGE_DAYS
    retry_attempts: int = DATASET_RETRY_ATTEMPTS
    retry_delay_seconds: float = DATASET_RETRY_DELAY_SECONDS
    timeout_seconds: float = DATASET_TIMEOUT_SECONDS

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate the dataset URL uses HTTP(S).

        Args:
            v: The dataset URL.

        Returns:
            The validated URL.

        Raises:
            ValueError: If the URL scheme is not http or https.
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("Dataset URL must start with http:// or https://")
        return v

    @field_validator("cache_max_age_days", "retry_attempts")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counters that must be at least one."""
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @field_validator("retry_delay_seconds", "timeout_seconds")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Validate durations are not negative."""
        if v < 0:
            raise ValueError("Duration must not be negative")
        return v

    @property
    def cache_max_age_seconds(self) -> int:
        """Freshness window of the cache file in seconds."""
        return self.cache_max_age_days * SECONDS_PER_DAY


class CodegenConfig(BaseModel):
    """Icon constants generator configuration."""

    output_file: str = ""  # Empty string means the package's own icons.py


class ServerConfig(BaseModel):
    """Demo server configuration."""

    host: str = DEFAULT_SERVER_HOST
    port: int = DEFAULT_SERVER_PORT
    demo_icon_size: int = DEMO_ICON_SIZE

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate the port is in the TCP range.

        Raises:
            ValueError: If the port is outside 1-65535.
        """
        if v < 1 or v > 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("demo_icon_size")
    @classmethod
    def validate_demo_icon_size(cls, v: int) -> int:
        """Validate the gallery icon size is positive."""
        if v < 1:
            raise ValueError("Demo icon size must be positive")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str | None = None
    format: str = "console"
    max_size_mb: int = 5
    backup_count: int = 3

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate the log format is one of the supported renderers.

        Raises:
            ValueError: If the format is not "json" or "console".
        """
        valid_formats = ["json", "console"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v.lower()


class AppConfig(BaseModel):
    """Main application configuration."""

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    codegen: CodegenConfig = Field(default_factory=CodegenConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    debug: bool = False

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "AppConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the YAML configuration file.

        Returns:
            An initialized AppConfig object with values from the YAML file.

        Raises:
            FileNotFoundError: If the specified config file doesn't exist.
            yaml.YAMLError: If the YAML file has invalid syntax.
            ValidationError: If the configuration values don't match the expected schema.
        """
        import yaml

        # Use direct import to avoid circular imports
        from pyheroicons.utils.file_utils import read_text

        path = _normalize_path(config_path)
        config_data = yaml.safe_load(read_text(path))

        # An empty file parses to None
        return cls.model_validate(config_data or {})
