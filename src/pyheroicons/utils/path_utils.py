"""Path utility module for pyheroicons.

Provides centralized path resolution for the bundled package resources
(icon dataset, Jinja2 templates), the user cache directory used by the
dataset fetcher, and configuration file lookup.
"""

from pathlib import Path

from pyheroicons.constants import APP_DIR_NAME
from pyheroicons.exceptions import ConfigFileNotFoundError


class PathResolver:
    """Centralized utility for path resolution and management.

    Attributes:
        package_dir: Directory of the installed pyheroicons package
        data_dir: Bundled data directory (icon dataset)
        templates_dir: Bundled Jinja2 templates directory
        user_config_dir: User-specific configuration directory
        system_config_dir: System-wide configuration directory
        cache_dir: Directory for the downloaded dataset cache
    """

    def __init__(self) -> None:
        """Initialize the path resolver.

        Directories are only computed here; nothing is created until a
        caller asks for a writable location.
        """
        self.package_dir = Path(__file__).resolve().parent.parent
        self.data_dir = self.package_dir / "data"
        self.templates_dir = self.package_dir / "templates"
        self.user_config_dir = Path.home() / ".config" / APP_DIR_NAME
        self.system_config_dir = Path(f"/etc/{APP_DIR_NAME}")
        self.cache_dir = Path.home() / ".cache" / APP_DIR_NAME

    def get_config_path(self, config_filename: str = "config.yaml") -> Path | None:
        """Find a configuration file in the standard locations.

        Checks, in priority order, the current working directory, the user's
        configuration directory and the system-wide configuration directory.

        Args:
            config_filename: Name of the configuration file

        Returns:
            Path to the first existing configuration file, or None.
        """
        for path in self.config_search_paths(config_filename):
            if path.exists():
                return path
        return None

    def config_search_paths(self, config_filename: str = "config.yaml") -> list[Path]:
        """List the locations searched for a configuration file."""
        return [
            Path.cwd() / config_filename,
            self.user_config_dir / config_filename,
            self.system_config_dir / config_filename,
        ]

    def get_data_file(self, filename: str) -> Path:
        """Get path to a bundled data file.

        Args:
            filename: Name of the data file

        Returns:
            Path inside the package data directory.
        """
        return self.data_dir / filename

    def get_templates_dir(self) -> Path:
        """Get path to the bundled Jinja2 templates directory."""
        return self.templates_dir

    def get_cache_file(self, filename: str) -> Path:
        """Get path to a cache file, creating the cache directory if needed.

        Args:
            filename: Name of the cache file

        Returns:
            Path to the cache file.
        """
        return self.ensure_dir_exists(self.cache_dir) / filename

    def normalize_path(self, path: str | Path) -> Path:
        """Convert a string path to a Path object.

        Args:
            path: String or Path object

        Returns:
            A Path object.
        """
        return Path(path) if isinstance(path, str) else path

    def ensure_dir_exists(self, path: str | Path) -> Path:
        """Ensure a directory exists, creating it if necessary.

        Args:
            path: Directory path

        Returns:
            Path to the directory.
        """
        dir_path = self.normalize_path(path)
        dir_path.mkdir(exist_ok=True, parents=True)
        return dir_path


# Create a global instance for easy import
path_resolver = PathResolver()


def validate_config_path(config_path: str | Path | None = None) -> Path | None:
    """Validate and resolve the configuration file path.

    An explicit path must exist. Without one, the standard locations are
    searched and None is returned when no file is present, meaning the
    built-in defaults apply.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Resolved Path to the configuration file, or None.

    Raises:
        ConfigFileNotFoundError: If an explicit path does not exist.
    """
    if config_path is None:
        return path_resolver.get_config_path()

    resolved_path = path_resolver.normalize_path(config_path)
    if not resolved_path.exists():
        raise ConfigFileNotFoundError(
            f"Configuration file not found: {resolved_path}",
            {"path": str(resolved_path), "cwd": str(Path.cwd())},
        )
    return resolved_path
