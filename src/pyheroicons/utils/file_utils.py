"""File system helpers for pyheroicons.

Provides a consistent interface for the file operations the dataset fetcher
and the code generator need: reading and writing text or bytes, freshness
checks based on modification time, and atomic replacement of output files.
"""

import os
import tempfile
import time
from pathlib import Path

from pyheroicons.utils.path_utils import path_resolver

# Type aliases for clarity and documentation
PathLike = str | Path


def read_text(file_path: PathLike) -> str:
    """Read text content from a file.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        The text content of the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read due to permissions
        UnicodeDecodeError: If the file content cannot be decoded as text
    """
    normalized_path = path_resolver.normalize_path(file_path)
    with open(normalized_path, encoding="utf-8") as f:
        return f.read()


def read_bytes(file_path: PathLike) -> bytes:
    """Read binary content from a file.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        The binary content of the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read due to permissions
    """
    normalized_path = path_resolver.normalize_path(file_path)
    with open(normalized_path, "rb") as f:
        return f.read()


def write_text(file_path: PathLike, content: str, make_dirs: bool = True) -> None:
    """Write text content to a file.

    Args:
        file_path: Path to the file (string or Path object)
        content: Text content to write
        make_dirs: Whether to create parent directories if they don't exist
    """
    normalized_path = path_resolver.normalize_path(file_path)

    if make_dirs:
        ensure_dir_exists(normalized_path.parent)

    with open(normalized_path, "w", encoding="utf-8") as f:
        f.write(content)


def write_bytes(file_path: PathLike, content: bytes, make_dirs: bool = True) -> None:
    """Write binary content to a file.

    Args:
        file_path: Path to the file (string or Path object)
        content: Binary content to write
        make_dirs: Whether to create parent directories if they don't exist
    """
    normalized_path = path_resolver.normalize_path(file_path)

    if make_dirs:
        ensure_dir_exists(normalized_path.parent)

    with open(normalized_path, "wb") as f:
        f.write(content)


def ensure_dir_exists(dir_path: PathLike) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Wrapper around path_resolver.ensure_dir_exists for API consistency.
    """
    return path_resolver.ensure_dir_exists(dir_path)


def file_exists(file_path: PathLike) -> bool:
    """Check if a regular file exists at the given path."""
    normalized_path = path_resolver.normalize_path(file_path)
    return normalized_path.exists() and normalized_path.is_file()


def get_file_mtime(file_path: PathLike) -> float:
    """Get the last modification time of a file.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        Modification time as seconds since epoch

    Raises:
        FileNotFoundError: If the file does not exist
    """
    normalized_path = path_resolver.normalize_path(file_path)

    if not normalized_path.exists():
        raise FileNotFoundError(f"File not found: {normalized_path}")

    return normalized_path.stat().st_mtime


def is_file_fresh(file_path: PathLike, max_age_seconds: float) -> bool:
    """Check whether a file exists and was modified within a time window.

    Args:
        file_path: Path to the file (string or Path object)
        max_age_seconds: Maximum age in seconds for the file to count as fresh

    Returns:
        True if the file exists and is younger than max_age_seconds
    """
    if not file_exists(file_path):
        return False
    return time.time() - get_file_mtime(file_path) < max_age_seconds


def atomic_write(file_path: PathLike, content: str | bytes, make_dirs: bool = True) -> None:
    """Write to a file atomically by using a temporary file.

    The target is either completely written or left unchanged.

    Args:
        file_path: Path to the file (string or Path object)
        content: Content to write (string or bytes)
        make_dirs: Whether to create parent directories if they don't exist
    """
    normalized_path = path_resolver.normalize_path(file_path)

    if make_dirs:
        ensure_dir_exists(normalized_path.parent)

    fd, temp_name = tempfile.mkstemp(
        suffix=normalized_path.suffix, dir=normalized_path.parent
    )
    os.close(fd)
    temp_file = Path(temp_name)

    try:
        if isinstance(content, bytes):
            write_bytes(temp_file, content, make_dirs=False)
        else:
            write_text(temp_file, content, make_dirs=False)

        # Atomic on POSIX, and os.replace also overwrites on Windows
        os.replace(temp_file, normalized_path)
    except Exception:
        if temp_file.exists():
            temp_file.unlink()
        raise
