"""
File utilities for the Java OAS generator.

This module provides the directory walking and path helpers used to locate
spec files and to prepare output directories.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Final

# Path component marking the start of a module's source tree
SOURCE_ROOT_COMPONENT: Final = "src"


def _raise_walk_error(error: OSError) -> None:
    raise error


def iter_regular_files(directory: Path) -> Iterator[Path]:
    """Yield every regular file below a directory, recursively.

    Symbolic links to regular files are yielded; directory links are not
    followed. Any error while listing a directory is raised to the caller.

    Args:
        directory: Directory to walk.

    Yields:
        Paths to regular files, in no particular order.
    """
    for root, _dirs, files in os.walk(directory, onerror=_raise_walk_error):
        for name in files:
            path = Path(root) / name
            if path.is_file():
                yield path


def ensure_directory(directory: Path) -> None:
    """Ensure that a directory exists.

    Args:
        directory: Path to the directory to create.
    """
    directory.mkdir(parents=True, exist_ok=True)


def get_relative_path(file_path: Path, base_path: Path) -> Path:
    """Get relative path from base_path to file_path.

    Args:
        file_path: Target file path.
        base_path: Base path to calculate relative path from.

    Returns:
        Relative path from base_path to file_path, or the original
        path if it cannot be made relative.
    """
    try:
        return file_path.relative_to(base_path)
    except ValueError:
        return file_path


def module_base_dir(source_dir: Path) -> Path:
    """Return the module directory that owns a source directory.

    This is everything before the last ``src`` component of the path, so
    ``/work/app/src/main/openapi`` belongs to ``/work/app``. A path without
    a ``src`` component is its own module directory.

    Args:
        source_dir: A directory inside the module's source tree.

    Returns:
        The module base directory.
    """
    parts = source_dir.parts
    for index in range(len(parts) - 1, -1, -1):
        if parts[index] == SOURCE_ROOT_COMPONENT:
            return Path(*parts[:index]) if index else Path()
    return source_dir
