"""
Spec file discovery.

This module decides which directory to scan for OpenAPI documents and which
files inside it are handed to the generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from java_oas_generator.config.codegen_config import EXCLUDE_FILES, INCLUDE_FILES, INPUT_BASE_DIR
from java_oas_generator.config.config_source import ConfigSource
from java_oas_generator.errors import InvalidConfigurationError, TraversalError
from java_oas_generator.utils.file_utils import get_relative_path, iter_regular_files, module_base_dir

YAML: Final = ".yaml"
YML: Final = ".yml"
JSON: Final = ".json"


@dataclass(frozen=True)
class SpecFile:
    """An OpenAPI document found on disk."""

    path: Path
    relative_path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return self.path.suffix


@dataclass(frozen=True)
class FileFilterConfig:
    """Include and exclude lists of file names.

    An empty include list means every file is a candidate. A name present
    in both lists is excluded.
    """

    include: tuple[str, ...] = field(default_factory=tuple)
    exclude: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_config(cls, config: ConfigSource) -> FileFilterConfig:
        return cls(
            include=tuple(config.get_list(INCLUDE_FILES) or ()),
            exclude=tuple(config.get_list(EXCLUDE_FILES) or ()),
        )

    def accepts(self, file_name: str) -> bool:
        if file_name in self.exclude:
            return False
        return not self.include or file_name in self.include


def is_candidate(file_name: str, file_filter: FileFilterConfig, extension: str) -> bool:
    """Check whether a file name is selected for generation."""
    return file_name.endswith(extension) and file_filter.accepts(file_name)


def get_input_base_dir(source_dir: Path, config: ConfigSource) -> Path | None:
    """Return the configured override directory, resolved against the module root.

    Returns:
        The override directory, or None when no override is configured.
    """
    input_base_dir = config.get_value(INPUT_BASE_DIR)
    if input_base_dir is None:
        return None
    return module_base_dir(source_dir) / input_base_dir


def resolve_input_directory(source_dir: Path, config: ConfigSource) -> Path | None:
    """Pick the directory to scan for spec files.

    Args:
        source_dir: The conventional input directory, e.g. ``src/main/openapi``.
        config: Configuration source.

    Returns:
        The override directory when configured, otherwise ``source_dir`` if
        it exists. None means there is nothing to generate.

    Raises:
        InvalidConfigurationError: If an override is configured but is not
            an existing directory.
    """
    override = get_input_base_dir(source_dir, config)
    if override is not None:
        if not override.is_dir():
            msg = f"Invalid path on {INPUT_BASE_DIR}: {override}"
            raise InvalidConfigurationError(msg, key=INPUT_BASE_DIR)
        return override
    return source_dir if source_dir.is_dir() else None


def locate(base_dir: Path, file_filter: FileFilterConfig, extension: str) -> list[SpecFile]:
    """Find the spec files below a directory.

    Args:
        base_dir: Directory to walk recursively.
        file_filter: Include and exclude lists.
        extension: Literal, case-sensitive file name suffix to match.

    Returns:
        The selected files ordered by their path relative to ``base_dir``.

    Raises:
        TraversalError: If any part of the tree cannot be read. No partial
            result is returned.
    """
    base_dir = base_dir.absolute()
    try:
        selected = [
            SpecFile(path=path, relative_path=get_relative_path(path, base_dir))
            for path in iter_regular_files(base_dir)
            if is_candidate(path.name, file_filter, extension)
        ]
    except OSError as e:
        msg = f"Failed to scan OpenApi files in {base_dir}: {e}"
        raise TraversalError(msg, path=base_dir) from e

    return sorted(selected, key=lambda spec_file: spec_file.relative_path.as_posix())
