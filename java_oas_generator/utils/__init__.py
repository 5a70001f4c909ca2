"""
Utilities Module for Java Client Generation

This module provides utility functions for directory walking, path handling
and the name sanitization rules used for configuration keys and packages.
"""

from .file_utils import ensure_directory, get_relative_path, iter_regular_files, module_base_dir
from .naming import (
    alphanumcase,
    escape_java_keyword,
    is_java_keyword,
    is_valid_java_package,
    java_package_segment,
    spec_config_name,
    spec_package_segment,
    underscorecase,
)

__all__ = [
    "alphanumcase",
    "ensure_directory",
    "escape_java_keyword",
    "get_relative_path",
    "is_java_keyword",
    "is_valid_java_package",
    "iter_regular_files",
    "java_package_segment",
    "module_base_dir",
    "spec_config_name",
    "spec_package_segment",
    "underscorecase",
]
