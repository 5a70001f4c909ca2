"""
Spec Locator Module

This module finds the OpenAPI documents that take part in a generation pass.
"""

from .spec_locator import (
    JSON,
    YAML,
    YML,
    FileFilterConfig,
    SpecFile,
    get_input_base_dir,
    is_candidate,
    locate,
    resolve_input_directory,
)

__all__ = [
    "JSON",
    "YAML",
    "YML",
    "FileFilterConfig",
    "SpecFile",
    "get_input_base_dir",
    "is_candidate",
    "locate",
    "resolve_input_directory",
]
