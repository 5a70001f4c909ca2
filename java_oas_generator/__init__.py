"""
Java OpenAPI Client Generator

Scans a project for OpenAPI documents and drives OpenAPI Generator to produce
Java MicroProfile REST clients, with per-file packages, mappings and
annotations taken from the project configuration.
"""

from .codegen import CodeGenContext, all_providers
from .config import ConfigSource
from .generator import OpenApiClientGeneratorWrapper, dispatch
from .locator import FileFilterConfig, SpecFile, locate

__version__ = "1.0.0"

__all__ = [
    "CodeGenContext",
    "ConfigSource",
    "FileFilterConfig",
    "OpenApiClientGeneratorWrapper",
    "SpecFile",
    "all_providers",
    "dispatch",
    "locate",
]
