"""
Java Client Generator Module

This module resolves per-file generation options and drives OpenAPI Generator
to produce Java MicroProfile REST clients.
"""

from .dispatcher import dispatch, get_base_package, resolve_per_file_config
from .options import PerFileConfig
from .wrapper import ClientGenerator, OpenApiClientGeneratorWrapper

__all__ = [
    "ClientGenerator",
    "OpenApiClientGeneratorWrapper",
    "PerFileConfig",
    "dispatch",
    "get_base_package",
    "resolve_per_file_config",
]
