"""
Code Generation Providers Module

This module runs generation passes for ``.yaml``, ``.yml`` and ``.json``
spec files.
"""

from .providers import (
    BatchResult,
    CodeGenContext,
    DispatchOutcome,
    OpenApiGeneratorCodeGenBase,
    OpenApiGeneratorJsonCodeGen,
    OpenApiGeneratorYamlCodeGen,
    OpenApiGeneratorYmlCodeGen,
    all_providers,
    get_failure_mode,
)

__all__ = [
    "BatchResult",
    "CodeGenContext",
    "DispatchOutcome",
    "OpenApiGeneratorCodeGenBase",
    "OpenApiGeneratorJsonCodeGen",
    "OpenApiGeneratorYamlCodeGen",
    "OpenApiGeneratorYmlCodeGen",
    "all_providers",
    "get_failure_mode",
]
