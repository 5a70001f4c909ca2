"""
Configuration Module for Java Client Generation

This module provides the configuration key names, the read-only configuration
source and the parsers for class-level and circuit breaker settings.
"""

from .circuit_breaker import CircuitBreakerConfiguration, CircuitBreakerConfigurationParser
from .class_codegen import ClassCodegenConfig, ClassCodegenConfigParser
from .codegen_config import ConfigName, FailureMode
from .config_source import ConfigSource, parse_override

__all__ = [
    "CircuitBreakerConfiguration",
    "CircuitBreakerConfigurationParser",
    "ClassCodegenConfig",
    "ClassCodegenConfigParser",
    "ConfigName",
    "ConfigSource",
    "FailureMode",
    "parse_override",
]
