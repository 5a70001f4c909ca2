"""
Package and class level options for one spec file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from java_oas_generator.config.codegen_config import (
    API_PKG_SUFFIX,
    MODEL_PKG_SUFFIX,
    get_additional_api_type_annotations_property_name,
    get_return_response_property_name,
)
from java_oas_generator.config.config_source import ConfigSource
from java_oas_generator.errors import InvalidConfigurationError
from java_oas_generator.utils.naming import is_valid_java_package


@dataclass(frozen=True)
class ClassCodegenConfig:
    """Packages and class-level switches for the generated client."""

    base_package: str
    additional_api_type_annotations: str | None = None
    return_response: bool | None = None

    @property
    def api_package(self) -> str:
        return f"{self.base_package}{API_PKG_SUFFIX}"

    @property
    def model_package(self) -> str:
        return f"{self.base_package}{MODEL_PKG_SUFFIX}"

    @property
    def invoker_package(self) -> str:
        return self.base_package


class ClassCodegenConfigParser:
    """Resolves a ``ClassCodegenConfig`` for one spec file."""

    @staticmethod
    def parse(config: ConfigSource, base_package: str, spec_path: Path) -> ClassCodegenConfig:
        """Build the class config for a spec file.

        Args:
            config: Configuration source.
            base_package: Already resolved base package for the file.
            spec_path: The spec file being generated.

        Raises:
            InvalidConfigurationError: If the base package is not a valid
                Java package name.
        """
        if not is_valid_java_package(base_package):
            msg = f"Invalid base package {base_package!r} for {spec_path.name}"
            raise InvalidConfigurationError(msg)

        return ClassCodegenConfig(
            base_package=base_package,
            additional_api_type_annotations=config.get_value(
                get_additional_api_type_annotations_property_name(spec_path)
            ),
            return_response=config.get_bool(get_return_response_property_name(spec_path)),
        )
