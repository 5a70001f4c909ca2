"""
Per-file dispatch to the external generator.

For each located spec file the dispatcher resolves a ``PerFileConfig`` from
file-scoped keys (falling back to global keys and defaults) and calls the
generator once with it.
"""

from __future__ import annotations

from pathlib import Path

from java_oas_generator.config.circuit_breaker import CircuitBreakerConfigurationParser
from java_oas_generator.config.class_codegen import ClassCodegenConfigParser
from java_oas_generator.config.codegen_config import (
    DEFAULT_PACKAGE,
    DEFAULT_PACKAGE_PROPERTY_NAME,
    DEFAULT_SECURITY_SCHEME,
    VALIDATE_SPEC_PROPERTY_NAME,
    VERBOSE_PROPERTY_NAME,
    get_additional_model_type_annotations_property_name,
    get_base_package_property_name,
    get_custom_register_providers_property_name,
    get_import_mappings_property_name,
    get_skip_form_model_property_name,
    get_type_mappings_property_name,
)
from java_oas_generator.config.config_source import ConfigSource
from java_oas_generator.generator.options import PerFileConfig
from java_oas_generator.generator.wrapper import ClientGenerator, OpenApiClientGeneratorWrapper
from java_oas_generator.locator.spec_locator import SpecFile
from java_oas_generator.utils.naming import spec_package_segment


def get_base_package(config: ConfigSource, spec_path: Path) -> str:
    """Resolve the base package for a spec file.

    The file-scoped ``base-package`` key wins; otherwise the package is the
    default prefix followed by the sanitized file name.
    """
    explicit = config.get_value(get_base_package_property_name(spec_path))
    if explicit is not None:
        return explicit
    prefix = config.get_value(DEFAULT_PACKAGE_PROPERTY_NAME) or DEFAULT_PACKAGE
    return f"{prefix}.{spec_package_segment(spec_path)}"


def resolve_per_file_config(spec_file: SpecFile, config: ConfigSource) -> PerFileConfig:
    """Resolve all generator options for one spec file."""
    spec_path = spec_file.path
    base_package = get_base_package(config, spec_path)

    verbose = config.get_bool(VERBOSE_PROPERTY_NAME)
    validate_spec = config.get_bool(VALIDATE_SPEC_PROPERTY_NAME)

    return PerFileConfig(
        class_config=ClassCodegenConfigParser.parse(config, base_package, spec_path),
        verbose=False if verbose is None else verbose,
        validate_spec=True if validate_spec is None else validate_spec,
        skip_form_model=config.get_value(get_skip_form_model_property_name(spec_path)),
        additional_model_type_annotations=config.get_value(
            get_additional_model_type_annotations_property_name(spec_path)
        ),
        custom_register_providers=config.get_value(get_custom_register_providers_property_name(spec_path)),
        type_mappings=config.get_map(get_type_mappings_property_name(spec_path)),
        import_mappings=config.get_map(get_import_mappings_property_name(spec_path)),
        default_security_scheme=config.get_value(DEFAULT_SECURITY_SCHEME),
        circuit_breaker=CircuitBreakerConfigurationParser.parse(config),
    )


def dispatch(
    spec_file: SpecFile,
    config: ConfigSource,
    out_dir: Path,
    generator: ClientGenerator | None = None,
) -> None:
    """Generate the client for one spec file.

    Errors raised by the generator are propagated unchanged.

    Args:
        spec_file: The spec file to generate from.
        config: Configuration source.
        out_dir: Directory the generator writes into.
        generator: Generator to call, ``openapi-generator-cli`` by default.
    """
    options = resolve_per_file_config(spec_file, config)
    (generator or OpenApiClientGeneratorWrapper()).generate(spec_file.path, out_dir, options)
