"""
Configuration key names for client code generation.

Global keys live directly under ``quarkus.openapi-generator.codegen``.
Per-file keys are scoped as ``...codegen.spec.<config-name>.<option>`` where
``<config-name>`` is the spec file name with every non-alphanumeric
character replaced by an underscore.
"""

from enum import Enum
from pathlib import Path
from typing import Final

from java_oas_generator.utils.naming import spec_config_name

CODEGEN_TIME_CONFIG_PREFIX: Final = "quarkus.openapi-generator.codegen"

INCLUDE_FILES: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.include"
EXCLUDE_FILES: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.exclude"
INPUT_BASE_DIR: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.input-base-dir"
VERBOSE_PROPERTY_NAME: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.verbose"
VALIDATE_SPEC_PROPERTY_NAME: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.validateSpec"
DEFAULT_PACKAGE_PROPERTY_NAME: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.default-package"
DEFAULT_SECURITY_SCHEME: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.default-security-scheme"
FAILURE_MODE_PROPERTY_NAME: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.failure-mode"

DEFAULT_PACKAGE: Final = "org.openapi.quarkus"
API_PKG_SUFFIX: Final = ".api"
MODEL_PKG_SUFFIX: Final = ".model"

_SPEC_PREFIX: Final = f"{CODEGEN_TIME_CONFIG_PREFIX}.spec"


class ConfigName(Enum):
    """Per-file configuration options."""

    BASE_PACKAGE = "base-package"
    SKIP_FORM_MODEL = "skip-form-model"
    ADDITIONAL_MODEL_TYPE_ANNOTATIONS = "additional-model-type-annotations"
    ADDITIONAL_API_TYPE_ANNOTATIONS = "additional-api-type-annotations"
    CUSTOM_REGISTER_PROVIDERS = "custom-register-providers"
    RETURN_RESPONSE = "return-response"
    TYPE_MAPPINGS = "type-mappings"
    IMPORT_MAPPINGS = "import-mappings"


class FailureMode(Enum):
    """How a generation pass reacts to a failing spec file."""

    FAIL_FAST = "fail-fast"
    ISOLATE = "isolate"


def get_spec_config_name(config_name: ConfigName, spec_path: Path) -> str:
    """Build the file-scoped key for an option."""
    return f"{_SPEC_PREFIX}.{spec_config_name(spec_path)}.{config_name.value}"


def get_base_package_property_name(spec_path: Path) -> str:
    return get_spec_config_name(ConfigName.BASE_PACKAGE, spec_path)


def get_skip_form_model_property_name(spec_path: Path) -> str:
    return get_spec_config_name(ConfigName.SKIP_FORM_MODEL, spec_path)


def get_additional_model_type_annotations_property_name(spec_path: Path) -> str:
    return get_spec_config_name(ConfigName.ADDITIONAL_MODEL_TYPE_ANNOTATIONS, spec_path)


def get_additional_api_type_annotations_property_name(spec_path: Path) -> str:
    return get_spec_config_name(ConfigName.ADDITIONAL_API_TYPE_ANNOTATIONS, spec_path)


def get_custom_register_providers_property_name(spec_path: Path) -> str:
    return get_spec_config_name(ConfigName.CUSTOM_REGISTER_PROVIDERS, spec_path)


def get_return_response_property_name(spec_path: Path) -> str:
    return get_spec_config_name(ConfigName.RETURN_RESPONSE, spec_path)


def get_type_mappings_property_name(spec_path: Path) -> str:
    return get_spec_config_name(ConfigName.TYPE_MAPPINGS, spec_path)


def get_import_mappings_property_name(spec_path: Path) -> str:
    return get_spec_config_name(ConfigName.IMPORT_MAPPINGS, spec_path)
