"""
Code generation providers, one per spec file extension.

A provider ties a generation pass together: it resolves the input directory,
locates the spec files with its extension and dispatches each of them to the
generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Final

from java_oas_generator.config.codegen_config import FAILURE_MODE_PROPERTY_NAME, FailureMode
from java_oas_generator.config.config_source import ConfigSource
from java_oas_generator.errors import InvalidConfigurationError, OpenApiGeneratorError
from java_oas_generator.generator.dispatcher import dispatch
from java_oas_generator.generator.wrapper import ClientGenerator, OpenApiClientGeneratorWrapper
from java_oas_generator.locator.spec_locator import (
    JSON,
    YAML,
    YML,
    FileFilterConfig,
    SpecFile,
    locate,
    resolve_input_directory,
)

INPUT_DIRECTORY: Final = "openapi"


@dataclass(frozen=True)
class CodeGenContext:
    """Inputs of one generation pass."""

    input_dir: Path
    out_dir: Path
    config: ConfigSource


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of generating one spec file."""

    spec_file: SpecFile
    error: OpenApiGeneratorError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Summary of one provider's generation pass."""

    provider_id: str
    scanned_dir: Path | None = None
    outcomes: list[DispatchOutcome] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        return self.scanned_dir is None

    @property
    def succeeded(self) -> list[DispatchOutcome]:
        return [outcome for outcome in self.outcomes if outcome.succeeded]

    @property
    def failed(self) -> list[DispatchOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]


def get_failure_mode(config: ConfigSource) -> FailureMode:
    """Read the batch failure mode, ``fail-fast`` unless configured otherwise."""
    value = config.get_value(FAILURE_MODE_PROPERTY_NAME)
    if value is None:
        return FailureMode.FAIL_FAST
    try:
        return FailureMode(value.strip().lower())
    except ValueError as e:
        allowed = ", ".join(mode.value for mode in FailureMode)
        msg = f"Invalid value for {FAILURE_MODE_PROPERTY_NAME}: {value!r} (expected one of {allowed})"
        raise InvalidConfigurationError(msg, key=FAILURE_MODE_PROPERTY_NAME) from e


class OpenApiGeneratorCodeGenBase:
    """Generates Java clients from the spec files with one extension."""

    provider_id: ClassVar[str]
    input_extension: ClassVar[str]
    input_directory: ClassVar[str] = INPUT_DIRECTORY

    def __init__(self, generator: ClientGenerator | None = None) -> None:
        self.generator = generator or OpenApiClientGeneratorWrapper()

    def should_run(self, source_dir: Path, config: ConfigSource) -> bool:
        """Check whether there is anything to scan.

        Raises:
            InvalidConfigurationError: If the override directory is missing.
        """
        return resolve_input_directory(source_dir, config) is not None

    def trigger(self, context: CodeGenContext) -> BatchResult:
        """Run the generation pass.

        In fail-fast mode the first failing file aborts the pass and its error
        propagates. In isolate mode every file is attempted and generation
        failures are reported in the returned result; configuration errors
        still abort the pass.
        """
        result = BatchResult(provider_id=self.provider_id)
        openapi_dir = resolve_input_directory(context.input_dir, context.config)
        if openapi_dir is None:
            return result

        failure_mode = get_failure_mode(context.config)
        spec_files = locate(openapi_dir, FileFilterConfig.from_config(context.config), self.input_extension)
        result.scanned_dir = openapi_dir

        for spec_file in spec_files:
            if failure_mode is FailureMode.FAIL_FAST:
                dispatch(spec_file, context.config, context.out_dir, self.generator)
                result.outcomes.append(DispatchOutcome(spec_file))
                continue
            try:
                dispatch(spec_file, context.config, context.out_dir, self.generator)
            except InvalidConfigurationError:
                raise
            except OpenApiGeneratorError as e:
                result.outcomes.append(DispatchOutcome(spec_file, error=e))
            else:
                result.outcomes.append(DispatchOutcome(spec_file))

        return result


class OpenApiGeneratorJsonCodeGen(OpenApiGeneratorCodeGenBase):
    provider_id = "open-api-json"
    input_extension = JSON


class OpenApiGeneratorYamlCodeGen(OpenApiGeneratorCodeGenBase):
    provider_id = "open-api-yaml"
    input_extension = YAML


class OpenApiGeneratorYmlCodeGen(OpenApiGeneratorCodeGenBase):
    provider_id = "open-api-yml"
    input_extension = YML


PROVIDER_TYPES: Final = (
    OpenApiGeneratorYamlCodeGen,
    OpenApiGeneratorYmlCodeGen,
    OpenApiGeneratorJsonCodeGen,
)


def all_providers(generator: ClientGenerator | None = None) -> list[OpenApiGeneratorCodeGenBase]:
    """Create one provider per supported extension, sharing a generator."""
    shared = generator or OpenApiClientGeneratorWrapper()
    return [provider_type(shared) for provider_type in PROVIDER_TYPES]
