"""
OpenAPI Generator invocation.

Wraps the ``openapi-generator-cli`` command line so that one call generates
one MicroProfile REST client from one spec file. All options travel in the
``PerFileConfig`` passed to ``generate``; nothing is kept between calls.
"""

from __future__ import annotations

import json
import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from java_oas_generator.errors import GeneratorInvocationError
from java_oas_generator.generator.options import PerFileConfig
from java_oas_generator.utils.file_utils import ensure_directory

DEFAULT_GENERATOR_COMMAND: Final = ("openapi-generator-cli",)
GENERATOR_NAME: Final = "java"
GENERATOR_LIBRARY: Final = "microprofile"
CONFIG_FILE_NAME: Final = "generator-config.json"


class ClientGenerator(Protocol):
    """Anything able to generate a client for one spec file."""

    def generate(self, spec_path: Path, output_dir: Path, options: PerFileConfig) -> None: ...


def build_config_document(options: PerFileConfig) -> dict[str, Any]:
    """Collect the settings written to the generator config file.

    Type and import mappings are written as JSON objects, so their values
    may contain ``,`` and ``=``.

    Args:
        options: Resolved options for the file.

    Returns:
        The config document; empty when nothing needs to be passed.
    """
    document = options.additional_properties()
    if options.type_mappings is not None:
        document["typeMappings"] = dict(options.type_mappings)
    if options.import_mappings is not None:
        document["importMappings"] = dict(options.import_mappings)
    return document


class OpenApiClientGeneratorWrapper:
    """Runs ``openapi-generator-cli generate`` for Java MicroProfile clients."""

    def __init__(self, command: Sequence[str] = DEFAULT_GENERATOR_COMMAND) -> None:
        self.command = tuple(command)

    def build_command(
        self,
        spec_path: Path,
        output_dir: Path,
        options: PerFileConfig,
        config_file: Path | None = None,
    ) -> list[str]:
        """Build the full generator command line.

        Args:
            spec_path: The OpenAPI document.
            output_dir: Directory the generator writes into.
            options: Resolved options for the file.
            config_file: Optional generator config file with additional
                properties and mappings.

        Returns:
            The argument list, starting with the generator executable.
        """
        class_config = options.class_config
        args = [
            *self.command,
            "generate",
            "-g",
            GENERATOR_NAME,
            "--library",
            GENERATOR_LIBRARY,
            "-i",
            str(spec_path),
            "-o",
            str(output_dir),
            "--api-package",
            class_config.api_package,
            "--model-package",
            class_config.model_package,
            "--invoker-package",
            class_config.invoker_package,
        ]
        if not options.validate_spec:
            args.append("--skip-validate-spec")
        if options.verbose:
            args.append("--verbose")
        if options.skip_form_model is not None:
            args.extend(["--global-property", f"skipFormModel={options.skip_form_model}"])
        if config_file is not None:
            args.extend(["-c", str(config_file)])
        return args

    def generate(self, spec_path: Path, output_dir: Path, options: PerFileConfig) -> None:
        """Generate the client for one spec file.

        Raises:
            GeneratorInvocationError: If the generator cannot be started or
                exits with a non-zero status.
        """
        ensure_directory(output_dir)
        config_document = build_config_document(options)

        with tempfile.TemporaryDirectory(prefix="java-oas-generator-") as work_dir:
            config_file = None
            if config_document:
                config_file = Path(work_dir) / CONFIG_FILE_NAME
                config_file.write_text(json.dumps(config_document, indent=2), encoding="utf-8")

            args = self.build_command(spec_path, output_dir, options, config_file)
            try:
                result = subprocess.run(args, capture_output=True, text=True, check=False)
            except OSError as e:
                msg = f"Unable to run {self.command[0]} for {spec_path}: {e}"
                raise GeneratorInvocationError(msg, path=spec_path) from e

        if result.returncode != 0:
            msg = f"OpenAPI Generator failed for {spec_path} (exit code {result.returncode})"
            raise GeneratorInvocationError(msg, path=spec_path, returncode=result.returncode, stderr=result.stderr)
