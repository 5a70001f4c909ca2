#!/usr/bin/env python3
"""Command-line interface for the Java OAS Generator."""

import argparse
import shlex
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path

from java_oas_generator.codegen.providers import BatchResult, CodeGenContext, all_providers
from java_oas_generator.config.codegen_config import FAILURE_MODE_PROPERTY_NAME, FailureMode
from java_oas_generator.config.config_source import ConfigSource, parse_override
from java_oas_generator.errors import (
    BatchGenerationError,
    GenerationError,
    GeneratorInvocationError,
    InvalidConfigurationError,
    TraversalError,
)
from java_oas_generator.generator.wrapper import ClientGenerator, OpenApiClientGeneratorWrapper
from java_oas_generator.report.template_engine import ReportTemplateEngine

# Exit codes for better error reporting
EXIT_SUCCESS = 0
EXIT_CONFIGURATION_ERROR = 1
EXIT_TRAVERSAL_ERROR = 2
EXIT_GENERATION_ERROR = 3

DEFAULT_CONFIG_FILE = Path("src") / "main" / "resources" / "application.yaml"


def parse_command_line_args(args: list[str] | None = None) -> argparse.Namespace:
    """Create and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate Java MicroProfile REST clients from the OpenAPI files of a project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s ./my-service --config ./my-service/src/main/resources/application.yaml
  %(prog)s . -D quarkus.openapi-generator.codegen.include=orders.yaml --isolate-failures
        """,
    )
    parser.add_argument(
        "project_dir",
        type=Path,
        nargs="?",
        default=Path(),
        help="Project directory containing src/main/openapi (default: current directory)",
        metavar="PROJECT_DIR",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help=f"YAML configuration file (default: PROJECT_DIR/{DEFAULT_CONFIG_FILE.as_posix()} if present)",
        dest="config_file",
    )
    parser.add_argument(
        "--define",
        "-D",
        action="append",
        default=[],
        help="Set a configuration property, overriding the configuration file",
        metavar="KEY=VALUE",
        dest="overrides",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Root output directory (default: PROJECT_DIR/target/generated-sources)",
        dest="output_dir",
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Generate from src/test/openapi into the generated test sources",
    )
    parser.add_argument(
        "--generator-cli",
        default="openapi-generator-cli",
        help="Command used to run OpenAPI Generator (default: %(default)s)",
        dest="generator_cli",
    )
    parser.add_argument(
        "--isolate-failures",
        action="store_true",
        help="Keep generating the remaining files when one spec file fails",
        dest="isolate_failures",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    parsed_args = parser.parse_args(args)

    if not parsed_args.project_dir.is_dir():
        parser.error(f"Project directory not found: {parsed_args.project_dir}")
    if not shlex.split(parsed_args.generator_cli):
        parser.error("--generator-cli must not be empty")

    return parsed_args


def load_config(
    project_dir: Path,
    *,
    config_file: Path | None = None,
    overrides: Sequence[str] = (),
    isolate_failures: bool = False,
) -> ConfigSource:
    """Load the configuration file and apply command line overrides."""
    if config_file is None:
        default_file = project_dir / DEFAULT_CONFIG_FILE
        config_file = default_file if default_file.is_file() else None

    config = ConfigSource.from_yaml(config_file) if config_file is not None else ConfigSource()
    parsed_overrides = [parse_override(override) for override in overrides]
    if isolate_failures:
        parsed_overrides.append((FAILURE_MODE_PROPERTY_NAME, FailureMode.ISOLATE.value))
    return config.with_overrides(parsed_overrides)


def get_source_dir(project_dir: Path, *, test: bool = False) -> Path:
    """Return the conventional spec directory of a project."""
    return project_dir / "src" / ("test" if test else "main") / "openapi"


def get_output_root(project_dir: Path, *, test: bool = False) -> Path:
    return project_dir / "target" / ("generated-test-sources" if test else "generated-sources")


def run_generation(
    *,
    source_dir: Path,
    output_root: Path,
    config: ConfigSource,
    generator: ClientGenerator | None = None,
) -> list[BatchResult]:
    """Run every provider over the project.

    Each provider writes into its own ``<output_root>/<provider_id>`` directory.
    """
    results = []
    for provider in all_providers(generator):
        if not provider.should_run(source_dir, config):
            results.append(BatchResult(provider_id=provider.provider_id))
            continue
        context = CodeGenContext(
            input_dir=source_dir,
            out_dir=output_root / provider.provider_id,
            config=config,
        )
        results.append(provider.trigger(context))
    return results


def raise_for_failures(results: Sequence[BatchResult]) -> None:
    """Raise when any spec file failed during an isolated run."""
    failures = [(outcome.spec_file.path, outcome.error) for result in results for outcome in result.failed]
    if failures:
        msg = f"Generation failed for {len(failures)} spec file(s)"
        raise BatchGenerationError(msg, failures=failures)


def print_error(error: Exception, *, verbose: bool) -> None:
    """Print an error and, in verbose mode, its details."""
    print(f"Error: {error}", file=sys.stderr)
    if isinstance(error, GeneratorInvocationError) and error.stderr:
        print(error.stderr.rstrip(), file=sys.stderr)
    if verbose:
        traceback.print_exception(error)


def main(args: list[str] | None = None) -> int:
    """Generate Java clients for every OpenAPI file of a project."""
    parsed_args = parse_command_line_args(args)
    project_dir = parsed_args.project_dir

    try:
        config = load_config(
            project_dir,
            config_file=parsed_args.config_file,
            overrides=parsed_args.overrides,
            isolate_failures=parsed_args.isolate_failures,
        )
        results = run_generation(
            source_dir=get_source_dir(project_dir, test=parsed_args.test),
            output_root=parsed_args.output_dir or get_output_root(project_dir, test=parsed_args.test),
            config=config,
            generator=OpenApiClientGeneratorWrapper(shlex.split(parsed_args.generator_cli)),
        )
        print(ReportTemplateEngine().render_summary(results, project_dir))
        raise_for_failures(results)

    except InvalidConfigurationError as e:
        print_error(e, verbose=parsed_args.verbose)
        return EXIT_CONFIGURATION_ERROR
    except TraversalError as e:
        print_error(e, verbose=parsed_args.verbose)
        return EXIT_TRAVERSAL_ERROR
    except BatchGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        for _path, error in e.failures:
            print_error(error, verbose=parsed_args.verbose)
        return EXIT_GENERATION_ERROR
    except GenerationError as e:
        print_error(e, verbose=parsed_args.verbose)
        return EXIT_GENERATION_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
