"""
Error hierarchy for the Java OAS generator.

Configuration problems are reported before any file is touched; everything
that goes wrong while walking the input tree or running the external
generator is a ``GenerationError``.
"""

from __future__ import annotations

from pathlib import Path


class OpenApiGeneratorError(Exception):
    """Base class for all errors raised by this package."""


class InvalidConfigurationError(OpenApiGeneratorError):
    """A configuration value is missing, malformed or points nowhere."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class GenerationError(OpenApiGeneratorError):
    """A generation pass failed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TraversalError(GenerationError):
    """The input directory could not be walked."""


class GeneratorInvocationError(GenerationError):
    """The external code generator failed for one spec file."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message, path=path)
        self.returncode = returncode
        self.stderr = stderr


class BatchGenerationError(GenerationError):
    """One or more files failed while failures were being isolated."""

    def __init__(self, message: str, *, failures: list[tuple[Path, Exception]]) -> None:
        super().__init__(message)
        self.failures = failures
