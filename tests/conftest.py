"""Shared fixtures for the generator tests."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from java_oas_generator.errors import GeneratorInvocationError
from java_oas_generator.generator.options import PerFileConfig


class RecordingGenerator:
    """Generator double that records every call instead of running a process."""

    def __init__(self, fail_on: Iterable[str] = ()) -> None:
        self.fail_on = set(fail_on)
        self.calls: list[tuple[Path, Path, PerFileConfig]] = []

    def generate(self, spec_path: Path, output_dir: Path, options: PerFileConfig) -> None:
        self.calls.append((spec_path, output_dir, options))
        if spec_path.name in self.fail_on:
            msg = f"OpenAPI Generator failed for {spec_path}"
            raise GeneratorInvocationError(msg, path=spec_path, returncode=1, stderr="boom")

    @property
    def generated_names(self) -> list[str]:
        return [spec_path.name for spec_path, _, _ in self.calls]


@pytest.fixture
def recording_generator() -> RecordingGenerator:
    return RecordingGenerator()


@pytest.fixture
def make_files() -> Callable[..., list[Path]]:
    """Create empty files below a base directory, creating parents as needed."""

    def _make_files(base_dir: Path, *names: str) -> list[Path]:
        paths = []
        for name in names:
            path = base_dir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("openapi: 3.0.3\n", encoding="utf-8")
            paths.append(path)
        return paths

    return _make_files


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project with an empty ``src/main/openapi`` directory."""
    (tmp_path / "src" / "main" / "openapi").mkdir(parents=True)
    return tmp_path


class FakeRun:
    """Stand-in for ``subprocess.run`` returning a fixed exit status."""

    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[list[str]] = []
        self.config_files: list[str] = []

    def __call__(self, args: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(args))
        if "-c" in args:
            self.config_files.append(Path(args[args.index("-c") + 1]).read_text(encoding="utf-8"))
        return subprocess.CompletedProcess(args, self.returncode, stdout="", stderr=self.stderr)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    """Replace the generator process with a successful ``FakeRun``."""
    runner = FakeRun()
    monkeypatch.setattr("java_oas_generator.generator.wrapper.subprocess.run", runner)
    return runner
