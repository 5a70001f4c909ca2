"""Tests for the code generation providers."""

from collections.abc import Callable
from pathlib import Path

import pytest

from java_oas_generator.codegen import providers
from java_oas_generator.codegen.providers import (
    CodeGenContext,
    OpenApiGeneratorJsonCodeGen,
    OpenApiGeneratorYamlCodeGen,
    OpenApiGeneratorYmlCodeGen,
    all_providers,
    get_failure_mode,
)
from java_oas_generator.config.codegen_config import FailureMode
from java_oas_generator.config.config_source import ConfigSource
from java_oas_generator.errors import GeneratorInvocationError, InvalidConfigurationError

from conftest import RecordingGenerator

PREFIX = "quarkus.openapi-generator.codegen"


@pytest.fixture
def source_dir(project_dir: Path, make_files: Callable[..., list[Path]]) -> Path:
    openapi_dir = project_dir / "src" / "main" / "openapi"
    make_files(openapi_dir, "a.yaml", "b.yaml", "c.yaml", "d.json", "e.yml")
    return openapi_dir


def _context(source_dir: Path, config: ConfigSource | None = None) -> CodeGenContext:
    return CodeGenContext(input_dir=source_dir, out_dir=source_dir.parent / "out", config=config or ConfigSource())


class TestProviderTypes:
    @pytest.mark.parametrize(
        ("provider_type", "provider_id", "extension"),
        [
            (OpenApiGeneratorYamlCodeGen, "open-api-yaml", ".yaml"),
            (OpenApiGeneratorYmlCodeGen, "open-api-yml", ".yml"),
            (OpenApiGeneratorJsonCodeGen, "open-api-json", ".json"),
        ],
    )
    def test_identity(self, provider_type, provider_id: str, extension: str) -> None:
        assert provider_type.provider_id == provider_id
        assert provider_type.input_extension == extension
        assert provider_type.input_directory == "openapi"

    def test_all_providers_share_generator(self, recording_generator: RecordingGenerator) -> None:
        created = all_providers(recording_generator)
        assert [provider.provider_id for provider in created] == ["open-api-yaml", "open-api-yml", "open-api-json"]
        assert all(provider.generator is recording_generator for provider in created)


class TestShouldRun:
    def test_existing_directory(self, source_dir: Path) -> None:
        assert OpenApiGeneratorYamlCodeGen().should_run(source_dir, ConfigSource())

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert not OpenApiGeneratorYamlCodeGen().should_run(tmp_path / "src" / "main" / "openapi", ConfigSource())

    def test_missing_override(self, source_dir: Path) -> None:
        config = ConfigSource({f"{PREFIX}.input-base-dir": "nowhere"})
        with pytest.raises(InvalidConfigurationError):
            OpenApiGeneratorYamlCodeGen().should_run(source_dir, config)


class TestTrigger:
    def test_generates_each_matching_file(self, source_dir: Path, recording_generator: RecordingGenerator) -> None:
        result = OpenApiGeneratorYamlCodeGen(recording_generator).trigger(_context(source_dir))

        assert recording_generator.generated_names == ["a.yaml", "b.yaml", "c.yaml"]
        assert result.provider_id == "open-api-yaml"
        assert result.scanned_dir == source_dir
        assert not result.skipped
        assert len(result.succeeded) == 3
        assert result.failed == []

    def test_respects_filters(self, source_dir: Path, recording_generator: RecordingGenerator) -> None:
        config = ConfigSource({f"{PREFIX}.include": "a.yaml,b.yaml", f"{PREFIX}.exclude": "b.yaml"})
        OpenApiGeneratorYamlCodeGen(recording_generator).trigger(_context(source_dir, config))
        assert recording_generator.generated_names == ["a.yaml"]

    def test_skipped_without_input_directory(self, tmp_path: Path, recording_generator: RecordingGenerator) -> None:
        context = _context(tmp_path / "src" / "main" / "openapi")
        result = OpenApiGeneratorYamlCodeGen(recording_generator).trigger(context)
        assert result.skipped
        assert result.outcomes == []
        assert recording_generator.calls == []

    def test_missing_override_fails_before_traversal(
        self, source_dir: Path, recording_generator: RecordingGenerator, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def unexpected_locate(*args, **kwargs):
            pytest.fail("locate must not run")

        monkeypatch.setattr(providers, "locate", unexpected_locate)
        config = ConfigSource({f"{PREFIX}.input-base-dir": "nowhere"})

        with pytest.raises(InvalidConfigurationError):
            OpenApiGeneratorYamlCodeGen(recording_generator).trigger(_context(source_dir, config))
        assert recording_generator.calls == []

    def test_override_directory_is_scanned(
        self, source_dir: Path, make_files: Callable[..., list[Path]], recording_generator: RecordingGenerator
    ) -> None:
        project_dir = source_dir.parents[2]
        make_files(project_dir / "api-specs", "override.yaml")
        config = ConfigSource({f"{PREFIX}.input-base-dir": "api-specs"})

        result = OpenApiGeneratorYamlCodeGen(recording_generator).trigger(_context(source_dir, config))

        assert result.scanned_dir == project_dir / "api-specs"
        assert recording_generator.generated_names == ["override.yaml"]

    def test_fail_fast_aborts_remaining_files(self, source_dir: Path) -> None:
        generator = RecordingGenerator(fail_on={"b.yaml"})

        with pytest.raises(GeneratorInvocationError):
            OpenApiGeneratorYamlCodeGen(generator).trigger(_context(source_dir))
        assert generator.generated_names == ["a.yaml", "b.yaml"]

    def test_isolate_attempts_every_file(self, source_dir: Path) -> None:
        generator = RecordingGenerator(fail_on={"b.yaml"})
        config = ConfigSource({f"{PREFIX}.failure-mode": "isolate"})

        result = OpenApiGeneratorYamlCodeGen(generator).trigger(_context(source_dir, config))

        assert generator.generated_names == ["a.yaml", "b.yaml", "c.yaml"]
        assert [outcome.spec_file.name for outcome in result.succeeded] == ["a.yaml", "c.yaml"]
        (failure,) = result.failed
        assert failure.spec_file.name == "b.yaml"
        assert isinstance(failure.error, GeneratorInvocationError)

    def test_isolate_does_not_hide_configuration_errors(
        self, source_dir: Path, recording_generator: RecordingGenerator
    ) -> None:
        config = ConfigSource(
            {
                f"{PREFIX}.failure-mode": "isolate",
                f"{PREFIX}.spec.b_yaml.base-package": "org.acme.class",
            }
        )

        with pytest.raises(InvalidConfigurationError):
            OpenApiGeneratorYamlCodeGen(recording_generator).trigger(_context(source_dir, config))
        assert recording_generator.generated_names == ["a.yaml"]

    def test_isolate_does_not_hide_unexpected_errors(self, source_dir: Path) -> None:
        class BrokenGenerator:
            def generate(self, spec_path, output_dir, options) -> None:
                msg = "bug"
                raise KeyError(msg)

        config = ConfigSource({f"{PREFIX}.failure-mode": "isolate"})
        with pytest.raises(KeyError):
            OpenApiGeneratorYamlCodeGen(BrokenGenerator()).trigger(_context(source_dir, config))


class TestFailureMode:
    def test_default(self) -> None:
        assert get_failure_mode(ConfigSource()) is FailureMode.FAIL_FAST

    def test_isolate(self) -> None:
        assert get_failure_mode(ConfigSource({f"{PREFIX}.failure-mode": " Isolate "})) is FailureMode.ISOLATE

    def test_invalid(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="fail-fast, isolate"):
            get_failure_mode(ConfigSource({f"{PREFIX}.failure-mode": "retry"}))
