"""Tests for the OpenAPI Generator command wrapper."""

import json
from pathlib import Path

import pytest

from java_oas_generator.config.circuit_breaker import CircuitBreakerConfiguration
from java_oas_generator.config.class_codegen import ClassCodegenConfig
from java_oas_generator.errors import GeneratorInvocationError
from java_oas_generator.generator.options import PerFileConfig
from java_oas_generator.generator.wrapper import OpenApiClientGeneratorWrapper, build_config_document

BASE_PACKAGE = "org.openapi.quarkus.ordersapi"


def _options(**overrides) -> PerFileConfig:
    return PerFileConfig(class_config=ClassCodegenConfig(base_package=BASE_PACKAGE), **overrides)


class TestBuildCommand:
    def test_minimal_command(self, tmp_path: Path) -> None:
        wrapper = OpenApiClientGeneratorWrapper()
        args = wrapper.build_command(tmp_path / "orders-api.yaml", tmp_path / "out", _options())

        assert args == [
            "openapi-generator-cli",
            "generate",
            "-g",
            "java",
            "--library",
            "microprofile",
            "-i",
            str(tmp_path / "orders-api.yaml"),
            "-o",
            str(tmp_path / "out"),
            "--api-package",
            f"{BASE_PACKAGE}.api",
            "--model-package",
            f"{BASE_PACKAGE}.model",
            "--invoker-package",
            BASE_PACKAGE,
        ]

    def test_custom_command(self, tmp_path: Path) -> None:
        wrapper = OpenApiClientGeneratorWrapper(["npx", "@openapitools/openapi-generator-cli"])
        args = wrapper.build_command(tmp_path / "a.yaml", tmp_path, _options())
        assert args[:3] == ["npx", "@openapitools/openapi-generator-cli", "generate"]

    def test_optional_flags(self, tmp_path: Path) -> None:
        options = _options(verbose=True, validate_spec=False, skip_form_model="true")
        args = OpenApiClientGeneratorWrapper().build_command(tmp_path / "a.yaml", tmp_path, options)

        assert "--skip-validate-spec" in args
        assert "--verbose" in args
        assert args[args.index("--global-property") + 1] == "skipFormModel=true"

    def test_absent_options_are_not_passed(self, tmp_path: Path) -> None:
        args = OpenApiClientGeneratorWrapper().build_command(tmp_path / "a.yaml", tmp_path, _options())
        for flag in ("--skip-validate-spec", "--verbose", "--global-property", "-c"):
            assert flag not in args

    def test_mappings_are_not_passed_as_flags(self, tmp_path: Path) -> None:
        options = _options(
            type_mappings={"File": "InputStream"},
            import_mappings={"InputStream": "java.io.InputStream"},
        )
        args = OpenApiClientGeneratorWrapper().build_command(tmp_path / "a.yaml", tmp_path, options)
        assert "--type-mappings" not in args
        assert "--import-mappings" not in args


class TestBuildConfigDocument:
    def test_empty_without_extras(self) -> None:
        assert build_config_document(_options()) == {}

    def test_mappings_are_json_objects(self) -> None:
        options = _options(
            type_mappings={"File": "InputStream", "object": "java.util.Map<String,Object>"},
            import_mappings={"InputStream": "java.io.InputStream"},
        )
        assert build_config_document(options) == {
            "typeMappings": {"File": "InputStream", "object": "java.util.Map<String,Object>"},
            "importMappings": {"InputStream": "java.io.InputStream"},
        }

    def test_empty_mapping_is_still_passed(self) -> None:
        assert build_config_document(_options(type_mappings={})) == {"typeMappings": {}}


class TestGenerate:
    def test_runs_generator(self, tmp_path: Path, fake_run) -> None:
        out_dir = tmp_path / "out"
        OpenApiClientGeneratorWrapper().generate(tmp_path / "a.yaml", out_dir, _options())

        assert len(fake_run.calls) == 1
        assert out_dir.is_dir()
        assert fake_run.config_files == []

    def test_additional_properties_go_to_config_file(self, tmp_path: Path, fake_run) -> None:
        options = _options(
            additional_model_type_annotations="@lombok.Data",
            default_security_scheme="bearer",
            circuit_breaker=CircuitBreakerConfiguration(
                enabled=True, operations={"org.acme.OrdersApi": ["getOrder"]}
            ),
        )
        OpenApiClientGeneratorWrapper().generate(tmp_path / "a.yaml", tmp_path / "out", options)

        (config_text,) = fake_run.config_files
        assert json.loads(config_text) == {
            "additionalModelTypeAnnotations": "@lombok.Data",
            "defaultSecurityScheme": "bearer",
            "circuit-breaker": {"org.acme.OrdersApi": ["getOrder"]},
        }

    def test_mapping_values_with_commas_reach_config_file(self, tmp_path: Path, fake_run) -> None:
        options = _options(type_mappings={"object": "java.util.Map<String,Object>", "File": "InputStream"})
        OpenApiClientGeneratorWrapper().generate(tmp_path / "a.yaml", tmp_path / "out", options)

        (config_text,) = fake_run.config_files
        assert json.loads(config_text)["typeMappings"] == {
            "object": "java.util.Map<String,Object>",
            "File": "InputStream",
        }
        assert "--type-mappings" not in fake_run.calls[0]

    def test_config_file_is_removed_afterwards(self, tmp_path: Path, fake_run) -> None:
        options = _options(custom_register_providers="org.acme.AuthFilter")
        OpenApiClientGeneratorWrapper().generate(tmp_path / "a.yaml", tmp_path / "out", options)

        args = fake_run.calls[0]
        assert not Path(args[args.index("-c") + 1]).exists()

    def test_non_zero_exit(self, tmp_path: Path, fake_run) -> None:
        fake_run.returncode = 1
        fake_run.stderr = "[main] ERROR spec is invalid"

        with pytest.raises(GeneratorInvocationError) as exc_info:
            OpenApiClientGeneratorWrapper().generate(tmp_path / "a.yaml", tmp_path / "out", _options())

        error = exc_info.value
        assert error.path == tmp_path / "a.yaml"
        assert error.returncode == 1
        assert "spec is invalid" in error.stderr

    def test_missing_executable(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def missing(*args, **kwargs):
            raise FileNotFoundError(2, "No such file or directory", "openapi-generator-cli")

        monkeypatch.setattr("java_oas_generator.generator.wrapper.subprocess.run", missing)

        with pytest.raises(GeneratorInvocationError, match="Unable to run openapi-generator-cli") as exc_info:
            OpenApiClientGeneratorWrapper().generate(tmp_path / "a.yaml", tmp_path / "out", _options())
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
