"""
Resolved generation options for one spec file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from java_oas_generator.config.circuit_breaker import CircuitBreakerConfiguration
from java_oas_generator.config.class_codegen import ClassCodegenConfig


@dataclass(frozen=True)
class PerFileConfig:
    """Everything the external generator needs for one spec file.

    Optional values left as None are not passed to the generator at all, so
    its own defaults apply.
    """

    class_config: ClassCodegenConfig
    verbose: bool = False
    validate_spec: bool = True
    skip_form_model: str | None = None
    additional_model_type_annotations: str | None = None
    custom_register_providers: str | None = None
    type_mappings: dict[str, str] | None = None
    import_mappings: dict[str, str] | None = None
    default_security_scheme: str | None = None
    circuit_breaker: CircuitBreakerConfiguration = field(default_factory=CircuitBreakerConfiguration)

    @property
    def base_package(self) -> str:
        return self.class_config.base_package

    def additional_properties(self) -> dict[str, Any]:
        """Collect template properties that are set, keyed by generator name."""
        properties: dict[str, Any] = {
            "additionalModelTypeAnnotations": self.additional_model_type_annotations,
            "additionalApiTypeAnnotations": self.class_config.additional_api_type_annotations,
            "customRegisterProviders": self.custom_register_providers,
            "returnResponse": self.class_config.return_response,
            "defaultSecurityScheme": self.default_security_scheme,
        }
        circuit_breaker = self.circuit_breaker.as_additional_property()
        if circuit_breaker:
            properties["circuit-breaker"] = circuit_breaker
        return {name: value for name, value in properties.items() if value is not None}
