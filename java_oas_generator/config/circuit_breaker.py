"""
Circuit breaker wiring for generated clients.

MicroProfile Fault Tolerance enables a circuit breaker on a client method with
a key such as ``org.acme.OrdersApi/getOrder/CircuitBreaker/enabled: true``.
The parser collects those keys so the generator can annotate the matching
methods.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from java_oas_generator.config.config_source import ConfigSource

CIRCUIT_BREAKER_ENABLED_PROPERTY_PATTERN: Final = re.compile(r"^(.+)/(.+)/CircuitBreaker/enabled$")
FAULT_TOLERANCE_ENABLED_PROPERTY_NAME: Final = "MP_Fault_Tolerance_CircuitBreaker_Enabled"


@dataclass(frozen=True)
class CircuitBreakerConfiguration:
    """Circuit breaker enablement per client class."""

    enabled: bool = False
    operations: dict[str, list[str]] = field(default_factory=dict)

    def as_additional_property(self) -> dict[str, list[str]]:
        return {name: list(methods) for name, methods in self.operations.items()} if self.enabled else {}


class CircuitBreakerConfigurationParser:
    """Builds a ``CircuitBreakerConfiguration`` from a configuration source."""

    @staticmethod
    def parse(config: ConfigSource) -> CircuitBreakerConfiguration:
        matches = []
        for key in config.keys():
            match = CIRCUIT_BREAKER_ENABLED_PROPERTY_PATTERN.match(key)
            if match:
                matches.append((key, match))
        if not matches:
            return CircuitBreakerConfiguration()

        enabled = config.get_bool(FAULT_TOLERANCE_ENABLED_PROPERTY_NAME)
        if enabled is None:
            enabled = True

        operations: dict[str, set[str]] = {}
        for key, match in matches:
            if config.get_bool(key):
                operations.setdefault(match.group(1), set()).add(match.group(2))

        return CircuitBreakerConfiguration(
            enabled=enabled,
            operations={name: sorted(methods) for name, methods in sorted(operations.items())},
        )
