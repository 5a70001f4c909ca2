"""
Read-only configuration source.

Values are stored under flat dotted keys. A YAML document such as::

    quarkus:
      openapi-generator:
        codegen:
          spec:
            orders_api_yaml:
              base-package: org.acme.orders

is flattened into ``quarkus.openapi-generator.codegen.spec.orders_api_yaml.base-package``.
Lookups return ``None`` for absent keys so callers can tell "not configured"
apart from an explicit value.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any, Final

import yaml

from java_oas_generator.errors import InvalidConfigurationError

_TRUE_VALUES: Final = frozenset({"true", "1", "yes", "y", "on"})
_FALSE_VALUES: Final = frozenset({"false", "0", "no", "n", "off"})
_LIST_SEPARATOR: Final = ","


def _flatten(data: Mapping[Any, Any], prefix: str = "") -> Iterator[tuple[str, Any]]:
    for raw_key, value in data.items():
        key = f"{prefix}.{raw_key}" if prefix else str(raw_key)
        if isinstance(value, Mapping):
            yield from _flatten(value, key)
        else:
            yield key, value


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_override(text: str) -> tuple[str, str]:
    """Split a ``key=value`` override into its parts.

    Raises:
        InvalidConfigurationError: If the text has no ``=`` or an empty key.
    """
    key, separator, value = text.partition("=")
    key = key.strip()
    if not separator or not key:
        msg = f"Invalid property override {text!r}, expected KEY=VALUE"
        raise InvalidConfigurationError(msg)
    return key, value.strip()


class ConfigSource:
    """Immutable lookup of configuration values by flat key."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Any]) -> ConfigSource:
        """Build a source from a (possibly nested) mapping."""
        return cls(dict(_flatten(data)))

    @classmethod
    def from_yaml(cls, path: Path) -> ConfigSource:
        """Load a YAML configuration file.

        Args:
            path: The YAML file to read.

        Returns:
            A source holding the flattened document.

        Raises:
            InvalidConfigurationError: If the file cannot be read or does not
                hold a mapping at its top level.
        """
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            msg = f"Unable to read configuration file {path}: {e}"
            raise InvalidConfigurationError(msg) from e
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in configuration file {path}: {e}"
            raise InvalidConfigurationError(msg) from e

        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            msg = f"Configuration file {path} must contain a mapping at its top level"
            raise InvalidConfigurationError(msg)
        return cls.from_mapping(data)

    def with_overrides(self, overrides: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> ConfigSource:
        """Return a new source where the given values replace existing ones."""
        merged = dict(self._values)
        merged.update(overrides)
        return ConfigSource(merged)

    def __len__(self) -> int:
        return len(self._values)

    def keys(self) -> list[str]:
        """Return all keys in sorted order."""
        return sorted(self._values)

    def get_value(self, key: str) -> str | None:
        """Get a scalar value as a string."""
        if key not in self._values:
            return None
        value = self._values[key]
        if value is None:
            return None
        if isinstance(value, list):
            msg = f"Expected a single value for {key}, got a list"
            raise InvalidConfigurationError(msg, key=key)
        return _scalar_to_str(value)

    def get_bool(self, key: str) -> bool | None:
        """Get a boolean value.

        Accepts YAML booleans and the strings true/false, yes/no, on/off, 1/0.
        """
        value = self._values.get(key)
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        text = _scalar_to_str(value).strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        msg = f"Invalid boolean value for {key}: {value!r}"
        raise InvalidConfigurationError(msg, key=key)

    def get_list(self, key: str) -> list[str] | None:
        """Get a list of strings.

        A YAML sequence is used as is; a string is split on commas.
        Empty entries are dropped.
        """
        value = self._values.get(key)
        if value is None:
            return None
        items = value if isinstance(value, list) else _scalar_to_str(value).split(_LIST_SEPARATOR)
        return [text for text in (_scalar_to_str(item).strip() for item in items) if text]

    def get_map(self, key: str) -> dict[str, str] | None:
        """Get every ``<key>.<name>`` entry as a ``name -> value`` mapping.

        Returns:
            The mapping, or None when no entry exists under the key.
        """
        prefix = f"{key}."
        entries = {
            name[len(prefix) :]: _scalar_to_str(value)
            for name, value in self._values.items()
            if name.startswith(prefix) and value is not None
        }
        return dict(sorted(entries.items())) or None
