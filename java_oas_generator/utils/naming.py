"""
Name sanitization utilities for Java client generation.

This module turns spec file names into configuration key scopes and into
Java package segments. Both conversions are deterministic so the same file
always maps to the same keys and packages.
"""

import re
from collections.abc import Callable
from pathlib import Path
from typing import Final

_NON_ALPHANUMERIC_PATTERN: Final = re.compile(r"[^a-zA-Z0-9]")
_NON_LOWER_ALPHANUMERIC_PATTERN: Final = re.compile(r"[^a-z0-9]")
_PACKAGE_SEGMENT_PATTERN: Final = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Segment used when a name has no alphanumerics at all
_EMPTY_SEGMENT: Final = "api"

# Reserved Java words that cannot be used as a package segment
JAVA_KEYWORDS: Final = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "try",
        "void",
        "volatile",
        "while",
        # Literals
        "true",
        "false",
        "null",
        # Contextual keywords rejected by javac as package names
        "_",
    }
)


def _convert_if_not_empty(string: str | None, conversion_func: Callable[[str], str]) -> str:
    """Safely convert a string, returning empty string if input is None or empty."""
    return conversion_func(string) if string else ""


def underscorecase(string: str | None) -> str:
    """Replace every character outside ``[A-Za-z0-9]`` with an underscore.

    Args:
        string: String to convert.

    Returns:
        String of the same length containing only alphanumerics and underscores.

    Examples:
        >>> underscorecase("orders-api.yaml")
        'orders_api_yaml'
        >>> underscorecase("My Spec!.yaml")
        'My_Spec__yaml'
    """
    return _convert_if_not_empty(string, lambda s: _NON_ALPHANUMERIC_PATTERN.sub("_", s))


def alphanumcase(string: str | None) -> str:
    """Lowercase a string and remove everything outside ``[a-z0-9]``.

    Examples:
        >>> alphanumcase("Orders-API v2")
        'ordersapiv2'
    """
    return _convert_if_not_empty(string, lambda s: _NON_LOWER_ALPHANUMERIC_PATTERN.sub("", s.lower()))


def escape_java_keyword(name: str) -> str:
    """Prefix Java keywords with an underscore.

    Examples:
        >>> escape_java_keyword("class")
        '_class'
        >>> escape_java_keyword("orders")
        'orders'
    """
    return f"_{name}" if name in JAVA_KEYWORDS else name


def is_java_keyword(name: str) -> bool:
    """Check if a name is a reserved Java word."""
    return name in JAVA_KEYWORDS


def java_package_segment(name: str | None) -> str:
    """Normalize a name into a single valid Java package segment.

    The name is lowercased and stripped of every non-alphanumeric character.
    A leading digit or a Java keyword gets an underscore prefix. A name with
    no alphanumerics at all becomes ``api``.

    Args:
        name: The string to normalize.

    Returns:
        A valid, lowercase Java package segment.

    Examples:
        >>> java_package_segment("orders-api")
        'ordersapi'
        >>> java_package_segment("3d-api")
        '_3dapi'
        >>> java_package_segment("!!!")
        'api'
    """
    segment = alphanumcase(name)
    if not segment:
        return _EMPTY_SEGMENT
    if segment[0].isdigit():
        return f"_{segment}"
    return escape_java_keyword(segment)


def is_valid_java_package(package: str) -> bool:
    """Check that every dot-separated segment is a usable Java identifier."""
    if not package:
        return False
    return all(
        _PACKAGE_SEGMENT_PATTERN.match(segment) and not is_java_keyword(segment) for segment in package.split(".")
    )


def spec_config_name(spec_path: Path) -> str:
    """Return the configuration key scope for a spec file.

    Examples:
        >>> spec_config_name(Path("/project/src/main/openapi/orders-api.yaml"))
        'orders_api_yaml'
    """
    return underscorecase(spec_path.name)


def spec_package_segment(spec_path: Path) -> str:
    """Return the package segment synthesized from a spec file name.

    The extension is dropped before sanitizing.

    Examples:
        >>> spec_package_segment(Path("orders-api.yaml"))
        'ordersapi'
        >>> spec_package_segment(Path("My Spec!.yaml"))
        'myspec'
    """
    return java_package_segment(spec_path.stem)
