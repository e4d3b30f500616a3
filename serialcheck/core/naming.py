"""Fixture file naming.

Both the read and the write path of the fixture store go through
fixture_name(); a fixture is only found again if it was named the same way.
"""
from __future__ import annotations

from typing import Union

from ..version import DEFAULT_FIXTURE_EXTENSION

TypeOrName = Union[type, str]


def simple_name(type_or_name: TypeOrName) -> str:
    """Strip the namespace from a class or dotted name.

    >>> simple_name("org.example.Foo")
    'Foo'
    >>> simple_name("Foo")
    'Foo'
    """
    if isinstance(type_or_name, type):
        return type_or_name.__name__
    if isinstance(type_or_name, str):
        return type_or_name.rsplit(".", 1)[-1]
    raise TypeError(
        f"Expected a class or a dotted name, got {type(type_or_name).__name__}"
    )


def qualified_name(type_or_name: TypeOrName) -> str:
    """Module-qualified name of a class; strings are returned unchanged."""
    if isinstance(type_or_name, type):
        return f"{type_or_name.__module__}.{type_or_name.__qualname__}"
    if isinstance(type_or_name, str):
        return type_or_name
    raise TypeError(
        f"Expected a class or a dotted name, got {type(type_or_name).__name__}"
    )


def fixture_name(
    version: str,
    type_or_name: TypeOrName,
    extension: str = DEFAULT_FIXTURE_EXTENSION,
) -> str:
    """Return ``"<SimpleName>-<version>.<extension>"``.

    Raises:
        ValueError: version is empty or contains a path separator.
        TypeError: type_or_name is neither a class nor a string.
    """
    if not version:
        raise ValueError("Fixture version must be a non-empty string")
    if "/" in version or "\\" in version:
        raise ValueError(f"Fixture version must not contain a path separator: {version!r}")
    return f"{simple_name(type_or_name)}-{version}.{extension}"
