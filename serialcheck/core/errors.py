"""
Exceptions raised by the fixture store and the compatibility harness.

Every error is fatal to a run: a compatibility check that keeps going past
a failure would hide the very regression it exists to catch.
"""

from __future__ import annotations

from typing import Optional


class CompatError(Exception):
    """Base exception for fixture compatibility errors."""

    pass


class FixtureMissingError(CompatError):
    """
    Raised when no fixture exists for the requested (type, version).

    The store never substitutes a default object for a missing fixture.
    """

    def __init__(
        self,
        message: str,
        version: str,
        fixture_name: str,
        path: Optional[str] = None,
    ):
        super().__init__(message)
        self.version = version
        self.fixture_name = fixture_name
        self.path = path

    def __str__(self) -> str:
        location = f"version={self.version}, fixture={self.fixture_name}"
        if self.path:
            location += f", path={self.path}"
        return f"FixtureMissingError({location}): {self.args[0]}"


class FixtureDecodeError(CompatError):
    """
    Raised when fixture bytes cannot be turned back into an object.

    The underlying decoder error, if any, is chained as __cause__.
    """

    def __init__(
        self,
        message: str,
        version: str,
        fixture_name: str,
        reason: str = "decode_failed",
    ):
        super().__init__(message)
        self.version = version
        self.fixture_name = fixture_name
        self.reason = reason

    def __str__(self) -> str:
        return (
            f"FixtureDecodeError(version={self.version}, "
            f"fixture={self.fixture_name}) [{self.reason}]: {self.args[0]}"
        )


class FixtureIntegrityError(FixtureDecodeError):
    """
    Raised when a fixture's header disagrees with its payload or its name.

    Common causes:
    - Payload edited or truncated after it was written
    - Fixture copied or renamed to another version's file name
    - Fixture written for a different type
    """

    def __str__(self) -> str:
        return (
            f"FixtureIntegrityError(version={self.version}, "
            f"fixture={self.fixture_name}) [{self.reason}]: {self.args[0]}"
        )


class VerificationMismatch(CompatError, AssertionError):
    """
    Raised when the verifier rejects a reconstructed object.

    Subclasses AssertionError so test runners report it as a failure
    rather than an error.
    """

    def __init__(self, message: str, version: str, type_name: str):
        super().__init__(message)
        self.version = version
        self.type_name = type_name

    def __str__(self) -> str:
        return (
            f"VerificationMismatch(type={self.type_name}, "
            f"version={self.version}): {self.args[0]}"
        )


class FixtureWriteError(CompatError):
    """Raised when offline fixture generation cannot produce its file."""

    def __init__(self, message: str, version: str, path: str):
        super().__init__(message)
        self.version = version
        self.path = path

    def __str__(self) -> str:
        return (
            f"FixtureWriteError(version={self.version}, path={self.path}): "
            f"{self.args[0]}"
        )
