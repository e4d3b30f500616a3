"""
The three hooks a compatibility check needs.

A subject is anything that can build the current object, name the versions
to check, and judge whether a reconstructed object matches. It is a
capability set, not a base class: implement the three methods on any class,
or wrap three callables in a FunctionSubject.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence, Union, runtime_checkable


@runtime_checkable
class CompatibilitySubject(Protocol):
    def get_target_object(self) -> Any:
        """Build the canonical current-version object. May raise."""
        ...

    def get_versions(self) -> Sequence[str]:
        """Versions to check, in the order they should be checked."""
        ...

    def verify_match(self, target: Any, reconstructed: Any) -> Optional[bool]:
        """Raise AssertionError (or return False) if the objects differ."""
        ...


@dataclass(frozen=True)
class FunctionSubject:
    """
    Adapts plain callables to CompatibilitySubject.

    Attributes:
        target_factory: Builds the target object
        versions: Sequence of versions, or a callable returning one
        verifier: verify_match implementation
    """

    target_factory: Callable[[], Any]
    versions: Union[Sequence[str], Callable[[], Sequence[str]]]
    verifier: Callable[[Any, Any], Optional[bool]]

    def get_target_object(self) -> Any:
        return self.target_factory()

    def get_versions(self) -> Sequence[str]:
        if callable(self.versions):
            return self.versions()
        return self.versions

    def verify_match(self, target: Any, reconstructed: Any) -> Optional[bool]:
        return self.verifier(target, reconstructed)
