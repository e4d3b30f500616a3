"""
Cross-version fixture compatibility harness.

Builds the current object once, then for every declared version loads that
version's fixture and asks the subject whether the reconstruction matches.

Core Invariants:
- The target object is built exactly once and reused for every version
- Versions are checked in declared order, without sorting or deduplication
- First failure wins: later versions are not attempted
- The harness only reads fixtures; it never writes them

Usage:
    store = FixtureStore.beside(__file__)
    CompatibilityHarness(store).run(TriggerSubject())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
    Union,
)

from .errors import (
    CompatError,
    FixtureDecodeError,
    FixtureMissingError,
    VerificationMismatch,
)
from .naming import qualified_name
from .subject import CompatibilitySubject, FunctionSubject

if TYPE_CHECKING:
    from ..storage.store import FixtureStore

logger = logging.getLogger(__name__)


# =============================================================================
# Results
# =============================================================================


class CompatStatus(Enum):
    """
    Outcome of a compatibility check.

    PASSED: Every declared version loaded and matched (or none were declared)
    MISSING: A fixture file was absent
    UNDECODABLE: A fixture could not be decoded or failed integrity checks
    MISMATCH: A fixture decoded but the verifier rejected it
    """

    PASSED = "passed"
    MISSING = "missing"
    UNDECODABLE = "undecodable"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class VersionResult:
    """Result of checking a single version's fixture."""

    version: str
    fixture_name: str
    matched: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class CompatResult:
    """
    Complete result of a compatibility check.

    version_results holds one entry per attempted version. Versions after a
    failure were not attempted and are absent; their status is unknown.
    """

    type_name: str
    status: CompatStatus
    versions_declared: int
    version_results: List[VersionResult] = field(default_factory=list)
    failed_version: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def versions_checked(self) -> int:
        return len(self.version_results)

    def is_pass(self) -> bool:
        """Returns True if every declared version matched."""
        return self.status == CompatStatus.PASSED

    def summary(self) -> str:
        """Human-readable summary of the check."""
        if self.status == CompatStatus.PASSED:
            return f"PASSED: {self.type_name}, {self.versions_checked} version(s) verified"
        not_attempted = self.versions_declared - self.versions_checked
        return (
            f"{self.status.value.upper()}: {self.type_name} at version "
            f"{self.failed_version} ({not_attempted} version(s) not attempted): "
            f"{self.error_message}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for serialization."""
        result: Dict[str, Any] = {
            "type_name": self.type_name,
            "status": self.status.value,
            "versions_declared": self.versions_declared,
            "versions_checked": self.versions_checked,
            "version_results": [
                {
                    "version": r.version,
                    "fixture_name": r.fixture_name,
                    "matched": r.matched,
                    "error": r.error,
                }
                for r in self.version_results
            ],
        }
        if self.failed_version is not None:
            result["failed_version"] = self.failed_version
        if self.error_message:
            result["error_message"] = self.error_message
        return result


def _status_for(error: CompatError) -> CompatStatus:
    if isinstance(error, FixtureMissingError):
        return CompatStatus.MISSING
    if isinstance(error, VerificationMismatch):
        return CompatStatus.MISMATCH
    return CompatStatus.UNDECODABLE


# =============================================================================
# Harness
# =============================================================================


class CompatibilityHarness:
    """
    Drives a CompatibilitySubject through its declared versions.

    run() raises on the first failure, which is what a test wants.
    check() stops at the same point but returns a CompatResult instead.
    """

    def __init__(self, store: "FixtureStore"):
        self.store = store

    def run(self, subject: CompatibilitySubject) -> CompatResult:
        """
        Verify every declared version, raising on the first failure.

        Raises:
            FixtureMissingError: A version's fixture does not exist.
            FixtureDecodeError: A version's fixture cannot be decoded.
            VerificationMismatch: The verifier rejected a reconstruction.
            Exception: Whatever get_target_object raised.
        """
        target, versions = self._prepare(subject)
        results = list(self._iter_versions(subject, target, versions))
        logger.info(
            "Compatibility check passed for %s (%d version(s))",
            qualified_name(type(target)),
            len(results),
        )
        return CompatResult(
            type_name=qualified_name(type(target)),
            status=CompatStatus.PASSED,
            versions_declared=len(versions),
            version_results=results,
        )

    def check(self, subject: CompatibilitySubject) -> CompatResult:
        """
        Verify every declared version and report the outcome as a result.

        Halts at the first failure exactly like run(). Exceptions raised by
        get_target_object, or by the verifier other than AssertionError,
        still propagate.
        """
        target, versions = self._prepare(subject)
        type_name = qualified_name(type(target))
        results: List[VersionResult] = []
        failure: Optional[CompatError] = None
        try:
            for result in self._iter_versions(subject, target, versions):
                results.append(result)
        except (FixtureMissingError, FixtureDecodeError, VerificationMismatch) as exc:
            failure = exc
        if failure is None:
            return CompatResult(
                type_name=type_name,
                status=CompatStatus.PASSED,
                versions_declared=len(versions),
                version_results=results,
            )

        failed_version = versions[len(results)]
        results.append(
            VersionResult(
                version=failed_version,
                fixture_name=self.store.name_for(failed_version, type(target)),
                matched=False,
                error=str(failure),
            )
        )
        return CompatResult(
            type_name=type_name,
            status=_status_for(failure),
            versions_declared=len(versions),
            version_results=results,
            failed_version=failed_version,
            error_message=str(failure),
        )

    def _prepare(self, subject: CompatibilitySubject):
        target = subject.get_target_object()
        versions = list(subject.get_versions())
        if not versions:
            logger.warning(
                "No versions declared for %s; nothing to verify",
                qualified_name(type(target)),
            )
        else:
            logger.info(
                "Checking %s against %d version(s): %s",
                qualified_name(type(target)),
                len(versions),
                ", ".join(versions),
            )
        return target, versions

    def _iter_versions(
        self,
        subject: CompatibilitySubject,
        target: Any,
        versions: Sequence[str],
    ) -> Iterator[VersionResult]:
        cls = type(target)
        for version in versions:
            try:
                self._verify_version(subject, target, cls, version)
            except CompatError as exc:
                logger.error("Aborting at version %s: %s", version, exc)
                raise
            yield VersionResult(
                version=version,
                fixture_name=self.store.name_for(version, cls),
                matched=True,
            )

    def _verify_version(
        self,
        subject: CompatibilitySubject,
        target: Any,
        cls: type,
        version: str,
    ) -> None:
        reconstructed = self.store.load(version, cls)
        try:
            outcome = subject.verify_match(target, reconstructed)
        except VerificationMismatch:
            raise
        except AssertionError as exc:
            raise VerificationMismatch(
                str(exc) or "verify_match raised AssertionError",
                version=version,
                type_name=qualified_name(cls),
            ) from exc
        if outcome is False:
            raise VerificationMismatch(
                "verify_match returned False",
                version=version,
                type_name=qualified_name(cls),
            )
        logger.debug("Version %s of %s matched", version, cls.__name__)


# =============================================================================
# Convenience functions
# =============================================================================


def run_compatibility(
    subject: CompatibilitySubject, store: "FixtureStore"
) -> CompatResult:
    """Run a compatibility check, raising on the first failure."""
    return CompatibilityHarness(store).run(subject)


def verify_fixtures(
    target_factory: Callable[[], Any],
    versions: Union[Sequence[str], Callable[[], Sequence[str]]],
    verifier: Callable[[Any, Any], Optional[bool]],
    store: "FixtureStore",
) -> CompatResult:
    """
    Function form of run_compatibility.

    Example:
        verify_fixtures(
            make_trigger,
            ["2.3.0", "2.4.0"],
            field_verifier(ignore_fields={"next_fire_time"}),
            FixtureStore.beside(__file__),
        )
    """
    subject = FunctionSubject(
        target_factory=target_factory,
        versions=versions,
        verifier=verifier,
    )
    return run_compatibility(subject, store)
