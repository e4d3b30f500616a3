from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HarnessPolicy:
    """
    Configuration for how strictly fixtures are checked when loaded.

    Attributes:
        verify_digest: If True, the payload must match the header's sha256
            and length.
        verify_version_stamp: If True, the header's version must equal the
            version the fixture was requested for.
        verify_type: If True, the decoded object must be an instance of the
            requested class.
        allow_legacy_payload: If True, files without an envelope are decoded
            as a bare codec payload.
    """

    verify_digest: bool = True
    verify_version_stamp: bool = True
    verify_type: bool = True
    allow_legacy_payload: bool = True

    @classmethod
    def default(cls) -> "HarnessPolicy":
        """Create default policy - all checks on, unframed fixtures accepted."""
        return cls()

    @classmethod
    def strict(cls) -> "HarnessPolicy":
        """Create strict policy - every fixture must carry an envelope."""
        return cls(
            verify_digest=True,
            verify_version_stamp=True,
            verify_type=True,
            allow_legacy_payload=False,
        )

    @classmethod
    def lenient(cls) -> "HarnessPolicy":
        """Create lenient policy - decode whatever is there."""
        return cls(
            verify_digest=False,
            verify_version_stamp=False,
            verify_type=False,
            allow_legacy_payload=True,
        )
