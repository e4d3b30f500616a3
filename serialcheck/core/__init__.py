"""Core types and logic for Serialcheck."""

from .canon import bytes_preview, canonical_json, sha256_hex
from .codec import Codec, JsonCodec, PickleCodec
from .compare import FieldDiff, assert_fields_match, deep_compare, field_verifier
from .envelope import MAGIC, FixtureHeader, MalformedEnvelopeError, frame, unframe
from .errors import (
    CompatError,
    FixtureDecodeError,
    FixtureIntegrityError,
    FixtureMissingError,
    FixtureWriteError,
    VerificationMismatch,
)
from .harness import (
    CompatibilityHarness,
    CompatResult,
    CompatStatus,
    VersionResult,
    run_compatibility,
    verify_fixtures,
)
from .naming import fixture_name, qualified_name, simple_name
from .policy import HarnessPolicy
from .subject import CompatibilitySubject, FunctionSubject

__all__ = [
    # Naming
    "fixture_name",
    "simple_name",
    "qualified_name",
    # Canonicalization
    "canonical_json",
    "sha256_hex",
    "bytes_preview",
    # Codecs
    "Codec",
    "PickleCodec",
    "JsonCodec",
    # Envelope
    "MAGIC",
    "FixtureHeader",
    "MalformedEnvelopeError",
    "frame",
    "unframe",
    # Exceptions
    "CompatError",
    "FixtureMissingError",
    "FixtureDecodeError",
    "FixtureIntegrityError",
    "VerificationMismatch",
    "FixtureWriteError",
    # Configuration
    "HarnessPolicy",
    # Hooks
    "CompatibilitySubject",
    "FunctionSubject",
    # Verifier helpers
    "FieldDiff",
    "deep_compare",
    "assert_fields_match",
    "field_verifier",
    # Harness
    "CompatibilityHarness",
    "CompatResult",
    "CompatStatus",
    "VersionResult",
    "run_compatibility",
    "verify_fixtures",
]
