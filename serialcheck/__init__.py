from .core import (
    # Codecs
    Codec,
    # Harness
    CompatibilityHarness,
    # Hooks
    CompatibilitySubject,
    # Exceptions
    CompatError,
    CompatResult,
    CompatStatus,
    # Verifier helpers
    FieldDiff,
    FixtureDecodeError,
    # Envelope
    FixtureHeader,
    FixtureIntegrityError,
    FixtureMissingError,
    FixtureWriteError,
    FunctionSubject,
    # Configuration
    HarnessPolicy,
    JsonCodec,
    PickleCodec,
    VerificationMismatch,
    VersionResult,
    assert_fields_match,
    deep_compare,
    field_verifier,
    # Naming
    fixture_name,
    run_compatibility,
    simple_name,
    verify_fixtures,
)
from .storage import FixtureStore, write_fixture
from .version import (
    DEFAULT_FIXTURE_EXTENSION,
    FIXTURE_FORMAT,
    SERIALCHECK_VERSION,
    SUPPORTED_FIXTURE_FORMATS,
)

__all__ = [
    # Version
    "SERIALCHECK_VERSION",
    "FIXTURE_FORMAT",
    "SUPPORTED_FIXTURE_FORMATS",
    "DEFAULT_FIXTURE_EXTENSION",
    # Naming
    "fixture_name",
    "simple_name",
    # Codecs
    "Codec",
    "PickleCodec",
    "JsonCodec",
    # Envelope
    "FixtureHeader",
    # Storage
    "FixtureStore",
    "write_fixture",
    # Configuration
    "HarnessPolicy",
    # Exceptions
    "CompatError",
    "FixtureMissingError",
    "FixtureDecodeError",
    "FixtureIntegrityError",
    "VerificationMismatch",
    "FixtureWriteError",
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
