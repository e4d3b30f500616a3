"""
Self-describing fixture envelope.

Layout of a framed fixture file:

    %serialcheck-fixture\\n
    {"codec":"pickle","format":"fixture_v1",...}\\n
    <codec payload bytes>

The header line is canonical JSON, so writing the same object twice yields
identical files. Files that do not start with MAGIC are treated as a bare,
unframed payload.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .canon import canonical_json, sha256_hex
from ..version import FIXTURE_FORMAT, SERIALCHECK_VERSION

MAGIC = b"%serialcheck-fixture\n"

_HEADER_FIELDS = (
    "format",
    "codec",
    "type_name",
    "simple_name",
    "version",
    "sha256",
    "length",
    "serialcheck_version",
)


class MalformedEnvelopeError(ValueError):
    """Raised when a file starts with MAGIC but its header is unreadable."""

    pass


@dataclass(frozen=True)
class FixtureHeader:
    """
    Metadata written in front of every fixture payload.

    Attributes:
        format: Envelope format version (see serialcheck.version)
        codec: Name of the codec that produced the payload
        type_name: Module-qualified name of the serialized type
        simple_name: Type name used in the fixture's file name
        version: Version identifier the fixture was generated for
        sha256: Hex digest of the payload
        length: Payload length in bytes
        serialcheck_version: Library version that wrote the fixture
    """

    format: str
    codec: str
    type_name: str
    simple_name: str
    version: str
    sha256: str
    length: int
    serialcheck_version: str = SERIALCHECK_VERSION

    @classmethod
    def for_payload(
        cls,
        payload: bytes,
        codec: str,
        type_name: str,
        simple_name: str,
        version: str,
    ) -> "FixtureHeader":
        """Build the header describing a freshly encoded payload."""
        return cls(
            format=FIXTURE_FORMAT,
            codec=codec,
            type_name=type_name,
            simple_name=simple_name,
            version=version,
            sha256=sha256_hex(payload),
            length=len(payload),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for serialization."""
        return {name: getattr(self, name) for name in _HEADER_FIELDS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FixtureHeader":
        missing = [name for name in _HEADER_FIELDS if name not in data]
        if missing:
            raise MalformedEnvelopeError(
                f"Fixture header is missing fields: {', '.join(missing)}"
            )
        if not isinstance(data["length"], int):
            raise MalformedEnvelopeError("Fixture header length must be an integer")
        return cls(**{name: data[name] for name in _HEADER_FIELDS})

    def matches_payload(self, payload: bytes) -> bool:
        return self.length == len(payload) and self.sha256 == sha256_hex(payload)


def frame(header: FixtureHeader, payload: bytes) -> bytes:
    """Prefix payload with MAGIC and the canonical header line."""
    return MAGIC + canonical_json(header.to_dict()) + b"\n" + payload


def unframe(data: bytes) -> Tuple[Optional[FixtureHeader], bytes]:
    """
    Split fixture bytes into (header, payload).

    Returns (None, data) for unframed bytes.

    Raises:
        MalformedEnvelopeError: MAGIC is present but the header is not.
    """
    if not data.startswith(MAGIC):
        return None, data

    rest = data[len(MAGIC):]
    end = rest.find(b"\n")
    if end < 0:
        raise MalformedEnvelopeError("Fixture header line is not terminated")

    try:
        raw = json.loads(rest[:end].decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedEnvelopeError(f"Fixture header is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise MalformedEnvelopeError("Fixture header must be a JSON object")

    return FixtureHeader.from_dict(raw), rest[end + 1:]
