"""Canonical byte encoding for fixture headers and JSON payloads.

Guarantees:
- canonical_json(v) is deterministic: same input always yields identical bytes
- Dict key order is irrelevant (sorted internally)
- Tuples are written as lists
- NaN and infinities are rejected rather than silently rewritten
- Output is compact UTF-8 JSON
"""
from __future__ import annotations

import hashlib
import json
from typing import Any


def canonical_json(value: Any) -> bytes:
    """Encode a JSON-like value to canonical UTF-8 bytes.

    Raises:
        ValueError: value contains NaN or infinity.
        TypeError: value contains something JSON cannot represent.
    """
    return json.dumps(
        value,
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    ).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    """Compute SHA-256 hex digest of bytes."""
    return hashlib.sha256(data).hexdigest()


def bytes_preview(data: bytes, max_len: int = 16) -> str:
    """Human-readable preview: sha256 hash + hex prefix."""
    prefix = data[:max_len].hex()
    return f"sha256:{sha256_hex(data)}:{prefix}"
