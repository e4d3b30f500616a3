"""
Payload codecs for fixtures.

A codec turns one object into bytes and back. The fixture store frames the
codec's bytes in an envelope that records the codec name, so a fixture can
never be decoded with a codec other than the one that wrote it.
"""

from __future__ import annotations

import json
import pickle
from typing import Any, Callable, Protocol, runtime_checkable

from .canon import canonical_json


@runtime_checkable
class Codec(Protocol):
    """Encoder/decoder pair for fixture payloads."""

    name: str

    def encode(self, obj: Any) -> bytes: ...

    def decode(self, data: bytes) -> Any: ...


class PickleCodec:
    """
    Python's native object-graph serializer.

    The pickle protocol is pinned so that fixtures written today do not
    change when a newer interpreter raises pickle.DEFAULT_PROTOCOL.
    """

    name = "pickle"

    def __init__(self, protocol: int = 4):
        if not 0 <= protocol <= pickle.HIGHEST_PROTOCOL:
            raise ValueError(
                f"Unsupported pickle protocol {protocol} "
                f"(highest is {pickle.HIGHEST_PROTOCOL})"
            )
        self.protocol = protocol

    def encode(self, obj: Any) -> bytes:
        return pickle.dumps(obj, protocol=self.protocol)

    def decode(self, data: bytes) -> Any:
        return pickle.loads(data)

    def __repr__(self) -> str:
        return f"PickleCodec(protocol={self.protocol})"


class JsonCodec:
    """
    Explicit state codec backed by canonical JSON.

    Args:
        to_state: Converts an object to a JSON-like value.
        from_state: Rebuilds an object from that value. This is where a type
            maps state written by older versions onto its current shape.

    Example:
        codec = JsonCodec(
            to_state=lambda t: {"name": t.name, "interval": t.interval},
            from_state=lambda s: Trigger(s["name"], s.get("interval", 60)),
        )
    """

    name = "json"

    def __init__(
        self,
        to_state: Callable[[Any], Any],
        from_state: Callable[[Any], Any],
    ):
        self.to_state = to_state
        self.from_state = from_state

    def encode(self, obj: Any) -> bytes:
        return canonical_json(self.to_state(obj))

    def decode(self, data: bytes) -> Any:
        return self.from_state(json.loads(data.decode("utf-8")))
