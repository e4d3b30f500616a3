from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Union

from ..core.canon import bytes_preview
from ..core.codec import Codec, PickleCodec
from ..core.envelope import FixtureHeader, MalformedEnvelopeError, frame, unframe
from ..core.errors import (
    FixtureDecodeError,
    FixtureIntegrityError,
    FixtureMissingError,
    FixtureWriteError,
)
from ..core.naming import TypeOrName, fixture_name, qualified_name, simple_name
from ..core.policy import HarnessPolicy
from ..version import DEFAULT_FIXTURE_EXTENSION, SUPPORTED_FIXTURE_FORMATS

logger = logging.getLogger(__name__)


@dataclass
class FixtureStore:
    """
    Directory of fixture files, one per (type, version).

    Reads are what automated tests do. save() is for maintainers generating
    a fixture when a version is released; it replaces any existing file.
    """

    directory: Union[str, Path] = "."
    codec: Codec = field(default_factory=PickleCodec)
    extension: str = DEFAULT_FIXTURE_EXTENSION
    policy: HarnessPolicy = field(default_factory=HarnessPolicy.default)

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)

    @classmethod
    def beside(cls, module_file: str, subdir: str = "fixtures", **kwargs: Any) -> "FixtureStore":
        """Store rooted next to a module, e.g. ``FixtureStore.beside(__file__)``."""
        return cls(directory=Path(module_file).resolve().parent / subdir, **kwargs)

    def name_for(self, version: str, type_or_name: TypeOrName) -> str:
        return fixture_name(version, type_or_name, self.extension)

    def path_for(self, version: str, type_or_name: TypeOrName) -> Path:
        return self.directory / self.name_for(version, type_or_name)

    def exists(self, version: str, type_or_name: TypeOrName) -> bool:
        return self.path_for(version, type_or_name).is_file()

    def available_versions(self, type_or_name: TypeOrName) -> List[str]:
        """Versions with a fixture on disk for this type, sorted by file name."""
        prefix = f"{simple_name(type_or_name)}-"
        suffix = f".{self.extension}"
        if not self.directory.is_dir():
            return []
        versions = []
        for path in sorted(self.directory.iterdir()):
            name = path.name
            if path.is_file() and name.startswith(prefix) and name.endswith(suffix):
                version = name[len(prefix):-len(suffix)]
                if version:
                    versions.append(version)
        return versions

    # -------------------------------------------------------------------------
    # Read path
    # -------------------------------------------------------------------------

    def _read_bytes(self, version: str, type_or_name: TypeOrName) -> bytes:
        name = self.name_for(version, type_or_name)
        path = self.directory / name
        try:
            with open(path, "rb") as fh:
                return fh.read()
        except FileNotFoundError as exc:
            raise FixtureMissingError(
                f"No fixture for {simple_name(type_or_name)} at version {version}",
                version=version,
                fixture_name=name,
                path=str(path),
            ) from exc
        except OSError as exc:
            raise FixtureDecodeError(
                f"Could not read fixture {path}: {exc}",
                version=version,
                fixture_name=name,
                reason="unreadable",
            ) from exc

    def read_header(
        self, version: str, type_or_name: TypeOrName
    ) -> Optional[FixtureHeader]:
        """Header of a fixture, or None if the fixture is unframed."""
        data = self._read_bytes(version, type_or_name)
        try:
            header, _ = unframe(data)
        except MalformedEnvelopeError as exc:
            raise FixtureDecodeError(
                str(exc),
                version=version,
                fixture_name=self.name_for(version, type_or_name),
                reason="malformed_header",
            ) from exc
        return header

    def load(self, version: str, type_or_name: TypeOrName) -> Any:
        """
        Load the fixture for (type, version) and decode it.

        Raises:
            FixtureMissingError: No such fixture file.
            FixtureIntegrityError: Header disagrees with payload or request.
            FixtureDecodeError: Bytes cannot be decoded into the type.
        """
        name = self.name_for(version, type_or_name)
        data = self._read_bytes(version, type_or_name)
        logger.debug("Loaded %s (%d bytes)", name, len(data))

        try:
            header, payload = unframe(data)
        except MalformedEnvelopeError as exc:
            raise FixtureDecodeError(
                str(exc), version=version, fixture_name=name, reason="malformed_header"
            ) from exc

        if header is None:
            if not self.policy.allow_legacy_payload:
                raise FixtureDecodeError(
                    "Fixture has no envelope and legacy payloads are not allowed",
                    version=version,
                    fixture_name=name,
                    reason="unframed",
                )
            logger.warning(
                "Fixture %s has no envelope; decoding as bare %s payload",
                name,
                self.codec.name,
            )
        else:
            self._check_header(header, payload, version, type_or_name, name)

        try:
            obj = self.codec.decode(payload)
        except Exception as exc:
            raise FixtureDecodeError(
                f"{self.codec.name} codec could not decode {bytes_preview(payload)}: {exc}",
                version=version,
                fixture_name=name,
            ) from exc

        if (
            self.policy.verify_type
            and isinstance(type_or_name, type)
            and not isinstance(obj, type_or_name)
        ):
            raise FixtureDecodeError(
                f"Decoded {type(obj).__name__}, expected {type_or_name.__name__}",
                version=version,
                fixture_name=name,
                reason="type_mismatch",
            )
        return obj

    def _check_header(
        self,
        header: FixtureHeader,
        payload: bytes,
        version: str,
        type_or_name: TypeOrName,
        name: str,
    ) -> None:
        if header.format not in SUPPORTED_FIXTURE_FORMATS:
            raise FixtureDecodeError(
                f"Unsupported fixture format {header.format!r}",
                version=version,
                fixture_name=name,
                reason="unsupported_format",
            )
        if header.codec != self.codec.name:
            raise FixtureDecodeError(
                f"Fixture was written by codec {header.codec!r}, "
                f"store uses {self.codec.name!r}",
                version=version,
                fixture_name=name,
                reason="codec_mismatch",
            )
        if self.policy.verify_digest and not header.matches_payload(payload):
            raise FixtureIntegrityError(
                f"Payload does not match header digest "
                f"(expected {header.length} bytes sha256:{header.sha256}, "
                f"got {bytes_preview(payload)})",
                version=version,
                fixture_name=name,
                reason="digest_mismatch",
            )
        if self.policy.verify_version_stamp and header.version != version:
            raise FixtureIntegrityError(
                f"Fixture is stamped with version {header.version!r}",
                version=version,
                fixture_name=name,
                reason="version_mismatch",
            )
        if header.simple_name != simple_name(type_or_name):
            raise FixtureIntegrityError(
                f"Fixture was written for type {header.type_name!r}",
                version=version,
                fixture_name=name,
                reason="type_name_mismatch",
            )

    # -------------------------------------------------------------------------
    # Write path (offline only)
    # -------------------------------------------------------------------------

    def save(self, version: str, obj: Any) -> Path:
        """
        Write obj as the fixture for (type(obj), version).

        Unconditionally replaces an existing fixture of the same name. Never
        call this from an automated test run against a real fixture directory.

        Returns:
            Path of the written fixture.

        Raises:
            FixtureWriteError: Encoding or writing failed.
        """
        cls = type(obj)
        path = self.path_for(version, cls)

        try:
            payload = self.codec.encode(obj)
        except Exception as exc:
            raise FixtureWriteError(
                f"{self.codec.name} codec could not encode {cls.__name__}: {exc}",
                version=version,
                path=str(path),
            ) from exc

        header = FixtureHeader.for_payload(
            payload,
            codec=self.codec.name,
            type_name=qualified_name(cls),
            simple_name=simple_name(cls),
            version=version,
        )

        if path.exists():
            logger.warning("Overwriting existing fixture %s", path)

        # Renamed into place; a failed write leaves any existing fixture intact
        tmp_path = None
        try:
            os.makedirs(self.directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=self.directory, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as fh:
                tmp_path = fh.name
                fh.write(frame(header, payload))
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise FixtureWriteError(
                f"Could not write fixture: {exc}",
                version=version,
                path=str(path),
            ) from exc

        logger.info("Wrote fixture %s (%d payload bytes)", path, header.length)
        return path
