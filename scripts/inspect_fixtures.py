#!/usr/bin/env python3
"""
Helper script to list the fixtures in a directory with their headers.

Usage:
    python scripts/inspect_fixtures.py tests/compat/fixtures
    python scripts/inspect_fixtures.py tests/compat/fixtures --json
"""

import argparse
import json
import sys
from pathlib import Path

from serialcheck.core.canon import sha256_hex
from serialcheck.core.envelope import MalformedEnvelopeError, unframe


def describe(path: Path) -> dict:
    """Header fields of one fixture file, plus a digest check."""
    data = path.read_bytes()
    info = {"file": path.name, "size": len(data)}
    try:
        header, payload = unframe(data)
    except MalformedEnvelopeError as exc:
        info["error"] = str(exc)
        return info

    if header is None:
        info["framed"] = False
        info["sha256"] = sha256_hex(payload)
        return info

    info["framed"] = True
    info.update(header.to_dict())
    info["digest_ok"] = header.matches_payload(payload)
    return info


def format_fixture(info: dict) -> str:
    """Format one fixture description for display."""
    if "error" in info:
        return f"{info['file']}\n  ERROR: {info['error']}"
    if not info["framed"]:
        return (
            f"{info['file']}\n"
            f"  Unframed payload ({info['size']} bytes)\n"
            f"  sha256: {info['sha256']}"
        )
    return "\n".join(
        [
            info["file"],
            f"  Type: {info['type_name']}",
            f"  Version: {info['version']}",
            f"  Codec: {info['codec']} ({info['format']})",
            f"  Payload: {info['length']} bytes, digest {'ok' if info['digest_ok'] else 'MISMATCH'}",
            f"  Written by: serialcheck {info['serialcheck_version']}",
        ]
    )


def main():
    parser = argparse.ArgumentParser(
        description="Inspect fixture files in human-friendly format"
    )
    parser.add_argument("directory", help="Fixture directory")
    parser.add_argument(
        "--extension",
        default="ser",
        help="Fixture file extension (default: ser)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON")
    args = parser.parse_args()

    directory = Path(args.directory)
    if not directory.is_dir():
        print(f"Error: {directory} is not a directory", file=sys.stderr)
        sys.exit(1)

    infos = [describe(p) for p in sorted(directory.glob(f"*.{args.extension}"))]

    if args.json:
        print(json.dumps(infos, indent=2, sort_keys=True))
        return

    if not infos:
        print("No fixtures found")
        return

    print(f"Found {len(infos)} fixture(s):\n")
    for info in infos:
        print(format_fixture(info))
        print()

    if any(not i.get("digest_ok", True) or "error" in i for i in infos):
        sys.exit(1)


if __name__ == "__main__":
    main()
