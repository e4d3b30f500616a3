#!/usr/bin/env python3
"""
Generate the fixture for a newly released version.

This is a deliberate, manual step: run it once when cutting a release, then
review and commit the new file. Never run it for a version that already has
a fixture unless you mean to throw that version's guarantee away.

Usage:
    python scripts/write_fixture.py tests.compat.test_trigger:TriggerSubject 2.5.0 \\
        --dir tests/compat/fixtures
"""

import argparse
import importlib
import logging
import sys

from serialcheck import FixtureStore, FixtureWriteError, write_fixture


def load_subject(spec: str):
    """Resolve "package.module:Name" and instantiate it if it is a class."""
    module_name, _, attr = spec.partition(":")
    if not attr:
        raise ValueError(f"Expected module:Name, got {spec!r}")
    obj = getattr(importlib.import_module(module_name), attr)
    return obj() if isinstance(obj, type) else obj


def main():
    parser = argparse.ArgumentParser(description="Write one fixture for a release")
    parser.add_argument("subject", help="Subject as module:Name")
    parser.add_argument("version", help="Version identifier being released")
    parser.add_argument("--dir", default=".", help="Fixture directory (default: .)")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Replace an existing fixture for this version",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    subject = load_subject(args.subject)
    store = FixtureStore(args.dir)

    try:
        path = write_fixture(subject, args.version, store, overwrite=args.force)
    except FixtureWriteError as exc:
        hint = "" if args.force else "; pass --force to replace an existing fixture"
        print(f"Error: {exc}{hint}", file=sys.stderr)
        sys.exit(1)
    print(f"Wrote {path}")


if __name__ == "__main__":
    main()
