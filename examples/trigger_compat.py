#!/usr/bin/env python3
"""
Serialcheck example: guarding a persisted Trigger type

Demonstrates:
1. Writing fixtures for two releases (normally done once, by hand)
2. Verifying every declared release against the current Trigger
3. What a missing release fixture looks like with check()

No external dependencies.
"""

import os
import sys
import tempfile
from dataclasses import dataclass, field
from typing import List

# Add parent directory to path for local development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from serialcheck import CompatibilityHarness, FixtureStore, field_verifier, write_fixture


@dataclass
class Trigger:
    name: str
    cron: str
    misfire_policy: str = "fire_now"
    calendars: List[str] = field(default_factory=list)


class TriggerSubject:
    """The three hooks: target, versions, verifier."""

    def __init__(self, versions):
        self.versions = versions
        self._verify = field_verifier()

    def get_target_object(self) -> Trigger:
        return Trigger(name="nightly-report", cron="0 2 * * *", calendars=["holidays"])

    def get_versions(self):
        return self.versions

    def verify_match(self, target, reconstructed):
        self._verify(target, reconstructed)


def main() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        store = FixtureStore(temp_dir)

        print("=" * 60)
        print("Writing fixtures for releases 2.3.0 and 2.4.0")
        print("=" * 60)
        for version in ("2.3.0", "2.4.0"):
            path = write_fixture(TriggerSubject(["2.3.0", "2.4.0"]), version, store)
            print(f"  wrote {os.path.basename(path)}")

        harness = CompatibilityHarness(store)

        print("\nVerifying declared releases")
        result = harness.run(TriggerSubject(["2.3.0", "2.4.0"]))
        print(f"  {result.summary()}")

        print("\nDeclaring 2.5.0 without generating its fixture")
        result = harness.check(TriggerSubject(["2.3.0", "2.4.0", "2.5.0"]))
        print(f"  {result.summary()}")


if __name__ == "__main__":
    main()
