"""
Tests for offline fixture generation.

write_fixture() only ever runs against temporary directories here.
"""

import os
import shutil
import tempfile
import unittest
from dataclasses import dataclass

from serialcheck import (
    CompatibilityHarness,
    FixtureStore,
    FixtureWriteError,
    field_verifier,
    write_fixture,
)


@dataclass
class Widget:
    name: str
    size: int


class WidgetSubject:
    def __init__(self, versions, size=3):
        self.versions = versions
        self.size = size
        self.targets_built = 0

    def get_target_object(self):
        self.targets_built += 1
        return Widget(name="sprocket", size=self.size)

    def get_versions(self):
        return self.versions

    def verify_match(self, target, reconstructed):
        field_verifier()(target, reconstructed)


class TestWriteFixture(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.store = FixtureStore(self.tmpdir)

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_writes_exactly_one_fixture(self):
        path = write_fixture(WidgetSubject(["1.0", "2.0"]), "2.0", self.store)

        self.assertEqual(os.listdir(self.tmpdir), ["Widget-2.0.ser"])
        self.assertEqual(path.name, "Widget-2.0.ser")

    def test_written_fixtures_pass_the_harness(self):
        subject = WidgetSubject(["1.0", "2.0"])
        write_fixture(subject, "1.0", self.store)
        write_fixture(subject, "2.0", self.store)

        result = CompatibilityHarness(self.store).run(subject)

        self.assertTrue(result.is_pass())
        self.assertEqual(result.versions_checked, 2)

    def test_undeclared_version_warns(self):
        with self.assertLogs("serialcheck.storage.writer", level="WARNING"):
            write_fixture(WidgetSubject(["1.0"]), "2.0", self.store)

        self.assertTrue(self.store.exists("2.0", Widget))

    def test_regeneration_replaces_fixture(self):
        write_fixture(WidgetSubject(["1.0"], size=3), "1.0", self.store)
        write_fixture(WidgetSubject(["1.0"], size=4), "1.0", self.store)

        self.assertEqual(self.store.load("1.0", Widget).size, 4)
        self.assertEqual(len(os.listdir(self.tmpdir)), 1)

    def test_target_built_once(self):
        subject = WidgetSubject(["1.0"])
        write_fixture(subject, "1.0", self.store)

        self.assertEqual(subject.targets_built, 1)

    def test_existing_fixture_kept_without_overwrite(self):
        write_fixture(WidgetSubject(["1.0"], size=3), "1.0", self.store)
        subject = WidgetSubject(["1.0"], size=4)

        with self.assertRaises(FixtureWriteError) as ctx:
            write_fixture(subject, "1.0", self.store, overwrite=False)

        self.assertEqual(ctx.exception.version, "1.0")
        self.assertEqual(subject.targets_built, 1)
        self.assertEqual(self.store.load("1.0", Widget).size, 3)

    def test_new_fixture_written_without_overwrite(self):
        path = write_fixture(WidgetSubject(["1.0"]), "1.0", self.store, overwrite=False)
        self.assertTrue(path.is_file())


if __name__ == "__main__":
    unittest.main()
