"""
Tests for fixture file naming.

Read and write paths share fixture_name(), so these tests pin its exact
output.
"""

import unittest

from serialcheck import fixture_name, simple_name
from serialcheck.core.naming import qualified_name


class Widget:
    pass


class TestSimpleName(unittest.TestCase):
    def test_strips_namespace(self):
        self.assertEqual(simple_name("org.example.Foo"), "Foo")

    def test_name_without_namespace_is_unchanged(self):
        self.assertEqual(simple_name("Foo"), "Foo")

    def test_class_uses_its_name(self):
        self.assertEqual(simple_name(Widget), "Widget")

    def test_rejects_other_values(self):
        with self.assertRaises(TypeError):
            simple_name(42)


class TestFixtureName(unittest.TestCase):
    def test_namespaced_name(self):
        self.assertEqual(fixture_name("1.0", "org.example.Foo"), "Foo-1.0.ser")

    def test_name_without_namespace(self):
        self.assertEqual(fixture_name("1.0", "Foo"), "Foo-1.0.ser")

    def test_class(self):
        self.assertEqual(fixture_name("2.4.1", Widget), "Widget-2.4.1.ser")

    def test_class_and_dotted_name_agree(self):
        self.assertEqual(
            fixture_name("1.0", Widget),
            fixture_name("1.0", qualified_name(Widget)),
        )

    def test_version_is_opaque(self):
        self.assertEqual(fixture_name("release-7_rc1", "Foo"), "Foo-release-7_rc1.ser")

    def test_custom_extension(self):
        self.assertEqual(fixture_name("1.0", "Foo", extension="bin"), "Foo-1.0.bin")

    def test_empty_version_rejected(self):
        with self.assertRaises(ValueError):
            fixture_name("", "Foo")

    def test_path_separator_rejected(self):
        for version in ("../1.0", "1.0/x", "1.0\\x"):
            with self.subTest(version=version):
                with self.assertRaises(ValueError):
                    fixture_name(version, "Foo")


class TestQualifiedName(unittest.TestCase):
    def test_class(self):
        self.assertEqual(qualified_name(Widget), f"{Widget.__module__}.Widget")

    def test_string_passes_through(self):
        self.assertEqual(qualified_name("org.x.Widget"), "org.x.Widget")


if __name__ == "__main__":
    unittest.main()
