"""Tests for the field-by-field verifier helpers."""

import unittest
from dataclasses import dataclass, field
from typing import List

from serialcheck import FieldDiff, assert_fields_match, deep_compare, field_verifier


@dataclass
class Schedule:
    hour: int
    minute: int = 0


@dataclass
class Trigger:
    name: str
    schedules: List[Schedule] = field(default_factory=list)
    next_fire_time: str = ""


class Job:
    def __init__(self, key, data):
        self.key = key
        self.data = data


class SlotPoint:
    __slots__ = ("x", "y")

    def __init__(self, x, y=None):
        self.x = x
        if y is not None:
            self.y = y


class TaggedPoint(SlotPoint):
    __slots__ = "tag"

    def __init__(self, x, y, tag):
        super().__init__(x, y)
        self.tag = tag


class Owner:
    """Holds jobs that point back at their owner."""

    def __init__(self, name):
        self.name = name
        self.jobs = []


class OwnedJob:
    def __init__(self, owner, key):
        self.owner = owner
        self.key = key
        owner.jobs.append(self)


def make_owner(key: str = "k1") -> Owner:
    owner = Owner("scheduler")
    OwnedJob(owner, key)
    return owner


class TestDeepCompare(unittest.TestCase):
    def test_equal_values(self):
        trigger = Trigger("nightly", [Schedule(2), Schedule(3, 30)])
        self.assertEqual(deep_compare(trigger, Trigger("nightly", [Schedule(2), Schedule(3, 30)])), [])

    def test_nested_field_path(self):
        expected = Trigger("nightly", [Schedule(2), Schedule(3, 30)])
        actual = Trigger("nightly", [Schedule(2), Schedule(4, 30)])

        diffs = deep_compare(expected, actual)

        self.assertEqual(diffs, [FieldDiff("schedules[1].hour", 3, 4)])

    def test_list_length(self):
        diffs = deep_compare(Trigger("t", [Schedule(1)]), Trigger("t", []))
        self.assertEqual(diffs[0].path, "schedules.(length)")

    def test_type_mismatch(self):
        diffs = deep_compare(Schedule(1), Trigger("t"))
        self.assertEqual(diffs, [FieldDiff("(root)", "type:Schedule", "type:Trigger")])

    def test_dict_missing_keys(self):
        diffs = deep_compare({"a": 1, "b": 2}, {"b": 2, "c": 3})
        self.assertEqual(
            diffs,
            [FieldDiff("a", 1, "<missing>"), FieldDiff("c", "<missing>", 3)],
        )

    def test_plain_objects(self):
        diffs = deep_compare(Job("k1", {"retries": 3}), Job("k1", {"retries": 4}))
        self.assertEqual(diffs, [FieldDiff("data.retries", 3, 4)])

    def test_sets_compared_whole(self):
        self.assertEqual(deep_compare({1, 2}, {2, 1}), [])
        self.assertEqual(len(deep_compare({1, 2}, {1, 3})), 1)

    def test_ignore_fields(self):
        expected = Trigger("t", next_fire_time="2024-01-01")
        actual = Trigger("t", next_fire_time="2031-06-30")
        self.assertEqual(deep_compare(expected, actual, ignore_fields={"next_fire_time"}), [])

    def test_slot_objects_compared_by_field(self):
        self.assertEqual(deep_compare(SlotPoint(1, 2), SlotPoint(1, 2)), [])
        self.assertEqual(
            deep_compare(SlotPoint(1, 2), SlotPoint(1, 5)),
            [FieldDiff("y", 2, 5)],
        )

    def test_slot_fields_collected_across_bases(self):
        diffs = deep_compare(TaggedPoint(1, 2, "a"), TaggedPoint(1, 2, "b"))
        self.assertEqual(diffs, [FieldDiff("tag", "a", "b")])

    def test_unset_slot(self):
        diffs = deep_compare(SlotPoint(1, 2), SlotPoint(1))

        self.assertEqual(len(diffs), 1)
        self.assertEqual(diffs[0].path, "y")
        self.assertEqual(deep_compare(SlotPoint(1), SlotPoint(1)), [])

    def test_cyclic_graphs(self):
        self.assertEqual(deep_compare(make_owner(), make_owner()), [])

    def test_cyclic_graphs_report_diffs(self):
        diffs = deep_compare(make_owner("k1"), make_owner("k2"))
        self.assertEqual(diffs, [FieldDiff("jobs[0].key", "k1", "k2")])

    def test_self_referencing_list(self):
        expected, actual = [1], [1]
        expected.append(expected)
        actual.append(actual)
        self.assertEqual(deep_compare(expected, actual), [])


class TestAssertFieldsMatch(unittest.TestCase):
    def test_passes_on_match(self):
        assert_fields_match(Schedule(1), Schedule(1))

    def test_message_lists_diffs(self):
        with self.assertRaises(AssertionError) as ctx:
            assert_fields_match(Schedule(1, 5), Schedule(2, 6))
        message = str(ctx.exception)
        self.assertIn("2 field(s) differ", message)
        self.assertIn("hour: expected 1, got 2", message)

    def test_long_diff_lists_are_truncated(self):
        expected = {str(i): i for i in range(8)}
        actual = {str(i): -i - 1 for i in range(8)}
        with self.assertRaises(AssertionError) as ctx:
            assert_fields_match(expected, actual)
        self.assertIn("(+3 more)", str(ctx.exception))


class TestFieldVerifier(unittest.TestCase):
    def test_verifier_ignores_fields(self):
        verify = field_verifier(ignore_fields=["next_fire_time"])
        self.assertIsNone(verify(Trigger("t", next_fire_time="a"), Trigger("t", next_fire_time="b")))

    def test_verifier_raises(self):
        verify = field_verifier()
        with self.assertRaises(AssertionError):
            verify(Trigger("t"), Trigger("u"))


if __name__ == "__main__":
    unittest.main()
