"""
Field-by-field comparison for verifying reconstructed objects.

Most verifiers boil down to "every field I care about has the same value".
deep_compare() walks two object graphs and reports each differing field;
field_verifier() turns that into a ready-made verify_match hook.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

_MAX_REPORTED_DIFFS = 5


def _truncate(value: Any, max_len: int = 60) -> str:
    """Truncate a value for display."""
    s = repr(value)
    if len(s) > max_len:
        return s[: max_len - 3] + "..."
    return s


@dataclass(frozen=True)
class FieldDiff:
    """A single field whose expected and actual values differ."""

    path: str  # Attribute path, e.g. "trigger.schedule[0].hour"
    expected: Any
    actual: Any

    def __str__(self) -> str:
        return f"{self.path}: expected {_truncate(self.expected)}, got {_truncate(self.actual)}"


class _Unset:
    """Marker for a declared slot that holds no value."""

    def __repr__(self) -> str:
        return "<unset>"


_UNSET = _Unset()


def _slot_names(cls: type) -> List[str]:
    names: List[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def _object_fields(value: Any) -> Optional[Dict[str, Any]]:
    """Field mapping of a dataclass or plain object, None for anything else."""
    if isinstance(value, type):
        return None
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if callable(value):
        return None
    if hasattr(value, "__dict__"):
        slots = _slot_names(type(value))
    elif type(value).__eq__ is object.__eq__:
        # Slots-only without value equality; == would compare identity
        slots = _slot_names(type(value))
        if not slots:
            return None
    else:
        return None
    fields = {name: getattr(value, name, _UNSET) for name in slots}
    if hasattr(value, "__dict__"):
        fields.update(vars(value))
    return fields


def _child(path: str, key: Any) -> str:
    return f"{path}.{key}" if path else str(key)


def deep_compare(
    expected: Any,
    actual: Any,
    path: str = "",
    ignore_fields: Optional[Set[str]] = None,
) -> List[FieldDiff]:
    """
    Deep semantic comparison of two values.

    Recurses through dicts, lists, tuples, dataclasses and objects with a
    __dict__ or __slots__. Sets are compared as wholes. Anything else is
    compared with ==. Cyclic graphs are supported: a pair of nodes already
    under comparison is treated as matching when reached again.

    Args:
        expected: The target (current) value
        actual: The reconstructed value
        path: Current path in the object graph (for messages)
        ignore_fields: Field or key names to skip at any depth

    Returns:
        List of FieldDiff objects, empty if the values match
    """
    return _compare(expected, actual, path, ignore_fields or set(), set())


def _compare_mappings(
    expected: Dict[Any, Any],
    actual: Dict[Any, Any],
    path: str,
    ignore_fields: Set[str],
    seen: Set[Tuple[int, int]],
) -> List[FieldDiff]:
    diffs: List[FieldDiff] = []
    for key in sorted(set(expected) | set(actual), key=str):
        if key in ignore_fields:
            continue
        child_path = _child(path, key)
        if key not in expected:
            diffs.append(FieldDiff(child_path, "<missing>", actual[key]))
        elif key not in actual:
            diffs.append(FieldDiff(child_path, expected[key], "<missing>"))
        else:
            diffs.extend(
                _compare(expected[key], actual[key], child_path, ignore_fields, seen)
            )
    return diffs


def _compare(
    expected: Any,
    actual: Any,
    path: str,
    ignore_fields: Set[str],
    seen: Set[Tuple[int, int]],
) -> List[FieldDiff]:
    diffs: List[FieldDiff] = []
    here = path or "(root)"

    if type(expected) is not type(actual):
        diffs.append(
            FieldDiff(
                path=here,
                expected=f"type:{type(expected).__name__}",
                actual=f"type:{type(actual).__name__}",
            )
        )
        return diffs

    expected_fields = None
    if not isinstance(expected, (dict, list, tuple)):
        expected_fields = _object_fields(expected)
        if expected_fields is None:
            if expected != actual:
                diffs.append(FieldDiff(path=here, expected=expected, actual=actual))
            return diffs

    # Both nodes belong to the graphs being walked, so their ids stay stable
    pair = (id(expected), id(actual))
    if pair in seen:
        return diffs
    seen.add(pair)

    if isinstance(expected, dict):
        return _compare_mappings(expected, actual, path, ignore_fields, seen)

    if isinstance(expected, (list, tuple)):
        if len(expected) != len(actual):
            diffs.append(
                FieldDiff(_child(path, "(length)"), len(expected), len(actual))
            )
        for i, (exp_item, act_item) in enumerate(zip(expected, actual)):
            diffs.extend(
                _compare(exp_item, act_item, f"{path}[{i}]", ignore_fields, seen)
            )
        return diffs

    actual_fields = _object_fields(actual) or {}
    return _compare_mappings(expected_fields, actual_fields, path, ignore_fields, seen)


def assert_fields_match(
    target: Any,
    reconstructed: Any,
    ignore_fields: Optional[Iterable[str]] = None,
) -> None:
    """
    Raise AssertionError listing the fields that differ.

    Usable directly as a verify_match implementation.
    """
    diffs = deep_compare(target, reconstructed, ignore_fields=set(ignore_fields or ()))
    if not diffs:
        return
    shown = "; ".join(str(d) for d in diffs[:_MAX_REPORTED_DIFFS])
    if len(diffs) > _MAX_REPORTED_DIFFS:
        shown += f" (+{len(diffs) - _MAX_REPORTED_DIFFS} more)"
    raise AssertionError(f"{len(diffs)} field(s) differ: {shown}")


def field_verifier(
    ignore_fields: Optional[Iterable[str]] = None,
) -> Callable[[Any, Any], None]:
    """Build a verify_match hook that compares all fields except ignore_fields."""
    ignored = frozenset(ignore_fields or ())

    def verify_match(target: Any, reconstructed: Any) -> None:
        assert_fields_match(target, reconstructed, ignored)

    return verify_match
