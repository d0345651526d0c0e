"""Tests for structural equality (core/equality.py).

Coverage:
* The concrete object and array scenarios.
* Reflexivity and symmetry over a mixed pool of values.
* Primitive typing rules (bool vs number, NaN).
* Views and homogeneous containers compare by content.
* Cyclic composites terminate.
* ``find_difference`` reports the first differing key path.
"""

from __future__ import annotations

import copy
import itertools
import sys
from decimal import Decimal
from typing import Any

import pytest

from constview.core.equality import find_difference, structural_equals
from constview.core.homogeneous import make_homogeneous_array
from constview.core.immutable import make_immutable

_POOL: list[Any] = [
    None,
    0,
    1,
    1.0,
    True,
    False,
    "",
    "1",
    float("nan"),
    [],
    {},
    [1, 2, 3],
    [3, 2, 1],
    [1, 2],
    (1, 2),
    {"name": "John", "age": 30},
    {"age": 30, "name": "John"},
    {"name": "Jane", "age": 30},
    {"name": "John", "age": [30]},
    {0: 1},
    [1],
]


# ---------------------------------------------------------------------------
# Concrete scenarios
# ---------------------------------------------------------------------------

class TestObjects:
    def test_identical_objects(self) -> None:
        assert structural_equals({"name": "John", "age": 30}, {"name": "John", "age": 30})

    def test_different_values(self) -> None:
        assert not structural_equals({"name": "John", "age": 30}, {"name": "Jane", "age": 30})
        assert not structural_equals({"name": "John", "age": 30}, {"name": "John", "age": 31})

    def test_key_order_is_irrelevant(self) -> None:
        assert structural_equals({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_different_key_sets(self) -> None:
        assert not structural_equals({"a": 1, "b": 2}, {"a": 1, "c": 2})

    def test_different_key_counts(self) -> None:
        assert not structural_equals({"a": 1}, {"a": 1, "b": 2})

    def test_nested(self) -> None:
        left = {"user": {"tags": ["a", "b"], "meta": {"active": True}}}
        right = {"user": {"tags": ["a", "b"], "meta": {"active": True}}}
        assert structural_equals(left, right)
        right["user"]["meta"]["active"] = False
        assert not structural_equals(left, right)


class TestArrays:
    def test_same_order(self) -> None:
        assert structural_equals([1, 2, 3], [1, 2, 3])

    def test_order_matters(self) -> None:
        assert not structural_equals([1, 2, 3], [3, 2, 1])

    def test_length_mismatch(self) -> None:
        assert not structural_equals([1, 2, 3], [1, 2])

    def test_list_and_tuple_are_both_arrays(self) -> None:
        assert structural_equals([1, [2, 3]], (1, (2, 3)))

    def test_keyed_rule_is_uniform(self) -> None:
        # Index keys of an array match integer keys of a mapping.
        assert structural_equals({0: "a", 1: "b"}, ["a", "b"])
        assert not structural_equals({"0": "a"}, ["a"])


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

class TestPrimitives:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (1, 1, True),
            (1, 1.0, True),
            ("a", "a", True),
            (None, None, True),
            (1, True, False),
            (0, False, False),
            (1, "1", False),
            (None, 0, False),
            (None, {}, False),
            ([], None, False),
            ("ab", ["a", "b"], False),
        ],
    )
    def test_pairs(self, a: Any, b: Any, expected: bool) -> None:
        assert structural_equals(a, b) is expected

    def test_nan_equals_itself_by_identity_only(self) -> None:
        nan = float("nan")
        assert structural_equals(nan, nan)
        assert not structural_equals(nan, float("nan"))


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

class TestProperties:
    @pytest.mark.parametrize("value", _POOL)
    def test_reflexive(self, value: Any) -> None:
        assert structural_equals(value, value)

    def test_symmetric(self) -> None:
        for a, b in itertools.product(_POOL, repeat=2):
            assert structural_equals(a, b) == structural_equals(b, a), (a, b)

    @pytest.mark.parametrize("value", _POOL)
    def test_deep_copies_are_equal(self, value: Any) -> None:
        assert structural_equals(value, copy.deepcopy(value))


# ---------------------------------------------------------------------------
# Wrapped values
# ---------------------------------------------------------------------------

class TestWrappedValues:
    def test_view_against_plain_value(self) -> None:
        data = {"name": "John", "tags": ["a"]}
        assert structural_equals(make_immutable(data), {"name": "John", "tags": ["a"]})

    def test_view_against_itself(self) -> None:
        view = make_immutable({"a": [1, {"b": 2}]})
        assert structural_equals(view, view)
        assert structural_equals(view["a"], view["a"])

    def test_homogeneous_array(self) -> None:
        arr = make_homogeneous_array("number")
        arr.extend([1, 2, 3])
        assert structural_equals(arr, [1, 2, 3])
        assert not structural_equals(arr, [3, 2, 1])


# ---------------------------------------------------------------------------
# Cycles
# ---------------------------------------------------------------------------

class TestCycles:
    def test_self_reference_is_equal_to_itself(self) -> None:
        node: dict[str, Any] = {"name": "loop"}
        node["self"] = node
        assert structural_equals(node, node)

    def test_two_isomorphic_cycles(self) -> None:
        left: list[Any] = [1]
        left.append(left)
        right: list[Any] = [1]
        right.append(right)
        assert structural_equals(left, right)

    def test_cycles_with_different_payloads(self) -> None:
        left: dict[str, Any] = {"v": 1}
        left["next"] = left
        right: dict[str, Any] = {"v": 2}
        right["next"] = right
        assert not structural_equals(left, right)

    def test_cyclic_view_terminates(self) -> None:
        node: dict[str, Any] = {"v": 1}
        node["next"] = node
        other: dict[str, Any] = {"v": 1}
        other["next"] = other
        assert structural_equals(make_immutable(node), make_immutable(other))


# ---------------------------------------------------------------------------
# find_difference
# ---------------------------------------------------------------------------

class TestFindDifference:
    def test_equal_values_give_none(self) -> None:
        assert find_difference({"a": [1, 2]}, {"a": [1, 2]}) is None

    def test_root_mismatch_gives_empty_path(self) -> None:
        assert find_difference([1, 2, 3], [1, 2]) == ()
        assert find_difference(1, "1") == ()

    def test_nested_path(self) -> None:
        left = {"users": [{"name": "John"}, {"name": "Ann"}]}
        right = {"users": [{"name": "John"}, {"name": "Anna"}]}
        assert find_difference(left, right) == ("users", 1, "name")

    def test_first_difference_in_key_order(self) -> None:
        assert find_difference([1, 2, 3], [9, 2, 8]) == (0,)

    def test_key_set_mismatch_points_at_container(self) -> None:
        assert find_difference({"a": {"x": 1}}, {"a": {"y": 1}}) == ("a",)


# ---------------------------------------------------------------------------
# Totality
# ---------------------------------------------------------------------------

class _RaisingEq:
    def __eq__(self, other: object) -> bool:
        raise RuntimeError("no comparison")

    __hash__ = object.__hash__


class TestTotality:
    def test_raising_eq_counts_as_unequal(self) -> None:
        assert not structural_equals(_RaisingEq(), _RaisingEq())
        assert not structural_equals({"k": _RaisingEq()}, {"k": _RaisingEq()})

    def test_raising_eq_is_still_reflexive(self) -> None:
        value = _RaisingEq()
        assert structural_equals(value, value)

    def test_signalling_nan_decimal(self) -> None:
        assert not structural_equals(Decimal("sNaN"), Decimal("sNaN"))
        assert not structural_equals([Decimal("sNaN")], [Decimal("sNaN")])
        assert find_difference([1, Decimal("sNaN")], [1, Decimal("sNaN")]) == (1,)

    def test_deep_nesting_beyond_recursion_limit(self) -> None:
        depth = sys.getrecursionlimit() * 3

        def nest(leaf: Any) -> list[Any]:
            value: list[Any] = [leaf]
            for _ in range(depth):
                value = [value]
            return value

        assert structural_equals(nest(1), nest(1))
        difference = find_difference(nest(1), nest(2))
        assert difference is not None
        assert len(difference) == depth + 1
