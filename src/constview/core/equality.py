"""Structural (deep) equality for arbitrary values.

Composites are compared by key: mapping keys for objects, indices for
arrays.  The rule is the same for both, so array order matters as a
direct consequence of index keys.  Primitives are equal when they carry
the same :class:`~constview.core.types.TypeTag` and compare ``==``; a
primitive whose comparison raises is treated as unequal.

The walk uses an explicit stack, so nesting depth is bounded by memory
rather than by the interpreter's recursion limit.

Cycles
------
A pair of composites that is already being compared further up the
walk is assumed equal.  Self-referential structures therefore
terminate, and two cyclic structures compare equal when every finite
unfolding of them matches.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from constview.core.immutable import composite_identity
from constview.core.types import is_composite, is_object, type_tag_of

KeyPath = tuple[Hashable, ...]

_ENTER = "enter"
_LEAVE = "leave"


def _keys(value: Any) -> list[Hashable]:
    if is_object(value):
        return list(value.keys())
    return list(range(len(value)))


def _primitive_equals(a: Any, b: Any) -> bool:
    if type_tag_of(a) is not type_tag_of(b):
        return False
    try:
        return bool(a == b)
    except Exception:  # noqa: BLE001
        # Signalling comparisons (Decimal sNaN, array-likes) count as unequal.
        return False


def find_difference(a: Any, b: Any) -> KeyPath | None:
    """Locate the first structural difference between *a* and *b*.

    Returns
    -------
    tuple | None
        ``None`` when the values are structurally equal, otherwise the
        key path from the roots to the first differing position.  An
        empty tuple means the roots themselves differ (type, key count,
        or key set).
    """
    active: set[tuple[int, int]] = set()
    stack: list[tuple[str, Any, Any, KeyPath]] = [(_ENTER, a, b, ())]

    while stack:
        step, left, right, path = stack.pop()
        if step == _LEAVE:
            active.discard((composite_identity(left), composite_identity(right)))
            continue

        if left is right:
            continue
        left_composite = is_composite(left)
        right_composite = is_composite(right)
        if not (left_composite and right_composite):
            if left_composite or right_composite or not _primitive_equals(left, right):
                return path
            continue

        pair = (composite_identity(left), composite_identity(right))
        if pair[0] == pair[1] or pair in active:
            continue

        keys_left = _keys(left)
        keys_right = _keys(right)
        if len(keys_left) != len(keys_right):
            return path
        if set(keys_left) != set(keys_right):
            return path

        active.add(pair)
        # The leave marker holds both sides alive so their ids stay unique.
        stack.append((_LEAVE, left, right, path))
        for key in reversed(keys_left):
            stack.append((_ENTER, left[key], right[key], (*path, key)))

    return None


def structural_equals(a: Any, b: Any) -> bool:
    """Return ``True`` when *a* and *b* are structurally equal.

    Total over arbitrary values, including cyclic and deeply nested
    composites.
    """
    return find_difference(a, b) is None
