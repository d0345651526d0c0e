"""Runtime type tags and composite classification.

Every function in this module is a **pure** classification: no I/O, no
side effects, fully deterministic.

A *composite* is any :class:`~collections.abc.Mapping` (an "object") or
any :class:`~collections.abc.Sequence` other than text and bytes (an
"array").  Everything else is a primitive.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from constview.exceptions import InvalidArgumentError

_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


class TypeTag(str, Enum):
    """Declared element type of a homogeneous container."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"


# ---------------------------------------------------------------------------
# Composite classification
# ---------------------------------------------------------------------------

def is_object(value: object) -> bool:
    """Return ``True`` for mapping composites."""
    return isinstance(value, Mapping)


def is_array(value: object) -> bool:
    """Return ``True`` for sequence composites (text and bytes excluded)."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def is_composite(value: object) -> bool:
    """Return ``True`` when *value* is an object or an array."""
    return is_object(value) or is_array(value)


# ---------------------------------------------------------------------------
# Type tags
# ---------------------------------------------------------------------------

def type_tag_of(value: Any) -> TypeTag:
    """Return the runtime :class:`TypeTag` of *value*.

    ``bool`` is checked before numbers so that ``True`` is a boolean,
    not a number.  Values that fit no other tag are objects.
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if is_object(value):
        return TypeTag.OBJECT
    if is_array(value):
        return TypeTag.ARRAY
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


def coerce_type_tag(tag: object) -> TypeTag:
    """Normalise a :class:`TypeTag` or its string name into a :class:`TypeTag`.

    Raises
    ------
    InvalidArgumentError
        If *tag* is neither a ``TypeTag`` nor the name of one.
    """
    if isinstance(tag, TypeTag):
        return tag
    if isinstance(tag, str):
        try:
            return TypeTag(tag.strip().lower())
        except ValueError:
            pass
    supported = ", ".join(member.value for member in TypeTag)
    raise InvalidArgumentError(
        f"Unsupported type tag: {tag!r}",
        hint=f"Use one of: {supported}",
    )
