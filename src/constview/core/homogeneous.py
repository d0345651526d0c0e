"""Homogeneous containers — mappings and lists restricted to one type tag.

Each container owns a freshly created empty ``dict`` or ``list`` and a
:class:`~constview.core.types.TypeTag` fixed at construction.  Every
write is checked against the tag *before* it is applied, so a rejected
write leaves the container exactly as it was.

Only the type of stored values is enforced.  Reads return stored values
verbatim (no wrapping, no re-validation) and deletes behave as they do
on the plain container.  Nested composites are not inspected.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping, MutableSequence
from typing import Any

from constview.core.types import TypeTag, coerce_type_tag, type_tag_of
from constview.exceptions import InvalidArgumentError, TypeMismatchError


class _TypeGuard:
    """Type-tag bookkeeping shared by both container flavours."""

    __slots__ = ("_data", "_type_tag")

    _container: str = "object"

    def __init__(self, data: Any, type_tag: TypeTag | str) -> None:
        self._type_tag: TypeTag = coerce_type_tag(type_tag)
        self._data = data

    @property
    def type_tag(self) -> TypeTag:
        """The declared element type.  Fixed for the container's lifetime."""
        return self._type_tag

    def _check(self, value: Any) -> Any:
        actual = type_tag_of(value)
        if actual is not self._type_tag:
            raise TypeMismatchError(self._type_tag, actual, self._container)
        return value

    def _check_all(self, values: Iterable[Any]) -> list[Any]:
        """Validate every value up front so bulk writes are all-or-nothing."""
        checked = list(values)
        for value in checked:
            self._check(value)
        return checked

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _TypeGuard):
            other = other._data
        return bool(self._data == other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._type_tag.value!r}, {self._data!r})"


# ---------------------------------------------------------------------------
# Object flavour
# ---------------------------------------------------------------------------

class HomogeneousObject(_TypeGuard, MutableMapping[Any, Any]):
    """Mapping whose values must all carry the declared type tag."""

    __slots__ = ()

    _container = "object"

    def __init__(self, type_tag: TypeTag | str) -> None:
        super().__init__({}, type_tag)

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[key] = self._check(value)

    def __delitem__(self, key: Any) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def update(self, *args: Any, **kwargs: Any) -> None:
        """Bulk write; nothing is stored unless every value passes."""
        incoming = dict(*args, **kwargs)
        self._check_all(incoming.values())
        self._data.update(incoming)


# ---------------------------------------------------------------------------
# Array flavour
# ---------------------------------------------------------------------------

class HomogeneousArray(_TypeGuard, MutableSequence[Any]):
    """List whose elements must all carry the declared type tag.

    The ``length`` meta-property is exempt from the type check, and a
    resize through it is meant to be always permitted.  This class only
    honours half of that rule: assigning a smaller length truncates the
    list, but assigning a larger one raises
    :class:`~constview.exceptions.InvalidArgumentError`.  A Python list
    cannot hold empty slots, and padding would store values that violate
    the tag, so growth must go through ``append``/``extend``.
    """

    __slots__ = ()

    _container = "array"

    def __init__(self, type_tag: TypeTag | str) -> None:
        super().__init__([], type_tag)

    def __getitem__(self, index: Any) -> Any:
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, slice):
            self._data[index] = self._check_all(value)
        else:
            self._data[index] = self._check(value)

    def __delitem__(self, index: Any) -> None:
        del self._data[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def insert(self, index: int, value: Any) -> None:
        self._data.insert(index, self._check(value))

    def extend(self, values: Iterable[Any]) -> None:
        """Bulk append; nothing is stored unless every value passes."""
        self._data.extend(self._check_all(values))

    def sort(self, *, key: Any = None, reverse: bool = False) -> None:
        self._data.sort(key=key, reverse=reverse)

    @property
    def length(self) -> int:
        """Number of elements.

        Assignable without a type check.  Shrinking truncates; growing is
        not supported and raises :class:`InvalidArgumentError`.
        """
        return len(self._data)

    @length.setter
    def length(self, new_length: int) -> None:
        if isinstance(new_length, bool) or not isinstance(new_length, int) or new_length < 0:
            raise InvalidArgumentError(
                f"Array length must be a non-negative integer, got {new_length!r}",
            )
        if new_length > len(self._data):
            raise InvalidArgumentError(
                f"Cannot grow a homogeneous array from {len(self._data)} "
                f"to {new_length} elements by setting its length",
                hint="Append values of the declared type instead.",
            )
        del self._data[new_length:]


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def make_homogeneous_object(type_tag: TypeTag | str) -> HomogeneousObject:
    """Create an empty mapping restricted to *type_tag*.

    Raises
    ------
    InvalidArgumentError
        If *type_tag* is not a supported type tag.
    """
    return HomogeneousObject(type_tag)


def make_homogeneous_array(type_tag: TypeTag | str) -> HomogeneousArray:
    """Create an empty list restricted to *type_tag*.

    Raises
    ------
    InvalidArgumentError
        If *type_tag* is not a supported type tag.
    """
    return HomogeneousArray(type_tag)
