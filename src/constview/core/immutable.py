"""Immutable views over mappings and sequences.

A view holds a reference to the original composite and routes every
access through itself.  Reads pass through; every mutation path is
rejected with :class:`~constview.exceptions.ImmutableViolationError`
before the underlying composite is touched.

Immutability propagates lazily: reading a nested composite returns a
**new** view over it on every read.  Views are never cached, so two
reads of the same nested value yield distinct view objects over the same
underlying data.

Guarantees
----------
* No copies: the view shares the caller's composite.
* Rejected operations never mutate the underlying composite.
* Mutation through a retained alias of the original composite is the
  caller's responsibility; the view cannot observe it.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, NoReturn

from constview.core.types import is_array, is_composite, is_object
from constview.exceptions import (
    ImmutableViolationError,
    InvalidArgumentError,
    ViolationKind,
)


class ImmutableView:
    """Shared interception policy for :class:`ImmutableObject` and
    :class:`ImmutableArray`.

    Parameters
    ----------
    target:
        The composite to guard.  It is referenced, not copied.
    """

    __slots__ = ("_target",)

    _container: str = "object"

    def __init__(self, target: Any) -> None:
        object.__setattr__(self, "_target", target)

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    @staticmethod
    def _read(value: Any) -> Any:
        """Return primitives verbatim and composites as fresh views."""
        if is_composite(value):
            return _wrap(value)
        return value

    # ------------------------------------------------------------------
    # Rejection path
    # ------------------------------------------------------------------

    def _reject(self, kind: ViolationKind) -> NoReturn:
        raise ImmutableViolationError(kind, self._container)

    def _attribute_kind(self, name: str) -> ViolationKind:
        """Classify an attribute assignment on the view."""
        if name == "__class__":
            return ViolationKind.SET_PROTOTYPE_OF
        return ViolationKind.DEFINE_PROPERTY

    def __setattr__(self, name: str, value: Any) -> None:
        self._reject(self._attribute_kind(name))

    def __delattr__(self, name: str) -> None:
        kind = self._attribute_kind(name)
        if kind is ViolationKind.WRITE:
            kind = ViolationKind.DELETE
        self._reject(kind)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._reject(ViolationKind.WRITE)

    def __delitem__(self, key: Any) -> None:
        self._reject(ViolationKind.DELETE)

    # ------------------------------------------------------------------
    # Dunder plumbing
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._target)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImmutableView):
            other = other._target
        return bool(self._target == other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"

    def __copy__(self) -> ImmutableView:
        return type(self)(self._target)

    def __deepcopy__(self, memo: dict[int, Any]) -> ImmutableView:
        return type(self)(copy.deepcopy(self._target, memo))


# ---------------------------------------------------------------------------
# Object view
# ---------------------------------------------------------------------------

class ImmutableObject(ImmutableView, Mapping[Any, Any]):
    """Read-only mapping view.

    String keys can also be read as attributes (``view.name``) when they
    do not collide with a mapping method.
    """

    __slots__ = ()

    _container = "object"

    def __getitem__(self, key: Any) -> Any:
        return self._read(self._target[key])

    def __iter__(self) -> Iterator[Any]:
        return iter(self._target)

    def __contains__(self, key: object) -> bool:
        return key in self._target

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so methods win over keys.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}",
            ) from None

    def _attribute_kind(self, name: str) -> ViolationKind:
        if name in self._target:
            return ViolationKind.WRITE
        return super()._attribute_kind(name)

    # Mutating mapping API -------------------------------------------------

    def update(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def setdefault(self, key: Any, default: Any = None) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def __ior__(self, other: Any) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def pop(self, key: Any, *default: Any) -> NoReturn:
        self._reject(ViolationKind.DELETE)

    def popitem(self) -> NoReturn:
        self._reject(ViolationKind.DELETE)

    def clear(self) -> NoReturn:
        self._reject(ViolationKind.DELETE)


# ---------------------------------------------------------------------------
# Array view
# ---------------------------------------------------------------------------

class ImmutableArray(ImmutableView, Sequence[Any]):
    """Read-only sequence view.

    Slicing returns a new :class:`ImmutableArray` over the sliced data.
    """

    __slots__ = ()

    _container = "array"

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return ImmutableArray(self._target[index])
        return self._read(self._target[index])

    def __iter__(self) -> Iterator[Any]:
        for value in self._target:
            yield self._read(value)

    def __contains__(self, value: object) -> bool:
        return value in self._target

    @property
    def length(self) -> int:
        """Number of elements, mirroring ``len()``."""
        return len(self._target)

    def _attribute_kind(self, name: str) -> ViolationKind:
        if name == "length":
            return ViolationKind.WRITE
        return super()._attribute_kind(name)

    # Mutating sequence API ------------------------------------------------

    def append(self, value: Any) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def extend(self, values: Any) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def insert(self, index: int, value: Any) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def reverse(self) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def __iadd__(self, other: Any) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def __imul__(self, other: Any) -> NoReturn:
        self._reject(ViolationKind.WRITE)

    def pop(self, index: int = -1) -> NoReturn:
        self._reject(ViolationKind.DELETE)

    def remove(self, value: Any) -> NoReturn:
        self._reject(ViolationKind.DELETE)

    def clear(self) -> NoReturn:
        self._reject(ViolationKind.DELETE)


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def _wrap(value: Any) -> ImmutableView:
    if is_object(value):
        return ImmutableObject(value)
    return ImmutableArray(value)


def make_immutable(value: Any) -> ImmutableView:
    """Wrap a mapping or sequence in an immutable view.

    Raises
    ------
    InvalidArgumentError
        If *value* is ``None`` or not a composite.
    """
    if not is_composite(value):
        raise InvalidArgumentError(
            "An immutable view can only be created from a non-null "
            f"mapping or sequence, got {type(value).__name__}",
        )
    return _wrap(value)


def make_immutable_array(value: Any) -> ImmutableArray:
    """Wrap a sequence in an immutable array view.

    Raises
    ------
    InvalidArgumentError
        If *value* is not a non-string sequence.
    """
    if not is_array(value):
        raise InvalidArgumentError(
            "An immutable array view can only be created from a sequence, "
            f"got {type(value).__name__}",
        )
    return ImmutableArray(value)


def composite_identity(value: Any) -> int:
    """Return the ``id`` of the composite *value* guards.

    Views are peeled off until the plain composite is reached, so every
    view over the same data reports the same identity.  Non-view values
    report their own ``id``.
    """
    while isinstance(value, ImmutableView):
        value = value._target
    return id(value)
