"""Custom exception hierarchy for constview.

Every error raised by the library inherits from :class:`ConstViewError`.
Errors are programmer-error signals: they are raised synchronously at
the point of the offending call and the library never retries, logs, or
suppresses them.

Hierarchy
---------
ConstViewError
├── InvalidArgumentError      (also a ValueError)
├── ImmutableViolationError   (also a TypeError)
└── TypeMismatchError         (also a TypeError)
"""

from __future__ import annotations

from enum import Enum


class ConstViewError(Exception):
    """Base exception for all constview errors.

    Callers can catch this single type to handle every rejection the
    library signals.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance for fixing the offending call."""


# --- Construction ----------------------------------------------------------

class InvalidArgumentError(ConstViewError, ValueError):
    """Raised when a constructor precondition is violated."""


# --- Immutable views -------------------------------------------------------

class ViolationKind(str, Enum):
    """The mutation paths an immutable view rejects."""

    WRITE = "write"
    DELETE = "delete"
    DEFINE_PROPERTY = "defineProperty"
    SET_PROTOTYPE_OF = "setPrototypeOf"


class ImmutableViolationError(ConstViewError, TypeError):
    """Raised on any mutation attempt through an immutable view.

    The underlying composite is guaranteed unchanged when this is raised.
    """

    def __init__(self, kind: ViolationKind | str, container: str = "object") -> None:
        self.kind: ViolationKind = ViolationKind(kind)
        self.container: str = container
        super().__init__(
            f"Can't {self.kind.value} a value of an immutable {container} view",
        )


# --- Homogeneous containers ------------------------------------------------

def _tag_name(tag: str | Enum) -> str:
    """Render a type tag (enum member or plain string) as its bare name."""
    if isinstance(tag, Enum):
        return str(tag.value)
    return str(tag)


class TypeMismatchError(ConstViewError, TypeError):
    """Raised when a homogeneous container receives a value of the wrong type.

    The container's prior contents are guaranteed unchanged.
    """

    def __init__(
        self,
        expected: str | Enum,
        actual: str | Enum,
        container: str = "object",
    ) -> None:
        self.expected: str = _tag_name(expected)
        self.actual: str = _tag_name(actual)
        self.container: str = container
        super().__init__(
            f"Can't store a {self.actual} value in a homogeneous {container} "
            f"(declared type is {self.expected})",
        )

