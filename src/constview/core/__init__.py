"""Core layer — the interception and validation logic.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem or network I/O.
* No imports beyond the standard library.
* All failures are raised synchronously as
  :class:`~constview.exceptions.ConstViewError` subclasses.
"""

from constview.core.equality import find_difference, structural_equals
from constview.core.homogeneous import (
    HomogeneousArray,
    HomogeneousObject,
    make_homogeneous_array,
    make_homogeneous_object,
)
from constview.core.immutable import (
    ImmutableArray,
    ImmutableObject,
    ImmutableView,
    composite_identity,
    make_immutable,
    make_immutable_array,
)
from constview.core.types import TypeTag, coerce_type_tag, is_composite, type_tag_of

__all__: list[str] = [
    "HomogeneousArray",
    "HomogeneousObject",
    "ImmutableArray",
    "ImmutableObject",
    "ImmutableView",
    "TypeTag",
    "coerce_type_tag",
    "composite_identity",
    "find_difference",
    "is_composite",
    "make_homogeneous_array",
    "make_homogeneous_object",
    "make_immutable",
    "make_immutable_array",
    "structural_equals",
    "type_tag_of",
]
