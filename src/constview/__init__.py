"""constview — runtime-enforced immutable and homogeneous containers.

Wraps plain mappings and sequences in views that reject mutation or
type drift at runtime, and ships a structural equality predicate.
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
    make_immutable,
    make_immutable_array,
)
from constview.core.types import TypeTag, type_tag_of
from constview.exceptions import (
    ConstViewError,
    ImmutableViolationError,
    InvalidArgumentError,
    TypeMismatchError,
    ViolationKind,
)
from constview.version import __version__

__all__: list[str] = [
    "ConstViewError",
    "HomogeneousArray",
    "HomogeneousObject",
    "ImmutableArray",
    "ImmutableObject",
    "ImmutableView",
    "ImmutableViolationError",
    "InvalidArgumentError",
    "TypeMismatchError",
    "TypeTag",
    "ViolationKind",
    "__version__",
    "find_difference",
    "make_homogeneous_array",
    "make_homogeneous_object",
    "make_immutable",
    "make_immutable_array",
    "structural_equals",
    "type_tag_of",
]
