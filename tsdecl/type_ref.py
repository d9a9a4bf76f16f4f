"""Type references used by the declaration model.

A ``TypeRef`` is one of five frozen dataclasses. Equality and hashing are
structural, so references built independently from the same source compare
equal and can be used as keys of a rename table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from tsdecl.resolver import DeclarationHandle, TypeHandle

BoundKind = Literal["upper", "lower"]


class _TypeRefBase:
    """Operations shared by every type reference variant."""

    __slots__ = ()

    def make_array(self, dimensions: int = 1) -> Array:
        """Wrap this reference into an array of the given depth."""
        return Array(self, dimensions)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Simple(_TypeRefBase):
    """A bare nominal reference (class, interface or type variable)."""

    name: str
    arity: int = 0  # number of type parameters the referenced type declares


@dataclass(frozen=True)
class Parametrized(_TypeRefBase):
    """A generic instantiation, e.g. ``List<String>``."""

    base: Simple
    args: tuple[TypeRef, ...]

    @property
    def name(self) -> str:
        return self.base.name


@dataclass(frozen=True)
class Wildcard(_TypeRefBase):
    """An unknown type argument, optionally bounded."""

    bound: TypeRef | None = None
    bound_kind: BoundKind = "upper"

    @property
    def name(self) -> str:
        return self.bound.name if self.bound is not None else "?"


@dataclass(frozen=True)
class Array(_TypeRefBase):
    """An array of ``element`` nested ``dimensions`` deep."""

    element: TypeRef
    dimensions: int = 1

    def __post_init__(self) -> None:
        if self.dimensions < 1:
            msg = f"array dimensions must be positive, got {self.dimensions}"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        return self.element.name

    def make_array(self, dimensions: int = 1) -> Array:
        return Array(self.element, self.dimensions + dimensions)


@dataclass(frozen=True)
class Nullable(_TypeRefBase):
    """Marks ``inner`` as possibly absent."""

    inner: TypeRef

    @property
    def name(self) -> str:
        return self.inner.name


TypeRef = Union[Simple, Parametrized, Wildcard, Array, Nullable]

# Built-ins are named after their TypeScript counterparts
VOID = Simple("void")
BOOLEAN = Simple("boolean")
BYTE = Simple("number")
SHORT = Simple("number")
CHAR = Simple("string")
INT = Simple("number")
LONG = Simple("number")
FLOAT = Simple("number")
DOUBLE = Simple("number")
STRING = Simple("string")
OBJECT = Simple("any")

ENUM_BASE_NAME = "java.lang.Enum"

PRIMITIVES: dict[str, Simple] = {
    "boolean": BOOLEAN,
    "byte": BYTE,
    "short": SHORT,
    "char": CHAR,
    "int": INT,
    "long": LONG,
    "float": FLOAT,
    "double": DOUBLE,
}

BUILTIN_REFERENCES: dict[str, Simple] = {
    "java.lang.String": STRING,
    "java.lang.Object": OBJECT,
}


def from_handle(handle: TypeHandle) -> TypeRef:
    """Build the reference for a resolved type handle."""
    kind = handle.kind
    if kind == "void":
        return VOID
    if kind == "primitive":
        return PRIMITIVES[handle.name]
    if kind == "variable":
        return Simple(handle.name)
    if kind == "reference":
        if not handle.arguments and handle.name in BUILTIN_REFERENCES:
            return BUILTIN_REFERENCES[handle.name]
        base = Simple(handle.name, handle.arity)
        if not handle.arguments:
            return base
        return Parametrized(base, tuple(from_handle(a) for a in handle.arguments))
    if kind == "wildcard":
        bound = from_handle(handle.bound) if handle.bound is not None else None
        return Wildcard(bound, handle.bound_kind)
    if kind == "array":
        if handle.element is None:
            msg = "array handle without element type"
            raise ValueError(msg)
        return from_handle(handle.element).make_array(handle.dimensions)
    msg = f"unknown type handle kind: {kind!r}"
    raise ValueError(msg)


def from_declaration_handle(name: str, handle: DeclarationHandle) -> TypeRef:
    """Reference to a type being declared, parametrized by its own variables."""
    arity = len(handle.type_parameters)
    base = Simple(name, arity)
    if not arity:
        return base
    return Parametrized(base, tuple(Simple(t) for t in handle.type_parameters))


def enum_super_class(self_ref: TypeRef) -> TypeRef:
    """Implicit base class of an enum, ``Enum<Self>``."""
    return Parametrized(Simple(ENUM_BASE_NAME, 1), (self_ref,))
