"""Declaration and member model extracted from Java types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union, get_args

from tsdecl.type_ref import TypeRef

DeclarationKind = Literal["class", "interface", "enum", "annotation"]


@dataclass(frozen=True)
class Parameter:
    """A constructor or method parameter."""

    name: str
    type: TypeRef


@dataclass(frozen=True)
class Field:
    name: str
    type: TypeRef
    doc: str | None = None
    is_static: bool = False


@dataclass(frozen=True)
class Constructor:
    name: str
    params: tuple[Parameter, ...] = ()
    doc: str | None = None


@dataclass(frozen=True)
class Method:
    name: str
    return_type: TypeRef
    params: tuple[Parameter, ...] = ()
    type_params: tuple[TypeRef, ...] = ()
    doc: str | None = None
    is_static: bool = False
    is_override: bool = False


@dataclass(frozen=True)
class Getter:
    """A ``getX()`` method exposed as a read accessor."""

    name: str
    type: TypeRef
    doc: str | None = None
    is_override: bool = False


@dataclass(frozen=True)
class Setter:
    """A ``setX(value)`` method exposed as a write accessor."""

    name: str
    param_type: TypeRef
    doc: str | None = None
    is_override: bool = False


@dataclass(frozen=True)
class Declaration:
    """One Java type with its visible members.

    Nested types appear in ``members`` as declarations whose name is
    qualified by the enclosing type (``Outer.Inner``).
    """

    doc: str | None
    is_static: bool
    self_ref: TypeRef
    kind: DeclarationKind
    super_types: tuple[TypeRef, ...] = ()
    interfaces: tuple[TypeRef, ...] = ()
    members: tuple[Member, ...] = ()

    def __post_init__(self) -> None:
        if self.kind == "enum" and len(self.super_types) != 1:
            msg = f"enum {self.name} must have exactly one super type"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """Qualified name of the declared type."""
        return self.self_ref.name


Member = Union[Field, Constructor, Method, Getter, Setter, Declaration]

MEMBER_VARIANTS: tuple[type, ...] = get_args(Member)
