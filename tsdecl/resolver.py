"""Interface between the extractor and a Java parser/name resolver.

The extractor never parses text itself. It asks a ``Resolver`` for a parsed
compilation unit and for resolved type handles, which carry fully qualified
names, generic arguments, array and wildcard information.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal, Protocol

HandleKind = Literal["void", "primitive", "reference", "variable", "wildcard", "array"]


class UnresolvedTypeError(LookupError):
    """A type name could not be resolved to a qualified name."""

    def __init__(self, name: str, context: str = "") -> None:
        """Record the unresolved name and where it was looked up."""
        self.name = name
        where = f" in {context}" if context else ""
        super().__init__(f"cannot resolve type {name!r}{where}")


@dataclass(frozen=True)
class TypeHandle:
    """A resolved type as reported by the resolver."""

    kind: HandleKind
    name: str = ""  # qualified name, primitive keyword or type variable
    arity: int = 0  # declared type parameter count of a reference
    arguments: tuple[TypeHandle, ...] = ()
    element: TypeHandle | None = None
    dimensions: int = 0
    bound: TypeHandle | None = None
    bound_kind: Literal["upper", "lower"] = "upper"


VOID_HANDLE = TypeHandle("void", "void")


@dataclass(frozen=True)
class DeclarationHandle:
    """A resolved type declaration."""

    name: str
    type_parameters: tuple[str, ...] = ()


@dataclass(frozen=True)
class NameContext:
    """Names visible while resolving types of one compilation unit."""

    package: str = ""
    single_imports: dict[str, str] = field(default_factory=dict)
    on_demand_imports: tuple[str, ...] = ()
    local_types: dict[str, str] = field(default_factory=dict)
    arities: dict[str, int] = field(default_factory=dict)
    type_variables: frozenset[str] = frozenset()

    def qualify(self, name: str) -> str:
        """Qualified name of a top-level type declared in this unit."""
        return f"{self.package}.{name}" if self.package else name

    def with_type_variables(self, names: tuple[str, ...] | list[str]) -> NameContext:
        """Copy of this context with extra type variables in scope."""
        if not names:
            return self
        return replace(self, type_variables=self.type_variables | frozenset(names))


@dataclass
class ParseResult:
    """Outcome of parsing one source unit."""

    unit: Any = None
    context: NameContext | None = None
    problems: list[str] = field(default_factory=list)

    @property
    def successful(self) -> bool:
        return self.unit is not None and not self.problems

    @property
    def principal(self) -> Any:
        """First type declared by the unit, if any."""
        types = getattr(self.unit, "types", None) or []
        return types[0] if types else None


class Resolver(Protocol):
    """Parsing and name resolution capability consumed by the extractor."""

    def parse(self, code: str) -> ParseResult:
        """Parse a compilation unit."""
        ...

    def resolve_type(
        self, node: Any, context: NameContext, extra_dimensions: int = 0
    ) -> TypeHandle:
        """Resolve a type node; ``None`` stands for ``void``."""
        ...

    def resolve_declaration(self, name: str, node: Any) -> DeclarationHandle:
        """Resolve the declaration of type ``name``."""
        ...
