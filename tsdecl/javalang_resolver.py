"""Resolver backed by the javalang parser.

javalang produces a syntax tree only, so names are resolved here from the
package declaration, imports, the types declared in the unit and a table of
known qualified type names (JDK defaults plus the types found in a batch).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

import javalang  # type: ignore[import-untyped]
from javalang import tree

from tsdecl.resolver import (
    VOID_HANDLE,
    DeclarationHandle,
    NameContext,
    ParseResult,
    TypeHandle,
    UnresolvedTypeError,
)

logger = logging.getLogger(__name__)

PRIMITIVE_NAMES = frozenset(
    {"boolean", "byte", "short", "char", "int", "long", "float", "double"}
)


def _describe(exc: Exception) -> str:
    """Readable message for a javalang syntax or lexer error."""
    description = getattr(exc, "description", None) or str(exc) or type(exc).__name__
    at = getattr(exc, "at", None)
    position = getattr(at, "position", None)
    if position:
        return f"{description} at line {position[0]}, column {position[1]}"
    return description


def _type_parameter_names(node: Any) -> tuple[str, ...]:
    return tuple(tp.name for tp in getattr(node, "type_parameters", None) or [])


def _nested_types(node: Any) -> list[Any]:
    body = node.body
    if isinstance(body, tree.EnumBody):
        body = body.declarations
    return [m for m in body or [] if isinstance(m, tree.TypeDeclaration)]


def _walk_types(types: list[Any], prefix: str) -> Iterator[tuple[str, Any]]:
    """Yield ``(qualified_name, node)`` for types and their nested types."""
    for node in types:
        name = f"{prefix}.{node.name}" if prefix else node.name
        yield name, node
        yield from _walk_types(_nested_types(node), name)


class JavalangResolver:
    """Parses Java source with javalang and resolves type names."""

    def __init__(self, known_types: Mapping[str, int] | None = None) -> None:
        """Create a resolver aware of ``known_types`` (qualified name -> arity)."""
        self.known_types = dict(known_types or {})

    # ---------------- Parsing ----------------

    def parse(self, code: str) -> ParseResult:
        """Parse one compilation unit and build its name context."""
        try:
            unit = javalang.parse.parse(code)
        except (javalang.parser.JavaSyntaxError, javalang.tokenizer.LexerError) as e:
            return ParseResult(problems=[_describe(e)])
        return ParseResult(unit=unit, context=self._context_for(unit))

    def index_declarations(self, code: str) -> dict[str, int]:
        """Qualified names and arities of every type declared in ``code``.

        Used to pre-scan a batch; units that fail to parse contribute nothing.
        """
        result = self.parse(code)
        if not result.successful:
            return {}
        package = result.context.package if result.context else ""
        return {
            name: len(_type_parameter_names(node))
            for name, node in _walk_types(result.unit.types, package)
        }

    def _context_for(self, unit: Any) -> NameContext:
        package = unit.package.name if unit.package is not None else ""

        single: dict[str, str] = {}
        on_demand: list[str] = []
        for imp in unit.imports or []:
            if imp.static:
                continue
            if imp.wildcard:
                on_demand.append(imp.path)
            else:
                single[imp.path.rsplit(".", 1)[-1]] = imp.path

        local: dict[str, str] = {}
        arities: dict[str, int] = {}
        for name, node in _walk_types(unit.types or [], package):
            local.setdefault(node.name, name)
            arities[name] = len(_type_parameter_names(node))

        return NameContext(
            package=package,
            single_imports=single,
            on_demand_imports=tuple(on_demand),
            local_types=local,
            arities=arities,
        )

    # ---------------- Declarations ----------------

    def resolve_declaration(self, name: str, node: Any) -> DeclarationHandle:
        """Resolve a type declaration to its name and type parameters."""
        return DeclarationHandle(name, _type_parameter_names(node))

    # ---------------- Type references ----------------

    def resolve_type(
        self, node: Any, context: NameContext, extra_dimensions: int = 0
    ) -> TypeHandle:
        """Resolve a javalang type node; ``None`` is ``void``.

        ``extra_dimensions`` covers array brackets written after a variable
        name (``int a[]``) and varargs.
        """
        if node is None:
            return VOID_HANDLE

        dimensions = len(node.dimensions or []) + extra_dimensions
        if isinstance(node, tree.BasicType):
            base = TypeHandle("primitive", node.name)
        else:
            base = self._resolve_reference(node, context)

        if dimensions:
            return TypeHandle("array", base.name, element=base, dimensions=dimensions)
        return base

    def _resolve_reference(self, node: Any, context: NameContext) -> TypeHandle:
        segments = []
        current = node
        while current is not None:
            segments.append(current)
            current = current.sub_type
        names = [s.name for s in segments]

        if len(names) == 1 and names[0] in context.type_variables:
            return TypeHandle("variable", names[0])

        qualified = self._qualify(names, context)
        arguments = tuple(
            self._resolve_argument(arg, context)
            for arg in segments[-1].arguments or []
        )
        arity = self._arity(qualified, context, len(arguments))
        return TypeHandle("reference", qualified, arity=arity, arguments=arguments)

    def _resolve_argument(self, arg: Any, context: NameContext) -> TypeHandle:
        if arg.type is None:
            return TypeHandle("wildcard", "?")
        bound = self.resolve_type(arg.type, context)
        if arg.pattern_type == "extends":
            return TypeHandle("wildcard", "?", bound=bound, bound_kind="upper")
        if arg.pattern_type == "super":
            return TypeHandle("wildcard", "?", bound=bound, bound_kind="lower")
        return bound

    def _arity(self, qualified: str, context: NameContext, fallback: int) -> int:
        if qualified in context.arities:
            return context.arities[qualified]
        return self.known_types.get(qualified, fallback)

    def _is_known(self, qualified: str, context: NameContext) -> bool:
        return qualified in context.arities or qualified in self.known_types

    def _qualify(self, names: list[str], context: NameContext) -> str:
        """Qualified name for a possibly dotted reference like ``Map.Entry``."""
        for i in range(len(names), 1, -1):
            prefix = ".".join(names[:i])
            if self._is_known(prefix, context):
                return ".".join([prefix, *names[i:]])

        head, rest = names[0], names[1:]
        found = self._lookup_simple(head, context)
        if found is None and rest and head[:1].islower():
            # Already fully qualified, e.g. com.example.Foo
            return ".".join(names)
        if found is None:
            found = self._guess_simple(head, context)
        return ".".join([found, *rest])

    def _lookup_simple(self, name: str, context: NameContext) -> str | None:
        if name in context.local_types:
            return context.local_types[name]
        if name in context.single_imports:
            return context.single_imports[name]
        # Same-package types shadow java.lang
        for candidate in (context.qualify(name), f"java.lang.{name}"):
            if self._is_known(candidate, context):
                return candidate
        for package in context.on_demand_imports:
            candidate = f"{package}.{name}"
            if self._is_known(candidate, context):
                return candidate
        return None

    def _guess_simple(self, name: str, context: NameContext) -> str:
        if context.on_demand_imports:
            raise UnresolvedTypeError(name, context.package or "default package")
        logger.debug("Assuming %s is in package %r", name, context.package)
        return context.qualify(name)
