"""Reads Java source units to produce declaration models.

No code is analyzed: only type signatures, member visibility and Javadoc
comments end up in the model.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Literal

from javalang import tree  # type: ignore[import-untyped]

from tsdecl.model import (
    Constructor,
    Declaration,
    DeclarationKind,
    Field,
    Getter,
    Member,
    Method,
    Parameter,
    Setter,
)
from tsdecl.resolver import NameContext, Resolver, TypeHandle
from tsdecl.source_unit import SourceUnit
from tsdecl.type_ref import (
    STRING,
    Nullable,
    TypeRef,
    enum_super_class,
    from_declaration_handle,
    from_handle,
)

logger = logging.getLogger(__name__)

Access = Literal["public", "protected", "private", "package"]
MethodShape = Literal["getter", "setter", "method"]

DEFAULT_NULLABLE_ANNOTATIONS = ("Nullable", "CheckForNull")


class SourceParseError(ValueError):
    """A source unit could not be parsed."""

    def __init__(self, source_name: str, problems: list[str]) -> None:
        """Record the unit name and the parser's problem list."""
        self.source_name = source_name
        self.problems = list(problems)
        super().__init__(f"failed to parse {source_name}: {'; '.join(self.problems)}")


def access_of(node: Any) -> Access:
    """Declared access of a node; nodes without modifiers have package access."""
    mods = getattr(node, "modifiers", None) or set()
    if "public" in mods:
        return "public"
    if "private" in mods:
        return "private"
    if "protected" in mods:
        return "protected"
    return "package"


def is_visible(owner: Any, member: Any) -> bool:
    """Whether ``member`` of type ``owner`` is part of the public API."""
    access = access_of(member)
    # Members specified as public are always public
    if access == "public":
        return True
    # Default access in interfaces is public
    if access == "package":
        return isinstance(owner, tree.InterfaceDeclaration)
    return False


def classify_method(
    name: str, returns_void: bool, param_count: int, type_param_count: int
) -> MethodShape:
    """Decide whether a method is exposed as a getter, setter or plain method."""
    if (
        len(name) > 3  # noqa: PLR2004
        and name.startswith("get")
        and not returns_void
        and param_count == 0
        and type_param_count == 0
    ):
        return "getter"
    if (
        len(name) > 4  # noqa: PLR2004
        and name.startswith("set")
        and returns_void
        and param_count == 1
        and type_param_count == 0
    ):
        return "setter"
    return "method"


def _javadoc(node: Any) -> str | None:
    """Raw Javadoc body of a node, without the comment delimiters."""
    doc = getattr(node, "documentation", None)
    if doc is None:
        return None
    if doc.startswith("/**"):
        doc = doc[3:]
    if doc.endswith("*/"):
        doc = doc[:-2]
    return doc


def _annotation_names(node: Any) -> set[str]:
    return {a.name.rsplit(".", 1)[-1] for a in getattr(node, "annotations", None) or []}


def _kind_of(node: Any) -> DeclarationKind:
    if isinstance(node, tree.InterfaceDeclaration):
        return "interface"
    if isinstance(node, tree.EnumDeclaration):
        return "enum"
    if isinstance(node, tree.AnnotationDeclaration):
        return "annotation"
    return "class"


def _body_of(node: Any) -> list[Any]:
    if isinstance(node, tree.EnumDeclaration):
        return list(node.body.declarations or [])
    return list(node.body or [])


class Extractor:
    """Turns source units into ``Declaration`` trees using a resolver."""

    def __init__(
        self,
        resolver: Resolver,
        nullable_annotations: Iterable[str] = DEFAULT_NULLABLE_ANNOTATIONS,
    ) -> None:
        """Create an extractor over the given resolver."""
        self.resolver = resolver
        self.nullable_annotations = frozenset(nullable_annotations)

    def parse_type(self, source: SourceUnit) -> Declaration | None:
        """Declaration of the unit's public type, or None.

        A unit that fails to parse is logged and yields None.
        """
        try:
            return self.extract(source)
        except SourceParseError as e:
            logger.warning("%s", e)
            return None

    def extract(self, source: SourceUnit) -> Declaration | None:
        """Declaration of the unit's public type.

        Returns None when the principal type is not public. Raises
        ``SourceParseError`` when the unit does not parse and
        ``UnresolvedTypeError`` when a referenced type cannot be resolved.
        """
        result = self.resolver.parse(source.code)
        if not result.successful or result.context is None:
            raise SourceParseError(source.name, result.problems)

        principal = result.principal
        if principal is None:
            logger.debug("No type declared in %s", source.name)
            return None
        if access_of(principal) != "public":
            logger.debug("Skipping non-public type %s in %s", principal.name, source.name)
            return None

        context = result.context
        return self._process_type(context.qualify(principal.name), principal, context)

    # ---------------- Types ----------------

    def _process_type(self, type_name: str, node: Any, context: NameContext) -> Declaration:
        handle = self.resolver.resolve_declaration(type_name, node)
        context = context.with_type_variables(handle.type_parameters)
        self_ref = from_declaration_handle(type_name, handle)

        members: list[Member] = []

        # Enum constants and compiler-generated methods come first
        if isinstance(node, tree.EnumDeclaration):
            members.extend(self._enum_members(node, self_ref))

        for member in _body_of(node):
            if not is_visible(node, member):
                continue  # Neither implicitly nor explicitly public
            members.extend(self._process_member(type_name, member, context))

        kind = _kind_of(node)
        super_types, interfaces = self._super_types(node, kind, self_ref, context)
        return Declaration(
            doc=_javadoc(node),
            is_static="static" in (node.modifiers or set()),
            self_ref=self_ref,
            kind=kind,
            super_types=tuple(super_types),
            interfaces=tuple(interfaces),
            members=tuple(members),
        )

    def _enum_members(self, node: Any, self_ref: TypeRef) -> list[Member]:
        members: list[Member] = [
            Field(constant.name, self_ref, _javadoc(constant), is_static=True)
            for constant in node.body.constants or []
        ]
        members.append(
            Method("valueOf", self_ref, (Parameter("name", STRING),), (), "", is_static=True)
        )
        members.append(Method("values", self_ref.make_array(1), (), (), "", is_static=True))
        return members

    def _super_types(
        self, node: Any, kind: DeclarationKind, self_ref: TypeRef, context: NameContext
    ) -> tuple[list[TypeRef], list[TypeRef]]:
        if kind == "class":
            extends = [node.extends] if node.extends is not None else []
            return self._refs(extends, context), self._refs(node.implements, context)
        if kind == "interface":
            return self._refs(node.extends, context), []
        if kind == "enum":
            return [enum_super_class(self_ref)], self._refs(node.implements, context)
        return [], []

    def _refs(self, nodes: list[Any] | None, context: NameContext) -> list[TypeRef]:
        return [from_handle(self.resolver.resolve_type(n, context)) for n in nodes or []]

    # ---------------- Members ----------------

    def _process_member(self, type_name: str, member: Any, context: NameContext) -> list[Member]:
        if isinstance(member, tree.TypeDeclaration):
            return [self._process_type(f"{type_name}.{member.name}", member, context)]
        if isinstance(member, tree.ConstructorDeclaration):
            return [self._constructor(member, context)]
        if isinstance(member, tree.MethodDeclaration):
            return [self._method(member, context)]
        if isinstance(member, tree.FieldDeclaration):
            return self._fields(member, context)
        return []

    def _constructor(self, node: Any, context: NameContext) -> Constructor:
        # Constructor type parameters have no equivalent in the output
        context = context.with_type_variables(
            [tp.name for tp in node.type_parameters or []]
        )
        return Constructor(node.name, self._parameters(node, context), _javadoc(node))

    def _method(self, node: Any, context: NameContext) -> Member:
        type_params = [tp.name for tp in node.type_parameters or []]
        context = context.with_type_variables(type_params)

        name = node.name
        doc = _javadoc(node)
        override = "Override" in _annotation_names(node)
        return_handle = self.resolver.resolve_type(node.return_type, context)
        return_type = self._type_ref(return_handle, node)
        params = self._parameters(node, context)

        shape = classify_method(
            name, return_handle.kind == "void", len(params), len(type_params)
        )
        if shape == "getter":
            return Getter(name, return_type, doc, override)
        if shape == "setter":
            return Setter(name, params[0].type, doc, override)
        return Method(
            name,
            return_type,
            params,
            tuple(from_handle(TypeHandle("variable", t)) for t in type_params),
            doc,
            is_static="static" in (node.modifiers or set()),
            is_override=override,
        )

    def _fields(self, node: Any, context: NameContext) -> list[Member]:
        # Each variable is resolved on its own: `int a, b[];` declares
        # fields of different types
        doc = _javadoc(node)
        is_static = "static" in (node.modifiers or set())
        fields: list[Member] = []
        for declarator in node.declarators:
            handle = self.resolver.resolve_type(
                node.type, context, len(declarator.dimensions or [])
            )
            fields.append(Field(declarator.name, self._type_ref(handle, node), doc, is_static))
        return fields

    def _parameters(self, node: Any, context: NameContext) -> tuple[Parameter, ...]:
        params = []
        for p in node.parameters or []:
            handle = self.resolver.resolve_type(p.type, context, 1 if p.varargs else 0)
            params.append(Parameter(p.name, self._type_ref(handle, p)))
        return tuple(params)

    def _type_ref(self, handle: TypeHandle, annotated: Any) -> TypeRef:
        ref = from_handle(handle)
        if handle.kind != "void" and _annotation_names(annotated) & self.nullable_annotations:
            return Nullable(ref)
        return ref
