"""Renderers producing TypeScript declaration text for each model node."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tsdecl.model import (
    Constructor,
    Declaration,
    Field,
    Getter,
    Method,
    Parameter,
    Setter,
)
from tsdecl.type_ref import Array, Nullable, Parametrized, Simple, Wildcard

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tsdecl.emitter import Emitter, Renderer

# Identifiers that cannot name a parameter in TypeScript
RESERVED_PARAMETER_NAMES = frozenset(
    {
        "arguments", "break", "case", "catch", "class", "const", "continue",
        "debugger", "default", "delete", "do", "else", "enum", "eval", "export",
        "extends", "false", "finally", "for", "function", "if", "implements",
        "import", "in", "instanceof", "interface", "let", "new", "null",
        "package", "private", "protected", "public", "return", "static",
        "super", "switch", "this", "throw", "true", "try", "typeof", "var",
        "void", "while", "with", "yield",
    }
)  # fmt: skip

OVERRIDE_TAG = "@override"


def property_name(accessor: str) -> str:
    """Property exposed by ``getFoo``/``setFoo``, decapitalized like Java Beans.

    ``getURL`` keeps ``URL``; ``getName`` gives ``name``.
    """
    name = accessor[3:]
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[:1].lower() + name[1:]


def parameter_name(name: str) -> str:
    return f"{name}_" if name in RESERVED_PARAMETER_NAMES else name


def _doc(emitter: Emitter, doc: str | None, is_override: bool = False) -> None:
    tags = [OVERRIDE_TAG] if is_override else []
    if doc or tags:
        emitter.javadoc(doc or "", tags)


def _static(emitter: Emitter, is_static: bool) -> str:
    return "static " if is_static and emitter.static_members else ""


def _type_parameters(emitter: Emitter, params: Sequence[Any]) -> None:
    if params:
        emitter.write("<").emit_list(params, ", ").write(">")


# ---------------- Type references ----------------


def render_simple(ref: Simple, emitter: Emitter) -> None:
    emitter.print_type(ref)
    if ref.arity and not emitter.has_name(ref):
        # Raw use of a generic type
        emitter.write("<" + ", ".join(["any"] * ref.arity) + ">")


def render_parametrized(ref: Parametrized, emitter: Emitter) -> None:
    if emitter.has_name(ref):
        emitter.print_type(ref)
        return
    emitter.print_type(ref.base)
    _type_parameters(emitter, ref.args)


def render_wildcard(ref: Wildcard, emitter: Emitter) -> None:
    # Upper and lower bounds both render as the bound itself
    if ref.bound is None:
        emitter.write("any")
    else:
        emitter.emit(ref.bound)


def render_array(ref: Array, emitter: Emitter) -> None:
    element = emitter.capture(ref.element)
    if " | " in element:
        element = f"({element})"
    emitter.write(element + "[]" * ref.dimensions)


def render_nullable(ref: Nullable, emitter: Emitter) -> None:
    emitter.print("{} | null", ref.inner)


# ---------------- Members ----------------


def render_parameter(param: Parameter, emitter: Emitter) -> None:
    emitter.print("{}: {}", parameter_name(param.name), param.type)


def render_field(field: Field, emitter: Emitter) -> None:
    _doc(emitter, field.doc)
    emitter.println("{}{}: {};", _static(emitter, field.is_static), field.name, field.type)


def render_constructor(ctor: Constructor, emitter: Emitter) -> None:
    _doc(emitter, ctor.doc)
    emitter.indent().write("constructor(").emit_list(ctor.params, ", ").write(");").newline()


def render_method(method: Method, emitter: Emitter) -> None:
    _doc(emitter, method.doc, method.is_override)
    emitter.indent().write(_static(emitter, method.is_static) + method.name)
    _type_parameters(emitter, method.type_params)
    emitter.write("(").emit_list(method.params, ", ")
    emitter.print("): {};", method.return_type).newline()


def render_getter(getter: Getter, emitter: Emitter) -> None:
    _doc(emitter, getter.doc, getter.is_override)
    emitter.println("get {}(): {};", property_name(getter.name), getter.type)


def render_setter(setter: Setter, emitter: Emitter) -> None:
    _doc(emitter, setter.doc, setter.is_override)
    emitter.println("set {}(value: {});", property_name(setter.name), setter.param_type)


def render_declaration(decl: Declaration, emitter: Emitter) -> None:
    """Render a type; nested types follow it at the same depth."""
    if emitter.defer(decl):
        return

    _doc(emitter, decl.doc)
    is_class = decl.kind in {"class", "enum"}
    emitter.indent()
    if emitter.indent_level == 0:
        emitter.write("declare ")
    emitter.print("{} {}", "class" if is_class else "interface", decl.self_ref)
    if decl.super_types:
        emitter.write(" extends ").emit_list(decl.super_types, ", ")
    if decl.interfaces:
        # Interfaces never carry an implements clause
        keyword = " implements " if is_class else " extends "
        emitter.write(keyword).emit_list(decl.interfaces, ", ")
    emitter.write(" {").newline()

    with emitter.type_body(static_members=is_class) as nested:
        for member in decl.members:
            emitter.emit(member)
    emitter.indent().write("}").newline()

    for inner in nested:
        emitter.newline()
        emitter.emit(inner)


RENDERERS: dict[type, Renderer] = {
    Simple: render_simple,
    Parametrized: render_parametrized,
    Wildcard: render_wildcard,
    Array: render_array,
    Nullable: render_nullable,
    Parameter: render_parameter,
    Field: render_field,
    Constructor: render_constructor,
    Method: render_method,
    Getter: render_getter,
    Setter: render_setter,
    Declaration: render_declaration,
}
