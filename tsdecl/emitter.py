"""Text emitter turning declaration models into TypeScript declarations."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from string import Formatter
from typing import Any, get_args

from tsdecl.model import MEMBER_VARIANTS, Declaration, Parameter
from tsdecl.renderers import RENDERERS
from tsdecl.text_filter import TextFilter, html_to_text
from tsdecl.type_ref import TypeRef

Renderer = Callable[[Any, "Emitter"], None]

# Every node class that may be handed to Emitter.emit
NODE_VARIANTS: tuple[type, ...] = (*get_args(TypeRef), *MEMBER_VARIANTS, Parameter)

_FORMATTER = Formatter()


class MissingRendererError(TypeError):
    """A node class has no renderer registered."""


def check_renderers(renderers: Mapping[type, Renderer]) -> None:
    """Fail unless ``renderers`` covers every node variant."""
    missing = [v.__name__ for v in NODE_VARIANTS if v not in renderers]
    if missing:
        msg = f"no renderer for node types: {', '.join(missing)}"
        raise MissingRendererError(msg)


class Emitter:
    """Accumulates indented output for one output module.

    ``type_names`` maps type references to the names used in this module;
    references missing from it are printed by qualified name with dots
    replaced by underscores.
    """

    def __init__(
        self,
        indentation: str,
        type_names: Mapping[TypeRef, str],
        *,
        text_filter: TextFilter = html_to_text,
        renderers: Mapping[type, Renderer] | None = None,
    ) -> None:
        """Create an emitter; the renderer table is checked for gaps here."""
        self.indentation = indentation
        self.type_names = type_names
        self.text_filter = text_filter
        self.renderers = dict(RENDERERS if renderers is None else renderers)
        check_renderers(self.renderers)

        self._output: list[str] = []
        self._indent_level = 0
        self._indent_str = ""
        self._deferred: list[Declaration] | None = None
        self._static_members = True

    # ---------------- Indentation ----------------

    @property
    def indent_level(self) -> int:
        return self._indent_level

    def _set_indent_level(self, level: int) -> None:
        self._indent_level = level
        self._indent_str = self.indentation * level

    @contextmanager
    def block(self) -> Iterator[Emitter]:
        """Indent everything printed inside the ``with`` statement."""
        self._set_indent_level(self._indent_level + 1)
        try:
            yield self
        finally:
            self._set_indent_level(self._indent_level - 1)

    @contextmanager
    def type_body(self, static_members: bool = True) -> Iterator[list[Declaration]]:
        """Block for the members of a type.

        Nested declarations met inside are collected into the yielded list
        instead of being printed, so they can follow the enclosing type.
        ``static_members`` is False for interfaces, which cannot declare them.
        """
        saved = self._deferred, self._static_members
        self._deferred = []
        self._static_members = static_members
        try:
            with self.block():
                yield self._deferred
        finally:
            self._deferred, self._static_members = saved

    @property
    def static_members(self) -> bool:
        return self._static_members

    def defer(self, node: Declaration) -> bool:
        """Queue a nested declaration; False when not inside a type body."""
        if self._deferred is None:
            return False
        self._deferred.append(node)
        return True

    # ---------------- Printing ----------------

    def write(self, text: str) -> Emitter:
        """Append text as is."""
        self._output.append(text)
        return self

    def indent(self) -> Emitter:
        return self.write(self._indent_str)

    def newline(self) -> Emitter:
        return self.write("\n")

    def print(self, fmt: str, *args: Any) -> Emitter:
        """Print ``fmt`` with ``{}`` fields filled from ``args``.

        Model nodes are rendered through their renderer, anything else is
        formatted with ``format()``. Without arguments ``fmt`` is plain text.
        """
        if not args:
            return self.write(fmt)
        auto = 0
        for literal, field_name, spec, _ in _FORMATTER.parse(fmt):
            if literal:
                self._output.append(literal)
            if field_name is None:
                continue
            if field_name:
                arg = args[int(field_name)]
            else:
                arg = args[auto]
                auto += 1
            if isinstance(arg, NODE_VARIANTS):
                self.emit(arg)
            else:
                self._output.append(format(arg, spec or ""))
        return self

    def println(self, fmt: str = "", *args: Any) -> Emitter:
        """Print one indented line."""
        if not fmt:
            return self.newline()
        return self.indent().print(fmt, *args).newline()

    def emit(self, node: Any) -> Emitter:
        """Render a model node."""
        renderer = self.renderers.get(type(node))
        if renderer is None:
            msg = f"unsupported node type {type(node).__name__}"
            raise MissingRendererError(msg)
        renderer(node, self)
        return self

    def emit_list(self, nodes: Sequence[Any], delimiter: str) -> Emitter:
        for i, node in enumerate(nodes):
            if i:
                self.write(delimiter)
            self.emit(node)
        return self

    def capture(self, node: Any) -> str:
        """Render ``node`` and return its text without keeping it."""
        saved = self._output
        self._output = []
        try:
            self.emit(node)
            return "".join(self._output)
        finally:
            self._output = saved

    # ---------------- Documentation ----------------

    def javadoc(self, doc: str, tags: Sequence[str] = ()) -> Emitter:
        """Print a documentation comment for ``doc`` plus extra tag lines."""
        text = self.text_filter(doc).replace("*/", "* /")  # No surprise comment ends
        self.println("/**")
        for raw_line in [*text.splitlines(), *tags]:
            line = raw_line.strip()
            if line.startswith("*"):
                line = line[1:].strip()
            if line:
                self.indent().write(" * ").write(line).newline()
        self.println(" */")
        return self

    # ---------------- Types ----------------

    def has_name(self, ref: TypeRef) -> bool:
        return ref in self.type_names

    def print_type(self, ref: TypeRef) -> Emitter:
        """Print the module-level name of a type."""
        name = self.type_names.get(ref)
        return self.write(name if name is not None else ref.name.replace(".", "_"))

    def getvalue(self) -> str:
        return "".join(self._output)

    def __str__(self) -> str:
        return self.getvalue()


def emit_declaration(
    declaration: Declaration,
    type_names: Mapping[TypeRef, str],
    indentation: str = "    ",
    text_filter: TextFilter = html_to_text,
) -> str:
    """Render one declaration tree with a fresh emitter."""
    emitter = Emitter(indentation, type_names, text_filter=text_filter)
    emitter.emit(declaration)
    return emitter.getvalue()
