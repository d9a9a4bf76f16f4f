"""Rename table construction from configured type names."""

from collections.abc import Mapping

from tsdecl.type_ref import Simple, TypeRef


def build_type_names(
    type_names: Mapping[str, str], arities: Mapping[str, int]
) -> dict[TypeRef, str]:
    """Map configured qualified names to display names.

    Keys carry the arity the resolver reports for each name, so they match the
    references the extractor builds.
    """
    return {Simple(name, arities.get(name, 0)): display for name, display in type_names.items()}
