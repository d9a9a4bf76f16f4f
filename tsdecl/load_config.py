"""Loading, merging and hashing of tsdecl configuration."""

import copy
import hashlib
import json
import logging
from collections.abc import Collection
from pathlib import Path
from typing import Any

import yaml

from tsdecl.jdk_types import JDK_TYPES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "emit": {
        "indent": "    ",
        "suffix": ".d.ts",
        "default_module": "default",
    },
    # Qualified name -> number of type parameters
    "known_types": dict(JDK_TYPES),
    # Qualified name -> name used in every output module
    "type_names": {
        "java.lang.Boolean": "boolean",
        "java.lang.Byte": "number",
        "java.lang.Short": "number",
        "java.lang.Character": "string",
        "java.lang.Integer": "number",
        "java.lang.Long": "number",
        "java.lang.Float": "number",
        "java.lang.Double": "number",
        "java.lang.Number": "number",
        "java.lang.CharSequence": "string",
        "java.lang.Void": "void",
    },
    "nullable_annotations": ["CheckForNull", "Nullable"],
    # List settings a user file extends instead of replacing
    "additive_keys": ["nullable_annotations"],
}


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive_keys: Collection[str] = ("nullable_annotations",),
) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``.

    Mappings merge key by key at every depth. A list under one of
    ``additive_keys`` gains the new entries of ``update`` after its own,
    each entry kept once. Everything else in ``update`` wins outright.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value, additive_keys)
        elif key in additive_keys and isinstance(current, list) and isinstance(value, list):
            merged[key] = list(dict.fromkeys([*current, *value]))
        else:
            merged[key] = value
    return merged


def compute_config_hash(config: dict[str, Any]) -> str:
    """Hex SHA-256 of ``config`` that ignores mapping key order."""
    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    The file's own ``additive_keys`` list, when present, decides which
    lists it extends.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config
    p = Path(path)
    if not p.exists():
        logger.warning("Config file %s not found, using defaults", p)
        return config
    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(user_config, dict):
        msg = f"Config file {p} must contain a mapping"
        raise ValueError(msg)
    additive_keys = user_config.get("additive_keys", config["additive_keys"]) or ()
    logger.debug("Merging %s with additive keys %s", p, additive_keys)
    return deep_merge(config, user_config, additive_keys)
