"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from tsdecl.build_type_names import build_type_names
from tsdecl.load_config import DEFAULT_CONFIG, compute_config_hash, deep_merge, load_config
from tsdecl.type_ref import Simple


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3, 4]})
    assert merged == {"arr": [3, 4]}


def test_deep_merge_nullable_annotations_additive() -> None:
    """Verify that the nullable annotation list keeps old entries first, once each."""
    base = {"nullable_annotations": ["Nullable", "CheckForNull"]}
    update = {"nullable_annotations": ["Nullable", "MaybeNull"]}
    merged = deep_merge(base, update)
    assert merged["nullable_annotations"] == ["Nullable", "CheckForNull", "MaybeNull"]


def test_deep_merge_additive_keys_are_configurable() -> None:
    """Verify that the caller chooses which lists extend instead of replacing."""
    base = {"tags": ["a"], "nullable_annotations": ["Nullable"], "nested": {"tags": ["b"]}}
    update = {"tags": ["c"], "nullable_annotations": ["MaybeNull"], "nested": {"tags": ["d"]}}
    merged = deep_merge(base, update, additive_keys={"tags"})
    assert merged == {
        "tags": ["a", "c"],
        "nullable_annotations": ["MaybeNull"],
        "nested": {"tags": ["b", "d"]},
    }


def test_compute_config_hash_stability() -> None:
    """Verify that config hash is stable regardless of key order."""
    config1 = {"b": 2, "a": 1, "nested": {"y": 2, "x": 1}}
    config2 = {"a": 1, "b": 2, "nested": {"x": 1, "y": 2}}
    assert compute_config_hash(config1) == compute_config_hash(config2)
    assert compute_config_hash(config1) != compute_config_hash({"a": 1})
    assert len(compute_config_hash(DEFAULT_CONFIG)) == 64  # noqa: PLR2004


def test_load_config_defaults() -> None:
    """Verify that defaults are returned as an independent copy."""
    config = load_config(None)
    assert config["emit"]["indent"] == "    "
    assert config["known_types"]["java.util.Map"] == 2  # noqa: PLR2004
    assert config["known_types"]["java.util.Deque"] == 1
    assert config["known_types"]["java.lang.Math"] == 0
    config["emit"]["indent"] = "\t"
    config["known_types"]["com.acme.Widget"] = 1
    assert DEFAULT_CONFIG["emit"]["indent"] == "    "
    assert "com.acme.Widget" not in DEFAULT_CONFIG["known_types"]


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides and extends defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.safe_dump(
            {
                "emit": {"indent": "  "},
                "known_types": {"com.acme.Widget": 1},
                "nullable_annotations": ["MaybeNull"],
            }
        ),
        encoding="utf-8",
    )
    config = load_config(str(config_file))
    assert config["emit"]["indent"] == "  "
    assert config["emit"]["suffix"] == ".d.ts"
    assert config["known_types"]["com.acme.Widget"] == 1
    assert "java.util.List" in config["known_types"]
    assert config["nullable_annotations"] == ["CheckForNull", "Nullable", "MaybeNull"]


def test_load_config_file_chooses_additive_keys(tmp_path: Path) -> None:
    """Verify that a config file listing no additive keys replaces every list."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        "additive_keys: []\nnullable_annotations: [MaybeNull]\n", encoding="utf-8"
    )
    config = load_config(str(config_file))
    assert config["nullable_annotations"] == ["MaybeNull"]
    assert config["additive_keys"] == []


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a config file must hold a mapping."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(str(config_file))


def test_build_type_names_uses_arities() -> None:
    """Verify rename keys carry the arity known for each name."""
    names = build_type_names(
        {"java.lang.Integer": "number", "java.util.List": "Array"},
        {"java.util.List": 1},
    )
    assert names == {
        Simple("java.lang.Integer"): "number",
        Simple("java.util.List", 1): "Array",
    }
