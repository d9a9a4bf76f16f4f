"""Tests for the end-to-end generation pipeline."""

import argparse
import json
from pathlib import Path

import pytest

from tsdecl import java_to_tsdecl
from tsdecl.build_type_names import build_type_names
from tsdecl.extractor import Extractor
from tsdecl.javalang_resolver import JavalangResolver
from tsdecl.load_config import DEFAULT_CONFIG
from tsdecl.run_generation import generate_unit, module_of, run_generation
from tsdecl.source_unit import SourceUnit
from tsdecl.unit_result import UnitResult

SOURCES = {
    "geo/Point.java": """
        package geo;

        /** A point. */
        public class Point {
            public double x;
            public double y;
            public Integer count;
            public double getX() { return x; }
        }
    """,
    "geo/Color.java": """
        package geo;

        public enum Color { RED, GREEN, BLUE }
    """,
    "geo/Ring.java": """
        package geo;

        import geo.shapes.*;

        public class Ring {
            public Circle inner;
        }
    """,
    "geo/Hidden.java": "package geo; class Hidden { public int x; }",
    "geo/Bad.java": "package geo; public class Bad { public int = 1; }",
    "geo/Lost.java": """
        package geo;

        import geo.shapes.*;

        public class Lost { public Square s; }
    """,
    "geo/shapes/Circle.java": "package geo.shapes; public class Circle {}",
    "Loose.java": "public interface Loose { void run(); }",
}


def _write_sources(root: Path) -> Path:
    src = root / "src"
    for rel, code in SOURCES.items():
        path = src / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
    return src


def _args(tmp_path: Path, **overrides: object) -> argparse.Namespace:
    values = {
        "src_dir": _write_sources(tmp_path),
        "out_dir": tmp_path / "out",
        "config": None,
        "indent": None,
        "report": None,
        "dry_run": False,
        "strict": False,
        "verbose": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def test_module_of() -> None:
    """Verify that types are grouped by package."""
    assert module_of("geo.shapes.Circle") == "geo.shapes"
    assert module_of("Loose") == "default"
    assert module_of("Loose", "global") == "global"


def test_generates_one_module_per_package(tmp_path: Path) -> None:
    """Verify declarations are written per package and bad units are isolated."""
    args = _args(tmp_path)
    assert run_generation(args) == 0

    out = tmp_path / "out"
    assert sorted(p.name for p in out.iterdir()) == [
        "default.d.ts",
        "geo.d.ts",
        "geo.shapes.d.ts",
    ]

    geo = (out / "geo.d.ts").read_text(encoding="utf-8")
    assert "declare class geo_Point {\n" in geo
    assert "    get x(): number;\n" in geo
    assert "    count: number;\n" in geo
    assert "declare class geo_Color extends java_lang_Enum<geo_Color> {\n" in geo
    assert "    inner: geo_shapes_Circle;\n" in geo
    assert "Hidden" not in geo
    assert "Lost" not in geo

    assert "declare class geo_shapes_Circle {" in (out / "geo.shapes.d.ts").read_text(
        encoding="utf-8"
    )
    assert "    run(): void;\n" in (out / "default.d.ts").read_text(encoding="utf-8")


def test_report_counts_failures(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify pass, fail and skip counts in the console summary and JSON report."""
    report_path = tmp_path / "report.json"
    run_generation(_args(tmp_path, report=str(report_path)))

    assert "5 passed, 2 failed, 1 skipped (8 source files)" in capsys.readouterr().out

    content = json.loads(report_path.read_text(encoding="utf-8"))
    assert len(content["meta"]["config_hash"]) == 64  # noqa: PLR2004
    failed = {r["source"] for r in content["results"] if r["status"] == "failed"}
    assert failed == {str(Path("geo/Bad.java")), str(Path("geo/Lost.java"))}


def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    """Verify that a dry run leaves the output directory untouched."""
    assert run_generation(_args(tmp_path, dry_run=True)) == 0
    assert not (tmp_path / "out").exists()


def test_strict_mode_fails_on_errors(tmp_path: Path) -> None:
    """Verify that strict mode turns unit failures into a failing exit status."""
    assert run_generation(_args(tmp_path, strict=True)) == 1


def test_indent_and_config_overrides(tmp_path: Path) -> None:
    """Verify the indent option and config-provided type names."""
    config = tmp_path / "tsdecl.yml"
    config.write_text("type_names:\n  geo.shapes.Circle: Circle\n", encoding="utf-8")
    run_generation(_args(tmp_path, indent="\t", config=str(config)))

    geo = (tmp_path / "out" / "geo.d.ts").read_text(encoding="utf-8")
    assert "\tinner: Circle;\n" in geo


def test_no_sources_is_an_error(tmp_path: Path) -> None:
    """Verify that an empty source tree aborts the run."""
    empty = tmp_path / "empty"
    empty.mkdir()
    with pytest.raises(SystemExit, match="No .java files"):
        run_generation(_args(tmp_path, src_dir=empty))


def test_main_parses_arguments(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify the command line entry point."""
    src = _write_sources(tmp_path)
    out = tmp_path / "cli_out"
    monkeypatch.setattr("sys.argv", ["tsdecl", str(src), str(out), "--indent", "  "])
    assert java_to_tsdecl.main() == 0
    assert "  x: number;\n" in (out / "geo.d.ts").read_text(encoding="utf-8")


def test_generate_unit_renders_complete_declaration() -> None:
    """Verify one unit goes from Java source to the exact declaration text."""
    unit = SourceUnit(
        "geo/Point.java",
        """
        package geo;

        import java.util.*;

        /** A point. */
        public class Point {
            public double x;
            public Deque<String> trail;
            public double getX() { return x; }
            public static Point origin() { return null; }
        }
        """,
    )
    extractor = Extractor(JavalangResolver(DEFAULT_CONFIG["known_types"]))
    type_names = build_type_names(DEFAULT_CONFIG["type_names"], DEFAULT_CONFIG["known_types"])

    result, text = generate_unit(unit, extractor, type_names, "    ")

    assert result == UnitResult("geo/Point.java", "passed", "geo.Point", "geo")
    assert text == (
        "/**\n"
        " * A point.\n"
        " */\n"
        "declare class geo_Point {\n"
        "    x: number;\n"
        "    trail: java_util_Deque<string>;\n"
        "    get x(): number;\n"
        "    static origin(): geo_Point;\n"
        "}\n"
    )


def test_generate_unit_reports_failures_and_skips() -> None:
    """Verify that parse failures and hidden types produce no text."""
    extractor = Extractor(JavalangResolver(DEFAULT_CONFIG["known_types"]))

    failed, text = generate_unit(
        SourceUnit("Bad.java", "public class Bad { public int = 1; }"), extractor, {}, "    "
    )
    assert failed.status == "failed"
    assert text is None

    skipped, text = generate_unit(
        SourceUnit("Hidden.java", "class Hidden {}"), extractor, {}, "    "
    )
    assert skipped.status == "skipped"
    assert text is None
