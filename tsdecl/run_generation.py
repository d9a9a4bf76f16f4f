"""Orchestration logic for turning Java sources into TypeScript declarations."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tsdecl.batch_report import BatchReport
from tsdecl.build_type_names import build_type_names
from tsdecl.emitter import emit_declaration
from tsdecl.extractor import Extractor, SourceParseError
from tsdecl.javalang_resolver import JavalangResolver
from tsdecl.load_config import compute_config_hash, load_config
from tsdecl.output_file_for_module import output_file_for_module
from tsdecl.resolver import UnresolvedTypeError
from tsdecl.source_unit import SourceUnit, discover_sources
from tsdecl.unit_result import UnitResult

if TYPE_CHECKING:
    from tsdecl.type_ref import TypeRef

logger = logging.getLogger(__name__)

REPORT_SCHEMA_VERSION = 1


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    units = discover_sources(args.src_dir)
    if not units:
        msg = f"No .java files found under: {args.src_dir}"
        raise SystemExit(msg)

    config = load_config(args.config)
    indentation = args.indent if args.indent is not None else config["emit"]["indent"]

    resolver = JavalangResolver(_known_types(units, config))
    extractor = Extractor(resolver, config["nullable_annotations"])
    type_names = build_type_names(config["type_names"], resolver.known_types)
    report = BatchReport(compute_config_hash(config), REPORT_SCHEMA_VERSION)

    modules = generate_modules(
        units, extractor, type_names, indentation, report, config["emit"]["default_module"]
    )

    if args.report:
        report.generate_report(args.report)
        print(f"Report written to {args.report}")
    print(report.summary())

    if args.dry_run:
        print("Dry run complete. No files written.")
    else:
        out_root = args.out_dir.resolve()
        out_root.mkdir(parents=True, exist_ok=True)
        written = write_modules(modules, out_root, config["emit"]["suffix"])
        print(f"Generated {written} declaration modules into: {out_root}")

    return 1 if args.strict and report.failed else 0


def _known_types(units: list[SourceUnit], config: dict[str, Any]) -> dict[str, int]:
    """Configured JDK types plus every type declared in the batch."""
    scanner = JavalangResolver()
    known = dict(config["known_types"])
    for unit in units:
        known.update(scanner.index_declarations(unit.code))
    return known


def module_of(type_name: str, default_module: str = "default") -> str:
    """Output module (the Java package) of a top-level type."""
    package, _, _ = type_name.rpartition(".")
    return package or default_module


def generate_unit(
    unit: SourceUnit,
    extractor: Extractor,
    type_names: dict[TypeRef, str],
    indentation: str,
    default_module: str = "default",
) -> tuple[UnitResult, str | None]:
    """Extract and render one unit; per-unit failures are reported, not raised."""
    try:
        decl = extractor.extract(unit)
    except (SourceParseError, UnresolvedTypeError) as e:
        logger.warning("Skipping %s: %s", unit.name, e)
        return UnitResult(unit.name, "failed", error=str(e)), None

    if decl is None:
        return UnitResult(unit.name, "skipped"), None

    text = emit_declaration(decl, type_names, indentation)
    result = UnitResult(unit.name, "passed", decl.name, module_of(decl.name, default_module))
    return result, text


def generate_modules(
    units: list[SourceUnit],
    extractor: Extractor,
    type_names: dict[TypeRef, str],
    indentation: str,
    report: BatchReport,
    default_module: str = "default",
) -> dict[str, list[str]]:
    """Render every unit, grouping the declaration texts by module."""
    modules: dict[str, list[str]] = {}
    for unit in units:
        result, text = generate_unit(unit, extractor, type_names, indentation, default_module)
        report.add_result(result)
        if text is not None:
            modules.setdefault(result.module, []).append(text)
    return modules


def write_modules(modules: dict[str, list[str]], out_root: Path, suffix: str) -> int:
    """Write one declaration file per module; returns the number written."""
    for module, texts in sorted(modules.items()):
        out_file = output_file_for_module(out_root, module, suffix)
        out_file.write_text("\n".join(texts), encoding="utf-8")
    return len(modules)
