"""Summary of a declaration generation run."""

import json
import time
from pathlib import Path
from typing import Any

from tsdecl.unit_result import UnitResult, UnitStatus


class BatchReport:
    """Collects per-unit results and writes them as a JSON report."""

    def __init__(self, config_hash: str, schema_version: int) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.schema_version = schema_version
        self.results: list[UnitResult] = []
        self.start_time = time.time()

    def add_result(self, result: UnitResult) -> None:
        """Add a single unit result to the report."""
        self.results.append(result)

    def count(self, status: UnitStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def passed(self) -> int:
        return self.count("passed")

    @property
    def failed(self) -> int:
        return self.count("failed")

    @property
    def skipped(self) -> int:
        return self.count("skipped")

    def summary(self) -> str:
        """One-line pass/fail summary for the console."""
        return (
            f"{self.passed} passed, {self.failed} failed, {self.skipped} skipped "
            f"({len(self.results)} source files)"
        )

    def generate_report(self, path: str | Path) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": self.schema_version,
                "total_units": len(self.results),
            },
            "results": [
                {
                    "source": r.source,
                    "status": r.status,
                    "type_name": r.type_name,
                    "module": r.module,
                    "error": r.error,
                }
                for r in self.results
            ],
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        module_counts: dict[str, int] = {}
        for r in self.results:
            if r.status == "passed":
                module_counts[r.module] = module_counts.get(r.module, 0) + 1

        total = len(self.results)
        return {
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
            "failure_rate": (self.failed / total) if total > 0 else 0,
            "module_counts": module_counts,
        }
