"""Outcome of generating declarations for one source unit."""

from dataclasses import dataclass
from typing import Literal

UnitStatus = Literal["passed", "failed", "skipped"]


@dataclass
class UnitResult:
    """Represents what happened to a single Java source file."""

    source: str
    status: UnitStatus
    type_name: str = ""  # Qualified name of the extracted type
    module: str = ""  # Output module the declaration was written to
    error: str = ""
