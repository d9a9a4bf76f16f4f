"""Source units handed to the extractor."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceUnit:
    """A single Java file: a display name plus its source text."""

    name: str
    code: str


def discover_sources(src_dir: Path) -> list[SourceUnit]:
    """Load every ``*.java`` file under ``src_dir`` in a stable order."""
    return [
        SourceUnit(name=str(path.relative_to(src_dir)), code=path.read_text(encoding="utf-8"))
        for path in sorted(src_dir.rglob("*.java"))
    ]
