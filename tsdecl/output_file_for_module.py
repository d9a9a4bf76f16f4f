"""Utility for determining the output file path of a declaration module."""

from pathlib import Path


def output_file_for_module(out_root: Path, module: str, suffix: str = ".d.ts") -> Path:
    """Determine the output file for a module, creating its directory."""
    # com.example.geo -> out_root/com.example.geo.d.ts
    p = out_root / (module + suffix)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
