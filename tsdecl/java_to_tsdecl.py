"""Generate TypeScript declaration files from Java source code.

Every public type found under the source directory is rendered as an ambient
declaration; declarations are grouped into one ``.d.ts`` file per Java
package.
"""

import argparse
import logging
from pathlib import Path

from tsdecl.run_generation import run_generation


def main() -> int:
    """Run the generation process."""
    ap = argparse.ArgumentParser(
        description="Generate TypeScript declarations (.d.ts) from Java sources.",
    )
    ap.add_argument(
        "src_dir",
        type=Path,
        help="Directory searched recursively for *.java files",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated declaration files",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--indent",
        help="Indentation unit (default: from config, four spaces)",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON report of per-file results to this path",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Process all sources without writing declaration files",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any source file fails",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
