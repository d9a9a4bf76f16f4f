"""Main orchestration script for generating TypeScript declarations from Java sources."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the declaration generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate TypeScript declarations from a Java source tree."
    )
    parser.add_argument(
        "--src",
        default="src/main/java",
        help="Java source root (default: src/main/java)",
    )
    parser.add_argument(
        "--out",
        default="types",
        help="Output directory for .d.ts files (default: types)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating declarations",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Process sources and report without writing files",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with generation.\n")

    print("--- Generating TypeScript declarations ---")
    src_dir = Path(args.src)
    out_dir = Path(args.out)

    cmd = [
        sys.executable,
        "-m",
        "tsdecl.java_to_tsdecl",
        str(src_dir),
        str(out_dir),
        "--report",
        str(out_dir / "tsdecl_report.json"),
    ]
    if args.dry_run:
        cmd.append("--dry-run")
    if args.config:
        cmd.extend(["--config", args.config])

    # The report lives in the output directory
    out_dir.mkdir(parents=True, exist_ok=True)
    run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Declarations generated in {out_dir}")


if __name__ == "__main__":
    main()
