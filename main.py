"""Main orchestration script for generating YUIDoc data and TypeScript declarations."""

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
    """Run the full declaration generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate YUIDoc data and a TypeScript declaration file."
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="packages",
        help="Source directory YUIDoc should parse (default: packages)",
    )
    parser.add_argument(
        "--out",
        default="index.d.ts",
        help="Declaration file to write (default: index.d.ts)",
    )
    parser.add_argument(
        "--skip-yuidoc",
        action="store_true",
        help="Reuse an existing docs/data.json instead of running YUIDoc",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--report",
        help="Write a JSON diagnostics report to this path",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if any diagnostic is recorded",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    docs_dir = root_dir / "docs"

    # 1. Generate data.json with YUIDoc
    if not args.skip_yuidoc:
        print("--- Step 1: Generating YUIDoc data ---")
        run_command(
            ["npx", "yuidoc", "--parse-only", "--outdir", str(docs_dir), args.source]
        )

    # 2. Convert data.json to TypeScript declarations
    print("\n--- Step 2: Converting YUIDoc data to TypeScript declarations ---")
    cmd = [
        sys.executable,
        "-m",
        "yuidoc_to_dts.yuidoc_to_dts",
        str(docs_dir / "data.json"),
        args.out,
    ]
    if args.config:
        cmd.extend(["--config", args.config])
    if args.report:
        cmd.extend(["--report", args.report])
    if args.strict:
        cmd.append("--strict")

    run_command(cmd)

    print(f"\nSUCCESS: Declarations generated in {args.out}")


if __name__ == "__main__":
    main()
