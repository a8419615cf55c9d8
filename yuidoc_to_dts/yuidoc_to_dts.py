"""Convert YUIDoc ``data.json`` into a TypeScript declaration file.

Classes are nested inside ``declare namespace`` blocks following their dotted
names, mixins (``uses``) are flattened into the classes that use them, and
documentation type annotations are lowered to TypeScript types.
"""

import argparse
import logging
from pathlib import Path

import yaml

from yuidoc_to_dts.errors import GenerationError
from yuidoc_to_dts.run_generation import run_generation


def main(argv: list[str] | None = None) -> int:
    """Run the generator."""
    ap = argparse.ArgumentParser(
        description="Convert YUIDoc data.json to a TypeScript declaration file.",
    )
    ap.add_argument(
        "input",
        type=Path,
        help="YUIDoc data document (.json, or .yml/.yaml with the same shape)",
    )
    ap.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=Path("index.d.ts"),
        help="Declaration file to write (default: index.d.ts)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file merged over the defaults",
    )
    ap.add_argument(
        "--export-name",
        help="Name used in the trailing 'export default' statement",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON report of diagnostics and member counts",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and resolve the model, print a summary, write no declarations",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any diagnostic was recorded",
    )
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Errors only")
    args = ap.parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        return run_generation(args)
    except (GenerationError, ValueError, yaml.YAMLError) as exc:
        msg = f"error: {exc}"
        raise SystemExit(msg) from exc


if __name__ == "__main__":
    raise SystemExit(main())
