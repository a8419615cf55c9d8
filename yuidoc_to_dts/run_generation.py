"""Orchestration logic for turning a YUIDoc document into declarations."""

import argparse
import logging
from pathlib import Path
from typing import Any

from yuidoc_to_dts.build_model import build_model
from yuidoc_to_dts.diagnostics_report import DiagnosticsReport
from yuidoc_to_dts.generation_context import GenerationContext
from yuidoc_to_dts.load_config import load_config
from yuidoc_to_dts.load_document import load_document
from yuidoc_to_dts.render_declarations import render_declarations

logger = logging.getLogger(__name__)


def generate(document: dict[str, Any], context: GenerationContext) -> str:
    """Run both model passes over ``document`` and render the result."""
    classes = build_model(document, context)
    context.resolver.resolve_all(classes)
    return render_declarations(context)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full pipeline for parsed CLI arguments."""
    if not args.input.exists():
        msg = f"Input document not found: {args.input}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.export_name:
        config["export_default"] = args.export_name

    context = GenerationContext.create(config)
    report = DiagnosticsReport(context)
    document = load_document(args.input)
    output = generate(document, context)

    if args.report:
        report.write(args.report)
        print(f"Wrote diagnostics report to: {args.report}")

    if args.dry_run:
        _print_summary(context)
    else:
        out_file: Path = args.output
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(output, encoding="utf-8")
        print(
            f"Generated declarations for {len(context.registry.classes)} classes "
            f"into: {out_file}"
        )

    if args.strict and len(context.diagnostics) > 0:
        logger.error(
            "%d diagnostics recorded in strict mode", len(context.diagnostics)
        )
        return 1
    return 0


def _print_summary(context: GenerationContext) -> None:
    """Print a short overview of the resolved model."""
    namespaces = len(context.tree.walk()) - 1
    print(f"Namespaces: {namespaces}")
    print(f"Classes: {len(context.registry.classes)}")
    counts = context.diagnostics.counts()
    if not counts:
        print("Diagnostics: none")
        return
    print(f"Diagnostics: {len(context.diagnostics)}")
    for code, count in sorted(counts.items()):
        print(f"  {code}: {count}")
