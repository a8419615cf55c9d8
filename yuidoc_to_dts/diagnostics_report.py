"""JSON report of the diagnostics and resolved model of one run."""

import json
import time
from pathlib import Path
from typing import Any

from yuidoc_to_dts.compute_config_hash import compute_config_hash
from yuidoc_to_dts.generation_context import GenerationContext
from yuidoc_to_dts.load_config import DEFAULT_CONFIG

REPORT_SCHEMA_VERSION = 1


class DiagnosticsReport:
    """Accumulates run metadata and writes it next to the declarations."""

    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.config_hash = compute_config_hash(context.config, DEFAULT_CONFIG)
        self.start_time = time.time()

    def build(self) -> dict[str, Any]:
        """Assemble the report payload."""
        diagnostics = self.context.diagnostics
        classes = self.context.registry.classes
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": REPORT_SCHEMA_VERSION,
                "total_classes": len(classes),
                "total_diagnostics": len(diagnostics),
            },
            "diagnostics": [
                {"code": d.code, "message": d.message, "subject": d.subject}
                for d in diagnostics.entries
            ],
            "stats": {
                "code_counts": diagnostics.counts(),
                "member_counts": {
                    k.full_name: len(k.effective_members()) for k in classes
                },
            },
        }

    def write(self, path: Path) -> None:
        """Write the report as indented JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.build(), indent=2), encoding="utf-8")
