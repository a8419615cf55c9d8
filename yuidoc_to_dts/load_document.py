"""Logic for loading a YUIDoc data document from disk."""

import json
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = frozenset({".yml", ".yaml"})


def load_document(path: Path) -> dict[str, Any]:
    """Load a ``{classes, classitems}`` document from JSON or YAML.

    Raises ValueError when the file does not hold a mapping.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        doc = yaml.safe_load(raw)
    else:
        doc = json.loads(raw)

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        msg = f"Expected a mapping at the top of {path}, got {type(doc).__name__}"
        raise ValueError(msg)

    doc.setdefault("classes", {})
    doc.setdefault("classitems", [])
    return doc
