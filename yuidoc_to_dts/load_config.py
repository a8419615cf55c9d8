"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from yuidoc_to_dts.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    # Legacy namespace paths that live under a canonical parent.
    "namespace_aliases": {"RSVP": "Ember.RSVP"},
    # Names that always resolve to one absolute reference.
    "relative_name_overrides": {"RSVP.Promise": "Ember.RSVP.Promise"},
    "built_in_types": ["Function", "String", "Array", "Object"],
    "type_aliases": {
        "Any": "any",
        "*": "any",
        "Class": "any",
        "Mixed": "any",
        "Array": "any[]",
        "Tuple": "any[]",
        "Boolean": "boolean",
        "String": "string",
        "Number": "number",
        "Object": "{}",
        "Object?": "{}",
        "Hash": "{}",
        "Void": "void",
        "RSVP.Promise": "RSVP.Promise<any>",
        "Promise": "Promise<any>",
    },
    "ignore_prefixes": ["Ember.Templates"],
    "additional_classes": [
        "DOMElement",
        "Registry",
        "Transition",
        "Handlebars.SafeString",
    ],
    "class_overrides": {
        "Ember.RSVP.Promise": {"generics": "T", "implements": ["Promise<T>"]},
    },
    "reserved_param_names": {"arguments": "args"},
    "export_default": "Ember",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
