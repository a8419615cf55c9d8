"""Logic for deep merging configuration dictionaries."""

from typing import Any

# List-valued keys that extend the defaults instead of replacing them.
ADDITIVE_KEYS = frozenset({"ignore_prefixes", "additional_classes", "built_in_types"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Lists in 'update' replace 'base' lists, except for ADDITIVE_KEYS, which
      are appended to the base list with duplicates dropped and order kept.
    - Scalars are replaced.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            merged = list(result[key])
            merged.extend(v for v in value if v not in merged)
            result[key] = merged
        else:
            result[key] = value
    return result
