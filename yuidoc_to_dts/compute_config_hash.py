"""Utility for fingerprinting the effective configuration of a run."""

import hashlib
import json
from collections.abc import Iterable
from typing import Any


def compute_config_hash(
    config: dict[str, Any], keys: Iterable[str] | None = None
) -> str:
    """Compute a stable SHA-256 of the configuration (canonical, sorted JSON).

    When ``keys`` is given only those tables are hashed, so entries the
    generator never reads (typos, notes) do not change the fingerprint.
    """
    if keys is not None:
        config = {key: config[key] for key in keys if key in config}
    canonical = json.dumps(config, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
