"""Shortest unambiguous type references from inside a namespace chain."""

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yuidoc_to_dts.class_registry import ClassRegistry

UPPERCASE_START_RE = re.compile(r"^[A-Z]")


class RelativeNamer:
    """Computes how a class nested at ``base`` should refer to a type name."""

    def __init__(
        self,
        registry: "ClassRegistry",
        overrides: dict[str, str],
        built_in_types: "list[str] | tuple[str, ...]",
    ) -> None:
        self.registry = registry
        self.overrides = overrides
        self.built_in_types = set(built_in_types)

    def relative_name(self, name: str, base: str) -> str:
        """Return ``name`` as referenced from within the class ``base``.

        1. A capitalised, non-built-in name may be a sibling or ancestor-level
           class referred to by its local name; swap in its full name.
        2. Fixed overrides always win.
        3. Strip the longest leading run of ``base``'s segments.
        4. Never shorten to something that shadows a built-in.
        """
        parts = base.split(".") if base else []

        if name not in self.built_in_types and UPPERCASE_START_RE.match(name):
            for size in range(len(parts), 0, -1):
                candidate = ".".join([*parts[:size], name])
                klass = self.registry.lookup(candidate, allow_missing_namespace=True)
                if klass is not None:
                    name = klass.full_name
                    break

        if name in self.overrides:
            return self.overrides[name]

        relative = name
        for size in range(len(parts), 0, -1):
            prefix = ".".join(parts[:size]) + "."
            if name.startswith(prefix):
                relative = name[len(prefix) :]
                break

        return name if relative in self.built_in_types else relative
