"""Registration and lookup of classes by their dotted full names."""

import logging
from typing import Any

from yuidoc_to_dts.diagnostics import DUPLICATE_CLASS, Diagnostics
from yuidoc_to_dts.errors import ResolutionError
from yuidoc_to_dts.klass import Klass
from yuidoc_to_dts.namespace import NamespaceTree

logger = logging.getLogger(__name__)


def split_full_name(
    full_name: str, namespace_aliases: dict[str, str] | None = None
) -> tuple[str, str]:
    """Split ``A.B.C`` into its owning namespace path ``A.B`` and name ``C``.

    The namespace path is translated through ``namespace_aliases`` so that
    legacy paths land under their canonical parent.
    """
    parts = full_name.split(".")
    namespace_name = ".".join(parts[:-1])
    if namespace_aliases:
        namespace_name = namespace_aliases.get(namespace_name, namespace_name)
    return namespace_name, parts[-1]


class ClassRegistry:
    """Classes of one run, stored in the namespace tree they belong to."""

    def __init__(
        self,
        tree: NamespaceTree,
        config: dict[str, Any],
        diagnostics: Diagnostics,
    ) -> None:
        """Initialize the registry over ``tree`` with the run's config."""
        self.tree = tree
        self.diagnostics = diagnostics
        self.namespace_aliases: dict[str, str] = config.get("namespace_aliases") or {}
        self.built_in_types: list[str] = list(config.get("built_in_types") or [])
        self.class_overrides: dict[str, Any] = config.get("class_overrides") or {}
        self.classes: list[Klass] = []

    def register(self, full_name: str, record: dict[str, Any]) -> Klass | None:
        """Create and register a class, autocreating its namespace.

        A second class with the same simple name in the same namespace is
        rejected: a diagnostic is recorded and None returned.
        """
        namespace_name, klass_name = split_full_name(full_name, self.namespace_aliases)
        namespace = self.tree.for_name(namespace_name, autocreate=True)

        if klass_name in namespace.classes:
            self.diagnostics.warn(
                DUPLICATE_CLASS,
                f"Class already exists; name={full_name}",
                subject=full_name,
            )
            return None

        declared_name = str(record.get("name") or full_name)
        klass = Klass(
            klass_name,
            declared_name,
            record,
            built_in_types=self.built_in_types,
            override=self.class_overrides.get(declared_name),
        )
        namespace.classes[klass_name] = klass
        self.classes.append(klass)
        logger.debug(
            "Registered class %s in namespace %r", declared_name, namespace_name
        )
        return klass

    def lookup(
        self, full_name: str, *, allow_missing_namespace: bool = False
    ) -> Klass | None:
        """Find a registered class without creating any namespace.

        Raises ResolutionError when the owning namespace does not exist,
        unless ``allow_missing_namespace`` is set.
        """
        namespace_name, klass_name = split_full_name(full_name, self.namespace_aliases)
        namespace = self.tree.for_name(namespace_name)

        if namespace is None:
            if allow_missing_namespace:
                return None
            msg = f"No namespace found; name={full_name}"
            raise ResolutionError(msg)

        return namespace.classes.get(klass_name)
