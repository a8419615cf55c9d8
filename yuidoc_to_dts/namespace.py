"""Hierarchical registry of dotted namespace names."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yuidoc_to_dts.klass import Klass


class Namespace:
    """One node of the namespace tree; the root has no name and no parent."""

    def __init__(self, name: str | None = None, parent: "Namespace | None" = None):
        self.name = name
        self.parent = parent
        self.children: dict[str, Namespace] = {}
        self.classes: dict[str, Klass] = {}

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def full_name(self) -> str:
        """Dot-join of the ancestor chain; empty for the root."""
        parts = []
        node: Namespace | None = self
        while node is not None and not node.is_root:
            parts.append(node.name)
            node = node.parent
        return ".".join(reversed(parts))

    def __repr__(self) -> str:
        return f"Namespace({self.full_name!r})"


class NamespaceTree:
    """Owns the root namespace for a single generation run."""

    def __init__(self) -> None:
        self.root = Namespace()

    def for_name(self, name: str, *, autocreate: bool = False) -> Namespace | None:
        """Walk ``name`` from the root and return the deepest namespace.

        Missing segments are created when ``autocreate`` is set; otherwise the
        lookup gives up and returns None. An empty name is the root.
        """
        if not name:
            return self.root

        namespace = self.root
        for part in name.split("."):
            child = namespace.children.get(part)
            if child is None:
                if not autocreate:
                    return None
                child = Namespace(part, namespace)
                namespace.children[part] = child
            namespace = child
        return namespace

    def walk(self) -> list[Namespace]:
        """Return every namespace depth-first, in insertion order."""
        out: list[Namespace] = []
        stack = [self.root]
        while stack:
            ns = stack.pop()
            out.append(ns)
            stack.extend(reversed(list(ns.children.values())))
        return out
