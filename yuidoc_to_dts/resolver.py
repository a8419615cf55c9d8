"""Second pass: link extends/uses targets and flatten mixin members."""

import logging
from collections.abc import Iterable

from yuidoc_to_dts.class_registry import ClassRegistry
from yuidoc_to_dts.diagnostics import (
    CYCLIC_MIXIN,
    PRIVATE_OVERRIDE,
    UNRESOLVED_EXTENDS,
    UNRESOLVED_MIXIN,
    Diagnostics,
)
from yuidoc_to_dts.errors import CyclicInheritanceError, GenerationError
from yuidoc_to_dts.klass import STATIC_PREFIX, Klass, ResolutionState, ResolvedType
from yuidoc_to_dts.namespace import NamespaceTree

logger = logging.getLogger(__name__)

CREATE_KEY = f"{STATIC_PREFIX}create"


class Resolver:
    """Resolves each class at most once, parents and mixins first.

    A cycle through ``extends`` is fatal. A mixin reached again while it is
    still being resolved is dropped with a ``cyclic-mixin`` diagnostic.

    TypeScript has no mixins, so every public member a class picks up through
    ``uses`` is copied onto the class itself. Members reached through
    ``extends`` are left to the declaration's ``extends`` clause, except for
    the static ``create`` factory, which is re-declared so that it returns
    the subclass.
    """

    def __init__(
        self,
        tree: NamespaceTree,
        registry: ClassRegistry,
        diagnostics: Diagnostics,
    ) -> None:
        self.tree = tree
        self.registry = registry
        self.diagnostics = diagnostics
        self._stack: list[Klass] = []

    def resolve_all(self, classes: Iterable[Klass]) -> None:
        """Resolve classes in the given (registration) order."""
        for klass in classes:
            self.resolve(klass)

    def resolve(self, klass: Klass) -> None:
        """Resolve one class; a no-op if it is already resolved."""
        if klass.state is ResolutionState.RESOLVED:
            return
        if klass.state is ResolutionState.RESOLVING:
            start = next(i for i, k in enumerate(self._stack) if k is klass)
            chain = [k.full_name for k in self._stack[start:]] + [klass.full_name]
            raise CyclicInheritanceError(chain)

        klass.state = ResolutionState.RESOLVING
        self._stack.append(klass)
        try:
            self._resolve(klass)
        except GenerationError:
            klass.state = ResolutionState.UNRESOLVED
            raise
        finally:
            self._stack.pop()
        klass.state = ResolutionState.RESOLVED

    def _resolve(self, klass: Klass) -> None:
        klass.is_namespace = self.tree.for_name(klass.full_name) is not None

        parent_name = klass.record.get("extends")
        if parent_name:
            self._resolve_extends(klass, str(parent_name))

        for mixin_name in klass.record.get("uses") or []:
            mixin = self.registry.lookup(
                str(mixin_name), allow_missing_namespace=True
            )
            if mixin is None:
                self.diagnostics.warn(
                    UNRESOLVED_MIXIN,
                    f"Can't find used class; klass={klass.full_name} "
                    f"mixin={mixin_name}",
                    subject=klass.full_name,
                )
                continue
            if mixin.state is ResolutionState.RESOLVING:
                # Includes a class that uses itself.
                self.diagnostics.warn(
                    CYCLIC_MIXIN,
                    f"Used class is still being resolved; klass={klass.full_name} "
                    f"mixin={mixin.full_name}",
                    subject=klass.full_name,
                )
                continue
            if any(ref.target is mixin for ref in klass.implements):
                continue
            klass.implements.append(ResolvedType(mixin))

        for ref in klass.implements:
            if ref.target is not None:
                self._merge_mixin(klass, ref.target)

    def _resolve_extends(self, klass: Klass, parent_name: str) -> None:
        parent = self.registry.lookup(parent_name, allow_missing_namespace=True)
        if parent is None:
            self.diagnostics.warn(
                UNRESOLVED_EXTENDS,
                f"Can't find extended class; child={klass.full_name} "
                f"parent={parent_name}",
                subject=klass.full_name,
            )
            return

        self.resolve(parent)
        klass.extends = parent

        parent_create = parent.members.get(CREATE_KEY)
        if parent_create is not None and CREATE_KEY not in klass.members:
            klass.members[CREATE_KEY] = parent_create.copy_to(klass)

    def _merge_mixin(self, klass: Klass, mixin: Klass) -> None:
        # The mixin's own members must be final before they are copied.
        self.resolve(mixin)

        for key, member in mixin.members.items():
            if member.private:
                continue
            existing = klass.members.get(key)
            if existing is None:
                klass.members[key] = member.copy_to(klass)
            elif existing.private:
                existing.private = False
                self.diagnostics.warn(
                    PRIVATE_OVERRIDE,
                    f"Setting private to false for {klass.full_name}#{key} "
                    "since it's required for implementation",
                    subject=klass.full_name,
                )
        logger.debug("Merged mixin %s into %s", mixin.full_name, klass.full_name)
