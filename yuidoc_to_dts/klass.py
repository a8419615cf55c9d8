"""Data model for documented classes and the types they implement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from yuidoc_to_dts.diagnostics import DUPLICATE_MEMBER

if TYPE_CHECKING:
    from collections.abc import Callable

    from yuidoc_to_dts.class_member import Member
    from yuidoc_to_dts.diagnostics import Diagnostics

STATIC_PREFIX = "static:"


class ResolutionState(Enum):
    """Progress of a class through the inheritance/mixin resolution pass."""

    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class ResolvedType:
    """An implemented type that is a registered class."""

    klass: "Klass"

    @property
    def target(self) -> "Klass | None":
        return self.klass

    def reference(self, relative: "Callable[[str, str], str]", base: str) -> str:
        """Render as seen from the class named ``base``."""
        return relative(self.klass.full_name, base)


@dataclass(frozen=True)
class NamedType:
    """An implemented type known only by its literal name, e.g. ``Promise<T>``."""

    text: str

    @property
    def target(self) -> "Klass | None":
        return None

    def reference(self, relative: "Callable[[str, str], str]", base: str) -> str:
        return self.text


TypeRef = ResolvedType | NamedType


class Klass:
    """A documented class, or a namespace documented as if it were one."""

    def __init__(
        self,
        name: str,
        full_name: str,
        record: dict[str, Any],
        *,
        built_in_types: "list[str] | tuple[str, ...]" = (),
        override: dict[str, Any] | None = None,
    ) -> None:
        """Build the class from its documentation record."""
        self.record = record
        self.name = name
        self.full_name = full_name
        self.built_in = full_name in built_in_types
        self.kind = "interface" if self.built_in else "class"
        # Prototype extensions; recorded but rendered like any other class.
        self.is_mixin = bool(record.get("extension_for"))
        self.private = record.get("access") == "private"
        self.description = str(record.get("description") or "")
        self.deprecated = bool(record.get("deprecated"))
        self.deprecation_message = str(record.get("deprecationMessage") or "")

        # Only an explicit extends/uses proves this is a class. Some documented
        # "classes" are really namespaces.
        self.is_true_class = bool(record.get("extends") or record.get("uses"))
        self.is_namespace = False

        self.extends: Klass | None = None
        self.implements: list[TypeRef] = []
        self.generics: str | None = None
        if override:
            self.generics = override.get("generics")
            self.implements.extend(
                NamedType(str(text)) for text in override.get("implements") or []
            )

        self.members: dict[str, Member] = {}
        self.state = ResolutionState.UNRESOLVED

    @property
    def resolved(self) -> bool:
        return self.state is ResolutionState.RESOLVED

    def add_member(self, member: "Member", diagnostics: "Diagnostics") -> bool:
        """Register a member; the first registration of a key wins."""
        if member.key in self.members:
            diagnostics.warn(
                DUPLICATE_MEMBER,
                f"Duplicate item for klass; klass={self.full_name}, item={member.key}",
                subject=self.full_name,
            )
            return False
        self.members[member.key] = member
        return True

    def effective_members(self) -> "dict[str, Member]":
        """Members including public ones inherited through ``extends``.

        Inherited entries are copies attributed to this class. The rendered
        output does not use these since the declaration ``extends`` clause
        already carries them.
        """
        result = dict(self.members)
        seen = {id(self)}
        parent = self.extends
        while parent is not None and id(parent) not in seen:
            seen.add(id(parent))
            for key, member in parent.members.items():
                if member.private or key in result:
                    continue
                result[key] = member.copy_to(self)
            parent = parent.extends
        return result

    def __repr__(self) -> str:
        return f"Klass({self.full_name!r})"
