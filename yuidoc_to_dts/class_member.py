"""Data model for class members (methods, properties, events) and parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from yuidoc_to_dts.errors import InvalidItemError
from yuidoc_to_dts.klass import STATIC_PREFIX
from yuidoc_to_dts.type_tokenizer import has_ellipsis

if TYPE_CHECKING:
    from yuidoc_to_dts.generation_context import GenerationContext
    from yuidoc_to_dts.klass import Klass

METHOD = "method"
PROPERTY = "property"
MEMBER_ITEM_TYPES = frozenset({"method", "property", "event"})


class Member:
    """A method or property signature owned by a class."""

    def __init__(
        self,
        record: dict[str, Any],
        klass: "Klass",
        context: "GenerationContext",
    ) -> None:
        """Build the member from its item record, converting types for ``klass``."""
        self.record = record
        self.klass = klass
        self.context = context
        self.name = str(record["name"])
        item_type = record.get("itemtype")
        # Events are callable hooks as far as the declarations are concerned.
        self.kind = METHOD if item_type == "event" else item_type
        self.is_static = bool(record.get("static"))
        self.private = record.get("access") == "private"
        self.description = str(record.get("description") or "")
        self.deprecated = bool(record.get("deprecated"))
        self.deprecation_message = str(record.get("deprecationMessage") or "")

        converter = context.converter
        raw_type = record.get("type")
        self.type = converter.convert(raw_type, klass.full_name) if raw_type else "any"

        self.params: list[Param] = []
        if record.get("params") is not None:
            if self.kind != METHOD:
                msg = f"Not a method but has params; name={self.name}, type={self.kind}"
                raise InvalidItemError(msg)
            self.params = [Param(p, self) for p in record["params"]]

        self.return_type: str | None = None
        ret = record.get("return")
        if isinstance(ret, dict):
            rtype = ret.get("type")
            self.return_type = (
                converter.convert(rtype, klass.full_name) if rtype else "void"
            )
        elif self.is_static and self.name == "create":
            # Factory methods return an instance of whichever class they sit on.
            self.return_type = klass.name
        elif self.kind == METHOD:
            self.return_type = "any"

    @property
    def key(self) -> str:
        """Registry key; statics and instance members never collide."""
        return f"{STATIC_PREFIX}{self.name}" if self.is_static else self.name

    @property
    def is_method(self) -> bool:
        return self.kind == METHOD

    @property
    def rest_index(self) -> int | None:
        """Position of the first rest parameter, if any."""
        for i, param in enumerate(self.params):
            if param.is_rest:
                return i
        return None

    def copy_to(self, klass: "Klass") -> "Member":
        """Rebuild this member as if it had been documented on ``klass``."""
        member = Member(self.record, klass, self.context)
        member.private = self.private
        return member

    def __repr__(self) -> str:
        return f"Member({self.klass.full_name}#{self.key})"


class Param:
    """One parameter of a method."""

    def __init__(self, record: dict[str, Any], member: Member) -> None:
        name = str(record.get("name") or "")
        self.is_rest = False
        if name.endswith("*"):
            name = name[:-1]
            self.is_rest = True

        reserved = member.context.config.get("reserved_param_names") or {}
        self.name = reserved.get(name, name)

        # The variadic marker sometimes lives in the type, e.g. "String...".
        raw_type = record.get("type")
        if raw_type and has_ellipsis(raw_type):
            self.is_rest = True

        self.type = (
            member.context.converter.convert(raw_type, member.klass.full_name)
            if raw_type
            else "any"
        )
        self.optional = bool(record.get("optional"))

    def __repr__(self) -> str:
        prefix = "..." if self.is_rest else ""
        return f"Param({prefix}{self.name}: {self.type})"
