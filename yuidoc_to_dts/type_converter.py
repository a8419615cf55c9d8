"""Lowering of documentation type annotations to TypeScript type expressions."""

import re
from typing import TYPE_CHECKING

from yuidoc_to_dts.diagnostics import UNPARSEABLE_TYPE, Diagnostics
from yuidoc_to_dts.errors import TypeSyntaxError
from yuidoc_to_dts.type_parser import (
    ArrayType,
    GenericType,
    TypeName,
    TypeNode,
    TypeParser,
    UnionType,
    VariadicType,
)

if TYPE_CHECKING:
    from yuidoc_to_dts.relative_name import RelativeNamer

CURLIES_RE = re.compile(r"^\{(.+)\}")
UNIVERSAL_TYPE = "any"


def split_union(type_text: str) -> list[str]:
    """Split a rendered type on top-level ``|`` only."""
    branches = []
    depth = 0
    start = 0
    for i, ch in enumerate(type_text):
        if ch in "<({[":
            depth += 1
        elif ch in ">)}]":
            depth -= 1
        elif ch == "|" and depth == 0:
            branches.append(type_text[start:i])
            start = i + 1
    branches.append(type_text[start:])
    return branches


class TypeConverter:
    """Converts annotations like ``Array<String,Number>|Ember.Foo``."""

    def __init__(
        self,
        type_aliases: dict[str, str],
        namer: "RelativeNamer | None" = None,
        diagnostics: Diagnostics | None = None,
        parser: TypeParser | None = None,
    ) -> None:
        """Initialize with the alias table and optional relative namer."""
        self.type_aliases = type_aliases
        self.namer = namer
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.parser = parser or TypeParser()
        self._reported: set[str] = set()

    def convert(self, annotation: str, relative_base: str | None = None) -> str:
        """Convert one annotation, relativising names against ``relative_base``."""
        text = str(annotation).strip()
        if not text:
            return UNIVERSAL_TYPE

        curlies = CURLIES_RE.match(text)
        if curlies:
            interior = curlies.group(1).strip()
            try:
                node = self.parser.parse(interior)
            except TypeSyntaxError:
                # Inline object shape such as {a: string}; keep it as written.
                return "{" + interior + "}"
            return self._render(node, relative_base)

        try:
            node = self.parser.parse(text)
        except TypeSyntaxError as exc:
            fallback = text.split()[0]
            if text not in self._reported:
                self._reported.add(text)
                self.diagnostics.warn(
                    UNPARSEABLE_TYPE,
                    f"Can't parse type annotation; type={text!r}, error={exc}",
                    subject=relative_base or "",
                )
            return fallback
        return self._render(node, relative_base)

    def _render(self, node: TypeNode, base: str | None) -> str:
        if isinstance(node, TypeName):
            name = self._relative(node.name, base)
            return self.type_aliases.get(name, name)
        if isinstance(node, GenericType):
            args = "|".join(self._render(arg, base) for arg in node.args)
            return f"{self._relative(node.base, base)}<{args}>"
        if isinstance(node, UnionType):
            return "|".join(self._render(b, base) for b in node.branches)
        if isinstance(node, ArrayType):
            element = self._render(node.element, base)
            if len(split_union(element)) > 1:
                element = f"({element})"
            return f"{element}[]"
        if isinstance(node, VariadicType):
            return self._render(node.inner, base)
        msg = f"Unknown type node: {node!r}"
        raise TypeError(msg)

    def _relative(self, name: str, base: str | None) -> str:
        if base and self.namer is not None:
            return self.namer.relative_name(name, base)
        return name
