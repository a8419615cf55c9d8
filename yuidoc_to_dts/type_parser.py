"""Recursive-descent parser for documentation type annotations.

Grammar (whitespace is free inside ``<...>`` and ``(...)``; at the top level
it ends the expression, so trailing prose is dropped even after a ``|``)::

    expression := union
    union      := variadic ('|' variadic)*
    variadic   := '...' postfix | postfix '...'?
    postfix    := primary ('[]')*
    primary    := NAME ['<' union (',' union)* '>'] | '(' union ')'

Commas inside a generic argument list are treated like ``|``: the input format
uses them for both, and the arguments are later joined as one union.
"""

from dataclasses import dataclass

from yuidoc_to_dts.errors import TypeSyntaxError
from yuidoc_to_dts.type_tokenizer import (
    ARRAY,
    BAR,
    COMMA,
    ELLIPSIS,
    GT,
    LPAREN,
    LT,
    NAME,
    RPAREN,
    WS,
    Token,
    TypeTokenizer,
)


@dataclass(frozen=True)
class TypeName:
    name: str


@dataclass(frozen=True)
class GenericType:
    base: str
    args: tuple["TypeNode", ...]


@dataclass(frozen=True)
class UnionType:
    branches: tuple["TypeNode", ...]


@dataclass(frozen=True)
class ArrayType:
    element: "TypeNode"


@dataclass(frozen=True)
class VariadicType:
    inner: "TypeNode"


TypeNode = TypeName | GenericType | UnionType | ArrayType | VariadicType


class TypeParser:
    """Parses annotation text into a ``TypeNode`` tree."""

    def __init__(self, tokenizer: TypeTokenizer | None = None) -> None:
        """Initialize the parser with an optional tokenizer."""
        self.tokenizer = tokenizer or TypeTokenizer()

    def parse(self, text: str) -> TypeNode:
        """Parse the leading type expression of ``text``.

        Raises TypeSyntaxError if no expression can be read or if something
        other than whitespace-separated prose follows it.
        """
        stripped = text.strip()
        state = _ParseState(stripped, self.tokenizer.tokenize(stripped))
        node = state.parse_union()
        state.finish()
        return node


class _ParseState:
    def __init__(self, text: str, tokens: list[Token]) -> None:
        self.text = text
        self.tokens = tokens
        self.pos = 0

    def _peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _peek_kind(self) -> str | None:
        tok = self._peek()
        return tok.kind if tok else None

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _skip_ws(self) -> None:
        while self._peek_kind() == WS:
            self.pos += 1

    def _error(self, reason: str) -> TypeSyntaxError:
        tok = self._peek()
        position = tok.position if tok else len(self.text)
        return TypeSyntaxError(self.text, position, reason)

    def _expect(self, kind: str) -> Token:
        if self._peek_kind() != kind:
            raise self._error(f"expected {kind}")
        return self._advance()

    def parse_union(self, *, nested: bool = False) -> TypeNode:
        branches = [self.parse_variadic()]
        while True:
            if nested:
                self._skip_ws()
            if self._peek_kind() != BAR:
                break
            self._advance()
            if nested:
                self._skip_ws()
            elif self._peek_kind() in (WS, None):
                # "String| the name": a dangling bar before the description.
                break
            branches.append(self.parse_variadic())
        if len(branches) == 1:
            return branches[0]
        return UnionType(tuple(branches))

    def parse_variadic(self) -> TypeNode:
        if self._peek_kind() == ELLIPSIS:
            self._advance()
            return VariadicType(self.parse_postfix())
        node = self.parse_postfix()
        if self._peek_kind() == ELLIPSIS:
            self._advance()
            return VariadicType(node)
        return node

    def parse_postfix(self) -> TypeNode:
        node = self.parse_primary()
        while self._peek_kind() == ARRAY:
            self._advance()
            node = ArrayType(node)
        return node

    def parse_primary(self) -> TypeNode:
        kind = self._peek_kind()
        if kind == NAME:
            name = self._advance().text
            if self._peek_kind() != LT:
                return TypeName(name)
            self._advance()
            self._skip_ws()
            args = [self.parse_union(nested=True)]
            while True:
                self._skip_ws()
                if self._peek_kind() == COMMA:
                    self._advance()
                    self._skip_ws()
                    args.append(self.parse_union(nested=True))
                    continue
                self._expect(GT)
                return GenericType(name, tuple(args))
        if kind == LPAREN:
            self._advance()
            self._skip_ws()
            inner = self.parse_union(nested=True)
            self._skip_ws()
            self._expect(RPAREN)
            return inner
        raise self._error("expected a type")

    def finish(self) -> None:
        kind = self._peek_kind()
        if kind is not None and kind != WS:
            raise self._error("unexpected token")
