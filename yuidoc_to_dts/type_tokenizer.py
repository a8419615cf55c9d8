"""Lexer for documentation type annotations."""

import re
from dataclasses import dataclass

NAME = "NAME"
LT = "LT"
GT = "GT"
COMMA = "COMMA"
BAR = "BAR"
ARRAY = "ARRAY"
ELLIPSIS = "ELLIPSIS"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
WS = "WS"
OTHER = "OTHER"

# Order matters: "[]" and "..." must win over OTHER.
_TOKEN_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (WS, re.compile(r"\s+")),
    (ELLIPSIS, re.compile(r"\.\.\.")),
    (ARRAY, re.compile(r"\[\]")),
    (NAME, re.compile(r"\*|[A-Za-z_$][A-Za-z0-9_$.]*\??")),
    (LT, re.compile(r"<")),
    (GT, re.compile(r">")),
    (COMMA, re.compile(r",")),
    (BAR, re.compile(r"\|")),
    (LPAREN, re.compile(r"\(")),
    (RPAREN, re.compile(r"\)")),
]


@dataclass(frozen=True)
class Token:
    """A lexical token with its offset in the source annotation."""

    kind: str
    text: str
    position: int


class TypeTokenizer:
    """Splits a type annotation such as ``Array<String, Number>|Foo...``."""

    def tokenize(self, text: str) -> list[Token]:
        """Return every token in ``text``; unknown characters become OTHER."""
        tokens = []
        i = 0
        n = len(text)
        while i < n:
            for kind, pattern in _TOKEN_PATTERNS:
                match = pattern.match(text, i)
                if match:
                    # A NAME never ends in a dot; "Foo..." is NAME + ELLIPSIS.
                    value = match.group(0)
                    if kind == NAME and value.endswith("."):
                        value = value.rstrip(".")
                    tokens.append(Token(kind, value, i))
                    i += len(value)
                    break
            else:
                tokens.append(Token(OTHER, text[i], i))
                i += 1
        return tokens


def has_ellipsis(text: str) -> bool:
    """Check whether an annotation carries a variadic ``...`` marker."""
    return any(tok.kind == ELLIPSIS for tok in TypeTokenizer().tokenize(text))
