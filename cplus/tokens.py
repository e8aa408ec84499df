"""Token kinds, the token record and keyword lookup."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


class TokenKind(enum.Enum):
    """Every kind of token the lexer can produce."""

    EOF = enum.auto()
    ERROR = enum.auto()
    IDENT = enum.auto()
    INTEGER = enum.auto()
    FLOAT = enum.auto()
    STRING = enum.auto()

    DEF = enum.auto()
    MODULE = enum.auto()
    STRUCT = enum.auto()
    FOR = enum.auto()
    IN = enum.auto()
    FOREVER = enum.auto()
    BREAK = enum.auto()
    IF = enum.auto()
    ELSIF = enum.auto()
    ELSE = enum.auto()
    RETURN = enum.auto()
    CONST = enum.auto()
    DEFER = enum.auto()
    TRUE = enum.auto()
    FALSE = enum.auto()
    NULL = enum.auto()

    LBRACE = enum.auto()
    RBRACE = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    LBRACK = enum.auto()
    RBRACK = enum.auto()
    SEMI = enum.auto()
    COMMA = enum.auto()
    COLON = enum.auto()
    DOT = enum.auto()

    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    PERCENT = enum.auto()
    PLUSPLUS = enum.auto()
    MINUSMINUS = enum.auto()
    EQ = enum.auto()
    ASSIGN = enum.auto()
    NEQ = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    LE = enum.auto()
    GE = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    NOT = enum.auto()
    ARROW = enum.auto()
    AT = enum.auto()


@dataclass(frozen=True)
class Token:
    """A lexed token with its 1-based source position."""

    kind: TokenKind
    lexeme: Optional[str]
    line: int
    col: int


KEYWORDS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "def": TokenKind.DEF,
        "module": TokenKind.MODULE,
        "struct": TokenKind.STRUCT,
        "for": TokenKind.FOR,
        "in": TokenKind.IN,
        "forever": TokenKind.FOREVER,
        "break": TokenKind.BREAK,
        "if": TokenKind.IF,
        "elsif": TokenKind.ELSIF,
        "else": TokenKind.ELSE,
        "return": TokenKind.RETURN,
        "const": TokenKind.CONST,
        "defer": TokenKind.DEFER,
        "true": TokenKind.TRUE,
        "false": TokenKind.FALSE,
        "null": TokenKind.NULL,
    }
)

_SYMBOLS: Mapping[TokenKind, str] = MappingProxyType(
    {
        TokenKind.LBRACE: "{",
        TokenKind.RBRACE: "}",
        TokenKind.LPAREN: "(",
        TokenKind.RPAREN: ")",
        TokenKind.LBRACK: "[",
        TokenKind.RBRACK: "]",
        TokenKind.SEMI: ";",
        TokenKind.COMMA: ",",
        TokenKind.COLON: ":",
        TokenKind.DOT: ".",
        TokenKind.AT: "@",
        TokenKind.PLUS: "+",
        TokenKind.MINUS: "-",
        TokenKind.STAR: "*",
        TokenKind.SLASH: "/",
        TokenKind.PERCENT: "%",
        TokenKind.PLUSPLUS: "++",
        TokenKind.MINUSMINUS: "--",
        TokenKind.EQ: "==",
        TokenKind.ASSIGN: "=",
        TokenKind.NEQ: "!=",
        TokenKind.LT: "<",
        TokenKind.GT: ">",
        TokenKind.LE: "<=",
        TokenKind.GE: ">=",
        TokenKind.AND: "&&",
        TokenKind.OR: "||",
        TokenKind.NOT: "!",
        TokenKind.ARROW: "->",
    }
)


def lookup_keyword(text: str) -> TokenKind:
    """Return the keyword kind for ``text``, or IDENT if it is not a keyword."""
    return KEYWORDS.get(text, TokenKind.IDENT)


def kind_name(kind: object) -> str:
    """Return the display name of a token kind, as shown in token listings."""
    if not isinstance(kind, TokenKind):
        return "UNKNOWN"
    return _SYMBOLS.get(kind, kind.name)