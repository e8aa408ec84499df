"""Syntax tree node definitions and the tree builder front end."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, TextIO

from cplus.tokens import Token, TokenKind


class NodeType(enum.Enum):
    """Every kind of node a syntax tree can hold."""

    PROGRAM = enum.auto()
    MODULE = enum.auto()
    FUNCTION = enum.auto()
    STRUCT = enum.auto()
    PARAMETER = enum.auto()
    FIELD = enum.auto()
    BLOCK = enum.auto()
    IF_STMT = enum.auto()
    FOR_STMT = enum.auto()
    FOREVER_STMT = enum.auto()
    RETURN_STMT = enum.auto()
    BREAK_STMT = enum.auto()
    EXPR_STMT = enum.auto()
    ASSIGNMENT = enum.auto()
    FUNCTION_CALL = enum.auto()
    BINARY_OP = enum.auto()
    UNARY_OP = enum.auto()
    MEMBER_ACCESS = enum.auto()
    IDENTIFIER = enum.auto()
    LITERAL_INT = enum.auto()
    LITERAL_FLOAT = enum.auto()
    LITERAL_STRING = enum.auto()
    LITERAL_BOOL = enum.auto()
    LITERAL_NULL = enum.auto()


class BinaryOperator(enum.Enum):
    """Binary operators, valued by their source spelling."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    NEQ = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    AND = "&&"
    OR = "||"

    @classmethod
    def from_token(cls, kind: TokenKind) -> "BinaryOperator":
        """Return the operator a token kind stands for; ValueError if none."""
        try:
            return _BINARY_FROM_TOKEN[kind]
        except KeyError:
            raise ValueError(f"not a binary operator token: {kind!r}") from None


_BINARY_FROM_TOKEN: Dict[TokenKind, BinaryOperator] = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MINUS: BinaryOperator.SUB,
    TokenKind.STAR: BinaryOperator.MUL,
    TokenKind.SLASH: BinaryOperator.DIV,
    TokenKind.EQ: BinaryOperator.EQ,
    TokenKind.NEQ: BinaryOperator.NEQ,
    TokenKind.LT: BinaryOperator.LT,
    TokenKind.GT: BinaryOperator.GT,
    TokenKind.LE: BinaryOperator.LE,
    TokenKind.GE: BinaryOperator.GE,
    TokenKind.AND: BinaryOperator.AND,
    TokenKind.OR: BinaryOperator.OR,
}


class UnaryOperator(enum.Enum):
    """Unary operators, valued by their source spelling."""

    MINUS = "-"
    NOT = "!"
    PLUSPLUS = "++"
    MINUSMINUS = "--"


@dataclass
class ASTNode:
    """A syntax tree node: its type, position and type-specific attributes."""

    type: NodeType
    line: int = 0
    column: int = 0
    data: Dict[str, Any] = field(default_factory=dict)


class ASTBuilder:
    """Holds the token stream a syntax tree is built from."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens: List[Token] = list(tokens)
        self.nodes: List[ASTNode] = []

    def show(self, stream: Optional[TextIO] = None) -> None:
        """Write a separator line and then each token's lexeme."""
        out = sys.stdout if stream is None else stream
        out.write("________________________\n")
        for token in self.tokens:
            out.write(f"got: {token.lexeme}\n")