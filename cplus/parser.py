"""Syntax checking of a token stream against the language grammar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from cplus.tokens import Token, TokenKind

_BINARY_OPERATORS = frozenset(
    {
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.EQ,
        TokenKind.NEQ,
        TokenKind.LT,
        TokenKind.GT,
        TokenKind.LE,
        TokenKind.GE,
        TokenKind.AND,
        TokenKind.OR,
    }
)

_RECOVERY_POINTS = (
    TokenKind.EOF,
    TokenKind.SEMI,
    TokenKind.DEF,
    TokenKind.MODULE,
    TokenKind.STRUCT,
)

_LITERALS = frozenset(
    {
        TokenKind.INTEGER,
        TokenKind.FLOAT,
        TokenKind.STRING,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.NULL,
    }
)


@dataclass(frozen=True)
class Diagnostic:
    """A parse error; ``line`` and ``col`` are None when it is at end of input."""

    message: str
    line: Optional[int] = None
    col: Optional[int] = None

    @property
    def at_end(self) -> bool:
        return self.line is None

    def format(self) -> str:
        """Render the diagnostic as a human-readable report."""
        if self.at_end:
            return f"PARSE ERROR at end of file: {self.message}"
        return f"PARSE ERROR:\n\t{self.message}\n\tAt line {self.line}, column {self.col}"


class ParseError(Exception):
    """Raised when a program fails to parse; holds every diagnostic found."""

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        self.diagnostics: Tuple[Diagnostic, ...] = tuple(diagnostics)
        super().__init__("Failed to parse program")

    def __str__(self) -> str:
        lines = ["Failed to parse program"]
        lines.extend(d.format() for d in self.diagnostics)
        return "\n".join(lines)


class Parser:
    """Recursive-descent checker that records errors and recovers where it can."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens: List[Token] = list(tokens)
        self.position = 0
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def parse(self) -> None:
        """Check the whole token stream; raise ParseError if anything was wrong."""
        if not self.tokens:
            raise ValueError("tokens cannot be empty")
        self.position = 0
        self.diagnostics = []
        self._program()
        if self.diagnostics:
            raise ParseError(self.diagnostics)

    # -- token helpers -------------------------------------------------

    def _current(self) -> Optional[Token]:
        if self.position >= len(self.tokens):
            return None
        return self.tokens[self.position]

    def _check(self, kind: TokenKind) -> bool:
        token = self._current()
        if token is None:
            return kind is TokenKind.EOF
        return token.kind is kind

    def _advance(self) -> None:
        if self.position < len(self.tokens):
            self.position += 1

    def _error(self, message: str) -> None:
        token = self._current()
        if token is None:
            self.diagnostics.append(Diagnostic(message))
        else:
            self.diagnostics.append(Diagnostic(message, token.line, token.col))

    def _consume(self, kind: TokenKind, message: str) -> None:
        if self._check(kind):
            self._advance()
        else:
            self._error(message)

    def _at_any(self, kinds: Iterable[TokenKind]) -> bool:
        return any(self._check(kind) for kind in kinds)

    # -- grammar -------------------------------------------------------

    def _program(self) -> None:
        while not self._check(TokenKind.EOF):
            token = self._current()
            if token is None:
                break
            if token.kind is TokenKind.MODULE:
                self._module()
            elif token.kind is TokenKind.DEF:
                self._function()
            elif token.kind is TokenKind.STRUCT:
                self._struct()
            else:
                self._statement()

            if self.had_error:
                while not self._at_any(_RECOVERY_POINTS):
                    self._advance()
                if self._check(TokenKind.SEMI):
                    self._advance()

    def _module(self) -> None:
        self._consume(TokenKind.MODULE, "Expected 'module'")
        self._consume(TokenKind.IDENT, "Expected module name")
        self._consume(TokenKind.LBRACE, "Expected '{'")
        while not self._check(TokenKind.EOF) and not self._check(TokenKind.RBRACE):
            token = self._current()
            if token is None:
                break
            if token.kind is TokenKind.STRUCT:
                self._struct()
            elif token.kind is TokenKind.DEF:
                self._function()
            else:
                self._statement()
        self._consume(TokenKind.RBRACE, "Expected '}'")

    def _struct(self) -> None:
        self._consume(TokenKind.STRUCT, "Expected 'struct'")
        self._consume(TokenKind.IDENT, "Expected struct name")
        self._consume(TokenKind.LBRACE, "Expected '{'")
        while not self._check(TokenKind.EOF) and not self._check(TokenKind.RBRACE):
            if self._check(TokenKind.DEF):
                self._function()
            elif self._check(TokenKind.IDENT):
                self._advance()
                self._consume(TokenKind.COLON, "Expected ':'")
                self._consume(TokenKind.IDENT, "Expected type")
                self._consume(TokenKind.SEMI, "Expected ';'")
            else:
                self._error("Expected field or method declaration")
                self._advance()
        self._consume(TokenKind.RBRACE, "Expected '}'")

    def _function(self) -> None:
        self._consume(TokenKind.DEF, "Expected 'def'")
        self._consume(TokenKind.IDENT, "Expected function name")
        self._consume(TokenKind.LPAREN, "Expected '('")

        while not self._check(TokenKind.EOF) and not self._check(TokenKind.RPAREN):
            if self._check(TokenKind.AT):
                # Auto-assigned struct parameter: @name
                self._advance()
                self._consume(TokenKind.IDENT, "Expected parameter name")
            else:
                self._consume(TokenKind.IDENT, "Expected parameter name")
                if self._check(TokenKind.COLON):
                    self._advance()
                    self._consume(TokenKind.IDENT, "Expected parameter type")

            if self._check(TokenKind.COMMA):
                self._advance()
            elif not self._check(TokenKind.RPAREN):
                self._error("Expected ',' or ')'")
                break

        self._consume(TokenKind.RPAREN, "Expected ')'")

        if self._check(TokenKind.ARROW):
            self._advance()
            if self._check(TokenKind.NULL):
                self._advance()
            else:
                self._consume(TokenKind.IDENT, "Expected return type")

        self._block()

    def _block(self) -> None:
        self._consume(TokenKind.LBRACE, "Expected '{'")
        while not self._check(TokenKind.EOF) and not self._check(TokenKind.RBRACE):
            self._statement()
        self._consume(TokenKind.RBRACE, "Expected '}'")

    def _call_arguments(self) -> None:
        while not self._check(TokenKind.RPAREN) and not self._check(TokenKind.EOF):
            self._expression()
            if self._check(TokenKind.COMMA):
                self._advance()
            elif not self._check(TokenKind.RPAREN):
                break
        self._consume(TokenKind.RPAREN, "Expected ')'")

    def _statement(self) -> None:
        token = self._current()
        if token is None:
            return
        kind = token.kind

        if kind is TokenKind.FOR:
            self._for_statement()
        elif kind is TokenKind.FOREVER:
            self._consume(TokenKind.FOREVER, "Expected 'forever'")
            self._block()
        elif kind is TokenKind.IF:
            self._if_statement()
        elif kind is TokenKind.RETURN:
            self._return_statement()
        elif kind is TokenKind.BREAK:
            self._advance()
            if self._check(TokenKind.IF):
                self._advance()
                self._expression()
            self._consume(TokenKind.SEMI, "Expected ';'")
        elif kind is TokenKind.PLUSPLUS:
            self._advance()
            self._consume(TokenKind.IDENT, "Expected identifier")
            self._consume(TokenKind.SEMI, "Expected ';'")
        elif kind is TokenKind.IDENT:
            self._advance()
            if self._check(TokenKind.ASSIGN):
                self._advance()
                self._expression()
            elif self._check(TokenKind.LPAREN):
                self._advance()
                self._call_arguments()
            self._consume(TokenKind.SEMI, "Expected ';'")
        elif kind is TokenKind.LBRACE:
            self._block()
        else:
            self._error("Unexpected token in statement")
            self._advance()

    def _for_statement(self) -> None:
        self._consume(TokenKind.FOR, "Expected 'for'")
        self._consume(TokenKind.IDENT, "Expected loop variable")
        self._consume(TokenKind.IN, "Expected 'in'")
        self._expression()
        self._block()

    def _if_statement(self) -> None:
        self._consume(TokenKind.IF, "Expected 'if'")
        self._expression()
        self._block()
        while self._check(TokenKind.ELSIF):
            self._advance()
            self._expression()
            self._block()
        if self._check(TokenKind.ELSE):
            self._advance()
            self._block()

    def _return_statement(self) -> None:
        self._consume(TokenKind.RETURN, "Expected 'return'")
        if not self._check(TokenKind.SEMI):
            self._expression()
        self._consume(TokenKind.SEMI, "Expected ';'")

    def _expression(self) -> None:
        token = self._current()
        if token is None:
            return

        if token.kind is TokenKind.IDENT:
            self._advance()
            while self._check(TokenKind.LPAREN) or self._check(TokenKind.DOT):
                if self._check(TokenKind.LPAREN):
                    self._advance()
                    self._call_arguments()
                else:
                    self._advance()
                    self._consume(TokenKind.IDENT, "Expected member name")
        elif token.kind in _LITERALS:
            self._advance()
        elif token.kind is TokenKind.LPAREN:
            self._advance()
            self._expression()
            self._consume(TokenKind.RPAREN, "Expected ')'")
        else:
            self._advance()

        token = self._current()
        if token is not None and token.kind in _BINARY_OPERATORS:
            self._advance()
            self._expression()


def parse(tokens: Iterable[Token]) -> None:
    """Check ``tokens``; raise ParseError on any syntax error."""
    Parser(tokens).parse()