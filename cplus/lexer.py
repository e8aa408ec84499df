"""Turns source text into a list of tokens."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from cplus.tokens import Token, TokenKind, kind_name, lookup_keyword

_END = "\0"

_WHITESPACE = frozenset(" \t\r\n")

_TWO_CHAR = {
    "->": TokenKind.ARROW,
    "++": TokenKind.PLUSPLUS,
    "--": TokenKind.MINUSMINUS,
    "==": TokenKind.EQ,
    "!=": TokenKind.NEQ,
    "<=": TokenKind.LE,
    ">=": TokenKind.GE,
    "&&": TokenKind.AND,
    "||": TokenKind.OR,
}

_ONE_CHAR = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACK,
    "]": TokenKind.RBRACK,
    ";": TokenKind.SEMI,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ".": TokenKind.DOT,
    "@": TokenKind.AT,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "!": TokenKind.NOT,
    "=": TokenKind.ASSIGN,
}

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\", '"': '"'}


class SourceFileError(Exception):
    """Raised when a source file cannot be found or read."""


def _is_ident_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c == "_"


def read_source(path: Union[str, os.PathLike]) -> str:
    """Read a source file, checking that it exists and is a regular file."""
    file_path = Path(path)
    try:
        info = file_path.stat()
    except OSError as exc:
        raise SourceFileError(f"file does not exist: {file_path}") from exc
    if not (stat.S_ISREG(info.st_mode) or stat.S_ISLNK(info.st_mode)):
        raise SourceFileError(f"file is not a regular file or symlink: {file_path}")
    try:
        with open(file_path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceFileError(f"failed to read file: {file_path}") from exc


class Lexer:
    """Scans source text into tokens; lexical errors become ERROR tokens."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: List[Token] = []
        self._reset()

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "Lexer":
        """Create a lexer over the contents of the file at ``path``."""
        return cls(read_source(path))

    def tokenize(self) -> List[Token]:
        """Scan the whole source and return its tokens, without the final EOF."""
        self._reset()
        self.tokens = list(self._scan())
        return list(self.tokens)

    def _reset(self) -> None:
        self._pos = 0
        self._line = 1
        self._col = 1

    def _scan(self) -> Iterator[Token]:
        while True:
            token = self._next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        if index >= len(self.source):
            return _END
        return self.source[index]

    def _advance(self) -> str:
        if self._pos >= len(self.source):
            return _END
        c = self.source[self._pos]
        self._pos += 1
        if c == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return c

    def _skip_whitespace_and_comments(self) -> None:
        while True:
            c = self._peek()
            if c == _END:
                return
            if c in _WHITESPACE:
                self._advance()
                continue
            if c == "/" and self._peek(1) == "/":
                self._advance()
                self._advance()
                while self._peek() not in (_END, "\n"):
                    self._advance()
                continue
            if c == "/" and self._peek(1) == "*":
                self._advance()
                self._advance()
                while True:
                    if self._peek() == _END:
                        return
                    if self._peek() == "*" and self._peek(1) == "/":
                        self._advance()
                        self._advance()
                        break
                    self._advance()
                continue
            return

    def _identifier(self, line: int, col: int) -> Token:
        start = self._pos
        self._advance()
        while _is_ident_char(self._peek()):
            self._advance()
        text = self.source[start:self._pos]
        return Token(lookup_keyword(text), text, line, col)

    def _string(self, line: int, col: int) -> Token:
        self._advance()
        chars: List[str] = []
        while True:
            c = self._peek()
            if c == _END:
                return Token(TokenKind.ERROR, "".join(chars), line, col)
            if c == '"':
                self._advance()
                return Token(TokenKind.STRING, "".join(chars), line, col)
            if c == "\\":
                self._advance()
                escaped = self._peek()
                if escaped == _END:
                    continue
                self._advance()
                chars.append(_ESCAPES.get(escaped, escaped))
            else:
                self._advance()
                chars.append(c)

    def _next_token(self) -> Token:
        self._skip_whitespace_and_comments()

        line, col = self._line, self._col
        c = self._peek()

        if c == _END:
            return Token(TokenKind.EOF, None, line, col)
        # Digits start identifiers too, so numbers are scanned as identifiers.
        if _is_ident_char(c):
            return self._identifier(line, col)
        if c == '"':
            return self._string(line, col)

        pair = c + self._peek(1)
        if pair in _TWO_CHAR:
            self._advance()
            self._advance()
            return Token(_TWO_CHAR[pair], pair, line, col)

        self._advance()
        kind = _ONE_CHAR.get(c)
        if kind is None:
            return Token(TokenKind.ERROR, f"unexpected character '{c}'", line, col)
        return Token(kind, c, line, col)


def tokenize(source: str) -> List[Token]:
    """Return the tokens of ``source``."""
    return Lexer(source).tokenize()


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens one per line as ``[line:col]`` followed by the kind name."""
    return "".join(
        f"[{token.line}:{token.col}]\t{kind_name(token.kind):<8}\n" for token in tokens
    )