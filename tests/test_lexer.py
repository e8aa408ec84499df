import pytest

from cplus.lexer import Lexer, SourceFileError, format_tokens, read_source, tokenize
from cplus.tokens import TokenKind

SAMPLE = """module math {
    // a comment
    def add(a: int, b: int) -> int
    {
        /* block
           comment */
        return a + b;
    }
}
"""


def kinds(source):
    return [t.kind for t in tokenize(source)]


def test_function_header_kinds():
    assert kinds("def add(a: int) -> int { return a + b; }") == [
        TokenKind.DEF,
        TokenKind.IDENT,
        TokenKind.LPAREN,
        TokenKind.IDENT,
        TokenKind.COLON,
        TokenKind.IDENT,
        TokenKind.RPAREN,
        TokenKind.ARROW,
        TokenKind.IDENT,
        TokenKind.LBRACE,
        TokenKind.RETURN,
        TokenKind.IDENT,
        TokenKind.PLUS,
        TokenKind.IDENT,
        TokenKind.SEMI,
        TokenKind.RBRACE,
    ]


def test_first_token_starts_at_line_one_column_one():
    first = tokenize("def f")[0]
    assert (first.line, first.col) == (1, 1)


def test_positions_point_at_lexemes():
    lines = SAMPLE.split("\n")
    tokens = tokenize(SAMPLE)
    assert tokens
    for token in tokens:
        assert lines[token.line - 1][token.col - 1:].startswith(token.lexeme)


def test_positions_are_increasing():
    positions = [(t.line, t.col) for t in tokenize(SAMPLE)]
    assert positions == sorted(positions)
    assert len(set(positions)) == len(positions)


def test_comments_are_skipped():
    tokens = tokenize("// line\n/* block */ z")
    assert [(t.kind, t.lexeme) for t in tokens] == [(TokenKind.IDENT, "z")]


def test_unterminated_block_comment_ends_input():
    assert tokenize("a /* never closed b c") == tokenize("a")


def test_eof_is_not_included():
    assert tokenize("") == []
    assert tokenize("   \n\t\r ") == []


def test_string_escapes():
    tokens = tokenize('"a\\nb\\t\\"q\\\\"')
    assert len(tokens) == 1
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].lexeme == 'a\nb\t"q\\'


def test_unknown_escape_keeps_character():
    assert tokenize('"\\q"')[0].lexeme == "q"


def test_unterminated_string_is_error_token():
    tokens = tokenize('"abc')
    assert [(t.kind, t.lexeme) for t in tokens] == [(TokenKind.ERROR, "abc")]


def test_unexpected_character():
    tokens = tokenize("a $ b")
    assert [t.kind for t in tokens] == [TokenKind.IDENT, TokenKind.ERROR, TokenKind.IDENT]
    assert tokens[1].lexeme == "unexpected character '$'"


def test_single_ampersand_is_error():
    tokens = tokenize("&")
    assert tokens[0].kind is TokenKind.ERROR
    assert tokens[0].lexeme == "unexpected character '&'"


@pytest.mark.parametrize(
    "text, kind",
    [
        ("->", TokenKind.ARROW),
        ("++", TokenKind.PLUSPLUS),
        ("--", TokenKind.MINUSMINUS),
        ("==", TokenKind.EQ),
        ("!=", TokenKind.NEQ),
        ("<=", TokenKind.LE),
        (">=", TokenKind.GE),
        ("&&", TokenKind.AND),
        ("||", TokenKind.OR),
        ("=", TokenKind.ASSIGN),
        ("!", TokenKind.NOT),
        ("%", TokenKind.PERCENT),
        ("@", TokenKind.AT),
        ("[", TokenKind.LBRACK),
    ],
)
def test_operators(text, kind):
    tokens = tokenize(text)
    assert [(t.kind, t.lexeme) for t in tokens] == [(kind, text)]


def test_keywords_and_identifiers():
    assert kinds("forever for x_1 null") == [
        TokenKind.FOREVER,
        TokenKind.FOR,
        TokenKind.IDENT,
        TokenKind.NULL,
    ]


def test_digits_are_scanned_as_identifiers():
    tokens = tokenize("3.5")
    assert [(t.kind, t.lexeme) for t in tokens] == [
        (TokenKind.IDENT, "3"),
        (TokenKind.DOT, "."),
        (TokenKind.IDENT, "5"),
    ]


def test_nul_character_ends_input():
    assert tokenize("a\0b") == tokenize("a")


def test_tokenize_is_repeatable():
    lexer = Lexer(SAMPLE)
    first = lexer.tokenize()
    assert lexer.tokenize() == first
    assert lexer.tokens == first
    assert tokenize(SAMPLE) == first


def test_format_tokens():
    tokens = tokenize("def {")
    text = format_tokens(tokens)
    assert text.splitlines()[0] == "[1:1]\tDEF     "
    assert text.count("\n") == len(tokens)
    assert "\t{" in text


def test_read_source_missing(tmp_path):
    with pytest.raises(SourceFileError):
        read_source(tmp_path / "missing.cp")


def test_read_source_directory(tmp_path):
    with pytest.raises(SourceFileError):
        read_source(tmp_path)


def test_read_source_keeps_content(tmp_path):
    path = tmp_path / "prog.cp"
    path.write_bytes(b"a\r\nb")
    assert read_source(path) == "a\r\nb"


def test_from_file(tmp_path):
    path = tmp_path / "prog.cp"
    path.write_text(SAMPLE, encoding="utf-8")
    assert Lexer.from_file(path).tokenize() == tokenize(SAMPLE)