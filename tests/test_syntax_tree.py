import io

import pytest

from cplus.lexer import tokenize
from cplus.syntax_tree import (
    ASTBuilder,
    ASTNode,
    BinaryOperator,
    NodeType,
    UnaryOperator,
)
from cplus.tokens import TokenKind, kind_name


def test_from_token_plus_is_add():
    assert BinaryOperator.from_token(TokenKind.PLUS) is BinaryOperator.ADD


def test_from_token_rejects_non_operator():
    with pytest.raises(ValueError):
        BinaryOperator.from_token(TokenKind.IDENT)


def test_from_token_rejects_assign():
    with pytest.raises(ValueError):
        BinaryOperator.from_token(TokenKind.ASSIGN)


@pytest.mark.parametrize(
    "kind",
    [
        TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH,
        TokenKind.EQ, TokenKind.NEQ, TokenKind.LT, TokenKind.GT,
        TokenKind.LE, TokenKind.GE, TokenKind.AND, TokenKind.OR,
    ],
)
def test_operator_spelling_matches_token_name(kind):
    assert BinaryOperator.from_token(kind).value == kind_name(kind)


def test_every_binary_operator_reachable_from_a_token():
    ops = {
        BinaryOperator.from_token(kind)
        for kind in TokenKind
        if kind_name(kind) in {op.value for op in BinaryOperator}
        and kind is not TokenKind.ASSIGN
    }
    assert ops == set(BinaryOperator)


def test_unary_operator_spellings():
    assert UnaryOperator("++") is UnaryOperator.PLUSPLUS
    assert UnaryOperator("!") is UnaryOperator.NOT


def test_node_defaults():
    node = ASTNode(NodeType.IDENTIFIER)
    assert node.line == 0
    assert node.column == 0
    assert node.data == {}


def test_node_data_not_shared():
    a = ASTNode(NodeType.BLOCK)
    b = ASTNode(NodeType.BLOCK)
    a.data["statements"] = []
    assert b.data == {}


def test_builder_keeps_tokens_and_starts_empty():
    tokens = tokenize("x = 1;")
    builder = ASTBuilder(tokens)
    assert builder.tokens == tokens
    assert builder.nodes == []


def test_show_lists_lexemes():
    builder = ASTBuilder(tokenize('print("hi");'))
    out = io.StringIO()
    builder.show(out)
    lines = out.getvalue().splitlines()
    assert set(lines[0]) == {"_"}
    assert lines[1:] == ["got: print", "got: (", "got: hi", "got: )", "got: ;"]


def test_show_with_no_tokens_writes_only_separator():
    out = io.StringIO()
    ASTBuilder([]).show(out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert set(lines[0]) == {"_"}


def test_show_defaults_to_stdout(capsys):
    ASTBuilder(tokenize("a;")).show()
    captured = capsys.readouterr().out.splitlines()
    assert captured[1:] == ["got: a", "got: ;"]