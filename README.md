# cplus

Front end for the C+ toy language. It has three parts. A lexer turns `.cp`
source into tokens. A syntax checker reports parse errors with line and
column. A small command-line tool dumps what the other two found.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Command line

    cplus path/to/file.cp

The tool works in four steps:

1. It reads the file.
2. It prints every token as `[line:col]` followed by a tab and the kind name, for example `[1:1]	DEF`. Symbols are shown by their spelling, for example `{` or `->`.
3. It checks the program's syntax.
4. It prints a separator line, then `got: <lexeme>` for each token.

In these cases it writes an error report to standard error and exits with
status 84:

- no file is given;
- the file is missing, is not a regular file, or cannot be read as UTF-8;
- the file holds no tokens;
- the program does not parse.

When the program does not parse, the report lists every parse error with its
line and column.

## The language at a glance

    module geometry {
        struct Vec2 {
            x: float;
            y: float;

            def init(@x, @y) -> null {
            }
        }

        def add(a: int, b: int) -> int {
            return a + b;
        }
    }

    for i in 10 {
        print(i);
    }

    forever {
        break if done;
    }

    if x > 10 {
        print("big");
    } elsif x == 0 {
        print("zero");
    } else {
        print("other");
    }

Line comments start with `//`. Block comments are enclosed in `/* */`.

Strings are written in double quotes and accept these escapes:

- `\n`
- `\r`
- `\t`
- `\\`
- `\"`

An unterminated string becomes an `ERROR` token, and so does any character
the lexer does not know.

### Operators in expressions

The syntax checker accepts these binary operators in expressions:

- arithmetic: `+ - * /`
- comparison: `== != < > <= >=`
- logical: `&& ||`

The lexer also produces tokens for `%`, `!`, `--`, `[` and `]`. The checker
does not accept them inside expressions.

## Library use

    from cplus.lexer import Lexer, tokenize, format_tokens
    from cplus.parser import parse, ParseError

    tokens = tokenize('def main() -> null { print("hi"); }')
    print(format_tokens(tokens))

    try:
        parse(tokens)
    except ParseError as exc:
        for diagnostic in exc.diagnostics:
            print(diagnostic.format())

### `cplus.lexer`

- `Lexer(source)` scans a string.
- `Lexer.from_file(path)` builds a lexer over a file's contents. It raises `SourceFileError` when the path is not a readable regular file. `read_source(path)` does the reading on its own.
- `Lexer.tokenize()` returns the list of tokens. The list does not include an end-of-file token.

### `cplus.parser`

- `Parser(tokens).parse()` raises `ValueError` for an empty token list.
- It raises `ParseError` when the syntax is wrong. The `diagnostics` of a `ParseError` are `Diagnostic` records with `message`, `line` and `col`.

### `cplus.tokens`

This module holds `TokenKind`, `Token`, `lookup_keyword` and `kind_name`.

### `cplus.syntax_tree`

This module defines the node types `NodeType` and `ASTNode`, and the
operator enums `BinaryOperator` and `UnaryOperator`. `BinaryOperator.from_token`
maps a token kind to its operator.

`ASTBuilder(tokens).show(stream)` writes the collected tokens' lexemes to a
stream.

## What it does not do

- It does not build a syntax tree. The syntax checker only accepts or rejects a program, and `ASTBuilder` only holds and shows the tokens.
- There is no code generation, interpretation or execution of C+ programs.
- The lexer reads a word that begins with a digit as an identifier. It never produces `INTEGER` or `FLOAT` tokens, so `10` and `3.5` come out as `IDENT` tokens.