"""Command line entry point: lex, check and show a source file."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from cplus.lexer import Lexer, SourceFileError, format_tokens
from cplus.parser import ParseError, Parser
from cplus.syntax_tree import ASTBuilder

EXIT_FAILURE = 84

_RED = "\033[1;31m"
_YELLOW = "\033[0;33m"
_MAGENTA = "\033[0;35m"
_RESET = "\033[0m"


def _report(message: str, where: str) -> int:
    sys.stderr.write(
        f"{_RED}ERROR:{_RESET}\n"
        "\tASSERTION FAILED\n"
        f"{_MAGENTA}FUNCTION:{_RESET}\n\t({where})\n"
        f"{_YELLOW}TRACE_LOG:{_RESET}\n\t{message}\n"
    )
    return EXIT_FAILURE


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the compiler front end on the file named in ``argv``."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _report("USAGE: cplus <file.cp>", "main")

    try:
        lexer = Lexer.from_file(args[0])
    except SourceFileError as exc:
        return _report(str(exc), "read_source")

    tokens = lexer.tokenize()
    sys.stdout.write(format_tokens(tokens))

    try:
        Parser(tokens).parse()
    except ValueError:
        return _report("Tokens array cannot be empty", "parse")
    except ParseError as exc:
        for diagnostic in exc.diagnostics:
            sys.stderr.write(diagnostic.format() + "\n")
        return _report("Failed to parse program", "parse")

    ASTBuilder(tokens).show(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())