"""Lexer, syntax checker and token dump tool for the C+ toy language."""

__version__ = "0.0.1"
__all__ = ["cli", "lexer", "parser", "syntax_tree", "tokens"]