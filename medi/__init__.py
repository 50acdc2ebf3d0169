"""Lexer, parser, syntax tree and expression type checker for the Medi language."""

__version__ = "0.1.0"
__all__ = ["ast", "env", "lexer", "parser", "type_checker", "types"]