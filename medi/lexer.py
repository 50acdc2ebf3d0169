"""Tokenizer for Medi source text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional


class TokenKind(Enum):
    PATIENT = auto()
    OBSERVATION = auto()
    MEDICATION = auto()
    FHIR_QUERY = auto()
    KAPLAN_MEIER = auto()
    REGULATE = auto()
    REPORT = auto()
    LET = auto()
    FN = auto()
    TRUE = auto()
    FALSE = auto()
    IDENTIFIER = auto()
    INT_LITERAL = auto()
    STRING_LITERAL = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    ASSIGN = auto()
    EQ_EQ = auto()
    NEQ = auto()
    LT = auto()
    GT = auto()
    LE = auto()
    GE = auto()
    AND_AND = auto()
    OR_OR = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    COMMA = auto()
    SEMICOLON = auto()
    DOT = auto()
    ERROR = auto()


@dataclass(frozen=True)
class Token:
    """A lexed token; ``value`` holds the integer of an int literal."""

    kind: TokenKind
    text: str
    start: int
    value: Optional[int] = None


_KEYWORDS = {
    "patient": TokenKind.PATIENT,
    "observation": TokenKind.OBSERVATION,
    "medication": TokenKind.MEDICATION,
    "fhir_query": TokenKind.FHIR_QUERY,
    "kaplan_meier": TokenKind.KAPLAN_MEIER,
    "regulate": TokenKind.REGULATE,
    "report": TokenKind.REPORT,
    "let": TokenKind.LET,
    "fn": TokenKind.FN,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

# Two-character symbols come first so the longest match wins.
_SYMBOLS = {
    "==": TokenKind.EQ_EQ,
    "!=": TokenKind.NEQ,
    "<=": TokenKind.LE,
    ">=": TokenKind.GE,
    "&&": TokenKind.AND_AND,
    "||": TokenKind.OR_OR,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "=": TokenKind.ASSIGN,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ".": TokenKind.DOT,
}

_WHITESPACE = re.compile(r"[ \t\n\r]+")
_SYMBOL_ALTERNATIVES = "|".join(re.escape(s) for s in _SYMBOLS)
_LEXEME_PATTERN = re.compile(
    r"(?P<ident>[a-zA-Z_][a-zA-Z0-9_]*)"
    r"|(?P<int>[0-9]+)"
    r'|(?P<string>"[^"]*")'
    r"|(?P<symbol>" + _SYMBOL_ALTERNATIVES + ")"
)

_INT_MAX = 2**63 - 1


def tokenize(source: str) -> Iterator[Token]:
    """Yield tokens from ``source``; unrecognised input yields ERROR tokens."""
    pos = 0
    end = len(source)
    while pos < end:
        space = _WHITESPACE.match(source, pos)
        if space:
            pos = space.end()
            continue
        match = _LEXEME_PATTERN.match(source, pos)
        if match is None:
            yield Token(TokenKind.ERROR, source[pos], pos)
            pos += 1
            continue
        text = match.group()
        group = match.lastgroup
        if group == "ident":
            yield Token(_KEYWORDS.get(text, TokenKind.IDENTIFIER), text, pos)
        elif group == "int":
            number = int(text)
            if number > _INT_MAX:
                yield Token(TokenKind.ERROR, text, pos)
            else:
                yield Token(TokenKind.INT_LITERAL, text, pos, number)
        elif group == "string":
            yield Token(TokenKind.STRING_LITERAL, text, pos)
        else:
            yield Token(_SYMBOLS[text], text, pos)
        pos = match.end()


def token_kinds(source: str) -> List[TokenKind]:
    """Return just the kinds of the tokens in ``source``."""
    return [item.kind for item in tokenize(source)]