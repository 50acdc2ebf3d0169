"""Recursive-descent parser turning Medi source text into syntax trees.

Every public function returns the parsed value together with the text that
was left unconsumed, so callers can decide whether trailing input matters.
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Tuple, TypeVar

from medi.ast import (
    Assignment,
    BinaryExpression,
    BinaryOperator,
    Block,
    BoolLiteral,
    CallExpression,
    Expression,
    ExpressionStatement,
    FloatLiteral,
    ForStatement,
    HealthcareQuery,
    Identifier,
    IfStatement,
    IntLiteral,
    LetStatement,
    MatchStatement,
    MemberExpression,
    ReturnStatement,
    Statement,
    StringLiteral,
    WhileStatement,
)

T = TypeVar("T")


class ParseError(ValueError):
    """Raised when input cannot be parsed.

    ``fatal`` marks errors that stop all alternatives, such as a malformed
    match arm; other errors only mean that one alternative did not apply.
    """

    def __init__(self, message: str, position: int, fatal: bool = False) -> None:
        super().__init__(f"{message} at offset {position}")
        self.message = message
        self.position = position
        self.fatal = fatal


_WHITESPACE = " \t\r\n"
_I64_MAX = 2**63 - 1

_DIGITS = re.compile(r"[0-9]+")
_FLOAT = re.compile(r"[0-9]+\.[0-9]+")
_NAME = re.compile(r"[A-Za-z_]\w*")
_STRING = re.compile(r'"([^"]+)"')

# Longer spellings that share a prefix come after the shorter ones only where
# the shorter one cannot be a prefix of them ("=" is tried last).
_OPERATORS = (
    ("+", BinaryOperator.ADD),
    ("-", BinaryOperator.SUB),
    ("*", BinaryOperator.MUL),
    ("/", BinaryOperator.DIV),
    ("%", BinaryOperator.MOD),
    ("==", BinaryOperator.EQ),
    ("!=", BinaryOperator.NEQ),
    ("<=", BinaryOperator.LE),
    (">=", BinaryOperator.GE),
    ("<", BinaryOperator.LT),
    (">", BinaryOperator.GT),
    ("&&", BinaryOperator.AND),
    ("||", BinaryOperator.OR),
    ("=", BinaryOperator.ASSIGN),
)

_PRECEDENCE = {
    BinaryOperator.ASSIGN: 0,
    BinaryOperator.OR: 1,
    BinaryOperator.AND: 2,
    BinaryOperator.EQ: 3,
    BinaryOperator.NEQ: 3,
    BinaryOperator.LT: 4,
    BinaryOperator.GT: 4,
    BinaryOperator.LE: 4,
    BinaryOperator.GE: 4,
    BinaryOperator.ADD: 5,
    BinaryOperator.SUB: 5,
    BinaryOperator.MUL: 6,
    BinaryOperator.DIV: 6,
    BinaryOperator.MOD: 6,
}

_HEALTHCARE_QUERIES = frozenset({"fhir_query", "kaplan_meier", "regulate", "report"})

_Result = Tuple[T, int]


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text

    # ---- helpers -------------------------------------------------------

    def _skip_ws(self, pos: int) -> int:
        end = len(self.text)
        while pos < end and self.text[pos] in _WHITESPACE:
            pos += 1
        return pos

    def _literal(self, pos: int, word: str) -> Optional[int]:
        """Skip whitespace and match ``word``; return the end or None."""
        pos = self._skip_ws(pos)
        if self.text.startswith(word, pos):
            return pos + len(word)
        return None

    def _expect(self, pos: int, word: str) -> int:
        end = self._literal(pos, word)
        if end is None:
            raise ParseError(f"expected {word!r}", self._skip_ws(pos))
        return end

    @staticmethod
    def _attempt(parser: Callable[[int], _Result], pos: int) -> Optional[_Result]:
        try:
            return parser(pos)
        except ParseError as error:
            if error.fatal:
                raise
            return None

    def _first_of(self, pos: int, what: str, *parsers: Callable[[int], _Result]):
        for parser in parsers:
            result = self._attempt(parser, pos)
            if result is not None:
                return result
        raise ParseError(f"expected {what}", self._skip_ws(pos))

    def _many(self, parser: Callable[[int], _Result], pos: int) -> _Result:
        items = []
        while (result := self._attempt(parser, pos)) is not None:
            item, pos = result
            items.append(item)
        return items, pos

    def _match(self, pattern: "re.Pattern[str]", pos: int, what: str):
        pos = self._skip_ws(pos)
        found = pattern.match(self.text, pos)
        if found is None:
            raise ParseError(f"expected {what}", pos)
        return found

    # ---- expressions ---------------------------------------------------

    def name(self, pos: int) -> _Result:
        found = self._match(_NAME, pos, "identifier")
        return found.group(), found.end()

    def identifier(self, pos: int) -> _Result:
        name, pos = self.name(pos)
        return Identifier(name), pos

    def int_literal(self, pos: int) -> _Result:
        found = self._match(_DIGITS, pos, "integer")
        value = int(found.group())
        if value > _I64_MAX:
            raise ParseError("integer out of range", found.start())
        return IntLiteral(value), found.end()

    def float_literal(self, pos: int) -> _Result:
        found = self._match(_FLOAT, pos, "float")
        return FloatLiteral(float(found.group())), found.end()

    def string_literal(self, pos: int) -> _Result:
        found = self._match(_STRING, pos, "string")
        return StringLiteral(found.group(1)), found.end()

    def bool_literal(self, pos: int) -> _Result:
        for word, value in (("true", True), ("false", False)):
            end = self._literal(pos, word)
            if end is not None:
                return BoolLiteral(value), end
        raise ParseError("expected boolean", self._skip_ws(pos))

    def paren(self, pos: int) -> _Result:
        pos = self._expect(pos, "(")
        expr, pos = self.expression(pos)
        return expr, self._expect(pos, ")")

    def call_args(self, pos: int) -> _Result:
        pos = self._expect(pos, "(")
        args: List[Expression] = []
        first = self._attempt(self.expression, pos)
        if first is not None:
            arg, pos = first
            args.append(arg)
            while (after_sep := self._literal(pos, ",")) is not None:
                item = self._attempt(self.expression, after_sep)
                if item is None:
                    break
                arg, pos = item
                args.append(arg)
        return args, self._expect(pos, ")")

    def member(self, pos: int) -> _Result:
        expr, pos = self._first_of(
            pos,
            "expression",
            self.bool_literal,
            self.float_literal,
            self.string_literal,
            self.int_literal,
            self.identifier,
            self.paren,
        )
        while True:
            call = self._attempt(self.call_args, pos)
            if call is not None:
                args, pos = call
                if isinstance(expr, Identifier) and expr.name in _HEALTHCARE_QUERIES:
                    expr = HealthcareQuery(expr.name, args)
                else:
                    expr = CallExpression(expr, args)
                continue
            dot = self._literal(pos, ".")
            if dot is None:
                break
            prop = self._attempt(self.name, dot)
            if prop is None:
                break
            name, pos = prop
            expr = MemberExpression(expr, name)
        return expr, pos

    def operator(self, pos: int) -> Optional[_Result]:
        pos = self._skip_ws(pos)
        for spelling, op in _OPERATORS:
            if self.text.startswith(spelling, pos):
                return op, pos + len(spelling)
        return None

    def binary(self, pos: int, min_prec: int) -> _Result:
        lhs, pos = self.member(pos)
        while (found := self.operator(pos)) is not None:
            op, after = found
            prec = _PRECEDENCE[op]
            if prec < min_prec:
                break
            rhs, pos = self.binary(after, prec + 1)
            lhs = BinaryExpression(lhs, op, rhs)
        return lhs, pos

    def expression(self, pos: int) -> _Result:
        return self.binary(pos, 0)

    # ---- statements ----------------------------------------------------

    def let_statement(self, pos: int) -> _Result:
        pos = self._expect(pos, "let")
        name, pos = self.name(pos)
        pos = self._expect(pos, "=")
        value, pos = self.expression(pos)
        return LetStatement(name, value), self._expect(pos, ";")

    def assignment(self, pos: int) -> _Result:
        target, pos = self.member(pos)
        pos = self._expect(pos, "=")
        value, pos = self.expression(pos)
        return Assignment(target, value), self._expect(pos, ";")

    def expression_statement(self, pos: int) -> _Result:
        expr, pos = self.expression(pos)
        return ExpressionStatement(expr), self._expect(pos, ";")

    def block(self, pos: int) -> _Result:
        pos = self._expect(pos, "{")
        statements, pos = self._many(self.statement, pos)
        return Block(statements), self._expect(pos, "}")

    def _condition(self, pos: int) -> _Result:
        pos = self._expect(pos, "(")
        cond, pos = self.expression(pos)
        return cond, self._expect(pos, ")")

    def if_statement(self, pos: int) -> _Result:
        pos = self._expect(pos, "if")
        cond, pos = self._condition(pos)
        then_branch, pos = self.block(pos)
        else_branch = None
        after_else = self._literal(pos, "else")
        if after_else is not None:
            else_branch, pos = self.block(after_else)
        return IfStatement(cond, then_branch, else_branch), pos

    def while_statement(self, pos: int) -> _Result:
        pos = self._expect(pos, "while")
        cond, pos = self._condition(pos)
        body, pos = self.block(pos)
        return WhileStatement(cond, body), pos

    def for_statement(self, pos: int) -> _Result:
        pos = self._expect(pos, "for")
        var, pos = self.name(pos)
        pos = self._expect(pos, "in")
        iterable, pos = self.expression(pos)
        body, pos = self.block(pos)
        return ForStatement(var, iterable, body), pos

    def pattern(self, pos: int) -> _Result:
        return self._first_of(
            pos,
            "pattern",
            self.bool_literal,
            self.float_literal,
            self.int_literal,
            self.string_literal,
            self.identifier,
        )

    def match_statement(self, pos: int) -> _Result:
        pos = self._expect(pos, "match")
        subject, pos = self.expression(pos)
        pos = self._expect(pos, "{")
        arms = []
        while True:
            pos = self._skip_ws(pos)
            close = self._literal(pos, "}")
            if close is not None:
                pos = close
                break
            found = self._attempt(self.pattern, pos)
            if found is None:
                raise ParseError("expected match pattern", pos, fatal=True)
            pattern, pos = found
            pos = self._expect(pos, "=>")
            body, pos = self.block(pos)
            arms.append((pattern, body))
        return MatchStatement(subject, arms), pos

    def return_statement(self, pos: int) -> _Result:
        pos = self._expect(pos, "return")
        value = None
        found = self._attempt(self.expression, pos)
        if found is not None:
            value, pos = found
        return ReturnStatement(value), self._expect(pos, ";")

    def statement(self, pos: int) -> _Result:
        return self._first_of(
            self._skip_ws(pos),
            "statement",
            self.let_statement,
            self.if_statement,
            self.while_statement,
            self.for_statement,
            self.match_statement,
            self.return_statement,
            self.block,
            self.assignment,
            self.expression_statement,
        )

    def program(self, pos: int) -> _Result:
        return self._many(self.statement, pos)


def parse_expression(text: str) -> Tuple[Expression, str]:
    """Parse one expression; return it with the unconsumed rest of ``text``."""
    expr, pos = _Parser(text).expression(0)
    return expr, text[pos:]


def parse_statement(text: str) -> Tuple[Statement, str]:
    """Parse one statement; return it with the unconsumed rest of ``text``."""
    stmt, pos = _Parser(text).statement(0)
    return stmt, text[pos:]


def parse_block(text: str) -> Tuple[Block, str]:
    """Parse a braced block; return it with the unconsumed rest of ``text``."""
    block, pos = _Parser(text).block(0)
    return block, text[pos:]


def parse_program(text: str) -> Tuple[List[Statement], str]:
    """Parse statements until one fails; return them with the rest of ``text``.

    Only a fatal error, such as a malformed match arm, raises ParseError.
    """
    statements, pos = _Parser(text).program(0)
    return statements, text[pos:]