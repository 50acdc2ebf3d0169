"""Syntax tree nodes for the Medi language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class BinaryOperator(Enum):
    """Binary operators, keyed by their source spelling."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    EQ = "=="
    NEQ = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    AND = "&&"
    OR = "||"
    ASSIGN = "="


def _as_tuple(node: object, name: str) -> None:
    object.__setattr__(node, name, tuple(getattr(node, name)))


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class IntLiteral:
    value: int


@dataclass(frozen=True)
class FloatLiteral:
    value: float


@dataclass(frozen=True)
class BoolLiteral:
    value: bool


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class BinaryExpression:
    left: "Expression"
    operator: BinaryOperator
    right: "Expression"


@dataclass(frozen=True)
class CallExpression:
    callee: "Expression"
    arguments: Tuple["Expression", ...] = ()

    def __post_init__(self) -> None:
        _as_tuple(self, "arguments")


@dataclass(frozen=True)
class MemberExpression:
    object: "Expression"
    property: str


@dataclass(frozen=True)
class HealthcareQuery:
    query_type: str
    arguments: Tuple["Expression", ...] = ()

    def __post_init__(self) -> None:
        _as_tuple(self, "arguments")


Literal = Union[IntLiteral, FloatLiteral, BoolLiteral, StringLiteral]

Expression = Union[
    Identifier,
    IntLiteral,
    FloatLiteral,
    BoolLiteral,
    StringLiteral,
    BinaryExpression,
    CallExpression,
    MemberExpression,
    HealthcareQuery,
]


@dataclass(frozen=True)
class LetStatement:
    name: str
    value: Expression


@dataclass(frozen=True)
class Assignment:
    target: Expression
    value: Expression


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression


@dataclass(frozen=True)
class Block:
    statements: Tuple["Statement", ...] = ()

    def __post_init__(self) -> None:
        _as_tuple(self, "statements")


@dataclass(frozen=True)
class IfStatement:
    condition: Expression
    then_branch: Block
    else_branch: Optional[Block] = None


@dataclass(frozen=True)
class WhileStatement:
    condition: Expression
    body: Block


@dataclass(frozen=True)
class ForStatement:
    var: str
    iter: Expression
    body: Block


@dataclass(frozen=True)
class MatchStatement:
    expr: Expression
    arms: Tuple[Tuple[Expression, Block], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "arms", tuple((pattern, body) for pattern, body in self.arms)
        )


@dataclass(frozen=True)
class ReturnStatement:
    value: Optional[Expression] = None


Statement = Union[
    LetStatement,
    Assignment,
    ExpressionStatement,
    Block,
    IfStatement,
    WhileStatement,
    ForStatement,
    MatchStatement,
    ReturnStatement,
]