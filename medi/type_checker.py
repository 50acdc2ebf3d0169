"""Type inference for Medi expressions."""

from __future__ import annotations

from medi.ast import (
    BinaryExpression,
    BinaryOperator,
    BoolLiteral,
    CallExpression,
    Expression,
    FloatLiteral,
    HealthcareQuery,
    Identifier,
    IntLiteral,
    MemberExpression,
    StringLiteral,
)
from medi.env import TypeEnv
from medi.types import (
    FunctionType,
    ListType,
    MediType,
    PrimitiveType,
    RecordType,
    StructType,
)

_ARITHMETIC = {
    BinaryOperator.ADD,
    BinaryOperator.SUB,
    BinaryOperator.MUL,
    BinaryOperator.DIV,
    BinaryOperator.MOD,
}
_NUMERIC = {PrimitiveType.INT, PrimitiveType.FLOAT}

_QUERY_TYPES: dict = {
    "PatientData": RecordType(
        [
            ("id", PrimitiveType.INT),
            ("name", PrimitiveType.STRING),
            ("age", PrimitiveType.INT),
            ("conditions", ListType(PrimitiveType.STRING)),
        ]
    ),
    "AppointmentData": ListType(
        RecordType(
            [
                ("appointment_id", PrimitiveType.INT),
                ("date", PrimitiveType.STRING),
                ("doctor", PrimitiveType.STRING),
            ]
        )
    ),
}


class TypeChecker:
    """Infers the types of expressions against a type environment."""

    def __init__(self, env: TypeEnv) -> None:
        self.env = env

    def check_expr(self, expr: Expression) -> MediType:
        """Return the inferred type of ``expr``; UNKNOWN where it cannot be typed."""
        match expr:
            case Identifier(name):
                found = self.env.get(name)
                return PrimitiveType.UNKNOWN if found is None else found
            case IntLiteral():
                return PrimitiveType.INT
            case FloatLiteral():
                return PrimitiveType.FLOAT
            case BoolLiteral():
                return PrimitiveType.BOOL
            case StringLiteral():
                return PrimitiveType.STRING
            case BinaryExpression(left, operator, right):
                return self._check_binary(left, operator, right)
            case CallExpression(callee, arguments):
                return self._check_call(callee, arguments)
            case MemberExpression(obj, prop):
                object_type = self.check_expr(obj)
                if isinstance(object_type, StructType):
                    return object_type.fields.get(prop, PrimitiveType.UNKNOWN)
                return PrimitiveType.UNKNOWN
            case HealthcareQuery(query_type, _):
                return _QUERY_TYPES.get(query_type, PrimitiveType.UNKNOWN)
        raise TypeError(f"not an expression: {expr!r}")

    def _check_binary(
        self, left: Expression, operator: BinaryOperator, right: Expression
    ) -> MediType:
        left_type = self.check_expr(left)
        right_type = self.check_expr(right)
        if operator in _ARITHMETIC:
            if left_type is PrimitiveType.INT and right_type is PrimitiveType.INT:
                return PrimitiveType.INT
            if left_type in _NUMERIC and right_type in _NUMERIC:
                return PrimitiveType.FLOAT
            return PrimitiveType.UNKNOWN
        if operator is BinaryOperator.ASSIGN:
            return left_type
        return PrimitiveType.BOOL

    def _check_call(self, callee: Expression, arguments: tuple) -> MediType:
        callee_type = self.check_expr(callee)
        if not isinstance(callee_type, FunctionType):
            return PrimitiveType.UNKNOWN
        if len(callee_type.params) != len(arguments):
            return PrimitiveType.UNKNOWN
        for argument, param_type in zip(arguments, callee_type.params):
            if self.check_expr(argument) != param_type:
                return PrimitiveType.UNKNOWN
        return callee_type.return_type