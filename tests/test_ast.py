import dataclasses

import pytest

from medi.ast import (
    Assignment,
    BinaryExpression,
    BinaryOperator,
    Block,
    BoolLiteral,
    CallExpression,
    ExpressionStatement,
    ForStatement,
    HealthcareQuery,
    Identifier,
    IfStatement,
    IntLiteral,
    LetStatement,
    MatchStatement,
    MemberExpression,
    ReturnStatement,
    StringLiteral,
    WhileStatement,
)


@pytest.mark.parametrize(
    "symbol, op",
    [
        ("+", BinaryOperator.ADD),
        ("==", BinaryOperator.EQ),
        ("<=", BinaryOperator.LE),
        ("&&", BinaryOperator.AND),
        ("||", BinaryOperator.OR),
        ("=", BinaryOperator.ASSIGN),
    ],
)
def test_operator_from_symbol(symbol, op):
    assert BinaryOperator(symbol) is op


@pytest.mark.parametrize(
    "symbol",
    ["+", "-", "*", "/", "%", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "="],
)
def test_every_symbol_round_trips(symbol):
    op = BinaryOperator(symbol)
    assert op.value == symbol


def test_unknown_symbol_is_rejected():
    with pytest.raises(ValueError):
        BinaryOperator("**")


def test_call_arguments_become_tuple():
    call = CallExpression(Identifier("foo"), [Identifier("bar"), IntLiteral(42)])
    assert call.arguments == (Identifier("bar"), IntLiteral(42))
    assert call == CallExpression(Identifier("foo"), (Identifier("bar"), IntLiteral(42)))


def test_healthcare_query_equality():
    a = HealthcareQuery("fhir_query", [StringLiteral("Patient")])
    b = HealthcareQuery("fhir_query", (StringLiteral("Patient"),))
    assert a == b
    assert hash(a) == hash(b)


def test_nested_member_expression():
    inner = MemberExpression(Identifier("patient"), "name")
    outer = MemberExpression(inner, "first")
    assert outer.object.object == Identifier("patient")
    assert outer.property == "first"


def test_nodes_are_frozen():
    node = Identifier("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.name = "y"
    assert node.name == "x"


def test_block_statements_tuple_and_hashable():
    block = Block([LetStatement("x", IntLiteral(1)), Assignment(Identifier("x"), IntLiteral(2))])
    assert len(block.statements) == 2
    assert block in {Block(list(block.statements))}


def test_if_defaults_to_no_else():
    node = IfStatement(BoolLiteral(True), Block())
    assert node.else_branch is None
    assert node.then_branch.statements == ()


def test_return_defaults_to_no_value():
    assert ReturnStatement().value is None
    assert ReturnStatement(IntLiteral(42)).value == IntLiteral(42)


def test_match_arms_normalised():
    arms = [[IntLiteral(1), Block()], (IntLiteral(2), Block())]
    node = MatchStatement(Identifier("x"), arms)
    assert node.arms == ((IntLiteral(1), Block()), (IntLiteral(2), Block()))


def test_loops_and_expression_statement():
    cond = BinaryExpression(Identifier("x"), BinaryOperator.LT, IntLiteral(10))
    loop = WhileStatement(cond, Block([ExpressionStatement(Identifier("x"))]))
    assert loop.condition.operator is BinaryOperator.LT
    each = ForStatement("i", Identifier("patients"), Block())
    assert each.var == "i"
    assert each.iter == Identifier("patients")


def test_different_literal_kinds_differ():
    assert IntLiteral(1) != BoolLiteral(True)