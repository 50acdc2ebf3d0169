# medi

Front-end tools for Medi, a small scripting language for healthcare
workflows. The package provides:

- `medi.lexer` – `tokenize(source)` yields `Token` objects (`kind`, `text`,
  `start`, and `value` for integer literals); `token_kinds(source)` returns
  just their `TokenKind`s. Healthcare keywords such as `patient`,
  `observation`, `medication`, `fhir_query` and `kaplan_meier` get their own
  kinds; characters that match nothing become `TokenKind.ERROR` tokens.
- `medi.parser` – `parse_expression`, `parse_statement`, `parse_block` and
  `parse_program` turn text into syntax trees. Statements covered are `let`,
  assignment, `if`/`else`, `while`, `for … in`, `match`, `return`, blocks and
  expression statements.
- `medi.ast` – the frozen dataclasses of the syntax tree (`Identifier`,
  `IntLiteral`, `BinaryExpression`, `CallExpression`, `MemberExpression`,
  `HealthcareQuery`, `LetStatement`, `IfStatement`, `MatchStatement`, …) and
  the `BinaryOperator` enum.
- `medi.types` – type representations: `PrimitiveType`, `StructType`,
  `RecordType`, `ListType`, `HealthcareEntityType` and `FunctionType`.
- `medi.env` – `TypeEnv`, a scoped table of name-to-type bindings.
- `medi.type_checker` – `TypeChecker.check_expr` infers the type of an
  expression.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Tokenising:

```python
from medi.lexer import token_kinds

print(token_kinds("patient let observation foo123"))
# [TokenKind.PATIENT, TokenKind.LET, TokenKind.OBSERVATION, TokenKind.IDENTIFIER]
```

Parsing. Every parse function returns a pair: the result and the text that
was left unconsumed.

```python
from medi.parser import parse_expression, parse_program

expr, rest = parse_expression('fhir_query("Patient", age > 65)')

statements, rest = parse_program("""
    let a = 1;
    let b = 2;
    a = a + b;
    if (a > b) { let c = 3; } else { let c = 4; }
""")
print(len(statements))  # 4
```

`parse_expression`, `parse_statement` and `parse_block` raise `ParseError`
when the input does not start with what they expect. `parse_program` stops
at the first statement it cannot parse and returns what it has so far with
the remaining text; it raises `ParseError` only for a fatal error such as a
malformed `match` arm.

Calls to `fhir_query`, `kaplan_meier`, `regulate` and `report` are parsed as
`HealthcareQuery` nodes; other calls become `CallExpression` nodes.

Type checking an expression:

```python
from medi.env import TypeEnv
from medi.parser import parse_expression
from medi.type_checker import TypeChecker
from medi.types import PrimitiveType

env = TypeEnv()
env.insert("x", PrimitiveType.INT)
checker = TypeChecker(env)
expr, _ = parse_expression("x * 2.5")
print(checker.check_expr(expr))  # PrimitiveType.FLOAT
```

Expressions that cannot be typed (unbound names, mismatched call arguments,
member access on a non-struct) give `PrimitiveType.UNKNOWN`. Nested scopes
come from `TypeEnv.child()`: lookups that miss in the child fall through to
its parent.

## What this package does not do

It is a front end only. There is no interpreter or code generator, so Medi
programs are parsed and their expressions typed but never run; statements
are not type checked, only expressions. There is no command-line tool.