from medi.env import TypeEnv
from medi.types import ListType, PrimitiveType


def test_type_env_insert_and_get():
    env = TypeEnv()
    env.insert("x", PrimitiveType.INT)
    assert env.get("x") is PrimitiveType.INT
    assert env.get("y") is None


def test_child_sees_parent():
    env = TypeEnv()
    env.insert("x", PrimitiveType.INT)
    inner = env.child()
    assert inner.get("x") is PrimitiveType.INT
    assert inner.parent is env


def test_child_shadows_parent():
    env = TypeEnv()
    env.insert("x", PrimitiveType.INT)
    inner = env.child()
    inner.insert("x", PrimitiveType.STRING)
    assert inner.get("x") is PrimitiveType.STRING
    assert env.get("x") is PrimitiveType.INT


def test_child_bindings_do_not_leak():
    env = TypeEnv()
    inner = env.child()
    inner.insert("y", ListType(PrimitiveType.BOOL))
    assert env.get("y") is None
    assert "y" in inner
    assert "y" not in env


def test_insert_overwrites():
    env = TypeEnv()
    env.insert("x", PrimitiveType.INT)
    env.insert("x", PrimitiveType.FLOAT)
    assert env.get("x") is PrimitiveType.FLOAT