import pytest

from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol


def test_unbound_name_is_nil():
    assert Environment().get("missing") is Nil


def test_lookup_walks_outward():
    root = Environment()
    root.define("x", 1)
    child = Environment(root)
    grandchild = Environment(child)
    assert grandchild.get("x") == 1
    assert grandchild.find("x") is root


def test_define_only_touches_current_frame():
    root = Environment()
    root.define("x", 1)
    child = Environment(root)
    child.define("x", 2)
    assert child.get("x") == 2
    assert root.get("x") == 1


def test_symbol_and_str_keys_are_interchangeable():
    env = Environment()
    env.define(Symbol("y"), 5)
    assert env.get("y") == 5
    assert Symbol("y") in env


def test_define_rejects_non_symbols():
    with pytest.raises(LispTypeError):
        Environment().define(3, 1)


def test_child_from_binds_positionally():
    root = Environment()
    root.define("z", 9)
    child = root.child_from(["x", "y"], [1, 2])
    assert child.outer is root
    assert (child.get("x"), child.get("y"), child.get("z")) == (1, 2, 9)
    assert root.get("x") is Nil


def test_child_from_length_mismatch():
    with pytest.raises(LispArityError):
        Environment().child_from(["x"], [])
    with pytest.raises(LispArityError):
        Environment().child_from([], [1])


def test_repr_shows_chain():
    root = Environment()
    root.define("a", 1)
    child = Environment(root)
    child.define("b", 2)
    assert repr(child) == "<Environment chain: {b: 2} -> {a: 1}>"
    assert str(child) == "{b: 2} -> ..."
