import pytest

from minilisp.errors import LispTypeError
from minilisp.printer import render
from minilisp.types import Lambda, Nil, Primitive, Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "()"),
        (42, "42"),
        (-3, "-3"),
        (Symbol("foo"), "foo"),
        ([Symbol("a"), 1], "(a 1 )"),
        ([1, [2], Nil], "(1 (2 ) () )"),
        ([], "()"),
        (Lambda(["x"], Symbol("x")), "<lambda>"),
        (Primitive("car", lambda raw, env: Nil), "<intrinsic>"),
    ],
)
def test_render(value, expected):
    assert render(value) == expected


def test_render_rejects_foreign_values():
    with pytest.raises(LispTypeError):
        render("a python string")
    with pytest.raises(LispTypeError):
        render(True)


def test_lambda_str_uses_lisp_syntax():
    fn = Lambda(["x", "y"], [Symbol("+"), Symbol("x"), Symbol("y")])
    assert str(fn) == "(lambda (x y) (+ x y ))"
    assert repr(fn) == "<Lambda (lambda (x y) (+ x y ))>"
