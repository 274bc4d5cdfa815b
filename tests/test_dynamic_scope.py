"""Lambdas capture nothing: free names resolve against the caller's chain."""
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import parse
from minilisp.types import Lambda, Nil, Symbol


def test_free_name_resolves_at_each_call_site(interp):
    interp.eval("(def show () y)")
    assert interp.eval("(let ((y 1)) (show))") == 1
    assert interp.eval("(let ((y 2)) (show))") == 2


def test_call_site_binding_wins_over_definition_site(interp):
    interp.eval("(set! y 5)")
    interp.eval("(def show () y)")
    assert interp.eval("(show)") == 5
    assert interp.eval("(let ((y 7)) (show))") == 7


def test_callee_sees_caller_parameters(interp):
    interp.eval("(def inner () n)")
    interp.eval("(def outer (n) (inner))")
    assert interp.eval("(outer 42)") == 42
    assert interp.eval("(inner)") is Nil


def test_same_lambda_value_in_nested_lets(env):
    fn = Lambda([], [Symbol("*"), Symbol("k"), 2])
    env.define("twice-k", fn)
    assert evaluate(parse("(let ((k 3)) (twice-k))"), env) == 6
    assert evaluate(parse("(let ((k 3)) (let ((k 10)) (twice-k)))"), env) == 20


def test_returned_lambda_does_not_close_over_parameters(interp):
    interp.eval("(def make-adder (n) (lambda (x) (+ x n)))")
    adder = interp.eval("(make-adder 5)")
    assert isinstance(adder, Lambda)
    interp.eval("(set! n 100)")
    interp.env.define("add", adder)
    assert interp.eval("(add 1)") == 101
