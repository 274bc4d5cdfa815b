"""Built-in functions for the minilisp runtime environment.

This module defines arithmetic, comparison, boolean, list, equality, type
predicate and printing primitives, and `register`, which installs them
together with the special forms into an environment as Primitive values.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable

from minilisp import SExpression, LispValue
from minilisp.errors import LispTypeError, LispZeroDivisionError
from minilisp.evaluation.arguments import (
    argument,
    evaluated,
    expect_int,
    expect_list,
    expect_sequence,
    list_value,
    operator_name,
)
from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.evaluation.truth import inverted, is_truthy, normal
from minilisp.printer import render
from minilisp.runtime_context import get_output
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.nil import Nil, NilType
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


# -------------------------------
# Arithmetic
# -------------------------------
def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise LispZeroDivisionError("Division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def math_op(op: Callable[[int, int], int]):
    """Left fold over the evaluated arguments, starting from the first one."""

    def fold(raw: list[SExpression], env: Environment) -> LispValue:
        who = operator_name(raw)
        total = expect_int(evaluated(raw, 1, env), who)
        for expr in raw[2:]:
            total = op(total, expect_int(evaluate(expr, env), who))
        return total

    return fold


# -------------------------------
# Comparison and boolean logic
# -------------------------------
def bool_op(op: Callable[[bool, bool], bool]):
    def combine(raw: list[SExpression], env: Environment) -> LispValue:
        a = is_truthy(evaluated(raw, 1, env))
        b = is_truthy(evaluated(raw, 2, env))
        return inverted(op(a, b))

    return combine


def comp_op(op: Callable[[int, int], bool]):
    def compare(raw: list[SExpression], env: Environment) -> LispValue:
        who = operator_name(raw)
        a = expect_int(evaluated(raw, 1, env), who)
        b = expect_int(evaluated(raw, 2, env), who)
        return inverted(op(a, b))

    return compare


# -------------------------------
# List operations
# -------------------------------
def _list_operand(raw: list[SExpression], env: Environment, who: str) -> list:
    # A literal list is taken as written; anything else must evaluate to one.
    arg = argument(raw, 1)
    if not isinstance(arg, list):
        arg = evaluate(arg, env)
    items = expect_list(arg, who)
    if not items:
        raise LispTypeError(f"{who} of an empty list")
    return items


def car(raw: list[SExpression], env: Environment) -> LispValue:
    return _list_operand(raw, env, "car")[0]


def cdr(raw: list[SExpression], env: Environment) -> LispValue:
    return list_value(_list_operand(raw, env, "cdr")[1:])


def append(raw: list[SExpression], env: Environment) -> LispValue:
    """(append lst x) -> a new list; `lst` itself is never mutated."""
    items = expect_sequence(evaluated(raw, 1, env), "append")
    return [*items, argument(raw, 2)]


def length(raw: list[SExpression], env: Environment) -> LispValue:
    match evaluated(raw, 1, env):
        case list() as items:
            return len(items)
        case NilType():
            return 0
        case _:
            return 1


# -------------------------------
# Output
# -------------------------------
def print_builtin(raw: list[SExpression], env: Environment) -> LispValue:
    """Write every element of the form, operator included, unevaluated."""
    out = get_output()
    for val in raw:
        out.write(render(val))
    return Nil


# -------------------------------
# Equality
# -------------------------------
def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity-style equality. Lists have no identity and are never eq?."""
    match a:
        case NilType():
            return b is Nil
        case Symbol():
            return isinstance(b, Symbol) and a == b
        case int() if not isinstance(a, bool):
            return isinstance(b, int) and not isinstance(b, bool) and a == b
        case _:
            return False


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality over lists, integers, symbols and Nil."""
    match a:
        case list():
            if not isinstance(b, list) or len(a) != len(b):
                return False
            return all(is_equal(x, y) for x, y in zip(a, b))
        case _:
            return is_eq(a, b)


def eq(raw: list[SExpression], env: Environment) -> LispValue:
    return normal(is_eq(evaluated(raw, 1, env), evaluated(raw, 2, env)))


def equal(raw: list[SExpression], env: Environment) -> LispValue:
    return normal(is_equal(evaluated(raw, 1, env), evaluated(raw, 2, env)))


# -------------------------------
# Type predicates
# -------------------------------
def _is_number(v: LispValue) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def predicate(test: Callable[[LispValue], bool]):
    def check(raw: list[SExpression], env: Environment) -> LispValue:
        return normal(test(evaluated(raw, 1, env)))

    return check


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "+": math_op(operator.add),
    "-": math_op(operator.sub),
    "*": math_op(operator.mul),
    "/": math_op(truncating_div),
    "car": car,
    "cdr": cdr,
    "and": bool_op(lambda a, b: a and b),
    "or": bool_op(lambda a, b: a or b),
    ">": comp_op(operator.gt),
    ">=": comp_op(operator.ge),
    "<": comp_op(operator.lt),
    "<=": comp_op(operator.le),
    "append": append,
    "length": length,
    "print": print_builtin,
    "eq?": eq,
    "equal?": equal,
    "nil?": predicate(lambda v: v is Nil),
    "symbol?": predicate(lambda v: isinstance(v, Symbol)),
    "num?": predicate(_is_number),
    "list?": predicate(lambda v: isinstance(v, list)),
    "lambda?": predicate(lambda v: isinstance(v, Lambda)),
    "intrinsic?": predicate(lambda v: isinstance(v, Primitive)),
}


def register(env: Environment) -> None:
    """Install every special form and builtin into `env` as a Primitive."""
    table = {**SPECIAL_FORMS, **BUILTINS}
    env.update({name: Primitive(name, fn) for name, fn in table.items()})
    logger.debug("Registered %d primitives", len(table))
