"""Positional argument access and variant checks shared by the primitives.

Positions are 1-based because index 0 of a raw form is the operator itself.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.evaluation.evaluator import evaluate
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol


def operator_name(raw: list[SExpression]) -> str:
    head = raw[0]
    return head.name if isinstance(head, Symbol) else repr(head)


def argument(raw: list[SExpression], index: int) -> SExpression:
    """Return the unevaluated argument at `index`."""
    if index >= len(raw):
        raise LispArityError(
            f"{operator_name(raw)} requires at least {index} argument(s), got {len(raw) - 1}"
        )
    return raw[index]


def evaluated(raw: list[SExpression], index: int, env: Environment) -> LispValue:
    return evaluate(argument(raw, index), env)


def expect_int(value: LispValue, who: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise LispTypeError(f"{who} expected a number, got {value!r}")
    return value


def expect_list(value: LispValue, who: str) -> list:
    if not isinstance(value, list):
        raise LispTypeError(f"{who} expected a list, got {value!r}")
    return value


def expect_symbol(value: LispValue, who: str) -> Symbol:
    if not isinstance(value, Symbol):
        raise LispTypeError(f"{who} expected a symbol, got {value!r}")
    return value


def expect_sequence(value: LispValue, who: str) -> list:
    """Like expect_list, but `()` (Nil) is accepted as the empty list."""
    if value is Nil:
        return []
    return expect_list(value, who)


def list_value(items: list) -> LispValue:
    """A list result; an empty one is Nil, the only empty list."""
    return list(items) if items else Nil
