"""Core evaluator for minilisp.

Dispatches on the value variant: atoms evaluate to themselves, symbols are
looked up, and lists are applications. A lambda body runs in a child of the
*calling* environment with its parameters bound to the unevaluated argument
forms, so free names resolve dynamically. Primitives receive the raw form.
"""

from __future__ import annotations

import logging

from minilisp import SExpression, LispValue
from minilisp.errors import LispNotApplicableError, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.nil import NilType
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case NilType() | Lambda() | Primitive():
            return expr
        case bool():
            raise LispTypeError(f"Not a Lisp value: {expr!r}")
        case int():
            return expr
        case Symbol():
            return env.get(expr)
        case list():
            return apply(expr, env)
        case _:
            raise LispTypeError(f"Not a Lisp value: {expr!r}")


def apply(form: list[SExpression], env: Environment) -> LispValue:
    """Evaluate an application form in `env`."""
    if not form:
        raise LispNotApplicableError("Cannot apply an empty list")

    head = evaluate(form[0], env)
    match head:
        case Lambda():
            return apply_lambda(head, form[1:], env)
        case Primitive():
            return head(form, env)
        case _:
            raise LispNotApplicableError(f"tried to apply a non-lambda value: {head!r}")


def apply_lambda(
    fn: Lambda, args: list[SExpression], caller_env: Environment
) -> LispValue:
    """Bind `fn`'s formals to the raw `args` beneath `caller_env` and run the body."""
    logger.debug("Applying %s to %r", fn, args)
    local_env = caller_env.child_from(fn.formals, args)
    return evaluate(fn.body, local_env)
