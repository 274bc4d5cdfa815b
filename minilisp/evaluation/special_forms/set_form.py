from minilisp import SExpression, LispValue
from minilisp.evaluation.arguments import argument, evaluated, expect_symbol
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil


def set_form(raw: list[SExpression], env: Environment) -> LispValue:
    """(set! var expr) stores into the current frame only; outer frames are never searched."""
    var_sym = expect_symbol(argument(raw, 1), "set!")
    env.define(var_sym, evaluated(raw, 2, env))
    return Nil
