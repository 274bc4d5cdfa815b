from minilisp import SExpression, LispValue
from minilisp.evaluation.arguments import argument, list_value
from minilisp.types.environment import Environment


def quote_form(raw: list[SExpression], env: Environment) -> LispValue:
    """(quote x) -> x, unevaluated."""
    return argument(raw, 1)


def list_form(raw: list[SExpression], env: Environment) -> LispValue:
    """(list a b ...) -> a new list of the unevaluated arguments; (list) is ()."""
    return list_value(raw[1:])
