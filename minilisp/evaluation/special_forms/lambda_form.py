from minilisp import SExpression, LispValue
from minilisp.evaluation.arguments import argument, expect_sequence, expect_symbol
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda


def make_lambda(params: SExpression, body: SExpression, who: str = "lambda") -> Lambda:
    formals = [
        expect_symbol(p, f"{who} parameter list").name
        for p in expect_sequence(params, who)
    ]
    return Lambda(formals, body)


def lambda_form(raw: list[SExpression], env: Environment) -> LispValue:
    """(lambda (params...) body)

    Nothing is captured: the body is resolved against the caller's
    environment each time the lambda is applied.
    """
    return make_lambda(argument(raw, 1), argument(raw, 2))


def def_form(raw: list[SExpression], env: Environment) -> LispValue:
    """(def name (params...) body) binds a lambda in the calling environment."""
    name = expect_symbol(argument(raw, 1), "def")
    fn = make_lambda(argument(raw, 2), argument(raw, 3), "def")
    env.define(name, fn)
    return fn
