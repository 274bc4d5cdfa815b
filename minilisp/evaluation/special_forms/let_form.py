from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError
from minilisp.evaluation.arguments import argument, expect_list, expect_sequence, expect_symbol
from minilisp.evaluation.evaluator import evaluate
from minilisp.types.environment import Environment


def let_form(raw: list[SExpression], env: Environment) -> LispValue:
    """(let ((name expr) ...) body)

    Every expr is evaluated in the outer environment, so bindings cannot see
    each other. The body runs in one child frame holding all of them.
    """
    names: list[str] = []
    values: list[LispValue] = []
    for binding in expect_sequence(argument(raw, 1), "let"):
        pair = expect_list(binding, "let binding")
        if len(pair) < 2:
            raise LispArityError(f"let binding needs a name and a value: {pair!r}")
        names.append(expect_symbol(pair[0], "let binding").name)
        values.append(evaluate(pair[1], env))
    body = argument(raw, 2)
    return evaluate(body, env.child_from(names, values))
