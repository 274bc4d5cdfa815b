from minilisp import SExpression, LispValue
from minilisp.evaluation.arguments import argument
from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.truth import is_truthy
from minilisp.types.environment import Environment


def if_form(raw: list[SExpression], env: Environment) -> LispValue:
    # The condition form itself is tested, not its value: only a literal ()
    # selects the else branch.
    cond = argument(raw, 1)
    if is_truthy(cond):
        return evaluate(argument(raw, 2), env)
    return evaluate(argument(raw, 3), env)
