"""Registry of special forms for the minilisp evaluator.

Special forms are primitives that control the evaluation of their own
arguments. They are installed in the global environment next to the strict
builtins, so the evaluator applies them through the same mechanism.
"""

from minilisp.evaluation.special_forms.quote_forms import quote_form, list_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form, def_form
from minilisp.evaluation.special_forms.set_form import set_form
from minilisp.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "list": list_form,
    "if": if_form,
    "lambda": lambda_form,
    "def": def_form,
    "set!": set_form,
    "let": let_form,
}
