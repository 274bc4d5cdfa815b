# Values are plain ints and lists plus the types in minilisp.types.
# SExpression names unevaluated forms, LispValue evaluated ones.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Signature shared by every primitive: (raw form, calling environment) -> value
PrimitiveFn = Callable[..., LispValue]

from minilisp.types.nil import Nil  # noqa: E402
from minilisp.types.symbol import Symbol  # noqa: E402
from minilisp.types.environment import Environment  # noqa: E402
from minilisp.reader.parser import tokenize, parse, parse_all  # noqa: E402
from minilisp.evaluation.evaluator import evaluate  # noqa: E402
from minilisp.printer import render  # noqa: E402
from minilisp.interpreter import Interpreter, make_global_env  # noqa: E402

__all__ = (
    "LispValue",
    "SExpression",
    "PrimitiveFn",
    "Nil",
    "Symbol",
    "Environment",
    "tokenize",
    "parse",
    "parse_all",
    "evaluate",
    "render",
    "Interpreter",
    "make_global_env",
)
