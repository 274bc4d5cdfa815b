"""Session facade: one global environment plus parse/evaluate/render.

The interactive read loop lives outside this package; it only needs
`Interpreter.eval_to_string` (or `parse`, `evaluate` and `render`).
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from minilisp import LispValue
from minilisp.builtin.env_builtin import register
from minilisp.config import get_prelude_path
from minilisp.errors import LispError
from minilisp.evaluation.evaluator import evaluate
from minilisp.printer import render
from minilisp.reader.parser import parse_all
from minilisp.runtime_context import redirect_output
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


def make_global_env() -> Environment:
    """A fresh top-level environment holding every primitive."""
    env = Environment()
    register(env)
    return env


class Interpreter:
    """
    Keeps a global environment alive across evaluations so that `def` and
    `set!` bindings persist between calls.
    """

    def __init__(self, prelude: str | None = None, output: Optional[TextIO] = None):
        self.env = make_global_env()
        self.output = output

        if prelude == "auto":
            path = get_prelude_path()
            prelude = path.read_text() if path is not None else None
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of Lisp code as prelude."""
        self.eval(code)
        logger.debug("Prelude loaded, %d global bindings", len(self.env.vars))

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last result, or Nil if there is none."""
        result: LispValue = Nil
        for expr in parse_all(code):
            result = self._evaluate(expr)
        return result

    def eval_to_string(self, code: str) -> str:
        return render(self.eval(code))

    def _evaluate(self, expr) -> LispValue:
        try:
            if self.output is None:
                return evaluate(expr, self.env)
            with redirect_output(self.output):
                return evaluate(expr, self.env)
        except LispError as e:
            logger.error("Evaluation of %s failed: %s", render(expr), e)
            raise
